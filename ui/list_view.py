# ui/list_view.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx
from typing import Any, Callable, List, Optional

from core.log import Log
from core.drag import DragSession
from core.offsets import hit_test
from core.order import separate
from core.schema import Schema
from ui.constants import DEFAULT_BG_COLOR, TIMER_MS
from ui.layout import measure_all
from ui.paint import paint_background, paint_entries
from ui.scroll import auto_scroll_step, content_height, scroll_by, scroll_y_px

# =============================================================================
class DragListView(wx.ScrolledWindow):
    """
    Scrolled list of items and containers; press and drag any element to
    reorder it. All ordering decisions live in the DragSession; this window
    measures, paints and forwards pointer samples.
    """

    def __init__(
            self,
            parent: wx.Window,
            data: List[Any],
            schema: Schema,
            on_change: Optional[Callable[[List[Any]], None]] = None,
            on_drag_start: Optional[Callable[[Any, bool], None]] = None,
            on_drag_end: Optional[Callable[[], None]] = None,
    ):
        super().__init__(parent, style=wx.BORDER_SIMPLE | wx.WANTS_CHARS)

        self.session = DragSession(
            data,
            schema=schema,
            on_change=on_change,
            on_drag_start=self._on_session_drag_start,
            on_drag_end=self._on_session_drag_end,
        )
        self.on_drag_start = on_drag_start
        self.on_drag_end = on_drag_end
        self.items_by_id = {}
        self.containers_by_id = {}

        # pointer state for the active gesture
        self._press_y: Optional[int] = None
        self._last_y: int = 0
        self._scroll_timer = wx.Timer(self)

        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetDoubleBuffered(True)
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.SetScrollRate(0, 1)

        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_LEFT_UP, self._on_left_up)
        self.Bind(wx.EVT_MOTION, self._on_motion)
        self.Bind(wx.EVT_MOUSE_CAPTURE_LOST, self._on_capture_lost)
        self.Bind(wx.EVT_CHAR_HOOK, self._on_char)
        self.Bind(wx.EVT_TIMER, self._on_scroll_timer, self._scroll_timer)

        self._last_client_w = self.GetClientSize().width
        self.rebuild()

    def cleanup(self) -> None:
        """Stop timers and drop any active drag before destruction."""
        if self._scroll_timer.IsRunning():
            self._scroll_timer.Stop()
        self.session.cancel()
        if self.HasCapture():
            self.ReleaseMouse()

    # ------------------------------------------------------------------ #
    # data
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> List[Any]:
        return self.session.data

    def set_data(self, data: List[Any]) -> None:
        """Replace the displayed list (e.g. after an add or delete)."""
        self.session.set_data(data)
        self.rebuild()

    def rebuild(self) -> None:
        """Refresh lookup tables, re-measure everything and resize the canvas."""
        data = self.session.data
        self.containers_by_id, self.items_by_id = separate(data, self.session.schema)
        measure_all(self, data, self.session.schema, self.session.measurements)
        self.SetVirtualSize((-1, content_height(self)))
        self.Refresh(False)

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        ch = self.GetClientSize().height

        paint_background(self, gc, ch)
        paint_entries(self, gc, scroll_y_px(self), ch)

    def _on_size(self, evt: wx.SizeEvent):
        w = self.GetClientSize().width
        if w != self._last_client_w:
            # Text wraps differently at the new width.
            self._last_client_w = w
            self.rebuild()
        evt.Skip()

    # ------------------------------------------------------------------ #
    # mouse
    # ------------------------------------------------------------------ #

    def _on_left_down(self, evt: wx.MouseEvent):
        self.SetFocus()
        if self.session.is_dragging:
            return

        offsets = self.session.offsets()
        if offsets is None:
            Log.debug("Press ignored: list not fully measured", 2)
            return

        sy = scroll_y_px(self)
        hit = hit_test(self.session.pending_order, offsets, sy + evt.GetY())
        if hit is None:
            return

        entry_id, is_container = hit
        off = offsets.container(entry_id) if is_container else offsets.item(entry_id)
        self.session.drag_start(entry_id, is_container, item_content_y=off.y, scroll_offset=sy)
        self._press_y = evt.GetY()
        self._last_y = evt.GetY()
        if not self.HasCapture():
            self.CaptureMouse()
        self._scroll_timer.Start(TIMER_MS)

    def _on_motion(self, evt: wx.MouseEvent):
        if not (self.session.is_dragging and evt.LeftIsDown()):
            evt.Skip()
            return
        self._last_y = evt.GetY()
        self._sample()

    def _on_left_up(self, _evt: wx.MouseEvent):
        if not self.session.is_dragging:
            return
        if self.session.drag_end() is not None:
            self.rebuild()

    def _on_capture_lost(self, _evt: wx.MouseCaptureLostEvent):
        self.session.cancel()

    def _on_char(self, evt: wx.KeyEvent):
        if evt.GetKeyCode() == wx.WXK_ESCAPE and self.session.is_dragging:
            self.session.cancel()
            return
        evt.Skip()

    # ------------------------------------------------------------------ #
    # drag plumbing
    # ------------------------------------------------------------------ #

    def _sample(self) -> None:
        """Feed the latest pointer position to the session and repaint."""
        if self._press_y is None:
            return
        self.session.drag(scroll_y_px(self) + self._last_y, delta_y=self._last_y - self._press_y)
        self.Refresh(False)

    def _on_scroll_timer(self, _evt: wx.TimerEvent):
        if not self.session.is_dragging:
            self._scroll_timer.Stop()
            return
        step = auto_scroll_step(
            self._last_y, self.GetClientSize().height, self.session.last_direction
        )
        if step and scroll_by(self, step):
            self._sample()

    def _on_session_drag_start(self, entry_id, is_container: bool) -> None:
        kind = "container" if is_container else "item"
        Log.debug(f"Dragging {kind} {entry_id!r}", 2)
        if self.on_drag_start:
            self.on_drag_start(entry_id, is_container)

    def _on_session_drag_end(self) -> None:
        self._press_y = None
        if self._scroll_timer.IsRunning():
            self._scroll_timer.Stop()
        if self.HasCapture():
            self.ReleaseMouse()
        self.Refresh(False)
        if self.on_drag_end:
            self.on_drag_end()
