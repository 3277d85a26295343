'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx

from core.types import ContainerEntry
from ui.constants import (
    PADDING,
    CHILD_INDENT_W,
    CONTAINER_RADIUS,
    DRAG_SHADOW,
    DEFAULT_BG_COLOR,
    ITEM_COLOR,
    ITEM_TEXT_COLOR,
    CONTAINER_COLOR,
    CONTAINER_TEXT_COLOR,
    DRAG_OUTLINE_COLOR,
    SHADOW_COLOR,
)
from ui.layout import item_label, container_label

def paint_background(view, gc: wx.GraphicsContext, client_h: int) -> None:
    """Fill the full client area with the background color."""
    w = view.GetClientSize().width

    bg = view.GetBackgroundColour()
    if not bg.IsOk():
        bg = DEFAULT_BG_COLOR

    gc.SetBrush(wx.Brush(bg))
    gc.SetPen(wx.Pen(bg))
    gc.DrawRectangle(0, 0, w, client_h)

def _draw_item(view, gc: wx.GraphicsContext, x: float, y: float, w: float, h: float,
               text: str, dragged: bool = False) -> None:
    if dragged:
        gc.SetBrush(wx.Brush(SHADOW_COLOR))
        gc.SetPen(wx.TRANSPARENT_PEN)
        gc.DrawRectangle(x + DRAG_SHADOW, y + DRAG_SHADOW, w, h)

    gc.SetBrush(wx.Brush(ITEM_COLOR))
    gc.SetPen(wx.Pen(DRAG_OUTLINE_COLOR if dragged else ITEM_COLOR, 2 if dragged else 1))
    gc.DrawRectangle(x, y, w, h)

    gc.SetFont(view.GetFont(), ITEM_TEXT_COLOR)
    _tw, th = gc.GetTextExtent(text)[:2]
    gc.DrawText(text, x + PADDING, y + (h - th) / 2)

def _draw_container_chrome(view, gc: wx.GraphicsContext, x: float, y: float, w: float,
                           height: float, start_y: float, title: str,
                           dragged: bool = False) -> None:
    """Rounded container box; children are painted on top of it afterwards."""
    if dragged:
        gc.SetBrush(wx.Brush(SHADOW_COLOR))
        gc.SetPen(wx.TRANSPARENT_PEN)
        gc.DrawRoundedRectangle(x + DRAG_SHADOW, y + DRAG_SHADOW, w, height, CONTAINER_RADIUS)

    gc.SetBrush(wx.Brush(CONTAINER_COLOR))
    gc.SetPen(wx.Pen(DRAG_OUTLINE_COLOR if dragged else CONTAINER_COLOR, 2 if dragged else 1))
    gc.DrawRoundedRectangle(x, y, w, height, CONTAINER_RADIUS)

    gc.SetFont(view.GetFont(), CONTAINER_TEXT_COLOR)
    _tw, th = gc.GetTextExtent(title)[:2]
    gc.DrawText(title, x + PADDING, y + max(0, (start_y - th) / 2))

def _paint_container(view, gc, entry: ContainerEntry, dy: float, w: float,
                     dragged: bool = False, skip_id=None) -> None:
    offsets = view.session.offsets()
    off = offsets.container(entry.id)
    meas = view.session.measurements.container(entry.id)
    container = view.containers_by_id.get(entry.id, entry.id)

    _draw_container_chrome(view, gc, 0, off.y + dy, w, off.height, meas.start_y,
                           container_label(container), dragged=dragged)

    for child_id in entry.items:
        if child_id == skip_id:
            continue
        c_off = offsets.item(child_id)
        child = view.items_by_id.get(child_id, child_id)
        _draw_item(view, gc, CHILD_INDENT_W, c_off.y + dy, w - 2 * CHILD_INDENT_W,
                   c_off.height, item_label(child))

def paint_entries(view, gc: wx.GraphicsContext, scroll_y: int, client_h: int) -> None:
    """
    Draw the pending order at its offsets, shifted by the scroll position.
    The dragged element's slot stays empty; it is drawn last, floating at
    the pointer.
    """
    session = view.session
    offsets = session.offsets()
    if offsets is None:
        return

    w = view.GetClientSize().width
    state = session.state
    dragged_id = state.id if state.is_dragging else None
    dy = -scroll_y
    floating = None

    for entry in session.pending_order:
        if isinstance(entry, ContainerEntry):
            if state.is_container and entry.id == dragged_id:
                floating = entry
                continue
            off = offsets.container(entry.id)
            if off.y + dy > client_h or off.y + off.height + dy < 0:
                continue
            _paint_container(view, gc, entry, dy, w, skip_id=dragged_id)
            continue

        if entry == dragged_id and not state.is_container:
            continue
        off = offsets.item(entry)
        if off.y + dy > client_h or off.y + off.height + dy < 0:
            continue
        _draw_item(view, gc, 0, off.y + dy, w, off.height, item_label(view.items_by_id.get(entry, entry)))

    if dragged_id is None:
        return

    # floating element
    float_y = session.drag_translate_y(scroll_y)
    if floating is not None:
        off = offsets.container(floating.id)
        _paint_container(view, gc, floating, float_y - off.y + dy, w, dragged=True)
    else:
        off = offsets.item(dragged_id)
        indent = CHILD_INDENT_W if session.position_of(dragged_id).is_child else 0
        _draw_item(view, gc, indent, float_y + dy, w - 2 * indent, off.height,
                   item_label(view.items_by_id.get(dragged_id, dragged_id)), dragged=True)
