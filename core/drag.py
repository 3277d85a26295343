# core/drag.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Any, Callable, List, Optional

from core.log import Log
from core.measure import MeasurementStore
from core.move import move
from core.offsets import Offsets, compute_offsets
from core.order import current_position, from_order, positions_equal, to_order
from core.range_map import compute_range_map
from core.resolve import resolve_position
from core.schema import Schema
from core.types import Direction, DragState, EntryId, Position, RangeMap, SortOrder

__all__ = ["DragError", "DragSession", "finger_content_y"]


class DragError(RuntimeError):
    """Misuse of a DragSession (overlapping drags, unknown ids)."""


def finger_content_y(
        finger_screen_y: float,
        scroll_offset: float,
        list_screen_y: float,
        content_y: float = 0.0,
) -> float:
    """
    Convert a pointer's screen Y into list content coordinates.

    • scroll_offset  – how far the scrolled window is scrolled
    • list_screen_y  – screen Y of the scrolled window's top edge
    • content_y      – Y where the list starts inside the scrolled content
    """
    return scroll_offset - list_screen_y + finger_screen_y - content_y


class DragSession:
    """
    Drives one list through drags: committed order, pending order and the
    geometry derived from them.

    The committed order mirrors the caller's data. While a drag is active
    only the pending order changes; drag_end() turns it back into data and
    hands that to on_change. Pending orders are replaced wholesale, never
    edited in place, so readers always see a complete order.
    """

    def __init__(
            self,
            data: List[Any],
            schema: Optional[Schema] = None,
            measurements: Optional[MeasurementStore] = None,
            on_change: Optional[Callable[[List[Any]], None]] = None,
            on_drag_start: Optional[Callable[[EntryId, bool], None]] = None,
            on_drag_end: Optional[Callable[[], None]] = None,
    ):
        self.schema = schema if schema is not None else Schema()
        self.measurements = measurements if measurements is not None else MeasurementStore()
        self.on_change = on_change
        self.on_drag_start = on_drag_start
        self.on_drag_end = on_drag_end

        self._state = DragState()
        self._direction: Optional[Direction] = None
        self._prev_delta: Optional[float] = None

        # where the dragged element is drawn
        self._orig_content_offset: Optional[float] = None
        self._orig_scroll_offset: Optional[float] = None
        self._drag_screen_offset: float = 0.0

        # derived geometry cache: (pending order, measurements version, root_only)
        self._cache_key = None
        self._offsets: Optional[Offsets] = None
        self._range_map: Optional[RangeMap] = None

        self._data: List[Any] = []
        self._committed: SortOrder = []
        self._pending: SortOrder = []
        self.set_data(data)

    # ------------------------------------------------------------------ #
    # data
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> List[Any]:
        return self._data

    @property
    def committed_order(self) -> SortOrder:
        return self._committed

    @property
    def pending_order(self) -> SortOrder:
        return self._pending

    def set_data(self, data: List[Any]) -> None:
        """
        Adopt new caller data: recompute both orders and prune measurements.

        If the element being dragged disappeared, the drag is abandoned.
        """
        self._data = list(data)
        self._committed = to_order(self._data, self.schema)
        self._pending = self._committed
        self.measurements.prune(self._data, self.schema)

        if self._state.is_dragging and self._dragged_position() is None:
            Log.debug(f"Dragged id {self._state.id!r} removed from data; drag abandoned", 1)
            self._reset_drag()
            if self.on_drag_end:
                self.on_drag_end()

    # ------------------------------------------------------------------ #
    # derived geometry
    # ------------------------------------------------------------------ #

    def _refresh_geometry(self) -> None:
        root_only = bool(self._state.is_container)
        key = (self._pending, self.measurements.version, root_only)
        if (self._cache_key is not None
                and self._cache_key[0] is key[0]
                and self._cache_key[1:] == key[1:]):
            return
        snap = self.measurements.snapshot()
        self._offsets = compute_offsets(self._pending, snap)
        self._range_map = compute_range_map(snap, self._pending, self._offsets, root_only)
        self._cache_key = key

    def offsets(self) -> Optional[Offsets]:
        """Offsets of the pending order, or None until fully measured."""
        self._refresh_geometry()
        return self._offsets

    def range_map(self) -> Optional[RangeMap]:
        self._refresh_geometry()
        return self._range_map

    def position_of(self, entry_id: EntryId, is_container: bool = False) -> Optional[Position]:
        return current_position(entry_id, is_container, self._pending)

    # ------------------------------------------------------------------ #
    # drag state
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @property
    def last_direction(self) -> Optional[Direction]:
        """Direction of the most recent pointer movement, None if unknown."""
        return self._direction

    def _dragged_position(self) -> Optional[Position]:
        return current_position(self._state.id, bool(self._state.is_container), self._pending)

    def _reset_drag(self) -> None:
        self._state = DragState()
        self._direction = None
        self._prev_delta = None
        self._orig_content_offset = None
        self._orig_scroll_offset = None
        self._drag_screen_offset = 0.0

    def drag_translate_y(self, scroll_offset: float = 0.0) -> float:
        """
        Content Y at which to draw the dragged element: where it started,
        plus how far the pointer moved, plus how far the list scrolled since.
        """
        if not self._state.is_dragging:
            return 0.0
        return (self._drag_screen_offset
                + (self._orig_content_offset or 0.0)
                + (scroll_offset - (self._orig_scroll_offset or 0.0)))

    # ------------------------------------------------------------------ #
    # gesture events
    # ------------------------------------------------------------------ #

    def drag_start(
            self,
            entry_id: EntryId,
            is_container: bool = False,
            item_content_y: float = 0.0,
            scroll_offset: float = 0.0,
    ) -> Position:
        """
        Begin dragging `entry_id`. Returns its current position.

        item_content_y is the element's top edge in content coordinates and
        scroll_offset the scroll position at press time; both only feed
        drag_translate_y().
        """
        if self._state.is_dragging:
            raise DragError(f"Cannot start dragging {entry_id!r}: {self._state.id!r} is being dragged")

        position = current_position(entry_id, is_container, self._pending)
        if position is None:
            kind = "container" if is_container else "item"
            raise DragError(f"Unknown {kind} id {entry_id!r}")

        self._reset_drag()
        self._state = DragState(is_dragging=True, is_container=is_container, id=entry_id)
        self._orig_content_offset = item_content_y
        self._orig_scroll_offset = scroll_offset
        Log.debug(f"Drag start {entry_id!r} at {position}", 2)

        if self.on_drag_start:
            self.on_drag_start(entry_id, is_container)
        return position

    def drag(self, content_y: float, delta_y: Optional[float] = None) -> Optional[Position]:
        """
        One pointer sample at content Y. Returns the dragged element's
        position afterwards, or None if no drag is active.

        delta_y is the pointer's screen movement since drag_start; it places
        the floating element and tells the direction of the gesture. Without
        it, successive content Y values are used for the direction.

        While geometry is unavailable the sample leaves the order unchanged.
        """
        if not self._state.is_dragging:
            Log.debug("Pointer sample with no active drag ignored", 3)
            return None

        if delta_y is not None:
            self._drag_screen_offset = delta_y
        self._track_direction(content_y if delta_y is None else delta_y)

        position = self._dragged_position()
        if position is None:
            # Only reachable if data changed under us without set_data().
            assert False, f"dragged id {self._state.id!r} not in pending order"
            return None

        range_map = self.range_map()
        if range_map is None:
            return position

        new_position = resolve_position(position, content_y, range_map)
        if positions_equal(position, new_position):
            return position

        self._pending = move(self._pending, position, new_position)
        Log.debug(f"Drag {self._state.id!r}: {position} -> {new_position}", 3)
        return new_position

    def _track_direction(self, value: float) -> None:
        if self._prev_delta is not None:
            if self._prev_delta > value:
                self._direction = Direction.UP
            elif self._prev_delta < value:
                self._direction = Direction.DOWN
        self._prev_delta = value

    def drag_end(self) -> Optional[List[Any]]:
        """
        Finish the drag and commit the pending order.

        Returns the new data (also passed to on_change), or None when the
        order did not change or no drag was active.
        """
        if not self._state.is_dragging:
            return None

        dragged = self._state.id
        self._reset_drag()

        new_data = None
        if self._pending != self._committed:
            new_data = from_order(self._pending, self._data, self.schema)
            self._data = new_data
            self._committed = self._pending
            Log.debug(f"Drag end {dragged!r}: order committed", 1)
            if self.on_change:
                self.on_change(new_data)
        else:
            Log.debug(f"Drag end {dragged!r}: order unchanged", 2)

        if self.on_drag_end:
            self.on_drag_end()
        return new_data

    def cancel(self) -> None:
        """Abandon the drag, dropping the pending order."""
        if not self._state.is_dragging:
            return
        Log.debug(f"Drag {self._state.id!r} cancelled", 1)
        self._pending = self._committed
        self._reset_drag()
        if self.on_drag_end:
            self.on_drag_end()
