# core/resolve.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from core.log import Log
from core.types import Edge, Position, RangeEntry, RangeMap

__all__ = ["find_range_index", "resolve_position"]


def find_range_index(position: Position, range_map: RangeMap) -> int:
    """Index of the range entry for `position`, or -1."""
    for i, rng in enumerate(range_map):
        if rng.root_index != position.root_index:
            continue
        if position.child_index is None or rng.child_index == position.child_index:
            return i
    return -1


def _insert_after(rng: RangeEntry) -> Position:
    """Slot just below a range entry found while scanning upward."""
    if rng.child_index is not None:
        return Position(rng.root_index, rng.child_index + 1)
    if rng.edge is Edge.TOP:
        return Position(rng.root_index, 0)
    # container BOTTOM or plain root entry
    return Position(rng.root_index + 1)


def resolve_position(position: Position, y: float, range_map: RangeMap) -> Position:
    """
    New position for the dragged element when the pointer is at content Y.

    Scans outward from the element's current slot: backward when the
    pointer is at or above its hit-test point, forward otherwise. The cost
    is proportional to the distance moved, not to the list length.

    Moving down, the dragged element still occupies its old slot in
    `range_map`, so the slot found is corrected for its removal:
    - child moving within its own container: child_index - 1
    - root element: root_index - 1
    - child leaving its container: no correction
    The result is therefore valid against the order with the element
    already removed, which is what move() expects.
    """
    idx = find_range_index(position, range_map)
    if idx < 0:
        assert False, f"{position} not in range map"
        Log.debug(f"resolve_position: {position} not in range map", 0)
        return position

    # Dragging up: work backwards from the current slot.
    if y <= range_map[idx].y:
        for i in range(idx - 1, -1, -1):
            if y > range_map[i].y:
                return _insert_after(range_map[i])
        return Position(0)

    # Dragging down: find the slot as if the element were not removed.
    without_remove = None
    for i in range(idx + 1, len(range_map)):
        rng = range_map[i]
        if y < rng.y:
            if rng.child_index is not None:
                without_remove = Position(rng.root_index, rng.child_index)
            elif rng.edge is Edge.BOTTOM:
                prev = range_map[i - 1].child_index
                # prev is None when the container has no children
                without_remove = Position(rng.root_index, 0 if prev is None else prev + 1)
            else:
                without_remove = Position(rng.root_index)
            break

    if without_remove is None:
        # Past every hit-test point: the last root slot, already net of removal.
        return Position(range_map[-1].root_index)

    if position.is_child:
        if (without_remove.is_child
                and without_remove.root_index == position.root_index):
            return Position(without_remove.root_index, without_remove.child_index - 1)
        return without_remove

    return Position(without_remove.root_index - 1, without_remove.child_index)
