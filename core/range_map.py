# core/range_map.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

from core.measure import MeasurementStore
from core.offsets import Offsets
from core.types import ContainerEntry, Edge, RangeEntry, RangeMap, SortOrder

__all__ = ["compute_range_map"]


def compute_range_map(
        measurements: Optional[MeasurementStore],
        sort_order: SortOrder,
        offsets: Optional[Offsets],
        root_only: bool = False,
) -> Optional[RangeMap]:
    """
    Build the sorted list of hit-test points for a drag.

    root_only=True (dragging a container): one midpoint per root entry.
    Otherwise containers contribute a TOP sentinel, one midpoint per child
    and a BOTTOM sentinel, so a dragged item can land before the first
    child, between children, after the last child, or pass the container
    entirely.

    Returns None while measurements or offsets are unavailable.
    """
    if measurements is None or offsets is None:
        return None

    ranges: RangeMap = []
    for idx, entry in enumerate(sort_order):
        if not isinstance(entry, ContainerEntry):
            off = offsets.items[entry]
            ranges.append(RangeEntry(off.y + off.height / 2, idx))
            continue

        container_off = offsets.containers[entry.id]
        if root_only:
            ranges.append(RangeEntry(container_off.y + container_off.height / 2, idx))
            continue

        meas = measurements.container(entry.id)
        # halfway through the top chrome
        ranges.append(RangeEntry(
            container_off.y + meas.start_y / 2, idx, edge=Edge.TOP,
        ))
        for child_idx, child_id in enumerate(entry.items):
            off = offsets.items[child_id]
            ranges.append(RangeEntry(off.y + off.height / 2, idx, child_idx))
        # halfway through the bottom chrome
        children_end = container_off.y + meas.start_y + container_off.content_height
        ranges.append(RangeEntry(
            children_end + (meas.height - meas.end_y) / 2, idx, edge=Edge.BOTTOM,
        ))

    return ranges
