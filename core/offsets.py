# core/offsets.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from bisect import bisect_right
from typing import Dict, List, Optional, Tuple, Union

from core.measure import MeasurementStore
from core.types import (
    ContainerEntry,
    ContainerOffset,
    EntryId,
    ItemOffset,
    SortOrder,
)

__all__ = ["Offsets", "compute_offsets", "hit_test"]


class Offsets:
    """
    Immutable per-order layout of absolute offsets, in content coordinates.

    - items[id]       == ItemOffset of a root item or a child.
    - containers[id]  == ContainerOffset of a container.
    - root_tops[i]    == y of the top edge of root entry i.
    - total_height    == bottom of the last root entry.
    """

    __slots__ = ("items", "containers", "root_tops", "total_height")

    def __init__(
            self,
            items: Dict[EntryId, ItemOffset],
            containers: Dict[EntryId, ContainerOffset],
            root_tops: List[float],
            total_height: float,
    ) -> None:
        self.items = items
        self.containers = containers
        self.root_tops = root_tops
        self.total_height = total_height

    def item(self, entry_id: EntryId) -> Optional[ItemOffset]:
        return self.items.get(entry_id)

    def container(self, entry_id: EntryId) -> Optional[ContainerOffset]:
        return self.containers.get(entry_id)

    def get(self, entry_id: EntryId) -> Optional[Union[ItemOffset, ContainerOffset]]:
        found = self.items.get(entry_id)
        if found is None:
            found = self.containers.get(entry_id)
        return found

    def find_at_y(self, y: float) -> int:
        """
        Root index whose box contains content Y.

        Above the first root returns 0; past the end returns the last index.
        Returns -1 for an empty order.
        """
        if not self.root_tops:
            return -1
        i = bisect_right(self.root_tops, y) - 1
        return max(0, i)


def compute_offsets(
        sort_order: SortOrder,
        measurements: Optional[MeasurementStore],
) -> Optional[Offsets]:
    """
    Lay out `sort_order` top to bottom from the measured heights.

    Returns None until the store holds every measurement the order needs.
    A container occupies start_y + sum(child heights) + (height - end_y).
    """
    if measurements is None or not measurements.is_complete_for(sort_order):
        return None

    items: Dict[EntryId, ItemOffset] = {}
    containers: Dict[EntryId, ContainerOffset] = {}
    root_tops: List[float] = []

    y = 0
    for entry in sort_order:
        root_tops.append(y)

        if isinstance(entry, ContainerEntry):
            meas = measurements.container(entry.id)
            container_y = y
            # top chrome
            y += meas.start_y
            content_height = 0
            for child_id in entry.items:
                ht = measurements.item_height(child_id)
                items[child_id] = ItemOffset(child_id, y, ht)
                y += ht
                content_height += ht
            # bottom chrome
            y += meas.height - meas.end_y
            # Equals meas.height unless the pending order moved children in or out.
            containers[entry.id] = ContainerOffset(
                entry.id, container_y, y - container_y, content_height
            )
        else:
            ht = measurements.item_height(entry)
            items[entry] = ItemOffset(entry, y, ht)
            y += ht

    return Offsets(items, containers, root_tops, y)


def hit_test(
        sort_order: SortOrder,
        offsets: Offsets,
        y: float,
) -> Optional[Tuple[EntryId, bool]]:
    """
    Which element is under content Y: (id, is_container) or None.

    Inside a container, a child's box wins; the chrome above and below the
    children belongs to the container itself.
    """
    if not sort_order or y < 0 or y >= offsets.total_height:
        return None

    entry = sort_order[offsets.find_at_y(y)]
    if not isinstance(entry, ContainerEntry):
        return (entry, False)

    for child_id in entry.items:
        off = offsets.items[child_id]
        if off.y <= y < off.y + off.height:
            return (child_id, False)
    return (entry.id, True)
