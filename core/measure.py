# core/measure.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from core.log import Log
from core.schema import Schema
from core.types import ContainerEntry, EntryId, SortOrder

__all__ = ["ContainerMeasurement", "MeasurementStore"]


@dataclass(slots=True, frozen=True)
class ContainerMeasurement:
    """
    Measured geometry of one container, relative to its own top edge.

    • height   – full container height, chrome included
    • start_y  – where the first child begins
    • end_y    – where the children region ends (bottom chrome begins)
    """
    height: Optional[float] = None
    start_y: Optional[float] = None
    end_y: Optional[float] = None

    @property
    def complete(self) -> bool:
        return (self.height is not None
                and self.start_y is not None
                and self.end_y is not None)


class MeasurementStore:
    """
    Pixel measurements for every item and container, filled in by the
    layout layer as elements finish laying out.

    The store is mutable; `version` increases on every change so derived
    geometry can be cached against it. Hand `snapshot()` to code that must
    not observe later writes.
    """

    __slots__ = ("_items", "_containers", "_provided", "version")

    def __init__(self) -> None:
        self._items: Dict[EntryId, float] = {}
        self._containers: Dict[EntryId, ContainerMeasurement] = {}
        # Heights reported by the items themselves (e.g. while animating a
        # collapsible region); these win over measured heights.
        self._provided: Dict[EntryId, float] = {}
        self.version: int = 0

    # ------------------------------------------------------------------ #
    # layout events
    # ------------------------------------------------------------------ #

    def set_item_height(self, entry_id: EntryId, height: float) -> None:
        if self._items.get(entry_id) == height:
            return
        self._items[entry_id] = height
        self.version += 1

    def _update_container(self, entry_id: EntryId, **fields) -> None:
        old = self._containers.get(entry_id, ContainerMeasurement())
        new = replace(old, **fields)
        if new != old:
            self._containers[entry_id] = new
            self.version += 1

    def set_container_height(self, entry_id: EntryId, height: float) -> None:
        self._update_container(entry_id, height=height)

    def set_container_start(self, entry_id: EntryId, start_y: float) -> None:
        self._update_container(entry_id, start_y=start_y)

    def set_container_end(self, entry_id: EntryId, end_y: float) -> None:
        self._update_container(entry_id, end_y=end_y)

    def record(
            self,
            entry_id: EntryId,
            is_container: bool = False,
            height: Optional[float] = None,
            start_y: Optional[float] = None,
            end_y: Optional[float] = None,
    ) -> None:
        """Apply one layout event; fields left as None are not touched."""
        if not is_container:
            if start_y is not None or end_y is not None:
                raise ValueError(f"start_y/end_y only apply to containers (id={entry_id!r})")
            if height is not None:
                self.set_item_height(entry_id, height)
            return

        fields = {}
        if height is not None:
            fields["height"] = height
        if start_y is not None:
            fields["start_y"] = start_y
        if end_y is not None:
            fields["end_y"] = end_y
        if fields:
            self._update_container(entry_id, **fields)

    def set_provided_height(self, entry_id: EntryId, height: float) -> None:
        if self._provided.get(entry_id) == height:
            return
        self._provided[entry_id] = height
        self.version += 1

    def clear_provided_height(self, entry_id: EntryId) -> None:
        if self._provided.pop(entry_id, None) is not None:
            self.version += 1

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    def item_height(self, entry_id: EntryId) -> Optional[float]:
        """Provided height if any, else measured height, else None."""
        provided = self._provided.get(entry_id)
        if provided is not None:
            return provided
        return self._items.get(entry_id)

    def container(self, entry_id: EntryId) -> Optional[ContainerMeasurement]:
        return self._containers.get(entry_id)

    def is_complete_for(self, sort_order: SortOrder) -> bool:
        """True when every id in the order has all the fields it needs."""
        for entry in sort_order:
            if isinstance(entry, ContainerEntry):
                meas = self._containers.get(entry.id)
                if meas is None or not meas.complete:
                    return False
                for child_id in entry.items:
                    if self.item_height(child_id) is None:
                        return False
            elif self.item_height(entry) is None:
                return False
        return True

    def is_complete(self, data: List[Any], schema: Schema) -> bool:
        for element in data:
            if schema.is_container(element):
                meas = self._containers.get(schema.container_key(element))
                if meas is None or not meas.complete:
                    return False
                for child in schema.children(element):
                    if self.item_height(schema.key(child)) is None:
                        return False
            elif self.item_height(schema.key(element)) is None:
                return False
        return True

    # ------------------------------------------------------------------ #
    # maintenance
    # ------------------------------------------------------------------ #

    def prune(self, data: List[Any], schema: Schema) -> int:
        """Forget every id that is not in `data`. Returns how many were dropped."""
        item_ids = set()
        container_ids = set()
        for element in data:
            if schema.is_container(element):
                container_ids.add(schema.container_key(element))
                item_ids.update(schema.key(child) for child in schema.children(element))
            else:
                item_ids.add(schema.key(element))

        dropped = 0
        for table, keep in ((self._items, item_ids),
                            (self._provided, item_ids),
                            (self._containers, container_ids)):
            stale = [eid for eid in table if eid not in keep]
            for eid in stale:
                del table[eid]
            dropped += len(stale)

        if dropped:
            self.version += 1
            Log.debug(f"Pruned {dropped} stale measurement(s)", 2)
        return dropped

    def snapshot(self) -> "MeasurementStore":
        """Independent copy; later writes to self do not show through."""
        snap = MeasurementStore()
        snap._items = dict(self._items)
        snap._containers = dict(self._containers)
        snap._provided = dict(self._provided)
        snap.version = self.version
        return snap
