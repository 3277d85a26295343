# core/order.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from core.log import Log
from core.schema import Schema
from core.types import ContainerEntry, EntryId, Position, SortOrder

__all__ = [
    "to_order",
    "from_order",
    "separate",
    "order_ids",
    "current_position",
    "positions_equal",
]


def to_order(data: List[Any], schema: Schema) -> SortOrder:
    """
    Map hierarchical data onto a sort order.

        [a, b, {id: c, items: [d, e]}, f]  ->  [a, b, ContainerEntry(c, (d, e)), f]
    """
    order: SortOrder = []
    for element in data:
        if schema.is_container(element):
            child_ids = tuple(schema.key(child) for child in schema.children(element))
            order.append(ContainerEntry(schema.container_key(element), child_ids))
        else:
            order.append(schema.key(element))
    return order


def separate(data: List[Any], schema: Schema) -> Tuple[Dict[EntryId, Any], Dict[EntryId, Any]]:
    """
    Build id -> object lookup tables: (containers, items).

    Container objects are returned as-is; their child lists are rebuilt by
    from_order, never edited in place.
    """
    containers: Dict[EntryId, Any] = {}
    items: Dict[EntryId, Any] = {}
    for element in data:
        if schema.is_container(element):
            containers[schema.container_key(element)] = element
            for child in schema.children(element):
                items[schema.key(child)] = child
        else:
            items[schema.key(element)] = element
    return containers, items


def _lookup(table: Dict[EntryId, Any], entry_id: EntryId, what: str) -> Optional[Any]:
    found = table.get(entry_id)
    if found is None and entry_id not in table:
        # Stale order against newer data: caller bug.
        assert False, f"{what} id {entry_id!r} not found in data"
        Log.debug(f"from_order: dropping unknown {what} id {entry_id!r}", 0)
        return None
    return found


def from_order(sort_order: SortOrder, data: List[Any], schema: Schema) -> List[Any]:
    """
    Rebuild hierarchical data from a sort order using the objects in `data`.

    Containers keep every field except their child list, which is replaced
    on a copy. Ids missing from `data` trip an assertion; with assertions
    disabled they are skipped.
    """
    containers, items = separate(data, schema)

    new_data: List[Any] = []
    for entry in sort_order:
        if isinstance(entry, ContainerEntry):
            container = _lookup(containers, entry.id, "container")
            if container is None:
                continue
            children = []
            for child_id in entry.items:
                child = _lookup(items, child_id, "item")
                if child is not None:
                    children.append(child)
            new_data.append(schema.with_children(container, children))
        else:
            item = _lookup(items, entry, "item")
            if item is not None:
                new_data.append(item)
    return new_data


def order_ids(sort_order: SortOrder) -> List[EntryId]:
    """All ids in traversal order: roots, each container followed by its children."""
    ids: List[EntryId] = []
    for entry in sort_order:
        if isinstance(entry, ContainerEntry):
            ids.append(entry.id)
            ids.extend(entry.items)
        else:
            ids.append(entry)
    return ids


def current_position(
        entry_id: EntryId,
        is_container: bool,
        sort_order: SortOrder,
) -> Optional[Position]:
    """Locate an id in the sort order. Containers are only searched at root level."""
    if is_container:
        for i, entry in enumerate(sort_order):
            if isinstance(entry, ContainerEntry) and entry.id == entry_id:
                return Position(i)
        return None

    for i, entry in enumerate(sort_order):
        if isinstance(entry, ContainerEntry):
            if entry_id in entry.items:
                return Position(i, entry.items.index(entry_id))
        elif entry == entry_id:
            return Position(i)
    return None


def positions_equal(pos0: Position, pos1: Position) -> bool:
    return (pos0.root_index == pos1.root_index
            and pos0.child_index == pos1.child_index)
