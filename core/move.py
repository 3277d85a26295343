# core/move.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import replace

from core.types import ContainerEntry, OrderEntry, Position, SortOrder

__all__ = ["move"]


def _container_at(order: SortOrder, root_index: int) -> ContainerEntry:
    entry = order[root_index]
    if not isinstance(entry, ContainerEntry):
        raise IndexError(f"root {root_index} is not a container")
    return entry


def _check_index(index: int, size: int, what: str, inclusive: bool = False) -> None:
    upper = size if inclusive else size - 1
    if not (0 <= index <= upper):
        raise IndexError(f"{what} index {index} out of range (0..{upper})")


def move(sort_order: SortOrder, remove: Position, insert: Position) -> SortOrder:
    """
    Relocate one element: remove it at `remove`, then insert it at `insert`.

    `insert` is read against the order *after* removal (resolve_position
    already returns it that way). Returns a new list; `sort_order` is not
    modified, and every container untouched by either step is carried over
    by reference.
    """
    new_order = list(sort_order)

    # 1. Remove.
    _check_index(remove.root_index, len(new_order), "root")
    if remove.child_index is None:
        removed: OrderEntry = new_order.pop(remove.root_index)
    else:
        container = _container_at(new_order, remove.root_index)
        items = container.items
        _check_index(remove.child_index, len(items), "child")
        removed = items[remove.child_index]
        new_order[remove.root_index] = replace(
            container, items=items[:remove.child_index] + items[remove.child_index + 1:]
        )

    # 2. Insert.
    _check_index(insert.root_index, len(new_order), "root", inclusive=insert.child_index is None)
    if insert.child_index is None:
        new_order.insert(insert.root_index, removed)
    else:
        if isinstance(removed, ContainerEntry):
            raise ValueError(f"container {removed.id!r} cannot be nested in a container")
        container = _container_at(new_order, insert.root_index)
        items = list(container.items)
        _check_index(insert.child_index, len(items), "child", inclusive=True)
        items.insert(insert.child_index, removed)
        new_order[insert.root_index] = replace(container, items=tuple(items))

    return new_order
