# core/schema.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple, Union

from core.types import EntryId

__all__ = ["Schema", "get_path", "set_path", "split_path"]

Path = Union[str, Sequence[Union[str, int]]]


def split_path(path: Path) -> Tuple[Union[str, int], ...]:
    """
    Normalize a child-items path.

    "items" -> ("items",), "body.rows" -> ("body", "rows"),
    "groups.0.items" -> ("groups", 0, "items"). Sequences pass through.
    """
    if isinstance(path, str):
        parts = [p for p in path.split(".") if p]
        return tuple(int(p) if p.isdigit() else p for p in parts)
    return tuple(path)


def _step(obj: Any, key: Union[str, int]) -> Any:
    if isinstance(obj, Mapping):
        return obj[key]
    if isinstance(key, int) and isinstance(obj, Sequence):
        return obj[key]
    return getattr(obj, key)


def get_path(obj: Any, path: Path) -> Any:
    """Read the value at `path` (mapping keys, sequence indices or attributes)."""
    for key in split_path(path):
        obj = _step(obj, key)
    return obj


def _replaced(obj: Any, key: Union[str, int], value: Any) -> Any:
    """Shallow copy of obj with a single key / index / attribute replaced."""
    if isinstance(obj, Mapping):
        new = copy.copy(obj)
        new[key] = value
        return new
    if isinstance(key, int) and isinstance(obj, list):
        new = list(obj)
        new[key] = value
        return new
    if isinstance(key, int) and isinstance(obj, tuple):
        return obj[:key] + (value,) + obj[key + 1:]
    new = copy.copy(obj)
    setattr(new, key, value)
    return new


def set_path(obj: Any, path: Path, value: Any) -> Any:
    """
    Return a copy of `obj` with `value` stored at `path`.

    Only the objects along the path are copied (shallowly); `obj` and every
    sibling value are left untouched.
    """
    keys = split_path(path)
    if not keys:
        return value
    head, rest = keys[0], keys[1:]
    if rest:
        value = set_path(_step(obj, head), rest, value)
    return _replaced(obj, head, value)


# ---------------------------------------------------------------------------
# default callbacks
# ---------------------------------------------------------------------------

def _no_containers(_element: Any) -> bool:
    return False


def _id_key(element: Any) -> EntryId:
    if isinstance(element, Mapping):
        return element["id"]
    return element.id


@dataclass(frozen=True)
class Schema:
    """
    Describes the caller's hierarchical data to the engine.

    • is_container   – is this root element a container?
    • items_path     – where a container keeps its child list ("items", "a.b")
    • key            – id of a plain item
    • container_key  – id of a container

    All callbacks must be pure; they are invoked on every pointer sample.
    """
    is_container: Callable[[Any], bool] = _no_containers
    items_path: Path = "items"
    key: Callable[[Any], EntryId] = _id_key
    container_key: Callable[[Any], EntryId] = _id_key

    def children(self, container: Any) -> List[Any]:
        return list(get_path(container, self.items_path))

    def with_children(self, container: Any, children: List[Any]) -> Any:
        """Copy of container with its child list replaced."""
        return set_path(container, self.items_path, children)
