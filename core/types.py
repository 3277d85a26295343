# core/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, List, Optional, Tuple, Union

EntryId = Hashable


@dataclass(slots=True, frozen=True)
class ContainerEntry:
    """
    A container slot in a sort order.

    • id     – container id
    • items  – child ids, in display order
    """
    id: EntryId
    items: Tuple[EntryId, ...] = ()


# A root entry is either a bare item id or a ContainerEntry.
OrderEntry = Union[EntryId, ContainerEntry]
SortOrder = List[OrderEntry]


@dataclass(slots=True, frozen=True)
class Position:
    """
    Location of an element within a sort order.

    child_index is None for root entries; otherwise the element is the
    child at child_index inside the container at root_index.
    """
    root_index: int
    child_index: Optional[int] = None

    @property
    def is_child(self) -> bool:
        return self.child_index is not None


class Edge(Enum):
    """Container sentinels in a range map."""
    TOP = "TOP"
    BOTTOM = "BOTTOM"


@dataclass(slots=True, frozen=True)
class RangeEntry:
    """One hit-test point: a midpoint of an element or a container sentinel."""
    y: float
    root_index: int
    child_index: Optional[int] = None
    edge: Optional[Edge] = None


RangeMap = List[RangeEntry]


@dataclass(slots=True, frozen=True)
class ItemOffset:
    id: EntryId
    y: float
    height: float


@dataclass(slots=True, frozen=True)
class ContainerOffset:
    id: EntryId
    y: float
    height: float
    content_height: float  # sum of child heights


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"


@dataclass(slots=True, frozen=True)
class DragState:
    """
    What the gesture layer sees of the current drag.

    • is_dragging   – True between drag_start and drag_end
    • is_container  – whether the dragged element is a container (None when idle)
    • id            – id of the dragged element (None when idle)
    """
    is_dragging: bool = False
    is_container: Optional[bool] = None
    id: Optional[EntryId] = None
