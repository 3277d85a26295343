'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Pointer Y to target position resolution on the demo list.
'''
from __future__ import annotations

import pytest

from core.resolve import find_range_index, resolve_position
from core.types import Edge, Position, RangeEntry

from tests.geometry import SAMPLE_MAP


@pytest.mark.parametrize(
    "position, y, expected",
    [
        # child dragged to the very top
        (Position(3, 1), 17, Position(0)),
        # root item dropped after the last child of container 3
        (Position(0), 200, Position(2, 2)),
        # root item dragged up into the top of container 3
        (Position(4), 130, Position(3, 0)),
        # child moved into the other container, after its child
        (Position(3, 0), 341, Position(5, 1)),
        # just above container 3's top sentinel
        (Position(4), 120, Position(3)),
        (Position(0), 0, Position(0)),
        (Position(0), 50, Position(0)),
        (Position(0), 56, Position(1)),
        # past container 3 entirely
        (Position(0), 236, Position(3)),
        # past the end of the list
        (Position(4), 1000, Position(5)),
        # child dragged past the end lands on the last root slot
        (Position(3, 0), 1000, Position(5)),
        # last slot inside its own container
        (Position(3, 0), 234, Position(3, 1)),
    ],
)
def test_resolve_sample(position, y, expected):
    assert resolve_position(position, y, SAMPLE_MAP) == expected


@pytest.mark.parametrize(
    "position",
    [
        Position(0), Position(1), Position(2), Position(3, 0),
        Position(3, 1), Position(4), Position(5, 0),
    ],
)
def test_own_midpoint_keeps_position(position):
    y = SAMPLE_MAP[find_range_index(position, SAMPLE_MAP)].y
    assert resolve_position(position, y, SAMPLE_MAP) == position


def test_find_range_index():
    assert find_range_index(Position(3), SAMPLE_MAP) == 3   # TOP sentinel
    assert find_range_index(Position(3, 1), SAMPLE_MAP) == 5
    assert find_range_index(Position(9), SAMPLE_MAP) == -1


def test_unknown_position_asserts():
    with pytest.raises(AssertionError):
        resolve_position(Position(9), 10, SAMPLE_MAP)


def test_empty_container_bottom_gives_first_child_slot():
    rmap = [
        RangeEntry(18.5, 0),
        RangeEntry(49.5, 1, edge=Edge.TOP),
        RangeEntry(87, 1, edge=Edge.BOTTOM),
        RangeEntry(130.5, 2),
    ]
    assert resolve_position(Position(0), 68, rmap) == Position(0, 0)
    assert resolve_position(Position(2), 68, rmap) == Position(1, 0)
