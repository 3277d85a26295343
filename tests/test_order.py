'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Conversions between hierarchical data and sort orders.
'''
from __future__ import annotations

import pytest

from core.order import (
    current_position,
    from_order,
    order_ids,
    positions_equal,
    separate,
    to_order,
)
from core.schema import Schema
from core.types import ContainerEntry, Position


def test_to_order_sample(order):
    assert order == [0, 1, 2, ContainerEntry(3, (4, 5)), 6, ContainerEntry(7, (8,))]


def test_round_trip_returns_equal_data(data, schema, order):
    assert from_order(order, data, schema) == data


def test_from_order_reuses_item_objects(data, schema):
    order = [ContainerEntry(3, (5, 4, 0)), 1, 2, 6, ContainerEntry(7, (8,))]
    new_data = from_order(order, data, schema)

    assert new_data[0]["data"][2] is data[0]
    assert new_data[1] is data[1]
    assert [c["id"] for c in new_data[0]["data"]] == [5, 4, 0]


def test_from_order_does_not_mutate_containers(data, schema):
    order = [0, 1, 2, ContainerEntry(3, (4,)), 6, ContainerEntry(7, (8, 5))]
    from_order(order, data, schema)

    assert [c["id"] for c in data[3]["data"]] == [4, 5]
    assert [c["id"] for c in data[5]["data"]] == [8]


def test_from_order_keeps_container_fields(schema):
    data = [{"id": "c", "title": "Group", "color": "red", "data": [{"id": "x"}]}]
    new_data = from_order([ContainerEntry("c", ())], data, schema)

    assert new_data == [{"id": "c", "title": "Group", "color": "red", "data": []}]


def test_from_order_unknown_id_asserts(data, schema):
    with pytest.raises(AssertionError):
        from_order([0, 99], data, schema)


def test_separate(data, schema):
    containers, items = separate(data, schema)

    assert sorted(containers) == [3, 7]
    assert sorted(items) == [0, 1, 2, 4, 5, 6, 8]
    assert containers[3] is data[3]


def test_nested_items_path():
    schema = Schema(
        is_container=lambda e: "body" in e,
        items_path="body.rows",
        key=lambda e: e["key"],
        container_key=lambda e: e["name"],
    )
    data = [
        {"key": "a"},
        {"name": "g", "body": {"rows": [{"key": "b"}, {"key": "c"}], "extra": 1}},
    ]

    order = to_order(data, schema)
    assert order == ["a", ContainerEntry("g", ("b", "c"))]

    new_data = from_order(["a", ContainerEntry("g", ("c", "b"))], data, schema)
    assert new_data[1]["body"] == {"rows": [{"key": "c"}, {"key": "b"}], "extra": 1}
    assert data[1]["body"]["rows"] == [{"key": "b"}, {"key": "c"}]


def test_order_ids(order):
    assert order_ids(order) == [0, 1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize(
    "entry_id, is_container, expected",
    [
        (0, False, Position(0)),
        (6, False, Position(4)),
        (4, False, Position(3, 0)),
        (8, False, Position(5, 0)),
        (3, True, Position(3)),
        (7, True, Position(5)),
        (99, False, None),
        (3, False, None),  # containers are not items
        (4, True, None),
    ],
)
def test_current_position(order, entry_id, is_container, expected):
    assert current_position(entry_id, is_container, order) == expected


def test_positions_equal():
    assert positions_equal(Position(1), Position(1))
    assert positions_equal(Position(2, 0), Position(2, 0))
    assert not positions_equal(Position(2), Position(2, 0))
    assert not positions_equal(Position(2, 1), Position(3, 1))
