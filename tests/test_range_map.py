'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Range map construction.
'''
from __future__ import annotations

from core.offsets import compute_offsets
from core.range_map import compute_range_map
from core.order import to_order
from core.types import Edge, RangeEntry

from tests.geometry import SAMPLE_MAP, measure


def test_sample_map(order, store):
    offsets = compute_offsets(order, store)
    assert compute_range_map(store, order, offsets) == SAMPLE_MAP


def test_root_only_map(order, store):
    offsets = compute_offsets(order, store)
    rmap = compute_range_map(store, order, offsets, root_only=True)

    assert [(r.y, r.root_index) for r in rmap] == [
        (18.5, 0), (55.5, 1), (92.5, 2), (185.5, 3), (278.5, 4), (353, 5),
    ]
    assert all(r.child_index is None and r.edge is None for r in rmap)


def test_map_is_sorted(order, store):
    rmap = compute_range_map(store, order, compute_offsets(order, store))
    ys = [r.y for r in rmap]
    assert ys == sorted(ys)


def test_none_without_geometry(order, store):
    assert compute_range_map(None, order, compute_offsets(order, store)) is None
    assert compute_range_map(store, order, None) is None


def test_sentinels_bracket_children(order, store):
    rmap = compute_range_map(store, order, compute_offsets(order, store))
    for root_index in (3, 5):
        entries = [r for r in rmap if r.root_index == root_index]
        assert entries[0].edge is Edge.TOP
        assert entries[-1].edge is Edge.BOTTOM
        assert all(r.edge is None for r in entries[1:-1])


def test_empty_container_sentinels_are_adjacent(schema):
    data = [{"id": 0}, {"id": 1, "data": []}, {"id": 2}]
    order = to_order(data, schema)
    store = measure(data, schema)
    rmap = compute_range_map(store, order, compute_offsets(order, store))

    assert rmap == [
        RangeEntry(18.5, 0),
        RangeEntry(49.5, 1, edge=Edge.TOP),
        RangeEntry(87, 1, edge=Edge.BOTTOM),
        RangeEntry(130.5, 2),
    ]
