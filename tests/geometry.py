'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from core.measure import MeasurementStore
from core.types import Edge, RangeEntry

# Geometry of the demo list: every item is 37px, containers have 25px of
# chrome above their children and 50px below.
ITEM_H = 37
TOP_H = 25
BOTTOM_H = 50

# Range map of the demo list (0, 1, 2, [3: 4, 5], 6, [7: 8]) at that geometry.
SAMPLE_MAP = [
    RangeEntry(18.5, 0),
    RangeEntry(55.5, 1),
    RangeEntry(92.5, 2),
    RangeEntry(123.5, 3, edge=Edge.TOP),
    RangeEntry(154.5, 3, 0),
    RangeEntry(191.5, 3, 1),
    RangeEntry(235, 3, edge=Edge.BOTTOM),
    RangeEntry(278.5, 4),
    RangeEntry(309.5, 5, edge=Edge.TOP),
    RangeEntry(340.5, 5, 0),
    RangeEntry(384, 5, edge=Edge.BOTTOM),
]


def measure(data, schema, store=None, item_h=ITEM_H):
    """Fill a store the way the layout layer would."""
    store = store if store is not None else MeasurementStore()
    for element in data:
        if not schema.is_container(element):
            store.set_item_height(schema.key(element), item_h)
            continue
        children = schema.children(element)
        for child in children:
            store.set_item_height(schema.key(child), item_h)
        end_y = TOP_H + item_h * len(children)
        store.record(schema.container_key(element), is_container=True,
                     height=end_y + BOTTOM_H, start_y=TOP_H, end_y=end_y)
    return store
