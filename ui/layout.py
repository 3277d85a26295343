# ui/layout.py  – measurement collaborator for the drag list
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx
from typing import Any, List

from core.measure import MeasurementStore
from core.schema import Schema
from ui.constants import (
    PADDING,
    ITEM_MIN_H,
    CHILD_INDENT_W,
    CONTAINER_TOP_H,
    CONTAINER_BOTTOM_H,
)

# ---------------------------------------------------------------------------

def item_label(item: Any) -> str:
    """Text shown for an item: its "value", else its id."""
    if isinstance(item, dict):
        return str(item.get("value", item.get("id", "")))
    return str(item)


def container_label(container: Any) -> str:
    if isinstance(container, dict):
        return str(container.get("title", container.get("id", "")))
    return str(container)


def client_text_width(view, nested: bool) -> int:
    """Pixels available for wrapped text, narrower for container children."""
    w = view.GetClientSize().width
    left = PADDING + (CHILD_INDENT_W if nested else 0)
    return max(10, w - left - PADDING)

# ---------------------------------------------------------------------------

def _wrap_line_count(dc: wx.DC, text: str, width: int) -> int:
    """Greedy word wrap; returns the number of lines `text` needs."""
    lines = 1
    line_w = 0
    space_w = dc.GetTextExtent(" ")[0]
    for word in text.split():
        ww = dc.GetTextExtent(word)[0]
        if line_w and line_w + space_w + ww > width:
            lines += 1
            line_w = ww
        else:
            line_w += (space_w if line_w else 0) + ww
    return lines


def measure_item_height(view, dc: wx.DC, item: Any, nested: bool = False) -> int:
    """Height of one item row: wrapped text plus padding, never below ITEM_MIN_H."""
    text = item_label(item)
    line_h = dc.GetTextExtent("Ag")[1]
    nlines = _wrap_line_count(dc, text, client_text_width(view, nested))
    return max(ITEM_MIN_H, nlines * line_h + PADDING)

# ---------------------------------------------------------------------------

def measure_all(view, data: List[Any], schema: Schema, store: MeasurementStore) -> None:
    """
    Report every element's geometry to `store`, the way a layout pass
    would: item heights, then each container's start / end / height with
    its chrome around the measured children.
    """
    dc = wx.ClientDC(view)
    dc.SetFont(view.GetFont())

    for element in data:
        if not schema.is_container(element):
            store.set_item_height(schema.key(element), measure_item_height(view, dc, element))
            continue

        children_h = 0
        for child in schema.children(element):
            ht = measure_item_height(view, dc, child, nested=True)
            store.set_item_height(schema.key(child), ht)
            children_h += ht

        cid = schema.container_key(element)
        start_y = CONTAINER_TOP_H
        end_y = start_y + children_h
        store.record(cid, is_container=True,
                     height=end_y + CONTAINER_BOTTOM_H, start_y=start_y, end_y=end_y)
