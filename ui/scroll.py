'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

from core.types import Direction

# Auto-scroll while dragging
DRAG_THRESHOLD = 100  # Pixels from the window edge where auto-scroll kicks in
SCROLL_AMOUNT = 5     # Pixels scrolled per timer tick

def auto_scroll_step(
        pointer_y: int,
        client_h: int,
        direction: Optional[Direction],
        threshold: int = DRAG_THRESHOLD,
        amount: int = SCROLL_AMOUNT,
) -> int:
    """
    Pixels to scroll for one tick of a drag, given the pointer's window Y.

    Scrolls only toward the edge the gesture is heading to: near the top
    while moving up, near the bottom while moving down. Returns 0 otherwise.
    """
    if pointer_y <= threshold and direction is Direction.UP:
        return -amount
    if pointer_y >= client_h - threshold and direction is Direction.DOWN:
        return amount
    return 0

def scroll_y_px(view) -> int:
    """Current vertical scroll position in pixels."""
    _sx, sy = view.GetViewStart()
    return sy * view.GetScrollPixelsPerUnit()[1]

def content_height(view) -> int:
    """
    Total content height in pixels, from the session's current offsets.
    Zero until every element has been measured.
    """
    offsets = view.session.offsets()
    if offsets is None:
        return 0
    return int(offsets.total_height)

def clamp_scroll_y(view, y: int) -> int:
    """Clamp pixel scroll position to [0 .. max_scroll]."""
    ch = view.GetClientSize().height
    h = max(0, content_height(view) - ch)
    return max(0, min(y, h))

def scroll_by(view, delta: int) -> int:
    """Scroll by `delta` pixels (clamped). Returns the distance actually scrolled."""
    cur = scroll_y_px(view)
    new_y = clamp_scroll_y(view, cur + delta)
    if new_y == cur:
        return 0
    view.Scroll(-1, new_y // view.GetScrollPixelsPerUnit()[1])
    return new_y - cur
