"""Elbow connectors between two points, drawn with line characters."""

from __future__ import annotations

from condraw.screen import Screen

VERTICAL = 179
HORIZONTAL = 196

# (goes right, goes down) -> corner at the far end of the horizontal run
_FAR_CORNER = {
    (True, True): 191,
    (True, False): 217,
    (False, True): 218,
    (False, False): 192,
}


def link(screen: Screen, x1: int, y1: int, x2: int, y2: int) -> None:
    """Connect ``(x1, y1)`` to ``(x2, y2)`` with a stub, a horizontal run and a vertical run.

    Points that share a row or a column are not connected.
    """
    if x1 == x2 or y1 == y2:
        return
    right = x2 > x1
    down = y2 > y1
    screen.put(x1, y1, VERTICAL)
    screen.put(x1, y1 + 1, 192 if right else 217)
    step = 1 if right else -1
    for x in range(x1 + step, x2, step):
        screen.put(x, y1 + 1, HORIZONTAL)
    screen.put(x2, y1 + 1, _FAR_CORNER[(right, down)])
    rows = range(y1 + 2, y2) if down else range(y1, y2, -1)
    for y in rows:
        screen.put(x2, y, VERTICAL)