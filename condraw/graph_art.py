"""Fixed block-letter art and frames used around the graph drawing."""

from __future__ import annotations

import re
from typing import Sequence

from condraw.rectangle import Rectangle
from condraw.screen import Screen

BORDER_COLOR = 9
ART_COLOR = 62
BORDER_SYMBOL = 219

_KEY = {
    ".": 177,
    "#": 219,
    "^": 223,
    "_": 220,
    " ": 32,
    ":": 176,
    "o": 254,
    "=": 205,
    "|": 186,
    "[": 201,
    "]": 187,
    "{": 200,
    "}": 188,
    "T": 203,
}

_RUN_KEY = {"s": " ", "r": ".", "y": "#", "b": ":", "o": "o", "w": "_", "h": "^"}
_RUN = re.compile(r"([a-z])(\d+)")


def _codes(rows: Sequence[str]) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(_KEY[ch] for ch in row) for row in rows)


def _runs(encoded: str) -> str:
    return "".join(_RUN_KEY[ch] * int(count) for ch, count in _RUN.findall(encoded))


_COORDINATES_TEXT = _codes(
    (
        "." * 54,
        ".#^^#.#^^#.#^^#.#^^#.#^^_..^..#^^_.#^^#.^^#^^.#^^.#^^.",
        ".#....#..#.#..#.#__^.#..#.^#^.#..#.#__#...#...#^^.^^#.",
        ".#__#.^^^^.^^^^.^.^^.^^^..^^^.^..^.^..^...^...^^^.^^^.",
        "." * 54,
    )
)

_CONNECTIONS_TEXT = _codes(
    (
        "." * 54,
        ".#^^#.#^^#.#^^_.#^^_.#^^.#^^.^^#^^..^..#^^#.#^^_.#^^..",
        ".#....#..#.#..#.#..#.#^^.#.....#...^#^.#..#.#..#.^^#..",
        ".#__#.^^^^.^..^.^..^.^^^.^^^...^...^^^.^^^^.^..^.^^^..",
        "." * 54,
    )
)

_DATA_STRUCTURE_TEXT = _codes(
    (
        "." * 114,
        (
            "........#^" "^#.#^^#.#^" "^#.#^^#.#." ".#.....#^^" "_.#^^#.^^#" "^^.#^^#..."
            "..#^^^#.^^" "#^^.#^^#.#" "..#.#^^.^^" "#^^.#..#.#" "^^#.#^^..." "...."
        ),
        (
            "........#." "__.#__^.#_" "_#.#..#.#^" "^#.....#.." "#.#__#...#" "...#__#..."
            "..^^^__..." "#...#__^.#" "..#.#....." "#...#..#.#" "__^.#^^..." "...."
        ),
        (
            "........#_" "_#.^.^^.^." ".^.#^^^.^." ".^.....#__" "^.^..^...^" "...^..^..."
            "..#___#..." "^...^.^^.." "^^^.^^^..." "^....^^^.^" ".^^.^^^..." "...."
        ),
        "." * 114,
    )
)

_MARIO = _codes(
    tuple(
        _runs(row)
        for row in (
            "s35",
            "s15r6s4y5s5",
            "s11r12s2y6s4",
            "s9r6s12y4s4",
            "s7r6s16y1s5",
            "s7r2s4y12s10",
            "s11y6s2y2s2y2s2r4s4",
            "s5y2s4y6s2y2s2y2s3r3s4",
            "s4y5s4y14s2r2s4",
            "s4y3s1y1s2y4s2y10s2r2s4",
            "s5h1y8s7y4s4r2s4",
            "s9y7s11r4s4",
            "s13y10s2r5s5",
            "s7r4s14r2s8",
            "s6r8s1b1w1b1s5w1b1s10",
            "s5b1r8s1b1s2y4s3b1s9",
            "s5b1r7s2y8s1b2s9",
            "s5b2s1r8s1y4s3b3s8",
            "s6b3s1r6s7b4s8",
            "s7b4s5b10s9",
            "s8b19s8",
            "s10b9s1b7s1o2s5",
            "s10b9s3b4s1o4s4",
            "s5o4b8s7o8s3",
            "s4o5b7s8o7s4",
            "s4o5b5s11o4s6",
            "s4o4s27",
            "s35",
        )
    )
)

_MARIO_COLUMNS = 33
_MARIO_ORIGIN = (125, 30)
_MARIO_COLORS = {176: 9, 177: 12, 219: 14, 254: 6, 220: 15, 223: 15}

_BLANK_ROW = "." * 18

_LETTERS = {
    "A": _codes(
        (
            _BLANK_ROW,
            "......#####]......",
            ".....##[==##].....",
            ".....#######|.....",
            ".....##[==##|.....",
            ".....##|..##|.....",
            ".....{=}..{=}.....",
            _BLANK_ROW,
        )
    ),
    "B": _codes(
        (
            _BLANK_ROW,
            ".....######]......",
            ".....##[==##].....",
            ".....######T}.....",
            ".....##[==##].....",
            ".....######T}.....",
            ".....{=====}......",
            _BLANK_ROW,
        )
    ),
    "C": _codes(
        (
            _BLANK_ROW,
            "......#####]......",
            ".....##[==##].....",
            ".....##|..{=}.....",
            ".....##|..##].....",
            ".....{#####[}.....",
            "......{====}......",
            _BLANK_ROW,
        )
    ),
    "D": _codes(
        (
            _BLANK_ROW,
            ".....######]......",
            ".....##[==##].....",
            ".....##|..##|.....",
            ".....##|..##|.....",
            ".....######[}.....",
            ".....{=====}......",
            _BLANK_ROW,
        )
    ),
    "E": _codes(
        (
            _BLANK_ROW,
            ".....#######].....",
            ".....##[====}.....",
            ".....#####].......",
            ".....##[==}.......",
            ".....#######].....",
            ".....{======}.....",
            _BLANK_ROW,
        )
    ),
}

NODE_POSITIONS = {"A": (50, 33), "B": (20, 13), "C": (80, 13), "D": (10, 48), "E": (90, 48)}
NODE_WIDTH = 20
NODE_HEIGHT = 10

_BORDERS = (
    (0, 0, 116, 7),
    (115, 0, 56, 7),
    (0, 0, 171, 60),
    (115, 0, 56, 60),
    (115, 28, 56, 32),
    (116, 46, 54, 1),
)


def _draw_art(screen: Screen, rows, x: int, y: int, color: int) -> None:
    screen.set_color(color)
    for dy, row in enumerate(rows):
        for dx, code in enumerate(row):
            screen.put(x + dx, y + dy, code)


def _frame(x: int, y: int, width: int, height: int) -> Rectangle:
    return Rectangle(x, y, width, height, BORDER_SYMBOL, hollow=True, color=BORDER_COLOR)


def draw_borders(screen: Screen) -> None:
    """Draw the frames that split the screen into the graph and side panels."""
    for x, y, width, height in _BORDERS:
        _frame(x, y, width, height).draw(screen)


def draw_title(screen: Screen) -> None:
    """Draw the "graph data structure" banner across the top of the graph panel."""
    _draw_art(screen, _DATA_STRUCTURE_TEXT, 1, 1, ART_COLOR)


def draw_connections_title(screen: Screen) -> None:
    """Draw the "connections" banner at the top of the side panel."""
    _draw_art(screen, _CONNECTIONS_TEXT, 116, 1, ART_COLOR)


def draw_mario(screen: Screen) -> None:
    """Draw the plumber picture in the lower side panel, each shade in its own colour."""
    x0, y0 = _MARIO_ORIGIN
    screen.set_color(9)
    for dy, row in enumerate(_MARIO):
        for dx, code in enumerate(row[:_MARIO_COLUMNS]):
            color = _MARIO_COLORS.get(code)
            if color is not None:
                screen.set_color(color)
            screen.put(x0 + dx, y0 + dy, code)
    screen.set_color(15)
    screen.put(143, 32, "M")


def draw_node_box(screen: Screen, letter: str) -> None:
    """Draw the framed block letter for vertex ``letter`` (A to E) at its fixed place."""
    key = letter.upper()
    if key not in _LETTERS:
        raise ValueError(f"no node box for vertex {letter!r}")
    x, y = NODE_POSITIONS[key]
    _frame(x, y, NODE_WIDTH, NODE_HEIGHT).draw(screen)
    _draw_art(screen, _LETTERS[key], x + 1, y + 1, ART_COLOR)


def move_text_right(screen: Screen, offset: int, size: int, color: int) -> None:
    """Draw the first ``size`` columns of the "coordinates" banner from column ``offset``."""
    width = len(_COORDINATES_TEXT[0])
    if size > width:
        raise ValueError(f"the banner is {width} columns wide, {size} requested")
    screen.set_color(color)
    for dy, row in enumerate(_COORDINATES_TEXT):
        for dx in range(size):
            screen.put(dx + offset, dy + 1, row[dx])


def start_text_left(screen: Screen, offset: int, size: int, color: int) -> None:
    """Draw the banner's columns after column ``size``, right to left, from ``offset``."""
    last = len(_COORDINATES_TEXT[0]) - 1
    screen.set_color(color)
    for dy, row in enumerate(_COORDINATES_TEXT):
        for dx in range(last, max(size, -1), -1):
            screen.put(dx + offset, dy + 1, row[dx])