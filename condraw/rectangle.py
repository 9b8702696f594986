"""Filled, hollow and box-drawn rectangles, with simple animations."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterator

from condraw.screen import Screen, glyph

_MOVES = {"R": (1, 0), "L": (-1, 0), "D": (0, 1), "U": (0, -1)}
_NUMBER = re.compile(r"\s*([+-]?\d+)")

TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = 218, 191, 192, 217
HORIZONTAL, VERTICAL = 196, 179
TEXT_COLOR = 15


def _as_char(symbol: str | int) -> str:
    return symbol if isinstance(symbol, str) else glyph(symbol)


def _center_text(screen: Screen, x, y, width, height, text, color) -> None:
    screen.set_color(color)
    screen.gotoxy(x + width // 2 - len(text) // 2, y + height // 2)
    screen.write(text)


def _steps(path: str) -> Iterator[tuple[str, int]]:
    for i in range(0, len(path), 3):
        count = path[i + 1 : i + 3]
        match = _NUMBER.match(count)
        if match is None:
            raise ValueError(f"invalid step count {count!r} in path {path!r}")
        yield path[i], int(match.group(1))


def parse_path(path: str) -> list[tuple[str, int]]:
    """Split a path such as ``"R05D03"`` into (direction, steps) pairs.

    Each move is one direction letter followed by a two-character count.
    """
    return list(_steps(path))


def draw_frame(screen: Screen, x, y, width, height, symbol=219, color=15, text="") -> None:
    """Draw the outline of a rectangle in ``symbol``, with optional centred text."""
    char = _as_char(symbol)
    screen.set_color(color)
    for row in range(height):
        for col in range(width):
            if row in (0, height - 1) or col in (0, width - 1):
                screen.put(x + col, y + row, char)
    if text:
        _center_text(screen, x, y, width, height, text, TEXT_COLOR)


def draw_box(screen: Screen, x, y, width, height, text="", color=None) -> None:
    """Draw a line-drawing box whose corners are ``(x, y)`` and ``(x+width, y+height)``.

    The lines use ``color`` when given, otherwise the screen's current colour.
    """
    if color is not None:
        screen.set_color(color)
    screen.put(x, y, TOP_LEFT)
    screen.put(x + width, y, TOP_RIGHT)
    screen.put(x, y + height, BOTTOM_LEFT)
    screen.put(x + width, y + height, BOTTOM_RIGHT)
    for col in range(x + 1, x + width):
        screen.put(col, y, HORIZONTAL)
        screen.put(col, y + height, HORIZONTAL)
    for row in range(y + 1, y + height):
        screen.put(x, row, VERTICAL)
        screen.put(x + width, row, VERTICAL)
    if text:
        _center_text(screen, x, y, width, height, text, TEXT_COLOR)


@dataclass
class Rectangle:
    """A rectangle of ``symbol`` characters that can move and shrink on a screen."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    symbol: str | int = " "
    hollow: bool = False
    color: int = 15
    text_color: int = 15
    text: str = ""
    sleep_time: float = 0.25

    def draw(self, screen: Screen) -> None:
        """Draw the rectangle and its centred text."""
        char = _as_char(self.symbol)
        screen.set_color(self.color)
        for row in range(self.height):
            for col in range(self.width):
                border = row in (0, self.height - 1) or col in (0, self.width - 1)
                if border or not self.hollow:
                    screen.put(self.x + col, self.y + row, char)
        if self.text:
            _center_text(screen, self.x, self.y, self.width, self.height, self.text, self.text_color)

    def erase(self, screen: Screen) -> None:
        """Cover the rectangle's area with black blanks."""
        replace(self, symbol=" ", hollow=False, color=0, text_color=0, text="").draw(screen)

    def draw_path(self, screen: Screen, path: str, sleep: Callable[[float], object] = time.sleep) -> None:
        """Move the rectangle one cell at a time along ``path``."""
        for direction, steps in _steps(path):
            delta = _MOVES.get(direction)
            if delta is None:
                continue
            for _ in range(steps):
                self.erase(screen)
                self.x += delta[0]
                self.y += delta[1]
                self.draw(screen)
                sleep(self.sleep_time)

    def implode(self, screen: Screen, sleep: Callable[[float], object] = time.sleep) -> None:
        """Shrink the rectangle until it is one cell thin, then blank its original outline."""
        outline = replace(self, symbol=" ", hollow=True, color=0, text_color=0, text="", sleep_time=0)
        while self.width > 1 and self.height > 1:
            self.erase(screen)
            self.width -= 1
            self.height -= 1
            self.draw(screen)
            sleep(self.sleep_time)
        outline.draw(screen)