"""Coloured symbol grids and ASCII circles."""

from __future__ import annotations

import math
from typing import Iterable

from condraw.screen import Screen, glyph

DEFAULT_SYMBOL_COLOR = 245


class Shapes:
    """Draws grids of character codes, each code in its own colour."""

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.colors: dict[int, int] = {}

    def map_value_to_color(self, value: int, color: int) -> None:
        """Give ``value`` a colour; the first colour given to a value is kept."""
        self.colors.setdefault(value, color)

    def print_symbol(self, value: int) -> None:
        """Write the glyph of ``value`` at the cursor in its mapped colour."""
        self.screen.set_color(self.colors.get(value, DEFAULT_SYMBOL_COLOR))
        self.screen.write(glyph(value))

    def display_shape(self, values: Iterable[int], columns: int, x: int, y: int) -> None:
        """Write ``values`` as rows of ``columns`` symbols starting at ``(x, y)``."""
        if columns <= 0:
            raise ValueError(f"columns must be positive, got {columns}")
        col = x
        for count, value in enumerate(values, start=1):
            self.screen.gotoxy(col, y)
            self.print_symbol(value)
            col += 1
            if count % columns == 0:
                y += 1
                col = x
                self.screen.write("\n")


def draw_circle(screen: Screen, x: int, y: int, radius: int) -> None:
    """Draw a circle of ``*`` whose bounding rows start at ``(x, y)``.

    Columns are stretched by one and a half and rows taken every second
    unit, so the circle looks round in a console font.
    """
    half_width = int(radius * 1.5)
    for row, yy in enumerate(range(radius, -radius - 1, -2)):
        screen.gotoxy(x, y + row)
        screen.write(
            "".join(
                "*" if int(math.sqrt(xx * xx + yy * yy)) == radius else " "
                for xx in range(-half_width, half_width + 1)
            )
        )