"""An in-memory character console with a cursor and colour attributes."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 25
DEFAULT_COLOR = 7

# Console colour index (blue=1, green=2, red=4) to ANSI colour index.
_ANSI_INDEX = (0, 4, 2, 6, 1, 5, 3, 7)
_RESET = "\x1b[0m"


def glyph(code: int) -> str:
    """Return the character that code page 437 puts at ``code`` (taken modulo 256)."""
    return bytes([code % 256]).decode("cp437")


def attribute(foreground: int, background: int) -> int:
    """Combine a foreground and a background colour into one console attribute."""
    return 16 * background + foreground


def _sgr(color: int) -> str:
    fg, bg = color & 0xF, (color >> 4) & 0xF
    fore = (90 if fg & 8 else 30) + _ANSI_INDEX[fg & 7]
    back = (100 if bg & 8 else 40) + _ANSI_INDEX[bg & 7]
    return f"\x1b[{fore};{back}m"


@dataclass(frozen=True)
class Cell:
    """One character position of the screen."""

    char: str = " "
    color: int = DEFAULT_COLOR


_BLANK = Cell()


class Screen:
    """A grid of cells written through a movable cursor in a current colour.

    Characters that fall outside the grid are dropped; writing past the
    right edge of a row continues at the start of the next row.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cursor = (0, 0)
        self.color = DEFAULT_COLOR
        self._cells = [[_BLANK] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` of row ``y``."""
        self.cursor = (x, y)

    def write(self, text: str) -> None:
        """Write ``text`` at the cursor in the current colour."""
        for ch in text:
            x, y = self.cursor
            if ch == "\n":
                self.cursor = (0, y + 1)
                continue
            inside = self._inside(x, y)
            if inside:
                self._cells[y][x] = Cell(ch, self.color)
            x += 1
            if inside and x == self.width:
                self.cursor = (0, y + 1)
            else:
                self.cursor = (x, y)

    def put(self, x: int, y: int, char: str | int) -> None:
        """Write a character, or a code page 437 code, at ``(x, y)``."""
        self.gotoxy(x, y)
        self.write(char if isinstance(char, str) else glyph(char))

    def set_color(self, color: int) -> None:
        """Set the attribute used for following writes."""
        self.color = color

    def set_colors(self, foreground: int, background: int) -> None:
        """Set the current colour from a foreground and a background."""
        self.set_color(attribute(foreground, background))

    def _cell(self, x: int, y: int) -> Cell:
        if not self._inside(x, y):
            raise IndexError(f"position ({x}, {y}) is outside a {self.width}x{self.height} screen")
        return self._cells[y][x]

    def char_at(self, x: int, y: int) -> str:
        """Return the character at ``(x, y)``."""
        return self._cell(x, y).char

    def color_at(self, x: int, y: int) -> int:
        """Return the attribute at ``(x, y)``."""
        return self._cell(x, y).color

    def clear(self) -> None:
        """Blank every cell and home the cursor."""
        self._cells = [[_BLANK] * self.width for _ in range(self.height)]
        self.cursor = (0, 0)

    def snapshot(self) -> tuple[tuple[Cell, ...], ...]:
        """Return an immutable copy of the whole screen."""
        return tuple(tuple(row) for row in self._cells)

    def restore(self, snapshot, x1: int, y1: int, x2: int, y2: int) -> None:
        """Copy the inclusive rectangle ``(x1, y1)``-``(x2, y2)`` back from ``snapshot``."""
        if len(snapshot) != self.height or any(len(row) != self.width for row in snapshot):
            raise ValueError("snapshot does not match the screen size")
        for y in range(max(y1, 0), min(y2, self.height - 1) + 1):
            for x in range(max(x1, 0), min(x2, self.width - 1) + 1):
                self._cells[y][x] = snapshot[y][x]

    def render(self) -> str:
        """Return the screen's characters, one line per row, trailing blanks removed."""
        return "\n".join("".join(cell.char for cell in row).rstrip() for row in self._cells)

    def render_ansi(self) -> str:
        """Return the screen with ANSI colour escapes, one line per row."""
        lines = []
        for row in self._cells:
            parts = []
            current = None
            for cell in row:
                if cell.color != current:
                    parts.append(_sgr(cell.color))
                    current = cell.color
                parts.append(cell.char)
            parts.append(_RESET)
            lines.append("".join(parts))
        return "\n".join(lines)


def color_swatch(screen: Screen) -> None:
    """Clear the screen and list the sixteen background colours, one per row."""
    screen.clear()
    for i in range(16):
        screen.set_color(15 * i + 15)
        screen.write(f"{i}\n")