"""A framed block of text lines with one highlighted row."""

from __future__ import annotations

from pathlib import Path

from condraw.rectangle import draw_box
from condraw.screen import Screen


class TextArt:
    """Lines of text shown in a box at ``(x, y)`` with a movable highlight."""

    def __init__(self, screen: Screen, lines, x, y, fore, back, highlighted_fore, highlighted_back) -> None:
        self.screen = screen
        self.lines = list(lines)
        self.x = x
        self.y = y
        self.fore = fore
        self.back = back
        self.highlighted_fore = highlighted_fore
        self.highlighted_back = highlighted_back
        self.width = max((len(line) for line in self.lines), default=0)
        self.row = 0

    @classmethod
    def from_file(cls, screen, path, x, y, fore, back, highlighted_fore, highlighted_back) -> "TextArt":
        """Build from the lines of a text file."""
        text = Path(path).read_text(encoding="utf-8")
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(screen, lines, x, y, fore, back, highlighted_fore, highlighted_back)

    def _write_row(self, entry: int, highlighted: bool) -> None:
        if highlighted:
            self.screen.set_colors(self.highlighted_fore, self.highlighted_back)
        else:
            self.screen.set_colors(self.fore, self.back)
        self.screen.gotoxy(self.x, self.y + entry)
        self.screen.write(self.lines[entry])

    def display(self, select_first: bool = True) -> None:
        """Draw the frame and every line, highlighting the first line if asked."""
        self.screen.set_colors(self.fore, self.back)
        draw_box(self.screen, self.x - 1, self.y - 1, self.width + 2, len(self.lines) + 2)
        for i, line in enumerate(self.lines):
            self.screen.gotoxy(self.x, self.y + i)
            self.screen.write(line)
        if select_first:
            self.color_row(0)

    def color_row(self, entry: int) -> None:
        """Redraw line ``entry`` in the highlight colours."""
        self._write_row(entry, highlighted=True)

    def color_next(self) -> None:
        """Move the highlight down one line, wrapping to the first."""
        self._write_row(self.row, highlighted=False)
        self.row = (self.row + 1) % len(self.lines)
        self._write_row(self.row, highlighted=True)

    def color_previous(self) -> None:
        """Move the highlight up one line, wrapping to the last."""
        self._write_row(self.row, highlighted=False)
        self.row = (self.row - 1) % len(self.lines)
        self._write_row(self.row, highlighted=True)

    def current(self) -> str:
        """Return the highlighted line."""
        return self.lines[self.row]

    def __len__(self) -> int:
        return len(self.lines)