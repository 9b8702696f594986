"""A row-based text editor driven by a script of one-letter edits."""

from __future__ import annotations

import argparse
import re
import sys
import time
from pathlib import Path
from typing import Iterable

from condraw.screen import Screen
from condraw.textart import TextArt

DEFAULT_ROWS = 10
VISIBLE_ROWS = 8
CURSOR_MARK = "|"

_NEEDS_ARGUMENT = frozenset({"A", "DL", "DX"})
_WORD = re.compile(r"\s*(\S+)")
_LETTER = re.compile(r"\s*(\S)")


def parse_script(text: str) -> list[tuple[str, str | None]]:
    """Split a script into (command, letter) pairs.

    Commands are whitespace-separated words; ``A``, ``DL`` and ``DX`` take the
    next non-blank character as their letter.
    """
    commands: list[tuple[str, str | None]] = []
    pos = 0
    while (match := _WORD.match(text, pos)) is not None:
        command = match.group(1)
        pos = match.end()
        argument = None
        if command in _NEEDS_ARGUMENT:
            letter = _LETTER.match(text, pos)
            if letter is None:
                raise ValueError(f"command {command} needs a letter")
            argument = letter.group(1)
            pos = letter.end()
        commands.append((command, argument))
    return commands


class LineEditor:
    """Rows of letters with a cursor that sits on a letter or before a row's start.

    The cursor is ``(row, index)``; index ``-1`` means before the first letter.
    New letters go after the cursor. Only the first eight rows are shown and
    take part in letter deletion.
    """

    def __init__(self, rows: int = DEFAULT_ROWS) -> None:
        if rows <= 0:
            raise ValueError(f"row count must be positive, got {rows}")
        self.rows: list[list[str]] = [[] for _ in range(rows)]
        self.current_row = 0
        self.cursor: tuple[int, int] | None = None

    def apply(self, command: str, argument: str | None = None) -> None:
        """Apply one command; unknown commands are ignored."""
        if command in _NEEDS_ARGUMENT:
            if argument is None or len(argument) != 1:
                raise ValueError(f"command {command} needs a single letter, got {argument!r}")
        handler = {
            "NL": self._new_line,
            "A": self._add,
            "B": self._back,
            "F": self._forward,
            "DL": self._delete_in_row,
            "DX": self._delete_everywhere,
            "DR": self._delete_row,
            "BS": self._backspace,
        }.get(command)
        if handler is None:
            return
        if command in _NEEDS_ARGUMENT:
            handler(argument)
        else:
            handler()

    def run(self, commands: Iterable[tuple[str, str | None]]) -> list[str]:
        """Apply commands in order and return the display after each one."""
        frames = []
        for command, argument in commands:
            self.apply(command, argument)
            frames.append(self.render())
        return frames

    def lines(self) -> list[str]:
        """Return the text of every row."""
        return ["".join(row) for row in self.rows]

    def render(self) -> str:
        """Return the visible non-empty rows, with the cursor mark before the cursor's letter."""
        out = []
        for i, row in enumerate(self.rows[:VISIBLE_ROWS]):
            if not row:
                continue
            text = "".join(row)
            if self.cursor is not None and self.cursor[0] == i and self.cursor[1] >= 1:
                k = self.cursor[1]
                text = text[:k] + CURSOR_MARK + text[k:]
            out.append(text)
        return "\n".join(out)

    def _new_line(self) -> None:
        if self.current_row + 1 >= len(self.rows):
            raise ValueError(f"no row below row {self.current_row}")
        self.current_row += 1

    def _cursor_at_end(self) -> bool:
        row, index = self.cursor
        return index == len(self.rows[row]) - 1

    def _add(self, letter: str) -> None:
        row = self.rows[self.current_row]
        if not row or self.cursor is None or self._cursor_at_end():
            row.append(letter)
            self.cursor = (self.current_row, len(row) - 1)
        else:
            r, k = self.cursor
            self.rows[r].insert(k + 1, letter)
            self.cursor = (r, k + 1)

    def _back(self) -> None:
        if self.cursor is not None and self.cursor[1] >= 0:
            self.cursor = (self.cursor[0], self.cursor[1] - 1)

    def _forward(self) -> None:
        if self.cursor is not None:
            r, k = self.cursor
            if k < len(self.rows[r]) - 1:
                self.cursor = (r, k + 1)

    def _delete_letter(self, index: int, letter: str) -> None:
        if index >= VISIBLE_ROWS:
            return
        row = self.rows[index]
        if self.cursor is not None and self.cursor[0] == index and self.cursor[1] >= 0:
            k = self.cursor[1]
            before = sum(ch != letter for ch in row[:k])
            self.cursor = (index, before if row[k] != letter else before - 1)
        row[:] = [ch for ch in row if ch != letter]

    def _delete_in_row(self, letter: str) -> None:
        self._delete_letter(self.current_row, letter)

    def _delete_everywhere(self, letter: str) -> None:
        for index in range(len(self.rows)):
            self._delete_letter(index, letter)

    def _delete_row(self) -> None:
        i = self.current_row
        del self.rows[i]
        self.rows.append([])
        if self.cursor is not None:
            r, k = self.cursor
            if r == i:
                self.cursor = None
            elif r > i:
                self.cursor = (r - 1, k)
        if self.rows[i]:
            self.cursor = (i, len(self.rows[i]) - 1)

    def _backspace(self) -> None:
        if self.cursor is None or self.cursor[0] != self.current_row or self.cursor[1] < 1:
            raise ValueError("nothing before the cursor to delete")
        r, k = self.cursor
        del self.rows[r][k - 1]
        self.cursor = (r, k - 1)


def main(argv: list[str] | None = None) -> int:
    """Replay an edit script, showing the script and the text after each command."""
    parser = argparse.ArgumentParser(prog="condraw-editor", description="Replay a line-editor script.")
    parser.add_argument("script", help="file of editor commands")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between frames")
    parser.add_argument("--color", action="store_true", help="emit ANSI colours")
    args = parser.parse_args(argv)

    try:
        commands = parse_script(Path(args.script).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    editor = LineEditor()
    screen = Screen()
    art = TextArt.from_file(screen, args.script, 30, 2, 2, 0, 2, 0)
    for step, (command, argument) in enumerate(commands):
        try:
            editor.apply(command, argument)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        screen.clear()
        screen.gotoxy(0, 3)
        for line in editor.render().splitlines():
            screen.write(line + "\n")
        art.display()
        screen.set_color(7)
        screen.gotoxy(23, 2 + step)
        screen.write("--->")
        print(screen.render_ansi() if args.color else screen.render())
        print()
        if args.delay > 0:
            time.sleep(args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())