"""The full-screen drawing of a five-vertex graph, its table of shortest paths and its matrix."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from condraw.graph import Graph, VERTEX_COUNT
from condraw.graph_art import (
    draw_borders,
    draw_connections_title,
    draw_node_box,
    draw_title,
)
from condraw.rectangle import draw_box
from condraw.screen import Screen, glyph

SCREEN_SIZE = (171, 60)
VERTEX_LETTERS = "ABCDE"
ESCAPE = "\x1b"

TABLE_POS = (119, 30)
MATRIX_POS = (129, 48)
VALIDATION_POS = (75, 27)
PROMPT_POS = (119, 40)

LISTING_X = 125
LISTING_TOP = 8
SWATCH_X = 145
SWATCH_LENGTH = 5

WHITE = 15
DEFAULT_COLOR = 7
RED = 12
BLACK_ON_WHITE = 240
BLUE_ON_WHITE = 249

HORIZONTAL_LINE = 205
VERTICAL_LINE = 186

_TABLE_WIDTH = 46
_TABLE_HEIGHT = 9
_TABLE_COLUMNS = (8, 26, 35)


@dataclass(frozen=True)
class _EdgeStyle:
    color: int
    lines: tuple[tuple[int, int, int, bool], ...]  # x, y, length, horizontal
    corners: tuple[tuple[int, int, int], ...]  # x, y, code
    box: tuple[int, int]


def _h(x: int, y: int, length: int) -> tuple[int, int, int, bool]:
    return (x, y, length, True)


def _v(x: int, y: int, length: int) -> tuple[int, int, int, bool]:
    return (x, y, length, False)


_EDGES: dict[tuple[int, int], _EdgeStyle] = {
    (0, 1): _EdgeStyle(
        13,
        (_h(40, 18, 14), _h(40, 19, 14), _v(53, 19, 14), _v(54, 19, 14)),
        ((54, 18, 187), (53, 19, 187)),
        (50, 20),
    ),
    (0, 2): _EdgeStyle(
        6,
        (_h(65, 18, 15), _h(65, 19, 15), _v(64, 19, 14), _v(65, 19, 14)),
        ((64, 18, 201), (65, 19, 201)),
        (66, 20),
    ),
    (0, 3): _EdgeStyle(
        9,
        (_h(30, 51, 22), _h(30, 52, 24), _v(52, 43, 8), _v(53, 43, 10)),
        ((52, 51, 188), (53, 52, 188)),
        (49, 46),
    ),
    (0, 4): _EdgeStyle(
        5,
        (_h(68, 51, 22), _h(66, 52, 24), _v(67, 43, 8), _v(66, 43, 10)),
        ((67, 51, 200), (66, 52, 200)),
        (68, 46),
    ),
    (1, 2): _EdgeStyle(4, (_h(40, 15, 40), _h(40, 16, 40)), (), (59, 12)),
    (1, 3): _EdgeStyle(15, (_v(23, 23, 25), _v(24, 23, 25)), (), (25, 34)),
    (1, 4): _EdgeStyle(
        11,
        (
            _v(29, 11, 2),
            _v(30, 11, 2),
            _h(30, 10, 75),
            _h(31, 11, 75),
            _v(105, 11, 37),
            _v(104, 11, 37),
        ),
        ((29, 10, 201), (30, 11, 201), (105, 10, 187), (104, 11, 187)),
        (101, 12),
    ),
    (2, 3): _EdgeStyle(
        12,
        (
            _h(15, 8, 75),
            _h(14, 9, 76),
            _v(90, 9, 4),
            _v(89, 9, 4),
            _v(14, 9, 39),
            _v(15, 9, 39),
        ),
        ((14, 8, 201), (15, 9, 201), (90, 8, 187), (89, 9, 187)),
        (16, 10),
    ),
    (2, 4): _EdgeStyle(1, (_v(96, 23, 25), _v(95, 23, 25)), (), (92, 34)),
    (3, 4): _EdgeStyle(10, (_h(30, 54, 60), _h(30, 55, 60)), (), (59, 56)),
}


def _letter(index: int) -> str:
    return VERTEX_LETTERS[index]


class GraphView:
    """Draws a five-vertex graph, its connections, a shortest-path table and the matrix.

    The table is computed from ``start``, which keys A to E change.
    """

    def __init__(self, graph: Graph, screen: Screen | None = None) -> None:
        if graph.size != VERTEX_COUNT:
            raise ValueError(f"the drawing has room for {VERTEX_COUNT} vertices, the graph has {graph.size}")
        self.graph = graph
        self.screen = screen if screen is not None else Screen(*SCREEN_SIZE)
        self.start = 0
        self.listing_row = LISTING_TOP

    def _line(self, x: int, y: int, length: int, horizontal: bool) -> None:
        for i in range(length):
            if horizontal:
                self.screen.put(x + i, y, HORIZONTAL_LINE)
            else:
                self.screen.put(x, y + i, VERTICAL_LINE)

    def _text(self, x: int, y: int, text: str) -> None:
        self.screen.gotoxy(x, y)
        self.screen.write(text)

    def draw(self) -> None:
        """Draw the whole picture and the prompt for choosing a start vertex."""
        self.listing_row = LISTING_TOP
        draw_borders(self.screen)
        draw_connections_title(self.screen)
        draw_title(self.screen)
        self.draw_validation(*VALIDATION_POS)
        self.draw_table(self.start, *TABLE_POS)
        self.draw_matrix(*MATRIX_POS)
        for letter in VERTEX_LETTERS:
            draw_node_box(self.screen, letter)
        for a, b in _EDGES:
            self.draw_edge(a, b)
        self._draw_prompt()

    def draw_edge(self, a: int, b: int) -> bool:
        """Draw the connector between vertices ``a`` and ``b`` if both directions carry weight.

        Either way a line saying whether they are connected is added to the
        connection list. Returns whether the connector was drawn.
        """
        if a == b:
            raise ValueError(f"vertex {a} cannot be connected to itself")
        for v in (a, b):
            if not 0 <= v < VERTEX_COUNT:
                raise IndexError(f"vertex {v} is outside 0..{VERTEX_COUNT - 1}")
        a, b = min(a, b), max(a, b)
        matrix = self.graph.matrix
        weight = matrix[a][b]
        connected = weight != 0 and matrix[b][a] != 0
        s = self.screen
        row = self.listing_row
        name = f"{_letter(a)} is {'' if connected else 'NOT '}connected to {_letter(b)}"
        if connected:
            style = _EDGES[(a, b)]
            s.set_color(style.color)
            for line in style.lines:
                self._line(*line)
            for x, y, code in style.corners:
                s.put(x, y, code)
            bx, by = style.box
            s.set_color(WHITE)
            draw_box(s, bx, by, len(str(weight)) + 1, 2)
            s.set_color(style.color)
            self._text(bx + 1, by + 1, str(weight))
            s.set_color(WHITE)
            self._text(LISTING_X, row, name)
            s.set_color(style.color)
            self._line(SWATCH_X, row, SWATCH_LENGTH, True)
            s.write(f" {weight}")
        else:
            s.set_color(WHITE)
            self._text(LISTING_X, row, name)
        self.listing_row += 2
        return connected

    def draw_table(self, start: int, x: int = TABLE_POS[0], y: int = TABLE_POS[1]) -> None:
        """Draw the table of shortest distances, previous vertices and paths from ``start``.

        Vertices that cannot be reached show ``-`` as their distance and no path.
        """
        entries = self.graph.shortest_paths(start)
        s = self.screen
        s.set_color(RED)
        draw_box(s, x, y, _TABLE_WIDTH, _TABLE_HEIGHT)
        s.set_color(BLACK_ON_WHITE)
        self._text(x + 1, y + 1, "        Shortest Distance Previous           ")
        self._text(x + 1, y + 2, "Vertex:  From Start (")
        s.set_color(BLUE_ON_WHITE)
        s.write(_letter(start))
        s.set_color(BLACK_ON_WHITE)
        s.write("):  Vertex:  Full Path:")
        for entry in entries:
            row_y = y + 4 + entry.vertex
            self._text(x + 1, row_y, " " * 45)
            distance = str(entry.distance) if entry.reachable else "-"
            padding = " " * max(0, 13 - len(distance))
            self._text(x + 1, row_y, f"   {entry.name}            {distance}{padding}")
            if entry.vertex != start and entry.reachable:
                s.write(f"{_letter(entry.previous)}     ")
                s.write("".join(f"{_letter(v)} " for v in entry.path))
        s.set_color(RED)
        self._text(x, y + 3, glyph(195) + glyph(196) * 45 + glyph(180))
        for column in _TABLE_COLUMNS:
            cx = x + column
            s.put(cx, y, 194)
            for i in range(8):
                s.put(cx, y + 1 + i, 179)
            s.put(cx, y + 3, 197)
            s.put(cx, y + 9, 193)

    def draw_matrix(self, x: int = MATRIX_POS[0], y: int = MATRIX_POS[1]) -> None:
        """Draw the adjacency matrix with lettered rows and columns."""
        s = self.screen
        s.set_color(WHITE)
        self._text(x + 5, y, "Adjacency Matrix: ")
        s.set_color(9)
        self._text(x + 2, y + 1, "    ".join(VERTEX_LETTERS))
        for i, letter in enumerate(VERTEX_LETTERS):
            self._text(x, y + 3 + i, letter)
        s.set_color(RED)
        draw_box(s, x + 1, y + 2, 25, 6)
        s.set_color(BLACK_ON_WHITE)
        for i, row in enumerate(self.graph.matrix):
            s.gotoxy(x + 2, y + 3 + i)
            for j, weight in enumerate(row):
                text = str(weight)
                width = 4 if j == len(row) - 1 else 5
                s.write(text + " " * max(0, width - len(text)))
        s.set_color(DEFAULT_COLOR)

    def draw_validation(self, x: int = VALIDATION_POS[0], y: int = VALIDATION_POS[1]) -> list[tuple[int, int]]:
        """Report each row's first asymmetric weight at ``(x, y)`` and return those pairs."""
        pairs = self.graph.asymmetric_pairs()
        for i, j in pairs:
            self.screen.set_color(RED)
            self._text(x, y, "Invalid adjacency matrix:")
            self._text(x, y + 1, f"[{i}][{j}] != [{j}][{i}].")
            self.screen.set_color(DEFAULT_COLOR)
        return pairs

    def _draw_prompt(self) -> None:
        s = self.screen
        x, y = PROMPT_POS
        s.set_color(WHITE)
        self._text(x, y, "The current starting vertex is ")
        s.set_color(9)
        s.write(_letter(self.start))
        s.set_color(WHITE)
        s.write(".")
        self._text(x, y + 1, "Select a new vertex ")
        s.set_color(10)
        s.write("(press the corresponding key)")
        s.set_color(WHITE)
        self._text(x, y + 2, "to see the above shortest path table change, or ")
        self._text(x, y + 3, "press ESC to exit the program")

    def select_start(self, key: str) -> bool:
        """Handle one key: A to E (any case) picks a new start, ESC ends.

        Returns False once ESC is pressed; other keys are ignored.
        """
        if key == ESCAPE:
            x, y = PROMPT_POS
            self._text(x, y + 5, "Exiting program. ")
            return False
        if len(key) == 1:
            index = VERTEX_LETTERS.find(key.upper())
            if index >= 0:
                self.start = index
                self.draw_table(index, *TABLE_POS)
                self._draw_prompt()
        return True


def main(argv: list[str] | None = None) -> int:
    """Draw the graph read from a matrix file, then change the start vertex from keys on stdin."""
    parser = argparse.ArgumentParser(prog="condraw-graph", description="Draw a five-vertex weighted graph.")
    parser.add_argument("matrix", help="file holding 25 whitespace-separated weights")
    parser.add_argument("--color", action="store_true", help="emit ANSI colours")
    args = parser.parse_args(argv)

    try:
        graph = Graph.from_file(args.matrix)
        view = GraphView(graph)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    def show() -> None:
        print(view.screen.render_ansi() if args.color else view.screen.render())

    view.draw()
    show()
    while True:
        key = sys.stdin.read(1)
        if not key:
            break
        if key in "\r\n":
            continue
        going = view.select_start(key)
        show()
        if not going:
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())