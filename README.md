# condraw

Drawing with characters on a console-sized grid. Everything is drawn onto an
in-memory `Screen` of cells. A cell holds a character and a colour attribute
(16 × background + foreground). You can read a screen back cell by cell,
render it as plain text, or render it with ANSI colour escapes.

## Modules

- `condraw.screen`: `Screen` and `Cell`. A screen has a cursor and a current
  colour (`gotoxy`, `write`, `put`, `set_color`, `set_colors`). You can read
  cells back with `char_at` and `color_at`, take a `snapshot`, `restore` a
  rectangle from a snapshot, and `clear` the screen. `render` gives plain text
  and `render_ansi` gives text with colour escapes. Writes outside the grid are
  dropped. `glyph(code)` maps a code page 437 code to its character.
  `attribute(foreground, background)` builds a colour attribute.
  `color_swatch(screen)` lists the sixteen background colours.
- `condraw.rectangle`: the `Rectangle` dataclass is a filled or hollow block
  of a symbol, with centred text. `draw` draws it and `erase` covers it with
  black blanks. `draw_path` moves it one cell at a time along a path such as
  `"R05D03L02"`, and `implode` shrinks it away. Both take a `sleep` callable.
  `parse_path` splits a path into `(direction, steps)` pairs. `draw_frame`
  draws a rectangle outline in a symbol, and `draw_box` draws a single-line
  box.
- `condraw.connect`: `link(screen, x1, y1, x2, y2)` draws an elbow connector
  between two points that share neither a row nor a column.
- `condraw.shapes`: `Shapes` draws a flat sequence of symbol codes as a grid
  and gives each value its own colour (`map_value_to_color`, `print_symbol`,
  `display_shape`). `draw_circle` draws a circle of `*`, stretched to look
  round in a console font.
- `condraw.textart`: `TextArt` shows lines of text in a box. One row is
  highlighted, and `color_next` and `color_previous` move it, wrapping at the
  ends. It can be built from a file with `TextArt.from_file`.
- `condraw.bintree`: `BinaryTree` is a binary search tree that places each node
  for drawing as it is inserted. `draw` draws it with boxes and connectors.
  It also has `clear`, `set_root`, `is_full` and `is_complete`; the last two
  look at the nodes along the root's right spine.
- `condraw.editor`: `LineEditor` holds rows of letters with a cursor. It takes
  the commands `A x` (add after the cursor), `NL` (next row), `B` and `F` (move
  the cursor), `BS` (backspace), `DL x` (delete a letter from the current
  row), `DX x` (delete a letter from every row) and `DR` (delete the current
  row). `parse_script` turns script text into commands. `run` returns the
  rendered text after each command.
- `condraw.graph`: `Graph` is a square adjacency matrix of integer weights,
  with 0 meaning no edge, for up to 26 lettered vertices. `Graph.from_file`
  reads a 5×5 matrix. It provides Dijkstra's search (`shortest_paths`, which
  returns `PathEntry` values), `edges`, and a symmetry check
  (`asymmetric_pairs`). `format_path` spells a parent list as letters.
- `condraw.graph_art`: the fixed frames, block-letter banners, node boxes A to
  E and picture art used around the graph drawing.
- `condraw.graph_view`: `GraphView` draws a five-vertex graph on a 171×60
  screen. The drawing has the node boxes, the weighted connectors, a list of
  connections, the shortest-path table, the matrix and any symmetry errors.
  `select_start(key)` changes the start vertex.

## Example

```python
from condraw.screen import Screen
from condraw.rectangle import Rectangle
from condraw.graph import Graph

screen = Screen(80, 25)
Rectangle(2, 2, 20, 5, "#", hollow=True, text="hello").draw(screen)
print(screen.render())

graph = Graph([
    [0, 4, 1, 0, 0],
    [4, 0, 2, 5, 0],
    [1, 2, 0, 8, 3],
    [0, 5, 8, 0, 6],
    [0, 0, 3, 6, 0],
])
for entry in graph.shortest_paths(0):
    print(entry.name, entry.distance, entry.path)
```

## Commands

Replay a line-editor script. The script holds whitespace-separated commands,
such as `A x`, `NL` or `DL x`. After each command the script and the current
text are printed. Use `--delay` to set the seconds between frames and `--color`
to get ANSI colours:

```
condraw-editor script.txt --delay 0
```

Draw a graph from a file that holds 25 whitespace-separated weights. After the
drawing, each character read from standard input is handled as a key: A to E
picks a new start vertex and redraws, and ESC ends. `--color` emits ANSI
colours:

```
condraw-graph matrix.txt
```

## What it does not do

Everything is drawn into memory and printed as whole frames. The package does
not position the cursor of a real terminal, redraw in place or read keys
without buffering. Keys for `condraw-graph` come from standard input, so an
interactive terminal usually needs Enter after each key. There is no mouse
input, image display or sound.

## Tests

```
pip install -e ".[test]"
pytest
```