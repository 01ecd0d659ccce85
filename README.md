# blockfall

The pieces and bookkeeping at the core of a falling-block puzzle game, in
plain Python with no runtime dependencies.

## Modules

### `blockfall.shapes`

- `BlockType`: the piece kinds `CUBE`, `TEE`, `RLEE`, `ZEE`, `MZEE`, `LLEE`,
  `LINE` and `EMPTY`.
- `BlockTexCode`: the texture of one cell. `a` to `l` are textures, `O` is an
  empty cell and `Z` marks a part that a clearing block must leave alone.
- `tex_char(code)` returns the texture letter for a code. It raises
  `KeyError` for `BlockTexCode.Z`.
- `shape_for(block_type, orientation)` returns the standard `Shape` of a piece
  in orientation 0–3. `odd_ball_shape_for` returns an alternative,
  broken-apart set of shapes. Any other orientation raises `ValueError`.
- `Shape` holds a 4×4 `parts` grid and the bounding `height` and `width`.
  Both are `None` for the cube and the empty piece. `filled_cells()` lists
  the `(x, y)` of every non-empty part.

### `blockfall.block`

`Block(x, y, block_type, clear)` is a piece on the board. It offers:

- the read-only properties `rect` (a frozen `Rect` with `x`, `y`, `w`, `h`),
  `block_type`, `clear` and `orientation`;
- `move_down()`, `move_left()` and `move_right()`;
- `reset()`, which returns to the start position (4, 0), and
  `debug_reset_pos()`, which moves back to row 0;
- `rotate(clockwise)`, which turns a quarter turn and returns `False` for the
  cube, which has only one orientation;
- `render_part(x, y)` and `block_parts()` to read the grid;
- `width()` and `height()`, the columns and rows the piece really fills, and
  `width_at_height(row)` and `height_at_width(col)`, the number of filled
  parts in one row or column;
- `set_h()` and `set_w()` to override the bounding size.

A block made with `clear=True` has every part empty. It is used to wipe the
cells a moving piece has left. `set_clear()` and `copy()` both reshape the
block in orientation 0.

### `blockfall.rand_int`

`RandInt(low, high, seed=None)` is a callable that returns uniform integers
in `[low, high]`. Give a seed for repeatable results. `low > high` raises
`ValueError`.

### `blockfall.clock`

`Clock(ticks=None)` measures milliseconds since it started and leaves out the
time spent paused. `ticks` is any callable that returns the current time in
milliseconds. It offers `pause(paused)`, `reset()`,
`milliseconds_from_start()`, `seconds_from_start()` and the `active`
property.

### `blockfall.renderables`

- `Renderable` is an abstract base with a `visible` flag and an abstract
  `render(renderer, debug)`.
- `Renderables` is an ordered collection with `append()`,
  `render_all(renderer, debug)`, `len()` and iteration.
- `Color` is an enum of named colours.

### `blockfall.highscores`

`HighScores(path="highscores.csv")` keeps `HighScoreEntry(score, name, level,
lines)` rows in score order. Among equal scores, the most recently added
ranks highest. It offers:

- `read()`, which loads the file and returns the number of rows. A missing
  file gives an empty table, and a malformed line raises `ValueError`.
- `write()`, which saves `score,name,lines,level` lines, lowest score first,
  with commas in names turned into periods.
- `push()`, which adds an entry. `set_high_score()` adds an entry, writes
  the file and sets `clean` to `False`.
- `is_new_high(score)`, which returns the 1-based row that a score would
  take on the 15-row display, or 0.
- `entries()`, which returns the rows best first.
- `score_lines(placeholder=None, placeholder_row=0)`, which returns the
  title line and up to 15 formatted rows. It can include a placeholder
  entry at a given row.

## Example

```python
from blockfall.block import Block
from blockfall.shapes import BlockType
from blockfall.rand_int import RandInt

piece = Block(4, 0, BlockType.TEE, False)
piece.rotate(True)
piece.move_down()
print(piece.width(), piece.height())  # 3 2

roll = RandInt(0, 6, seed=42)
print(roll())
```

```python
from blockfall.highscores import HighScores

scores = HighScores("highscores.csv")
scores.read()
if scores.is_new_high(1200):
    scores.set_high_score(1200, "Ada", 3, 25)
for line in scores.score_lines():
    print(line)
```

## What this package does not do

It has no game board, no line clearing or scoring rules and no game loop. It
also has no window, drawing, sound or keyboard and gamepad input, and no
command to start a game. `Renderable` and `Renderables` only define the
drawing interface; nothing here draws.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```