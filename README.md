# advent

Solutions to Advent of Code puzzles from 2024 and 2025, shared grid helpers,
and a small command that sets up the files for a new day.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Solutions

Every solved day is a module with `part_one(text)` and `part_two(text)`, each
taking the puzzle input as a string and returning the answer as an integer.

- `advent.y2025`: days 1 to 5 (`d01` to `d05`). Parse failures raise
  `advent.y2025.errors.ParseError`, a `ValueError`.
- `advent.y2024`: days 1 to 16, 18, 19, 22 and 23.

```python
from advent.workspace import load_day_input
from advent.y2024 import d01

text = load_day_input(2024, 1)
print(d01.part_one(text), d01.part_two(text))
```

A few days take extra keyword arguments so smaller examples can be run:

- `advent.y2024.d14.part_one(text, width=101, height=103)`; `part_two(text, out=None, width=101, height=103)`
  draws every second up to 9999 to `out` (standard output by default) and
  returns the safety factor of the last frame.
- `advent.y2024.d18.part_one(text, size=71, count=1024)` and
  `part_two(text, size=71, start_count=1024)`.

Bad input raises `ValueError` (or a subclass).

## Grids

`advent.grid` holds the grid types the solutions share:

- `Grid.parse(text, cell=str)` builds a dense grid, indexed as
  `grid.grid[line][column]`, converting each character with `cell`;
  a `ValueError` from `cell` becomes `ParseGridError`.
- `HashGrid.parse(text, cell=str)` builds a sparse grid; characters that
  `cell` rejects with a `ValueError` are left out. It offers `get(x, y)`,
  `delete(x, y)`, `len()` and iteration over `(x, y, value)`.

Both print as `Grid:`, their rows, and their size.

## Setting up a day

The `advent` command, run from the workspace root, registers a day, downloads
its input with your session cookie and renders a solution file:

```
advent --year 2025 --day 6 -s placeholder
```

Replace `placeholder` with the value of your own `session` cookie. The options
are `-y/--year`, `-d/--day` and `-s` (session), all required. In the current
directory the command:

1. adds `from . import dNN` to `solutions/y<year>/__init__.py`, keeping its
   lines sorted (the file must already exist);
2. creates the folder `solutions/y<year>/dNN/` and writes the downloaded input
   to `input.txt` in it;
3. renders the Jinja template `templates/day.py.j2` with `year` and `day` into
   `solutions/y<year>/dNN.py`.

It exits with status 1 when a file, the download or the template fails. The
same steps are available as `advent.workspace.bootstrap_day(year, day,
session_id, root=".")`, with `append_day_mod`, `get_user_input`,
`template_day` and `load_day_input` for the single steps.

## What this package does not do

- No day template is shipped: `templates/day.py.j2` must be provided in the
  workspace before running `advent`.
- There is no command for running solutions; call the `part_one` and
  `part_two` functions from Python.
- Not every day of 2024 has a solution; only those listed above are included.