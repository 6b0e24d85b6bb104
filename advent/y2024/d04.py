"""Word search for XMAS and crossed MAS."""

from __future__ import annotations

from enum import Enum

from advent.grid import Grid

_WORD_TAIL = "MAS"
_MIN_CROSSES = 2


class Direction(Enum):
    """The eight directions, valued by their step."""

    N = (0, -1)
    NW = (-1, -1)
    NE = (1, -1)
    E = (1, 0)
    W = (-1, 0)
    S = (0, 1)
    SE = (1, 1)
    SW = (-1, 1)


# For each diagonal direction: the cell that must hold M, then the one holding S.
_CROSS = {
    Direction.NE: ((-1, 1), (1, -1)),
    Direction.NW: ((-1, -1), (1, 1)),
    Direction.SE: ((1, 1), (-1, -1)),
    Direction.SW: ((1, -1), (-1, 1)),
}


def _cell(grid: Grid[str], x: int, y: int) -> str | None:
    if 0 <= x < grid.max_x and 0 <= y < grid.max_y:
        return grid.grid[x][y]
    return None


def _spells_xmas(grid: Grid[str], x: int, y: int, direction: Direction) -> bool:
    dx, dy = direction.value
    return all(
        _cell(grid, x + dx * step, y + dy * step) == char
        for step, char in enumerate(_WORD_TAIL, 1)
    )


def _is_cross(grid: Grid[str], x: int, y: int) -> bool:
    crosses = sum(
        _cell(grid, x + mx, y + my) == "M" and _cell(grid, x + sx, y + sy) == "S"
        for (mx, my), (sx, sy) in _CROSS.values()
    )
    return crosses >= _MIN_CROSSES


def part_one(text: str) -> int:
    """Count XMAS in every direction."""
    grid = Grid.parse(text)
    return sum(
        1
        for x, row in enumerate(grid.grid)
        for y, char in enumerate(row)
        if char == "X"
        for direction in Direction
        if _spells_xmas(grid, x, y, direction)
    )


def part_two(text: str) -> int:
    """Count the A cells at the centre of two crossed MAS."""
    grid = Grid.parse(text)
    return sum(
        1
        for x, row in enumerate(grid.grid)
        for y, char in enumerate(row)
        if char == "A" and _is_cross(grid, x, y)
    )