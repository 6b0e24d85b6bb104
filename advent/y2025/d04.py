"""Paper rolls a forklift can reach."""

from __future__ import annotations

from advent.grid import HashGrid
from advent.y2025.errors import ParseError

_MAX_NEIGHBORS = 4


def _roll(char: str) -> bool:
    if char == "@":
        return True
    raise ParseError(f"not a roll: {char!r}")


def neighbors(x: int, y: int) -> list[tuple[int, int]]:
    """The eight cells around ``(x, y)``."""
    return [
        (x + 1, y), (x - 1, y), (x + 1, y + 1), (x, y + 1),
        (x - 1, y + 1), (x + 1, y - 1), (x, y - 1), (x - 1, y - 1),
    ]


def _accessible(grid: HashGrid[bool], x: int, y: int) -> bool:
    occupied = sum(grid.get(i, j) is not None for i, j in neighbors(x, y))
    return occupied < _MAX_NEIGHBORS


def part_one(text: str) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    grid = HashGrid.parse(text, _roll)
    return sum(1 for x, y, _ in grid if _accessible(grid, x, y))


def part_two(text: str) -> int:
    """Count rolls removed by repeatedly taking every accessible roll."""
    grid = HashGrid.parse(text, _roll)
    removed = 0
    while True:
        removable = [(x, y) for x, y, _ in grid if _accessible(grid, x, y)]
        if not removable:
            return removed
        removed += len(removable)
        for x, y in removable:
            grid.delete(x, y)