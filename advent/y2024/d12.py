"""Fencing garden regions by perimeter and by number of sides."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from advent.grid import Grid

Position = tuple[int, int]

_SIDES = ((1, 0), (0, 1), (-1, 0), (0, -1))
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_FULL_FENCE = 4


def count_sides(zone: set[Position]) -> int:
    """Number of straight sides of a region, counted through its corners."""
    corners = 0
    for x, y in zone:
        for (ax, ay), (bx, by) in zip(_SIDES, _SIDES[1:] + _SIDES[:1]):
            first = (x + ax, y + ay) in zone
            second = (x + bx, y + by) in zone
            if not first and not second:
                corners += 1
            elif first and second and (x + ax + bx, y + ay + by) not in zone:
                corners += 1
    return corners


def _neighbors(grid: Grid[str], pos: Position) -> list[Position]:
    x, y = pos
    plant = grid.grid[x][y]
    found = []
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < len(grid.grid) and 0 <= ny < len(grid.grid[nx]):
            if grid.grid[nx][ny] == plant:
                found.append((nx, ny))
    return found


def _region(grid: Grid[str], start: Position, visited: set[Position]) -> tuple[set[Position], int]:
    zone: set[Position] = set()
    perimeter = 0
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos in visited:
            continue
        visited.add(pos)
        zone.add(pos)
        neighbors = _neighbors(grid, pos)
        perimeter += _FULL_FENCE - len(neighbors)
        queue.extend(neighbors)
    return zone, perimeter


def _regions(text: str) -> Iterator[tuple[set[Position], int]]:
    grid = Grid.parse(text)
    visited: set[Position] = set()
    for x, row in enumerate(grid.grid):
        for y in range(len(row)):
            if (x, y) not in visited:
                yield _region(grid, (x, y), visited)


def part_one(text: str) -> int:
    """Total fence price: area times perimeter for each region."""
    return sum(len(zone) * perimeter for zone, perimeter in _regions(text))


def part_two(text: str) -> int:
    """Total discounted price: area times number of sides for each region."""
    return sum(len(zone) * count_sides(zone) for zone, _ in _regions(text))