"""Escaping a memory space while bytes fall and corrupt it."""

from __future__ import annotations

from collections import deque

from advent.grid import Grid

Position = tuple[int, int]

SIZE = 71
BYTES = 1024
EMPTY = "."
CORRUPTED = "#"
_STEPS = ((0, 1), (1, 0), (-1, 0), (0, -1))


def init_empty_grid(height: int, width: int) -> Grid[str]:
    """A grid of ``height`` rows by ``width`` columns with nothing corrupted."""
    return Grid([[EMPTY] * width for _ in range(height)], height, width)


def read_bytes(text: str, n: int, grid: Grid[str]) -> None:
    """Corrupt the cells of the first ``n`` ``x,y`` lines of ``text``."""
    for line in text.splitlines()[:n]:
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"invalid coordinates {line!r}")
        x, y = int(parts[0]), int(parts[1])
        if not (0 <= x < len(grid.grid) and 0 <= y < len(grid.grid[x])):
            raise IndexError(f"coordinates {line!r} are outside the memory space")
        grid.grid[x][y] = CORRUPTED


def shortest_path(grid: Grid[str], start: Position, end: Position) -> int | None:
    """Fewest steps from ``start`` to ``end`` over uncorrupted cells, or None."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if (nx, ny) in dist:
                continue
            if 0 <= nx < len(grid.grid) and 0 <= ny < len(grid.grid[nx]):
                if grid.grid[nx][ny] == EMPTY:
                    dist[(nx, ny)] = dist[(x, y)] + 1
                    queue.append((nx, ny))
    return dist.get(end)


def _path_after(text: str, size: int, count: int) -> int | None:
    grid = init_empty_grid(size, size)
    read_bytes(text, count, grid)
    return shortest_path(grid, (0, 0), (size - 1, size - 1))


def part_one(text: str, size: int = SIZE, count: int = BYTES) -> int:
    """Fewest steps to the exit once ``count`` bytes have fallen."""
    steps = _path_after(text, size, count)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part_two(text: str, size: int = SIZE, start_count: int = BYTES) -> int:
    """Number of fallen bytes at which the exit first becomes unreachable, or 0."""
    total = len(text.splitlines())
    for count in range(start_count, total + 1):
        if _path_after(text, size, count) is None:
            return count
    return 0