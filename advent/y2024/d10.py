"""Scoring hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator

Position = tuple[int, int]
"""A cell as ``(row, column)``."""

_TRAILHEAD = 0
_PEAK = 9
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_DIGITS = "0123456789"


def parse_input(text: str) -> list[list[int]]:
    """Read a rectangular map of heights, one digit per cell."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    width = len(rows[0])
    grid = []
    for row in rows:
        if len(row) != width:
            raise ValueError("map lines differ in length")
        if any(char not in _DIGITS for char in row):
            raise ValueError(f"invalid height in line {row!r}")
        grid.append([int(char) for char in row])
    return grid


def _uphill(grid: list[list[int]], pos: Position) -> Iterator[Position]:
    row, col = pos
    height = grid[row][col]
    for dr, dc in _STEPS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] == height + 1:
            yield nr, nc


def trail_score(grid: list[list[int]], start: Position) -> int:
    """Number of distinct peaks reachable from ``start`` by gentle uphill steps."""
    seen = {start}
    stack = [start]
    peaks = 0
    while stack:
        pos = stack.pop()
        if grid[pos[0]][pos[1]] == _PEAK:
            peaks += 1
            continue
        for step in _uphill(grid, pos):
            if step not in seen:
                seen.add(step)
                stack.append(step)
    return peaks


def trail_rating(grid: list[list[int]], start: Position) -> int:
    """Number of distinct uphill trails from ``start`` to any peak."""
    if grid[start[0]][start[1]] == _PEAK:
        return 1
    return sum(trail_rating(grid, step) for step in _uphill(grid, start))


def _trailheads(grid: list[list[int]]) -> Iterator[Position]:
    for row, heights in enumerate(grid):
        for col, height in enumerate(heights):
            if height == _TRAILHEAD:
                yield row, col


def part_one(text: str) -> int:
    """Sum of the scores of every trailhead."""
    grid = parse_input(text)
    return sum(trail_score(grid, start) for start in _trailheads(grid))


def part_two(text: str) -> int:
    """Sum of the ratings of every trailhead."""
    grid = parse_input(text)
    return sum(trail_rating(grid, start) for start in _trailheads(grid))