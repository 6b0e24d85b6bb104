"""Finding the cheapest paths through a reindeer maze."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from advent.grid import Grid

Position = tuple[int, int]
"""A cell as ``(line, column)``."""

STEP_COST = 1
TURN_COST = 1000
_WALL = "#"
_START = "S"
_EXIT = "E"
_CELLS = "#.ES"


class Heading(Enum):
    """Where the reindeer faces, valued by its ``(line, column)`` step."""

    N = (-1, 0)
    S = (1, 0)
    W = (0, -1)
    E = (0, 1)

    def rotate_left(self) -> Heading:
        """The heading after a quarter turn counterclockwise."""
        return _LEFT[self]

    def rotate_right(self) -> Heading:
        """The heading after a quarter turn clockwise."""
        return _RIGHT[self]


_LEFT = {Heading.E: Heading.N, Heading.N: Heading.W, Heading.W: Heading.S, Heading.S: Heading.E}
_RIGHT = {Heading.E: Heading.S, Heading.N: Heading.E, Heading.W: Heading.N, Heading.S: Heading.W}


@dataclass(frozen=True)
class State:
    """A position in the maze together with the heading."""

    position: Position
    heading: Heading


Previous = dict[State, list[State]]


def _parse_cell(char: str) -> str:
    if char not in _CELLS:
        raise ValueError(f"unknown cell {char!r}")
    return char


def _find(grid: Grid[str], wanted: str) -> Position:
    for x, row in enumerate(grid.grid):
        for y, cell in enumerate(row):
            if cell == wanted:
                return x, y
    raise ValueError(f"no {wanted!r} cell in the maze")


def _neighbors(grid: Grid[str], state: State) -> Iterator[tuple[int, State]]:
    x, y = state.position
    dx, dy = state.heading.value
    nx, ny = x + dx, y + dy
    if 0 <= nx < len(grid.grid) and 0 <= ny < len(grid.grid[nx]) and grid.grid[nx][ny] != _WALL:
        yield STEP_COST, State((nx, ny), state.heading)
    yield TURN_COST, State(state.position, state.heading.rotate_left())
    yield TURN_COST, State(state.position, state.heading.rotate_right())


def dijkstra(grid: Grid[str], start: Position) -> tuple[int, Previous, list[State]] | None:
    """Cheapest cost from ``start`` facing east to the exit.

    Returns the cost, the predecessors of every state on some cheapest path,
    and the exit states reached at that cost; None when the exit is unreachable.
    """
    origin = State(start, Heading.E)
    dist: dict[State, int] = {origin: 0}
    prev: Previous = {}
    counter = itertools.count()
    heap = [(0, -start[0], next(counter), origin)]
    settled: set[State] = set()
    best: int | None = None
    exits: list[State] = []
    while heap:
        cost, _, _, state = heapq.heappop(heap)
        if state in settled or cost > dist[state]:
            continue
        if best is not None and cost > best:
            break
        settled.add(state)
        x, y = state.position
        if grid.grid[x][y] == _EXIT:
            best = cost
            exits.append(state)
            continue
        for step, nxt in _neighbors(grid, state):
            next_cost = cost + step
            known = dist.get(nxt)
            if known is not None and known < next_cost:
                continue
            if known == next_cost:
                predecessors = prev.setdefault(nxt, [])
                if state not in predecessors:
                    predecessors.append(state)
                continue
            prev[nxt] = [state]
            dist[nxt] = next_cost
            heapq.heappush(heap, (next_cost, -nxt.position[0], next(counter), nxt))
    if best is None:
        return None
    return best, prev, exits


def _tiles(prev: Previous, ends: Iterable[State]) -> set[Position]:
    tiles: set[Position] = set()
    seen: set[State] = set()
    pending = list(ends)
    while pending:
        state = pending.pop()
        if state in seen:
            continue
        seen.add(state)
        tiles.add(state.position)
        pending.extend(prev.get(state, ()))
    return tiles


def count_nodes(prev: Previous, exit_state: State) -> int:
    """Number of distinct tiles on the cheapest paths leading to ``exit_state``."""
    return len(_tiles(prev, [exit_state]))


def _solve(text: str) -> tuple[int, Previous, list[State]]:
    grid = Grid.parse(text, _parse_cell)
    _find(grid, _EXIT)
    result = dijkstra(grid, _find(grid, _START))
    if result is None:
        raise ValueError("the exit cannot be reached")
    return result


def part_one(text: str) -> int:
    """Lowest score to reach the exit."""
    cost, _, _ = _solve(text)
    return cost


def part_two(text: str) -> int:
    """Number of tiles lying on at least one cheapest path."""
    _, prev, exits = _solve(text)
    return len(_tiles(prev, exits))