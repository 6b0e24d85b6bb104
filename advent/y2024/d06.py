"""Following a patrolling guard and trapping it in loops."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

Position = tuple[int, int]
Visited = dict[Position, set["Orientation"]]


class Orientation(Enum):
    """The guard's heading, valued by its step; declared in clockwise order."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def rotate(self) -> Orientation:
        """The heading after a quarter turn to the right."""
        order = list(Orientation)
        return order[(order.index(self) + 1) % len(order)]


class OutOfGrid(Exception):
    """Raised when the guard walks off the map."""


class Deadlock(Exception):
    """Raised when the guard repeats a position and heading, so walks forever."""


@dataclass
class Lab:
    """The lab floor and the guard walking on it."""

    width: int
    height: int
    blocked: set[Position] = field(default_factory=set)
    position: Position = (0, 0)
    orientation: Orientation = Orientation.UP

    @classmethod
    def parse(cls, text: str) -> Lab:
        """Read a map of ``.``, ``#`` and the guard ``^``."""
        rows = text.splitlines()
        if not rows:
            raise ValueError("empty map")
        width, height = len(rows[0]), len(rows)
        blocked: set[Position] = set()
        position = (0, 0)
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if x >= width:
                    raise ValueError(f"line {y} is longer than the first line")
                if char == "#":
                    blocked.add((x, y))
                elif char == "^":
                    position = (x, y)
                elif char != ".":
                    raise ValueError(f"Unhandled char found: {char!r}")
        return cls(width, height, blocked, position)

    def step(self) -> tuple[Position, Orientation]:
        """Turn or move once; return the guard's new position and heading."""
        dx, dy = self.orientation.value
        x, y = self.position[0] + dx, self.position[1] + dy
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfGrid()
        if (x, y) in self.blocked:
            self.orientation = self.orientation.rotate()
        else:
            self.position = (x, y)
        return self.position, self.orientation


def _record(visited: Visited, position: Position, orientation: Orientation) -> bool:
    seen = visited.setdefault(position, set())
    if orientation in seen:
        return False
    seen.add(orientation)
    return True


def simulate_until_out_or_deadlock(lab: Lab, visited: Visited | None = None) -> int:
    """Walk the guard off the map and return how many cells it visited.

    Every visited position is recorded in ``visited`` with its headings.
    Raises Deadlock when the guard enters a loop.
    """
    if visited is None:
        visited = {}
    _record(visited, lab.position, lab.orientation)
    while True:
        try:
            position, orientation = lab.step()
        except OutOfGrid:
            return len(visited)
        if not _record(visited, position, orientation):
            raise Deadlock()


def part_one(text: str) -> int:
    """Number of distinct cells the guard visits."""
    return simulate_until_out_or_deadlock(Lab.parse(text))


def part_two(text: str) -> int:
    """Number of single obstacles on the guard's path that trap it in a loop."""
    start = Lab.parse(text)
    visited: Visited = {}
    simulate_until_out_or_deadlock(dataclasses.replace(start), visited)
    total = 0
    for position in list(visited):
        trial = dataclasses.replace(start, blocked=start.blocked | {position})
        try:
            simulate_until_out_or_deadlock(trial)
        except Deadlock:
            total += 1
    return total