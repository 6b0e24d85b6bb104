"""Robots wrapping around a bathroom floor."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from typing import TextIO

from advent.grid import Grid

WIDTH = 101
HEIGHT = 103
_ROUNDS = 100
_FRAMES = 10000
_INTEGER = re.compile(r"[+-]?[0-9]+")

Pair = tuple[int, int]


def _parse_pair(field_text: str) -> Pair:
    pieces = field_text.split("=")
    if len(pieces) < 2:
        raise ValueError(f"invalid field {field_text!r}")
    numbers = pieces[1].split(",")
    if len(numbers) < 2 or not all(_INTEGER.fullmatch(n) for n in numbers):
        raise ValueError(f"invalid field {field_text!r}")
    return int(numbers[0]), int(numbers[1])


@dataclass(frozen=True)
class Robot:
    """A robot's position and velocity."""

    pos: Pair
    v: Pair

    @classmethod
    def parse(cls, text: str) -> Robot:
        """Read a line such as ``p=9,89 v=-73,-15``."""
        parts = text.split(" ")
        if len(parts) < 2:
            raise ValueError(f"invalid robot {text!r}")
        return cls(_parse_pair(parts[0]), _parse_pair(parts[1]))


@dataclass
class Game:
    """The floor and the robots on it."""

    max_x: int
    max_y: int
    robots: list[Robot] = field(default_factory=list)

    def simulate(self, rounds: int) -> None:
        """Move every robot ``rounds`` seconds, wrapping around the edges."""
        self.robots = [
            Robot(
                ((r.pos[0] + rounds * r.v[0]) % self.max_x, (r.pos[1] + rounds * r.v[1]) % self.max_y),
                r.v,
            )
            for r in self.robots
        ]

    def count_robots_per_quadrants(self) -> list[int]:
        """Robots in each quadrant; those on the middle lines are not counted."""
        mid_x, mid_y = self.max_x // 2, self.max_y // 2
        quadrants = [0, 0, 0, 0]
        for robot in self.robots:
            x, y = robot.pos
            if x > mid_x and y > mid_y:
                quadrants[0] += 1
            if x < mid_x and y > mid_y:
                quadrants[1] += 1
            if x < mid_x and y < mid_y:
                quadrants[2] += 1
            if x > mid_x and y < mid_y:
                quadrants[3] += 1
        return quadrants

    def __str__(self) -> str:
        rows = [[" "] * self.max_y for _ in range(self.max_x)]
        for robot in self.robots:
            rows[robot.pos[0]][robot.pos[1]] = "X"
        return str(Grid(rows, self.max_x, self.max_y))


def _game(text: str, width: int, height: int) -> Game:
    return Game(width, height, [Robot.parse(line) for line in text.splitlines()])


def part_one(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Safety factor after 100 seconds."""
    game = _game(text, width, height)
    game.simulate(_ROUNDS)
    return math.prod(game.count_robots_per_quadrants())


def part_two(
    text: str, out: TextIO | None = None, width: int = WIDTH, height: int = HEIGHT
) -> int:
    """Draw every second up to 9999 to ``out`` and return the final safety factor."""
    if out is None:
        out = sys.stdout
    game = _game(text, width, height)
    for frame in range(1, _FRAMES):
        game.simulate(1)
        print(f"Round {frame}" + "\n" * 12, file=out)
        print(game, file=out)
    return math.prod(game.count_robots_per_quadrants())