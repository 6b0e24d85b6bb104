"""Counting how often a safe dial points at zero."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from advent.y2025.errors import ParseError

START_POSITION = 50
DIAL_SIZE = 100
_INTEGER = re.compile(r"[+-]?[0-9]+")


class Direction(Enum):
    """Turn direction, valued by its sign."""

    LEFT = -1
    RIGHT = 1


_DIRECTIONS = {"L": Direction.LEFT, "R": Direction.RIGHT}


def _parse_int(text: str) -> int:
    if not text:
        raise ParseError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ParseError("invalid digit found in string")
    return int(text)


@dataclass(frozen=True)
class Move:
    """One rotation of the dial."""

    distance: int
    direction: Direction

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read a move such as ``L68`` or ``R48``."""
        if not text:
            raise ParseError("No first char")
        head, tail = text[0], text[1:]
        try:
            direction = _DIRECTIONS[head]
        except KeyError:
            raise ParseError(f"Unknown direction {head}") from None
        return cls(_parse_int(tail), direction)


def rotate(pos: int, n: int, direction: Direction) -> tuple[int, int]:
    """Turn the dial; return the new position and how many times zero was reached."""
    new_pos = pos + n * direction.value
    turns = abs(new_pos // DIAL_SIZE)
    if pos == 0 and new_pos < 0:
        turns -= 1
    if new_pos <= 0 and new_pos % DIAL_SIZE == 0:
        turns += 1
    return new_pos % DIAL_SIZE, turns


def _moves(text: str) -> list[Move]:
    return [Move.parse(line) for line in text.splitlines()]


def part_one(text: str) -> int:
    """Count the moves that leave the dial on zero."""
    pos = START_POSITION
    landed = 0
    for move in _moves(text):
        pos, _ = rotate(pos, move.distance, move.direction)
        if pos == 0:
            landed += 1
    return landed


def part_two(text: str) -> int:
    """Count every time the dial passes or stops on zero."""
    pos = START_POSITION
    total = 0
    for move in _moves(text):
        pos, turns = rotate(pos, move.distance, move.direction)
        total += turns
    return total