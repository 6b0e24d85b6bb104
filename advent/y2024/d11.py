"""Counting stones that change every time you blink."""

from __future__ import annotations

import re
from functools import cache

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MULTIPLIER = 2024


def blink_one_stone(stone: int) -> list[int]:
    """The stones one stone turns into after a blink."""
    if stone < 0:
        raise ValueError("stones carry non-negative numbers")
    if stone == 0:
        return [1]
    digits = len(str(stone))
    if digits % 2 == 0:
        half = 10 ** (digits // 2)
        return [stone // half, stone % half]
    return [stone * _MULTIPLIER]


def blink(stones: list[int]) -> list[int]:
    """The whole row after one blink."""
    return [new for stone in stones for new in blink_one_stone(stone)]


@cache
def count_stones(stone: int, blinks: int) -> int:
    """How many stones one stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(new, blinks - 1) for new in blink_one_stone(stone))


def parse_input(text: str) -> list[int]:
    """Read space separated stone numbers."""
    stones = []
    for part in text.split(" "):
        if not _INTEGER.fullmatch(part):
            raise ValueError(f"invalid stone {part!r}")
        stones.append(int(part))
    return stones


def part_one(text: str) -> int:
    """Stones after 25 blinks."""
    return sum(count_stones(stone, 25) for stone in parse_input(text))


def part_two(text: str) -> int:
    """Stones after 75 blinks."""
    return sum(count_stones(stone, 75) for stone in parse_input(text))