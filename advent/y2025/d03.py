"""Choosing batteries for the highest joltage."""

from __future__ import annotations

from functools import reduce

_DIGITS = "0123456789"


def find_joltage(batteries: list[int], n_bat: int) -> int:
    """Greedily pick ``n_bat`` digits, in order, forming the largest number."""
    if len(batteries) < n_bat - 1:
        raise ValueError("not enough batteries")
    chosen = []
    start = 0
    for picked in range(n_bat):
        stop = len(batteries) - (n_bat - picked - 1)
        best, best_idx = 0, 0
        for idx, value in enumerate(batteries[start:stop], start):
            if value > best:
                best, best_idx = value, idx
        start = best_idx + 1
        chosen.append(best)
    return reduce(lambda acc, digit: acc * 10 + digit, chosen, 0)


def _bank(line: str) -> list[int]:
    if any(char not in _DIGITS for char in line):
        raise ValueError("failed to parse string")
    return [int(char) for char in line]


def _total(text: str, n_bat: int) -> int:
    return sum(find_joltage(_bank(line), n_bat) for line in text.splitlines())


def part_one(text: str) -> int:
    """Total joltage using two batteries per bank."""
    return _total(text, 2)


def part_two(text: str) -> int:
    """Total joltage using twelve batteries per bank."""
    return _total(text, 12)