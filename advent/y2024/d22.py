"""Monkey market secret numbers and banana prices."""

from __future__ import annotations

import re
from collections import Counter
from itertools import pairwise

MODULO = 16777216
ROUNDS = 2000
_WINDOW = 4
_UNSIGNED = re.compile(r"\+?[0-9]+")


def next_secret(number: int) -> int:
    """The secret number that follows ``number``."""
    number = (number ^ number * 64) % MODULO
    number = (number ^ number // 32) % MODULO
    return (number ^ number * 2048) % MODULO


def secret_after(number: int, n: int) -> int:
    """The secret number ``n`` steps after ``number``."""
    for _ in range(n):
        number = next_secret(number)
    return number


def secret_sequence(number: int, n: int) -> list[int]:
    """``number`` followed by the next ``n`` secret numbers."""
    numbers = [number]
    for _ in range(n):
        number = next_secret(number)
        numbers.append(number)
    return numbers


def _buyers(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("no buyers")
    for line in lines:
        if not _UNSIGNED.fullmatch(line):
            raise ValueError(f"invalid secret {line!r}")
    return [int(line) for line in lines]


def part_one(text: str) -> int:
    """Sum of every buyer's 2000th secret number."""
    return sum(secret_after(number, ROUNDS) for number in _buyers(text))


def part_two(text: str) -> int:
    """Most bananas obtainable with one sequence of four price changes."""
    totals: Counter[tuple[int, ...]] = Counter()
    for number in _buyers(text):
        prices = [secret % 10 for secret in secret_sequence(number, ROUNDS)]
        deltas = [b - a for a, b in pairwise(prices)]
        first_seen: dict[tuple[int, ...], int] = {}
        for idx in range(_WINDOW, len(prices)):
            first_seen.setdefault(tuple(deltas[idx - _WINDOW:idx]), prices[idx])
        totals.update(first_seen)
    return max(totals.values(), default=0)