"""Comparing two lists of location IDs."""

from __future__ import annotations

import re
from collections import Counter

_INTEGER = re.compile(r"[+-]?[0-9]+")
_SEPARATOR = "   "


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return int(text)


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Read the left and right columns, separated by three spaces."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        parts = line.split(_SEPARATOR)
        if len(parts) < 2:
            raise ValueError(f"expected two columns: {line!r}")
        left.append(_parse_int(parts[0]))
        right.append(_parse_int(parts[1]))
    return left, right


def part_one(text: str) -> int:
    """Total distance between the sorted columns."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)