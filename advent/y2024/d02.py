"""Checking reactor reports for safe level changes."""

from __future__ import annotations

import re
from itertools import pairwise

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_STEP = 3


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return int(text)


def _parse_report(line: str) -> list[int]:
    return [_parse_int(part) for part in line.split(" ")]


def check_safety(levels: list[int]) -> bool:
    """True when levels move steadily in one direction by one to three."""
    if not levels:
        raise ValueError("empty report")
    deltas = [b - a for a, b in pairwise(levels)]
    return all(1 <= d <= _MAX_STEP for d in deltas) or all(
        -_MAX_STEP <= d <= -1 for d in deltas
    )


def part_one(text: str) -> int:
    """Count the safe reports."""
    return sum(check_safety(_parse_report(line)) for line in text.splitlines())


def part_two(text: str) -> int:
    """Count the reports made safe by removing one level."""
    count = 0
    for line in text.splitlines():
        levels = _parse_report(line)
        if any(
            check_safety(levels[:idx] + levels[idx + 1:]) for idx in range(len(levels))
        ):
            count += 1
    return count