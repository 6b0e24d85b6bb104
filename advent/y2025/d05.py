"""Fresh ingredient ranges."""

from __future__ import annotations

import re

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_number(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return int(text)


def _split_sections(text: str) -> tuple[str, str]:
    ranges, sep, ingredients = text.partition("\n\n")
    if not sep:
        raise ValueError("invalid input")
    return ranges, ingredients


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Read one inclusive ``start-end`` range per line."""
    ranges = []
    for line in text.splitlines():
        start, sep, end = line.partition("-")
        if not sep:
            raise ValueError("invalid range")
        ranges.append((_parse_number(start), _parse_number(end)))
    return ranges


def merge_ranges(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort inclusive ranges and join those that overlap."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            first, last = merged[-1]
            merged[-1] = (first, max(last, end))
        else:
            merged.append((start, end))
    return merged


def part_one(text: str) -> int:
    """Count listed ingredients that fall in some fresh range."""
    ranges_text, ingredients_text = _split_sections(text)
    ranges = parse_ranges(ranges_text)
    ingredients = [_parse_number(line) for line in ingredients_text.splitlines()]
    return sum(
        1 for item in ingredients if any(start <= item <= end for start, end in ranges)
    )


def part_two(text: str) -> int:
    """Count all ingredient IDs covered by the fresh ranges."""
    ranges_text, _ = _split_sections(text)
    return sum(end - start + 1 for start, end in merge_ranges(parse_ranges(ranges_text)))