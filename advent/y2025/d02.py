"""Finding product IDs made of repeated digit sequences."""

from __future__ import annotations

import re

from advent.y2025.errors import ParseError

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U128_LIMIT = 1 << 128


def digit_count(n: int) -> int:
    """Number of decimal digits of ``n`` (one for zero)."""
    return len(str(n))


def is_invalid_id_part_1(number: int) -> bool:
    """True when the ID is one digit sequence written twice."""
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_invalid_id_part_2(number: int) -> bool:
    """True when the ID is one digit sequence written at least twice."""
    digits = str(number)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def find_invalid_id_1(start: int, end: int) -> list[int]:
    """Invalid IDs (doubled sequences) from ``start`` up to, not including, ``end``."""
    return [n for n in range(start, end) if is_invalid_id_part_1(n)]


def find_invalid_id_2(start: int, end: int) -> list[int]:
    """Invalid IDs (repeated sequences) from ``start`` up to, not including, ``end``."""
    return [n for n in range(start, end) if is_invalid_id_part_2(n)]


def _parse_u128(text: str) -> int:
    if not text:
        raise ParseError("cannot parse integer from empty string" + text)
    if not _UNSIGNED.fullmatch(text):
        raise ParseError("invalid digit found in string" + text)
    value = int(text)
    if value >= _U128_LIMIT:
        raise ParseError("number too large to fit in target type" + text)
    return value


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Read comma separated ``start-end`` ranges."""
    ranges = []
    for part in text.split(","):
        start, sep, end = part.partition("-")
        if not sep:
            raise ParseError("invalid range")
        ranges.append((_parse_u128(start), _parse_u128(end)))
    return ranges


def part_one(text: str) -> int:
    """Sum of the IDs made of a sequence written twice."""
    return sum(sum(find_invalid_id_1(start, end)) for start, end in parse_ranges(text))


def part_two(text: str) -> int:
    """Sum of the IDs made of a sequence written at least twice."""
    return sum(sum(find_invalid_id_2(start, end)) for start, end in parse_ranges(text))