"""Finding operators that make calibration equations true."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")


class Operator(Enum):
    """Operators evaluated strictly left to right."""

    PLUS = "+"
    MUL = "*"
    CONCAT = "||"


def compute(a: int, b: int, operator: Operator) -> int:
    """Apply one operator."""
    if operator is Operator.PLUS:
        return a + b
    if operator is Operator.MUL:
        return a * b
    if b <= 0:
        raise ValueError("cannot concatenate a non-positive number")
    return a * 10 ** len(str(b)) + b


def solvable(
    target: int, first: int, rest: Sequence[int], operators: Sequence[Operator]
) -> bool:
    """True when some choice of operators turns the values into ``target``."""
    if not rest:
        return target == first
    head, tail = rest[0], rest[1:]
    return any(
        value <= target and solvable(target, value, tail, operators)
        for value in (compute(first, head, operator) for operator in operators)
    )


def _parse_number(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return int(text)


def parse_input(text: str) -> list[tuple[int, list[int]]]:
    """Read ``target: v1 v2 ...`` equations."""
    equations = []
    for line in text.splitlines():
        parts = line.split(": ")
        if len(parts) < 2:
            raise ValueError(f"invalid equation {line!r}")
        values = [_parse_number(value) for value in parts[1].split(" ")]
        equations.append((_parse_number(parts[0]), values))
    return equations


def _calibration(text: str, operators: Sequence[Operator]) -> int:
    equations = parse_input(text)
    if not equations:
        raise ValueError("no equations")
    return sum(
        target
        for target, values in equations
        if solvable(target, values[0], values[1:], operators)
    )


def part_one(text: str) -> int:
    """Sum of the targets reachable with addition and multiplication."""
    return _calibration(text, (Operator.PLUS, Operator.MUL))


def part_two(text: str) -> int:
    """Sum of the targets reachable when concatenation is also allowed."""
    return _calibration(text, (Operator.PLUS, Operator.MUL, Operator.CONCAT))