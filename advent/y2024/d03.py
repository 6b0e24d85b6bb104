"""Scanning corrupted memory for multiplication instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MUL_PATTERN = re.compile(r"mul\((?P<first>\d{1,3}),(?P<second>\d{1,3})\)")
_MUL = re.compile(r"mul\(\d{1,3},\d{1,3}\)")
_INSTRUCTION = re.compile(r"mul\(\d{1,3},\d{1,3}\)|do\(\)|don't\(\)")
_DO = "do()"
_DONT = "don't()"


class ParseTokenError(ValueError):
    """Raised when text is not a known instruction."""

    def __init__(self) -> None:
        super().__init__("invalid token")


@dataclass(frozen=True)
class Mul:
    """A multiplication instruction."""

    first: int
    second: int


def parse_token(text: str) -> Mul | bool:
    """Read one instruction: a Mul, or True for ``do()`` and False for ``don't()``."""
    if text == _DO:
        return True
    if text == _DONT:
        return False
    match = _MUL_PATTERN.search(text)
    if match is None:
        raise ParseTokenError()
    try:
        return Mul(int(match["first"]), int(match["second"]))
    except ValueError:
        raise ParseTokenError() from None


def part_one(text: str) -> int:
    """Sum of every multiplication."""
    total = 0
    for match in _MUL.finditer(text):
        instruction = parse_token(match.group())
        if isinstance(instruction, Mul):
            total += instruction.first * instruction.second
    return total


def part_two(text: str) -> int:
    """Sum of multiplications not disabled by a preceding ``don't()``."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        instruction = parse_token(match.group())
        if isinstance(instruction, Mul):
            if enabled:
                total += instruction.first * instruction.second
        else:
            enabled = instruction
    return total