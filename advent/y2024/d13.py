"""Claw machines: pushing buttons A and B to reach a prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

Pair = tuple[int, int]

PRIZE_OFFSET = 10_000_000_000_000
_COST_A = 3
_COST_B = 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _strip_all(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _parse_pair(line: str, prefixes: tuple[str, str]) -> Pair:
    values = []
    for part in line.split(":")[-1].split(","):
        part = part.strip()
        for prefix in prefixes:
            part = _strip_all(part, prefix)
        if not _UNSIGNED.fullmatch(part):
            raise ValueError(f"invalid number {part!r}")
        values.append(int(part))
    if len(values) < 2:
        raise ValueError(f"expected two values: {line!r}")
    return values[0], values[1]


@dataclass(frozen=True)
class Machine:
    """A claw machine: the prize location and how far each button moves the claw."""

    prize: Pair = (0, 0)
    button_a: Pair = (0, 0)
    button_b: Pair = (0, 0)

    @classmethod
    def parse(cls, text: str) -> Machine:
        """Read the ``Button A``, ``Button B`` and ``Prize`` lines of one machine."""
        button_a = button_b = prize = (0, 0)
        for line in text.split("\n"):
            if line.startswith("Button A"):
                button_a = _parse_pair(line, ("X+", "Y+"))
            elif line.startswith("Button B"):
                button_b = _parse_pair(line, ("X+", "Y+"))
            elif line.startswith("Prize"):
                prize = _parse_pair(line, ("X=", "Y="))
        return cls(prize, button_a, button_b)

    def find_winning_pushes(self, max_pushes: int) -> list[Pair]:
        """Every ``(a, b)`` push count with fewer than ``max_pushes`` A pushes that wins."""
        bx, by = self.button_b
        if bx == 0 or by == 0:
            raise ValueError("button B does not move the claw on both axes")
        winning = []
        for a in range(max_pushes):
            ax, ay = a * self.button_a[0], a * self.button_a[1]
            if ax > self.prize[0] or ay > self.prize[1]:
                break
            rx, ry = self.prize[0] - ax, self.prize[1] - ay
            if rx % bx == 0 and ry % by == 0 and rx // bx == ry // by:
                winning.append((a, rx // bx))
        return winning

    def solve_equation(self) -> Pair | None:
        """The non-negative push counts reaching the prize exactly, if any."""
        x1, y1 = self.button_a
        x2, y2 = self.button_b
        p1, p2 = self.prize
        determinant = x1 * y2 - x2 * y1
        if determinant == 0 or x2 == 0:
            raise ValueError("buttons do not give a unique solution")
        numerator = p1 * y2 - p2 * x2
        if numerator % determinant:
            return None
        a = numerator // determinant
        remaining = p1 - x1 * a
        if remaining % x2:
            return None
        b = remaining // x2
        if a < 0 or b < 0:
            return None
        return a, b

    def _shifted(self, offset: int) -> Machine:
        return Machine((self.prize[0] + offset, self.prize[1] + offset), self.button_a, self.button_b)


def _tokens(machines: list[Machine]) -> int:
    total = 0
    for machine in machines:
        solution = machine.solve_equation()
        if solution is not None:
            a, b = solution
            total += a * _COST_A + b * _COST_B
    return total


def _machines(text: str) -> list[Machine]:
    return [Machine.parse(block) for block in text.split("\n\n")]


def part_one(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _tokens(_machines(text))


def part_two(text: str) -> int:
    """Fewest tokens once every prize is moved far away."""
    return _tokens([machine._shifted(PRIZE_OFFSET) for machine in _machines(text)])