"""Two-dimensional grids read from text, one cell per character."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class ParseGridError(ValueError):
    """Raised when text cannot be read as a grid."""


def add(left: int, right: int) -> int:
    """Return the sum of two numbers."""
    return left + right


def _text_lines(text: str) -> list[str]:
    """Split text into lines, ignoring one trailing newline and stray carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _dimensions(rows: list[str]) -> tuple[int, int]:
    if not rows:
        raise ParseGridError("cannot read a grid from empty text")
    return len(rows), len(rows[0])


@dataclass
class Grid(Generic[T]):
    """A dense grid indexed as ``grid[line][column]``."""

    grid: list[list[T]]
    max_x: int
    max_y: int

    @classmethod
    def parse(cls, text: str, cell: Callable[[str], T] = str) -> Grid[T]:
        """Read a grid, converting every character with ``cell``."""
        rows = _text_lines(text)
        max_x, max_y = _dimensions(rows)
        try:
            table = [[cell(char) for char in row] for row in rows]
        except ValueError as exc:
            raise ParseGridError(f"invalid cell: {exc}") from exc
        return cls(table, max_x, max_y)

    def __str__(self) -> str:
        body = "\n".join("".join(str(el) for el in row) for row in self.grid)
        return f"Grid:\n{body}\n Size: {self.max_x} x {self.max_y}"


@dataclass
class HashGrid(Generic[T]):
    """A sparse grid stored as ``grid[x][y] = value``.

    Characters that ``cell`` rejects with a ``ValueError`` leave their slot empty.
    """

    grid: dict[int, dict[int, T]]
    max_x: int
    max_y: int

    @classmethod
    def parse(cls, text: str, cell: Callable[[str], T] = str) -> HashGrid[T]:
        """Read a sparse grid, keeping only the characters ``cell`` accepts."""
        rows = _text_lines(text)
        max_x, max_y = _dimensions(rows)
        table: dict[int, dict[int, T]] = {}
        for x, row in enumerate(rows):
            parsed: dict[int, T] = {}
            for y, char in enumerate(row):
                try:
                    parsed[y] = cell(char)
                except ValueError:
                    continue
            if parsed:
                table[x] = parsed
        return cls(table, max_x, max_y)

    def get(self, x: int, y: int) -> T | None:
        """Return the value at ``(x, y)``, or None when the slot is empty."""
        return self.grid.get(x, {}).get(y)

    def delete(self, x: int, y: int) -> None:
        """Empty the slot at ``(x, y)``; empty slots are left alone."""
        row = self.grid.get(x)
        if row is not None:
            row.pop(y, None)

    def __len__(self) -> int:
        return sum(len(row) for row in self.grid.values())

    def __iter__(self) -> Iterator[tuple[int, int, T]]:
        for x, row in self.grid.items():
            for y, value in row.items():
                yield x, y, value

    def __str__(self) -> str:
        lines = []
        for x in range(self.max_x):
            row = self.grid.get(x, {})
            lines.append(
                "".join(str(row[y]) if y in row else " " for y in range(self.max_y))
            )
        body = "\n".join(lines)
        return f"Grid:\n{body}\n Size: {self.max_x} x {self.max_y}"