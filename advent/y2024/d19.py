"""Arranging towel patterns into designs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Towels:
    """The available towel patterns and the designs to build from them."""

    available: set[str]
    designs: list[str]

    @classmethod
    def parse(cls, text: str) -> Towels:
        """Read comma separated patterns, a blank line, then one design per line."""
        sections = text.split("\n\n")
        if len(sections) < 2:
            raise ValueError("expected patterns and designs separated by a blank line")
        available = {pattern.strip() for pattern in sections[0].split(",")}
        return cls(available, sections[1].split("\n"))

    def solve(self, word: str) -> int:
        """Number of ways to build ``word`` from the available patterns."""
        ways = [1] + [0] * len(word)
        for end in range(1, len(word) + 1):
            ways[end] = sum(
                ways[start]
                for start in range(end)
                if ways[start] and word[start:end] in self.available
            )
        return ways[-1]

    def solve_all(self) -> int:
        """Number of designs that can be built at all."""
        return sum(1 for design in self.designs if self.solve(design) > 0)

    def solve_all_with_combinations(self) -> int:
        """Total number of ways over every design."""
        return sum(self.solve(design) for design in self.designs)


def part_one(text: str) -> int:
    """Count the possible designs."""
    return Towels.parse(text).solve_all()


def part_two(text: str) -> int:
    """Count all the ways of building every design."""
    return Towels.parse(text).solve_all_with_combinations()