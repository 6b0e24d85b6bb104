"""Antinodes created by pairs of antennas on the same frequency."""

from __future__ import annotations

from dataclasses import dataclass, field

Position = tuple[int, int]


def pgcd(a: int, b: int) -> int:
    """Greatest common divisor of the absolute values of ``a`` and ``b``."""
    if a > b:
        x, y = abs(a), abs(b)
    else:
        x, y = abs(b), abs(a)
    rem = x % y
    while rem > 0:
        x, y = y, rem
        rem = x % y
    return y


@dataclass
class AntennaMap:
    """Antenna positions, grouped by frequency, and the antinodes found so far."""

    antennas: dict[str, list[Position]]
    max_x: int
    max_y: int
    antinodes: set[Position] = field(default_factory=set)

    @classmethod
    def parse(cls, text: str) -> AntennaMap:
        """Read a map where every character other than ``.`` is an antenna."""
        rows = text.splitlines()
        if not rows:
            raise ValueError("empty map")
        antennas: dict[str, list[Position]] = {}
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != ".":
                    antennas.setdefault(char, []).append((x, y))
        return cls(antennas, len(rows[0]), len(rows))

    def is_in_grid(self, pos: Position) -> bool:
        """True when the position lies on the map."""
        return 0 <= pos[0] < self.max_x and 0 <= pos[1] < self.max_y

    def _pairs(self):
        for positions in self.antennas.values():
            for idx, first in enumerate(positions):
                for second in positions[idx + 1:]:
                    yield first, second

    def compute_antinodes(self) -> None:
        """Add the two antinodes of every pair of same-frequency antennas."""
        for p1, p2 in self._pairs():
            dx, dy = p1[0] - p2[0], p1[1] - p2[1]
            self.antinodes.add((p1[0] + dx, p1[1] + dy))
            self.antinodes.add((p2[0] - dx, p2[1] - dy))

    def compute_all_antinodes(self) -> None:
        """Add every on-map point in line with a pair of same-frequency antennas."""
        for p1, p2 in self._pairs():
            dx, dy = p1[0] - p2[0], p1[1] - p2[1]
            divisor = pgcd(dx, dy)
            dx, dy = dx // divisor, dy // divisor
            for sign in (1, -1):
                point = p1
                while self.is_in_grid(point):
                    self.antinodes.add(point)
                    point = (point[0] + sign * dx, point[1] + sign * dy)

    def count_valid_antinodes(self) -> int:
        """Number of antinodes found that lie on the map."""
        return sum(1 for antinode in self.antinodes if self.is_in_grid(antinode))


def part_one(text: str) -> int:
    """Antinodes at twice the distance of each pair."""
    antenna_map = AntennaMap.parse(text)
    antenna_map.compute_antinodes()
    return antenna_map.count_valid_antinodes()


def part_two(text: str) -> int:
    """Antinodes at every grid point in line with each pair."""
    antenna_map = AntennaMap.parse(text)
    antenna_map.compute_all_antinodes()
    return antenna_map.count_valid_antinodes()