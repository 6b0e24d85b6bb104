import pytest

from advent.grid import ParseGridError
from advent.y2025.d04 import neighbors, part_one, part_two

EXAMPLE = """..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@.
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 13


def test_part_two_example():
    assert part_two(EXAMPLE) == 43


def test_isolated_rolls_are_all_accessible():
    text = "@.@\n...\n@.@"
    assert part_one(text) == text.count("@")


def test_full_block_is_eventually_cleared():
    text = "@@@\n@@@\n@@@"
    assert part_two(text) == text.count("@")
    assert part_one(text) < part_two(text)


def test_part_two_bounds():
    assert part_one(EXAMPLE) <= part_two(EXAMPLE) <= EXAMPLE.count("@")


def test_neighbors_surround_cell():
    cells = neighbors(3, 4)
    assert len(set(cells)) == 8
    assert (3, 4) not in cells
    assert all(max(abs(i - 3), abs(j - 4)) == 1 for i, j in cells)


def test_empty_input():
    with pytest.raises(ParseGridError):
        part_one("")