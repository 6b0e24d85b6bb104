import pytest

from advent.y2024.d12 import count_sides, part_one, part_two

EXAMPLE = "AAAA\nBBCD\nBBCC\nEEEC"
HOLES = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO"


def _transpose(text):
    rows = text.splitlines()
    return "\n".join("".join(row[i] for row in rows) for i in range(len(rows[0])))


def test_part_one_example():
    assert part_one(EXAMPLE) == 140


def test_part_two_example():
    assert part_two(EXAMPLE) == 80


@pytest.mark.parametrize("text", [EXAMPLE, HOLES])
def test_sides_never_exceed_perimeter(text):
    assert part_two(text) <= part_one(text)


@pytest.mark.parametrize("text", [EXAMPLE, HOLES])
def test_prices_invariant_under_transposition(text):
    assert part_one(_transpose(text)) == part_one(text)
    assert part_two(_transpose(text)) == part_two(text)


def test_rectangles_have_same_number_of_sides():
    square = {(x, y) for x in range(3) for y in range(3)}
    bar = {(0, y) for y in range(5)}
    assert count_sides({(0, 0)}) == count_sides(square) == count_sides(bar)


def test_count_sides_symmetric():
    zone = {(0, 0), (0, 1), (1, 0), (2, 0), (2, 1)}
    assert count_sides(zone) == count_sides({(y, x) for x, y in zone})


def test_l_shape_has_more_sides_than_rectangle():
    l_shape = {(0, 0), (1, 0), (1, 1)}
    assert count_sides(l_shape) > count_sides({(0, 0), (1, 0)})


def test_empty_zone_has_no_sides():
    assert count_sides(set()) == 0


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        part_one("")