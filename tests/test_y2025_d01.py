import pytest

from advent.y2025.d01 import Direction, Move, part_one, part_two, rotate
from advent.y2025.errors import ParseError

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 3


def test_part_two_example():
    assert part_two(EXAMPLE) == 6


def test_part_two_counts_at_least_landings():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_move_parse():
    assert Move.parse("R48") == Move(48, Direction.RIGHT)
    assert Move.parse("L5") == Move(5, Direction.LEFT)


@pytest.mark.parametrize("text", ["", "X5", "L", "Lx", "R4 "])
def test_move_parse_errors(text):
    with pytest.raises(ParseError):
        Move.parse(text)


def test_unknown_direction_message():
    with pytest.raises(ParseError, match="Unknown direction X"):
        Move.parse("X5")


@pytest.mark.parametrize("pos", [0, 1, 50, 99])
@pytest.mark.parametrize("k", [1, 2, 3])
@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT])
def test_full_turns_return_to_start(pos, k, direction):
    assert rotate(pos, 100 * k, direction) == (pos, k)


def test_leaving_zero_is_not_counted():
    assert rotate(0, 5, Direction.LEFT)[1] == 0


@pytest.mark.parametrize("pos,n", [(50, 68), (0, 250), (99, 1), (3, 1000)])
@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT])
def test_position_stays_on_dial(pos, n, direction):
    new_pos, turns = rotate(pos, n, direction)
    assert 0 <= new_pos < 100
    assert turns >= 0


def test_invalid_line_fails_whole_input():
    with pytest.raises(ParseError):
        part_one("L5\nQ2\n")