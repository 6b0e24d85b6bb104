import pytest

from advent.y2024.d11 import (
    blink,
    blink_one_stone,
    count_stones,
    parse_input,
    part_one,
    part_two,
)


def test_zero_becomes_one():
    assert blink_one_stone(0) == [1]


def test_odd_digit_count_is_multiplied():
    assert blink_one_stone(1) == [2024]


def test_even_digit_count_splits():
    assert blink_one_stone(1000) == [10, 0]


def test_negative_stone_rejected():
    with pytest.raises(ValueError):
        blink_one_stone(-1)


def test_blink_example_row():
    assert blink([125, 17]) == [253000, 1, 7]


def test_count_matches_explicit_blinking():
    stones = [125, 17]
    for blinks in range(8):
        assert sum(count_stones(s, blinks) for s in [125, 17]) == len(stones)
        stones = blink(stones)


def test_count_with_no_blinks():
    assert count_stones(987, 0) == 1


def test_parse_input():
    assert parse_input("125 17") == [125, 17]
    with pytest.raises(ValueError):
        parse_input("125 x")


def test_part_one_example():
    assert part_one("125 17") == 55312


def test_part_two_grows_beyond_part_one():
    assert part_two("125 17") > part_one("125 17")