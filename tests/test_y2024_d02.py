import pytest

from advent.y2024.d02 import check_safety, part_one, part_two

EXAMPLE = (
    "7 6 4 2 1\n"
    "1 2 7 8 9\n"
    "9 7 6 2 1\n"
    "1 3 2 4 5\n"
    "8 6 4 4 1\n"
    "1 3 6 7 9\n"
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 2


def test_part_two_example():
    assert part_two(EXAMPLE) == 4


def test_steady_reports_are_safe():
    assert check_safety([7, 6, 4, 2, 1])
    assert check_safety([1, 3, 6, 7, 9])


def test_unsafe_reports():
    assert not check_safety([1, 2, 7, 8, 9])
    assert not check_safety([1, 3, 2, 4, 5])
    assert not check_safety([8, 6, 4, 4, 1])


def test_single_level_is_safe():
    assert check_safety([5])


@pytest.mark.parametrize("levels", [[7, 6, 4, 2, 1], [1, 2, 7, 8, 9], [1, 3, 2, 4, 5]])
def test_reversing_keeps_safety(levels):
    assert check_safety(levels) == check_safety(list(reversed(levels)))


def test_empty_report_raises():
    with pytest.raises(ValueError):
        check_safety([])


def test_dampener_never_lowers_count():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        part_one("1 2 x\n")