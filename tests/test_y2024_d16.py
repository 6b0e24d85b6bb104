import pytest

from advent.grid import Grid
from advent.y2024.d16 import (
    Heading,
    State,
    count_nodes,
    dijkstra,
    part_one,
    part_two,
)

EXAMPLE = "\n".join(
    [
        "###############",
        "#.......#....E#",
        "#.#.###.#.###.#",
        "#.....#.#...#.#",
        "#.###.#####.#.#",
        "#.#.#.......#.#",
        "#.#.#####.###.#",
        "#...........#.#",
        "###.#.#####.#.#",
        "#...#.....#.#.#",
        "#.#.#.###.#.#.#",
        "#.....#...#.#.#",
        "#.###.#.#.#.#.#",
        "#S..#.....#...#",
        "###############",
    ]
)

SECOND = "\n".join(
    [
        "#################",
        "#...#...#...#..E#",
        "#.#.#.#.#.#.#.#.#",
        "#.#.#.#...#...#.#",
        "#.#.#.#.###.#.#.#",
        "#...#.#.#.....#.#",
        "#.#.#.#.#.#####.#",
        "#.#...#.#.#.....#",
        "#.#.#####.#.###.#",
        "#.#.#.......#...#",
        "#.#.###.#####.###",
        "#.#.#...#.....#.#",
        "#.#.#.#####.###.#",
        "#.#.#.........#.#",
        "#.#.#.#########.#",
        "#S#.............#",
        "#################",
    ]
)


def corridor(length):
    middle = "#S" + "." * length + "E#"
    wall = "#" * len(middle)
    return "\n".join([wall, middle, wall])


def test_example_lowest_score():
    assert part_one(EXAMPLE) == 7036


def test_example_best_tiles():
    assert part_two(EXAMPLE) == 45


def test_second_example_lowest_score():
    assert part_one(SECOND) == 11048


def test_best_tiles_are_open_cells():
    open_cells = sum(char != "#" for char in EXAMPLE if char != "\n")
    assert 0 < part_two(EXAMPLE) <= open_cells


@pytest.mark.parametrize("length", [0, 1, 5])
def test_straight_corridor(length):
    assert part_one(corridor(length)) == length + 1
    assert part_two(corridor(length)) == length + 2


def test_count_nodes_from_exit_state():
    grid = Grid.parse(corridor(3))
    cost, prev, exits = dijkstra(grid, (1, 1))
    assert cost == 4
    assert exits == [State((1, 5), Heading.E)]
    assert count_nodes(prev, exits[0]) == 5


def test_rotations_are_inverse():
    for heading in Heading:
        assert heading.rotate_left().rotate_right() is heading
        assert heading.rotate_left().rotate_left().rotate_left().rotate_left() is heading
    assert Heading.N.rotate_right() is Heading.E
    assert Heading.N.rotate_left() is Heading.W


def test_unreachable_exit():
    text = "#####\n#S#E#\n#####"
    assert dijkstra(Grid.parse(text), (1, 1)) is None
    with pytest.raises(ValueError):
        part_one(text)


def test_unknown_cell_rejected():
    with pytest.raises(ValueError):
        part_one("#####\n#SxE#\n#####")


def test_missing_start_rejected():
    with pytest.raises(ValueError):
        part_one("#####\n#..E#\n#####")