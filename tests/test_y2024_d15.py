import pytest

from advent.grid import ParseGridError
from advent.y2024.d15 import Cell, Direction, Warehouse, part_one, part_two

SMALL_EXAMPLE = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""


def _rows(warehouse):
    return ["".join(cell.value for cell in row) for row in warehouse.grid.grid]


def _simulated(text):
    warehouse = Warehouse.parse(text)
    warehouse.simulate()
    return warehouse


def test_part_one_small_example():
    assert part_one(SMALL_EXAMPLE) == 2028


def test_gps_of_single_box():
    warehouse = Warehouse.parse("#######\n#...O..\n#@.....\n\n")
    assert warehouse.gps_total() == 104


def test_parse_reads_robot_and_moves():
    warehouse = Warehouse.parse("####\n#@.#\n####\n\n<v\n^>")
    assert warehouse.robot == (1, 1)
    assert warehouse.moves == [Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT]
    assert warehouse.wide is False


def test_push_single_box():
    after = _simulated("#####\n#@O.#\n#####\n\n>")
    expected = Warehouse.parse("#####\n#.@O#\n#####\n\n")
    assert _rows(after) == _rows(expected)
    assert after.robot == expected.robot


def test_push_chain_of_boxes():
    after = _simulated("######\n#@OO.#\n######\n\n>")
    expected = Warehouse.parse("######\n#.@OO#\n######\n\n")
    assert _rows(after) == _rows(expected)


def test_box_against_wall_does_not_move():
    start = Warehouse.parse("####\n#@O#\n####\n\n>")
    after = _simulated("####\n#@O#\n####\n\n>")
    assert _rows(after) == _rows(start)
    assert after.robot == start.robot


def test_scale_doubles_cells():
    wide = Warehouse.parse("#####\n#@O.#\n#####\n\n>").scale()
    assert _rows(wide) == ["##########", "##@.[]..##", "##########"]
    assert wide.grid.max_y == 10
    assert wide.robot == (1, 2)
    assert wide.moves == [Direction.RIGHT]
    assert wide.wide is True


def test_wide_push_right():
    wide = Warehouse.parse("#####\n#@O.#\n#####\n\n>>").scale()
    wide.simulate()
    assert _rows(wide)[1] == "##..@[].##"


def test_wide_push_left_keeps_box_halves_ordered():
    wide = Warehouse.parse("#####\n#.O@#\n#####\n\n<<").scale()
    wide.simulate()
    row = _rows(wide)[1]
    assert row.index("[") + 1 == row.index("]")
    assert row.index("]") + 1 == row.index("@")


def test_wide_push_up_matches_scaled_layout():
    wide = Warehouse.parse("#####\n#...#\n#.O.#\n#.@.#\n#####\n\n^").scale()
    wide.simulate()
    expected = Warehouse.parse("#####\n#.O.#\n#.@.#\n#...#\n#####\n\n").scale()
    assert _rows(wide) == _rows(expected)
    assert wide.robot == expected.robot


def test_wide_push_down_matches_scaled_layout():
    wide = Warehouse.parse("#####\n#.@.#\n#.O.#\n#...#\n#####\n\nv").scale()
    wide.simulate()
    expected = Warehouse.parse("#####\n#...#\n#.@.#\n#.O.#\n#####\n\n").scale()
    assert _rows(wide) == _rows(expected)


def test_wide_push_blocked_by_wall():
    start = Warehouse.parse("#####\n#.O.#\n#.@.#\n#####\n\n^").scale()
    wide = Warehouse.parse("#####\n#.O.#\n#.@.#\n#####\n\n^").scale()
    wide.simulate()
    assert _rows(wide) == _rows(start)
    assert wide.robot == start.robot


def test_part_two_preserves_boxes():
    wide = Warehouse.parse(SMALL_EXAMPLE).scale()
    boxes_before = sum(row.count("[") for row in _rows(wide))
    wide.simulate()
    rows = _rows(wide)
    assert sum(row.count("[") for row in rows) == boxes_before
    for row in rows:
        for idx, char in enumerate(row):
            if char == "[":
                assert row[idx + 1] == "]"
    assert part_two(SMALL_EXAMPLE) == wide.gps_total()


def test_scaled_gps_uses_left_halves():
    narrow = Warehouse.parse("#####\n#.O.#\n#@..#\n#####\n\n")
    wide = narrow.scale()
    assert wide.gps_total() == narrow.gps_total() + 2
    assert sum(cell is Cell.BOX_LEFT for row in wide.grid.grid for cell in row) == 1


def test_unknown_cell_raises():
    with pytest.raises(ParseGridError):
        Warehouse.parse("###\n#x@\n###\n\n>")


def test_unknown_move_raises():
    with pytest.raises(ValueError):
        Warehouse.parse("###\n#@#\n###\n\n>x")


def test_missing_robot_raises():
    with pytest.raises(ValueError, match="No robot found"):
        Warehouse.parse("###\n#.#\n###\n\n>")


def test_missing_moves_section_raises():
    with pytest.raises(ValueError):
        Warehouse.parse("###\n#@#\n###")