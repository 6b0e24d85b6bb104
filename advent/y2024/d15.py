"""A warehouse robot pushing boxes around, in normal and double width."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from advent.grid import Grid

Position = tuple[int, int]
"""A cell as ``(line, column)``."""

_GPS_LINE_FACTOR = 100


class Direction(Enum):
    """A robot move, valued by its ``(line, column)`` step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Cell(Enum):
    """What occupies one cell, valued by how it is drawn."""

    BOX = "O"
    ROBOT = "@"
    WALL = "#"
    EMPTY = "."
    BOX_LEFT = "["
    BOX_RIGHT = "]"


_CELLS = {"@": Cell.ROBOT, "#": Cell.WALL, ".": Cell.EMPTY, "O": Cell.BOX}
_MOVES = {">": Direction.RIGHT, "<": Direction.LEFT, "v": Direction.DOWN, "^": Direction.UP}
_WIDE = {
    Cell.EMPTY: (Cell.EMPTY, Cell.EMPTY),
    Cell.BOX: (Cell.BOX_LEFT, Cell.BOX_RIGHT),
    Cell.ROBOT: (Cell.ROBOT, Cell.EMPTY),
    Cell.WALL: (Cell.WALL, Cell.WALL),
}
_HALVES = (Cell.BOX_LEFT, Cell.BOX_RIGHT)


def _parse_cell(char: str) -> Cell:
    try:
        return _CELLS[char]
    except KeyError:
        raise ValueError(f"unknown cell {char!r}") from None


def _parse_moves(text: str) -> list[Direction]:
    moves = []
    for char in text:
        if char == "\n":
            continue
        try:
            moves.append(_MOVES[char])
        except KeyError:
            raise ValueError(f"unknown move {char!r}") from None
    return moves


def _find_robot(grid: Grid[Cell]) -> Position:
    for x, row in enumerate(grid.grid):
        for y, cell in enumerate(row):
            if cell is Cell.ROBOT:
                return x, y
    raise ValueError("No robot found")


def _shift(pos: Position, direction: Direction) -> Position:
    dx, dy = direction.value
    return pos[0] + dx, pos[1] + dy


@dataclass
class Warehouse:
    """The warehouse map, the robot's position and the moves it will make."""

    grid: Grid[Cell]
    robot: Position
    moves: list[Direction] = field(default_factory=list)
    wide: bool = False

    @classmethod
    def parse(cls, text: str) -> Warehouse:
        """Read a map, a blank line, then the moves (line breaks ignored)."""
        sections = text.split("\n\n")
        if len(sections) < 2:
            raise ValueError("expected a map and moves separated by a blank line")
        grid = Grid.parse(sections[0], _parse_cell)
        return cls(grid, _find_robot(grid), _parse_moves(sections[1]))

    def _at(self, pos: Position) -> Cell:
        x, y = pos
        rows = self.grid.grid
        if not (0 <= x < len(rows) and 0 <= y < len(rows[x])):
            raise IndexError(f"position {pos} is outside the warehouse")
        return rows[x][y]

    def _put(self, pos: Position, cell: Cell) -> None:
        self._at(pos)
        self.grid.grid[pos[0]][pos[1]] = cell

    def _step_robot(self, direction: Direction) -> None:
        target = _shift(self.robot, direction)
        self._put(self.robot, Cell.EMPTY)
        self._put(target, Cell.ROBOT)
        self.robot = target

    def _next_empty(self, direction: Direction) -> Position | None:
        pos = self.robot
        while True:
            pos = _shift(pos, direction)
            cell = self._at(pos)
            if cell is Cell.EMPTY:
                return pos
            if cell is Cell.WALL:
                return None
            if cell is Cell.ROBOT:
                raise ValueError("found a second robot")

    def _move_narrow(self, direction: Direction) -> None:
        target = self._next_empty(direction)
        if target is None:
            return
        self._put(target, Cell.BOX)
        self._step_robot(direction)

    def _move_wide(self, direction: Direction) -> None:
        if direction in (Direction.LEFT, Direction.RIGHT):
            target = self._next_empty(direction)
            if target is None:
                return
            line, end = target
            if direction is Direction.LEFT:
                for col in range(end, self.robot[1]):
                    half = Cell.BOX_LEFT if (col - end) % 2 == 0 else Cell.BOX_RIGHT
                    self._put((line, col), half)
            else:
                for col in range(self.robot[1] + 1, end + 1):
                    half = Cell.BOX_RIGHT if (end - col) % 2 == 0 else Cell.BOX_LEFT
                    self._put((line, col), half)
            self._step_robot(direction)
            return
        ahead = _shift(self.robot, direction)
        cell = self._at(ahead)
        if cell in _HALVES:
            if self._push_boxes(ahead, direction):
                self._step_robot(direction)
        elif cell is Cell.EMPTY:
            self._step_robot(direction)

    def _push_boxes(self, start: Position, direction: Direction) -> bool:
        """Push the wide box at ``start`` and all it touches; False when a wall blocks."""
        dx = direction.value[0]
        if dx == 0:
            raise ValueError("wide boxes are only pushed vertically here")
        after = [list(row) for row in self.grid.grid]
        new_boxes: set[Position] = set()
        pending = [start]
        while pending:
            x, y = pending.pop()
            cell = self._at((x, y))
            if cell is Cell.BOX_RIGHT:
                partner_dy, partner = -1, Cell.BOX_LEFT
            elif cell is Cell.BOX_LEFT:
                partner_dy, partner = 1, Cell.BOX_RIGHT
            else:
                raise ValueError("Trying to move a non box")
            pushed = (x + dx, y)
            sticked = (x + dx, y + partner_dy)
            pushed_cell = self._at(pushed)
            if pushed_cell is Cell.WALL:
                return False
            if pushed_cell in _HALVES:
                pending.append(pushed)
            sticked_cell = self._at(sticked)
            if sticked_cell is Cell.WALL:
                return False
            if sticked_cell is cell:
                pending.append(sticked)
            if (x, y) not in new_boxes:
                after[x][y] = Cell.EMPTY
            if (x, y + partner_dy) not in new_boxes:
                after[x][y + partner_dy] = Cell.EMPTY
            after[pushed[0]][pushed[1]] = cell
            after[sticked[0]][sticked[1]] = partner
            new_boxes.update((pushed, sticked))
        self.grid.grid = after
        return True

    def scale(self) -> Warehouse:
        """The same warehouse with every cell doubled in width."""
        rows = []
        for row in self.grid.grid:
            wide_row = []
            for cell in row:
                try:
                    wide_row.extend(_WIDE[cell])
                except KeyError:
                    raise ValueError("Unexpected case") from None
            rows.append(wide_row)
        grid = Grid(rows, self.grid.max_x, self.grid.max_y * 2)
        return Warehouse(grid, _find_robot(grid), list(self.moves), wide=True)

    def simulate(self) -> None:
        """Play every move in order."""
        move = self._move_wide if self.wide else self._move_narrow
        for direction in list(self.moves):
            move(direction)

    def gps_total(self) -> int:
        """Sum of ``100 * line + column`` over every box (left half when wide)."""
        return sum(
            _GPS_LINE_FACTOR * x + y
            for x, row in enumerate(self.grid.grid)
            for y, cell in enumerate(row)
            if cell in (Cell.BOX, Cell.BOX_LEFT)
        )


def part_one(text: str) -> int:
    """GPS total after the robot has made all its moves."""
    warehouse = Warehouse.parse(text)
    warehouse.simulate()
    return warehouse.gps_total()


def part_two(text: str) -> int:
    """GPS total after the moves in the double width warehouse."""
    warehouse = Warehouse.parse(text).scale()
    warehouse.simulate()
    return warehouse.gps_total()