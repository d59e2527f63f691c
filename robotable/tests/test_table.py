"""
Tests for the Table Module (grid, robots, table).
"""

import pytest
from src.outcomes import Outcome
from src.table.grid import OccupancyGrid
from src.table.robot import RobotEntity, Facing, OFF_TABLE
from src.table.table import Table, TableSnapshot, PlacementError


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def grid():
    return OccupancyGrid(5, 5)


@pytest.fixture
def robot(grid):
    return RobotEntity(1, grid)


@pytest.fixture
def table():
    return Table(5, 5)


# =============================================================================
# OCCUPANCY GRID
# =============================================================================

class TestOccupancyGrid:
    """Tests for OccupancyGrid."""

    def test_valid_positions(self, grid):
        assert grid.is_valid(0, 0)
        assert grid.is_valid(4, 4)
        assert not grid.is_valid(-1, 0)
        assert not grid.is_valid(0, -1)
        assert not grid.is_valid(5, 0)
        assert not grid.is_valid(0, 5)

    def test_non_square_bounds(self):
        grid = OccupancyGrid(3, 7)
        assert grid.is_valid(2, 6)
        assert not grid.is_valid(3, 6)
        assert not grid.is_valid(2, 7)

    def test_occupy_and_vacate(self, grid):
        assert not grid.is_occupied(1, 1)
        grid.occupy("a", 1, 1)
        assert grid.is_occupied(1, 1)
        assert grid.occupant_at(1, 1) == "a"
        grid.vacate(1, 1)
        assert not grid.is_occupied(1, 1)
        assert grid.occupant_at(1, 1) is None

    def test_vacate_empty_cell_is_noop(self, grid):
        grid.vacate(2, 2)
        assert len(grid) == 0

    def test_occupy_overwrites(self, grid):
        grid.occupy("a", 0, 0)
        grid.occupy("b", 0, 0)
        assert grid.occupant_at(0, 0) == "b"
        assert len(grid) == 1

    def test_clear(self, grid):
        grid.occupy("a", 0, 0)
        grid.occupy("b", 1, 0)
        grid.clear()
        assert len(grid) == 0
        assert not grid.is_occupied(0, 0)

    def test_occupied_cells(self, grid):
        grid.occupy("a", 0, 0)
        grid.occupy("b", 3, 2)
        assert list(grid.occupied_cells()) == [((0, 0), "a"), ((3, 2), "b")]

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(ValueError):
            OccupancyGrid(width, height)


# =============================================================================
# FACING
# =============================================================================

class TestFacing:
    """Tests for Facing."""

    def test_clockwise_ordinals(self):
        assert [f.value for f in (Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST)] == [0, 1, 2, 3]

    def test_deltas(self):
        assert Facing.NORTH.delta == (0, 1)
        assert Facing.EAST.delta == (1, 0)
        assert Facing.SOUTH.delta == (0, -1)
        assert Facing.WEST.delta == (-1, 0)

    def test_turned_wraps(self):
        assert Facing.NORTH.turned(-1) == Facing.WEST
        assert Facing.WEST.turned(1) == Facing.NORTH

    @pytest.mark.parametrize("facing", list(Facing))
    @pytest.mark.parametrize("side", [-1, 1])
    def test_four_turns_is_identity(self, facing, side):
        assert facing.turned(side).turned(side).turned(side).turned(side) == facing

    @pytest.mark.parametrize("word,expected", [
        ("NORTH", Facing.NORTH),
        ("east", Facing.EAST),
        ("South", Facing.SOUTH),
        ("W", Facing.WEST),
    ])
    def test_from_word(self, word, expected):
        assert Facing.from_word(word) == expected

    @pytest.mark.parametrize("word", ["", "  ", "UP", "x"])
    def test_from_word_rejects_unknown(self, word):
        with pytest.raises(ValueError):
            Facing.from_word(word)


# =============================================================================
# ROBOT ENTITY
# =============================================================================

class TestRobotEntity:
    """Tests for RobotEntity."""

    def test_starts_off_table(self, robot):
        assert robot.position == OFF_TABLE
        assert not robot.is_placed

    def test_place_sets_position_and_facing(self, robot, grid):
        assert robot.place(2, 3, Facing.EAST) == Outcome.PLACED
        assert robot.position == (2, 3)
        assert robot.facing == Facing.EAST
        assert grid.occupant_at(2, 3) is robot

    @pytest.mark.parametrize("x", range(5))
    @pytest.mark.parametrize("y", range(5))
    def test_place_then_query_roundtrip(self, x, y):
        for facing in Facing:
            robot = RobotEntity(1, OccupancyGrid(5, 5))
            robot.place(x, y, facing)
            assert (robot.x, robot.y, robot.facing) == (x, y, facing)

    def test_place_out_of_bounds(self, robot, grid):
        assert robot.place(5, 0, Facing.NORTH) == Outcome.WARNING_POSITION_INVALID
        assert robot.position == OFF_TABLE
        assert len(grid) == 0

    def test_place_on_occupied_cell(self, robot, grid):
        grid.occupy("other", 1, 1)
        assert robot.place(1, 1, Facing.NORTH) == Outcome.WARNING_POSITION_OCCUPIED
        assert robot.position == OFF_TABLE

    def test_relocation_vacates_old_cell(self, robot, grid):
        robot.place(0, 0, Facing.NORTH)
        robot.place(3, 3, Facing.WEST)
        assert not grid.is_occupied(0, 0)
        assert grid.occupant_at(3, 3) is robot
        assert len(grid) == 1

    def test_failed_relocation_keeps_robot(self, robot, grid):
        robot.place(0, 0, Facing.NORTH)
        assert robot.place(9, 9, Facing.SOUTH) == Outcome.WARNING_POSITION_INVALID
        assert robot.position == (0, 0)
        assert robot.facing == Facing.NORTH
        assert grid.occupant_at(0, 0) is robot

    def test_turn_left_and_right(self, robot):
        robot.place(0, 0, Facing.NORTH)
        assert robot.turn(-1) == Outcome.TURNED
        assert robot.facing == Facing.WEST
        robot.turn(1)
        robot.turn(1)
        assert robot.facing == Facing.EAST

    def test_turn_does_not_touch_grid(self, robot, grid):
        robot.place(1, 1, Facing.NORTH)
        robot.turn(1)
        assert robot.position == (1, 1)
        assert list(grid.occupied_cells()) == [((1, 1), robot)]

    def test_turn_rejects_other_sides(self, robot):
        with pytest.raises(ValueError):
            robot.turn(2)

    @pytest.mark.parametrize("facing,expected", [
        (Facing.NORTH, (2, 3)),
        (Facing.EAST, (3, 2)),
        (Facing.SOUTH, (2, 1)),
        (Facing.WEST, (1, 2)),
    ])
    def test_move_each_direction(self, robot, grid, facing, expected):
        robot.place(2, 2, facing)
        outcome, target = robot.move()
        assert outcome == Outcome.MOVED
        assert target == expected
        assert robot.position == expected
        assert not grid.is_occupied(2, 2)
        assert grid.occupant_at(*expected) is robot

    def test_move_off_edge_reports_target(self, robot):
        robot.place(0, 4, Facing.NORTH)
        outcome, target = robot.move()
        assert outcome == Outcome.WARNING_POSITION_INVALID
        assert target == (0, 5)
        assert robot.position == (0, 4)

    def test_move_into_other_robot(self, robot, grid):
        other = RobotEntity(2, grid)
        other.place(1, 0, Facing.NORTH)
        robot.place(0, 0, Facing.EAST)
        outcome, target = robot.move()
        assert outcome == Outcome.WARNING_POSITION_OCCUPIED
        assert target == (1, 0)
        assert robot.position == (0, 0)
        assert grid.occupant_at(1, 0) is other

    def test_move_turn_around_move_roundtrip(self, robot):
        robot.place(2, 2, Facing.SOUTH)
        robot.move()
        robot.turn(-1)
        robot.turn(-1)
        robot.move()
        assert robot.position == (2, 2)
        assert robot.facing == Facing.NORTH

    def test_snapshot_is_detached(self, robot):
        robot.place(1, 2, Facing.WEST)
        snap = robot.snapshot()
        robot.move()
        assert snap.position == (1, 2)
        assert snap.to_dict() == {"id": 1, "x": 1, "y": 2, "facing": "WEST"}


# =============================================================================
# TABLE
# =============================================================================

class TestTable:
    """Tests for Table."""

    def test_empty_table(self, table):
        assert table.robot_count == 0
        assert table.active_robot is None
        assert table.width == 5
        assert table.height == 5

    def test_non_positive_dimensions_rejected(self):
        with pytest.raises(ValueError):
            Table(0, 5)

    def test_first_robot_becomes_active(self, table):
        robot = table.add_robot(0, 0, Facing.NORTH)
        assert robot.robot_id == 1
        assert table.active_robot is robot
        assert table.is_occupied(0, 0)

    def test_later_robots_do_not_steal_active(self, table):
        first = table.add_robot(0, 0, Facing.NORTH)
        second = table.add_robot(1, 1, Facing.EAST)
        assert second.robot_id == 2
        assert table.active_robot is first
        assert table.robots == [first, second]

    def test_add_robot_on_occupied_cell_raises(self, table):
        table.add_robot(0, 0, Facing.NORTH)
        with pytest.raises(PlacementError) as exc:
            table.add_robot(0, 0, Facing.EAST)
        assert exc.value.position == (0, 0)
        assert exc.value.outcome == Outcome.WARNING_POSITION_OCCUPIED
        assert table.robot_count == 1

    def test_add_robot_out_of_bounds_raises(self, table):
        with pytest.raises(PlacementError):
            table.add_robot(5, 5, Facing.EAST)
        assert table.robot_count == 0
        # The failed attempt does not consume an identifier
        assert table.add_robot(0, 0, Facing.NORTH).robot_id == 1

    def test_choose_robot(self, table):
        table.add_robot(0, 0, Facing.NORTH)
        second = table.add_robot(1, 1, Facing.EAST)
        assert table.choose_robot(2) is second
        assert table.active_robot is second

    def test_choose_unknown_robot_keeps_selection(self, table):
        first = table.add_robot(0, 0, Facing.NORTH)
        assert table.choose_robot(7) is None
        assert table.active_robot is first

    def test_clear_resets_everything(self, table):
        table.add_robot(0, 0, Facing.NORTH)
        table.add_robot(1, 1, Facing.EAST)
        table.clear()
        assert table.robot_count == 0
        assert table.active_robot is None
        assert not table.is_occupied(0, 0)
        assert table.add_robot(2, 2, Facing.SOUTH).robot_id == 1

    def test_identifiers_are_monotonic(self, table):
        ids = [table.add_robot(x, 0, Facing.NORTH).robot_id for x in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_snapshot(self, table):
        table.add_robot(0, 0, Facing.NORTH)
        table.add_robot(1, 1, Facing.EAST)
        snap = table.snapshot()
        assert isinstance(snap, TableSnapshot)
        assert snap.robot_count == 2
        assert snap.active.robot_id == 1
        assert snap.is_active(1)
        assert not snap.is_active(2)
        assert snap.to_dict()["active"] == {"id": 1, "x": 0, "y": 0, "facing": "NORTH"}

    def test_snapshot_of_empty_table(self, table):
        snap = table.snapshot()
        assert snap.robot_count == 0
        assert snap.active is None
        assert not snap.is_active(1)
