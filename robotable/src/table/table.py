"""
Table

The table owns an occupancy grid and the registry of robots placed on
it. It assigns robot identifiers and tracks which robot is active.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .grid import OccupancyGrid, Coordinate
from .robot import RobotEntity, RobotSnapshot, Facing
from ..outcomes import Outcome

logger = logging.getLogger(__name__)


class TableError(Exception):
    """Base class for table contract violations."""


class PlacementError(TableError):
    """
    Raised when add_robot is asked to place a robot on a cell that is
    out of bounds or already occupied.

    Callers must validate the position before adding a robot, so this
    always indicates misuse rather than bad user input.
    """

    def __init__(self, message: str, position: Coordinate, outcome: Outcome):
        super().__init__(message)
        self.position = position
        self.outcome = outcome


@dataclass(frozen=True)
class TableSnapshot:
    """
    Read-only view of a table, handed to reporting callbacks.
    """
    width: int
    height: int
    robots: Tuple[RobotSnapshot, ...] = field(default_factory=tuple)
    active: Optional[RobotSnapshot] = None

    @property
    def robot_count(self) -> int:
        return len(self.robots)

    def is_active(self, robot_id: int) -> bool:
        """Check if the robot with the given identifier is the active one."""
        return self.active is not None and self.active.robot_id == robot_id

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "robot_count": self.robot_count,
            "active": self.active.to_dict() if self.active else None,
            "robots": [r.to_dict() for r in self.robots],
        }


class Table:
    """
    A bounded grid plus the robots standing on it.

    Robots are only ever created through add_robot and are owned by the
    table. Identifiers are assigned from a counter that only clear()
    resets, so an identifier is never reused within the table's life.

    Example:
        table = Table(5, 5)
        robot = table.add_robot(0, 0, Facing.NORTH)
        assert table.active_robot is robot
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty table.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        self.grid = OccupancyGrid(width, height)
        self._robots: Dict[int, RobotEntity] = {}
        self.active_robot: Optional[RobotEntity] = None
        self._last_robot_id = 0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def robots(self) -> List[RobotEntity]:
        """Registered robots in the order they were added."""
        return list(self._robots.values())

    @property
    def robot_count(self) -> int:
        return len(self._robots)

    def is_valid(self, x: int, y: int) -> bool:
        return self.grid.is_valid(x, y)

    def is_occupied(self, x: int, y: int) -> bool:
        return self.grid.is_occupied(x, y)

    def get_robot(self, robot_id: int) -> Optional[RobotEntity]:
        return self._robots.get(robot_id)

    def add_robot(self, x: int, y: int, facing: Facing) -> RobotEntity:
        """
        Create a robot, place it and register it.

        The new robot becomes active only if no robot is active yet.

        Args:
            x: Column, must be valid and empty
            y: Row, must be valid and empty
            facing: Initial facing

        Returns:
            The new robot

        Raises:
            PlacementError: If the position is invalid or occupied
        """
        robot = RobotEntity(self._last_robot_id + 1, self.grid)
        outcome = robot.place(x, y, facing)
        if outcome is not Outcome.PLACED:
            raise PlacementError(
                f"Cannot add robot at ({x}, {y}): {outcome.name}",
                position=(x, y),
                outcome=outcome,
            )

        self._last_robot_id = robot.robot_id
        self._robots[robot.robot_id] = robot
        if self.active_robot is None:
            self.active_robot = robot
        logger.info(f"Robot {robot.robot_id} added at ({x}, {y})")
        return robot

    def choose_robot(self, robot_id: int) -> Optional[RobotEntity]:
        """
        Make a registered robot the active one.

        Returns:
            The robot, or None if no robot has that identifier (the
            active selection is then left untouched)
        """
        robot = self._robots.get(robot_id)
        if robot is None:
            return None
        self.active_robot = robot
        return robot

    def clear(self) -> None:
        """Remove every robot and reset identifiers and the active selection."""
        self.grid.clear()
        self._robots.clear()
        self._last_robot_id = 0
        self.active_robot = None
        logger.info("Table cleared")

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            width=self.width,
            height=self.height,
            robots=tuple(r.snapshot() for r in self._robots.values()),
            active=self.active_robot.snapshot() if self.active_robot else None,
        )

    def __repr__(self) -> str:
        active = self.active_robot.robot_id if self.active_robot else None
        return f"Table({self.width}x{self.height}, robots={self.robot_count}, active={active})"
