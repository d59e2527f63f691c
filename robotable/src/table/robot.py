"""
Robot Entity

A single directional robot bound to an occupancy grid. The robot knows
how to attempt placement, turning and forward motion; each attempt
returns an Outcome tag instead of raising.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .grid import OccupancyGrid, Coordinate
from ..outcomes import Outcome

logger = logging.getLogger(__name__)


OFF_TABLE: Coordinate = (-1, -1)


class Facing(IntEnum):
    """Robot facing, numbered clockwise starting from north."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) in this direction. North increases y."""
        steps = {
            Facing.NORTH: (0, 1),
            Facing.EAST: (1, 0),
            Facing.SOUTH: (0, -1),
            Facing.WEST: (-1, 0),
        }
        return steps[self]

    def turned(self, side: int) -> "Facing":
        """Facing after a quarter turn (-1 counter-clockwise, +1 clockwise)."""
        return Facing((self + 4 + side) % 4)

    @classmethod
    def from_word(cls, word: str) -> "Facing":
        """
        Parse a facing word, matched case-insensitively by first letter.

        Raises:
            ValueError: If the word does not start with N, E, S or W
        """
        letter = word.strip()[:1].upper()
        if not letter or letter not in "NESW":
            raise ValueError(f"Unknown facing: {word!r}")
        return cls("NESW".index(letter))


@dataclass(frozen=True)
class RobotSnapshot:
    """Immutable view of a robot, handed to reporting callbacks."""
    robot_id: int
    x: int
    y: int
    facing: Facing

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "id": self.robot_id,
            "x": self.x,
            "y": self.y,
            "facing": self.facing.name,
        }


class RobotEntity:
    """
    A robot with a stable identifier, a position and a facing.

    The robot holds a non-owning reference to the grid it moves on. Until
    its first successful placement it sits at the off-table sentinel
    position (-1, -1).
    """

    def __init__(self, robot_id: int, grid: OccupancyGrid):
        self.robot_id = robot_id
        self.grid = grid
        self.x, self.y = OFF_TABLE
        self.facing = Facing.NORTH

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def is_placed(self) -> bool:
        return self.grid.is_valid(self.x, self.y)

    @property
    def facing_name(self) -> str:
        return self.facing.name

    def place(self, x: int, y: int, facing: Facing) -> Outcome:
        """
        Put the robot at a position, or relocate it there.

        Args:
            x: Target column
            y: Target row
            facing: Facing after placement

        Returns:
            PLACED on success, otherwise a WARNING_* outcome and the
            robot is left unchanged
        """
        if not self.grid.is_valid(x, y):
            return Outcome.WARNING_POSITION_INVALID
        if self.grid.is_occupied(x, y):
            return Outcome.WARNING_POSITION_OCCUPIED

        if self.is_placed:
            self.grid.vacate(self.x, self.y)
        self.grid.occupy(self, x, y)
        self.x, self.y = x, y
        self.facing = Facing(facing)
        logger.debug(f"Robot {self.robot_id} placed at ({x}, {y}) facing {self.facing.name}")
        return Outcome.PLACED

    def turn(self, side: int) -> Outcome:
        """
        Rotate a quarter turn in place.

        Args:
            side: -1 for counter-clockwise (left), +1 for clockwise (right)

        Raises:
            ValueError: If side is not -1 or +1
        """
        if side not in (-1, 1):
            raise ValueError(f"Turn side must be -1 or 1, got {side}")
        self.facing = self.facing.turned(side)
        return Outcome.TURNED

    def target(self) -> Coordinate:
        """The cell one step ahead in the current facing."""
        dx, dy = self.facing.delta
        return (self.x + dx, self.y + dy)

    def move(self) -> Tuple[Outcome, Coordinate]:
        """
        Step one cell forward.

        Returns:
            Tuple of (outcome, attempted target). The target is returned
            whether or not the move succeeded.
        """
        x, y = self.target()

        if not self.grid.is_valid(x, y):
            return Outcome.WARNING_POSITION_INVALID, (x, y)
        if self.grid.is_occupied(x, y):
            return Outcome.WARNING_POSITION_OCCUPIED, (x, y)

        self.grid.vacate(self.x, self.y)
        self.grid.occupy(self, x, y)
        self.x, self.y = x, y
        return Outcome.MOVED, (x, y)

    def snapshot(self) -> RobotSnapshot:
        return RobotSnapshot(self.robot_id, self.x, self.y, self.facing)

    def __repr__(self) -> str:
        return f"RobotEntity(id={self.robot_id}, x={self.x}, y={self.y}, facing={self.facing.name})"
