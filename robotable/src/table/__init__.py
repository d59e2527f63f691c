"""
Table Module - Spatial State

The occupancy grid, the robots that move on it, and the table that owns
both. All state changes of the simulation happen here.
"""

from .grid import OccupancyGrid, Coordinate
from .robot import RobotEntity, RobotSnapshot, Facing, OFF_TABLE
from .table import Table, TableSnapshot, TableError, PlacementError

__all__ = [
    "OccupancyGrid",
    "Coordinate",
    "RobotEntity",
    "RobotSnapshot",
    "Facing",
    "OFF_TABLE",
    "Table",
    "TableSnapshot",
    "TableError",
    "PlacementError",
]
