"""
Robotable - Robots on a Table

Simulates directional robots moving on a bounded grid, driven by a
small line-oriented command language (ROBOT, PLACE, LEFT, RIGHT, MOVE,
REPORT). Every command yields a structured outcome; errors and warnings
are reported, never raised.
"""

from .src.session import (
    Session,
    SessionResult,
    create_session,
)
from .src.config import (
    SessionConfig,
    TableConfig,
    create_config,
)
from .src.outcomes import Outcome, Severity
from .src.table import (
    OccupancyGrid,
    RobotEntity,
    RobotSnapshot,
    Facing,
    Table,
    TableSnapshot,
    TableError,
    PlacementError,
)
from .src.interpreter import (
    CommandInterpreter,
    CommandOutcome,
    parse_line,
)
from .src.reporting import format_outcome, format_report, TableRenderer
from .src.generation import RandomCommandGenerator, generate_random_script

__version__ = "0.1.0"

__all__ = [
    # Session
    "Session",
    "SessionResult",
    "create_session",
    "SessionConfig",
    "TableConfig",
    "create_config",
    # Core
    "Outcome",
    "Severity",
    "OccupancyGrid",
    "RobotEntity",
    "RobotSnapshot",
    "Facing",
    "Table",
    "TableSnapshot",
    "TableError",
    "PlacementError",
    "CommandInterpreter",
    "CommandOutcome",
    "parse_line",
    # Presentation
    "format_outcome",
    "format_report",
    "TableRenderer",
    "RandomCommandGenerator",
    "generate_random_script",
]
