"""
Outcome Messages

Turns outcomes and report snapshots into the human-readable lines shown
to users. Nothing here touches simulation state.
"""

from typing import Optional, Union

from ..outcomes import Outcome
from ..interpreter.executor import CommandOutcome
from ..table.robot import RobotSnapshot
from ..table.table import TableSnapshot


def _coords(params) -> str:
    return ",".join(str(p) for p in params)


def robot_position(robot: RobotSnapshot) -> str:
    """Position and facing as 'x,y,FACING'."""
    return f"{robot.x},{robot.y},{robot.facing.name}"


def format_report(snapshot: Union[RobotSnapshot, TableSnapshot]) -> str:
    """
    Describe a robot or a whole table.

    Args:
        snapshot: A single robot (single mode) or the table (multiple mode)

    Returns:
        'x,y,FACING' for a robot, otherwise e.g.
        '2 robots on table. Robot 1 at (0,1,NORTH) is active'
    """
    if isinstance(snapshot, RobotSnapshot):
        return robot_position(snapshot)

    count = snapshot.robot_count
    suffix = "s" if count > 1 else ""
    message = f"{count} robot{suffix} on table"
    if snapshot.active is not None:
        active = snapshot.active
        message += f". Robot {active.robot_id} at ({robot_position(active)}) is active"
    return message


def format_outcome(result: CommandOutcome) -> Optional[str]:
    """
    Build the log line for an outcome.

    Returns:
        The message, or None for REPORTED (the report has its own line)
    """
    robot = result.robot
    params = _coords(result.params)
    outcome = result.outcome

    if outcome is Outcome.ERROR_INVALID_COMMAND:
        return f"ERROR: Invalid command - {result.command}"
    if outcome is Outcome.ERROR_NO_ACTIVE_ROBOT:
        return "ERROR: There is no active robot"
    if outcome is Outcome.ERROR_NOT_ON_TABLE:
        return f"ERROR: Robot {params} is not on table"

    # Warnings read differently for PLACE and for MOVE
    if outcome is Outcome.WARNING_POSITION_INVALID:
        if result.command == "MOVE":
            return f"WARNING: Motion forbidden - ({params}) is out of table"
        return f"WARNING: Position ({params}) is out of table"
    if outcome is Outcome.WARNING_POSITION_OCCUPIED:
        if result.command == "MOVE":
            return f"WARNING: Motion forbidden - ({params}) is occupied"
        return f"WARNING: Position ({params}) is occupied"

    if outcome is Outcome.REPORTED:
        return None

    where = f"({robot.x},{robot.y})"
    messages = {
        Outcome.PLACED_AND_ACTIVATED: f"DONE: Robot {robot.robot_id} was placed at {where} and activated",
        Outcome.PLACED: f"DONE: Robot {robot.robot_id} was placed at {where}",
        Outcome.RELOCATED: f"DONE: Robot {robot.robot_id} was relocated to {where}",
        Outcome.MOVED: f"DONE: Robot {robot.robot_id} moved to {where}",
        Outcome.TURNED: f"DONE: Robot {robot.robot_id} turned to {robot.facing.name}",
        Outcome.ACTIVATED: f"DONE: Robot {robot.robot_id} was activated",
    }
    return messages[outcome]
