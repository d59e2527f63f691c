"""
Command Interpreter

Runs a multi-line command script against a table. Each non-blank line
produces exactly one CommandOutcome, delivered to the outcome sink as
soon as it is computed. Processing never stops on an error or warning;
the whole script is always executed.

The only state carried from line to line is which robot is active.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .commands import ParsedCommand, Verb, parse_line, split_script
from ..outcomes import Outcome
from ..table.robot import RobotEntity, RobotSnapshot
from ..table.table import Table, TableSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """
    Structured result of one command line.

    Attributes:
        command: Normalized command text (the bare keyword for ROBOT/PLACE)
        robot: Robot the outcome concerns, captured after the command ran
        outcome: Result tag
        params: Command parameters relevant to the outcome
            (ROBOT: (id,), PLACE: (x, y), MOVE: attempted (x, y))
    """
    command: str
    robot: Optional[RobotSnapshot]
    outcome: Outcome
    params: Tuple = ()

    @property
    def robot_id(self) -> Optional[int]:
        return self.robot.robot_id if self.robot else None

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "robot": self.robot.to_dict() if self.robot else None,
            "outcome": self.outcome.name,
            "code": self.outcome.code,
            "params": list(self.params),
        }


OutcomeSink = Callable[[CommandOutcome], None]
ReportCallback = Callable[[Union[RobotSnapshot, TableSnapshot]], None]


def _discard(_) -> None:
    pass


class CommandInterpreter:
    """
    Interprets command scripts against a single table.

    The outcome sink and the report callback are injected here and may
    be overridden per execute() call.

    Example:
        outcomes = []
        interpreter = CommandInterpreter(Table(5, 5), sink=outcomes.append)
        interpreter.execute("PLACE 0,0,NORTH\\nMOVE\\nREPORT")
        # outcomes: PLACED_AND_ACTIVATED, MOVED, REPORTED
    """

    def __init__(
        self,
        table: Table,
        sink: Optional[OutcomeSink] = None,
        reporter: Optional[ReportCallback] = None,
    ):
        """
        Initialize the interpreter.

        Args:
            table: Table to operate on
            sink: Called once with each outcome
            reporter: Called on REPORT with a robot or table snapshot
        """
        self.table = table
        self.sink = sink or _discard
        self.reporter = reporter or _discard

    def snapshot(self) -> TableSnapshot:
        """Read-only view of the table and its active robot."""
        return self.table.snapshot()

    def execute(
        self,
        script: str,
        multiple: bool = False,
        sink: Optional[OutcomeSink] = None,
        reporter: Optional[ReportCallback] = None,
    ) -> List[CommandOutcome]:
        """
        Execute every line of a script in order.

        Args:
            script: Command text, one command per line
            multiple: In multiple mode PLACE adds robots instead of
                relocating the active one, and REPORT describes the table
            sink: Overrides the interpreter's outcome sink for this call
            reporter: Overrides the interpreter's report callback for this call

        Returns:
            All outcomes emitted, in script order
        """
        sink = sink or self.sink
        reporter = reporter or self.reporter
        robot = self.table.active_robot
        outcomes: List[CommandOutcome] = []

        for line in split_script(script):
            command = parse_line(line)
            if command.verb is Verb.BLANK:
                continue

            result, robot = self._dispatch(command, robot, multiple, reporter)
            logger.debug(f"{result.command!r} -> {result.outcome.name} {result.params}")
            outcomes.append(result)
            sink(result)

        return outcomes

    def _dispatch(
        self,
        command: ParsedCommand,
        robot: Optional[RobotEntity],
        multiple: bool,
        reporter: ReportCallback,
    ) -> Tuple[CommandOutcome, Optional[RobotEntity]]:
        """Apply one parsed command. Returns the outcome and the new active robot."""
        if command.verb is Verb.ROBOT:
            return self._choose(command, robot)

        if command.verb is Verb.PLACE:
            return self._place(command, robot, multiple)

        if robot is None:
            return self._result(command.text, None, Outcome.ERROR_NO_ACTIVE_ROBOT), robot

        if command.verb is Verb.LEFT:
            return self._result(command.text, robot, robot.turn(-1)), robot

        if command.verb is Verb.RIGHT:
            return self._result(command.text, robot, robot.turn(1)), robot

        if command.verb is Verb.MOVE:
            outcome, target = robot.move()
            if not outcome.is_done:
                logger.info(f"Robot {robot.robot_id} cannot move to {target}: {outcome.name}")
            return self._result(command.text, robot, outcome, target), robot

        if command.verb is Verb.REPORT:
            reporter(self.table.snapshot() if multiple else robot.snapshot())
            return self._result(command.text, robot, Outcome.REPORTED), robot

        return self._result(command.text, robot, Outcome.ERROR_INVALID_COMMAND), robot

    def _choose(
        self, command: ParsedCommand, robot: Optional[RobotEntity]
    ) -> Tuple[CommandOutcome, Optional[RobotEntity]]:
        if command.malformed:
            return self._result(command.text, robot, Outcome.ERROR_INVALID_COMMAND), robot

        robot_id = command.robot_id
        chosen = self.table.choose_robot(robot_id)
        if chosen is None:
            return self._result("ROBOT", robot, Outcome.ERROR_NOT_ON_TABLE, (robot_id,)), robot
        return self._result("ROBOT", chosen, Outcome.ACTIVATED, (robot_id,)), chosen

    def _place(
        self, command: ParsedCommand, robot: Optional[RobotEntity], multiple: bool
    ) -> Tuple[CommandOutcome, Optional[RobotEntity]]:
        if command.malformed:
            return self._result(command.text, robot, Outcome.ERROR_INVALID_COMMAND), robot

        x, y, facing = command.placement
        params = (x, y)

        if not self.table.is_valid(x, y):
            return self._result("PLACE", robot, Outcome.WARNING_POSITION_INVALID, params), robot
        if self.table.is_occupied(x, y):
            return self._result("PLACE", robot, Outcome.WARNING_POSITION_OCCUPIED, params), robot

        if robot is None:
            robot = self.table.add_robot(x, y, facing)
            return self._result("PLACE", robot, Outcome.PLACED_AND_ACTIVATED, params), robot

        if multiple:
            added = self.table.add_robot(x, y, facing)
            return self._result("PLACE", added, Outcome.PLACED, params), robot

        robot.place(x, y, facing)
        return self._result("PLACE", robot, Outcome.RELOCATED, params), robot

    @staticmethod
    def _result(
        command: str,
        robot: Optional[RobotEntity],
        outcome: Outcome,
        params: Tuple = (),
    ) -> CommandOutcome:
        return CommandOutcome(
            command=command,
            robot=robot.snapshot() if robot else None,
            outcome=outcome,
            params=params,
        )
