"""
Robotable Session - Main Orchestrator

A session owns one table and one interpreter and keeps the message log
a user sees. It is the explicit context for a simulation: nothing is
global, so any number of independent sessions can run side by side.

Typical flow:
1. Build a session from a SessionConfig (or defaults from the environment)
2. run() command scripts, one or many times
3. Read back outcomes, messages, the last report or an ASCII rendering
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union

from .config import SessionConfig, create_config, get_default_config
from .interpreter.executor import CommandInterpreter, CommandOutcome
from .reporting.messages import format_outcome, format_report
from .reporting.renderer import TableRenderer
from .table.robot import RobotSnapshot
from .table.table import Table, TableSnapshot


# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """
    Result of running one script in a session.
    """
    script: str
    multiple: bool = False
    outcomes: List[CommandOutcome] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    reports: List[str] = field(default_factory=list)

    @property
    def errors(self) -> List[CommandOutcome]:
        return [o for o in self.outcomes if o.outcome.is_error]

    @property
    def warnings(self) -> List[CommandOutcome]:
        return [o for o in self.outcomes if o.outcome.is_warning]

    @property
    def success(self) -> bool:
        """True if no line produced an error (warnings are allowed)."""
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Export result to dictionary."""
        return {
            "script": self.script,
            "multiple": self.multiple,
            "outcomes": [o.to_dict() for o in self.outcomes],
            "messages": self.messages,
            "reports": self.reports,
            "success": self.success,
        }


class Session:
    """
    One independent simulation: a table, an interpreter and a log.

    Example:
        session = Session(config=create_config(width=5, height=5))
        result = session.run("PLACE 0,0,NORTH\\nMOVE\\nREPORT")
        print(result.reports[-1])    # 0,1,NORTH
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        table: Optional[Table] = None,
    ):
        """
        Initialize the session.

        Args:
            config: Session configuration (defaults from environment)
            table: Pre-built table (overrides the configured dimensions)
        """
        self.config = config or get_default_config()
        if table is None:
            self.config.validate()
            table = Table(self.config.table.width, self.config.table.height)
        self.table = table
        self.interpreter = CommandInterpreter(self.table)
        self.renderer = TableRenderer()

        self.log: List[str] = []
        self.last_report: Optional[str] = None
        logger.info(f"Session started on a {self.table.width}x{self.table.height} table")

    def run(self, script: str, multiple: Optional[bool] = None) -> SessionResult:
        """
        Execute a command script.

        Args:
            script: Command text, one command per line
            multiple: Overrides the configured mode for this run

        Returns:
            SessionResult with outcomes, messages and reports
        """
        if multiple is None:
            multiple = self.config.multiple
        result = SessionResult(script=script, multiple=multiple)

        def on_outcome(outcome: CommandOutcome) -> None:
            result.outcomes.append(outcome)
            message = format_outcome(outcome)
            if message:
                self._log(result, message)

        def on_report(snapshot: Union[RobotSnapshot, TableSnapshot]) -> None:
            report = format_report(snapshot)
            self.last_report = report
            result.reports.append(report)
            self._log(result, f"REPORT: {report}")

        self.interpreter.execute(script, multiple=multiple, sink=on_outcome, reporter=on_report)

        logger.info(
            f"Ran {len(result.outcomes)} commands: "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def _log(self, result: SessionResult, message: str) -> None:
        if not self.config.logging_enabled:
            return
        result.messages.append(message)
        self.log.append(message)

    def snapshot(self) -> TableSnapshot:
        return self.interpreter.snapshot()

    def render(self) -> str:
        """ASCII drawing of the table."""
        return self.renderer.render(self.snapshot())

    def clear(self) -> None:
        """Remove all robots and forget the log."""
        self.table.clear()
        self.log.clear()
        self.last_report = None


def create_session(
    width: Optional[int] = None,
    height: Optional[int] = None,
    multiple: Optional[bool] = None,
    **kwargs
) -> Session:
    """
    Factory function to create a session.

    Args:
        width: Table width
        height: Table height
        multiple: Multiple-robot mode
        **kwargs: Passed to create_config()

    Returns:
        Configured Session
    """
    return Session(config=create_config(width=width, height=height, multiple=multiple, **kwargs))
