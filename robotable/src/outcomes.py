"""
Outcome Taxonomy

Every command line the interpreter processes yields exactly one outcome
tag. Outcomes are reported values, never exceptions: errors and warnings
are ordinary results and the script keeps running.

Codes follow a fixed numbering:
- negative, above -100: errors (the command could not be interpreted)
- -100 and below: warnings (the command was valid but the target cell
  was out of bounds or occupied)
- positive: done (the command took effect)
"""

from enum import Enum


class Severity(Enum):
    """Coarse classification of an outcome."""
    ERROR = "error"
    WARNING = "warning"
    DONE = "done"


class Outcome(Enum):
    """Result tag of a single command."""

    ERROR_INVALID_COMMAND = -1
    ERROR_NO_ACTIVE_ROBOT = -2
    ERROR_NOT_ON_TABLE = -3

    WARNING_POSITION_INVALID = -100
    WARNING_POSITION_OCCUPIED = -101

    REPORTED = 1

    PLACED_AND_ACTIVATED = 100
    PLACED = 101
    RELOCATED = 102

    MOVED = 200
    TURNED = 300
    ACTIVATED = 400

    @property
    def code(self) -> int:
        return self.value

    @property
    def severity(self) -> Severity:
        if self.value > 0:
            return Severity.DONE
        if self.value <= -100:
            return Severity.WARNING
        return Severity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_done(self) -> bool:
        return self.severity is Severity.DONE
