"""
Interpreter Module - Command Language

Parses command scripts and applies them to a table, emitting one
outcome per non-blank line.
"""

from .commands import (
    Verb,
    CommandPattern,
    COMMAND_PATTERNS,
    ParsedCommand,
    parse_line,
    normalize,
)
from .executor import (
    CommandInterpreter,
    CommandOutcome,
    OutcomeSink,
    ReportCallback,
)

__all__ = [
    "Verb",
    "CommandPattern",
    "COMMAND_PATTERNS",
    "ParsedCommand",
    "parse_line",
    "normalize",
    "CommandInterpreter",
    "CommandOutcome",
    "OutcomeSink",
    "ReportCallback",
]
