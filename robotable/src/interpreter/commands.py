"""
Command Patterns - The fixed command language.

Six verbs, one command per line, case-insensitive:

    ROBOT  <id>
    PLACE  <x>,<y>,<NORTH|SOUTH|EAST|WEST>
    LEFT
    RIGHT
    MOVE
    REPORT

Parsing is purely syntactic. Whether a command can be carried out
(bounds, occupancy, active robot) is decided by the interpreter.
"""

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..table.robot import Facing


class Verb(Enum):
    """Kinds of command lines."""
    BLANK = "blank"
    ROBOT = "ROBOT"
    PLACE = "PLACE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    MOVE = "MOVE"
    REPORT = "REPORT"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CommandPattern:
    """
    Grammar of one verb.

    Attributes:
        verb: The verb this pattern recognizes
        syntax: Human-readable usage line
        regex: Full-line pattern over the normalized (upper-case) text
    """
    verb: Verb
    syntax: str
    regex: re.Pattern


COMMAND_PATTERNS: Dict[Verb, CommandPattern] = {
    Verb.ROBOT: CommandPattern(
        verb=Verb.ROBOT,
        syntax="ROBOT <id>",
        regex=re.compile(r"^ROBOT\s+(\d+)$", re.ASCII),
    ),
    Verb.PLACE: CommandPattern(
        verb=Verb.PLACE,
        syntax="PLACE <x>,<y>,<NORTH|SOUTH|EAST|WEST>",
        regex=re.compile(r"^PLACE\s+(\d+)\s*,\s*(\d+)\s*,\s*(NORTH|SOUTH|EAST|WEST)$", re.ASCII),
    ),
    Verb.LEFT: CommandPattern(Verb.LEFT, "LEFT", re.compile(r"^LEFT$")),
    Verb.RIGHT: CommandPattern(Verb.RIGHT, "RIGHT", re.compile(r"^RIGHT$")),
    Verb.MOVE: CommandPattern(Verb.MOVE, "MOVE", re.compile(r"^MOVE$")),
    Verb.REPORT: CommandPattern(Verb.REPORT, "REPORT", re.compile(r"^REPORT$")),
}


@dataclass(frozen=True)
class ParsedCommand:
    """
    One normalized command line.

    A line whose first word is ROBOT or PLACE keeps that verb even when
    its arguments do not parse; `malformed` is then True and `args` empty.
    """
    text: str
    verb: Verb
    args: Tuple = ()
    malformed: bool = False

    @property
    def robot_id(self) -> Optional[int]:
        return self.args[0] if self.verb is Verb.ROBOT and self.args else None

    @property
    def placement(self) -> Optional[Tuple[int, int, Facing]]:
        return self.args if self.verb is Verb.PLACE and self.args else None


def normalize(line: str) -> str:
    """Trim surrounding whitespace and upper-case a command line."""
    return line.strip().upper()


def _to_int(digits: str) -> int:
    """
    Convert a run of ASCII digits, saturating at sys.maxsize.

    No table is that large, so an oversized number still parses and is
    simply out of range (or names no robot).
    """
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(sys.maxsize)):
        return sys.maxsize
    return min(int(digits), sys.maxsize)


def parse_line(line: str) -> ParsedCommand:
    """
    Classify a single command line.

    Args:
        line: Raw line of a command script

    Returns:
        ParsedCommand with typed arguments (ROBOT: id, PLACE: x, y, facing)
    """
    text = normalize(line)
    if not text:
        return ParsedCommand(text=text, verb=Verb.BLANK)

    keyword = text.split(None, 1)[0]

    if keyword == Verb.ROBOT.value:
        match = COMMAND_PATTERNS[Verb.ROBOT].regex.match(text)
        if not match:
            return ParsedCommand(text=text, verb=Verb.ROBOT, malformed=True)
        return ParsedCommand(text=text, verb=Verb.ROBOT, args=(_to_int(match.group(1)),))

    if keyword == Verb.PLACE.value:
        match = COMMAND_PATTERNS[Verb.PLACE].regex.match(text)
        if not match:
            return ParsedCommand(text=text, verb=Verb.PLACE, malformed=True)
        x, y, word = match.groups()
        return ParsedCommand(
            text=text,
            verb=Verb.PLACE,
            args=(_to_int(x), _to_int(y), Facing.from_word(word)),
        )

    for verb in (Verb.LEFT, Verb.RIGHT, Verb.MOVE, Verb.REPORT):
        if COMMAND_PATTERNS[verb].regex.match(text):
            return ParsedCommand(text=text, verb=verb)

    return ParsedCommand(text=text, verb=Verb.UNKNOWN)


def split_script(script: str) -> List[str]:
    """Split a multi-line script into raw lines (any newline convention)."""
    return script.splitlines()
