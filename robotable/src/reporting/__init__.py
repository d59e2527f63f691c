"""
Reporting Module - Presentation Helpers

Formats outcomes and reports as text and draws tables in ASCII. This
layer only reads snapshots; it never mutates simulation state.
"""

from .messages import format_outcome, format_report, robot_position
from .renderer import TableRenderer

__all__ = [
    "format_outcome",
    "format_report",
    "robot_position",
    "TableRenderer",
]
