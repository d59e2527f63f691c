"""
Table Renderer

ASCII rendering of a table snapshot: a box-drawn grid with the highest
row on top, one arrow per robot and a legend listing every robot.
"""

from typing import List

from ..table.table import TableSnapshot
from .messages import robot_position


class TableRenderer:
    """
    Draws table snapshots as text.

    Robots are drawn as hollow arrows pointing where they face; the
    active robot is drawn with a filled arrow.
    """

    DIRECTION_ARROWS = {
        "NORTH": "△",
        "SOUTH": "▽",
        "EAST": "▷",
        "WEST": "◁"
    }

    ACTIVE_ARROWS = {
        "NORTH": "▲",
        "SOUTH": "▼",
        "EAST": "▶",
        "WEST": "◀"
    }

    EMPTY = "·"

    def __init__(self, show_legend: bool = True):
        self.show_legend = show_legend

    def render(self, snapshot: TableSnapshot) -> str:
        """
        Render a table.

        Args:
            snapshot: Table to draw

        Returns:
            Multi-line string
        """
        cells = {}
        for robot in snapshot.robots:
            arrows = self.ACTIVE_ARROWS if snapshot.is_active(robot.robot_id) else self.DIRECTION_ARROWS
            cells[robot.position] = arrows[robot.facing.name]

        lines: List[str] = []
        lines.append("┌" + "─" * (snapshot.width * 2 + 1) + "┐")

        for y in range(snapshot.height - 1, -1, -1):
            row = "│ "
            for x in range(snapshot.width):
                row += cells.get((x, y), self.EMPTY) + " "
            row += "│"
            lines.append(row + f" {y}")

        lines.append("└" + "─" * (snapshot.width * 2 + 1) + "┘")
        lines.append("  " + " ".join(str(x % 10) for x in range(snapshot.width)))

        if self.show_legend:
            lines.extend(self._legend(snapshot))

        return "\n".join(lines)

    def _legend(self, snapshot: TableSnapshot) -> List[str]:
        lines = ["", "Robots:"]
        if not snapshot.robots:
            lines.append("  (none)")
        for robot in snapshot.robots:
            marker = " (active)" if snapshot.is_active(robot.robot_id) else ""
            lines.append(f"  {robot.robot_id}: {robot_position(robot)}{marker}")
        return lines
