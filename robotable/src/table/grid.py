"""
Occupancy Grid

A bounded 2D coordinate space that records which cell holds which
occupant. The grid has no notion of robots or commands: it never
rejects an operation, all bounds and collision policy lives in callers.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


Coordinate = Tuple[int, int]


class OccupancyGrid:
    """
    A width x height grid with a sparse occupancy map.

    The origin (0, 0) is the bottom-left cell. A coordinate is present in
    the occupancy map if and only if some occupant was recorded there and
    not yet vacated.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize the grid.

        Args:
            width: Number of columns (must be positive)
            height: Number of rows (must be positive)

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self._cells: Dict[Coordinate, Any] = {}

    def is_valid(self, x: int, y: int) -> bool:
        """Check if a position lies inside the grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Check if an occupant is recorded at a position (no bounds check)."""
        return (x, y) in self._cells

    def occupant_at(self, x: int, y: int) -> Optional[Any]:
        """Get the occupant recorded at a position, if any."""
        return self._cells.get((x, y))

    def occupy(self, occupant: Any, x: int, y: int) -> None:
        """Record an occupant at a position, overwriting any previous record."""
        self._cells[(x, y)] = occupant
        logger.debug(f"Occupied ({x}, {y})")

    def vacate(self, x: int, y: int) -> None:
        """Remove the record at a position. No-op if the cell is empty."""
        if self._cells.pop((x, y), None) is not None:
            logger.debug(f"Vacated ({x}, {y})")

    def clear(self) -> None:
        """Remove all occupancy records."""
        self._cells.clear()

    def occupied_cells(self) -> Iterator[Tuple[Coordinate, Any]]:
        """Iterate over (position, occupant) pairs in insertion order."""
        return iter(list(self._cells.items()))

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"OccupancyGrid({self.width}x{self.height}, occupied={len(self)})"
