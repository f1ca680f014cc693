"""Dense boolean occupancy map over the play-field.

Claim invariant: a claimed cell stays claimed until ``clear()``; nothing
else in the simulation frees a cell.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class OccupancyGrid:
    """Which cells are permanently taken by a trail in the current round."""

    width: int
    height: int
    cells: np.ndarray = field(init=False, repr=False)  # (height, width) bool

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.cells = np.zeros((self.height, self.width), dtype=bool)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def is_claimed(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return bool(self.cells[y, x])

    def claim(self, x: int, y: int) -> bool:
        """Mark a cell claimed; return True only if it was previously free."""
        self._check_bounds(x, y)
        if self.cells[y, x]:
            return False
        self.cells[y, x] = True
        return True

    def clear(self) -> None:
        self.cells.fill(False)

    def claimed_count(self) -> int:
        return int(np.count_nonzero(self.cells))
