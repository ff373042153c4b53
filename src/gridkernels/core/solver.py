"""Biggest-square solver using dynamic programming."""

import logging
from typing import NamedTuple
import numpy as np

from .symbol_grid import SymbolGrid

logger = logging.getLogger(__name__)


class Square(NamedTuple):
    """An axis-aligned square given by its bottom-right corner and side."""

    row: int
    col: int
    size: int

    @property
    def top(self) -> int:
        return self.row - self.size + 1

    @property
    def left(self) -> int:
        return self.col - self.size + 1

    def contains(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the square."""
        return self.size > 0 and self.top <= row <= self.row and self.left <= col <= self.col


def build_dp_table(grid: SymbolGrid) -> np.ndarray:
    """Compute, for each cell, the side of the largest empty square ending there.

    Args:
        grid: Validated symbol grid

    Returns:
        Integer array of shape (rows, cols); obstacles hold 0
    """
    blocked = grid.obstacle_mask()
    rows, cols = grid.shape
    dp = np.zeros((rows, cols), dtype=np.int32)

    for i in range(rows):
        for j in range(cols):
            if blocked[i, j]:
                continue
            if i == 0 or j == 0:
                dp[i, j] = 1
            else:
                dp[i, j] = 1 + min(dp[i - 1, j], dp[i, j - 1], dp[i - 1, j - 1])

    return dp


def find_biggest_square(grid: SymbolGrid) -> Square:
    """Find the largest obstacle-free square.

    The table is swept row by row; when several squares share the largest
    size, the first one reached in that order wins.

    Args:
        grid: Validated symbol grid

    Returns:
        The winning square, or Square(0, 0, 0) when every cell is an obstacle
    """
    dp = build_dp_table(grid)

    # argmax on the flattened (row-major) table returns the first maximum
    flat_index = int(np.argmax(dp))
    row, col = divmod(flat_index, grid.cols)
    size = int(dp[row, col])

    if size == 0:
        logger.debug("No empty cell in %dx%d map", grid.rows, grid.cols)
        return Square(0, 0, 0)

    logger.debug("Biggest square: side %d ending at row %d, col %d", size, row, col)
    return Square(row, col, size)


def paint_square(grid: SymbolGrid, square: Square) -> SymbolGrid:
    """Return a copy of the grid with the square filled with the full marker."""
    painted = grid.copy()
    if square.size > 0:
        painted.cells[square.top : square.row + 1, square.left : square.col + 1] = grid.markers.full
    return painted


def solve(grid: SymbolGrid) -> SymbolGrid:
    """Find the biggest square and return the painted copy of the grid."""
    return paint_square(grid, find_biggest_square(grid))
