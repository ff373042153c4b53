"""Binary grid data structure for the Game of Life engine."""

from typing import Tuple, Iterator
import numpy as np
import torch
import torch.nn.functional as F


class Grid:
    """Represents a bounded 2D grid of alive/dead cells.

    Cells are stored in a numpy array indexed ``[x, y]``. Cells outside the
    grid are always dead; there is no wraparound. A second buffer of the same
    shape holds the next generation while it is being computed.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((width, height), dtype=np.int8)
        self._back_cells = np.zeros((width, height), dtype=np.int8)

        # Single-threaded; grids here are small
        torch.set_num_threads(1)

        # Tensors for convolution (reused across generations)
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        return bool(self._cells[x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        self._cells[x, y] = 1 if alive else 0

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def living_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) for every living cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                if self._cells[x, y]:
                    yield (x, y)

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            2D array indexed [x, y] with neighbor counts for each cell
        """
        # Grid uses (width, height) but PyTorch expects (height, width), so transpose
        self._torch_input[0, 0] = torch.from_numpy((self._cells.T > 0).astype(np.float32))

        # Zero padding: cells beyond the edge count as dead
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    @property
    def back_cells(self) -> np.ndarray:
        """Buffer the next generation is written into before swap_buffers()."""
        return self._back_cells

    def swap_buffers(self) -> None:
        """Make the back buffer current and drop the previous generation."""
        self._cells, self._back_cells = self._back_cells, self._cells
        self._back_cells.fill(0)
