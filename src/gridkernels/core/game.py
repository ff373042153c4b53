"""Conway's Game of Life implementation."""

import logging
from typing import Iterable, Optional, Union

from .grid import Grid
from .pen import draw_commands

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules on a bounded grid:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Each generation is computed from a snapshot of the previous one into the
    grid's back buffer, then the buffers are swapped.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._apply_rules()
        self._generation += 1

    def run(self, iterations: int) -> None:
        """Advance the simulation by a fixed number of generations.

        Raises:
            ValueError: If iterations is negative
        """
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")

        for _ in range(iterations):
            self.step()

    def _apply_rules(self) -> None:
        """Apply Conway's Game of Life rules to update the grid."""
        # Counts come from the current generation only
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.cells
        next_cells = self.grid.back_cells

        survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))
        birth_mask = (cells == 0) & (neighbor_counts == 3)

        next_cells[survive_mask | birth_mask] = 1
        self.grid.swap_buffers()


def run_life(
    width: int,
    height: int,
    iterations: int,
    commands: Union[str, bytes, Iterable[str]],
) -> Optional[Grid]:
    """Draw the command stream onto a fresh grid and run the simulation.

    Args:
        width: Grid width
        height: Grid height
        iterations: Number of generations to run
        commands: Pen command stream

    Returns:
        The final grid, or None when width/height are not positive or
        iterations is negative (nothing is drawn or simulated)
    """
    if width <= 0 or height <= 0 or iterations < 0:
        logger.debug("Ignoring run with width=%d height=%d iterations=%d", width, height, iterations)
        return None

    grid = Grid(width, height)
    draw_commands(grid, commands)

    game = GameOfLife(grid)
    logger.debug("Initial population: %d cells", game.population)
    game.run(iterations)

    logger.debug("Finished after %d generations, population %d", game.generation, game.population)
    return grid
