"""Grid kernels: biggest empty square finder and Game of Life simulator."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.game import GameOfLife, run_life
from .core.symbol_grid import SymbolGrid
from .core.solver import find_biggest_square, solve

__all__ = ["Grid", "GameOfLife", "run_life", "SymbolGrid", "find_biggest_square", "solve"]
