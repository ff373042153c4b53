"""Core grid kernels: biggest-square solver and Game of Life engine."""

from .grid import Grid
from .game import GameOfLife, run_life
from .pen import Pen, draw_commands
from .markers import MapMarkers
from .symbol_grid import SymbolGrid
from .loader import MapError, load_map_file, read_map, iter_maps
from .solver import Square, find_biggest_square, solve

__all__ = [
    "Grid",
    "GameOfLife",
    "run_life",
    "Pen",
    "draw_commands",
    "MapMarkers",
    "SymbolGrid",
    "MapError",
    "load_map_file",
    "read_map",
    "iter_maps",
    "Square",
    "find_biggest_square",
    "solve",
]
