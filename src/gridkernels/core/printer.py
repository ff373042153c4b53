"""Text rendering of final grids."""

import sys
from typing import Optional, TextIO

from .grid import Grid
from .loader import MAP_ERROR
from .symbol_grid import SymbolGrid

ALIVE_GLYPH = "0"
DEAD_GLYPH = " "


def format_symbol_grid(grid: SymbolGrid) -> str:
    """Render a symbol grid, one row per line, ending with a newline."""
    return "".join(line + "\n" for line in grid.to_lines())


def format_life_grid(grid: Grid) -> str:
    """Render a life grid with ALIVE_GLYPH and DEAD_GLYPH, ending with a newline."""
    lines = []
    for y in range(grid.height):
        lines.append("".join(ALIVE_GLYPH if grid.cells[x, y] else DEAD_GLYPH for x in range(grid.width)))
    return "".join(line + "\n" for line in lines)


class BatchPrinter:
    """Writes a sequence of units with one blank line between them.

    A unit is either a rendered grid (to ``out``) or the map error diagnostic
    (to ``err``). The separator goes to ``out`` before every unit but the
    first, whether or not the previous unit succeeded.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.out = out
        self.err = err
        self.units = 0

    def _begin_unit(self) -> None:
        if self.units:
            print(file=self.out or sys.stdout)
        self.units += 1

    def print_grid(self, text: str) -> None:
        """Write one rendered grid."""
        self._begin_unit()
        out = self.out or sys.stdout
        out.write(text)
        out.flush()

    def print_error(self) -> None:
        """Write the map error diagnostic for one failed unit."""
        self._begin_unit()
        (self.out or sys.stdout).flush()
        print(MAP_ERROR, file=self.err or sys.stderr)
