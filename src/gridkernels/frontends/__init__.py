"""Command-line frontends for the grid kernels."""

from .square_cli import CLIBiggestSquare
from .life_cli import CLIGameOfLife

__all__ = ["CLIBiggestSquare", "CLIGameOfLife"]
