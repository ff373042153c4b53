"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from typing import Iterable, Optional, Union

from ..core.game import run_life
from ..core.grid import Grid
from ..core.printer import format_life_grid

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running a drawn Game of Life simulation."""

    def run_simulation(
        self,
        width: int,
        height: int,
        iterations: int,
        commands: Union[str, bytes, Iterable[str]],
    ) -> Optional[Grid]:
        """Draw, simulate and print.

        Args:
            width: Grid width
            height: Grid height
            iterations: Generations to run
            commands: Pen command stream

        Returns:
            The final grid, or None if the arguments were out of range and
            nothing was printed
        """
        grid = run_life(width, height, iterations, commands)
        if grid is not None:
            sys.stdout.write(format_life_grid(grid))
            sys.stdout.flush()
        return grid


def parse_dimension(value: Optional[str]) -> Optional[int]:
    """Parse a decimal integer argument, returning None if missing or malformed."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Positional arguments are optional at the parser level so that missing
    values end the run silently instead of printing a usage error.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Draw on a grid with pen commands from stdin, then run Conway's Game of Life",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pen commands (read from standard input):
  w a s d   move up, left, down, right (stops at the edges)
  x         lift or lower the pen
  anything else is ignored; the cell under a lowered pen is always alive

Examples:
  # Blinker on a 5x5 board, one generation
  echo 'sdxddx' | life 5 5 1
        """,
    )

    parser.add_argument("width", nargs="?", help="Grid width")
    parser.add_argument("height", nargs="?", help="Grid height")
    parser.add_argument("iterations", nargs="?", help="Number of generations")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log drawing and simulation details to stderr",
    )

    return parser


def main() -> int:
    """Main entry point for the Game of Life CLI.

    Returns:
        Exit code (0 unless interrupted)
    """
    parser = create_parser()
    args, _ = parser.parse_known_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    width = parse_dimension(args.width)
    height = parse_dimension(args.height)
    iterations = parse_dimension(args.iterations)
    if width is None or height is None or iterations is None:
        logger.debug("Missing or malformed arguments: %s %s %s", args.width, args.height, args.iterations)
        return 0

    cli = CLIGameOfLife()

    try:
        # Out-of-range runs do nothing, so they leave stdin unread.
        # Commands are raw bytes; anything outside the protocol is ignored.
        commands = sys.stdin.buffer.read() if width > 0 and height > 0 and iterations >= 0 else b""
        cli.run_simulation(width, height, iterations, commands)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
