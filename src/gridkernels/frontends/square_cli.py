"""Command-line interface for the biggest-square solver."""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO, Union

from ..core.loader import MapError, iter_maps, load_map_file
from ..core.printer import BatchPrinter, format_symbol_grid
from ..core.solver import solve
from ..core.symbol_grid import SymbolGrid

logger = logging.getLogger(__name__)


class CLIBiggestSquare:
    """Runs the biggest-square pipeline over maps from files or a stream."""

    def __init__(self, printer: Optional[BatchPrinter] = None):
        """Initialize CLI interface.

        Args:
            printer: Output sink; defaults to stdout/stderr
        """
        self.printer = printer or BatchPrinter()
        self.solved = 0
        self.rejected = 0

    def process_unit(self, unit: Union[SymbolGrid, MapError]) -> bool:
        """Solve and print one loaded map, or report its load failure.

        Returns:
            True if a grid was printed
        """
        if isinstance(unit, MapError):
            self.rejected += 1
            self.printer.print_error()
            return False

        self.printer.print_grid(format_symbol_grid(solve(unit)))
        self.solved += 1
        return True

    def process_files(self, paths: List[str]) -> None:
        """Process one map per file, in order."""
        for path in paths:
            try:
                unit: Union[SymbolGrid, MapError] = load_map_file(path)
            except MapError as exc:
                logger.debug("%s rejected: %s", path, exc.reason)
                unit = exc
            self.process_unit(unit)

    def process_stream(self, stream: Union[TextIO, Iterable[str]]) -> None:
        """Process every map section found in a stream."""
        for unit in iter_maps(stream):
            self.process_unit(unit)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Find and mark the biggest empty square in each map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Map format:
  <rows> <empty> <obstacle> <full>
  followed by <rows> lines of equal length using only <empty> and <obstacle>

Examples:
  # Solve two maps, separated by a blank line in the output
  bsq map1.txt map2.txt

  # Solve every map section read from standard input
  cat maps.txt | bsq
        """,
    )

    parser.add_argument("files", nargs="*", help="Map files (default: read standard input)")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log rejection reasons and solver details to stderr",
    )

    return parser


def main() -> int:
    """Main entry point for the biggest-square CLI.

    Returns:
        Exit code (0 once every unit was processed, 1 if interrupted)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    cli = CLIBiggestSquare()

    try:
        if args.files:
            cli.process_files(args.files)
        else:
            # Undecodable bytes fall outside every alphabet and fail their unit
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(errors="surrogateescape")
            cli.process_stream(sys.stdin)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1

    logger.debug("%d maps solved, %d rejected", cli.solved, cli.rejected)
    return 0


if __name__ == "__main__":
    sys.exit(main())
