"""Map loading and validation for the biggest-square solver.

A map is a header line followed by its body::

    <rows> <empty> <obstacle> <full>
    <row 0>
    ...
    <row rows-1>

Every failure raises MapError. The user only ever sees the fixed ``map
error`` diagnostic; the reason is kept for debug logging.
"""

import logging
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from .markers import MapMarkers
from .symbol_grid import SymbolGrid

logger = logging.getLogger(__name__)

MAP_ERROR = "map error"


class MapError(ValueError):
    """Raised when a map unit cannot be loaded."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def strip_terminator(line: str) -> str:
    """Remove one trailing line terminator, if any."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_header(line: str) -> Tuple[int, MapMarkers]:
    """Parse a header line into the row count and the markers.

    Args:
        line: Header line, with or without its terminator

    Returns:
        Tuple of (rows, markers)

    Raises:
        MapError: If the row count or any marker is missing or invalid
    """
    tokens = line.split()
    if not tokens:
        raise MapError("missing row count")

    try:
        rows = int(tokens[0])
    except ValueError:
        raise MapError(f"row count {tokens[0]!r} is not an integer") from None
    if rows <= 0:
        raise MapError(f"row count must be positive, got {rows}")

    symbols = tokens[1:]
    if len(symbols) < 3:
        raise MapError(f"expected 3 markers, got {len(symbols)}")

    # Each marker is the first character of its token; later tokens are ignored
    try:
        markers = MapMarkers(*(token[0] for token in symbols[:3]))
    except ValueError as exc:
        raise MapError(str(exc)) from exc

    return rows, markers


def read_body(lines: Iterator[str], rows: int, markers: MapMarkers) -> SymbolGrid:
    """Read and validate exactly ``rows`` body lines.

    Args:
        lines: Line iterator positioned just after the header
        rows: Declared row count
        markers: Markers from the header

    Returns:
        Validated symbol grid

    Raises:
        MapError: On a short, ragged or invalid body
    """
    body: List[str] = []
    cols = 0
    allowed = set(markers.alphabet)

    for index in range(rows):
        line = next(lines, None)
        if line is None:
            raise MapError(f"premature end of input after {index} of {rows} rows")
        row = strip_terminator(line)

        if index == 0:
            cols = len(row)
            if cols == 0:
                raise MapError("first row is empty")
        elif len(row) != cols:
            raise MapError(f"row {index} has length {len(row)}, expected {cols}")

        if not set(row) <= allowed:
            raise MapError(f"row {index} contains characters other than {markers.alphabet!r}")
        body.append(row)

    return SymbolGrid(body, markers)


def read_map(lines: Iterable[str]) -> SymbolGrid:
    """Read one map (header and body) from an iterable of lines.

    Raises:
        MapError: If the map is invalid or the input is empty
    """
    iterator = iter(lines)
    header = next(iterator, None)
    if header is None:
        raise MapError("empty input")

    rows, markers = parse_header(header)
    return read_body(iterator, rows, markers)


def load_map_file(path: Union[str, Path]) -> SymbolGrid:
    """Load the map stored in a file.

    Content after the declared rows is ignored.

    Raises:
        MapError: If the file cannot be read or holds an invalid map
    """
    try:
        with open(path, "r") as f:
            return read_map(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read {path}: {exc}") from exc


def _skip_section(lines: Iterator[str]) -> None:
    """Consume lines up to and including the next blank line."""
    for line in lines:
        if not strip_terminator(line).strip():
            return


def iter_maps(lines: Iterable[str]) -> Iterator[Union[SymbolGrid, MapError]]:
    """Read successive map sections from one stream.

    Blank lines before a header are skipped. A section whose header parses
    always consumes exactly its declared rows (fewer at end of input), so the
    next section may follow directly. When the header itself is invalid the
    row count is unknown and lines are discarded up to the next blank line.

    Yields:
        A SymbolGrid per valid section, a MapError per invalid one
    """
    iterator = iter(lines)
    section = 0

    for line in iterator:
        if not strip_terminator(line).strip():
            continue

        section += 1
        try:
            rows, markers = parse_header(line)
        except MapError as exc:
            logger.debug("Section %d rejected: %s", section, exc.reason)
            _skip_section(iterator)
            yield exc
            continue

        body = list(islice(iterator, rows))
        try:
            result: Union[SymbolGrid, MapError] = read_body(iter(body), rows, markers)
        except MapError as exc:
            logger.debug("Section %d rejected: %s", section, exc.reason)
            result = exc

        yield result
