"""Symbol grid data structure for the biggest-square solver."""

from typing import List, Sequence, Tuple
import numpy as np

from .markers import MapMarkers


class SymbolGrid:
    """A rectangular map of single-character cells.

    Cells are stored in a numpy array of shape (rows, cols) indexed
    ``[row, col]``. Rows are expected to be validated already (see
    ``loader.read_body``): non-empty, equal length, empty/obstacle only.
    """

    def __init__(self, rows: Sequence[str], markers: MapMarkers) -> None:
        """Build a grid from its text rows.

        Args:
            rows: Map body, one string per row, line terminators removed
            markers: Symbols used by this map
        """
        self.markers = markers
        self._cells = np.array([list(row) for row in rows], dtype="<U1")

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array."""
        return self._cells

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    def obstacle_mask(self) -> np.ndarray:
        """Boolean array, True where the cell is an obstacle."""
        return self._cells == self.markers.obstacle

    def copy(self) -> "SymbolGrid":
        """Return an independent working copy of this grid."""
        clone = SymbolGrid.__new__(SymbolGrid)
        clone.markers = self.markers
        clone._cells = self._cells.copy()
        return clone

    def to_lines(self) -> List[str]:
        """Rows as strings, top to bottom."""
        return ["".join(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolGrid):
            return False
        return self.markers == other.markers and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
