"""Marker symbols configured by each map header."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MapMarkers:
    """The three one-character symbols of a map: empty, obstacle and full.

    - empty: cell free of obstacles
    - obstacle: blocked cell
    - full: symbol painted over the biggest square
    """

    empty: str
    obstacle: str
    full: str

    def __post_init__(self):
        for name in ("empty", "obstacle", "full"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} marker must be a single character, got {value!r}")
        if len({self.empty, self.obstacle, self.full}) != 3:
            raise ValueError(
                f"markers must be pairwise distinct, got {self.empty!r} {self.obstacle!r} {self.full!r}"
            )

    @property
    def alphabet(self) -> str:
        """Characters allowed in a map body."""
        return self.empty + self.obstacle
