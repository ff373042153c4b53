"""Pen cursor and the single-character drawing protocol."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

from .grid import Grid

logger = logging.getLogger(__name__)

# Command -> (dx, dy); y grows downwards
MOVES: Dict[str, Tuple[int, int]] = {
    "w": (0, -1),
    "a": (-1, 0),
    "s": (0, 1),
    "d": (1, 0),
}
TOGGLE = "x"


@dataclass
class Pen:
    """A drawing cursor bounded to a width x height area."""

    width: int
    height: int
    x: int = 0
    y: int = 0
    down: bool = False

    def apply(self, command: str) -> None:
        """Apply one command; moves past an edge and unknown commands are no-ops."""
        if command in MOVES:
            dx, dy = MOVES[command]
            nx, ny = self.x + dx, self.y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                self.x, self.y = nx, ny
        elif command == TOGGLE:
            self.down = not self.down

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


def draw_commands(grid: Grid, commands: Union[str, bytes, Iterable[str]]) -> Pen:
    """Replay a command stream onto a grid.

    After every command, including ignored ones, the cell under the pen is set
    alive if the pen is down.

    Args:
        grid: Grid to draw on
        commands: Command characters; bytes are decoded one byte per command

    Returns:
        The pen in its final state
    """
    if isinstance(commands, (bytes, bytearray)):
        commands = commands.decode("latin-1")

    pen = Pen(grid.width, grid.height)
    count = 0
    for command in commands:
        pen.apply(command)
        if pen.down:
            grid.set_cell(pen.x, pen.y, True)
        count += 1

    logger.debug("Replayed %d commands, pen ends at %s (down=%s)", count, pen.position, pen.down)
    return pen
