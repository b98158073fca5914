"""Cell component.

One square of a maze grid. Cells are frozen: a grid handed out by the
generator is a read-only snapshot, and generation-time bookkeeping (which
cells were visited while carving) is kept outside of this type.
"""

from dataclasses import dataclass

from maze_runner.components.position import Position


@dataclass(frozen=True)
class Cell:
    """Grid square.

    Attributes:
        x: Column index.
        y: Row index.
        is_wall: True if impassable.
        is_start: True for the single entrance cell.
        is_end: True for the single exit cell.
    """

    x: int
    y: int
    is_wall: bool
    is_start: bool = False
    is_end: bool = False

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)
