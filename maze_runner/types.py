"""Common type aliases and enumerations.

``Grid`` is the central data contract shared by the generator, the path
search and the renderers: a rectangular sequence of rows indexed
``grid[y][x]``.
"""

from enum import StrEnum, auto
from typing import Sequence, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from maze_runner.components import Cell

Coord = Tuple[int, int]

Grid = Sequence[Sequence["Cell"]]


class CellKind(StrEnum):
    """Visual classification of a cell (used by renderers)."""

    WALL = auto()
    PASSAGE = auto()
    START = auto()
    END = auto()
    PATH = auto()
