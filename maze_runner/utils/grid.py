"""Grid shape / lookup helpers.

Utility predicates shared by the path search, the renderers and the app.
Functions here are pure and never raise for malformed grids: an empty grid
(no rows, or an empty first row) simply has no in-bounds coordinates.
"""

from typing import Iterator, List, Optional, Protocol, Tuple

from maze_runner.components import Cell, Position
from maze_runner.types import Grid


class HasCoordinates(Protocol):
    x: int
    y: int


def grid_size(grid: Grid) -> Tuple[int, int]:
    """Return ``(width, height)``; ``(0, 0)`` for an empty grid."""
    if not grid or len(grid[0]) == 0:
        return 0, 0
    return len(grid[0]), len(grid)


def is_empty_grid(grid: Grid) -> bool:
    return grid_size(grid) == (0, 0)


def is_in_bounds(grid: Grid, pos: HasCoordinates) -> bool:
    """Return True if ``pos`` lies within ``[0, width) x [0, height)``."""
    width, height = grid_size(grid)
    return 0 <= pos.x < width and 0 <= pos.y < height


def is_walkable(grid: Grid, pos: HasCoordinates) -> bool:
    """Return True if ``pos`` is in bounds and not a wall."""
    return is_in_bounds(grid, pos) and not grid[pos.y][pos.x].is_wall


def iter_cells(grid: Grid) -> Iterator[Cell]:
    """Yield cells row by row (top to bottom, left to right)."""
    for row in grid:
        yield from row


def passage_positions(grid: Grid) -> List[Position]:
    return [Position(cell.x, cell.y) for cell in iter_cells(grid) if not cell.is_wall]


def locate_endpoints(grid: Grid) -> Tuple[Optional[Position], Optional[Position]]:
    """Find the entrance and exit cells.

    Returns:
        ``(start, end)``; either is ``None`` if no cell carries the flag.
    """
    start: Optional[Position] = None
    end: Optional[Position] = None
    for cell in iter_cells(grid):
        if cell.is_start:
            start = cell.position
        if cell.is_end:
            end = cell.position
    return start, end
