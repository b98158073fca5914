"""Text representation of maze grids.

One character per cell:

* ``W`` wall
* ``S`` entrance (walkable)
* ``E`` exit (walkable)
* ``*`` path overlay (output only)
* anything else, typically ``P`` or ``.``, a plain passage

Whitespace inside a row is ignored on input, so ``"S P W"`` and ``"SPW"``
describe the same row.
"""

from typing import Iterable, List, Optional

from pyrsistent import pvector

from maze_runner.components import Cell, Position
from maze_runner.levels.maze import MazeGrid
from maze_runner.types import CellKind, Grid

WALL_CHAR = "W"
PASSAGE_CHAR = "P"
START_CHAR = "S"
END_CHAR = "E"
PATH_CHAR = "*"

KIND_TO_CHAR = {
    CellKind.WALL: WALL_CHAR,
    CellKind.PASSAGE: PASSAGE_CHAR,
    CellKind.START: START_CHAR,
    CellKind.END: END_CHAR,
    CellKind.PATH: PATH_CHAR,
}


def from_strings(rows: Iterable[str]) -> MazeGrid:
    """Build a grid from rows of characters.

    Raises:
        ValueError: If the rows do not all have the same width.
    """
    cleaned: List[str] = ["".join(row.split()) for row in rows]
    if cleaned and any(len(row) != len(cleaned[0]) for row in cleaned):
        raise ValueError("All rows must have the same number of cells")
    return pvector(
        pvector(
            Cell(
                x=x,
                y=y,
                is_wall=char == WALL_CHAR,
                is_start=char == START_CHAR,
                is_end=char == END_CHAR,
            )
            for x, char in enumerate(row)
        )
        for y, row in enumerate(cleaned)
    )


def cell_kind(cell: Cell, on_path: bool = False) -> CellKind:
    """Classify a cell; entrance and exit take precedence over the path overlay."""
    if cell.is_start:
        return CellKind.START
    if cell.is_end:
        return CellKind.END
    if on_path:
        return CellKind.PATH
    if cell.is_wall:
        return CellKind.WALL
    return CellKind.PASSAGE


def to_strings(grid: Grid, path: Optional[Iterable[Position]] = None) -> List[str]:
    on_path = {(p.x, p.y) for p in path} if path else set()
    return [
        "".join(KIND_TO_CHAR[cell_kind(cell, (cell.x, cell.y) in on_path)] for cell in row)
        for row in grid
    ]
