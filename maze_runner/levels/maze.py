"""Maze level generation.

Turns the boolean passage map produced by
:func:`maze_runner.utils.maze.carve_passages` into an immutable grid of
:class:`Cell` rows, with the entrance on the top border at ``(1, 0)`` and the
exit on the bottom border at ``(width - 2, height - 1)``.
"""

import logging
import random
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_runner.components import Cell
from maze_runner.types import Coord
from maze_runner.utils.maze import BoolArray, carve_passages

logger = logging.getLogger(__name__)

MAZE_WIDTH = 20
MAZE_HEIGHT = 20

MazeGrid = PVector[PVector[Cell]]

ENTRANCE: Coord = (1, 0)


def exit_of(width: int, height: int) -> Coord:
    return (width - 2, height - 1)


def open_entrance(passages: BoolArray) -> Coord:
    """Open the entrance and the interior cell directly below it."""
    x, y = ENTRANCE
    passages[y, x] = True
    passages[y + 1, x] = True
    return (x, y)


def open_exit(passages: BoolArray) -> Coord:
    """Open the exit and connect it to the carved interior.

    The cell above the exit is forced open. When both dimensions are even that
    connector sits on a lattice corner the carver never reaches, so the cell to
    its left (which always borders a carved cell) is opened too.
    """
    height, width = passages.shape
    x, y = exit_of(width, height)
    passages[y, x] = True
    passages[y - 1, x] = True
    if width % 2 == 0 and height % 2 == 0:
        passages[y - 1, x - 1] = True
    return (x, y)


def to_grid(passages: BoolArray, start: Coord, end: Coord) -> MazeGrid:
    height, width = passages.shape
    return pvector(
        pvector(
            Cell(
                x=x,
                y=y,
                is_wall=not bool(passages[y, x]),
                is_start=(x, y) == start,
                is_end=(x, y) == end,
            )
            for x in range(width)
        )
        for y in range(height)
    )


def generate(
    width: int = MAZE_WIDTH,
    height: int = MAZE_HEIGHT,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MazeGrid:
    """Generate a perfect maze with a marked entrance and exit.

    Arguments:
        width: Grid width in cells (at least 3; odd values give a full border).
        height: Grid height in cells (at least 3).
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.
        rng: Explicit random source; takes precedence over ``seed``.

    Returns:
        Immutable grid indexed ``grid[y][x]``. The entrance reaches the exit by
        construction.
    """
    if rng is None:
        rng = random.Random(seed)
    passages, carved = carve_passages(width, height, rng)
    start = open_entrance(passages)
    end = open_exit(passages)
    logger.debug(
        "Generated %dx%d maze (%d carved cells), start=%s end=%s",
        width,
        height,
        carved,
        start,
        end,
    )
    return to_grid(passages, start, end)
