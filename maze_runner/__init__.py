"""Perfect maze generation and shortest path search.

Two stateless pieces composed by the caller:

* :func:`maze_runner.levels.maze.generate` carves a perfect maze with a
  randomized depth-first backtracker and marks an entrance and an exit.
* :func:`maze_runner.utils.pathfinder.find_shortest_path` runs a breadth-first
  search between two coordinates of any grid honoring the same cell contract,
  returning ``None`` when no path exists or the request is invalid.

Typical use::

    grid = generate(21, 21, seed=7)
    start, end = locate_endpoints(grid)
    path = find_shortest_path(grid, start, end)
"""

from maze_runner.components import Cell, Position
from maze_runner.levels.maze import MAZE_HEIGHT, MAZE_WIDTH, generate
from maze_runner.types import CellKind, Coord, Grid
from maze_runner.utils.grid import locate_endpoints
from maze_runner.utils.pathfinder import find_shortest_path

__all__ = [
    "Cell",
    "CellKind",
    "Coord",
    "Grid",
    "MAZE_HEIGHT",
    "MAZE_WIDTH",
    "Position",
    "find_shortest_path",
    "generate",
    "locate_endpoints",
]
