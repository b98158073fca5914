"""Shortest path search over a maze grid.

Breadth-first search on the 4-connected grid graph formed by non-wall cells.
Discovered nodes are kept in a flat arena; each node stores the arena index of
the node that discovered it, so the path is rebuilt by walking those indices
back from the goal.

Every invalid request (empty grid, out-of-bounds endpoint, endpoint on a wall)
and a genuinely unreachable goal all return ``None``.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

import numpy as np

from maze_runner.components import Position
from maze_runner.types import Grid
from maze_runner.utils.grid import HasCoordinates, grid_size, is_in_bounds

logger = logging.getLogger(__name__)

NO_PARENT = -1

# Up, down, left, right. Only affects tie-breaking between equally short paths.
NEIGHBOR_OFFSETS: List[Tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


@dataclass(frozen=True)
class PathNode:
    """Search node.

    Attributes:
        position: Grid coordinate reached.
        parent: Arena index of the discovering node, ``NO_PARENT`` for the start.
    """

    position: Position
    parent: int = NO_PARENT


def reconstruct_path(nodes: List[PathNode], index: int) -> List[Position]:
    """Follow parent indices from ``nodes[index]`` back to the root, start first."""
    path: List[Position] = []
    while index != NO_PARENT:
        node = nodes[index]
        path.append(node.position)
        index = node.parent
    path.reverse()
    return path


def find_shortest_path(
    grid: Grid, start: HasCoordinates, end: HasCoordinates
) -> Optional[List[Position]]:
    """Return the shortest walkable path from ``start`` to ``end``.

    Arguments:
        grid: Rectangular grid indexed ``grid[y][x]``. Never mutated.
        start: Starting coordinate.
        end: Goal coordinate.

    Returns:
        Positions from ``start`` to ``end`` inclusive, or ``None`` if the
        request is invalid or the goal is unreachable.
    """
    width, height = grid_size(grid)
    if width == 0:
        logger.debug("Grid is empty.")
        return None

    if not is_in_bounds(grid, start) or not is_in_bounds(grid, end):
        logger.debug("Start or end position is out of bounds.")
        return None
    if grid[start.y][start.x].is_wall:
        logger.debug("Start position is a wall.")
        return None
    if grid[end.y][end.x].is_wall:
        logger.debug("End position is a wall.")
        return None

    goal = Position(end.x, end.y)
    nodes: List[PathNode] = [PathNode(Position(start.x, start.y))]
    visited = np.zeros((height, width), dtype=np.bool_)
    visited[start.y, start.x] = True
    queue: Deque[int] = deque([0])

    while queue:
        index = queue.popleft()
        pos = nodes[index].position
        if pos == goal:
            return reconstruct_path(nodes, index)

        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = pos.x + dx, pos.y + dy
            if (
                0 <= nx < width
                and 0 <= ny < height
                and not grid[ny][nx].is_wall
                and not visited[ny, nx]
            ):
                visited[ny, nx] = True
                nodes.append(PathNode(Position(nx, ny), parent=index))
                queue.append(len(nodes) - 1)

    logger.debug("No path found.")
    return None
