import logging
import random
from typing import List, Tuple

import numpy as np
import numpy.typing as npt

from maze_runner.types import Coord

logger = logging.getLogger(__name__)

# Type aliases for clarity
BoolArray = npt.NDArray[np.bool_]

CARVE_ORIGIN: Coord = (1, 1)

# Up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


def carve_passages(width: int, height: int, rng: random.Random) -> Tuple[BoolArray, int]:
    """Carves a perfect maze using iterative randomized depth-first backtracking.

    Every cell starts as a wall. Carving moves two cells at a time from the
    origin ``(1, 1)`` so that the cell in between is the wall knocked down,
    and never touches the outer border.

    Returns:
        ``(passages, carved)`` where ``passages[y, x]`` is True for open cells
        and ``carved`` is the number of cells opened after the origin.
    """
    passages: BoolArray = np.zeros((height, width), dtype=np.bool_)
    visited: BoolArray = np.zeros((height, width), dtype=np.bool_)

    def is_candidate(x: int, y: int) -> bool:
        return (
            1 <= x <= width - 2
            and 1 <= y <= height - 2
            and not passages[y, x]
            and not visited[y, x]
        )

    ox, oy = CARVE_ORIGIN
    passages[oy, ox] = True
    visited[oy, ox] = True
    stack: List[Coord] = [CARVE_ORIGIN]
    carved = 0

    while stack:
        x, y = stack[-1]
        candidates: List[Coord] = [
            (x + dx * 2, y + dy * 2)
            for dx, dy in DIRECTIONS
            if is_candidate(x + dx * 2, y + dy * 2)
        ]
        if not candidates:
            stack.pop()
            continue

        nx, ny = rng.choice(candidates)
        bx, by = (x + nx) // 2, (y + ny) // 2
        passages[by, bx] = True
        visited[by, bx] = True
        passages[ny, nx] = True
        visited[ny, nx] = True
        carved += 2
        stack.append((nx, ny))

    logger.debug("Carved %d cells in a %dx%d maze", carved, width, height)
    return passages, carved
