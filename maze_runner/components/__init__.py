"""Grid components.

Immutable dataclasses describing the maze vocabulary: :class:`Cell` for a
grid square (wall / passage / entrance / exit flags) and :class:`Position` for
a bare coordinate pair. Consumers read ``is_wall``, ``is_start`` and
``is_end`` to choose a visual treatment; nothing else on a cell is part of the
contract.
"""

from .cell import Cell
from .position import Position

__all__ = [
    "Cell",
    "Position",
]
