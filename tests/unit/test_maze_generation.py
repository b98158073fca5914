# tests/unit/test_maze_generation.py

import random
import pytest
from dataclasses import FrozenInstanceError
from typing import Tuple

from maze_runner.components import Position
from maze_runner.levels.ascii import to_strings
from maze_runner.levels.maze import ENTRANCE, exit_of, generate
from maze_runner.utils.grid import locate_endpoints
from maze_runner.utils.maze import carve_passages
from tests.test_utils import open_coords, passage_edges, reachable_from

DIMENSIONS = [(3, 3), (4, 4), (5, 5), (5, 8), (8, 5), (10, 10), (20, 20), (21, 21), (15, 31)]
SEEDS = [0, 1, 7, 42, 2024]


def odd_lattice_size(width: int, height: int) -> int:
    """Cells with odd coordinates strictly inside the border."""
    return ((width - 1) // 2) * ((height - 1) // 2)


@pytest.mark.parametrize("width, height", DIMENSIONS)
@pytest.mark.parametrize("seed", SEEDS)
def test_carve_counts(width: int, height: int, seed: int) -> None:
    passages, carved = carve_passages(width, height, random.Random(seed))
    assert passages.shape == (height, width)
    assert int(passages.sum()) == carved + 1
    assert carved == 2 * (odd_lattice_size(width, height) - 1)


@pytest.mark.parametrize("width, height", DIMENSIONS)
def test_carving_leaves_border_intact(width: int, height: int) -> None:
    passages, _ = carve_passages(width, height, random.Random(3))
    assert not passages[0, :].any()
    assert not passages[-1, :].any()
    assert not passages[:, 0].any()
    assert not passages[:, -1].any()


@pytest.mark.parametrize("width, height", DIMENSIONS)
def test_carving_reaches_every_odd_cell(width: int, height: int) -> None:
    passages, _ = carve_passages(width, height, random.Random(11))
    for y in range(1, height - 1, 2):
        for x in range(1, width - 1, 2):
            assert passages[y, x]


@pytest.mark.parametrize("width, height", DIMENSIONS)
@pytest.mark.parametrize("seed", SEEDS)
def test_single_entrance_and_exit(width: int, height: int, seed: int) -> None:
    grid = generate(width, height, seed=seed)
    starts = [c for row in grid for c in row if c.is_start]
    ends = [c for row in grid for c in row if c.is_end]
    assert len(starts) == 1 and len(ends) == 1
    assert not starts[0].is_wall and not ends[0].is_wall
    assert (starts[0].x, starts[0].y) == ENTRANCE
    assert (ends[0].x, ends[0].y) == exit_of(width, height)
    assert locate_endpoints(grid) == (Position(*ENTRANCE), Position(width - 2, height - 1))


@pytest.mark.parametrize("width, height", DIMENSIONS)
@pytest.mark.parametrize("seed", SEEDS)
def test_passages_form_a_tree(width: int, height: int, seed: int) -> None:
    grid = generate(width, height, seed=seed)
    cells = open_coords(grid)
    assert passage_edges(grid) == len(cells) - 1
    assert reachable_from(grid, ENTRANCE) == cells


@pytest.mark.parametrize("width, height", DIMENSIONS)
def test_grid_shape_and_coordinates(width: int, height: int) -> None:
    grid = generate(width, height, seed=5)
    assert len(grid) == height
    assert all(len(row) == width for row in grid)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            assert (cell.x, cell.y) == (x, y)


def test_no_generation_bookkeeping_on_cells() -> None:
    grid = generate(7, 7, seed=1)
    assert all(not hasattr(cell, "visited") for row in grid for cell in row)


def test_cells_are_frozen() -> None:
    grid = generate(5, 5, seed=1)
    with pytest.raises(FrozenInstanceError):
        grid[1][1].is_wall = True  # type: ignore[misc]


def test_same_seed_same_maze() -> None:
    assert generate(21, 21, seed=99) == generate(21, 21, seed=99)
    assert generate(21, 21, rng=random.Random(99)) == generate(21, 21, seed=99)


def test_rng_takes_precedence_over_seed() -> None:
    assert generate(21, 21, seed=1, rng=random.Random(2)) == generate(21, 21, seed=2)


def test_different_seeds_differ() -> None:
    mazes = {tuple(to_strings(generate(21, 21, seed=s))) for s in range(5)}
    assert len(mazes) > 1


@pytest.mark.parametrize(
    "size, expected",
    [
        ((3, 3), ["WSW", "WPW", "WEW"]),
        ((4, 4), ["WSWW", "WPWW", "WPPW", "WWEW"]),
        ((4, 3), ["WSWW", "WPPW", "WWEW"]),
        ((3, 4), ["WSW", "WPW", "WPW", "WEW"]),
    ],
)
def test_smallest_mazes_are_fixed(size: Tuple[int, int], expected: list[str]) -> None:
    assert to_strings(generate(*size, seed=0)) == expected


def test_default_dimensions() -> None:
    grid = generate(seed=0)
    assert len(grid) == 20 and len(grid[0]) == 20
