import random
import pytest

from maze_runner import find_shortest_path, generate, locate_endpoints
from maze_runner.components import Position
from maze_runner.utils.grid import passage_positions
from tests.test_utils import is_contiguous


@pytest.mark.parametrize(
    "width, height",
    [(3, 3), (5, 5), (6, 6), (9, 14), (20, 20), (21, 21), (31, 17), (40, 40)],
)
@pytest.mark.parametrize("seed", range(10))
def test_entrance_always_reaches_exit(width: int, height: int, seed: int) -> None:
    grid = generate(width, height, seed=seed)
    start, end = locate_endpoints(grid)
    assert start is not None and end is not None

    path = find_shortest_path(grid, start, end)
    assert path is not None
    assert path[0] == start and path[-1] == end
    assert is_contiguous(path)
    assert len(set(path)) == len(path)
    assert all(not grid[p.y][p.x].is_wall for p in path)


def test_every_passage_reachable_from_entrance() -> None:
    grid = generate(15, 15, seed=3)
    start, _ = locate_endpoints(grid)
    assert start is not None
    for pos in passage_positions(grid):
        assert find_shortest_path(grid, start, pos) is not None


def test_path_is_symmetric_in_a_perfect_maze() -> None:
    # Exactly one route exists, so both directions walk the same cells.
    grid = generate(21, 21, seed=8)
    start, end = locate_endpoints(grid)
    assert start is not None and end is not None
    forward = find_shortest_path(grid, start, end)
    backward = find_shortest_path(grid, end, start)
    assert forward is not None and backward is not None
    assert forward == list(reversed(backward))


def test_walls_and_border_rejected_on_generated_maze() -> None:
    grid = generate(11, 11, rng=random.Random(4))
    start, end = locate_endpoints(grid)
    assert start is not None and end is not None
    assert find_shortest_path(grid, Position(0, 0), end) is None
    assert find_shortest_path(grid, start, Position(11, 5)) is None


def test_repeated_searches_share_grid() -> None:
    grid = generate(21, 21, seed=12)
    start, end = locate_endpoints(grid)
    assert start is not None and end is not None
    first = find_shortest_path(grid, start, end)
    second = find_shortest_path(grid, start, end)
    assert first == second
