import random

import pytest

from maze.generator import gen_dfs_backtracker, generate_maze
from maze.maze_core import (
    bfs_shortest_path,
    create_grid,
    is_perfect_maze,
    passage_edges,
    reachable_from,
    walls_consistent,
)
from utils.constants import DOWN, OPPOSITE, RIGHT


SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (5, 5), (12, 7), (20, 20)]


def _walls(grid):
    return [list(cell.walls) for cell in grid]


class FirstChoice:
    """Deterministic source that always picks the first candidate"""

    def __init__(self):
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        return 0


@pytest.mark.parametrize("cols,rows", SIZES)
@pytest.mark.parametrize("seed", [0, 1, 42])
def test_generated_maze_is_a_spanning_tree(cols, rows, seed):
    grid = generate_maze(create_grid(cols, rows), random.Random(seed))

    assert len(passage_edges(grid)) == cols * rows - 1
    assert len(reachable_from(grid)) == cols * rows
    assert is_perfect_maze(grid)


@pytest.mark.parametrize("cols,rows", SIZES)
def test_generated_walls_are_symmetric(cols, rows):
    grid = generate_maze(create_grid(cols, rows), random.Random(7))

    assert walls_consistent(grid)
    for cell in grid:
        for direction, (dx, dy) in ((RIGHT, (1, 0)), (DOWN, (0, 1))):
            nx, ny = cell.x + dx, cell.y + dy
            if grid.in_bounds(nx, ny):
                assert cell.walls[direction] == grid.cell(nx, ny).walls[OPPOSITE[direction]]


def test_every_cell_is_visited():
    grid = generate_maze(create_grid(9, 4), random.Random(3))
    assert all(cell.visited for cell in grid)


def test_goal_is_reachable_from_start():
    grid = generate_maze(create_grid(15, 10), random.Random(5))

    path = bfs_shortest_path(grid, grid.start_pos, grid.goal_pos)

    assert path[0] == (0, 0)
    assert path[-1] == (14, 9)


def test_same_seed_gives_same_maze():
    a = generate_maze(create_grid(10, 10), random.Random(99))
    b = generate_maze(create_grid(10, 10), random.Random(99))

    assert _walls(a) == _walls(b)


def test_different_seeds_give_different_mazes():
    shapes = {
        tuple(map(tuple, _walls(generate_maze(create_grid(10, 10), random.Random(seed)))))
        for seed in range(5)
    }
    assert len(shapes) > 1


def test_any_random_source_still_gives_a_perfect_maze():
    source = FirstChoice()

    grid = generate_maze(create_grid(6, 6), source)

    assert source.calls == 6 * 6 - 1
    assert is_perfect_maze(grid)


def test_default_random_source_is_used_when_none_given():
    grid = generate_maze(create_grid(4, 4))
    assert is_perfect_maze(grid)


def test_animated_generator_reports_each_carved_passage():
    grid = create_grid(5, 3)

    steps = list(gen_dfs_backtracker(grid, random.Random(11)))
    carved = [s["carved"] for s in steps if s["carved"] is not None]

    assert steps[0]["current"] == (0, 0)
    assert steps[-1]["done"] is True
    assert all(not s["done"] for s in steps[:-1])
    assert len(carved) == 5 * 3 - 1
    assert sorted(tuple(sorted(edge)) for edge in carved) == sorted(passage_edges(grid))
