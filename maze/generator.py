"""
Maze generation - randomized iterative backtracker
"""

import random
from utils.constants import START_POS
from utils.helpers import random_index
from maze.maze_core import carve_passage, unvisited_neighbors


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(grid, rng=None):
    """
    Depth-First Search with backtracking - animated generator

    Pops the current cell, pushes it back while it still has unvisited
    neighbors, and carves towards one of them picked uniformly at random.
    Uses an explicit stack so large grids never hit the recursion limit.

    Args:
        grid: MazeGrid with all walls closed
        rng: object with randrange(), module random by default

    Yields:
        Step dicts {"grid", "current", "carved", "done"}
    """
    rng = rng or random

    sx, sy = START_POS
    start = grid.cell(sx, sy)
    start.visited = True
    stack = [start]

    yield {"grid": grid, "current": start.pos, "carved": None, "done": False}

    while stack:
        current = stack.pop()
        neighbors = unvisited_neighbors(grid, current)

        if not neighbors:
            yield {"grid": grid, "current": current.pos, "carved": None, "done": False}
            continue

        stack.append(current)

        neighbor, direction = neighbors[random_index(len(neighbors), rng)]
        neighbor.visited = True
        carve_passage(grid, current, direction)
        stack.append(neighbor)

        yield {"grid": grid, "current": neighbor.pos, "carved": (current.pos, neighbor.pos), "done": False}

    yield {"grid": grid, "current": start.pos, "carved": None, "done": True}


def generate_maze(grid, rng=None):
    """Generate instantly; returns the carved grid"""
    for _ in gen_dfs_backtracker(grid, rng):
        pass
    return grid
