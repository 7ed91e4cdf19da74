"""
Core maze functions - grid model, passage carving, movement checks and analysis
"""

from collections import deque
from utils.constants import DIRS, DIR_TO_DELTA, OPPOSITE, START_POS, RIGHT, DOWN


class Cell:
    """
    Single maze cell
    walls are indexed UP, RIGHT, DOWN, LEFT; visited is only used while generating
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.walls = [True, True, True, True]
        self.visited = False

    @property
    def pos(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Cell(pos=({self.x},{self.y}), walls={self.walls})"


class MazeGrid:
    """
    Maze grid with wall-based representation
    Cells are stored row-major and addressed by (x, y) = (column, row)
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        # Initialize all walls closed
        self.cells = [Cell(x, y) for y in range(rows) for x in range(cols)]

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x, y):
        """Get cell at (x, y)"""
        if not self.in_bounds(x, y):
            raise IndexError(f"Out of bounds position: ({x}, {y})")
        return self.cells[self.idx(x, y)]

    @property
    def start_pos(self):
        return START_POS

    @property
    def goal_pos(self):
        return (self.cols - 1, self.rows - 1)

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"MazeGrid(size={self.cols}x{self.rows})"


def create_grid(cols, rows):
    """Allocate a cols x rows grid with every wall present and nothing visited"""
    return MazeGrid(cols, rows)


def neighbors_of(grid, cell):
    """
    Get in-bounds neighbors of a cell

    Returns:
        List of (neighbor_cell, direction) tuples, direction pointing from cell to neighbor
    """
    res = []
    for dx, dy, wall, _ in DIRS:
        nx, ny = cell.x + dx, cell.y + dy
        if grid.in_bounds(nx, ny):
            res.append((grid.cell(nx, ny), wall))
    return res


def unvisited_neighbors(grid, cell):
    """Neighbors that the generator has not reached yet"""
    return [(n, d) for n, d in neighbors_of(grid, cell) if not n.visited]


def carve_passage(grid, cell, direction):
    """
    Remove the wall pair between cell and its neighbor in direction

    Returns:
        The neighbor cell, or None if the neighbor is out of bounds
    """
    dx, dy = DIR_TO_DELTA[direction]
    nx, ny = cell.x + dx, cell.y + dy
    if not grid.in_bounds(nx, ny):
        return None
    neighbor = grid.cell(nx, ny)
    cell.walls[direction] = False
    neighbor.walls[OPPOSITE[direction]] = False
    return neighbor


def can_move(grid, x, y, direction):
    """Check if player can move in direction from (x, y)"""
    dx, dy = DIR_TO_DELTA[direction]
    nx, ny = x + dx, y + dy
    if not grid.in_bounds(nx, ny):
        return False
    return not grid.cell(x, y).walls[direction]


def neighbors_open(grid, x, y):
    """Get list of open neighbor cells"""
    res = []
    for dx, dy, wall, _ in DIRS:
        if can_move(grid, x, y, wall):
            res.append((x + dx, y + dy))
    return res


# ========== ANALYSIS ==========

def passage_edges(grid):
    """
    All carved passages, each listed once as ((x, y), (nx, ny))
    Only RIGHT and DOWN are inspected so a passage is never counted twice
    """
    edges = []
    for cell in grid:
        x, y = cell.pos
        if x + 1 < grid.cols and not cell.walls[RIGHT]:
            edges.append(((x, y), (x + 1, y)))
        if y + 1 < grid.rows and not cell.walls[DOWN]:
            edges.append(((x, y), (x, y + 1)))
    return edges


def walls_consistent(grid):
    """Check that every shared wall is either present on both sides or on neither"""
    for cell in grid:
        for neighbor, direction in neighbors_of(grid, cell):
            if cell.walls[direction] != neighbor.walls[OPPOSITE[direction]]:
                return False
    return True


def reachable_from(grid, start=START_POS):
    """Flood fill over open passages"""
    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def is_perfect_maze(grid):
    """
    A maze is perfect when the passage graph is a spanning tree:
    connected and exactly cols*rows - 1 passages
    """
    if not walls_consistent(grid):
        return False
    if len(passage_edges(grid)) != grid.cols * grid.rows - 1:
        return False
    return len(reachable_from(grid)) == grid.cols * grid.rows


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path finder, returns list of (x, y) or [] if unreachable"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in prev:
                prev[n] = (x, y)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


def path_to_directions(path):
    """Turn a list of adjacent cells into the moves that walk it"""
    moves = []
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        for direction, delta in DIR_TO_DELTA.items():
            if delta == (bx - ax, by - ay):
                moves.append(direction)
                break
    return moves
