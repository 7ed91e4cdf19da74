"""
Global constants for Lifeline Maze
"""

GAME_TITLE = "Lifeline Maze"
GAME_VERSION = "1.0.0"

# Screen settings
CELL_SIZE = 30
FPS = 60
WALL_THICK = 2

# HUD panel height
PANEL_H = 70

# Wall indices (order matches Cell.walls)
UP = 0
RIGHT = 1
DOWN = 2
LEFT = 3

DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
DIRECTION_NAMES = ["UP", "RIGHT", "DOWN", "LEFT"]

# Direction vectors with wall indices: (dx, dy, wall, opposite wall)
DIRS = [
    (0, -1, UP, DOWN),      # up
    (1, 0, RIGHT, LEFT),    # right
    (0, 1, DOWN, UP),       # down
    (-1, 0, LEFT, RIGHT),   # left
]

# Direction to vector mapping
DIR_TO_DELTA = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}

OPPOSITE = {
    UP: DOWN,
    RIGHT: LEFT,
    DOWN: UP,
    LEFT: RIGHT,
}

# Start cell is always the top-left corner
START_POS = (0, 0)

# Player settings
PLAYER_MAX_LIVES = 5
PLAYER_SIZE_RATIO = 0.6

# Entities
LIFE_ITEM_COUNT = 3

# Seconds between a win/loss and the automatic new maze
RESET_DELAY = 2.0
