"""
Color palette for Lifeline Maze
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (245, 245, 240)   # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (0, 0, 0)            # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Entity colors
COLOR_PLAYER = (0, 128, 0)        # Player
COLOR_GOAL = (255, 215, 120)      # Goal/Exit
COLOR_OBSTACLE = (255, 0, 0)      # Obstacle (red ball)
COLOR_LIFE_ITEM = (50, 205, 50)   # Life item (limegreen triangle)
COLOR_HINT = (170, 200, 255)      # Shortest-path hint

# Lives display
COLOR_LIFE_FULL = (230, 60, 80)
COLOR_LIFE_EMPTY = (70, 70, 80)

# Terminal overlays
COLOR_OVERLAY = (0, 0, 0, 160)
COLOR_WIN_TEXT = (255, 220, 120)
COLOR_LOSE_TEXT = (255, 100, 100)
