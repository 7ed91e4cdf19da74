"""
Player entity with position and lives
"""

from utils.constants import DIR_TO_DELTA, PLAYER_MAX_LIVES, START_POS
from utils.helpers import clamp
from maze.maze_core import can_move


class Player:
    """
    Player entity, lives are always kept within [0, max_lives]
    """
    def __init__(self, x=START_POS[0], y=START_POS[1], max_lives=PLAYER_MAX_LIVES):
        self.x = x
        self.y = y
        self.max_lives = max_lives
        self.lives = max_lives

        self.moves = 0

    @property
    def pos(self):
        return (self.x, self.y)

    def move(self, direction, grid):
        """
        Move player one cell in direction
        Returns True if move was successful
        """
        if not can_move(grid, self.x, self.y, direction):
            return False

        dx, dy = DIR_TO_DELTA[direction]
        self.x += dx
        self.y += dy
        self.moves += 1
        return True

    def lose_life(self):
        """
        Lose one life
        Returns True if player died
        """
        self.lives = clamp(self.lives - 1, 0, self.max_lives)
        return self.lives == 0

    def gain_life(self):
        """
        Gain one life, never above max_lives
        Returns True if lives actually went up
        """
        before = self.lives
        self.lives = clamp(self.lives + 1, 0, self.max_lives)
        return self.lives > before

    def reset_position(self, x=START_POS[0], y=START_POS[1]):
        """Reset player to starting position with full lives"""
        self.x = x
        self.y = y
        self.lives = self.max_lives
        self.moves = 0

    def is_alive(self):
        """Check if player is alive"""
        return self.lives > 0

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), lives={self.lives}/{self.max_lives})"
