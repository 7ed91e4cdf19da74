"""
Game session - one maze, its player and its entities
"""

import random
from maze.maze_core import create_grid
from maze.generator import generate_maze
from maze.difficulty import GameConfig, place_entities
from entities.player import Player
from entities.obstacle import ObstacleManager
from entities.life_item import LifeItemManager


class GameSession:
    """
    Everything that belongs to one playthrough of one maze.
    A reset throws the whole session away and builds a new one.
    """
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: GameConfig, defaults to the classic settings
            rng: object with randrange(), module random by default
        """
        self.config = (config or GameConfig()).validate()
        self.rng = rng or random

        self.cols = self.config.cols
        self.rows = self.config.rows

        # Maze data (all walls closed until generate() runs)
        self.grid = create_grid(self.cols, self.rows)

        # Positions
        self.start_pos = self.grid.start_pos
        self.goal_pos = self.grid.goal_pos

        # Entities
        self.player = Player(self.start_pos[0], self.start_pos[1], self.config.max_lives)
        self.obstacle_manager = ObstacleManager()
        self.life_item_manager = LifeItemManager()

    def generate(self):
        """
        Carve the maze and spawn entities

        Returns:
            self, so it can be chained
        """
        generate_maze(self.grid, self.rng)
        self._spawn_entities()
        return self

    def _spawn_entities(self):
        """Spawn obstacles and life items on the finished grid"""
        obstacles, life_items = place_entities(
            self.grid, self.config.life_item_count, self.rng
        )
        for x, y in obstacles:
            self.obstacle_manager.add_obstacle(x, y)
        for x, y in life_items:
            self.life_item_manager.add_item(x, y)

    @property
    def obstacles(self):
        """Current obstacle positions"""
        return [o.pos for o in self.obstacle_manager]

    @property
    def life_items(self):
        """Current life item positions"""
        return [i.pos for i in self.life_item_manager]

    def __repr__(self):
        return f"GameSession(size={self.cols}x{self.rows}, player={self.player})"


def new_session(config=None, rng=None):
    """Build and generate a fresh session"""
    return GameSession(config, rng).generate()
