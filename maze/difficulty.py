"""
Game configuration presets and entity placement for Lifeline Maze
"""

import random
from utils.constants import (
    CELL_SIZE, PLAYER_MAX_LIVES, LIFE_ITEM_COUNT, RESET_DELAY, START_POS
)


class InvalidConfiguration(ValueError):
    """Raised when a configuration cannot produce a playable session"""


class GameConfig:
    """Configuration for a single game session"""
    def __init__(self, **kwargs):
        self.name = kwargs.get('name', 'Classic')

        # Maze dimensions
        self.cols = kwargs.get('cols', 20)
        self.rows = kwargs.get('rows', 20)

        # Presentation only
        self.cell_size = kwargs.get('cell_size', CELL_SIZE)

        # Lives (the player always starts with max_lives)
        self.max_lives = kwargs.get('max_lives', PLAYER_MAX_LIVES)

        # Entities (obstacles are always one more than life items)
        self.life_item_count = kwargs.get('life_item_count', LIFE_ITEM_COUNT)

        # Seconds before a finished game resets itself, None = wait for reset()
        self.reset_delay = kwargs.get('reset_delay', RESET_DELAY)

    @property
    def obstacle_count(self):
        return self.life_item_count + 1

    def validate(self):
        """
        Raise InvalidConfiguration if a session cannot be built from this config

        Returns:
            self, so it can be chained
        """
        if self.cols < 1 or self.rows < 1:
            raise InvalidConfiguration(f"Grid must be at least 1x1, got {self.cols}x{self.rows}")
        if self.max_lives < 1:
            raise InvalidConfiguration(f"max_lives must be at least 1, got {self.max_lives}")
        if self.life_item_count < 0:
            raise InvalidConfiguration(f"life_item_count cannot be negative, got {self.life_item_count}")
        if self.reset_delay is not None and self.reset_delay < 0:
            raise InvalidConfiguration(f"reset_delay cannot be negative, got {self.reset_delay}")
        check_capacity(self.cols, self.rows, self.life_item_count)
        return self

    def replace(self, **changes):
        """Copy of this config with some fields changed"""
        values = dict(vars(self))
        values.update(changes)
        return GameConfig(**values)

    def __repr__(self):
        return (f"GameConfig(name={self.name!r}, size={self.cols}x{self.rows}, "
                f"lives={self.max_lives}, life_items={self.life_item_count})")


# ========== PRESET DEFINITIONS ==========

PRESET_SMALL = GameConfig(
    name='Small',
    cols=10,
    rows=10,
    cell_size=48,
    max_lives=3,
    life_item_count=1,
)

PRESET_CLASSIC = GameConfig(
    name='Classic',
    cols=20,
    rows=20,
    cell_size=30,
    max_lives=5,
    life_item_count=3,
)

PRESET_LARGE = GameConfig(
    name='Large',
    cols=30,
    rows=30,
    cell_size=22,
    max_lives=5,
    life_item_count=6,
)

PRESETS = [
    PRESET_SMALL,
    PRESET_CLASSIC,
    PRESET_LARGE,
]


def get_config(preset_index):
    """
    Get configuration for a preset

    Args:
        preset_index: 0-2, clamped

    Returns:
        GameConfig object
    """
    preset_index = max(0, min(preset_index, len(PRESETS) - 1))
    return PRESETS[preset_index]


# ========== ENTITY SPAWN HELPERS ==========

def check_capacity(cols, rows, num_life_items):
    """
    Make sure the grid has room for every entity plus the start and goal cells

    Raises:
        InvalidConfiguration if cols * rows < obstacles + life items + 2
    """
    needed = (num_life_items + 1) + num_life_items + 2
    if cols * rows < needed:
        raise InvalidConfiguration(
            f"A {cols}x{rows} grid has {cols * rows} cells, "
            f"{needed} are needed for {num_life_items + 1} obstacles, "
            f"{num_life_items} life items, start and goal"
        )


def random_empty_cell(cols, rows, occupied, rng=None):
    """
    Draw random cells until one is free (rejection sampling)

    Args:
        cols, rows: Grid dimensions
        occupied: Set of (x, y) that may not be returned
        rng: object with randrange(), module random by default

    Returns:
        (x, y) tuple
    """
    rng = rng or random
    while True:
        x = rng.randrange(cols)
        y = rng.randrange(rows)
        if (x, y) not in occupied:
            return x, y


def place_entities(grid, num_life_items, rng=None):
    """
    Generate positions for obstacles and life items

    All obstacles are placed before all life items. Start, goal and
    already placed entities are never reused.

    Returns:
        (obstacles, life_items), each a list of (x, y) tuples
    """
    check_capacity(grid.cols, grid.rows, num_life_items)

    occupied = {START_POS, grid.goal_pos}
    obstacles = []
    life_items = []

    for _ in range(num_life_items + 1):
        pos = random_empty_cell(grid.cols, grid.rows, occupied, rng)
        occupied.add(pos)
        obstacles.append(pos)

    for _ in range(num_life_items):
        pos = random_empty_cell(grid.cols, grid.rows, occupied, rng)
        occupied.add(pos)
        life_items.append(pos)

    return obstacles, life_items
