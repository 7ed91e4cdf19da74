import random

import pytest

from maze.difficulty import GameConfig
from maze.maze_core import carve_passage
from game.session import GameSession
from utils.constants import RIGHT


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_config():
    """5x5 board, one life item / two obstacles, no automatic reset"""
    return GameConfig(name="Test", cols=5, rows=5, max_lives=5, life_item_count=1, reset_delay=None)


@pytest.fixture
def recorder():
    return EventRecorder()


class ScriptedSource:
    """Replays a fixed list of randrange results"""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


class EventRecorder:
    """Collects the notifications GameFlow sends to the presentation layer"""

    def __init__(self):
        self.state_changes = []
        self.terminals = []

    def on_state_changed(self, session):
        self.state_changes.append(session)

    def on_terminal(self, outcome):
        self.terminals.append(outcome)


def build_session(cols, rows, passages=(), obstacles=(), life_items=(), max_lives=5, player_pos=(0, 0)):
    """
    Hand-built session: no generated maze, only the listed passages are open.

    passages: iterable of ((x, y), direction)
    """
    config = GameConfig(name="Hand", cols=cols, rows=rows, max_lives=max_lives, life_item_count=0, reset_delay=None)
    session = GameSession(config, random.Random(0))
    for (x, y), direction in passages:
        carve_passage(session.grid, session.grid.cell(x, y), direction)
    for x, y in obstacles:
        session.obstacle_manager.add_obstacle(x, y)
    for x, y in life_items:
        session.life_item_manager.add_item(x, y)
    session.player.x, session.player.y = player_pos
    return session


def corridor_passages(cols, y=0):
    """Open a straight corridor along row y from x=0 to x=cols-1"""
    return [((x, y), RIGHT) for x in range(cols - 1)]
