"""
Game State Machine - manages game states, move intents and resets
"""

import random
from enum import Enum, auto

from utils.constants import DIRECTIONS
from utils.helpers import direction_from_name
from maze.difficulty import GameConfig
from game.collision import CollisionHandler
from game.session import new_session


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = (GameState.WON, GameState.LOST)


class MoveRejection(Enum):
    """Why a move intent was ignored"""
    ILLEGAL_MOVE = auto()
    TERMINAL_STATE = auto()


class GameStateManager:
    """
    Manages game state transitions
    """
    def __init__(self):
        self.current_state = GameState.PLAYING
        self.previous_state = None

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
        """
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_terminal(self):
        """Check if the game is over (won or lost)"""
        return self.current_state in TERMINAL_STATES

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"


class GameFlow:
    """
    High-level game flow controller, the only object the presentation talks to.

    Presentation -> core:
        submit_move_intent(direction), reset(), update(dt)
    Core -> presentation:
        on_state_changed(session) after every processed move and every reset
        on_terminal(outcome) once per win or loss
    """
    def __init__(self, config=None, rng=None, seed=None, on_state_changed=None, on_terminal=None):
        """
        Args:
            config: GameConfig, validated before anything is built
            rng: object with randrange(); a random.Random(seed) is created if omitted
            seed: seed for the default rng, for reproducible mazes
            on_state_changed: callback(session)
            on_terminal: callback(GameState.WON | GameState.LOST)

        Raises:
            InvalidConfiguration if config cannot host a playable session
        """
        self.config = (config or GameConfig()).validate()
        self.rng = rng if rng is not None else random.Random(seed)

        self.on_state_changed = on_state_changed
        self.on_terminal = on_terminal

        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler()

        self.session = None
        self.reset_timer = None

        # Process-lifetime tallies, never persisted
        self.wins = 0
        self.losses = 0

        self.initialize_game()

    # ========== LIFECYCLE ==========

    def initialize_game(self):
        """Build a brand-new session and start playing it"""
        self.load_session(new_session(self.config, self.rng))

    def reset(self):
        """Throw away the current session and start a fresh maze"""
        self.initialize_game()

    def load_session(self, session):
        """Install a session (fresh or hand-built) and enter PLAYING"""
        self.session = session
        self.reset_timer = None
        self.state_manager.transition_to(GameState.PLAYING)
        self._notify_state_changed()

    def select_config(self, config):
        """
        Switch to another configuration and reset

        Raises:
            InvalidConfiguration before the current session is touched
        """
        self.config = config.validate()
        self.reset()

    # ========== PLAY ==========

    def submit_move_intent(self, direction):
        """
        Process one directional move intent

        Args:
            direction: UP/RIGHT/DOWN/LEFT, or its name

        Returns:
            Dictionary with move results:
            {
                'moved': bool,
                'rejected': MoveRejection or None,
                'obstacle': Obstacle or None,
                'life_item': LifeItem or None,
                'player_died': bool,
                'reached_goal': bool,
                'outcome': GameState.WON, GameState.LOST or None
            }
        """
        direction = self._parse_direction(direction)

        result = {
            'moved': False,
            'rejected': None,
            'obstacle': None,
            'life_item': None,
            'player_died': False,
            'reached_goal': False,
            'outcome': None
        }

        if self.is_terminal():
            result['rejected'] = MoveRejection.TERMINAL_STATE
            return result

        session = self.session
        if not session.player.move(direction, session.grid):
            result['rejected'] = MoveRejection.ILLEGAL_MOVE
            return result

        result['moved'] = True

        collision_result = self.collision_handler.check_player_position(
            session.player,
            session.obstacle_manager,
            session.life_item_manager,
            session.goal_pos
        )
        result.update(collision_result)

        if collision_result['player_died']:
            self._enter_terminal(GameState.LOST)
        elif collision_result['reached_goal']:
            self._enter_terminal(GameState.WON)

        if self.is_terminal():
            result['outcome'] = self.state

        self._notify_state_changed()
        if result['outcome'] is not None and self.on_terminal:
            self.on_terminal(result['outcome'])

        return result

    def update(self, dt):
        """
        Advance the deferred reset after a win or loss

        Args:
            dt: Delta time in seconds

        Returns:
            State change information or None
        """
        if not self.is_terminal() or self.reset_timer is None:
            return None

        self.reset_timer -= dt
        if self.reset_timer <= 0:
            outcome = self.state
            self.reset()
            return {'event': 'reset', 'after': outcome}
        return None

    # ========== QUERIES ==========

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def player(self):
        return self.session.player

    @property
    def grid(self):
        return self.session.grid

    def is_terminal(self):
        return self.state_manager.is_terminal()

    # ========== INTERNALS ==========

    def _parse_direction(self, direction):
        if isinstance(direction, str):
            parsed = direction_from_name(direction)
            if parsed is None:
                raise ValueError(f"Unknown direction: {direction!r}")
            return parsed
        if type(direction) is not int or direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction!r}")
        return direction

    def _enter_terminal(self, outcome):
        self.state_manager.transition_to(outcome)
        if outcome == GameState.WON:
            self.wins += 1
        else:
            self.losses += 1
        self.reset_timer = self.config.reset_delay

    def _notify_state_changed(self):
        if self.on_state_changed:
            self.on_state_changed(self.session)

    def __repr__(self):
        return f"GameFlow(state={self.state_manager.get_state_name()}, session={self.session})"
