"""
Helper utility functions for Lifeline Maze
"""

import random

from utils.constants import DIRECTION_NAMES


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def random_index(count, rng=None):
    """Uniform random index in [0, count) from rng (module random by default)"""
    rng = rng or random
    return rng.randrange(count)


def direction_from_name(name):
    """Map 'UP'/'right'/... to a direction index, None if unknown"""
    token = (name or "").strip().upper()
    if token in DIRECTION_NAMES:
        return DIRECTION_NAMES.index(token)
    return None

