"""
Domain entities for the Snake game core.

This module contains the game entities that are independent of
rendering, windowing and input devices.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS, POLL_ORDER,
    CELL_COUNT, TICK_INTERVAL, RUNNING, STOPPED, WON,
)
from .snake import Snake
from .food import Food, GridFullError
from .game_state import GameState
from .game import SnakeGame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS', 'POLL_ORDER',
    'CELL_COUNT', 'TICK_INTERVAL', 'RUNNING', 'STOPPED', 'WON',
    'Snake',
    'Food',
    'GridFullError',
    'GameState',
    'SnakeGame',
]
