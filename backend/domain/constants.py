"""
Game constants for the Snake core.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: x grows to the right, y grows downwards
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    RIGHT: (1, 0),
    LEFT: (-1, 0),
    UP: (0, -1),
    DOWN: (0, 1),
}

# Order in which held keys are polled each frame; the last accepted one wins
POLL_ORDER = (RIGHT, LEFT, UP, DOWN)

# Grid settings
CELL_COUNT = 25
CELL_SIZE = 30
BORDER_WIDTH = 75

# Seconds between logic ticks
TICK_INTERVAL = 0.2

# Starting configuration
START_BODY = ((6, 9), (5, 9), (4, 9))
START_DIRECTION = DIRECTION_VECTORS[UP]
RESET_DIRECTION = DIRECTION_VECTORS[RIGHT]

# Game states
RUNNING = "RUNNING"
STOPPED = "STOPPED"
WON = "WON"
