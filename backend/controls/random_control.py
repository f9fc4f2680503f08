"""
Random control implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_VECTORS, VALID_MOVES
from domain.game_state import GameState
from .base import Control


class RandomControl(Control):
    """
    An autopilot that picks a direction avoiding walls and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def poll_direction(self, game_state: GameState) -> str:
        snake_cells = game_state.snake_cells
        head_x, head_y = snake_cells[0]
        blocked = {
            (-game_state.direction[0], -game_state.direction[1]),
            (-game_state.heading[0], -game_state.heading[1]),
        }

        # Filter out moves that:
        # 1. Reverse the current direction or the last move
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            mx, my = DIRECTION_VECTORS[move]
            if (mx, my) in blocked:
                continue

            new_x, new_y = head_x + mx, head_y + my
            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_cells[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
