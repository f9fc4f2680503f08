"""
Held-key control - four booleans sampled once per frame.
"""

from typing import Dict, List, Optional

from domain.constants import DOWN, LEFT, POLL_ORDER, RIGHT, UP, VALID_MOVES
from domain.game_state import GameState
from .base import Control


class HeldKeysControl(Control):
    """
    Tracks which arrow keys are currently held down.

    Keys are polled in the fixed order right, left, up, down. Every held key
    is offered to the game in that order, so when several keys are held the
    last one the game accepts wins.
    """

    def __init__(self):
        self.held: Dict[str, bool] = {move: False for move in POLL_ORDER}

    def press(self, move: str):
        self._check(move)
        self.held[move] = True

    def release(self, move: str):
        self._check(move)
        self.held[move] = False

    def set_keys(self, right: bool = False, left: bool = False, up: bool = False, down: bool = False):
        """Replace the held state of all four keys at once."""
        self.held.update({RIGHT: right, LEFT: left, UP: up, DOWN: down})

    def poll_directions(self, game_state: GameState) -> List[str]:
        return [move for move in POLL_ORDER if self.held[move]]

    def poll_direction(self, game_state: GameState) -> Optional[str]:
        held = self.poll_directions(game_state)
        return held[-1] if held else None

    @staticmethod
    def _check(move: str):
        if move not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{move}'")
