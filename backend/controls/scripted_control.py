"""
Scripted control - replays a fixed sequence of inputs, one per frame.
"""

from typing import Iterable, Optional

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Control


class ScriptedControl(Control):
    """
    Returns the next entry of `moves` each frame; None entries mean no input.
    Once the script runs out the control stays silent.
    """

    def __init__(self, moves: Iterable[Optional[str]] = ()):
        self.moves = list(moves)
        for move in self.moves:
            if move is not None and move not in VALID_MOVES:
                raise ValueError(f"Unknown direction '{move}'")
        self.position = 0

    def poll_direction(self, game_state: GameState) -> Optional[str]:
        if self.position >= len(self.moves):
            return None
        move = self.moves[self.position]
        self.position += 1
        return move
