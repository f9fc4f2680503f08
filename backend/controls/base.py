"""
Base control interface for the game loop.
"""

from typing import Optional

from domain.game_state import GameState


class Control:
    """
    Base class/interface for direction input.

    A control is polled once per frame and returns the direction it wants
    the snake to take, or None when there is no input this frame.
    """

    def poll_direction(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None
        """
        raise NotImplementedError

    def poll_directions(self, game_state: GameState):
        """
        Return every direction requested this frame, in polling order.

        Controls that only ever produce one direction can rely on this
        default.
        """
        move = self.poll_direction(game_state)
        return [move] if move is not None else []
