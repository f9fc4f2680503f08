"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import Iterable, Optional, Tuple

from .constants import (
    DIRECTION_VECTORS,
    RESET_DIRECTION,
    START_BODY,
    START_DIRECTION,
)

Cell = Tuple[int, int]


class Snake:
    """
    Represents the player's snake.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        direction: unit vector applied to the head on the next advance
        should_grow: when set, the next advance keeps the tail
        heading: the direction used by the last advance; turns are checked
            against it as well as against direction, so a reversal can't
            sneak in between two ticks
    """

    def __init__(
        self,
        body: Optional[Iterable[Cell]] = None,
        direction: Tuple[int, int] = START_DIRECTION,
    ):
        self.body = deque(body if body is not None else START_BODY)
        self.direction: Tuple[int, int] = tuple(direction)
        self.heading: Tuple[int, int] = self.direction
        self.should_grow = False

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.body[0]

    def advance(self) -> Cell:
        """
        Move one cell along the current direction.

        The new head is prepended and the tail dropped, unless growth is
        pending. Heads outside the grid are allowed here; the game checks
        walls afterwards.
        """
        hx, hy = self.body[0]
        dx, dy = self.direction
        new_head = (hx + dx, hy + dy)
        self.body.appendleft(new_head)
        if self.should_grow:
            self.should_grow = False
        else:
            self.body.pop()
        self.heading = self.direction
        return new_head

    def grow(self):
        self.should_grow = True

    def turn(self, move: str) -> bool:
        """
        Point the snake towards `move` ("UP", "DOWN", "LEFT" or "RIGHT").

        Returns False and leaves the direction alone when the move is the
        reverse of the current direction, or of the direction of the last
        advance (the neck).
        """
        if move not in DIRECTION_VECTORS:
            raise ValueError(f"Unknown direction '{move}'")
        dx, dy = DIRECTION_VECTORS[move]
        reverse = (-dx, -dy)
        if reverse == self.direction or reverse == self.heading:
            return False
        self.direction = (dx, dy)
        return True

    def occupies(self, cell: Cell) -> bool:
        return tuple(cell) in self.body

    def hits_itself(self) -> bool:
        """True when the head shares a cell with any other segment."""
        return self.body[0] in islice(self.body, 1, None)

    def reset(self):
        """Restore the starting body and the reset direction."""
        self.body = deque(START_BODY)
        self.direction = RESET_DIRECTION
        self.heading = RESET_DIRECTION
        self.should_grow = False
