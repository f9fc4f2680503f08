"""
Food entity - a single cell the snake is chasing.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from .constants import CELL_COUNT

Cell = Tuple[int, int]

logger = logging.getLogger(__name__)


class GridFullError(Exception):
    """Raised when every cell of the grid is occupied and food can't be placed."""


class Food:
    """
    Food on the board.

    Attributes:
        pos: current (x, y) cell
        cell_count: grid side length
        max_attempts: random draws tried before falling back to a scan of
            the free cells
    """

    def __init__(
        self,
        occupied: Collection[Cell] = (),
        cell_count: int = CELL_COUNT,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ):
        self.cell_count = cell_count
        self.rng = rng or random
        self.max_attempts = max_attempts if max_attempts is not None else cell_count * cell_count
        self.pos: Cell = self.relocate(occupied)

    def random_cell(self) -> Cell:
        x = self.rng.randint(0, self.cell_count - 1)
        y = self.rng.randint(0, self.cell_count - 1)
        return (x, y)

    def free_cells(self, occupied: Collection[Cell]):
        taken = set(occupied)
        return [
            (x, y)
            for y in range(self.cell_count)
            for x in range(self.cell_count)
            if (x, y) not in taken
        ]

    def relocate(self, occupied: Collection[Cell]) -> Cell:
        """
        Move the food to a random cell not in `occupied` and return it.

        Rejection sampling is capped at `max_attempts`; after that the free
        cells are listed and one is picked, so a nearly full grid still
        terminates.

        Raises:
            GridFullError: if `occupied` covers the whole grid.
        """
        taken = set(occupied)
        for _ in range(self.max_attempts):
            cell = self.random_cell()
            if cell not in taken:
                self.pos = cell
                return cell

        free = self.free_cells(taken)
        if not free:
            raise GridFullError(
                f"No free cell left on the {self.cell_count}x{self.cell_count} grid"
            )
        logger.debug("Rejection sampling exhausted, picking from %d free cells", len(free))
        self.pos = self.rng.choice(free)
        return self.pos
