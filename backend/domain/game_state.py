"""
GameState entity - a snapshot of the game handed to renderers and controls.
"""

from typing import List, Optional, Tuple

Cell = Tuple[int, int]


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake_cells: list of (x, y), head first
        direction: direction vector the snake will move in next
        heading: direction vector of the last move (defaults to direction)
        food: (x, y) of the food
        score: current score
        high_score: best score since the game was created
        running: whether ticks currently move the snake
        won: whether the snake filled the grid
        width, height: board dimensions
        tick_count: number of ticks applied so far
    """

    def __init__(
        self,
        snake_cells: List[Cell],
        direction: Tuple[int, int],
        food: Cell,
        score: int,
        width: int,
        height: int,
        running: bool = True,
        won: bool = False,
        high_score: int = 0,
        tick_count: int = 0,
        state: Optional[str] = None,
        heading: Optional[Tuple[int, int]] = None,
    ):
        self.snake_cells = snake_cells
        self.direction = direction
        self.heading = heading if heading is not None else direction
        self.food = food
        self.score = score
        self.width = width
        self.height = height
        self.running = running
        self.won = won
        self.high_score = high_score
        self.tick_count = tick_count
        self.state = state

    @property
    def head(self) -> Cell:
        return self.snake_cells[0]

    def score_text(self) -> str:
        """Score as the zero-padded three digit label shown above the board."""
        return f"{self.score:03d}"

    @staticmethod
    def to_screen_rect(cell: Cell, cell_size: int, border: int = 0) -> Tuple[int, int, int, int]:
        """Map a cell to the (x, y, w, h) pixel rectangle it is drawn in."""
        x, y = cell
        return (border + x * cell_size, border + y * cell_size, cell_size, cell_size)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first (screen coordinates, y grows downwards).
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        if 0 <= fx < self.width and 0 <= fy < self.height:
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_cells):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, state={self.state}, food={self.food}, "
            f"length={len(self.snake_cells)}, score={self.score}>"
        )
