"""
SnakeGame - composes the snake and the food and applies the per-tick rules.
"""

import logging
import random
from typing import Optional

from .constants import CELL_COUNT, RUNNING, START_BODY, STOPPED, WON
from .food import Food, GridFullError
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Snake
      - Food
      - Score and high score
      - Running / stopped / won state

    A tick only moves the snake while the game is running. Hitting a wall or
    the snake's own body resets the board and stops the game until the next
    accepted direction. Filling the grid ends the game as a win.
    """

    def __init__(
        self,
        cell_count: int = CELL_COUNT,
        snake: Optional[Snake] = None,
        rng: Optional[random.Random] = None,
    ):
        if snake is None and any(x >= cell_count or y >= cell_count for x, y in START_BODY):
            raise ValueError(
                f"A {cell_count}x{cell_count} grid can't hold the start body {list(START_BODY)}"
            )
        self.cell_count = cell_count
        self.snake = snake or Snake()
        self.food = Food(self.snake.body, cell_count=cell_count, rng=rng)
        self.running = True
        self.won = False
        self.score = 0
        self.high_score = 0
        self.tick_count = 0
        self.games_played = 0

    @property
    def state(self) -> str:
        if self.won:
            return WON
        return RUNNING if self.running else STOPPED

    def update(self):
        """
        Execute one tick:
          1) Advance the snake
          2) Eat food (grow + score + relocate)
          3) Check self collision
          4) Check wall collision
        """
        if not self.running:
            return

        self.snake.advance()
        self.tick_count += 1

        self.check_collision_food()
        if not self.running:
            return
        if self.check_collision_body() or self.check_collision_edge():
            return

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %d\n%s", self.tick_count, self.get_renderable_state().print_board())

    def check_collision_food(self) -> bool:
        if self.snake.head != self.food.pos:
            return False

        self.snake.grow()
        self.score += 1
        self.high_score = max(self.high_score, self.score)
        try:
            self.food.relocate(self.snake.body)
        except GridFullError:
            self.win()
        return True

    def check_collision_body(self) -> bool:
        if self.snake.hits_itself():
            self.game_over("self")
            return True
        return False

    def check_collision_edge(self) -> bool:
        x, y = self.snake.head
        if x < 0 or x >= self.cell_count or y < 0 or y >= self.cell_count:
            self.game_over("wall")
            return True
        return False

    def change_direction(self, move: str) -> bool:
        """
        Request a turn. Reversals are ignored; an accepted turn also resumes
        a stopped game.
        """
        if self.won:
            return False
        if not self.snake.turn(move):
            return False
        self.running = True
        return True

    def game_over(self, reason: str):
        logger.info(
            "Game over (%s) after %d ticks with score %d", reason, self.tick_count, self.score
        )
        self.games_played += 1
        self.snake.reset()
        self.food.relocate(self.snake.body)
        self.running = False
        self.score = 0

    def win(self):
        logger.info("Grid filled with score %d, game won", self.score)
        self.won = True
        self.running = False

    def restart(self):
        """Start a fresh game, clearing a win as well."""
        self.snake.reset()
        self.food.relocate(self.snake.body)
        self.score = 0
        self.won = False
        self.running = True

    def get_renderable_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake_cells=list(self.snake.body),
            direction=self.snake.direction,
            heading=self.snake.heading,
            food=self.food.pos,
            score=self.score,
            width=self.cell_count,
            height=self.cell_count,
            running=self.running,
            won=self.won,
            high_score=self.high_score,
            tick_count=self.tick_count,
            state=self.state,
        )
