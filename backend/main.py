"""
Headless game loop for the Snake core.

`run_frame` is what a windowed front end calls once per rendered frame:
tick the game if the scheduler says a tick is due, then feed the frame's
direction input. `run_simulation` drives the same loop against a fake
clock with no window at all.
"""

import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from config import GameSettings, load_settings
from controls import AVAILABLE_CONTROLS, Control, get_control_class
from controls.random_control import RandomControl
from controls.scripted_control import ScriptedControl
from domain.game import SnakeGame
from domain.game_state import GameState
from services.tick_scheduler import FakeClock, TickScheduler

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60


def run_frame(game: SnakeGame, scheduler: TickScheduler, control: Control) -> GameState:
    """
    Execute one frame:
      1) Tick the game if the tick interval has elapsed
      2) Poll the control and offer each requested direction to the game
      3) Return the state the renderer should draw
    """
    if scheduler.should_tick():
        game.update()

    state = game.get_renderable_state()
    for move in control.poll_directions(state):
        game.change_direction(move)

    return game.get_renderable_state()


def build_control(key: Optional[str], seed: Optional[int] = None,
                  moves: Optional[List[Optional[str]]] = None) -> Control:
    control_class = get_control_class(key)
    if control_class is RandomControl:
        return RandomControl(rng=random.Random(seed))
    if control_class is ScriptedControl:
        return ScriptedControl(moves or [])
    return control_class()


def run_simulation(settings: GameSettings, control: Control, frames: int,
                   fps: int = DEFAULT_FPS, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Runs a headless game for a number of frames.

    Args:
        settings: grid size, tick interval and the cell layout used for
            the pixel rectangles in the summary
        control: direction input polled every frame
        frames: number of frames to simulate
        fps: simulated frame rate; the clock advances 1/fps per frame
        seed: seed for food placement

    Returns:
        A dictionary summarizing the run.
    """
    clock = FakeClock()
    scheduler = TickScheduler(interval=settings.tick_interval, clock=clock)
    game = SnakeGame(cell_count=settings.cell_count, rng=random.Random(seed))

    state = game.get_renderable_state()
    for _ in range(frames):
        clock.advance(1.0 / fps)
        state = run_frame(game, scheduler, control)
        if game.won:
            break

    logger.info(
        "Simulated %.1fs: %d ticks, score %d, high score %d, %d game(s) over",
        clock(), game.tick_count, game.score, game.high_score, game.games_played,
    )

    return {
        "ticks": game.tick_count,
        "state": state.state,
        "score": state.score,
        "high_score": state.high_score,
        "games_over": game.games_played,
        "length": len(state.snake_cells),
        "head_rect": list(GameState.to_screen_rect(state.head, settings.cell_size, settings.border_width)),
        "food_rect": list(GameState.to_screen_rect(state.food, settings.cell_size, settings.border_width)),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Snake game with an automatic control."
    )
    parser.add_argument("--control", type=str, default="random", choices=AVAILABLE_CONTROLS,
                        help="Control driving the snake")
    parser.add_argument("--frames", type=int, default=DEFAULT_FPS * 60,
                        help="Number of frames to simulate")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS,
                        help="Simulated frames per second")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--moves", type=str, default="",
                        help="Comma-separated moves for the scripted control (e.g. 'UP,,LEFT')")

    args = parser.parse_args()

    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Invalid settings: {e}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    moves = [m.strip().upper() or None for m in args.moves.split(",")] if args.moves else []
    try:
        control = build_control(args.control, seed=args.seed, moves=moves)
    except ValueError as e:
        raise SystemExit(str(e))

    result = run_simulation(settings, control, frames=args.frames, fps=args.fps, seed=args.seed)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
