"""
Runtime settings for the Snake core, read from the environment.

A `.env` file next to the working directory is loaded first, so local
overrides don't need to be exported by hand:

    SNAKE_CELL_COUNT=25
    SNAKE_CELL_SIZE=30
    SNAKE_BORDER_WIDTH=75
    SNAKE_TICK_INTERVAL=0.2
    SNAKE_LOG_LEVEL=INFO
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from domain.constants import BORDER_WIDTH, CELL_COUNT, CELL_SIZE, TICK_INTERVAL

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class GameSettings:
    """
    cell_size and border_width only describe screen layout; the game rules
    never read them. The headless runner uses them for the pixel rectangles
    in its summary.
    """

    cell_count: int = CELL_COUNT
    cell_size: int = CELL_SIZE
    border_width: int = BORDER_WIDTH
    tick_interval: float = TICK_INTERVAL
    log_level: str = "INFO"

    @property
    def screen_size(self) -> int:
        """Width (and height) of the window including the border on both sides."""
        return 2 * self.border_width + self.cell_size * self.cell_count


def _read_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(load_env_file: bool = True) -> GameSettings:
    """
    Build GameSettings from SNAKE_* environment variables.

    Raises:
        ValueError: if a variable is set to something unusable.
    """
    if load_env_file:
        load_dotenv()

    log_level = (os.getenv("SNAKE_LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(f"SNAKE_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got '{log_level}'")

    return GameSettings(
        # The starting body sits at x=4..6, y=9
        cell_count=_read_int("SNAKE_CELL_COUNT", CELL_COUNT, minimum=10),
        cell_size=_read_int("SNAKE_CELL_SIZE", CELL_SIZE, minimum=1),
        border_width=_read_int("SNAKE_BORDER_WIDTH", BORDER_WIDTH, minimum=0),
        tick_interval=_read_float("SNAKE_TICK_INTERVAL", TICK_INTERVAL),
        log_level=log_level,
    )
