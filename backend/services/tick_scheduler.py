"""
Poll-based tick timer.

The game loop asks the scheduler once per rendered frame whether enough
time has passed for another logic tick. The scheduler owns the time of the
last tick instead of keeping it in a module-level global.
"""

import logging
import time
from typing import Callable, Optional

from domain.constants import TICK_INTERVAL

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Fires at most once per `interval` seconds of the supplied clock.

    Args:
        interval: seconds between ticks
        clock: monotonic clock returning seconds as a float
        start_time: time of the "previous" tick; defaults to 0.0 so the
            first poll after startup fires straight away
    """

    def __init__(
        self,
        interval: float = TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        start_time: Optional[float] = None,
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.clock = clock
        self.last_update_time = 0.0 if start_time is None else start_time
        self.ticks = 0

    def elapsed_since_last_tick(self) -> float:
        return self.clock() - self.last_update_time

    def should_tick(self) -> bool:
        """Return True (and record the time) if a tick is due."""
        now = self.clock()
        if now - self.last_update_time >= self.interval:
            self.last_update_time = now
            self.ticks += 1
            return True
        return False

    def reset(self):
        self.last_update_time = self.clock()
        self.ticks = 0


class FakeClock:
    """Manually advanced clock for headless runs and tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now
