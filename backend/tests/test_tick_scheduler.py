"""
Tests for services/tick_scheduler.py.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.tick_scheduler import FakeClock, TickScheduler


def test_first_poll_fires_immediately():
    scheduler = TickScheduler(interval=0.2, clock=lambda: 100.0)
    assert scheduler.should_tick() is True
    assert scheduler.last_update_time == 100.0


def test_fires_once_per_interval():
    clock = FakeClock()
    scheduler = TickScheduler(interval=0.25, clock=clock, start_time=0.0)

    clock.now = 0.125
    assert scheduler.should_tick() is False
    clock.now = 0.25
    assert scheduler.should_tick() is True
    assert scheduler.should_tick() is False
    clock.now = 0.375
    assert scheduler.should_tick() is False
    clock.now = 0.5
    assert scheduler.should_tick() is True
    assert scheduler.ticks == 2


def test_late_frame_fires_once_and_restarts_interval():
    """A long frame produces a single tick, measured from the late poll."""
    clock = FakeClock()
    scheduler = TickScheduler(interval=0.25, clock=clock, start_time=0.0)

    clock.now = 1.0
    assert scheduler.should_tick() is True
    assert scheduler.should_tick() is False
    clock.now = 1.125
    assert scheduler.should_tick() is False
    clock.now = 1.25
    assert scheduler.should_tick() is True


def test_elapsed_since_last_tick():
    clock = FakeClock(10.0)
    scheduler = TickScheduler(interval=0.25, clock=clock, start_time=10.0)
    clock.advance(0.5)
    assert scheduler.elapsed_since_last_tick() == 0.5


def test_reset_restarts_from_now():
    clock = FakeClock(3.0)
    scheduler = TickScheduler(interval=0.25, clock=clock)
    scheduler.should_tick()
    scheduler.reset()
    assert scheduler.last_update_time == 3.0
    assert scheduler.ticks == 0
    assert scheduler.should_tick() is False


@pytest.mark.parametrize("interval", [0, -0.2])
def test_invalid_interval_raises(interval):
    with pytest.raises(ValueError):
        TickScheduler(interval=interval)


def test_fake_clock_advances():
    clock = FakeClock()
    assert clock() == 0.0
    assert clock.advance(0.5) == 0.5
    assert clock() == 0.5
