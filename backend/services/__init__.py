"""
Services supporting the game loop (timing).
"""

from .tick_scheduler import TickScheduler, FakeClock

__all__ = ['TickScheduler', 'FakeClock']
