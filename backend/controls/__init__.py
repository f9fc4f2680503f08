"""
Direction controls for the Snake game loop.

This module contains the input abstraction polled once per frame and
its implementations (held keys, autopilot, scripted replay).
"""

from .base import Control
from .held_keys import HeldKeysControl
from .random_control import RandomControl
from .scripted_control import ScriptedControl
from .registry import get_control_class, list_controls, AVAILABLE_CONTROLS

__all__ = [
    'Control',
    'HeldKeysControl',
    'RandomControl',
    'ScriptedControl',
    'get_control_class',
    'list_controls',
    'AVAILABLE_CONTROLS',
]
