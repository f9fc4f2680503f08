"""
Registry for direction controls.

Maps control keys (e.g. 'random', 'keys') to control classes so the
headless runner can pick one by name.
"""

from typing import Dict, Optional, Type

from .base import Control


def _get_random_control() -> Type[Control]:
    from .random_control import RandomControl
    return RandomControl


def _get_held_keys_control() -> Type[Control]:
    from .held_keys import HeldKeysControl
    return HeldKeysControl


def _get_scripted_control() -> Type[Control]:
    from .scripted_control import ScriptedControl
    return ScriptedControl


# Registry: maps control key -> callable that returns the control class
CONTROL_LOADERS: Dict[str, callable] = {
    "random": _get_random_control,
    "keys": _get_held_keys_control,
    "scripted": _get_scripted_control,
}

AVAILABLE_CONTROLS = list(CONTROL_LOADERS.keys())


def get_control_class(key: Optional[str] = None) -> Type[Control]:
    """
    Get the control class for a given key.

    Args:
        key: One of 'random', 'keys', 'scripted'. If None or empty, returns 'random'.

    Returns:
        The control class (subclass of Control).

    Raises:
        ValueError: If key is not recognized.
    """
    if not key or key.strip() == "":
        key = "random"

    key = key.strip()

    if key not in CONTROL_LOADERS:
        available = ", ".join(AVAILABLE_CONTROLS)
        raise ValueError(
            f"Unknown control '{key}'. Available controls: {available}"
        )

    return CONTROL_LOADERS[key]()


def list_controls() -> list:
    """
    Return metadata about all available controls.

    Returns:
        List of dicts with 'key' and 'description' for each control.
    """
    return [
        {"key": "random", "description": "Autopilot picking random moves that avoid walls and the body"},
        {"key": "keys", "description": "Four held arrow keys polled right, left, up, down"},
        {"key": "scripted", "description": "Replays a fixed list of moves, one per frame"},
    ]
