"""
Shot Assist - Arcade mini-game shot automation.

This package locates the ball inside a captured screen region, drives the
pointer to aim and strike it, and watches the strike zone for the hit flash.
"""

__version__ = "1.0.0"
__author__ = "Your Name"

from shot_assist.config.game_config import GameConfig
from shot_assist.errors import ShotAssistError, CaptureError, InsufficientData, DegenerateVector, InputError

__all__ = [
    "GameConfig",
    "ShotAssistError",
    "CaptureError",
    "InsufficientData",
    "DegenerateVector",
    "InputError",
]
