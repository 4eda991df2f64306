# -*- coding: utf-8 -*-
"""
Configuration, errors and shared types of the game.
"""

from .config import WINNING_TILE, GameConfiguration
from .exceptions import ConfigurationError, MalformedGrid
from .types import Answer, Command, Direction, Snapshot, Status

__all__ = [
    "WINNING_TILE",
    "GameConfiguration",
    "ConfigurationError",
    "MalformedGrid",
    "Answer",
    "Command",
    "Direction",
    "Snapshot",
    "Status",
]
