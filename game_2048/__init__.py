# -*- coding: utf-8 -*-
"""
Terminal implementation of the 2048 sliding-tile game.

This package provides the grid engine (`game_2048.core`), the turn controller (`game_2048.session`) and a curses
front end (`game_2048.utils`).
"""

from .addons import ConfigurationError, Direction, GameConfiguration, MalformedGrid, Status
from .session import TurnController

__all__ = ["ConfigurationError", "Direction", "GameConfiguration", "MalformedGrid", "Status", "TurnController"]
