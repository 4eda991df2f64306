# -*- coding: utf-8 -*-
"""
Turn controller of the 2048 game, its input and output boundaries, and the loops that drive it.
"""

from .controller import TurnController
from .inputs import RandomInput, ScriptedInput
from .interfaces import InputSource, RenderSink
from .runner import play_headless, run

__all__ = ["TurnController", "RandomInput", "ScriptedInput", "InputSource", "RenderSink", "play_headless", "run"]
