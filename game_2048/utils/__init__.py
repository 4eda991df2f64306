# -*- coding: utf-8 -*-
"""
This module provides the terminal front end of the game: a curses renderer and keyboard input source.
"""

from .terminal import TerminalBoard, answer_from_key, cell_text, color_level, command_from_key

__all__ = ["TerminalBoard", "answer_from_key", "cell_text", "color_level", "command_from_key"]
