# -*- coding: utf-8 -*-
"""
Errors raised by the game engine.
"""


class MalformedGrid(ValueError):
    """A grid is empty, ragged, not two-dimensional or holds negative values."""


class ConfigurationError(ValueError):
    """A game cannot be set up with the requested parameters."""
