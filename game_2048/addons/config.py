# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass

from .exceptions import ConfigurationError

# ##>: Tile value that wins the game.
WINNING_TILE = 2048


@dataclass
class GameConfiguration:
    """
    Parameters of one game session.

    Attributes
    ----------
    rows : int
        Number of rows of the grid.
    cols : int
        Number of columns of the grid.
    target : int
        Tile value that triggers the win report.
    seed : int, optional
        Seed of the random generator, for reproducible games.
    """

    rows: int = 4
    cols: int = 4
    target: int = WINNING_TILE
    seed: int | None = None

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError(f'Grid dimensions must be positive, got {self.rows}x{self.cols}')

        # ##: Two distinct seed tiles need at least two cells.
        if self.rows * self.cols < 2:
            raise ConfigurationError(f'A {self.rows}x{self.cols} grid cannot hold the two starting tiles')

        if self.target <= 2 or self.target & (self.target - 1):
            raise ConfigurationError(f'Target must be a power of two greater than 2, got {self.target}')
