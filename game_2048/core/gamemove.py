"""
Move legality for the 2048 game, providing the legal and illegal directions of a grid and the loss check.
"""

from numpy import ndarray

from game_2048.addons.types import Direction
from game_2048.core.gameboard import grids_equal, move


def legal_actions(grid: ndarray) -> list[Direction]:
    """
    Determine legal directions for the current grid.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    list[Direction]
        Directions whose move changes the grid.
    """
    return [direction for direction in Direction if not grids_equal(grid, move(grid, direction))]


def illegal_actions(grid: ndarray) -> list[Direction]:
    """
    Determine illegal directions for the current grid.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    list[Direction]
        Directions whose move leaves the grid unchanged.
    """
    legal = legal_actions(grid)
    return [direction for direction in Direction if direction not in legal]


def is_done(grid: ndarray) -> bool:
    """
    Check if the game is lost.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    bool
        True if no direction changes the grid, False otherwise.

    Notes
    -----
    The grid is saturated: no empty cell that a tile could slide into, and no adjacent equal tiles in any row or
    column.
    """
    return not legal_actions(grid)
