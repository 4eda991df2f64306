# -*- coding: utf-8 -*-
"""
Set of types shared by the engine, the turn controller and the front ends.
"""
from dataclasses import dataclass
from enum import Enum

from numpy import ndarray


class Direction(Enum):
    """Direction in which every tile of the board slides."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


class Command(Enum):
    """One command read from the player during a turn."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    QUIT = 'quit'
    UNRECOGNIZED = 'unrecognized'

    @property
    def direction(self) -> Direction | None:
        """
        Direction carried by the command.

        Returns
        -------
        Direction | None
            The matching direction, or None for ``QUIT`` and ``UNRECOGNIZED``.
        """
        try:
            return Direction(self.value)
        except ValueError:
            return None


class Answer(Enum):
    """Answer to the exit confirmation prompt."""

    YES = 'yes'
    NO = 'no'


class Status(str, Enum):
    """
    Outcome of one turn.

    ONGOING: the move was applied and a new tile was spawned.
    INVALID_MOVE: the command did not change the board; nothing happened.
    INTERRUPTED: the player quit; this is the only terminal state.
    LOST: no move can change the board.
    WON: a tile reached the target value for the first time.
    """

    ONGOING = 'ongoing'
    INVALID_MOVE = 'invalid_move'
    INTERRUPTED = 'interrupted'
    LOST = 'lost'
    WON = 'won'


@dataclass(frozen=True, eq=False)
class Snapshot:
    """What a renderer needs to draw one frame."""

    grid: ndarray
    score: int
    status: Status
