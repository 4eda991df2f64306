# -*- coding: utf-8 -*-
"""
Input sources that do not need a keyboard.
"""
from collections.abc import Iterable

from numpy.random import Generator, default_rng

from game_2048.addons.types import Answer, Command

# ##: Directional commands only, a random player never quits.
_MOVES = [Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT]


class ScriptedInput:
    """
    Replay a fixed sequence of commands and answers.

    Parameters
    ----------
    commands : Iterable[Command]
        Commands returned by successive ``read_command`` calls.
    answers : Iterable[Answer], optional
        Answers returned by successive ``read_answer`` calls.

    Raises
    ------
    RuntimeError
        When the script runs out of commands or answers.
    """

    def __init__(self, commands: Iterable[Command], answers: Iterable[Answer] = ()):
        self._commands = iter(commands)
        self._answers = iter(answers)

    def read_command(self) -> Command:
        try:
            return next(self._commands)
        except StopIteration as error:
            raise RuntimeError('No scripted command left') from error

    def read_answer(self) -> Answer:
        try:
            return next(self._answers)
        except StopIteration as error:
            raise RuntimeError('No scripted answer left') from error


class RandomInput:
    """
    Play uniformly random directions.

    Parameters
    ----------
    rng : Generator, optional
        Random generator (default is a fresh ``default_rng()``).
    """

    def __init__(self, rng: Generator | None = None):
        self._rng = rng if rng is not None else default_rng()

    def read_command(self) -> Command:
        return _MOVES[self._rng.integers(len(_MOVES))]

    def read_answer(self) -> Answer:
        """Always keep playing."""
        return Answer.NO
