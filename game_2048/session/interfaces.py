# -*- coding: utf-8 -*-
"""
Boundaries between the turn controller and the front end.
"""
from typing import Protocol

from game_2048.addons.types import Answer, Command, Snapshot


class InputSource(Protocol):
    """Where the player's commands come from."""

    def read_command(self) -> Command:
        """Block until the player issues one command."""
        ...

    def read_answer(self) -> Answer:
        """Block until the player answers the exit confirmation prompt."""
        ...


class RenderSink(Protocol):
    """Where the game frames are drawn."""

    def render(self, snapshot: Snapshot) -> None:
        """Draw the grid, score and status of the snapshot."""
        ...
