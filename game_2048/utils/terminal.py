# -*- coding: utf-8 -*-
"""
Terminal User Interface for the 2048 Game

This module draws the game board in a terminal with curses and reads the player's keys. It is both the render sink and
the input source of an interactive session: tiles are coloured by the base-2 logarithm of their value, the score sits
in the title bar, and the arrow keys move the tiles.
"""
import curses
from math import log2

from game_2048.addons.types import Answer, Command, Snapshot, Status

# ##: 256-colour background of each tile, indexed by log2 of its value.
PALETTE = [0, 247, 78, 222, 220, 214, 208, 202, 196, 162, 160, 126, 90, 88, 54, 52]

# ##: Cell size in characters.
CELL_WIDTH = 7
CELL_HEIGHT = 3

TITLE = "2048"
FOOTER = "    [ ← ↑ → ↓ ], q for quit"

MESSAGES = {
    Status.WON: ("Congratulations! You won!", "Do you want to stop playing now? (y/n)"),
    Status.LOST: ("Game over!", "Do you want to quit? (y/n)"),
}

KEYS = {
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
}


def command_from_key(key: int) -> Command:
    """
    Translate a key code into a turn command.

    Parameters
    ----------
    key : int
        Key code returned by ``getch``.

    Returns
    -------
    Command
        The matching command, ``UNRECOGNIZED`` for any other key.
    """
    return KEYS.get(key, Command.UNRECOGNIZED)


def answer_from_key(key: int) -> Answer:
    """
    Translate a key code into an answer to the exit prompt.

    Only ``n`` and ``N`` keep the game going; any other key, ``y`` included, confirms the exit.
    """
    if key in (ord("n"), ord("N")):
        return Answer.NO
    return Answer.YES


def color_level(value: int) -> int:
    """
    Colour index of a tile.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.

    Returns
    -------
    int
        ``log2(value)`` clamped to the palette, 0 for an empty cell.
    """
    if value <= 0:
        return 0
    return min(int(log2(value)), len(PALETTE) - 1)


def cell_text(value: int) -> str:
    """Centered label of a cell, a dot for an empty one."""
    label = "." if value == 0 else str(value)
    return label.center(CELL_WIDTH)


class TerminalBoard:
    """
    Render the 2048 game in a curses window and read the player's keys.

    Parameters
    ----------
    screen : curses.window
        The window to draw into, usually the one given by ``curses.wrapper``.
    """

    def __init__(self, screen):
        self.screen = screen
        self.screen.keypad(True)
        self._colors = self._setup_colors()

        try:
            curses.curs_set(0)
        except curses.error:
            # ##: Not every terminal can hide the cursor.
            pass

    @staticmethod
    def _setup_colors() -> bool:
        """
        Register one colour pair per palette entry.

        Returns
        -------
        bool
            True if the terminal can show the palette, False to draw in monochrome.
        """
        if not curses.has_colors():
            return False

        curses.start_color()
        if curses.COLORS < 256:
            return False

        curses.use_default_colors()
        for level, background in enumerate(PALETTE):
            curses.init_pair(level + 1, curses.COLOR_BLACK if level else -1, background)
        return True

    def _attribute(self, value: int) -> int:
        if not self._colors:
            return curses.A_BOLD if value else curses.A_NORMAL
        return curses.color_pair(color_level(value) + 1) | curses.A_BOLD

    def _put(self, y: int, x: int, text: str, attribute: int = curses.A_NORMAL):
        try:
            self.screen.addstr(y, x, text, attribute)
        except curses.error:
            # ##: Text beyond the window is clipped.
            pass

    def render(self, snapshot: Snapshot) -> None:
        """
        Draw the title bar, the grid, the footer and the status message.

        Parameters
        ----------
        snapshot : Snapshot
            The frame to draw.
        """
        rows, cols = snapshot.grid.shape
        width = cols * CELL_WIDTH

        self.screen.erase()
        score = str(snapshot.score)
        self._put(0, 0, TITLE + score.rjust(max(width - len(TITLE), len(score) + 1)))

        for r, row in enumerate(snapshot.grid.tolist()):
            for c, value in enumerate(row):
                attribute = self._attribute(value)
                top = 1 + r * CELL_HEIGHT
                for line in range(CELL_HEIGHT):
                    text = cell_text(value) if line == CELL_HEIGHT // 2 else " " * CELL_WIDTH
                    self._put(top + line, c * CELL_WIDTH, text, attribute)

        bottom = 1 + rows * CELL_HEIGHT
        self._put(bottom, 0, FOOTER)
        for offset, message in enumerate(MESSAGES.get(snapshot.status, ())):
            self._put(bottom + 2 + offset, 0, message)

        self.screen.refresh()

    def read_command(self) -> Command:
        """Block until a key is pressed and translate it into a command."""
        return command_from_key(self.screen.getch())

    def read_answer(self) -> Answer:
        """Block until a key is pressed and translate it into an answer."""
        return answer_from_key(self.screen.getch())
