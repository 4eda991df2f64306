"""
Turn controller of the 2048 game.

The controller owns the grid between turns, the score, the win latch and the random generator. Each call to
``play`` sequences the player's move and, when the move was valid, the computer's tile.
"""

import logging

from numpy import int64, ndarray, zeros
from numpy.random import Generator, default_rng

from game_2048.addons.config import GameConfiguration
from game_2048.addons.types import Answer, Command, Snapshot, Status
from game_2048.core.gameboard import as_grid, grids_equal, has_reached, latent_state, random_tile_value, spawn
from game_2048.core.gamemove import is_done
from game_2048.session.interfaces import InputSource

logger = logging.getLogger(__name__)

# ##>: Value of the two tiles placed at the start of a game.
SEED_TILE = 2


class TurnController:
    """
    Sequence the turns of one game session.

    Parameters
    ----------
    inputs : InputSource
        Source of the player's commands and answers.
    config : GameConfiguration, optional
        Parameters of the session (default is a 4x4 grid with a 2048 target).
    rng : Generator, optional
        Random generator for tile placement. Built from ``config.seed`` when omitted.
    """

    def __init__(self, inputs: InputSource, config: GameConfiguration | None = None, rng: Generator | None = None):
        self.config = config if config is not None else GameConfiguration()
        self._inputs = inputs
        self._rng = rng if rng is not None else default_rng(self.config.seed)

        self.score = 0
        self.turns = 0
        self.won_acknowledged = False

    def initialize(self, rows: int | None = None, cols: int | None = None) -> ndarray:
        """
        Build an empty grid and place two starting tiles.

        Parameters
        ----------
        rows : int, optional
            Number of rows (default is ``config.rows``).
        cols : int, optional
            Number of columns (default is ``config.cols``).

        Returns
        -------
        ndarray
            The new grid, holding two tiles of value 2 on distinct cells.

        Raises
        ------
        ConfigurationError
            If the dimensions are not positive or the grid has fewer than two cells.
        """
        rows = self.config.rows if rows is None else rows
        cols = self.config.cols if cols is None else cols

        # ##: Reuse the configuration checks for the requested dimensions.
        GameConfiguration(rows=rows, cols=cols, target=self.config.target)

        grid = zeros(shape=(rows, cols), dtype=int64)
        for _ in range(2):
            spawn(grid, SEED_TILE, self._rng)

        logger.info('New %dx%d game, target %d', rows, cols, self.config.target)
        return grid

    def play(self, grid: ndarray) -> Status:
        """
        Run one turn.

        Parameters
        ----------
        grid : ndarray
            The current grid. **Modified in-place** when the move is valid.

        Returns
        -------
        Status
            The outcome of the turn.

        Notes
        -----
        - A saturated grid is reported as ``LOST`` before any input is read.
        - A command that does not change the grid is an ``INVALID_MOVE``: no score, no new tile.
        - The first time a tile reaches the target the turn is ``WON`` and no computer tile is added.

        Raises
        ------
        MalformedGrid
            If the grid is empty, ragged or holds negative values.
        TypeError
            If the grid is not an ``int64`` array, since it could not be updated in place.
        """
        if as_grid(grid) is not grid:
            raise TypeError('play updates the grid in place and needs an int64 ndarray')

        if is_done(grid):
            logger.info('Game lost with score %d after %d turns', self.score, self.turns)
            return Status.LOST

        command = self._inputs.read_command()
        if command is Command.QUIT:
            logger.info('Game interrupted with score %d', self.score)
            return Status.INTERRUPTED

        direction = command.direction
        if direction is None:
            return Status.INVALID_MOVE

        candidate, points = latent_state(grid, direction)
        if grids_equal(grid, candidate):
            return Status.INVALID_MOVE

        grid[...] = candidate
        self.score += points
        self.turns += 1
        logger.debug('Turn %d: %s for %d points', self.turns, direction.value, points)

        if self.won(grid):
            logger.info('Target %d reached with score %d', self.config.target, self.score)
            return Status.WON

        self._computer_play(grid)
        return Status.ONGOING

    def won(self, grid: ndarray) -> bool:
        """
        Check the win condition, at most once per session.

        Parameters
        ----------
        grid : ndarray
            The current grid.

        Returns
        -------
        bool
            True the first time a tile reaches the target, False ever after.
        """
        if self.won_acknowledged:
            return False

        if has_reached(grid, self.config.target):
            self.won_acknowledged = True
            return True
        return False

    def prompt_for_exit(self) -> Status:
        """
        Ask the player whether to stop playing.

        Returns
        -------
        Status
            ``ONGOING`` if the player answered no, ``INTERRUPTED`` otherwise.
        """
        answer = self._inputs.read_answer()
        if answer is Answer.NO:
            return Status.ONGOING
        return Status.INTERRUPTED

    def snapshot(self, grid: ndarray, status: Status) -> Snapshot:
        """Freeze the grid, score and status for a renderer."""
        frozen = grid.copy()
        frozen.flags.writeable = False
        return Snapshot(grid=frozen, score=self.score, status=status)

    def _computer_play(self, grid: ndarray) -> None:
        value = random_tile_value(self._rng)
        if spawn(grid, value, self._rng):
            logger.debug('Spawned a %d', value)
