"""
Game loops driving a turn controller.
"""

import logging

from game_2048.addons.types import Status
from game_2048.core.gameboard import max_tile
from game_2048.session.controller import TurnController
from game_2048.session.interfaces import RenderSink

logger = logging.getLogger(__name__)

# ##: Statuses after which the player is asked whether to stop.
_CONFIRMED = (Status.WON, Status.LOST)


def run(controller: TurnController, sink: RenderSink, rows: int | None = None, cols: int | None = None) -> Status:
    """
    Play an interactive game until the player quits.

    Parameters
    ----------
    controller : TurnController
        Controller of the session.
    sink : RenderSink
        Renderer receiving a snapshot before every turn and on every win or loss.
    rows : int, optional
        Number of rows (default is the controller's configuration).
    cols : int, optional
        Number of columns (default is the controller's configuration).

    Returns
    -------
    Status
        Always ``INTERRUPTED``, the only terminal state.
    """
    grid = controller.initialize(rows, cols)
    status = Status.ONGOING

    while status in (Status.ONGOING, Status.INVALID_MOVE):
        sink.render(controller.snapshot(grid, status))
        status = controller.play(grid)

        if status in _CONFIRMED:
            sink.render(controller.snapshot(grid, status))
            status = controller.prompt_for_exit()

    logger.info('Session over: score %d, max tile %d', controller.score, max_tile(grid))
    return status


def play_headless(
    controller: TurnController, rows: int | None = None, cols: int | None = None, max_turns: int | None = None
) -> tuple[int, int]:
    """
    Play a game without rendering, until it is lost or interrupted.

    A win does not stop the game.

    Parameters
    ----------
    controller : TurnController
        Controller of the session.
    rows : int, optional
        Number of rows (default is the controller's configuration).
    cols : int, optional
        Number of columns (default is the controller's configuration).
    max_turns : int, optional
        Stop after this many committed moves.

    Returns
    -------
    tuple[int, int]
        The final score and the largest tile.
    """
    grid = controller.initialize(rows, cols)

    while max_turns is None or controller.turns < max_turns:
        status = controller.play(grid)
        if status in (Status.LOST, Status.INTERRUPTED):
            break

    return controller.score, max_tile(grid)
