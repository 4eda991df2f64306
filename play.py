# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
import curses
import logging
import sys
from argparse import ArgumentParser, Namespace

from game_2048.addons import ConfigurationError, GameConfiguration, MalformedGrid
from game_2048.session import TurnController, run
from game_2048.utils import TerminalBoard

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> Namespace:
    """
    Parse the command line.

    Parameters
    ----------
    argv: list[str], optional
        Arguments to parse (default is ``sys.argv[1:]``)

    Returns
    -------
    Namespace
        Parsed arguments, with the game configuration under ``config``
    """
    parser = ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--rows", type=int, default=4)
    parser.add_argument("--cols", type=int, default=4)
    parser.add_argument("--target", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    try:
        args.config = GameConfiguration(rows=args.rows, cols=args.cols, target=args.target, seed=args.seed)
    except ConfigurationError as error:
        parser.error(str(error))
    return args


def setup_logging(log_file: str | None, level: str):
    """
    Configure logging.

    Parameters
    ----------
    log_file: str, optional
        File receiving the logs. Without it nothing is logged, since curses owns the terminal.

    level: str
        Logging level name
    """
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file, level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def session(screen, config: GameConfiguration):
    """
    Play one game in a curses window.

    Parameters
    ----------
    screen: curses.window
        Window given by ``curses.wrapper``

    config: GameConfiguration
        Game configuration
    """
    board = TerminalBoard(screen)
    controller = TurnController(inputs=board, config=config)
    return run(controller, board)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point of the terminal game.

    Returns
    -------
    int
        0 when the player quits, 1 on an internal error
    """
    args = parse_arguments(argv)
    setup_logging(args.log_file, args.log_level)

    try:
        curses.wrapper(session, args.config)
    except KeyboardInterrupt:
        logger.info("Game interrupted from the keyboard")
    except MalformedGrid:
        logger.exception("Malformed grid, aborting")
        print("Internal error: malformed grid", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
