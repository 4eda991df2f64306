# -*- coding: utf-8 -*-
"""
Evaluate a random player over many games.
"""
import logging
from collections import Counter
from typing import Dict

import numpy as np
from numpy.random import default_rng
from tqdm import trange

from game_2048.addons import GameConfiguration
from game_2048.session import RandomInput, TurnController, play_headless

logger = logging.getLogger(__name__)


def evaluate(length: int = 10, config: GameConfiguration | None = None) -> tuple[Dict[int, int], float]:
    """
    Play games with a random player.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    config : GameConfiguration, optional
        The game configuration, its seed makes the whole evaluation reproducible.

    Returns
    -------
    tuple[Dict[int, int], float]
        Frequency of each maximum tile, and the mean score.
    """
    config = config if config is not None else GameConfiguration()
    rng = default_rng(config.seed)
    max_tiles, scores = [], []

    with trange(length) as period:
        for num in period:
            controller = TurnController(inputs=RandomInput(rng), config=config, rng=rng)
            score, tile = play_headless(controller)
            max_tiles.append(tile)
            scores.append(score)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=score, max=tile)

    logger.info("Played %d games, best tile %d", length, max(max_tiles, default=0))
    return dict(Counter(max_tiles)), float(np.mean(scores)) if scores else 0.0


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--rows", type=int, default=4)
    parser.add_argument("--cols", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    frequency, mean_score = evaluate(
        length=args.games, config=GameConfiguration(rows=args.rows, cols=args.cols, seed=args.seed)
    )
    print(f"Random player, max tiles: {dict(sorted(frequency.items()))}, mean score: {mean_score:.1f}")
