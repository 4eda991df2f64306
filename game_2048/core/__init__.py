# -*- coding: utf-8 -*-
"""
This module provides the grid engine of the 2048 game.

It includes functions for sliding and merging rows, moving a whole grid in any direction through transposition and
mirroring, comparing grids, enumerating empty cells, spawning tiles and checking whether the game is lost.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    as_grid,
    empty_cells,
    grids_equal,
    has_reached,
    latent_state,
    max_tile,
    mirror,
    move,
    random_tile_value,
    slide_and_merge_row,
    spawn,
    transpose,
)
from .gamemove import illegal_actions, is_done, legal_actions

__all__ = [
    "TILE_SPAWN_PROBS",
    "as_grid",
    "empty_cells",
    "grids_equal",
    "has_reached",
    "latent_state",
    "max_tile",
    "mirror",
    "move",
    "random_tile_value",
    "slide_and_merge_row",
    "spawn",
    "transpose",
    "legal_actions",
    "illegal_actions",
    "is_done",
]
