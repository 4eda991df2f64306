"""
Grid engine of the 2048 game: sliding, merging, orientation and tile spawning.
"""

from collections.abc import Iterator

from numpy import argwhere, array_equal, asarray, int64, ndarray, zeros_like
from numpy.random import Generator

from game_2048.addons.exceptions import MalformedGrid
from game_2048.addons.types import Direction

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: (transpose, mirror) bringing each direction to a slide towards the right.
_ORIENTATIONS: dict[Direction, tuple[bool, bool]] = {
    Direction.RIGHT: (False, False),
    Direction.LEFT: (False, True),
    Direction.DOWN: (True, False),
    Direction.UP: (True, True),
}


def as_grid(data) -> ndarray:
    """
    Coerce data into a well-formed game grid.

    Parameters
    ----------
    data : array_like
        A 2D array, or a list of rows.

    Returns
    -------
    ndarray
        The grid as a 2D ``int64`` array. An ``int64`` array is returned as is, without copy.

    Raises
    ------
    MalformedGrid
        If the grid is empty, ragged, not two-dimensional or holds negative values.
    """
    try:
        grid = asarray(data, dtype=int64)
    except (TypeError, ValueError) as error:
        raise MalformedGrid(f'Grid rows have inconsistent lengths: {error}') from error

    if grid.ndim != 2:
        raise MalformedGrid(f'Grid must be two-dimensional, got {grid.ndim} dimension(s)')
    if grid.size == 0:
        raise MalformedGrid(f'Grid must not be empty, got shape {grid.shape}')
    if (grid < 0).any():
        raise MalformedGrid('Grid must not hold negative values')
    return grid


def transpose(grid) -> ndarray:
    """
    Swap rows and columns.

    Parameters
    ----------
    grid : array_like
        The game grid.

    Returns
    -------
    ndarray
        A new grid whose rows are the columns of ``grid``.

    Raises
    ------
    MalformedGrid
        If the grid is empty or ragged.
    """
    return as_grid(grid).T.copy()


def mirror(grid) -> ndarray:
    """Reverse every row of the grid."""
    return as_grid(grid)[:, ::-1].copy()


def slide_and_merge_row(row) -> tuple[ndarray, int]:
    """
    Slide a row towards its last cell and merge adjacent equal values.

    Parameters
    ----------
    row : array_like
        One row of the game grid.

    Returns
    -------
    new_row : ndarray
        The row after sliding and merging, padded with zeros at its start.
    points : int
        The sum of every tile created by a merge.

    Notes
    -----
    - Zeros are removed first, keeping the order of the other values.
    - The scan starts from the last cell: the first equal pair found merges into the cell nearest the end.
    - A merged tile never merges again during the same slide, so ``[2, 2, 2, 2]`` gives ``[0, 0, 4, 4]``.
    """
    row = asarray(row, dtype=int64)
    values = [int(value) for value in row if value != 0]

    merged = []
    points = 0
    index = len(values) - 1
    while index >= 0:
        if index > 0 and values[index] == values[index - 1]:
            value = values[index] * 2
            merged.append(value)
            points += value
            index -= 2
        else:
            merged.append(values[index])
            index -= 1

    result = zeros_like(row)
    if merged:
        result[len(row) - len(merged) :] = merged[::-1]
    return result, points


def _canonicalize(grid: ndarray, transposed: bool, mirrored: bool) -> ndarray:
    if transposed:
        grid = transpose(grid)
    if mirrored:
        grid = mirror(grid)
    return grid


def _restore(grid: ndarray, transposed: bool, mirrored: bool) -> ndarray:
    if mirrored:
        grid = mirror(grid)
    if transposed:
        grid = transpose(grid)
    return grid


def latent_state(grid, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the grid after a move, without adding a new tile.

    Parameters
    ----------
    grid : array_like
        The current game grid. It is not modified.
    direction : Direction
        Direction of the move.

    Returns
    -------
    new_grid : ndarray
        The grid after sliding and merging every line.
    points : int
        The points gained by the merges of this move.

    Notes
    -----
    Every direction is turned into a slide towards the right by transposing and/or mirroring the grid,
    so that all four directions share ``slide_and_merge_row``.
    """
    transposed, mirrored = _ORIENTATIONS[direction]
    canonical = _canonicalize(as_grid(grid), transposed, mirrored)

    result = zeros_like(canonical)
    points = 0
    for i, row in enumerate(canonical):
        result[i], row_points = slide_and_merge_row(row)
        points += row_points

    return _restore(result, transposed, mirrored), points


def move(grid, direction: Direction) -> ndarray:
    """
    Slide and merge the whole grid in one direction.

    Parameters
    ----------
    grid : array_like
        The current game grid. It is not modified.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        The new grid.
    """
    new_grid, _ = latent_state(grid, direction)
    return new_grid


def grids_equal(first, second) -> bool:
    """Check whether a move left the grid unchanged."""
    return bool(array_equal(as_grid(first), as_grid(second)))


def empty_cells(grid) -> Iterator[tuple[int, int]]:
    """
    Lazily enumerate the empty cells of a grid.

    Parameters
    ----------
    grid : array_like
        The game grid.

    Yields
    ------
    tuple[int, int]
        Position (row, col) of each empty cell, in row-major order.
    """
    for row, col in argwhere(as_grid(grid) == 0):
        yield int(row), int(col)


def spawn(grid: ndarray, value: int, rng: Generator) -> bool:
    """
    Put a tile on an empty cell chosen uniformly at random.

    Parameters
    ----------
    grid : ndarray
        The game grid, as an ``int64`` array. **Modified in-place.**
    value : int
        Value of the new tile.
    rng : Generator
        Random generator used to choose the cell.

    Returns
    -------
    bool
        True if the tile was placed, False if the grid is full.

    Raises
    ------
    TypeError
        If ``grid`` is not an ``int64`` array, since it could not be filled in place.
    """
    board = as_grid(grid)
    if board is not grid:
        raise TypeError('spawn fills the grid in place and needs an int64 ndarray')

    available_cells = argwhere(board == 0)
    if len(available_cells) == 0:
        return False

    row, col = available_cells[rng.integers(len(available_cells))]
    board[row, col] = value
    return True


def random_tile_value(rng: Generator) -> int:
    """Draw the value of a computer tile: 2 with probability 0.9, 4 with probability 0.1."""
    return int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))


def max_tile(grid) -> int:
    """Return the largest tile of the grid."""
    return int(as_grid(grid).max())


def has_reached(grid, target: int) -> bool:
    """
    Check if any tile reached the target value.

    Parameters
    ----------
    grid : array_like
        The game grid.
    target : int
        The winning tile value.

    Returns
    -------
    bool
        True if a tile is greater than or equal to ``target``.
    """
    return max_tile(grid) >= target
