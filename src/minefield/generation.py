"""
Mine generation for the minefield.

Chooses distinct mine positions and places them on a board. Kept apart
from ``Board`` so the board itself stays deterministic.
"""
import logging
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .board import Board, BoardConfig

logger = logging.getLogger(__name__)

RngLike = Union[np.random.Generator, int, None]


def _as_generator(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def choose_mine_positions(
    width: int,
    height: int,
    count: int,
    rng: RngLike = None,
) -> List[Tuple[int, int]]:
    """
    Pick ``count`` distinct positions, sampled without replacement.

    Args:
        width: Number of columns.
        height: Number of rows.
        count: Number of positions to choose.
        rng: Generator, integer seed, or None for fresh entropy.

    Returns:
        List of (x, y) tuples with no duplicates.
    """
    total = width * height
    if count < 0 or count > total:
        raise ValueError(f"Cannot choose {count} mines from {total} cells")

    generator = _as_generator(rng)
    indices = generator.choice(total, size=count, replace=False)
    return [(int(index) % width, int(index) // width) for index in indices]


def resolve_mine_count(config: BoardConfig, rng: RngLike = None) -> int:
    """
    Number of mines a board built from ``config`` should carry.

    With a density every cell is an independent trial, so the count is
    a binomial draw over the cell count.
    """
    if config.mine_density is None:
        return config.num_mines
    generator = _as_generator(rng)
    return int(generator.binomial(config.total_cells, config.mine_density))


def populate(board: Board, positions: Iterable[Tuple[int, int]]) -> int:
    """
    Place a mine at every position.

    Returns:
        Number of mines actually placed; repeated or off-board positions
        are skipped.
    """
    placed = 0
    for x, y in positions:
        if board.place_mine(x, y):
            placed += 1
        else:
            logger.debug("Skipped mine placement at (%d, %d)", x, y)
    return placed


def generate_board(
    config: Optional[BoardConfig] = None,
    rng: RngLike = None,
) -> Board:
    """
    Build a board and mine it according to ``config``.

    Args:
        config: Board configuration (default: beginner 9x9 with 10 mines).
        rng: Generator, integer seed, or None for fresh entropy.

    Returns:
        A fully mined, fully covered board.
    """
    config = config or BoardConfig()
    generator = _as_generator(rng)

    board = Board(config.width, config.height)
    count = resolve_mine_count(config, generator)
    positions = choose_mine_positions(
        config.width, config.height, count, generator
    )
    populate(board, positions)

    logger.debug(
        "Generated %dx%d board with %d mines",
        board.width, board.height, board.mine_count,
    )
    return board
