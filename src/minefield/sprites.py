"""
Sprite selection for rendering shells.

Maps cell data and HUD counters onto indices into the game's sprite
sheet (8x8 pixel sprites, four per row). Drawing itself is left to the
shell.
"""
from typing import List

from .cell import Cell, CellState
from .controller import GameController


# ============================================================================
# Sprite Sheet Layout
# ============================================================================

SPRITE_SIZE = 8
SPRITES_PER_ROW = 4

# Indices 0-9 are the decimal digits.
MINE_SPRITE = 10
FLAG_SPRITE = 11
COVERED_SPRITE = 13
EMPTY_SPRITE = 14
CLOCK_SPRITE = 15


def sprite_index(cell: Cell) -> int:
    """Pick the sprite for a cell from its state and contents."""
    if cell.state == CellState.COVERED:
        return COVERED_SPRITE
    if cell.state == CellState.FLAGGED:
        return FLAG_SPRITE
    if cell.has_mine:
        return MINE_SPRITE
    if cell.neighboring_mines == 0:
        return EMPTY_SPRITE
    return cell.neighboring_mines


def number_to_sprites(value: int) -> List[int]:
    """
    Split a counter into digit sprites, most significant first.

    Raises:
        ValueError: If ``value`` is negative; there is no minus sprite.
    """
    if value < 0:
        raise ValueError("Cannot render a negative number")
    return [int(digit) for digit in str(value)]


def hud_sprites(controller: GameController) -> List[List[int]]:
    """
    Sprite groups for the heads-up display, left to right.

    Returns:
        Clock and elapsed seconds, flag and flag count, mine and mine
        count; each group starts with its icon.
    """
    counters = controller.counters
    return [
        [CLOCK_SPRITE] + number_to_sprites(int(controller.elapsed())),
        [FLAG_SPRITE] + number_to_sprites(counters.total_flags),
        [MINE_SPRITE] + number_to_sprites(counters.total_mines),
    ]
