"""
Minefield module.

Provides the core game logic: board, cells, mine generation and the
play-state controller, plus headless shells over them.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    BoardOutcome,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CLASSIC,
    PRESETS,
)
from .generation import choose_mine_positions, generate_board, populate
from .controller import GameController, GameCounters, PlayPhase, PlayState
from .sprites import hud_sprites, number_to_sprites, sprite_index
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BoardOutcome",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CLASSIC",
    "PRESETS",
    "choose_mine_positions",
    "generate_board",
    "populate",
    "GameController",
    "GameCounters",
    "PlayPhase",
    "PlayState",
    "hud_sprites",
    "number_to_sprites",
    "sprite_index",
    "MinesweeperEnv",
]
