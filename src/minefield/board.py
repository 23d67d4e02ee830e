"""
Board module for the minefield.

Implements the grid of cells with mine placement, flood-fill uncovering,
flagging and win/loss detection. The board performs no randomness of its
own; see ``generation`` for choosing mine positions.
"""
import numbers
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

class BoardOutcome(Enum):
    """Result of an uncover action."""

    IN_PROGRESS = auto()
    CLEARED = auto()
    DETONATED = auto()


# Clockwise from the top-left corner.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


def _validate_dimensions(width: int, height: int) -> None:
    for size in (width, height):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise TypeError("Board dimensions must be integers")
    if width < 1 or height < 1:
        raise ValueError("Board dimensions must be positive")


@dataclass
class BoardConfig:
    """
    Configuration for generating a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Exact number of mines to place.
        mine_density: When set, each cell independently holds a mine
            with this probability and ``num_mines`` is ignored.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    mine_density: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        _validate_dimensions(self.width, self.height)
        if self.mine_density is not None:
            if not 0.0 <= self.mine_density <= 1.0:
                raise ValueError("Mine density must be between 0 and 1")
            return
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
CLASSIC = BoardConfig(32, 32, mine_density=0.15)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "classic": CLASSIC,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board.

    Cells are stored row-major in a flat list and addressed by ``(x, y)``.
    Coordinates outside the board are never an error: mutations ignore
    them and queries return ``None`` or an empty result.
    """

    width: int
    height: int
    _cells: List[Cell] = field(init=False, default_factory=list, repr=False)
    _mines: int = field(init=False, default=0)
    _flags: int = field(init=False, default=0)
    _exposed_safe: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Validate dimensions and create the covered grid."""
        _validate_dimensions(self.width, self.height)
        self._cells = [Cell() for _ in range(self.width * self.height)]

    def __setattr__(self, name: str, value) -> None:
        """Dimensions are fixed once set."""
        if name in ("width", "height") and name in self.__dict__:
            raise AttributeError(f"Board {name} cannot be changed")
        super().__setattr__(name, value)

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> Optional[int]:
        """Flat index of ``(x, y)``, or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return x + y * self.width

    def _cell(self, x: int, y: int) -> Optional[Cell]:
        index = self._index(x, y)
        if index is None:
            return None
        return self._cells[index]

    def neighbors_of(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighboring positions.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            List of (x, y) tuples in clockwise order, empty when the
            center itself is off the board.
        """
        if not self.in_bounds(x, y):
            return []
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.in_bounds(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Iterate over every position in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def place_mine(self, x: int, y: int) -> bool:
        """
        Place a mine and update neighbor counts.

        The cell's own count is recomputed from its current neighbors and
        every neighbor's count goes up by one. Placing on an already mined
        cell leaves the board untouched.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if a mine was placed, False if out of bounds or already
            mined.
        """
        cell = self._cell(x, y)
        if cell is None or cell.has_mine:
            return False

        cell.has_mine = True
        self._mines += 1

        neighbors = [self._cell(nx, ny) for nx, ny in self.neighbors_of(x, y)]
        cell.neighboring_mines = sum(1 for n in neighbors if n.has_mine)
        for neighbor in neighbors:
            neighbor.neighboring_mines += 1
        return True

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, x: int, y: int) -> BoardOutcome:
        """
        Uncover the cell at the given position.

        A mine detonates and exposes every mine on the board. A cell with
        no neighboring mines floods outwards across covered, mine-free
        neighbors; cells with a positive count are exposed but not
        expanded. Flagged cells are never uncovered.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            DETONATED on a mine, CLEARED once every safe cell is exposed,
            IN_PROGRESS otherwise (including ignored clicks).
        """
        cell = self._cell(x, y)
        if cell is None or not cell.expose():
            return BoardOutcome.IN_PROGRESS

        if cell.has_mine:
            self.reveal_all_mines()
            return BoardOutcome.DETONATED

        self._exposed_safe += 1
        if cell.neighboring_mines == 0:
            self._flood_fill(x, y)

        if self.is_cleared:
            return BoardOutcome.CLEARED
        return BoardOutcome.IN_PROGRESS

    def _flood_fill(self, x: int, y: int) -> None:
        """Expose the zero-count region around an already exposed cell."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors_of(cx, cy):
                neighbor = self._cell(nx, ny)
                if neighbor.has_mine or not neighbor.expose():
                    continue
                self._exposed_safe += 1
                if neighbor.neighboring_mines == 0:
                    stack.append((nx, ny))

    def toggle_flag(self, x: int, y: int) -> int:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Change in the number of flags: +1, -1, or 0 when the cell is
            exposed or off the board.
        """
        cell = self._cell(x, y)
        if cell is None:
            return 0
        delta = cell.toggle_flag()
        self._flags += delta
        return delta

    def reveal_all_mines(self) -> None:
        """Expose every mined cell, flagged or not."""
        for cell in self._cells:
            if cell.has_mine:
                if cell.is_flagged:
                    self._flags -= 1
                cell.state = CellState.EXPOSED

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of mined cells."""
        return self._mines

    @property
    def flag_count(self) -> int:
        """Number of currently flagged cells."""
        return self._flags

    @property
    def is_cleared(self) -> bool:
        """Check if all non-mine cells are exposed."""
        return self._exposed_safe == len(self._cells) - self._mines

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Get a snapshot of the cell at position, or None if invalid."""
        cell = self._cell(x, y)
        if cell is None:
            return None
        return replace(cell)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D array indexed ``[y, x]`` where:
                -1 = covered
                -2 = flagged
                0-8 = exposed with neighboring count
                9 = exposed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y in self.coordinates():
            obs[y, x] = self._cells[x + y * self.width].to_observation()
        return obs

    def get_covered_positions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that a click could uncover.

        Returns:
            List of (x, y) positions that are still covered.
        """
        return [
            (x, y) for x, y in self.coordinates()
            if self._cells[x + y * self.width].is_covered
        ]

    def __str__(self) -> str:
        rows = []
        for y in range(self.height):
            row = self._cells[y * self.width:(y + 1) * self.width]
            rows.append(" ".join(cell.symbol for cell in row))
        return "\n".join(rows)
