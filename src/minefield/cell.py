"""
Cell module for the minefield.

Represents individual cells on the board with their covered state
(covered/exposed/flagged) and content (mine/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible covered states of a cell."""

    COVERED = auto()
    EXPOSED = auto()
    FLAGGED = auto()


MINE_SYMBOL = "%"
FLAG_SYMBOL = "F"
COVERED_SYMBOL = "-"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield.

    Position is implicit: the board owns the cell and knows where it is.

    Attributes:
        has_mine: Whether this cell contains a mine. Set once at placement.
        neighboring_mines: Count of mines in the 8 surrounding cells (0-8).
        state: Current covered state (covered, exposed, or flagged).
    """

    has_mine: bool = False
    neighboring_mines: int = 0
    state: CellState = CellState.COVERED

    def expose(self) -> bool:
        """
        Expose this cell.

        Returns:
            True if the cell was covered and is now exposed, False if it
            was already exposed or is flagged.
        """
        if self.state != CellState.COVERED:
            return False
        self.state = CellState.EXPOSED
        return True

    def toggle_flag(self) -> int:
        """
        Toggle the flag on this cell.

        Returns:
            +1 if a flag was planted, -1 if one was removed, 0 if the
            cell is exposed and nothing changed.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
            return 1
        if self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
            return -1
        return 0

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_exposed(self) -> bool:
        """Check if cell is exposed."""
        return self.state == CellState.EXPOSED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def symbol(self) -> str:
        """Single character used by the board's text dump."""
        if self.state == CellState.COVERED:
            return COVERED_SYMBOL
        if self.state == CellState.FLAGGED:
            return FLAG_SYMBOL
        if self.has_mine:
            return MINE_SYMBOL
        return str(self.neighboring_mines)

    def to_observation(self) -> int:
        """
        Convert cell to an observation value for agents.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Exposed cell with neighboring mine count
            9: Exposed mine (game over state)
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.has_mine:
            return 9
        return self.neighboring_mines
