"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameController


class FakeClock:
    """Manually advanced clock for controller timing tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for flood fill testing."""
    return Board(5, 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 2x2 board with a single mine at (0, 0)."""
    board = Board(2, 2)
    board.place_mine(0, 0)
    return board


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x3 board with a column of mines at x=2.

    - - % - -
    - - % - -
    - - % - -
    """
    board = Board(5, 3)
    for y in range(3):
        board.place_mine(2, y)
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(corner_mine_board: Board, clock: FakeClock) -> GameController:
    """Controller over the 2x2 board with a mine at (0, 0)."""
    return GameController(corner_mine_board, clock=clock)


@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)
