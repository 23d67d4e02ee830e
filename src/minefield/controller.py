"""
Play-state controller for a single game session.

Wraps one board, translates click outcomes into play-state transitions
and keeps the mine/flag/turn counters.
"""
import logging
import time
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, Optional

from .board import Board, BoardConfig, BoardOutcome
from .generation import RngLike, generate_board

logger = logging.getLogger(__name__)


# ============================================================================
# Play State
# ============================================================================

class PlayPhase(Enum):
    """Session-level phases of a game."""

    UNSTARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class PlayState:
    """
    Phase of the game together with its timing data.

    Attributes:
        phase: Current phase.
        timestamp: Clock time the game started while PLAYING, elapsed
            seconds at the end while WON or LOST, None while UNSTARTED.
    """

    phase: PlayPhase = PlayPhase.UNSTARTED
    timestamp: Optional[float] = None

    @classmethod
    def unstarted(cls) -> "PlayState":
        return cls(PlayPhase.UNSTARTED)

    @classmethod
    def playing(cls, start_time: float) -> "PlayState":
        return cls(PlayPhase.PLAYING, start_time)

    @classmethod
    def won(cls, elapsed: float) -> "PlayState":
        return cls(PlayPhase.WON, elapsed)

    @classmethod
    def lost(cls, elapsed: float) -> "PlayState":
        return cls(PlayPhase.LOST, elapsed)

    @property
    def is_terminal(self) -> bool:
        """Check if the game has been won or lost."""
        return self.phase in (PlayPhase.WON, PlayPhase.LOST)


@dataclass(frozen=True)
class GameCounters:
    """HUD counters for a session."""

    total_mines: int
    total_flags: int = 0
    turns: int = 0


# ============================================================================
# Controller
# ============================================================================

class GameController:
    """
    Drives one board through a game session.

    The controller is the sole owner of its board. Won and lost are
    absorbing: once reached, clicks are ignored and the board is only
    read for display. A new game needs a new controller.
    """

    def __init__(
        self,
        board: Board,
        total_mines: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the controller.

        Args:
            board: A fully mined board.
            total_mines: Mine count for the HUD (default: the board's).
            clock: Source of the current time in seconds.
        """
        self._board = board
        self._clock = clock
        if total_mines is None:
            total_mines = board.mine_count
        self._counters = GameCounters(total_mines=total_mines)
        self._play_state = PlayState.unstarted()

    @classmethod
    def new_game(
        cls,
        config: Optional[BoardConfig] = None,
        rng: RngLike = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "GameController":
        """Start a fresh session on a newly generated board."""
        return cls(generate_board(config, rng), clock=clock)

    # ========================================================================
    # Input Events
    # ========================================================================

    def on_left_click(self, x: int, y: int) -> Optional[BoardOutcome]:
        """
        Uncover a cell.

        The first click on the board starts the clock before the cell is
        uncovered. Clicks off the board change nothing and cost no turn.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Outcome of the uncover, or None if the game is already over.
        """
        if self._play_state.is_terminal:
            return None
        if not self._board.in_bounds(x, y):
            return BoardOutcome.IN_PROGRESS

        if self._play_state.phase == PlayPhase.UNSTARTED:
            self._transition(PlayState.playing(self._clock()))

        outcome = self._board.uncover(x, y)
        if outcome == BoardOutcome.CLEARED:
            self._transition(PlayState.won(self.elapsed()))
        elif outcome == BoardOutcome.DETONATED:
            self._transition(PlayState.lost(self.elapsed()))

        self._counters = replace(self._counters, turns=self._counters.turns + 1)
        logger.debug("Uncover (%d, %d) -> %s", x, y, outcome.name)
        return outcome

    def on_right_click(self, x: int, y: int) -> int:
        """
        Toggle a flag. Never changes the play state.

        Returns:
            Change in the flag count; 0 if the game is over.
        """
        if self._play_state.is_terminal:
            return 0
        delta = self._board.toggle_flag(x, y)
        if delta:
            self._counters = replace(
                self._counters,
                total_flags=self._counters.total_flags + delta,
            )
        return delta

    def _transition(self, state: PlayState) -> None:
        logger.info(
            "Play state %s -> %s",
            self._play_state.phase.name, state.phase.name,
        )
        self._play_state = state

    # ========================================================================
    # State Accessors
    # ========================================================================

    def elapsed(self) -> float:
        """Seconds on the game clock."""
        state = self._play_state
        if state.phase == PlayPhase.UNSTARTED:
            return 0.0
        if state.phase == PlayPhase.PLAYING:
            return self._clock() - state.timestamp
        return state.timestamp

    @property
    def board(self) -> Board:
        return self._board

    @property
    def play_state(self) -> PlayState:
        return self._play_state

    @property
    def counters(self) -> GameCounters:
        return self._counters

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._play_state.is_terminal

    @property
    def remaining_mines(self) -> int:
        """Mines not yet accounted for by flags (may be negative)."""
        return self._counters.total_mines - self._counters.total_flags
