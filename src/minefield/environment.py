"""
Gymnasium environment wrapper for the minefield.

Provides a headless, agent-facing shell over a game controller.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, BoardOutcome
from .controller import GameController


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = exposed cell with neighboring mine count
        - 9 = exposed mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action a < cells uncovers (a % width, a // width); the upper
        half toggles a flag on cell a - cells.

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for clearing the board
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
        - 0 for a flag toggle
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self.controller: Optional[GameController] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.controller = GameController.new_game(self.config, self.np_random)
        return self.controller.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.controller is None:
            raise RuntimeError("Call reset() before step()")

        flag, x, y = self._decode_action(int(action))
        if flag:
            reward = self._flag(x, y)
        else:
            reward = self._uncover(x, y)

        observation = self.controller.board.get_observation()
        terminated = self.controller.is_over
        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split an action into (is_flag, x, y)."""
        flag = action >= self._cells
        index = action - self._cells if flag else action
        return flag, index % self.config.width, index // self.config.width

    def _uncover(self, x: int, y: int) -> float:
        cell = self.controller.board.get(x, y)
        if cell is None or not cell.is_covered:
            self.controller.on_left_click(x, y)
            return -0.1

        outcome = self.controller.on_left_click(x, y)
        if outcome == BoardOutcome.CLEARED:
            return 10.0
        if outcome == BoardOutcome.DETONATED:
            return -10.0
        return 1.0

    def _flag(self, x: int, y: int) -> float:
        if self.controller.on_right_click(x, y) == 0:
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        counters = self.controller.counters
        return {
            "turns": counters.turns,
            "flags": counters.total_flags,
            "mines": counters.total_mines,
            "play_state": self.controller.play_state.phase.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board as its text dump."""
        if self.controller is None:
            return None
        text = str(self.controller.board)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            int8 array where 1 = valid action, usable with
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.controller is None or self.controller.is_over:
            return mask
        board = self.controller.board
        for x, y in board.coordinates():
            cell = board.get(x, y)
            index = x + y * self.config.width
            if cell.is_covered:
                mask[index] = 1
            if not cell.is_exposed:
                mask[self._cells + index] = 1
        return mask
