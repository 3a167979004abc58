"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard step/reset interface for driving the board engine
programmatically.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, BoardEngine, GameResult
from .cell import OBS_FLAGGED, OBS_MINE
from .render import render_board


# ============================================================================
# Constants
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_FLAG = 0.0
REWARD_NO_OP = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = uncovered cell with adjacent mine count
        - 9 = uncovered mine

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size uncovers cell (i // size, i % size);
        the upper half toggles the flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10, 30% mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.engine: Optional[BoardEngine] = None

        size = self.config.size
        self._cell_count = size * size

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(size, size),
            dtype=np.int8,
        )

        # One uncover action and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.engine = BoardEngine(self.config, rng=self.np_random)
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._require_engine()

        flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if flag:
            reward = self._apply_flag(row, col)
        else:
            reward = self._apply_reveal(row, col)

        observation = self.engine.get_observation()
        terminated = self.engine.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        flag = action >= self._cell_count
        row, col = divmod(action % self._cell_count, self.config.size)
        return flag, row, col

    def _apply_reveal(self, row: int, col: int) -> float:
        """Reveal a cell and score the result."""
        outcome = self.engine.reveal(row, col)
        if not outcome.applied:
            return REWARD_NO_OP
        if outcome.result == GameResult.WON:
            return REWARD_WIN
        if outcome.result == GameResult.LOST:
            return REWARD_MINE
        return REWARD_SAFE

    def _apply_flag(self, row: int, col: int) -> float:
        outcome = self.engine.toggle_flag(row, col)
        return REWARD_FLAG if outcome.applied else REWARD_NO_OP

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        self._require_engine()
        return {
            "steps": self._steps,
            "uncovered": self.engine.uncovered_count,
            "safe_cells": self._cell_count - self.engine.mine_count,
            "flags": self.engine.flag_count,
            "game_state": self.engine.result.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.engine is None:
            return None
        if self.render_mode == "ansi":
            return render_board(self.engine)
        if self.render_mode == "human":
            print(render_board(self.engine))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            int8 array where 1 = useful action. All zeros once the
            game is over.
        """
        self._require_engine()
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.engine.is_terminal:
            return mask
        for row, col, cell in self.engine.cells():
            action = row * self.config.size + col
            if cell.is_covered:
                mask[action] = 1
            if not cell.uncovered:
                mask[self._cell_count + action] = 1
        return mask

    def _require_engine(self) -> None:
        if self.engine is None:
            raise RuntimeError("Call reset() before using the environment")
