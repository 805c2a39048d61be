"""
Gymnasium environment wrapper for Minesweeper.

Drives the board engine through the standard reset/step interface so
scripted players can play full games.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import FLAGGED_CODE, MINE_CODE
from .display import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbour mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the remaining actions toggle the flag on cell i - width * height.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action the board ignores
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
            seed: Seed for mine placement.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config, rng=random.Random(seed))
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # Reveal actions followed by flag actions
        self._num_cells = self.config.height * self.config.width
        self.action_space = spaces.Discrete(2 * self._num_cells)

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
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board.rng = random.Random(seed)
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, x, y = self._decode_action(action)
        self._steps += 1

        if is_flag:
            reward = self._apply_flag(x, y)
        else:
            reward = self._apply_reveal(x, y)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        action = int(action)
        is_flag = action >= self._num_cells
        index = action % self._num_cells
        return is_flag, index % self.config.width, index // self.config.width

    def _apply_reveal(self, x: int, y: int) -> float:
        """Reveal a cell and score the outcome."""
        if not self.board.reveal(x, y):
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _apply_flag(self, x: int, y: int) -> float:
        """Toggle a flag; flags carry no reward of their own."""
        if not self.board.toggle_flag(x, y):
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "remaining_flags": self.board.remaining_flags,
            "phase": self.board.phase.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions the board would accept.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask

        for cell in self.board.cells():
            index = cell.y * self.config.width + cell.x
            if cell.is_hidden:
                mask[index] = True
            if self._can_toggle_flag(cell):
                mask[self._num_cells + index] = True
        return mask

    def _can_toggle_flag(self, cell) -> bool:
        if not self.board.mines_placed or cell.is_revealed:
            return False
        return cell.is_flagged or self.board.remaining_flags > 0
