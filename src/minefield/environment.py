"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so agents can play full games.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE
from .session import GameSession, GameStatus


# ============================================================================
# Text Rendering
# ============================================================================

def render_board(board: Board) -> str:
    """Render board as ASCII string."""
    symbols = {HIDDEN_VALUE: ".", FLAGGED_VALUE: "F", MINE_VALUE: "*", 0: " "}
    obs = board.get_observation()
    lines = []
    for row in range(board.rows):
        row_str = ""
        for col in range(board.cols):
            val = int(obs[row, col])
            row_str += symbols.get(val, str(val)) + " "
        lines.append(row_str)
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
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
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._rng = random.Random()
        self.session = GameSession(self.config, self._rng)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
        self.session = GameSession(self.config, self._rng)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell selected by ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = divmod(int(action), self.config.cols)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.session.board.get_observation()
        terminated = self.session.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, row: int, col: int) -> float:
        """Perform the reveal and score its result."""
        outcome = self.session.reveal(row, col)

        if not outcome.changed_cells:
            return -0.1
        if outcome.status == GameStatus.WON:
            return 10.0
        if outcome.status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.safe_revealed,
            "total_safe": self.config.safe_cells,
            "game_state": self.session.status.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.session.board)
        if self.render_mode == "human":
            print(render_board(self.session.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.board.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask
