"""
Base agent interface for Minesweeper players.

Agents see only the observation array, never the mine layout.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield.cell import HIDDEN_VALUE


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement ``select_action`` to choose which cell to
    reveal based on the current observation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows on the board.
            cols: Number of columns on the board.
        """
        self.rows = rows
        self.cols = cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a cell to reveal.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional boolean mask of revealable cells.

        Returns:
            Action index (row * cols + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.cols)

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask of hidden cells, flattened row-major."""
        return observation.flatten() == HIDDEN_VALUE

    def reset(self) -> None:
        """Reset agent state for a new game."""
