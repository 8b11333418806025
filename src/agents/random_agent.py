"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that picks a hidden cell uniformly at random.

    Provides the floor against which the hint agent is compared.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(rows, cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            # Nothing left to reveal; the environment scores this as invalid
            return 0

        return int(self.rng.choice(valid_indices))
