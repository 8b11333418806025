"""
Hint-driven agent for Minesweeper.

Plays the cells the hint solver proves safe and guesses only when no
deduction is available.
"""
from typing import Optional, Set, Tuple

import numpy as np

from minefield.hints import find_hints_in_observation

from .base_agent import BaseAgent


class HintAgent(BaseAgent):
    """
    Agent built on single-cell deductions.

    Strategy:
        1. First move: a random corner (corners cascade well)
        2. Reveal a cell the hint solver marks safe, lowest index first
        3. Otherwise guess a hidden cell not deduced to be a mine
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(rows, cols)
        self.rng = np.random.default_rng(seed)
        self.certain_moves = 0
        self.guesses_made = 0
        self._first_move = True

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        if self._first_move:
            self._first_move = False
            return self._select_first_move(valid_indices)

        hints = find_hints_in_observation(observation)
        for row, col in sorted(hints.safe):
            action = self.position_to_action(row, col)
            if valid_actions[action]:
                self.certain_moves += 1
                return action

        return self._guess(valid_indices, hints.likely_mine)

    def _select_first_move(self, valid_indices: np.ndarray) -> int:
        """Pick a random available corner, else any valid cell."""
        corners = [
            self.position_to_action(0, 0),
            self.position_to_action(0, self.cols - 1),
            self.position_to_action(self.rows - 1, 0),
            self.position_to_action(self.rows - 1, self.cols - 1),
        ]
        self.rng.shuffle(corners)
        for corner in corners:
            if corner in valid_indices:
                return int(corner)
        return int(self.rng.choice(valid_indices))

    def _guess(
        self,
        valid_indices: np.ndarray,
        known_mines: Set[Tuple[int, int]],
    ) -> int:
        self.guesses_made += 1
        candidates = [
            action for action in valid_indices
            if self.action_to_position(action) not in known_mines
        ]
        if not candidates:
            candidates = list(valid_indices)
        return int(self.rng.choice(candidates))

    def reset(self) -> None:
        """Prepare for a new game."""
        self._first_move = True
