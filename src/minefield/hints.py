"""
Hint solver for Minesweeper.

Single-pass local deduction: each revealed number is examined on its own
against its hidden and flagged neighbors. Joint constraints between
numbers are not combined, so some solvable positions yield no hint.
"""
from dataclasses import dataclass, field
from typing import Iterable, Set, Tuple

import numpy as np

from .board import Board, neighbor_positions
from .cell import FLAGGED_VALUE, HIDDEN_VALUE

Position = Tuple[int, int]


# ============================================================================
# Result Type
# ============================================================================

@dataclass
class HintResult:
    """
    Deductions available on the current board.

    Attributes:
        safe: Hidden cells that are provably mine-free.
        likely_mine: Hidden cells that are provably mines.
    """

    safe: Set[Position] = field(default_factory=set)
    likely_mine: Set[Position] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        """True when no deduction exists anywhere on the board."""
        return not self.safe and not self.likely_mine


# ============================================================================
# Deduction Rule
# ============================================================================

def _apply_rule(
    result: HintResult,
    adjacent_mines: int,
    hidden: Iterable[Position],
    flagged_count: int,
) -> None:
    """Record the forced conclusion (if any) from one numbered cell."""
    hidden = list(hidden)
    if not hidden:
        return
    if flagged_count == adjacent_mines:
        result.safe.update(hidden)
    elif flagged_count + len(hidden) == adjacent_mines:
        result.likely_mine.update(hidden)


# ============================================================================
# Solvers
# ============================================================================

def find_hints(board: Board) -> HintResult:
    """
    Collect safe cells and certain mines from a board.

    Revealed mines (visible after a loss) are not treated as numbers.
    The board is not modified.
    """
    result = HintResult()
    for cell in board.cells():
        if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
            continue
        neighbors = board.neighbors(cell.row, cell.col)
        hidden = [n.position for n in neighbors if n.is_hidden]
        flagged_count = sum(1 for n in neighbors if n.is_flagged)
        _apply_rule(result, cell.adjacent_mines, hidden, flagged_count)
    return result


def find_hints_in_observation(observation: np.ndarray) -> HintResult:
    """
    Same deduction as ``find_hints`` over an agent observation array.

    Args:
        observation: 2D array using the cell observation encoding.
    """
    rows, cols = observation.shape
    result = HintResult()
    for row in range(rows):
        for col in range(cols):
            value = int(observation[row, col])
            if value < 1 or value > 8:
                continue
            hidden = []
            flagged_count = 0
            for nr, nc in neighbor_positions(row, col, rows, cols):
                neighbor_value = observation[nr, nc]
                if neighbor_value == HIDDEN_VALUE:
                    hidden.append((nr, nc))
                elif neighbor_value == FLAGGED_VALUE:
                    flagged_count += 1
            _apply_rule(result, value, hidden, flagged_count)
    return result
