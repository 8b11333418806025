"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation encoding shared with agents
HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index on the board.
        col: Column index on the board.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful once mines have been placed.
        state: Current visual state (hidden, revealed, or flagged).
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def position(self) -> Tuple[int, int]:
        """(row, col) coordinate of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
