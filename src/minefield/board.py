"""
Board module for Minesweeper game.

Implements the grid model, deferred mine placement and the reveal
engine (single-cell reveal plus breadth-first cascade). Game lifecycle
and flag bookkeeping live in the session module.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import ConfigurationError, InvariantViolation

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_DIMENSION = 4
MAX_DIMENSION = 20

DEFAULT_ROWS = 9
DEFAULT_COLS = 9
DEFAULT_MINES = 10


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows (4-20).
        cols: Number of columns (4-20).
        num_mines: Total mines to place (1 to rows * cols - 1).
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    num_mines: int = DEFAULT_MINES

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if not MIN_DIMENSION <= value <= MAX_DIMENSION:
                raise ConfigurationError(
                    f"{name} must be between {MIN_DIMENSION} and "
                    f"{MAX_DIMENSION}, got {value}"
                )
        max_mines = self.max_mines
        if not 1 <= self.num_mines <= max_mines:
            raise ConfigurationError(
                f"Mine count must be between 1 and {max_mines}, "
                f"got {self.num_mines}"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def max_mines(self) -> int:
        """Largest mine count that still leaves the first click safe."""
        return self.total_cells - 1

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 20, 64)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def parse_preset(preset: str) -> BoardConfig:
    """
    Parse a preset string of the form ``"ROWSxCOLSxMINES"``.

    Named presets ("beginner", "intermediate", "expert") are accepted too.

    Raises:
        ConfigurationError: If the string is malformed or out of bounds.
    """
    named = PRESETS.get(preset.strip().lower())
    if named is not None:
        return named
    parts = preset.strip().lower().split("x")
    if len(parts) != 3:
        raise ConfigurationError(f"Malformed preset: {preset!r}")
    try:
        rows, cols, num_mines = (int(part) for part in parts)
    except ValueError:
        raise ConfigurationError(f"Malformed preset: {preset!r}") from None
    return BoardConfig(rows, cols, num_mines)


def clamp_config(
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    num_mines: Optional[int] = None,
) -> BoardConfig:
    """
    Build a configuration from loose user input, clamping into bounds.

    Missing or zero values fall back to the beginner defaults.
    """
    rows = max(MIN_DIMENSION, min(MAX_DIMENSION, rows or DEFAULT_ROWS))
    cols = max(MIN_DIMENSION, min(MAX_DIMENSION, cols or DEFAULT_COLS))
    max_mines = rows * cols - 1
    num_mines = max(1, min(max_mines, num_mines or DEFAULT_MINES))
    return BoardConfig(rows, cols, num_mines)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def neighbor_positions(
    row: int, col: int, rows: int, cols: int
) -> List[Tuple[int, int]]:
    """
    Get valid neighboring positions in row-major order.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        rows: Number of rows on the board.
        cols: Number of columns on the board.

    Returns:
        List of (row, col) tuples at Chebyshev distance 1, clipped to
        the board (no wraparound).
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                neighbors.append((new_row, new_col))
    return neighbors


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the mine layout. Mines are absent until
    ``seed_mines`` runs; the session calls it on the first reveal.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _seeded: bool = False
    _safe_revealed: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.cols)]
            for row in range(self.config.rows)
        ]

    # ========================================================================
    # Grid Model (Low-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for grid_row in self._grid:
            yield from grid_row

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """Get the up-to-8 cells surrounding a position."""
        return [
            self._grid[neighbor_row][neighbor_col]
            for neighbor_row, neighbor_col in neighbor_positions(
                row, col, self.rows, self.cols
            )
        ]

    @property
    def mines_placed(self) -> bool:
        """Whether mines have been seeded."""
        return self._seeded

    @property
    def mine_count(self) -> int:
        """Number of mined cells currently on the board."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    @property
    def safe_revealed(self) -> int:
        """Number of revealed cells that are not mines."""
        return self._safe_revealed

    @property
    def all_safe_revealed(self) -> bool:
        """Check if every non-mine cell has been revealed."""
        return self._safe_revealed == self.config.safe_cells

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def seed_mines(self, exclude_row: int, exclude_col: int) -> bool:
        """
        Place mines randomly, keeping one position mine-free.

        Uses rejection sampling over flat indices, then computes the
        adjacent mine count of every cell.

        Args:
            exclude_row: Row of the position to keep mine-free.
            exclude_col: Column of the position to keep mine-free.

        Returns:
            True if mines were placed, False if they already were.
        """
        if self._seeded:
            logger.debug("Mines already placed; ignoring repeated seeding")
            return False

        limit = self.config.total_cells
        if self.config.num_mines > limit - 1:
            raise InvariantViolation(
                f"Cannot place {self.config.num_mines} mines in "
                f"{limit - 1} free cells"
            )

        exclude_index = exclude_row * self.cols + exclude_col
        positions = set()
        while len(positions) < self.config.num_mines:
            index = self.rng.randrange(limit)
            if index == exclude_index:
                continue
            positions.add(index)

        for index in positions:
            row, col = divmod(index, self.cols)
            self._grid[row][col].is_mine = True

        self._calculate_adjacent_mines()
        self._seeded = True
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            self.config.num_mines, self.rows, self.cols,
            exclude_row, exclude_col,
        )
        return True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for cell in self.cells():
            cell.adjacent_mines = sum(
                1 for neighbor in self.neighbors(cell.row, cell.col)
                if neighbor.is_mine
            )

    # ========================================================================
    # Reveal Engine (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> List[Cell]:
        """
        Reveal a cell and cascade through zero-count regions.

        A mined cell is revealed alone; the caller decides what losing
        means. Revealed and flagged cells are left untouched.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Cells revealed by this call, in reveal order.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.reveal():
            return []

        if cell.is_mine:
            return [cell]

        self._safe_revealed += 1
        changed = [cell]
        if cell.adjacent_mines == 0:
            changed.extend(self.expand_zeros(cell))
        return changed

    def expand_zeros(self, start: Cell) -> List[Cell]:
        """
        Breadth-first reveal of the region connected to a zero cell.

        Zero-count neighbors are expanded further; numbered neighbors are
        revealed but stop the expansion along that path. Flagged cells
        are skipped.

        Returns:
            Newly revealed cells, excluding ``start``.

        Raises:
            InvariantViolation: If the cascade reaches a mine.
        """
        revealed = []
        queue = deque([start])
        seen = set()

        while queue:
            current = queue.popleft()
            if current.position in seen:
                continue
            seen.add(current.position)

            for neighbor in self.neighbors(current.row, current.col):
                if not neighbor.reveal():
                    continue
                if neighbor.is_mine:
                    raise InvariantViolation(
                        f"Cascade from {start.position} reached mine at "
                        f"{neighbor.position}"
                    )
                self._safe_revealed += 1
                revealed.append(neighbor)
                if neighbor.adjacent_mines == 0:
                    queue.append(neighbor)

        logger.debug(
            "Cascade from %s revealed %d cells", start.position, len(revealed)
        )
        return revealed

    def reveal_all_mines(self) -> List[Cell]:
        """
        Reveal every mine on the board (terminal, after a loss).

        Flagged mines are revealed too.

        Returns:
            Mines that were not already revealed.
        """
        changed = []
        for cell in self.cells():
            if cell.is_mine and not cell.is_revealed:
                cell.state = CellState.REVEALED
                changed.append(cell)
        return changed

    def hidden_mines(self) -> List[Tuple[int, int]]:
        """Positions of mines that are not yet revealed."""
        return [
            cell.position for cell in self.cells()
            if cell.is_mine and not cell.is_revealed
        ]

    # ========================================================================
    # Observation (High-level)
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden, unflagged cells.
        """
        return [cell.position for cell in self.cells() if cell.is_hidden]
