"""
Game session for Minesweeper.

Drives one board through its lifecycle (ready, running, won, lost),
keeps flag bookkeeping and the elapsed-time counter, and exposes the
operations a front end calls.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .board import Board, BoardConfig
from .hints import HintResult, find_hints

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    READY = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Outcomes
# ============================================================================

@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal.

    Attributes:
        status: Game status after the reveal.
        changed_cells: Positions whose content became visible, in order.
            Empty when the reveal was a no-op.
    """

    status: GameStatus
    changed_cells: Tuple[Position, ...] = ()


@dataclass(frozen=True)
class FlagOutcome:
    """Result of a flag toggle."""

    flagged: bool
    remaining_mine_display: int


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One Minesweeper game.

    The board belongs to the session and is never shared. Sessions are
    not reset: start a new game by creating a new session.
    """

    def __init__(
        self,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a session with an empty (mine-free) board.

        Args:
            config: Validated board configuration.
            rng: Random source for mine placement.
        """
        self.config = config
        self._board = Board(config, rng or random.Random())
        self._status = GameStatus.READY
        self._flags_placed = 0
        self._elapsed_seconds = 0
        self._clock_started = False

    @classmethod
    def new_game(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """
        Create a fresh session.

        Raises:
            ConfigurationError: If dimensions or mine count are out of bounds.
        """
        session = cls(BoardConfig(rows, cols, num_mines), rng)
        logger.info(
            "New game: %dx%d with %d mines", rows, cols, num_mines
        )
        return session

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def started(self) -> bool:
        """Whether mines have been placed (first reveal happened)."""
        return self._board.mines_placed

    @property
    def is_over(self) -> bool:
        return self._status in (GameStatus.WON, GameStatus.LOST)

    @property
    def flags_placed(self) -> int:
        return self._flags_placed

    @property
    def remaining_mine_display(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.num_mines - self._flags_placed

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def clock_running(self) -> bool:
        """Whether ticks currently advance the elapsed time."""
        return self._clock_started and not self.is_over

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell.

        The first reveal places mines away from the clicked cell. Hitting
        a mine loses and exposes every mine; opening the last safe cell
        wins. Revealed, flagged, out-of-bounds cells and finished games
        give an empty outcome.
        """
        cell = self._board.get_cell(row, col)
        if self.is_over or cell is None or not cell.is_hidden:
            return RevealOutcome(self._status)

        if not self.started:
            self._board.seed_mines(row, col)
            self._status = GameStatus.RUNNING
            self._clock_started = True

        changed = self._board.reveal_cell(row, col)

        if cell.is_mine:
            changed.extend(self._board.reveal_all_mines())
            self._status = GameStatus.LOST
            logger.info("Game lost at (%d, %d)", row, col)
        elif self._board.all_safe_revealed:
            self._status = GameStatus.WON
            logger.info("Game won in %d seconds", self._elapsed_seconds)

        return RevealOutcome(
            self._status, tuple(changed_cell.position for changed_cell in changed)
        )

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """
        Flag or unflag a hidden cell.

        Flagging before the first reveal starts the clock without placing
        mines. Revealed cells, out-of-bounds positions and finished games
        are left unchanged.
        """
        cell = self._board.get_cell(row, col)
        if self.is_over or cell is None or not cell.toggle_flag():
            flagged = cell is not None and cell.is_flagged
            return FlagOutcome(flagged, self.remaining_mine_display)

        self._clock_started = True
        self._flags_placed += 1 if cell.is_flagged else -1
        return FlagOutcome(cell.is_flagged, self.remaining_mine_display)

    def query_hint(self) -> HintResult:
        """Deduce safe cells and certain mines without changing the game."""
        return find_hints(self._board)

    def peek_mines(self) -> List[Position]:
        """Positions of mines not yet revealed, for a timed preview."""
        return self._board.hidden_mines()

    def tick(self) -> int:
        """
        Advance the elapsed time by one second while the clock runs.

        Returns:
            Elapsed seconds after the tick.
        """
        if self.clock_running:
            self._elapsed_seconds += 1
        return self._elapsed_seconds
