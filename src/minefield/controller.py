"""
Game controller for Minesweeper front ends.

Wraps the current game session with the timed behavior a user interface
needs: the one-second clock, the mine peek preview and the hint
highlight, plus a short status message. Rendering is left to the caller,
which reads the advisory markings exposed here.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from .board import BoardConfig, parse_preset
from .hints import HintResult
from .scheduling import DelayedAction, Scheduler, Ticker
from .session import FlagOutcome, GameSession, GameStatus, RevealOutcome

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

MSG_READY = "Ready"
MSG_LOST = "Boom!"
MSG_WON = "Cleared!"
MSG_HINT_NEEDS_START = "Reveal one cell to start hints"
MSG_NO_HINT = "No deterministic hint found"
MSG_SAFE_HINT = "Safe tiles highlighted"
MSG_MINE_HINT = "Probable mines highlighted"


@dataclass
class TimingConfig:
    """
    Durations used by the controller, in seconds.

    Attributes:
        tick_seconds: Clock resolution.
        peek_seconds: How long the mine preview stays visible.
        hint_seconds: How long hint highlights stay visible.
    """

    tick_seconds: float = 1.0
    peek_seconds: float = 0.9
    hint_seconds: float = 1.5


class GameController:
    """
    Owns one game session at a time and its timers.

    Every new game cancels the clock and any pending preview or hint
    removal before the old session is dropped.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        timing: Optional[TimingConfig] = None,
        rng: Optional[random.Random] = None,
        config: Optional[BoardConfig] = None,
    ) -> None:
        """
        Initialize the controller and start a first game.

        Args:
            scheduler: Source of delayed callbacks (e.g. an asyncio loop).
            timing: Clock and advisory durations.
            rng: Random source shared by every session.
            config: Board for the first game (beginner by default).
        """
        self.timing = timing or TimingConfig()
        self._rng = rng
        self._ticker = Ticker(scheduler, self.timing.tick_seconds, self._on_tick)
        self._peek_timer = DelayedAction(scheduler)
        self._hint_timer = DelayedAction(scheduler)

        self.message = MSG_READY
        self.peeking: Set[Position] = set()
        self.hint_safe: Set[Position] = set()
        self.hint_mines: Set[Position] = set()

        config = config or BoardConfig()
        self._session = self._create_session(config)

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def clock_ticking(self) -> bool:
        return self._ticker.running

    def new_game(self, rows: int, cols: int, num_mines: int) -> GameSession:
        """
        Replace the current game with a fresh one.

        Raises:
            ConfigurationError: If the configuration is invalid; the
                current game is kept in that case.
        """
        config = BoardConfig(rows, cols, num_mines)
        self._session = self._create_session(config)
        return self._session

    def new_game_from_preset(self, preset: str) -> GameSession:
        """Start a game from a preset name or a ``"RxCxM"`` string."""
        config = parse_preset(preset)
        self._session = self._create_session(config)
        return self._session

    def _create_session(self, config: BoardConfig) -> GameSession:
        self._ticker.stop()
        self._peek_timer.cancel()
        self._hint_timer.cancel()
        self.peeking = set()
        self._clear_hints()
        self.message = MSG_READY
        return GameSession.new_game(
            config.rows, config.cols, config.num_mines, self._rng
        )

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """Reveal a cell and update clock and message."""
        outcome = self._session.reveal(row, col)
        self._sync_clock()
        if outcome.changed_cells:
            if outcome.status == GameStatus.LOST:
                self.message = MSG_LOST
            elif outcome.status == GameStatus.WON:
                self.message = MSG_WON
        return outcome

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """Toggle a flag; the first flag also starts the clock."""
        outcome = self._session.toggle_flag(row, col)
        self._sync_clock()
        return outcome

    def _sync_clock(self) -> None:
        if self._session.clock_running:
            self._ticker.start()
        else:
            self._ticker.stop()

    def _on_tick(self) -> None:
        self._session.tick()
        if not self._session.clock_running:
            self._ticker.stop()

    # ========================================================================
    # Advisory Markings
    # ========================================================================

    def peek(self) -> bool:
        """
        Briefly mark the hidden mines.

        Only available once mines exist and while the game is on.

        Returns:
            True if the preview was shown.
        """
        if not self._session.started or self._session.is_over:
            return False
        self.peeking = set(self._session.peek_mines())
        self._peek_timer.schedule(self.timing.peek_seconds, self._end_peek)
        return True

    def _end_peek(self) -> None:
        self.peeking = set()

    def hint(self) -> Optional[HintResult]:
        """
        Highlight the current deductions for a short time.

        Returns:
            The hint shown, or None when no hint could be computed.
        """
        if self._session.is_over:
            return None
        self._clear_hints()
        if not self._session.started:
            self.message = MSG_HINT_NEEDS_START
            return None

        result = self._session.query_hint()
        if result.is_empty:
            self.message = MSG_NO_HINT
            return result

        logger.debug(
            "Hint: %d safe, %d mines", len(result.safe), len(result.likely_mine)
        )
        self.hint_safe = set(result.safe)
        self.hint_mines = set(result.likely_mine)
        self.message = MSG_SAFE_HINT if result.safe else MSG_MINE_HINT
        self._hint_timer.schedule(self.timing.hint_seconds, self._end_hint)
        return result

    def _clear_hints(self) -> None:
        self._hint_timer.cancel()
        self.hint_safe = set()
        self.hint_mines = set()

    def _end_hint(self) -> None:
        self.hint_safe = set()
        self.hint_mines = set()
        self.message = MSG_READY
