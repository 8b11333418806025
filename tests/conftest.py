"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Deterministic Helpers
# ============================================================================

class ScriptedRandom(random.Random):
    """Random source whose ``randrange`` replays a fixed list of indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        super().__init__(0)
        self._indices = list(indices)

    def randrange(self, *args: Any, **kwargs: Any) -> int:
        return self._indices.pop(0)


def mines_at(cols: int, positions: Iterable[Tuple[int, int]]) -> ScriptedRandom:
    """Random source that places mines exactly at ``positions``."""
    return ScriptedRandom(row * cols + col for row, col in positions)


def build_session(
    rows: int, cols: int, positions: List[Tuple[int, int]]
) -> GameSession:
    """Session whose first reveal lays mines at ``positions``."""
    return GameSession.new_game(
        rows, cols, len(positions), rng=mines_at(cols, positions)
    )


def build_board(
    rows: int, cols: int, positions: List[Tuple[int, int]]
) -> Board:
    """Board with mines already laid at ``positions``."""
    board = Board(BoardConfig(rows, cols, len(positions)), mines_at(cols, positions))
    exclude_row, exclude_col = next(
        cell.position for cell in board.cells() if cell.position not in positions
    )
    board.seed_mines(exclude_row, exclude_col)
    return board


class FakeHandle:
    """Handle returned by ``FakeScheduler.call_later``."""

    def __init__(self, when: float, callback: Callable[..., Any], args: tuple) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock implementing ``call_later`` for timer tests."""

    def __init__(self) -> None:
        self.now = 0.0
        self._handles: List[FakeHandle] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback, args)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeHandle]:
        return [handle for handle in self._handles if not handle.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in time order."""
        end = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= end + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self._handles.remove(handle)
            self.now = handle.when
            handle.callback(*handle.args)
        self.now = end


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_session() -> Callable[..., GameSession]:
    """Factory for sessions with a forced mine layout."""
    return build_session


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for boards with mines already laid."""
    return build_board


@pytest.fixture
def make_rng() -> Callable[..., ScriptedRandom]:
    """Factory for random sources that lay mines at given positions."""
    return mines_at


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines (not yet seeded)."""
    return Board()


@pytest.fixture
def corner_mine_session() -> GameSession:
    """4x4 game with a single mine at (3, 3)."""
    return build_session(4, 4, [(3, 3)])


@pytest.fixture
def wall_session() -> GameSession:
    """4x4 game with a column of mines at col 2."""
    return build_session(4, 4, [(0, 2), (1, 2), (2, 2), (3, 2)])


@pytest.fixture
def split_session() -> GameSession:
    """4x4 game with mines at (0, 3) and (3, 3)."""
    return build_session(4, 4, [(0, 3), (3, 3)])


@pytest.fixture
def scheduler() -> FakeScheduler:
    """Manual clock for timer tests."""
    return FakeScheduler()


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
