"""
Minesweeper game engine.

Provides the board state machine (deferred mine placement, cascade
reveal, win/loss), flagging, a local hint solver, timed front-end
helpers and a Gymnasium environment for agents.
"""
from .cell import Cell, CellState
from .errors import ConfigurationError, InvariantViolation, MinefieldError
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    clamp_config,
    neighbor_positions,
    parse_preset,
)
from .hints import HintResult, find_hints, find_hints_in_observation
from .session import FlagOutcome, GameSession, GameStatus, RevealOutcome
from .scheduling import DelayedAction, Ticker
from .controller import GameController, TimingConfig
from .environment import MinesweeperEnv, render_board

__all__ = [
    "Cell",
    "CellState",
    "ConfigurationError",
    "InvariantViolation",
    "MinefieldError",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "clamp_config",
    "neighbor_positions",
    "parse_preset",
    "HintResult",
    "find_hints",
    "find_hints_in_observation",
    "FlagOutcome",
    "GameSession",
    "GameStatus",
    "RevealOutcome",
    "DelayedAction",
    "Ticker",
    "GameController",
    "TimingConfig",
    "MinesweeperEnv",
    "render_board",
]
