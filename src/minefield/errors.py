"""
Exceptions raised by the Minesweeper engine.

Configuration problems are reported to the caller; invariant violations
signal engine bugs and are never caught internally.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board dimensions or mine count are outside their allowed bounds."""


class InvariantViolation(MinefieldError, AssertionError):
    """Internal board state broke an invariant (a bug, not a user error)."""
