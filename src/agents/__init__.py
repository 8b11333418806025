"""
Minesweeper agents.

Provides players for the Gymnasium environment:
- RandomAgent: Baseline random selection
- HintAgent: Plays deduced safe cells, guesses otherwise
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .hint_agent import HintAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "HintAgent",
]
