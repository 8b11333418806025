"""
Unit tests for agents and the evaluator.
"""
import numpy as np
from agents import HintAgent, RandomAgent
from evaluation import Evaluator
from minefield import BoardConfig


def hidden_obs(rows: int = 4, cols: int = 4) -> np.ndarray:
    return np.full((rows, cols), -1, dtype=np.int8)


class TestRandomAgent:
    """Test the baseline agent."""

    def test_picks_only_valid_actions(self) -> None:
        """Random choices stay within the mask."""
        agent = RandomAgent(4, 4, seed=0)
        obs = hidden_obs()
        obs[0, :] = 0
        for _ in range(50):
            row, col = agent.action_to_position(agent.select_action(obs))
            assert row != 0


class TestHintAgent:
    """Test the deduction-driven agent."""

    def test_first_move_is_a_corner(self) -> None:
        """Opening moves go to a corner."""
        for seed in range(10):
            agent = HintAgent(4, 5, seed=seed)
            action = agent.select_action(hidden_obs(4, 5))
            assert action in (0, 4, 15, 19)

    def test_plays_deduced_safe_cell(self) -> None:
        """A cell proven safe is played before any guess."""
        agent = HintAgent(4, 4, seed=0)
        agent.select_action(hidden_obs())

        obs = hidden_obs()
        obs[0, 0] = 1
        obs[0, 1] = -2
        action = agent.select_action(obs)

        assert agent.action_to_position(action) == (1, 0)
        assert agent.certain_moves == 1

    def test_guess_avoids_known_mine(self) -> None:
        """Guesses never land on a deduced mine."""
        obs = hidden_obs()
        obs[0, 0] = 1
        obs[1, 0] = 1
        obs[1, 1] = 1
        for seed in range(30):
            agent = HintAgent(4, 4, seed=seed)
            agent.select_action(hidden_obs())
            action = agent.select_action(obs)
            assert agent.action_to_position(action) != (0, 1)
            assert agent.guesses_made == 1

    def test_reset_restores_first_move(self) -> None:
        """After reset the agent opens in a corner again."""
        agent = HintAgent(4, 4, seed=0)
        agent.select_action(hidden_obs())
        agent.reset()
        assert agent.select_action(hidden_obs()) in (0, 3, 12, 15)


class TestEvaluator:
    """Test the evaluation harness."""

    def test_evaluate_reports_metrics(self) -> None:
        """Evaluation returns bounded statistics."""
        evaluator = Evaluator(BoardConfig(4, 4, 1), num_episodes=5, seed=0)
        results = evaluator.evaluate(HintAgent(4, 4, seed=0))

        assert set(results) == {"win_rate", "avg_reward", "avg_steps", "avg_revealed"}
        assert 0.0 <= results["win_rate"] <= 1.0
        assert results["avg_steps"] >= 1.0

    def test_compare_covers_every_agent(self) -> None:
        """Comparison evaluates each named agent."""
        evaluator = Evaluator(BoardConfig(4, 4, 2), num_episodes=3)
        results = evaluator.compare({
            "random": RandomAgent(4, 4, seed=1),
            "hint": HintAgent(4, 4, seed=1),
        })
        assert set(results) == {"random", "hint"}
