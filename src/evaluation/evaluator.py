"""
Evaluation harness for Minesweeper agents.

Plays batches of games in the Gymnasium environment and reports
win rate and progress statistics.
"""
import logging
from typing import Dict, Optional

from agents.base_agent import BaseAgent
from minefield.board import BoardConfig
from minefield.environment import MinesweeperEnv

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Evaluate and compare multiple agents.

    Every agent plays the same number of games on the same board size.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 500,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of games per agent.
            max_steps: Maximum moves per game before it is abandoned.
            seed: Seed for the first game's mine layout.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps, avg_revealed.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                valid_actions = env.get_action_mask()
                action = agent.select_action(observation, valid_actions)
                observation, reward, terminated, truncated, info = env.step(
                    action
                )
                total_reward += float(reward)
                total_steps += 1

                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += info.get("revealed", 0)

        logger.debug(
            "%s won %d of %d games", type(agent).__name__, wins,
            self.num_episodes,
        )
        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(agent)
        return results
