#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py evaluate [--agent {random,hint}] [--games N] [--preset P]
    python main.py compare [--games N] [--preset P]
"""
import argparse
import logging

from agents import HintAgent, RandomAgent
from evaluation import Evaluator
from minefield import BoardConfig, ConfigurationError, parse_preset

logger = logging.getLogger(__name__)


def make_agent(name: str, config: BoardConfig):
    """Build an agent by CLI name."""
    if name == "random":
        return RandomAgent(config.rows, config.cols)
    return HintAgent(config.rows, config.cols)


def evaluate(args: argparse.Namespace, config: BoardConfig) -> None:
    """Evaluate a single agent and print results."""
    agent = make_agent(args.agent, config)
    evaluator = Evaluator(config, num_episodes=args.games)

    print(f"\nEvaluating {args.agent} agent over {args.games} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def compare(args: argparse.Namespace, config: BoardConfig) -> None:
    """Compare all agents."""
    agents = {
        "Random": make_agent("random", config),
        "Hint": make_agent("hint", config),
    }

    evaluator = Evaluator(config, num_episodes=args.games)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Evaluate Minesweeper agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--preset", default="beginner",
        help="Board preset name or ROWSxCOLSxMINES (default: beginner)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--agent",
        choices=["random", "hint"],
        default="hint",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = parse_preset(args.preset)
    except ConfigurationError as error:
        logger.error("Invalid preset: %s", error)
        raise SystemExit(2)

    if args.command == "evaluate":
        evaluate(args, config)
    elif args.command == "compare":
        compare(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
