#!/usr/bin/env python3
"""Watch the hint agent play Minesweeper with a live clock."""
import asyncio
import logging
import os

from agents import HintAgent
from minefield import GameController, GameStatus, clamp_config, render_board


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show(controller: GameController, game: int, games: int, wins: int) -> None:
    session = controller.session
    clear_screen()
    print(f"=== Game {game + 1}/{games} | Wins so far: {wins} ===")
    print(
        f"Mines: {session.remaining_mine_display:>3}   "
        f"Time: {session.elapsed_seconds:03d}   {controller.message}\n"
    )
    print(render_board(session.board))


async def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10):
    """Run demo games on the running event loop."""
    config = clamp_config(size, size, mines)
    controller = GameController(asyncio.get_running_loop(), config=config)
    agent = HintAgent(config.rows, config.cols)

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")
    await asyncio.sleep(2)

    wins = 0
    for game in range(games):
        session = controller.new_game(config.rows, config.cols, config.num_mines)
        agent.reset()
        show(controller, game, games, wins)

        while not session.is_over:
            obs = session.board.get_observation()
            row, col = agent.action_to_position(agent.select_action(obs))

            # Flag every cell the solver is sure about before revealing
            for mine_row, mine_col in session.query_hint().likely_mine:
                if not session.board.get_cell(mine_row, mine_col).is_flagged:
                    controller.toggle_flag(mine_row, mine_col)

            controller.reveal(row, col)
            show(controller, game, games, wins)
            await asyncio.sleep(delay)

        if session.status == GameStatus.WON:
            wins += 1
        await asyncio.sleep(1.0)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN, 4-20)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    mines = args.mines if args.mines else int(args.size * args.size * 0.12)

    asyncio.run(demo(delay=args.delay, games=args.games, size=args.size, mines=mines))
