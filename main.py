#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py evaluate [--preset NAME] [--games N] [--seed S]
    python main.py demo [--preset NAME] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper import PRESETS, MinesweeperEnv  # noqa: E402
from agents import EvaluationConfig, Evaluator, RandomAgent  # noqa: E402


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline agent on a preset board."""
    board = PRESETS[args.preset]
    config = EvaluationConfig(board=board, num_episodes=args.games, seed=args.seed)
    agent = RandomAgent(board.height, board.width, seed=args.seed)

    print(f"Evaluating Random agent over {args.games} games on {args.preset}...")
    results = Evaluator(config).evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def demo(args: argparse.Namespace) -> None:
    """Print every board state of one random game."""
    board = PRESETS[args.preset]
    env = MinesweeperEnv(config=board, render_mode="ansi")
    agent = RandomAgent(board.height, board.width, seed=args.seed)

    obs, info = env.reset(seed=args.seed)
    print(env.render())

    done = False
    while not done:
        action = agent.select_action(obs, env.get_action_mask())
        row, col = agent.action_to_position(action)
        obs, reward, terminated, truncated, info = env.step(action)
        done = terminated or truncated
        print(f"\nReveal ({row}, {col}) -> reward {reward}")
        print(env.render())

    print(f"\nGame finished: {info['game_state']} ({info['revealed']} cells revealed)")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine - simulate games against the engine"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (e.g. INFO, DEBUG)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")
    eval_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner", help="Board preset"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser = subparsers.add_parser("demo", help="Watch one random game")
    demo_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner", help="Board preset"
    )
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "evaluate":
        evaluate(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
