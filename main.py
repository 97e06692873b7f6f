#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py simulate [--difficulty NAME] [--games N] [--seed S]
                            [--store PATH]
    python main.py leaderboard [--difficulty NAME] [--store PATH]
    python main.py name VALUE [--store PATH]
"""
import argparse
import logging
from typing import List, Optional

from src.agents import RandomAgent
from src.game.difficulty import difficulty_names, get_difficulty
from src.game.engine import MinesweeperEngine
from src.game.environment import MinesweeperEnv
from src.game.storage import JsonFileStorage


DEFAULT_STORE = "minesweeper_state.json"


def simulate(args: argparse.Namespace) -> None:
    """Play games with the random agent, one simulated second per move."""
    difficulty = get_difficulty(args.difficulty)
    engine = MinesweeperEngine(JsonFileStorage(args.store))
    env = MinesweeperEnv(difficulty, engine=engine)
    agent = RandomAgent(difficulty.size, seed=args.seed)

    print(
        f"Simulating {args.games} {difficulty.name} games as "
        f"{engine.player_name} ({difficulty.size}x{difficulty.size}, "
        f"{difficulty.num_mines} mines)"
    )

    total_score = 0
    for game in range(args.games):
        obs, _ = env.reset(seed=args.seed if game == 0 else None)
        agent.reset()
        done = False
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            engine.tick(env.session)
            done = terminated or truncated

        session = env.session
        total_score += session.score
        print(
            f"Game {game + 1}/{args.games} | {info['game_state']} | "
            f"Score: {session.score} | Time: {session.formatted_time} | "
            f"Revealed: {info['revealed']}/{info['total_safe']}"
        )

    print(f"\nWins: {engine.wins}/{args.games}")
    print(f"Average score: {total_score / max(args.games, 1):.1f}")
    print_leaderboard(engine, difficulty.name)


def leaderboard(args: argparse.Namespace) -> None:
    """Print the stored leaderboard."""
    engine = MinesweeperEngine(JsonFileStorage(args.store))
    names = [args.difficulty] if args.difficulty else difficulty_names()
    for name in names:
        print_leaderboard(engine, get_difficulty(name).name)


def set_name(args: argparse.Namespace) -> None:
    """Store the display name used for leaderboard entries."""
    engine = MinesweeperEngine(JsonFileStorage(args.store))
    engine.player_name = args.value
    print(f"Display name set to {engine.player_name}")


def print_leaderboard(engine: MinesweeperEngine, difficulty: str) -> None:
    """Print one difficulty's top scores."""
    print(f"\nLeaderboard ({difficulty})")
    entries = engine.get_leaderboard(difficulty)
    if not entries:
        print("  (no scores yet)")
    for rank, entry in enumerate(entries, start=1):
        print(f"  {rank}. {entry.name} - {entry.score} pts")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the selected command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--store", default=DEFAULT_STORE, help="Path to the JSON state file"
    )
    common.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    parser = argparse.ArgumentParser(description="Minesweeper engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sim_parser = subparsers.add_parser(
        "simulate", parents=[common], help="Play random games"
    )
    sim_parser.add_argument(
        "--difficulty", default="Medium", choices=difficulty_names()
    )
    sim_parser.add_argument("--games", type=int, default=10)
    sim_parser.add_argument("--seed", type=int, default=None)
    sim_parser.set_defaults(func=simulate)

    lb_parser = subparsers.add_parser(
        "leaderboard", parents=[common], help="Show top scores"
    )
    lb_parser.add_argument("--difficulty", choices=difficulty_names())
    lb_parser.set_defaults(func=leaderboard)

    name_parser = subparsers.add_parser(
        "name", parents=[common], help="Set display name"
    )
    name_parser.add_argument("value")
    name_parser.set_defaults(func=set_name)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
