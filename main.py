#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
    python main.py demo [--games N] [--seed S]
    python main.py scores
"""
import argparse
import logging
import os
import random
import time
from pathlib import Path
from typing import Optional

import numpy as np

from src.minesweeper import (
    Board,
    BoardConfig,
    BestTimeStore,
    MinesweeperEnv,
    PRESETS,
    format_time,
    render_board,
    render_status,
)
from src.minesweeper.scores import DEFAULT_SCORES_PATH


HELP_TEXT = "Commands: r X Y (reveal), f X Y (flag), n (new game), q (menu)"


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Start from the chosen preset and apply any explicit overrides."""
    preset = PRESETS[args.difficulty]
    return BoardConfig(
        width=args.width or preset.width,
        height=args.height or preset.height,
        mine_count=args.mines or preset.mine_count,
    )


def parse_move(line: str):
    """Parse ``r X Y`` / ``f X Y`` into (command, x, y), or None."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    config = build_config(args)
    board = Board(config, rng=random.Random(args.seed))
    store = BestTimeStore(args.scores_file)

    print(f"Board: {config.width}x{config.height} with {config.mine_count} mines")
    print(HELP_TEXT)

    while True:
        board.tick()
        print()
        print(render_board(board, coordinates=True))
        print(render_status(board))

        if not board.is_playing:
            report_result(board, store)
            print("Press n for a new game or q to return to the menu.")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line == "q":
            break
        if line == "n":
            board.reset()
            continue

        move = parse_move(line)
        if move is None:
            print(HELP_TEXT)
            continue

        command, x, y = move
        if command == "r":
            board.reveal(x, y)
        else:
            board.toggle_flag(x, y)


def report_result(board: Board, store: BestTimeStore) -> None:
    """Print the outcome of a finished game and record wins."""
    if board.is_lost:
        print("*** GAME OVER ***")
        return

    print(f"*** YOU WIN! *** Time: {format_time(board.elapsed_seconds)}")
    if store.record(board):
        print("New best time!")


def demo(args: argparse.Namespace) -> None:
    """Watch random reveals play out."""
    config = build_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi", seed=args.seed)
    rng = np.random.default_rng(args.seed)
    num_cells = config.width * config.height

    wins = 0

    for game in range(args.games):
        obs, info = env.reset()
        done = False
        step = 0

        while not done:
            mask = env.get_action_mask()[:num_cells]
            action = int(rng.choice(np.where(mask)[0]))

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if args.delay > 0:
                clear_screen()
                print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
                print(f"Wins so far: {wins}")
                print(f"Last move: ({action % config.width}, {action // config.width})\n")
                print(env.render())
                time.sleep(args.delay)

        if info["phase"] == "WON":
            wins += 1
        print(
            f"Game {game + 1}/{args.games} | "
            f"{info['phase']} | "
            f"Steps: {step} | "
            f"Revealed: {info['revealed']}/{info['total_safe']}"
        )

    print(f"\n=== Final: {wins}/{args.games} wins ({100*wins/args.games:.0f}%) ===")


def scores(args: argparse.Namespace) -> None:
    """Show stored best times."""
    times = BestTimeStore(args.scores_file).all()
    if not times:
        print("No games won yet.")
        return

    print(f"{'Board':<12} {'Best':>6}")
    print("-" * 19)
    for key, seconds in sorted(times.items()):
        print(f"{key:<12} {format_time(seconds):>6}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board selection flags shared by play and demo."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default="intermediate",
        help="Preset board size",
    )
    parser.add_argument("--width", type=int, default=None, help="Override columns")
    parser.add_argument("--height", type=int, default=None, help="Override rows")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")
    parser.add_argument("--seed", type=int, default=None, help="Seed for mine placement")


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play, watch and keep best times"
    )
    parser.add_argument(
        "--scores-file",
        type=Path,
        default=DEFAULT_SCORES_PATH,
        help="Where best times are stored",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine phase changes"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.0, help="Delay between moves"
    )

    subparsers.add_parser("scores", help="Show best times")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    elif args.command == "scores":
        scores(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
