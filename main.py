#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--preset NAME | --width W --height H --mines N]
    python main.py autoplay [--games N] [--delay SEC]
"""
import argparse
import logging
import time
from typing import Optional, Tuple

from src.minefield.board import BoardConfig, PRESETS
from src.minefield.controller import GameController
from src.minefield.environment import MinesweeperEnv


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from a preset or explicit dimensions."""
    if args.width is None and args.height is None and args.mines is None:
        return PRESETS[args.preset]
    base = PRESETS[args.preset]
    return BoardConfig(
        width=args.width if args.width is not None else base.width,
        height=args.height if args.height is not None else base.height,
        num_mines=args.mines if args.mines is not None else base.num_mines,
    )


def parse_move(line: str) -> Optional[Tuple[str, int, int]]:
    """Parse 'u X Y' or 'f X Y'; None if the line is not a move."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("u", "f"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def print_status(controller: GameController) -> None:
    """Print the HUD line followed by the board."""
    counters = controller.counters
    print(
        f"Time: {int(controller.elapsed())}s | "
        f"Flags: {counters.total_flags} | "
        f"Mines: {counters.total_mines} | "
        f"Turns: {counters.turns}"
    )
    print(controller.board)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = build_config(args)
    controller = GameController.new_game(config, args.seed)

    print("Commands: 'u X Y' uncover, 'f X Y' flag, 'q' quit")
    print_status(controller)

    while not controller.is_over:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line == "q":
            break

        move = parse_move(line)
        if move is None:
            print(f"Unknown command: {line!r}")
            continue

        action, x, y = move
        if action == "u":
            controller.on_left_click(x, y)
        else:
            controller.on_right_click(x, y)
        print_status(controller)

    if controller.is_over:
        result = controller.play_state.phase.name
        print(f"\n*** {result} in {controller.elapsed():.1f}s ***")


def autoplay(args: argparse.Namespace) -> None:
    """Play random valid moves and report the win rate."""
    config = build_config(args)
    render_mode = "human" if args.delay > 0 else None
    env = MinesweeperEnv(config=config, render_mode=render_mode)

    wins = 0
    env.reset(seed=args.seed)
    env.action_space.seed(args.seed)

    for game in range(args.games):
        if game > 0:
            env.reset()
        done = False
        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, done, _, info = env.step(action)
            if args.delay > 0:
                print(f"\n=== Game {game + 1}/{args.games} | Turn {info['turns']} ===")
                env.render()
                time.sleep(args.delay)

        if info["play_state"] == "WON":
            wins += 1

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board selection flags shared by all commands."""
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner",
        help="Difficulty preset",
    )
    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Command line parser with the play and autoplay commands."""
    parser = argparse.ArgumentParser(description="Minefield - terminal Minesweeper")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    # Autoplay command
    autoplay_parser = subparsers.add_parser(
        "autoplay", help="Watch random moves play out"
    )
    add_board_arguments(autoplay_parser)
    autoplay_parser.add_argument(
        "--games", type=positive_int, default=10, help="Number of games to play"
    )
    autoplay_parser.add_argument(
        "--delay", type=float, default=0.0, help="Delay between moves"
    )
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        if args.command == "play":
            play(args)
        elif args.command == "autoplay":
            autoplay(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
