#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--seed S]

Commands during play:
    <row> <col>   click a cell (uncover or flag, depending on mode)
    m             switch between uncover and flag mode
    n             start a new game
    q             quit
"""
import argparse

from src.sweeper.board import BoardConfig, IndexOutOfBounds
from src.sweeper.session import GameSession

HELP_TEXT = "Enter '<row> <col>' to click, 'm' to switch mode, 'n' for a new game, 'q' to quit."


def handle_command(session: GameSession, line: str) -> bool:
    """
    Apply one line of player input to the session.

    Returns:
        False when the player asked to quit, True otherwise.
    """
    parts = line.split()
    if not parts:
        return True

    command = parts[0].lower()
    if command == "q":
        return False
    if command == "m":
        mode = session.toggle_mode()
        print(f"Mode: {mode.name.capitalize()}")
        return True
    if command == "n":
        session.new_game()
        return True

    try:
        row, col = (int(part) for part in parts)
    except ValueError:
        print(HELP_TEXT)
        return True

    try:
        outcome = session.click(row, col)
    except IndexOutOfBounds as err:
        print(err)
        return True

    if outcome is None:
        print("The game is over. Press 'n' for a new game.")
    elif not outcome.applied:
        print("Nothing to do there.")
    return True


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    session = GameSession(BoardConfig(size=args.size), seed=args.seed)
    print(HELP_TEXT)

    while True:
        print()
        print(session.render())
        try:
            line = input("> ")
        except EOFError:
            break
        if not handle_command(session, line):
            break


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--size", type=int, default=10, help="Board side length"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
