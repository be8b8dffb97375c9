"""
Play the marine dive game in an Arcade window.

Usage:
    python -m game.marine.play --name Ana --leaderboard ./scores.json

The display name is remembered next to the leaderboard file, so later runs
can leave out ``--name``.
"""

import argparse
import logging

import arcade

from .config import DiveConfig
from .leaderboard import Leaderboard, attach_leaderboard, format_board
from .session import Session
from .window import PlayWindow


def main():
    parser = argparse.ArgumentParser(description="Play the marine dive game")
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Display name saved with your score (default: last name used)",
    )
    parser.add_argument(
        "--leaderboard",
        type=str,
        default="./leaderboard.json",
        help="Leaderboard JSON file (default: ./leaderboard.json)",
    )
    parser.add_argument(
        "--clear-leaderboard",
        action="store_true",
        help="Delete all stored scores before playing",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    leaderboard = Leaderboard(args.leaderboard)
    if args.clear_leaderboard:
        leaderboard.clear()
        print(f"Cleared {args.leaderboard}")

    session = Session(DiveConfig())
    name = attach_leaderboard(session, leaderboard, args.name)

    print(f"Diver: {name or session.config.default_display_name}")
    print("Top dives:")
    for row in format_board(leaderboard.load(), highlight=name):
        print(row)

    PlayWindow(session, leaderboard)
    arcade.run()


if __name__ == "__main__":
    main()
