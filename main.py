"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, rules, match flow, AI)
- Storage (persisted scoreboard)
- UI (menu, board drawing, human input)

Run this script to play TicTacToe in a terminal!
"""

import argparse
import logging
import random
import sys

from storage.config import StorageConfig
from storage.scoreboard import ScoreboardStore
from ui import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--scoreboard",
        default=StorageConfig.SCOREBOARD_FILE,
        help="Scoreboard file (default: %(default)s)"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the easy computer's random moves"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log match events to stderr"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    ui = ConsoleUI(
        store=ScoreboardStore(args.scoreboard),
        clear_screen=not args.no_clear,
        rng=random.Random(args.seed)
    )

    try:
        ui.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
