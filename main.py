"""
Command line entry point for land odds.

Example:
    land-odds --lands 20 --hand-size 6 2 3
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from controllers.land_odds_controller import LandOddsController, parse_target_tokens
from services.settings_service import LandOddsSettings, SettingsService
from services.split_probability import DeckConfiguration
from utils import constants


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="land-odds",
        description="Chance of drawing an exact number of lands in a hand",
    )
    parser.add_argument(
        "-l",
        "--lands",
        type=int,
        required=True,
        help="Number of lands in the deck",
    )
    parser.add_argument(
        "-s",
        "--hand-size",
        type=int,
        help="Cards in the hand (default: saved setting, else 7)",
    )
    parser.add_argument(
        "-d",
        "--deck-size",
        type=int,
        help="Cards in the deck, 1-250 (default: saved setting, else 60)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Settings file to read defaults from (default: per-user config directory)",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the hand and deck size used for this run",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="TARGET",
        help="Land counts to check, or 'all' for every count up to the hand size",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.deck_size is not None and not (
        constants.MIN_DECK_SIZE <= args.deck_size <= constants.MAX_DECK_SIZE
    ):
        parser.error(
            f"--deck-size must be between {constants.MIN_DECK_SIZE} and "
            f"{constants.MAX_DECK_SIZE}, got {args.deck_size}"
        )

    settings_service = SettingsService(args.settings)
    saved = settings_service.load()
    deck_size = args.deck_size if args.deck_size is not None else saved.deck_size
    hand_size = args.hand_size if args.hand_size is not None else saved.hand_size

    try:
        targets = parse_target_tokens(args.targets, hand_size)
    except ValueError as exc:
        parser.error(str(exc))

    deck = DeckConfiguration(deck_count_of_type=args.lands, hand_size=hand_size, deck_size=deck_size)
    try:
        report = LandOddsController(deck).build_report(targets)
    except ValueError as exc:
        logger.error(f"Cannot compute land odds: {exc}")
        return 1

    for line in report.lines():
        print(line)

    if args.save_defaults:
        if not settings_service.save(LandOddsSettings(deck_size=deck_size, hand_size=hand_size)):
            logger.error(f"Could not save defaults to {settings_service.settings_path}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
