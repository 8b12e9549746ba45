#!/usr/bin/env python3
"""
CLI script to watch bots play Wizard.

This script seats bot players, plays every round of a game and prints the
tricks each bot announced and won.
"""

import argparse
import logging
import sys

from wizard.bots.simulator import BOT_TYPES, BotGameSimulator
from wizard.config import settings


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Watch bots play Wizard")
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help=f"Number of players ({settings.min_players}-{settings.max_players})",
    )
    parser.add_argument("--rounds", type=int, default=None, help="Rounds to play (default: all)")
    parser.add_argument(
        "--strategy",
        choices=sorted(BOT_TYPES),
        default=settings.default_bot_strategy,
        help="Strategy used by every bot",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log trick evaluation")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        simulator = BotGameSimulator(
            num_players=args.players,
            bot_types=[args.strategy] * args.players,
            seed=args.seed,
            max_rounds=args.rounds,
        )
        simulator.setup_game()
    except ValueError as exc:
        parser.error(str(exc))

    simulator.play_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())
