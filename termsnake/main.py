"""
Command line entry point for termsnake.

Usage:
    termsnake
    termsnake --height 15 --width 30 --tick-seconds 0.2
    termsnake --player random --seed 7 --max-rounds 200 --json

Settings not given on the command line are read from the environment
(SNAKE_HEIGHT, SNAKE_WIDTH, ...), which may be populated from a .env file.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import GameConfig, load_environment
from .engine import run_game
from .players import KeyboardPlayer, RandomPlayer
from .services.renderer import TerminalRenderer

logger = logging.getLogger(__name__)

PLAYERS = ("keyboard", "random")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play snake in the terminal. Type w/a/s/d (or up/left/down/right) and Enter to steer."
    )
    parser.add_argument("--height", type=int, default=None,
                        help="Number of rows on the board (minimum 3)")
    parser.add_argument("--width", type=int, default=None,
                        help="Number of columns on the board (minimum 3)")
    parser.add_argument("--tick-seconds", type=float, default=None,
                        help="Pause between ticks in seconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--max-rounds", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--player", choices=PLAYERS, default="keyboard",
                        help="Who steers the snake")
    parser.add_argument("--no-reversal", action="store_true",
                        help="Ignore requests to turn straight back")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...); logs go to stderr")
    parser.add_argument("--json", action="store_true",
                        help="Print the result summary as JSON after the game")
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Environment settings overridden by any flags that were given."""
    config = GameConfig.from_env()
    if args.height is not None:
        config.height = args.height
    if args.width is not None:
        config.width = args.width
    if args.tick_seconds is not None:
        config.tick_seconds = args.tick_seconds
    if args.seed is not None:
        config.seed = args.seed
    if args.max_rounds is not None:
        config.max_rounds = args.max_rounds
    if args.no_reversal:
        config.allow_reversal = False
    if args.log_level is not None:
        config.log_level = args.log_level.upper()
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    load_environment()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.player == "random":
        player = RandomPlayer(seed=config.seed, allow_reversal=config.allow_reversal)
    else:
        player = KeyboardPlayer()

    try:
        result = run_game(config, renderer=TerminalRenderer(), player=player)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print(result.message)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
