"""
Termdle - Main Entry Point

Parses the command line, initializes all services and starts the
terminal game.
"""

import argparse
import sys
from termdle import __version__, create_game
from termdle.config import WordListError, get_config
from termdle.ui import run
from termdle.utils.game_logger import get_game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termdle",
        description="A simple terminal version of the Wordle game"
    )
    parser.add_argument("-d", "--debug", action="store_true", default=None,
                        help="Start Termdle in debug mode")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main function to initialize services and start the game."""
    args = build_parser().parse_args(argv)
    config_class = get_config()

    try:
        game = create_game(config_class, debug_mode=args.debug)
    except WordListError as e:
        get_game_logger().log_error(e, 'startup')
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    game_logger = get_game_logger()
    game_logger.logger.info(
        f"Termdle starting - {game.oracle.word_count} words loaded, debug mode: {game.debug_mode}"
    )

    try:
        run(game)
    except KeyboardInterrupt:
        game_logger.logger.info("Termdle shutting down (KeyboardInterrupt)")

    game_logger.logger.info("Termdle exited")
    return 0


if __name__ == '__main__':
    sys.exit(main())
