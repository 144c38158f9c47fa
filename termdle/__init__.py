"""
Termdle Game Package

A terminal version of the five-letter word-guessing game, split into
configuration, models, services, input controllers and the curses UI.
"""

from .config import Config

__version__ = "0.1.0"


def create_game(config_class=Config, debug_mode=None):
    """
    Factory for a ready-to-play game service.

    Args:
        config_class: Configuration class to use
        debug_mode: Overrides config_class.DEBUG when not None

    Returns:
        GameService with its word oracle and logger initialized

    Raises:
        WordListError: If the configured word list yields no usable words
    """
    from .services.game_service import initialize_game_service
    from .services.word_oracle import initialize_word_oracle
    from .utils.game_logger import initialize_game_logger

    if debug_mode is None:
        debug_mode = config_class.DEBUG

    initialize_game_logger(config_class.LOG_DIR, config_class.LOG_LEVEL)
    oracle = initialize_word_oracle(config_class.WORD_LIST_PATH)
    return initialize_game_service(oracle, debug_mode=debug_mode)
