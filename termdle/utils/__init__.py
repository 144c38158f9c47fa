"""
Utilities Package

Contains utility functions and the game logger.
"""

from .helpers import centered_x, display_letters, round_over_message, wrap_text
from .game_logger import GameLogger, get_game_logger, initialize_game_logger

__all__ = [
    'centered_x', 'display_letters', 'round_over_message', 'wrap_text',
    'GameLogger', 'get_game_logger', 'initialize_game_logger'
]
