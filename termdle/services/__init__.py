"""
Services Package

Contains all game logic and service classes.
"""

from .word_oracle import WordOracle, get_word_oracle, initialize_word_oracle
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordOracle', 'get_word_oracle', 'initialize_word_oracle',
    'GameService', 'get_game_service', 'initialize_game_service'
]
