"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import EventKind, GameView, GuessAttempt, KeyEvent, LetterMatch, Phase

__all__ = ['EventKind', 'GameView', 'GuessAttempt', 'KeyEvent', 'LetterMatch', 'Phase']
