"""
Game Logger Module for Termdle

This module provides logging for player actions and game events. The
terminal owns stdout while a game is running, so detailed entries go to a
dated log file and only warnings and errors reach the console.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Player action tracking (submissions, new rounds, exit)
    - Game event logging (round start, wins, losses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('termdle')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        if self.log_file is not None:
            # File handler for detailed logs
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self, action: str, round_number: Optional[int] = None, **kwargs):
        """
        Log player actions with context.

        Args:
            action: Type of action (e.g., 'submit_guess', 'new_round', 'quit')
            round_number: Round counter if applicable
            **kwargs: Additional details to log
        """
        details = {
            'round': round_number,
            **kwargs
        }
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_game_event(self, event: str, round_number: Optional[int] = None, **kwargs):
        """
        Log game-specific events (round start, wins, losses).

        Args:
            event: Type of game event (e.g., 'round_won', 'round_lost')
            round_number: Round counter if applicable
            **kwargs: Additional game details
        """
        details = {
            'round': round_number,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self, error: Exception, action: str):
        """
        Log errors with context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance, created by initialize_game_logger()
_game_logger = None


def get_game_logger() -> GameLogger:
    """Get the global game logger, falling back to a console-only logger."""
    global _game_logger
    if _game_logger is None:
        _game_logger = GameLogger(log_dir=None)
    return _game_logger


def initialize_game_logger(log_dir: Optional[str] = "logs", level: str = "INFO") -> GameLogger:
    """Initialize the global game logger instance."""
    global _game_logger
    _game_logger = GameLogger(log_dir=log_dir, level=level)
    return _game_logger
