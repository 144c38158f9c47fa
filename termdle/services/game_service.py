"""
Game Service

Contains the game state machine: attempt history, the input buffer and the
phase of the current round. Key events are applied one at a time and every
invalid input is absorbed as a no-op.
"""

from typing import List, Optional
from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import EventKind, GameView, GuessAttempt, KeyEvent, Phase
from ..utils.game_logger import GameLogger, get_game_logger
from .word_oracle import WordOracle


class GameService:
    """
    Single-player game state machine.

    This class handles:
    - Input buffer editing and live word validation
    - Guess submission and win/loss detection
    - New-round resets and exit requests
    - Read-only snapshots for the renderer
    """

    def __init__(self, oracle: WordOracle, debug_mode: bool = False,
                 logger: Optional[GameLogger] = None):
        self.oracle = oracle
        self.debug_mode = debug_mode
        self.logger = logger or get_game_logger()

        self.phase = Phase.PLAYING
        self.won = False
        self.attempts: List[GuessAttempt] = []
        self.current_input = ""
        self.input_is_valid_word = False
        self.exit_requested = False
        self.round_number = 0

        self._start_round()

    def _start_round(self) -> None:
        self.oracle.choose_secret_word()
        self.round_number += 1
        details = {'word_count': self.oracle.word_count}
        if self.debug_mode:
            details['secret_word'] = self.oracle.secret_word
        self.logger.log_game_event('round_started', self.round_number, **details)

    def handle_event(self, event: KeyEvent) -> None:
        """
        Applies one classified key event.

        Args:
            event: Key event classified for the current phase
        """
        if self.exit_requested:
            return

        if event.kind == EventKind.QUIT:
            self._request_exit('quit')
            return

        if self.phase == Phase.PLAYING:
            self._handle_playing(event)
        else:
            self._handle_round_over(event)

    def _handle_playing(self, event: KeyEvent) -> None:
        if event.kind == EventKind.LETTER:
            if len(self.current_input) < WORD_LENGTH:
                self.current_input += event.char
                self._refresh_validity()
        elif event.kind == EventKind.BACKSPACE:
            if self.current_input:
                self.current_input = self.current_input[:-1]
                self._refresh_validity()
        elif event.kind == EventKind.SUBMIT:
            self._submit()

    def _handle_round_over(self, event: KeyEvent) -> None:
        if event.kind == EventKind.CONFIRM:
            self.logger.log_user_action('new_round', self.round_number)
            self.reset()
        elif event.kind == EventKind.DECLINE:
            self._request_exit('decline')

    def _refresh_validity(self) -> None:
        self.input_is_valid_word = self.oracle.is_valid_word(self.current_input)

    def _submit(self) -> None:
        if not self.input_is_valid_word or len(self.attempts) >= MAX_ATTEMPTS:
            return

        guess = self.current_input
        attempt = GuessAttempt(letters=guess, match_result=self.oracle.check_guess(guess))
        self.attempts.append(attempt)
        self.current_input = ""
        self.input_is_valid_word = False

        self.logger.log_user_action(
            'submit_guess', self.round_number,
            guess=guess,
            attempt=len(self.attempts),
            result=[match.value for match in attempt.match_result]
        )

        if attempt.is_winning:
            self._finish_round(won=True)
        elif len(self.attempts) >= MAX_ATTEMPTS:
            self._finish_round(won=False)

    def _finish_round(self, won: bool) -> None:
        self.phase = Phase.ROUND_OVER
        self.won = won
        self.logger.log_game_event(
            'round_won' if won else 'round_lost', self.round_number,
            secret_word=self.oracle.secret_word,
            attempts_used=len(self.attempts)
        )

    def _request_exit(self, reason: str) -> None:
        self.exit_requested = True
        self.logger.log_user_action('exit_requested', self.round_number, reason=reason)

    def reset(self) -> None:
        """Starts a new round on the same game object."""
        self.attempts = []
        self.current_input = ""
        self.input_is_valid_word = False
        self.won = False
        self.phase = Phase.PLAYING
        self._start_round()

    def view(self) -> GameView:
        """
        Returns a read-only snapshot for rendering.

        The secret word is only included in debug mode, or once the round
        is over so the end screen can reveal it.
        """
        slots = list(self.attempts) + [None] * (MAX_ATTEMPTS - len(self.attempts))
        reveal = self.debug_mode or self.phase == Phase.ROUND_OVER
        return GameView(
            phase=self.phase,
            won=self.won,
            attempts=tuple(slots),
            current_input=self.current_input,
            input_is_valid_word=self.input_is_valid_word,
            debug_mode=self.debug_mode,
            secret_word=self.oracle.secret_word if reveal else None
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(oracle: WordOracle, debug_mode: bool = False) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(oracle, debug_mode=debug_mode)
    return _game_service
