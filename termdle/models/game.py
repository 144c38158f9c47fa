"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class LetterMatch(Enum):
    """How one guessed letter compares with the secret word."""
    CORRECT = "correct"
    PARTIAL = "partial"
    INCORRECT = "incorrect"


class Phase(Enum):
    """Screen/game phase of the state machine."""
    PLAYING = "playing"
    ROUND_OVER = "round_over"


class EventKind(Enum):
    """Classified key events understood by the state machine."""
    LETTER = "letter"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    CONFIRM = "confirm"
    DECLINE = "decline"
    QUIT = "quit"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single classified key press. `char` is only set for letters."""
    kind: EventKind
    char: Optional[str] = None


@dataclass(frozen=True)
class GuessAttempt:
    """One submitted guess together with its per-letter match result."""
    letters: str
    match_result: Tuple[LetterMatch, ...]

    @property
    def is_winning(self) -> bool:
        return all(match == LetterMatch.CORRECT for match in self.match_result)


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot of the game state used for rendering."""
    phase: Phase
    won: bool
    attempts: Tuple[Optional[GuessAttempt], ...]  # Always MAX_ATTEMPTS slots
    current_input: str
    input_is_valid_word: bool
    debug_mode: bool
    secret_word: Optional[str] = None  # Only set in debug mode or once the round is over

    @property
    def attempts_used(self) -> int:
        return sum(1 for attempt in self.attempts if attempt is not None)
