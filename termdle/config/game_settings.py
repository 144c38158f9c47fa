"""
Game Configuration Constants Module

Game rules and the static word source. All game parameters are
centralized here.
"""

from typing import Iterable, List, Final


class WordListError(ValueError):
    """Raised when the word source cannot produce a usable word pool."""


WORD_LENGTH: Final[int] = 5
"""Number of letters in every word of the game."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""


def load_word_source(path: str) -> List[str]:
    """
    Read the newline-delimited word source.

    Args:
        path: Location of the word list file

    Returns:
        List[str]: Raw lines of the file, line endings removed

    Raises:
        WordListError: If the file does not exist or cannot be read
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except OSError as e:
        raise WordListError(f"Word list file could not be read: {path} ({e})") from e


def validate_word_list_integrity(words: Iterable[str]) -> bool:
    """
    Validates a filtered word pool before a game can start.

    Checks that the pool is not empty and that every entry is exactly
    WORD_LENGTH characters long.

    Returns:
        bool: True if the pool passes all validation checks

    Raises:
        WordListError: If any validation check fails
    """
    words = list(words)
    if not words:
        raise WordListError(f"Word list contains no {WORD_LENGTH}-letter words")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise WordListError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

    return True
