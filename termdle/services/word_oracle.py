"""
Word Oracle Service

Owns the word pool, picks secret words, validates guesses and computes
per-letter match results.
"""

import random
from collections import Counter
from typing import FrozenSet, Iterable, Optional, Tuple
from ..config.game_settings import WORD_LENGTH, load_word_source, validate_word_list_integrity
from ..models.game import LetterMatch


class WordOracle:
    """
    Word pool and secret-word holder for the game.

    This class handles:
    - Loading the static word source once per process
    - Uniform random selection of the secret word
    - Word validation against the pool
    - Letter matching with duplicate-aware counting
    """

    def __init__(self, word_source: Iterable[str], rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._words: FrozenSet[str] = self._load(word_source)
        self._pool: Tuple[str, ...] = tuple(sorted(self._words))
        self._secret_word: Optional[str] = None

    @classmethod
    def from_file(cls, path: str, rng: Optional[random.Random] = None) -> "WordOracle":
        """Build an oracle from a newline-delimited word list file."""
        return cls(load_word_source(path), rng=rng)

    @staticmethod
    def _load(word_source: Iterable[str]) -> FrozenSet[str]:
        """
        Keeps every entry of exactly WORD_LENGTH characters, case as stored.

        Raises:
            WordListError: If no entry survives the filter
        """
        words = frozenset(
            word for word in (line.strip() for line in word_source)
            if len(word) == WORD_LENGTH
        )
        validate_word_list_integrity(words)
        return words

    @property
    def secret_word(self) -> Optional[str]:
        return self._secret_word

    @property
    def word_count(self) -> int:
        return len(self._pool)

    def choose_secret_word(self) -> str:
        """Draws a new secret word uniformly from the pool and stores it."""
        self._secret_word = self._rng.choice(self._pool)
        return self._secret_word

    def is_valid_word(self, candidate: str) -> bool:
        return len(candidate) == WORD_LENGTH and candidate in self._words

    def check_guess(self, candidate: str) -> Tuple[LetterMatch, ...]:
        """
        Compares a guess with the secret word, position by position.

        Exact positions are resolved first. Remaining letters are credited
        as PARTIAL only while the secret still has unmatched copies of them,
        so no letter is credited more often than it occurs in the secret.

        Args:
            candidate: A WORD_LENGTH-letter guess

        Returns:
            Tuple of WORD_LENGTH LetterMatch values
        """
        secret = self._secret_word
        assert secret is not None, "check_guess called without an active round"
        assert len(candidate) == WORD_LENGTH, "check_guess called with a partial word"

        remaining = Counter(secret)
        result = [LetterMatch.INCORRECT] * WORD_LENGTH

        # First pass: exact positions
        for i, (guessed, expected) in enumerate(zip(candidate, secret)):
            if guessed == expected:
                result[i] = LetterMatch.CORRECT
                remaining[guessed] -= 1

        # Second pass: misplaced letters, limited by what is left
        for i, guessed in enumerate(candidate):
            if result[i] == LetterMatch.CORRECT:
                continue
            if remaining[guessed] > 0:
                result[i] = LetterMatch.PARTIAL
                remaining[guessed] -= 1

        return tuple(result)


# Global service instance
_word_oracle = None


def get_word_oracle() -> Optional[WordOracle]:
    """Get the global word oracle instance."""
    return _word_oracle


def initialize_word_oracle(path: str, rng: Optional[random.Random] = None) -> WordOracle:
    """Initialize the global word oracle instance from a word list file."""
    global _word_oracle
    _word_oracle = WordOracle.from_file(path, rng=rng)
    return _word_oracle
