"""
Pytest configuration for Termdle tests.

Provides a small fixed word pool, a random source whose draws can be
scripted, and a game service that logs into a temporary directory.
"""

import random

import pytest

from termdle.services.game_service import GameService
from termdle.services.word_oracle import WordOracle
from termdle.utils.game_logger import GameLogger

WORDS = ["robot", "opera", "error", "crane", "slate", "tests", "eesbs", "ettst", "abcdf", "yacht"]


class ScriptedRandom:
    """Random source whose choice() returns queued words in order."""

    def __init__(self, *words):
        self.queue = list(words)
        self.fallback = random.Random(0)

    def choice(self, seq):
        if self.queue:
            word = self.queue.pop(0)
            assert word in seq
            return word
        return self.fallback.choice(seq)


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def game_logger(tmp_path):
    return GameLogger(log_dir=str(tmp_path / "logs"), level="DEBUG")


@pytest.fixture
def make_oracle(words):
    def _make(*secrets):
        return WordOracle(words, rng=ScriptedRandom(*secrets))
    return _make


@pytest.fixture
def make_game(make_oracle, game_logger):
    def _make(*secrets, debug_mode=False):
        return GameService(make_oracle(*secrets), debug_mode=debug_mode, logger=game_logger)
    return _make
