import curses

import pytest

from termdle.controllers.input_controller import (
    KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE, KEY_INTERRUPT, classify_key, normalize_key
)
from termdle.models.game import EventKind, KeyEvent, Phase


class TestNormalizeKey:
    @pytest.mark.parametrize("raw,token", [
        ("\x1b", KEY_ESCAPE),
        ("\x03", KEY_INTERRUPT),
        ("\x7f", KEY_BACKSPACE),
        ("\x08", KEY_BACKSPACE),
        ("\n", KEY_ENTER),
        ("\r", KEY_ENTER),
        (curses.KEY_BACKSPACE, KEY_BACKSPACE),
        (curses.KEY_ENTER, KEY_ENTER),
        ("a", "a"),
        ("Y", "Y"),
    ])
    def test_known_keys(self, raw, token):
        assert normalize_key(raw) == token

    def test_unused_key_code(self):
        assert normalize_key(curses.KEY_UP) == ""


class TestClassifyKey:
    @pytest.mark.parametrize("phase", list(Phase))
    @pytest.mark.parametrize("token", [KEY_ESCAPE, KEY_INTERRUPT])
    def test_quit_in_every_phase(self, phase, token):
        assert classify_key(token, phase) == KeyEvent(EventKind.QUIT)

    def test_playing_letters(self):
        assert classify_key("q", Phase.PLAYING) == KeyEvent(EventKind.LETTER, "q")
        assert classify_key("y", Phase.PLAYING) == KeyEvent(EventKind.LETTER, "y")

    @pytest.mark.parametrize("token", ["A", "Z", "1", " ", "é", ""])
    def test_playing_rejects_non_lowercase(self, token):
        assert classify_key(token, Phase.PLAYING).kind == EventKind.OTHER

    def test_playing_editing_keys(self):
        assert classify_key(KEY_BACKSPACE, Phase.PLAYING).kind == EventKind.BACKSPACE
        assert classify_key(KEY_ENTER, Phase.PLAYING).kind == EventKind.SUBMIT

    @pytest.mark.parametrize("token,kind", [
        ("y", EventKind.CONFIRM),
        ("Y", EventKind.CONFIRM),
        ("n", EventKind.DECLINE),
        ("N", EventKind.DECLINE),
        ("a", EventKind.OTHER),
        (KEY_ENTER, EventKind.OTHER),
        (KEY_BACKSPACE, EventKind.OTHER),
    ])
    def test_round_over_keys(self, token, kind):
        assert classify_key(token, Phase.ROUND_OVER).kind == kind
