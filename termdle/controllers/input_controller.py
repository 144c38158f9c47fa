"""
Input Controller

Turns raw terminal keys into the key events the game state machine
understands. Classification depends on the phase: 'y' is a letter while
playing and a confirmation once the round is over.
"""

import curses
import string
from typing import Union
from ..models.game import EventKind, KeyEvent, Phase

KEY_ESCAPE = 'KEY_ESCAPE'
KEY_INTERRUPT = 'KEY_INTERRUPT'
KEY_BACKSPACE = 'KEY_BACKSPACE'
KEY_ENTER = 'KEY_ENTER'

_CHAR_TOKENS = {
    '\x1b': KEY_ESCAPE,
    '\x03': KEY_INTERRUPT,
    '\x7f': KEY_BACKSPACE,
    '\x08': KEY_BACKSPACE,
    '\n': KEY_ENTER,
    '\r': KEY_ENTER,
}

_CODE_TOKENS = {
    curses.KEY_BACKSPACE: KEY_BACKSPACE,
    curses.KEY_DC: KEY_BACKSPACE,
    curses.KEY_ENTER: KEY_ENTER,
}

_LETTERS = frozenset(string.ascii_lowercase)


def normalize_key(raw: Union[str, int]) -> str:
    """
    Maps a key returned by curses get_wch() to a key token.

    Args:
        raw: A character string or an integer curses key code

    Returns:
        str: One of the KEY_* tokens, the character itself, or '' for
        key codes the game does not use
    """
    if isinstance(raw, int):
        return _CODE_TOKENS.get(raw, '')
    return _CHAR_TOKENS.get(raw, raw)


def classify_key(token: str, phase: Phase) -> KeyEvent:
    """Classifies a key token for the given phase."""
    if token in (KEY_ESCAPE, KEY_INTERRUPT):
        return KeyEvent(EventKind.QUIT)

    if phase == Phase.PLAYING:
        if token in _LETTERS:
            return KeyEvent(EventKind.LETTER, token)
        if token == KEY_BACKSPACE:
            return KeyEvent(EventKind.BACKSPACE)
        if token == KEY_ENTER:
            return KeyEvent(EventKind.SUBMIT)
        return KeyEvent(EventKind.OTHER)

    if token in ('y', 'Y'):
        return KeyEvent(EventKind.CONFIRM)
    if token in ('n', 'N'):
        return KeyEvent(EventKind.DECLINE)
    return KeyEvent(EventKind.OTHER)
