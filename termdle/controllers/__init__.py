"""
Controllers Package

Translates terminal input into game events.
"""

from .input_controller import (
    KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE, KEY_INTERRUPT, classify_key, normalize_key
)

__all__ = [
    'KEY_BACKSPACE', 'KEY_ENTER', 'KEY_ESCAPE', 'KEY_INTERRUPT', 'classify_key', 'normalize_key'
]
