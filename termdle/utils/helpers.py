"""
Helper Functions

Pure text-layout helpers used by the terminal renderer.
"""

from ..config.game_settings import WORD_LENGTH


def display_letters(letters: str) -> str:
    """Space-separate letters for display, padding missing ones with '_'."""
    padded = letters.upper().ljust(WORD_LENGTH, '_')
    return ' '.join(padded)


def centered_x(width: int, text: str) -> int:
    """Column at which `text` starts when centered in `width` columns."""
    return max(0, (width - len(text)) // 2)


def round_over_message(won: bool, secret_word: str) -> str:
    outcome = "Correct!" if won else "Incorrect!"
    return f'{outcome} The word was "{secret_word}"! Do you want to start a new game? (y/n)'


def wrap_text(text: str, width: int):
    """Split `text` into lines no longer than `width`, breaking on spaces."""
    if width <= 0:
        return [text]
    lines = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width or not current:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
