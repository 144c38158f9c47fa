"""
Terminal UI

Curses front end for the game: draws the board from a GameView snapshot,
reads keys and forwards them to the game service.
"""

import curses
from ..controllers.input_controller import classify_key, normalize_key
from ..models.game import GameView, LetterMatch, Phase
from ..services.game_service import GameService
from ..utils.helpers import centered_x, display_letters, round_over_message, wrap_text

# Color pair indices
COLOR_TITLE = 1
COLOR_CORRECT = 2
COLOR_PARTIAL = 3
COLOR_INCORRECT = 4
COLOR_VALID = 5
COLOR_INVALID = 6
COLOR_DEBUG = 7

TITLE = "Termdle"


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    dark_gray = 8 if curses.COLORS > 8 else curses.COLOR_WHITE
    curses.init_pair(COLOR_TITLE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_CORRECT, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PARTIAL, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_INCORRECT, dark_gray, -1)
    curses.init_pair(COLOR_VALID, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_INVALID, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_DEBUG, curses.COLOR_YELLOW, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def match_attr(match: LetterMatch) -> int:
    if match == LetterMatch.CORRECT:
        return curses.color_pair(COLOR_CORRECT) | curses.A_BOLD
    if match == LetterMatch.PARTIAL:
        return curses.color_pair(COLOR_PARTIAL)
    return curses.color_pair(COLOR_INCORRECT)


def draw_playing_screen(win, view: GameView):
    height, width = win.getmaxyx()
    top = max(0, (height - 17) // 2)
    row_text = display_letters("")
    left = centered_x(width, row_text)

    safe_addstr(win, top, centered_x(width, TITLE), TITLE,
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)

    # Attempt rows, one blank line after each
    for i, attempt in enumerate(view.attempts):
        y = top + 3 + i * 2
        if attempt is None:
            safe_addstr(win, y, left, row_text, curses.color_pair(COLOR_INCORRECT))
            continue
        for col, (letter, match) in enumerate(zip(attempt.letters, attempt.match_result)):
            safe_addstr(win, y, left + col * 2, letter.upper(), match_attr(match))

    input_y = top + 15
    if view.input_is_valid_word:
        safe_addstr(win, input_y, left - 2, "✓", curses.color_pair(COLOR_VALID) | curses.A_BOLD)
    else:
        safe_addstr(win, input_y, left - 2, "✗", curses.color_pair(COLOR_INVALID) | curses.A_BOLD)
    safe_addstr(win, input_y, left, display_letters(view.current_input))

    if view.debug_mode:
        safe_addstr(win, height - 1, 0, f'Dbg: "{view.secret_word}"',
                    curses.color_pair(COLOR_DEBUG))


def draw_round_over_screen(win, view: GameView):
    height, width = win.getmaxyx()
    attr = curses.color_pair(COLOR_CORRECT if view.won else COLOR_INVALID)
    lines = wrap_text(round_over_message(view.won, view.secret_word), max(1, int(width * 0.4)))
    top = max(0, (height - len(lines)) // 2)
    for i, line in enumerate(lines):
        safe_addstr(win, top + i, centered_x(width, line), line, attr)


def render(win, view: GameView):
    win.erase()
    if view.phase == Phase.PLAYING:
        draw_playing_screen(win, view)
    else:
        draw_round_over_screen(win, view)
    win.refresh()


def game_loop(stdscr, game: GameService):
    """Render, wait for a key, dispatch it, until the game asks to exit."""
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    if curses.has_colors():
        init_colors()

    while not game.exit_requested:
        render(stdscr, game.view())
        try:
            raw = stdscr.get_wch()
        except curses.error:
            continue
        if raw == curses.KEY_RESIZE:
            continue
        game.handle_event(classify_key(normalize_key(raw), game.phase))


def run(game: GameService):
    """Run the game inside curses, restoring the terminal on exit."""
    curses.wrapper(game_loop, game)
