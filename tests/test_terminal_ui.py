import curses

from termdle.ui import terminal


class FakeWindow:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def addstr(self, y, x, text, attr=0):
        if self.fail:
            raise curses.error("edge of screen")
        self.calls.append((y, x, text, attr))


def test_safe_addstr_writes():
    win = FakeWindow()
    terminal.safe_addstr(win, 1, 2, "Termdle", 5)
    assert win.calls == [(1, 2, "Termdle", 5)]


def test_safe_addstr_ignores_screen_edge_errors():
    win = FakeWindow(fail=True)
    terminal.safe_addstr(win, 100, 100, "x")
    assert win.calls == []
