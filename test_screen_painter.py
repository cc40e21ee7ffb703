import curses

import pytest

from app_state import AppState, Mode
from errors import RenderError
from render import render
from screen_painter import ScreenPainter, Theme


class DummyWin:
    """Records drawing calls; derived windows share the root's log."""

    def __init__(self, h, w, y=0, x=0, root=None):
        self._h = h
        self._w = w
        self.y = y
        self.x = x
        self.root = root or self
        if root is None:
            self.writes = []
            self.boxes = []
            self.cursor = None
            self.refreshed = 0
            self.fail_addnstr = False

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.root.writes.clear()
        self.root.boxes.clear()

    def derwin(self, h, w, y, x):
        return DummyWin(h, w, self.y + y, self.x + x, root=self.root)

    def box(self):
        self.root.boxes.append((self.y, self.x, self._h, self._w))

    def addnstr(self, y, x, text, n, attr=0):
        if self.root.fail_addnstr:
            raise curses.error("addnstr() returned ERR")
        self.root.writes.append((self.y + y, self.x + x, text[:n], attr))

    def touchwin(self):
        pass

    def move(self, y, x):
        self.root.cursor = (y, x)

    def refresh(self):
        self.root.refreshed += 1


THEME = Theme(bold=1, blink=2, highlight=4)


def _paint(state, h=24, w=80):
    win = DummyWin(h, w)
    painter = ScreenPainter(win, THEME)
    width, height = painter.size()
    painter.paint(render(state, width, height))
    return win


def test_command_frame_draws_three_regions():
    state = AppState()
    state.todos.extend(["a", "b"])
    win = _paint(state)

    assert win.boxes == [(1, 0, 3, 80), (4, 0, 20, 80)]
    assert (0, 0, "Press ", 2) in win.writes
    assert (0, 6, "q", 2 | 1) in win.writes
    assert (1, 1, "Input", 0) in win.writes
    assert (4, 1, "Messages", 0) in win.writes
    assert (5, 1, "0: a", 0) in win.writes
    assert (6, 1, "1: b", 0) in win.writes
    assert win.cursor is None
    assert win.refreshed == 1


def test_composing_frame_highlights_and_places_cursor():
    state = AppState()
    state.mode = Mode.COMPOSING
    for ch in "milk":
        state.input.insert(ch)
    state.input.move_left()
    win = _paint(state)

    assert (2, 1, "milk", 4) in win.writes
    assert (0, 0, "Press ", 0) in win.writes
    assert win.cursor == (2, 4)


def test_long_lines_are_clipped_and_cursor_stays_in_box():
    state = AppState()
    state.mode = Mode.COMPOSING
    for ch in "x" * 30:
        state.input.insert(ch)
    win = _paint(state, h=10, w=12)

    assert (2, 1, "x" * 10, 4) in win.writes
    assert win.cursor == (2, 10)


def test_tiny_terminal_skips_boxes():
    win = _paint(AppState(), h=2, w=20)
    assert win.boxes == []
    assert win.cursor is None


def test_curses_failure_becomes_render_error():
    win = DummyWin(24, 80)
    win.fail_addnstr = True
    painter = ScreenPainter(win, THEME)
    with pytest.raises(RenderError):
        painter.paint(render(AppState(), 80, 24))
