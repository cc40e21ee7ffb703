import curses
import logging
from dataclasses import dataclass

from errors import RenderError
from render import Box, CursorDirective, Frame, HelpLine

logger = logging.getLogger(__name__)

HIGHLIGHT_PAIR = 1


@dataclass(frozen=True)
class Theme:
    bold: int = curses.A_BOLD
    blink: int = curses.A_BLINK
    highlight: int = curses.A_BOLD


def init_theme() -> Theme:
    # must run after initscr; yellow on the default background when possible
    highlight = curses.A_BOLD
    try:
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_YELLOW, -1)
            highlight = curses.color_pair(HIGHLIGHT_PAIR)
        else:
            logger.info("terminal has no colors; highlighting with bold")
    except curses.error as exc:
        logger.info("color setup failed (%s); highlighting with bold", exc)
    return Theme(highlight=highlight)


class ScreenPainter:
    def __init__(self, stdscr, theme: Theme | None = None):
        self.stdscr = stdscr
        self.theme = theme or Theme()

    def size(self) -> tuple[int, int]:
        """Return (width, height) of the drawing surface."""
        h, w = self.stdscr.getmaxyx()
        return w, h

    # ---------- frame ----------
    def paint(self, frame: Frame) -> None:
        try:
            self.stdscr.erase()
            self._draw_help(frame.help)
            self._draw_box(frame.input_box)
            self._draw_box(frame.list_box)
            # box text lives in derived windows sharing our buffer
            self.stdscr.touchwin()
            self._place_cursor(frame.cursor, frame.input_box)
            self.stdscr.refresh()
        except curses.error as exc:
            raise RenderError(f"drawing frame failed: {exc}") from exc

    # ---------- regions ----------
    def _put(self, win, y, x, text, n, attr=0):
        if n <= 0 or not text:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            # curses raises after writing the bottom-right cell because the
            # cursor cannot advance past it; the text itself is on screen
            h, w = win.getmaxyx()
            if not (y == h - 1 and x + min(len(text), n) >= w):
                raise

    def _draw_help(self, help_line: HelpLine):
        area = help_line.area
        if area.empty:
            return
        base = self.theme.blink if help_line.blink else 0
        x = area.x
        right = area.x + area.width
        for span in help_line.spans:
            if x >= right:
                break
            attr = base | (self.theme.bold if span.bold else 0)
            self._put(self.stdscr, area.y, x, span.text, right - x, attr)
            x += len(span.text)

    def _draw_box(self, box: Box):
        area = box.area
        if area.width < 2 or area.height < 2:
            return
        win = self.stdscr.derwin(area.height, area.width, area.y, area.x)
        win.box()

        inner_w = area.width - 2
        inner_h = area.height - 2
        self._put(win, 0, 1, box.title, inner_w)

        attr = self.theme.highlight if box.highlight else 0
        for row, line in enumerate(box.lines[:inner_h]):
            self._put(win, row + 1, 1, line, inner_w, attr)

    def _place_cursor(self, cursor: CursorDirective, input_box: Box):
        area = input_box.area
        if not cursor.visible or area.width < 3 or area.height < 3:
            self._set_cursor_visibility(0)
            return

        # long input runs past the border; keep the caret inside the box
        x = max(area.x + 1, min(cursor.x, area.x + area.width - 2))
        y = max(area.y + 1, min(cursor.y, area.y + area.height - 2))
        self._set_cursor_visibility(1)
        self.stdscr.move(y, x)

    def _set_cursor_visibility(self, visibility):
        try:
            curses.curs_set(visibility)
        except curses.error:
            # some terminals cannot hide or show the caret
            pass
