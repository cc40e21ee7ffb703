import curses
import logging
from typing import Callable

from app_state import AppState
from errors import EventReadError, RenderError
from key_dispatch import dispatch
from key_events import translate
from render import render

logger = logging.getLogger(__name__)


def curses_event_source(stdscr) -> Callable[[], object]:
    """Build a blocking reader that yields one translated event per call."""
    stdscr.nodelay(False)
    stdscr.timeout(-1)
    stdscr.keypad(True)

    def read_event():
        return translate(stdscr.get_wch())

    return read_event


class Orchestrator:
    def __init__(self, state: AppState, painter, read_event: Callable[[], object]):
        self.state = state
        self.painter = painter
        self.read_event = read_event

    # ---------------- UI ----------------

    def redraw(self):
        try:
            width, height = self.painter.size()
            frame = render(self.state, width, height)
            self.painter.paint(frame)
        except RenderError:
            raise
        except curses.error as exc:
            raise RenderError(f"drawing frame failed: {exc}") from exc

    def _next_event(self):
        try:
            return self.read_event()
        except curses.error as exc:
            raise EventReadError(f"reading keyboard input failed: {exc}") from exc

    # ---------------- main loop ----------------

    def run(self) -> int:
        logger.info("interaction loop started")
        while True:
            self.redraw()

            event = self._next_event()
            dispatch(self.state, event)

            if self.state.exit:
                logger.info("exit requested with %d entries", len(self.state.todos))
                return 0
