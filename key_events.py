import curses
from dataclasses import dataclass
from enum import Enum


class KeyCode(Enum):
    CHAR = "char"
    ESC = "esc"
    ENTER = "enter"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


class KeyEventKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str = ""
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class ResizeEvent:
    pass


_STR_KEYS = {
    "\x1b": KeyCode.ESC,
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\b": KeyCode.BACKSPACE,
}

_INT_KEYS = {
    curses.KEY_ENTER: KeyCode.ENTER,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
}


def translate(raw):
    """Turn a value from ``window.get_wch()`` into an event.

    get_wch returns a one-character str for text (and control bytes) and an
    int for function keys. curses has no release/repeat reporting, so every
    key comes back as a press.
    """
    if isinstance(raw, str):
        code = _STR_KEYS.get(raw)
        if code is not None:
            return KeyEvent(code)
        if len(raw) == 1 and raw.isprintable():
            return KeyEvent(KeyCode.CHAR, char=raw)
        return KeyEvent(KeyCode.OTHER)

    if raw == curses.KEY_RESIZE:
        return ResizeEvent()
    return KeyEvent(_INT_KEYS.get(raw, KeyCode.OTHER))
