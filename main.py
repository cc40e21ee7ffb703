import curses
import logging
import os
import sys

from _version import __version__
from app_state import AppState
from config_paths import ensure_config_dirs, load_config
from errors import TerminalInitError, TodoError
from log_setup import setup_logging
from orchestrator import Orchestrator, curses_event_source
from screen_painter import ScreenPainter, init_theme

logger = logging.getLogger(__name__)

USAGE = "todotui - keyboard-driven todo list\n\nUsage:\n  todotui\n  todotui -d\n  todotui -v\n"


def curses_main(stdscr) -> int:
    try:
        curses.raw()
        theme = init_theme()
        read_event = curses_event_source(stdscr)
    except curses.error as exc:
        raise TerminalInitError(f"terminal setup failed: {exc}") from exc

    painter = ScreenPainter(stdscr, theme)
    return Orchestrator(AppState(), painter, read_event).run()


def _run_ui() -> int:
    # curses.wrapper restores the terminal on every exit path
    try:
        return curses.wrapper(curses_main)
    except curses.error as exc:
        raise TerminalInitError(f"terminal setup or teardown failed: {exc}") from exc


def _report_failure(exc: TodoError) -> int:
    logger.error("fatal: %s", exc, exc_info=exc)
    print(f"Error: {exc}", file=sys.stderr)
    cause = exc.__cause__
    while cause is not None:
        print(f"Caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__
    return 1


def _configure_logging(cfg, debug):
    level = "DEBUG" if debug else cfg["LOG_LEVEL"]
    try:
        ensure_config_dirs()
        setup_logging(level, cfg["LOG_FILE"])
    except OSError as exc:
        print(f"Logging disabled: {exc}", file=sys.stderr)
        setup_logging(level, None)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    cfg = load_config()
    _configure_logging(cfg, debug="-d" in args)

    # Make ESC snappy; must be set before curses starts
    os.environ.setdefault("ESCDELAY", str(cfg["ESC_DELAY_MS"]))

    logger.info("starting todotui %s", __version__)
    try:
        return _run_ui()
    except TodoError as exc:
        return _report_failure(exc)


if __name__ == "__main__":
    sys.exit(main())
