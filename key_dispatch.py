import logging

from app_state import AppState, Mode
from key_events import KeyCode, KeyEvent, KeyEventKind

logger = logging.getLogger(__name__)


def _handle_command_key(state: AppState, event: KeyEvent) -> None:
    if event.code != KeyCode.CHAR:
        return

    if event.char == "q":
        state.request_exit()
    elif event.char == "a":
        state.mode = Mode.COMPOSING
    elif event.char == "s":
        # save is reserved; nothing is persisted yet
        logger.debug("save requested with %d entries; ignored", len(state.todos))


def _handle_composing_key(state: AppState, event: KeyEvent) -> None:
    buf = state.input

    if event.code == KeyCode.ESC:
        state.mode = Mode.COMMAND
    elif event.code == KeyCode.ENTER:
        committed = state.commit_input()
        if committed is None:
            logger.debug("empty input discarded")
        else:
            logger.info("committed entry %d", len(state.todos) - 1)
        state.mode = Mode.COMMAND
    elif event.code == KeyCode.CHAR:
        buf.insert(event.char)
    elif event.code == KeyCode.BACKSPACE:
        buf.backspace()
    elif event.code == KeyCode.LEFT:
        buf.move_left()
    elif event.code == KeyCode.RIGHT:
        buf.move_right()


_HANDLERS = {
    Mode.COMMAND: _handle_command_key,
    Mode.COMPOSING: _handle_composing_key,
}


def dispatch(state: AppState, event) -> AppState:
    """Apply one input event to ``state`` using the table for its mode.

    Anything other than a key press leaves the state untouched.
    """
    if not isinstance(event, KeyEvent) or event.kind != KeyEventKind.PRESS:
        return state

    before = state.mode
    _HANDLERS[state.mode](state, event)
    if state.mode != before:
        logger.debug("mode %s -> %s", before.value, state.mode.value)
    return state
