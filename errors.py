class TodoError(Exception):
    """Fatal application failure; the process reports it and exits non-zero."""


class TerminalInitError(TodoError):
    pass


class EventReadError(TodoError):
    pass


class RenderError(TodoError):
    pass
