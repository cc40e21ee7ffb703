from enum import Enum


class Mode(Enum):
    COMMAND = "command"
    COMPOSING = "composing"


class InputBuffer:
    def __init__(self):
        self.text = ""
        self.char_index = 0

    # ---------- editing ----------
    def insert(self, ch: str) -> None:
        self.text = self.text[: self.char_index] + ch + self.text[self.char_index :]
        self.char_index += len(ch)

    def backspace(self) -> None:
        if self.char_index > 0:
            self.text = self.text[: self.char_index - 1] + self.text[self.char_index :]
            self.char_index -= 1

    def move_left(self) -> None:
        self.char_index = max(0, self.char_index - 1)

    def move_right(self) -> None:
        self.char_index = min(len(self.text), self.char_index + 1)

    def clear(self) -> None:
        self.text = ""
        self.char_index = 0


class AppState:
    def __init__(self):
        self.mode = Mode.COMMAND
        self.input = InputBuffer()
        self.todos: list[str] = []
        self.exit = False

    def commit_input(self) -> str | None:
        """Append the buffer text as a new entry and clear the buffer.

        An empty buffer adds no entry; any other text is kept as typed.
        Returns the committed text, or None when nothing was added.
        """
        text = self.input.text
        self.input.clear()
        if not text:
            return None
        self.todos.append(text)
        return text

    def request_exit(self) -> None:
        self.exit = True
