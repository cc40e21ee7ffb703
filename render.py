from dataclasses import dataclass

from app_state import AppState, Mode
from screen_layout import Rect, split_screen

INPUT_TITLE = "Input"
LIST_TITLE = "Messages"


@dataclass(frozen=True)
class Span:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class HelpLine:
    area: Rect
    spans: tuple[Span, ...]
    blink: bool


@dataclass(frozen=True)
class Box:
    area: Rect
    title: str
    lines: tuple[str, ...]
    highlight: bool = False


@dataclass(frozen=True)
class CursorDirective:
    visible: bool
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Frame:
    help: HelpLine
    input_box: Box
    list_box: Box
    cursor: CursorDirective


_COMMAND_HELP = (
    Span("Press "),
    Span("q", bold=True),
    Span(" to exit, "),
    Span("s", bold=True),
    Span(" to save, "),
    Span("a", bold=True),
    Span(" to starting editing."),
)

_COMPOSING_HELP = (
    Span("Press "),
    Span("Esc", bold=True),
    Span(" to stop editing, "),
    Span("Enter", bold=True),
    Span(" to record the message"),
)


def list_lines(todos) -> tuple[str, ...]:
    return tuple(f"{i}: {text}" for i, text in enumerate(todos))


def cursor_for(state: AppState, input_area: Rect) -> CursorDirective:
    if state.mode != Mode.COMPOSING:
        return CursorDirective(visible=False)
    # one cell in from the left border, one row down from the top border
    return CursorDirective(
        visible=True,
        x=input_area.x + state.input.char_index + 1,
        y=input_area.y + 1,
    )


def render(state: AppState, width: int, height: int) -> Frame:
    help_area, input_area, list_area = split_screen(width, height)
    composing = state.mode == Mode.COMPOSING

    help_line = HelpLine(
        area=help_area,
        spans=_COMPOSING_HELP if composing else _COMMAND_HELP,
        blink=not composing,
    )
    input_box = Box(
        area=input_area,
        title=INPUT_TITLE,
        lines=(state.input.text,),
        highlight=composing,
    )
    list_box = Box(area=list_area, title=LIST_TITLE, lines=list_lines(state.todos))

    return Frame(
        help=help_line,
        input_box=input_box,
        list_box=list_box,
        cursor=cursor_for(state, input_area),
    )
