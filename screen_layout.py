from dataclasses import dataclass

HELP_H = 1
INPUT_H = 3


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def split_screen(width: int, height: int) -> tuple[Rect, Rect, Rect]:
    """Stack help line, input box and list box top to bottom.

    Short terminals clip the lower regions first; the list box gets
    whatever rows remain and never goes negative.
    """
    width = max(0, width)
    height = max(0, height)

    help_h = min(HELP_H, height)
    input_h = min(INPUT_H, height - help_h)
    list_h = height - help_h - input_h

    help_area = Rect(0, 0, width, help_h)
    input_area = Rect(0, help_h, width, input_h)
    list_area = Rect(0, help_h + input_h, width, list_h)
    return help_area, input_area, list_area
