"""Text component — flows a string onto the screen cell by cell."""
from __future__ import annotations

from ..screen import Screen
from ..style import DEFAULT_STYLE, Style
from ..utils import char_width, flow, is_control, strip_ansi


class Text:
    """
    Draws text at an offset, wrapped to the space left on screen.
    Builder methods return self so calls can be chained.
    """

    def __init__(self, screen: Screen, text: str, style: Style = DEFAULT_STYLE) -> None:
        self.screen = screen
        self.text = text
        self.style = style
        self.x = 0
        self.y = 0
        self.max_width = 0

    def with_offset(self, x: int, y: int) -> Text:
        self.x = x
        self.y = y
        return self

    def with_max_width(self, max_width: int) -> Text:
        self.max_width = max_width
        return self

    def with_style(self, style: Style) -> Text:
        self.style = style
        return self

    def draw(self) -> tuple[int, int]:
        """
        Draw the text and return (max_x, y): the right-most column reached and
        the row of the last line drawn.
        """
        cols, _ = self.screen.size()
        width = cols - self.x
        if self.max_width > 0 and width > self.max_width:
            width = self.max_width
        width = max(1, width)

        required_max_width = 0
        y = self.y
        for line_index, line in enumerate(flow(strip_ansi(self.text), width)):
            y = self.y + line_index
            x = self.x
            # Last placed cell on this line: (x, base char, combining marks)
            prev: tuple[int, str, list[str]] | None = None
            for ch in line:
                if is_control(ch):
                    continue
                w = char_width(ch)
                if w == 0:
                    if prev is not None:
                        prev[2].append(ch)
                        self.screen.set_content(prev[0], y, prev[1], prev[2], self.style)
                        continue
                    prev = (x, " ", [ch])
                    self.screen.set_content(x, y, " ", prev[2], self.style)
                    w = 1
                else:
                    prev = (x, ch, [])
                    self.screen.set_content(x, y, ch, (), self.style)
                x += w
                if x > required_max_width:
                    required_max_width = x
        return required_max_width, y
