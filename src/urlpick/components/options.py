"""Options component — a numbered list with a single highlighted entry."""
from __future__ import annotations

from typing import Sequence

from ..screen import Screen
from ..style import DEFAULT_STYLE, HIGHLIGHT_BACKGROUND, Style
from .text import Text

CANCEL_VALUES: tuple[str, ...] = ("Cancel", "Exit")


def find_cancel_index(options: Sequence[str], cancel_values: Sequence[str] = CANCEL_VALUES) -> int:
    """Index of the first option equal to a cancel value, or -1."""
    for i, option in enumerate(options):
        if option in cancel_values:
            return i
    return -1


class Options:
    """
    Selectable list of strings.

    Each option renders as ``"> [i] text"`` when active and ``"  [i] text"``
    otherwise. Moving past either end wraps around.
    """

    def __init__(
        self,
        screen: Screen,
        options: Sequence[str],
        style: Style = DEFAULT_STYLE,
        cancel_values: Sequence[str] = CANCEL_VALUES,
    ) -> None:
        if not options:
            raise ValueError("Options requires at least one option")
        self.screen = screen
        self.options: tuple[str, ...] = tuple(options)
        self.style = style
        self.x = 1
        self.y = 0
        self.active_index = 0
        self.cancel_index = find_cancel_index(self.options, cancel_values)

    def __len__(self) -> int:
        return len(self.options)

    def up(self) -> None:
        if self.active_index == 0:
            self.active_index = len(self.options) - 1
            return
        self.active_index -= 1

    def down(self) -> None:
        if self.active_index == len(self.options) - 1:
            self.active_index = 0
            return
        self.active_index += 1

    def set_active(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise IndexError(f"option index out of range: {index}")
        self.active_index = index

    def active_value(self) -> str:
        return self.options[self.active_index]

    def draw(self) -> None:
        self.screen.clear()
        highlight = self.style.with_background(HIGHLIGHT_BACKGROUND)
        y = self.y
        for i, option in enumerate(self.options):
            style = self.style
            prefix = " "
            if i == self.active_index:
                style = highlight
                prefix = ">"
            normalized = option.replace("\t", "   ")
            label = f"{prefix} [{i}] {normalized}"
            _, last_y = Text(self.screen, label).with_offset(self.x, y).with_style(style).draw()
            y = last_y + 1
