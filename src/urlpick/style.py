"""
Cell styles.

A Style is an immutable foreground/background pair. The default style is
created once and passed to rendering calls; variants are derived with
with_foreground() / with_background().
"""
from __future__ import annotations

from dataclasses import dataclass, replace

# Named colours → SGR foreground code. Background is code + 10.
COLORS: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "silver": 37,
    "gray": 90,
    "grey": 90,
    "maroon": 91,
    "lime": 92,
    "olive": 93,
    "navy": 94,
    "purple": 95,
    "teal": 96,
    "white": 97,
}


@dataclass(frozen=True)
class Style:
    """Foreground/background colour pair. ``None`` means the terminal default."""

    fg: str | None = None
    bg: str | None = None

    def __post_init__(self) -> None:
        for color in (self.fg, self.bg):
            if color is not None and color not in COLORS:
                raise ValueError(f"Unknown color: {color!r}")

    def with_foreground(self, color: str | None) -> Style:
        return replace(self, fg=color)

    def with_background(self, color: str | None) -> Style:
        return replace(self, bg=color)

    def sgr(self) -> str:
        """Return the ESC sequence selecting this style (always resets first)."""
        codes = ["0"]
        if self.fg is not None:
            codes.append(str(COLORS[self.fg]))
        if self.bg is not None:
            codes.append(str(COLORS[self.bg] + 10))
        return f"\x1b[{';'.join(codes)}m"


DEFAULT_STYLE = Style(fg="white", bg="black")

HIGHLIGHT_BACKGROUND = "gray"
