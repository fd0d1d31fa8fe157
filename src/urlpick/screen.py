"""
Screen abstraction.

Provides:
- Key / KeyEvent / ResizeEvent: the input events a focus loop consumes
- Screen: abstract base class for a cell-addressed drawing surface
- SimulationScreen: in-memory Screen for tests and headless use
"""
from __future__ import annotations

import queue
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .style import DEFAULT_STYLE, Style

# ─────────────────────────────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────────────────────────────


class Key(Enum):
    TAB = "tab"
    BACKTAB = "shift+tab"
    UP = "up"
    DOWN = "down"
    ESCAPE = "escape"
    ENTER = "enter"
    RUNE = "rune"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def rune(cls, char: str) -> KeyEvent:
        return cls(Key.RUNE, char)


@dataclass(frozen=True)
class ResizeEvent:
    cols: int
    rows: int


Event = Union[KeyEvent, ResizeEvent]


@dataclass(frozen=True)
class Cell:
    ch: str = " "
    combining: tuple[str, ...] = ()
    style: Style = DEFAULT_STYLE

    @property
    def text(self) -> str:
        return self.ch + "".join(self.combining)


# ─────────────────────────────────────────────────────────────────────────────
# Screen ABC
# ─────────────────────────────────────────────────────────────────────────────


class Screen(ABC):
    """
    Minimal cell screen interface.

    Drawing calls only touch a back buffer; show() makes it visible.
    poll_event() blocks until an input event arrives or interrupt() is called,
    in which case it returns None.
    """

    @abstractmethod
    def init(self) -> None:
        """Take over the terminal. Called once before a session."""

    @abstractmethod
    def fini(self) -> None:
        """Restore the terminal. Called once after a session."""

    @abstractmethod
    def clear(self) -> None:
        """Blank every cell of the back buffer."""

    @abstractmethod
    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        combining: tuple[str, ...] | list[str] = (),
        style: Style = DEFAULT_STYLE,
    ) -> None:
        """Place a character (plus combining glyphs) at (x, y). Off-screen cells are ignored."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Current size as (columns, rows)."""

    @abstractmethod
    def show(self) -> None:
        """Make pending changes visible."""

    @abstractmethod
    def sync(self) -> None:
        """Re-read the terminal size and repaint everything."""

    @abstractmethod
    def poll_event(self) -> Event | None:
        """Block for the next event. Returns None when woken by interrupt()."""

    @abstractmethod
    def interrupt(self) -> None:
        """Wake a blocked poll_event(). Safe to call from any thread."""


# ─────────────────────────────────────────────────────────────────────────────
# SimulationScreen
# ─────────────────────────────────────────────────────────────────────────────

_WAKE = object()


class SimulationScreen(Screen):
    """
    In-memory screen. Events are injected with post_event(); the last shown
    frame is available through cell() / text_at().
    """

    def __init__(self, cols: int = 80, rows: int = 25) -> None:
        self._cols = cols
        self._rows = rows
        self._cells: dict[tuple[int, int], Cell] = {}
        self._front: dict[tuple[int, int], Cell] = {}
        self._events: queue.Queue[object] = queue.Queue()
        self.initialized = False
        self.show_count = 0
        self.sync_count = 0

    def init(self) -> None:
        self.initialized = True

    def fini(self) -> None:
        self.initialized = False

    def clear(self) -> None:
        self._cells.clear()

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        combining: tuple[str, ...] | list[str] = (),
        style: Style = DEFAULT_STYLE,
    ) -> None:
        if not (0 <= x < self._cols and 0 <= y < self._rows):
            return
        self._cells[(x, y)] = Cell(ch, tuple(combining), style)

    def size(self) -> tuple[int, int]:
        return self._cols, self._rows

    def show(self) -> None:
        self._front = dict(self._cells)
        self.show_count += 1

    def sync(self) -> None:
        self.sync_count += 1
        self.show()

    def poll_event(self) -> Event | None:
        ev = self._events.get()
        if ev is _WAKE:
            return None
        return ev  # type: ignore[return-value]

    def interrupt(self) -> None:
        self._events.put(_WAKE)

    # ── simulation helpers ──────────────────────────────────────────────────

    def post_event(self, ev: Event) -> None:
        self._events.put(ev)

    def resize(self, cols: int, rows: int) -> None:
        """Change the size and queue the matching ResizeEvent."""
        self._cols = cols
        self._rows = rows
        self.post_event(ResizeEvent(cols, rows))

    def cell(self, x: int, y: int) -> Cell:
        return self._front.get((x, y), Cell())

    def back_cell(self, x: int, y: int) -> Cell:
        return self._cells.get((x, y), Cell())

    def text_at(self, y: int) -> str:
        """Text of row ``y`` of the shown frame, trailing blanks removed."""
        return "".join(self.cell(x, y).text for x in range(self._cols)).rstrip()
