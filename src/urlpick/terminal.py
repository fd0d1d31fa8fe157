"""
ProcessScreen — a Screen drawn on the controlling terminal.

The terminal is opened through /dev/tty so the picker works while stdin is a
pipe. init() switches it to raw mode and the alternate screen; fini() undoes
both. A reader thread turns input into events and SIGWINCH turns into
ResizeEvents.
"""
from __future__ import annotations

import logging
import os
import queue
import select
import signal
import termios
import threading
import tty

from .keys import to_event
from .screen import Cell, Event, ResizeEvent, Screen
from .stdin_buffer import StdinBuffer
from .style import DEFAULT_STYLE, Style
from .utils import char_width

logger = logging.getLogger(__name__)

_WAKE = object()

ENTER_ALT_SCREEN = "\x1b[?1049h"
EXIT_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET = "\x1b[0m"


class ProcessScreen(Screen):
    """Real terminal using /dev/tty in raw mode."""

    def __init__(self, tty_path: str = "/dev/tty", style: Style = DEFAULT_STYLE) -> None:
        self._tty_path = tty_path
        self._style = style
        self._fd: int | None = None
        self._old_termios: list | None = None
        self._events: queue.Queue[object] = queue.Queue()
        self._cells: dict[tuple[int, int], Cell] = {}
        self._cols = 80
        self._rows = 24
        self._stdin_buffer: StdinBuffer | None = None
        self._read_thread: threading.Thread | None = None
        self._reading = threading.Event()
        self._resized = False
        self._prev_sigwinch = None

    # ── lifecycle ───────────────────────────────────────────────────────────

    def init(self) -> None:
        self._fd = os.open(self._tty_path, os.O_RDWR | os.O_NOCTTY)
        self._old_termios = termios.tcgetattr(self._fd)
        tty.setraw(self._fd)
        self._cols, self._rows = self._query_size()
        self._write(ENTER_ALT_SCREEN + HIDE_CURSOR)

        if threading.current_thread() is threading.main_thread():
            self._prev_sigwinch = signal.signal(signal.SIGWINCH, self._on_sigwinch)

        self._stdin_buffer = StdinBuffer(self._on_data)
        self._reading.set()
        self._read_thread = threading.Thread(target=self._read_loop, name="tty-reader", daemon=True)
        self._read_thread.start()
        logger.debug("screen initialised at %dx%d", self._cols, self._rows)

    def fini(self) -> None:
        if self._fd is None:
            return
        self._reading.clear()
        if self._read_thread is not None:
            self._read_thread.join()
            self._read_thread = None
        if self._stdin_buffer is not None:
            self._stdin_buffer.destroy()
            self._stdin_buffer = None

        if self._prev_sigwinch is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch)
            self._prev_sigwinch = None

        try:
            self._write(RESET + SHOW_CURSOR + EXIT_ALT_SCREEN)
            if self._old_termios is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_termios)
        except (OSError, termios.error):
            # The tty may already be gone after a hangup
            logger.warning("could not restore terminal", exc_info=True)
        self._old_termios = None
        os.close(self._fd)
        self._fd = None
        logger.debug("screen finalised")

    # ── drawing ─────────────────────────────────────────────────────────────

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
        blank = Cell(" ", (), self._style)
        out: list[str] = []
        current: Style | None = None
        for y in range(self._rows):
            out.append(f"\x1b[{y + 1};1H")
            x = 0
            while x < self._cols:
                cell = self._cells.get((x, y), blank)
                w = max(1, char_width(cell.ch))
                if x + w > self._cols:
                    cell = blank
                    w = 1
                if cell.style != current:
                    current = cell.style
                    out.append(current.sgr())
                out.append(cell.text)
                x += w
        out.append(RESET)
        self._write("".join(out))

    def sync(self) -> None:
        self._cols, self._rows = self._query_size()
        self._write(RESET + "\x1b[2J")
        self.show()

    # ── events ──────────────────────────────────────────────────────────────

    def poll_event(self) -> Event | None:
        """Block for the next event. Raises the error that stopped the reader thread."""
        ev = self._events.get()
        if ev is _WAKE:
            return None
        if isinstance(ev, OSError):
            raise ev
        return ev  # type: ignore[return-value]

    def interrupt(self) -> None:
        self._events.put(_WAKE)

    def _on_data(self, sequence: str) -> None:
        ev = to_event(sequence)
        if ev is None:
            logger.debug("ignoring input %r", sequence)
            return
        self._events.put(ev)

    def _on_sigwinch(self, signum: int, frame: object) -> None:
        # Only flag it here; the reader thread posts the event.
        self._resized = True

    def _read_loop(self) -> None:
        fd = self._fd
        assert fd is not None
        while self._reading.is_set():
            if self._resized:
                self._resized = False
                cols, rows = self._query_size()
                self._cols, self._rows = cols, rows
                self._events.put(ResizeEvent(cols, rows))
            try:
                r, _, _ = select.select([fd], [], [], 0.05)
                if r:
                    data = os.read(fd, 1024)
                    if not data:
                        raise OSError("terminal closed")
                    if self._stdin_buffer is not None:
                        self._stdin_buffer.process(data)
            except (OSError, ValueError) as e:
                logger.exception("terminal read failed")
                self._events.put(e if isinstance(e, OSError) else OSError(str(e)))
                break

    # ── helpers ─────────────────────────────────────────────────────────────

    def _query_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self._fd if self._fd is not None else 0)
            return size.columns, size.lines
        except OSError:
            return int(os.environ.get("COLUMNS", "80")), int(os.environ.get("LINES", "24"))

    def _write(self, data: str) -> None:
        assert self._fd is not None
        payload = data.encode("utf-8", errors="replace")
        while payload:
            written = os.write(self._fd, payload)
            payload = payload[written:]
