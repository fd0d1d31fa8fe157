"""
Focus loop — runs one selection session against a Screen.

The loop owns all model mutation and drawing. Typed digits are handed to a
ChoiceDebouncer running on its own thread; when it resolves a Choice it calls
Screen.interrupt(), poll_event() returns None and the loop applies the Choice
before redrawing.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from .components.options import Options
from .config import Config
from .debounce import ChoiceDebouncer, choice_option_index
from .screen import Key, KeyEvent, ResizeEvent, Screen
from .style import DEFAULT_STYLE, Style

logger = logging.getLogger(__name__)

QUIT = "quit"


class SessionState(Enum):
    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class FocusLoop:
    def __init__(
        self,
        screen: Screen,
        options: Sequence[str],
        config: Config | None = None,
        style: Style = DEFAULT_STYLE,
    ) -> None:
        self.config = config or Config()
        self.screen = screen
        self.options = Options(screen, options, style=style, cancel_values=self.config.cancel_values)
        self.state = SessionState.BROWSING
        self.debouncer: ChoiceDebouncer | None = None

    def run(self) -> str:
        """Run until the user confirms or cancels. Returns the chosen value or QUIT."""
        if self.state is not SessionState.BROWSING:
            raise RuntimeError(f"session already finished ({self.state.value})")

        self.debouncer = ChoiceDebouncer(
            choice_option_index(self.options.options),
            interval=self.config.debounce_interval,
            wake=self.screen.interrupt,
        ).start()
        try:
            self._redraw()
            while True:
                ev = self.screen.poll_event()
                self._apply_choices()
                result = self._handle(ev)
                if result is not None:
                    return result
                self._redraw()
        finally:
            self.debouncer.cancel()

    def _handle(self, ev: object) -> str | None:
        if isinstance(ev, ResizeEvent):
            self.screen.sync()
            return None
        if not isinstance(ev, KeyEvent):
            return None

        if ev.key in (Key.BACKTAB, Key.UP):
            self.options.up()
        elif ev.key in (Key.TAB, Key.DOWN):
            self.options.down()
        elif ev.key is Key.ESCAPE:
            return self._finish(SessionState.CANCELLED, QUIT)
        elif ev.key is Key.ENTER:
            return self._finish(SessionState.CONFIRMED, self.options.active_value())
        elif ev.key is Key.RUNE:
            if ev.char == self.config.quit_char:
                return self._finish(SessionState.CANCELLED, QUIT)
            assert self.debouncer is not None
            self.debouncer.send(ev.char)
        return None

    def _apply_choices(self) -> None:
        assert self.debouncer is not None
        for choice in self.debouncer.poll():
            self.options.set_active(choice.index)

    def _finish(self, state: SessionState, result: str) -> str:
        self.state = state
        logger.debug("session %s at index %d", state.value, self.options.active_index)
        return result

    def _redraw(self) -> None:
        self.options.draw()
        self.screen.show()


def select(
    screen: Screen,
    options: Sequence[str],
    config: Config | None = None,
) -> str:
    """Let the user pick one of ``options`` on ``screen``."""
    return FocusLoop(screen, options, config).run()
