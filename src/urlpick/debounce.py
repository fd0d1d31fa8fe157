"""
Debounced index matching.

Typed characters are collected into a buffer and matched against a key-space
of decimal option indices ("0" … "N-1"). An unambiguous match is emitted at
once; a match that is also the prefix of another key ("1" while "10" exists)
is held until the input has been quiet for one interval.

The matcher runs on its own thread. Characters go in through send(), resolved
Choices come out through poll()/get(), and an optional wake callback is called
after every emission so a blocked event loop can pick the Choice up.
"""
from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.2


@dataclass(frozen=True)
class Choice:
    index: int
    value: str


def choice_option_index(options: Sequence[str]) -> list[str]:
    """Key-space for ``options``: the decimal string of each index."""
    return [str(i) for i in range(len(options))]


def choice_index(keys: Sequence[str], s: str) -> tuple[int, bool]:
    """
    Resolve ``s`` against ``keys``.

    Returns (index, matches_prefix): index of the exact match (the last one if
    keys repeat) or -1, and whether any other key starts with ``s``.
    """
    index = -1
    matches_prefix = False
    for i, key in enumerate(keys):
        if key == s:
            index = i
            continue
        if key.startswith(s):
            matches_prefix = True
    return index, matches_prefix


class ChoiceDebouncer:
    """Background matcher turning keystrokes into Choices."""

    def __init__(
        self,
        keys: Sequence[str],
        interval: float = DEFAULT_INTERVAL,
        wake: Callable[[], None] | None = None,
    ) -> None:
        self._keys = tuple(keys)
        self._interval = interval
        self._wake = wake
        self._runes: queue.Queue[str | None] = queue.Queue()
        self._choices: queue.Queue[Choice] = queue.Queue()
        self._cancelled = threading.Event()
        self._thread: threading.Thread | None = None
        # Owned by the worker thread
        self._buffer = ""
        self._pending = -1

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> ChoiceDebouncer:
        if self._thread is not None:
            raise RuntimeError("debouncer already started")
        self._thread = threading.Thread(target=self._run, name="choice-debouncer", daemon=True)
        self._thread.start()
        return self

    def send(self, ch: str) -> None:
        """Queue one typed character. Ignored after cancel()."""
        if self._cancelled.is_set():
            return
        self._runes.put(ch)

    def poll(self) -> list[Choice]:
        """Return every Choice emitted since the last call, without blocking."""
        choices: list[Choice] = []
        while True:
            try:
                choices.append(self._choices.get_nowait())
            except queue.Empty:
                return choices

    def get(self, timeout: float | None = None) -> Choice | None:
        """Wait up to ``timeout`` seconds for the next Choice."""
        try:
            return self._choices.get(timeout=timeout)
        except queue.Empty:
            return None

    def cancel(self) -> None:
        """Stop the worker and discard anything still queued. Idempotent."""
        if self._cancelled.is_set():
            return
        self._cancelled.set()
        self._runes.put(None)
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._drain()
        logger.debug("debouncer cancelled")

    def _drain(self) -> None:
        for q in (self._runes, self._choices):
            while True:
                try:
                    q.get_nowait()
                except queue.Empty:
                    break

    # ── worker ──────────────────────────────────────────────────────────────

    def _run(self) -> None:
        while not self._cancelled.is_set():
            try:
                ch = self._runes.get(timeout=self._interval)
            except queue.Empty:
                self._tick()
                continue
            if ch is None or self._cancelled.is_set():
                break
            self._feed(ch)

    def _tick(self) -> None:
        if self._pending > -1:
            self._emit(self._pending)
            self._pending = -1
        self._buffer = ""

    def _feed(self, ch: str) -> None:
        self._buffer += ch
        index, matches_prefix = choice_index(self._keys, self._buffer)
        if index < 0 and not matches_prefix:
            logger.debug("discarding unmatched input %r", self._buffer)
            self._buffer = ""
            self._pending = -1
            return
        if matches_prefix:
            # Wait to see if any more is typed in.
            self._pending = index
            return
        self._pending = -1
        self._buffer = ""
        self._emit(index)

    def _emit(self, index: int) -> None:
        if self._cancelled.is_set():
            return
        choice = Choice(index, self._keys[index])
        logger.debug("emitting %s", choice)
        self._choices.put(choice)
        if self._wake is not None:
            try:
                self._wake()
            except Exception:
                logger.exception("wake callback failed")
