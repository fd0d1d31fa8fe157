"""
StdinBuffer — splits raw terminal input into key sequences.

A read from the terminal can hold several keys ("\x1b[A\x1b[A" for two up
presses) or only part of one. Complete sequences are emitted through the
data callback; an incomplete one is held until more input arrives or the
timeout passes, so a lone ESC press is still delivered.
"""
from __future__ import annotations

import threading
from typing import Callable

ESC = "\x1b"


def _is_complete_sequence(data: str) -> bool:
    """Whether ``data`` (starting with ESC) is a full escape sequence."""
    if len(data) == 1:
        return False
    after = data[1:]

    # CSI: ESC [ params final-byte
    if after.startswith("["):
        if len(after) < 2:
            return False
        return 0x40 <= ord(after[-1]) <= 0x7e

    # SS3: ESC O letter
    if after.startswith("O"):
        return len(after) >= 2

    # OSC / DCS / APC strings end with BEL or ST
    if after[0] in "]P_":
        return data.endswith("\x07") or data.endswith(ESC + "\\")

    # ESC + single char (alt+key)
    return True


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """
    Split ``buffer`` into complete sequences.
    Returns (sequences, remainder) where remainder is an unfinished escape sequence.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        if buffer[pos] != ESC:
            sequences.append(buffer[pos])
            pos += 1
            continue

        end = pos + 1
        while end <= len(buffer):
            candidate = buffer[pos:end]
            if _is_complete_sequence(candidate):
                sequences.append(candidate)
                pos = end
                break
            # A second ESC starts a new sequence unless inside an OSC/DCS/APC string.
            if end < len(buffer) and buffer[end] == ESC and end > pos + 1 and candidate[1] not in "]P_":
                sequences.append(candidate)
                pos = end
                break
            end += 1
        else:
            return sequences, buffer[pos:]

    return sequences, ""


class StdinBuffer:
    """Feeds raw chunks in, calls ``on_data`` once per complete sequence."""

    def __init__(self, on_data: Callable[[str], None], timeout_ms: int = 10) -> None:
        self._on_data = on_data
        self._timeout_ms = timeout_ms
        self._buffer = ""
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def _cancel_timer(self) -> None:
        if self._timer:
            self._timer.cancel()
            self._timer = None

    def process(self, data: str | bytes) -> None:
        """Feed input data into the buffer."""
        if isinstance(data, bytes):
            if len(data) == 1 and data[0] > 127:
                # High-bit meta encoding: treat as ESC + char
                s = ESC + chr(data[0] - 128)
            else:
                s = data.decode("utf-8", errors="replace")
        else:
            s = data

        with self._lock:
            self._cancel_timer()
            seqs, self._buffer = split_sequences(self._buffer + s)
            if self._buffer:
                self._timer = threading.Timer(self._timeout_ms / 1000.0, self._flush_timer)
                self._timer.daemon = True
                self._timer.start()

        for seq in seqs:
            self._on_data(seq)

    def _flush_timer(self) -> None:
        for seq in self.flush():
            self._on_data(seq)

    def flush(self) -> list[str]:
        """Flush the buffer, returning any pending sequences."""
        with self._lock:
            self._cancel_timer()
            if not self._buffer:
                return []
            seqs = [self._buffer]
            self._buffer = ""
            return seqs

    def get_buffer(self) -> str:
        return self._buffer

    def destroy(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._buffer = ""
