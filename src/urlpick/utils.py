"""
Terminal text utilities.

Provides:
- strip_ansi(): remove terminal escape sequences from a string
- is_control(): whether a character is a C0/C1 control
- char_width(): terminal column width of a single character
- visible_width(): terminal column width of a string
- flow() / flow_processor(): break text into lines no wider than a column budget
"""
from __future__ import annotations

import re
import unicodedata
from typing import Callable

from wcwidth import wcswidth, wcwidth

# Escape sequences: CSI (colours, cursor moves), OSC and APC strings
_ANSI_CSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_ANSI_OSC_RE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")
_ANSI_APC_RE = re.compile(r"\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)")


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences, e.g. the colours of `grep --color=always`."""
    if "\x1b" not in s:
        return s
    s = _ANSI_CSI_RE.sub("", s)
    s = _ANSI_OSC_RE.sub("", s)
    return _ANSI_APC_RE.sub("", s)


def is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def char_width(ch: str) -> int:
    """
    Column width of one character: 2 for East-Asian wide glyphs, 0 for
    combining marks and other zero-width code points, 1 otherwise.
    Control characters report 0; callers that draw must drop them (is_control).
    """
    w = wcwidth(ch)
    if w < 0:
        return 0
    return w


def visible_width(s: str) -> int:
    """Calculate the terminal column width of a string."""
    if not s:
        return 0

    # Fast path: pure ASCII printable
    if all(0x20 <= ord(c) <= 0x7e for c in s):
        return len(s)

    w = wcswidth(s)
    if w >= 0:
        return w
    return sum(char_width(c) for c in s)


# ─────────────────────────────────────────────────────────────────────────────
# Text flow
# ─────────────────────────────────────────────────────────────────────────────

def flow(s: str, max_width: int) -> list[str]:
    """
    Break ``s`` up into lines of at most ``max_width`` columns.

    Lines break at the last whitespace before the limit; a word longer than
    the limit is broken at the limit. Newlines force a break and carriage
    returns are dropped. The result always holds at least one line, and ends
    with an empty line when the text ends on a newline.
    """
    lines: list[str] = []
    flow_processor(s, max_width, lines.append)
    return lines


def flow_processor(s: str, max_width: int, out: Callable[[str], None]) -> None:
    """Streaming form of flow(): call ``out`` once per produced line."""
    max_width = max(1, max_width)
    buf: list[str] = []
    col = 0
    # Index into buf of the most recent whitespace; 0 means none seen.
    last_space = 0

    for ch in s:
        if ch == "\r":
            continue
        if ch == "\n":
            out("".join(buf))
            buf = []
            col = 0
            last_space = 0
            continue

        w = char_width(ch)
        buf.append(ch)
        if ch.isspace():
            last_space = len(buf) - 1

        if col + w > max_width and len(buf) > 1:
            # No whitespace to break at: split the word before this character.
            end = last_space or len(buf) - 1
            out("".join(buf[:end]).strip())
            rest = "".join(buf[end:]).strip()
            buf = list(rest)
            last_space = 0
            col = visible_width(rest)
            continue
        col += w

    out("".join(buf))
