"""
Keyboard input handling.

API:
- parse_key(data) — parse a raw input sequence and return a key identifier
- to_event(data) — turn a raw input sequence into a KeyEvent, or None
"""
from __future__ import annotations

from .screen import Key, KeyEvent

KeyId = str

# Legacy (xterm / vt100) sequences for the keys the picker understands
_LEGACY_SEQ_KEY_IDS: dict[str, KeyId] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1b[Z": "shift+tab",
    "\x1bOM": "enter",
}

_KEY_IDS_TO_KEY: dict[KeyId, Key] = {
    "tab": Key.TAB,
    "shift+tab": Key.BACKTAB,
    "up": Key.UP,
    "down": Key.DOWN,
    "escape": Key.ESCAPE,
    # Raw mode turns off SIGINT, so ctrl+c has to be handled as a key
    "ctrl+c": Key.ESCAPE,
    "enter": Key.ENTER,
}


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return a key identifier string, or None."""
    seq_id = _LEGACY_SEQ_KEY_IDS.get(data)
    if seq_id:
        return seq_id

    if data == "\x1b":
        return "escape"
    if data == "\t":
        return "tab"
    if data in ("\r", "\n"):
        return "enter"
    if data == " ":
        return "space"
    if data == "\x03":
        return "ctrl+c"
    if len(data) == 1 and data.isprintable():
        return data

    return None


def to_event(data: str) -> KeyEvent | None:
    """
    Convert raw input to a KeyEvent. Printable characters become Key.RUNE
    events; keys the picker has no use for return None.
    """
    key_id = parse_key(data)
    if key_id is None:
        return None
    key = _KEY_IDS_TO_KEY.get(key_id)
    if key is not None:
        return KeyEvent(key)
    if key_id == "space":
        return KeyEvent.rune(" ")
    if len(key_id) == 1:
        return KeyEvent.rune(key_id)
    return None
