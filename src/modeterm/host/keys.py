"""Decoding of raw terminal input into session key events.

A terminal in raw mode delivers bytes, not keys: Enter arrives as CR (or
LF), Backspace as DEL (or BS), arrow keys as multi-byte escape
sequences. This module maps that stream onto the three key kinds the
session understands and discards everything else.
"""

from __future__ import annotations

import re
from typing import Iterator

from modeterm.domain.models import KeyEvent

ENTER_CHARS = frozenset({"\r", "\n"})
BACKSPACE_CHARS = frozenset({"\x7f", "\x08"})
INTERRUPT_CHARS = frozenset({"\x03", "\x04"})  # Ctrl+C, Ctrl+D

# CSI (arrows, function keys), SS3 (keypad) and lone two-byte escapes
_ESCAPE_RE = re.compile(r"\x1b(?:\[[0-9;?]*[ -/]*[@-~]|O.|.)?", re.DOTALL)
# Start of an escape sequence cut off at the end of a read
_PARTIAL_ESCAPE_RE = re.compile(r"\x1b(?:\[[0-9;?]*[ -/]*|O)?\Z")

# Key names accepted over HTTP
KEY_NAMES: dict[str, KeyEvent] = {
    "enter": KeyEvent.enter(),
    "return": KeyEvent.enter(),
    "backspace": KeyEvent.backspace(),
    "space": KeyEvent.character(" "),
}


def strip_escapes(data: str) -> str:
    """Remove ANSI escape sequences from raw input."""
    return _ESCAPE_RE.sub("", data)


def split_pending_escape(data: str) -> tuple[str, str]:
    """Split off an unterminated escape sequence at the end of ``data``.

    Returns:
        (complete input, trailing partial sequence or "")
    """
    match = _PARTIAL_ESCAPE_RE.search(data)
    if match is None:
        return data, ""
    return data[: match.start()], data[match.start() :]


def decode_keys(data: str) -> Iterator[KeyEvent]:
    """Yield key events for a chunk of raw terminal input.

    Interrupt characters are not translated; callers check for them with
    :func:`split_interrupt` before decoding. A CR immediately followed by
    LF counts as a single Enter.
    """
    previous = ""
    for char in strip_escapes(data):
        if char == "\n" and previous == "\r":
            previous = char
            continue
        previous = char
        if char in ENTER_CHARS:
            yield KeyEvent.enter()
        elif char in BACKSPACE_CHARS:
            yield KeyEvent.backspace()
        elif char.isprintable():
            yield KeyEvent.character(char)


def split_interrupt(data: str) -> tuple[str, bool]:
    """Split input at the first interrupt character.

    Returns:
        (data before the interrupt, whether an interrupt was found)
    """
    for index, char in enumerate(data):
        if char in INTERRUPT_CHARS:
            return data[:index], True
    return data, False


def key_from_name(name: str) -> KeyEvent | None:
    """Translate a key name ('Enter', 'Backspace', 'a') to an event."""
    event = KEY_NAMES.get(name.lower())
    if event is not None:
        return event
    if len(name) == 1 and name.isprintable():
        return KeyEvent.character(name)
    return None
