"""ANSI terminal surface.

Writes to a text stream (stdout by default) using 24-bit SGR color
escapes. The column width is queried from the live terminal on every
call, so a resize takes effect on the next centered line without any
coordination with the session.
"""

from __future__ import annotations

import logging
import re
import shutil
import sys
from typing import TextIO

from modeterm.surface.base import Surface

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[3J\x1b[H"
RESET_CURSOR_COLOR = "\x1b]112\x07"
FALLBACK_RGB = "255;255;255"

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(color: str) -> str:
    """Convert ``#RRGGBB`` to an ``R;G;B`` SGR parameter string.

    Unparseable colors render as white.
    """
    match = _HEX_RE.match(color)
    if match is None:
        return FALLBACK_RGB
    return ";".join(str(int(part, 16)) for part in match.groups())


def foreground_sgr(color: str) -> str:
    return f"\x1b[38;2;{hex_to_rgb(color)}m"


def background_sgr(color: str) -> str:
    return f"\x1b[48;2;{hex_to_rgb(color)}m"


def cursor_color_osc(color: str) -> str:
    """OSC 12 sequence setting the cursor color (xterm and compatibles)."""
    match = _HEX_RE.match(color)
    spec = "#" + "".join(match.groups()) if match else "#FFFFFF"
    return f"\x1b]12;{spec}\x07"


class AnsiSurface(Surface):
    """Renders session output to an ANSI/VT100 compatible stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        background: str | None = None,
        fixed_columns: int | None = None,
        cursor: str | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._background = background
        self._cursor = cursor
        self._fixed_columns = fixed_columns
        self._foreground: str | None = None

    def write(self, text: str, color: str | None = None) -> None:
        if color is not None:
            text = f"{foreground_sgr(color)}{text}{RESET}{self._default_sgr()}"
        self._stream.write(text)
        self._stream.flush()

    def clear(self) -> None:
        cursor = cursor_color_osc(self._cursor) if self._cursor is not None else ""
        self._stream.write(f"{self._default_sgr()}{cursor}{CLEAR_SCREEN}")
        self._stream.flush()

    def columns(self) -> int | None:
        if self._fixed_columns is not None:
            return self._fixed_columns
        return shutil.get_terminal_size().columns

    def set_foreground(self, color: str | None) -> None:
        self._foreground = color
        self._stream.write(RESET + self._default_sgr())
        self._stream.flush()

    def reset(self) -> None:
        """Restore the terminal's own colors."""
        self._stream.write(RESET)
        if self._cursor is not None:
            self._stream.write(RESET_CURSOR_COLOR)
        self._stream.flush()

    def _default_sgr(self) -> str:
        sgr = ""
        if self._background is not None:
            sgr += background_sgr(self._background)
        if self._foreground is not None:
            sgr += foreground_sgr(self._foreground)
        return sgr
