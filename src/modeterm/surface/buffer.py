"""In-memory surface with a minimal screen model.

Keeps a transcript of every write (with its color) and maintains the
visible lines the way a terminal would for the few control characters
the session emits: carriage return, line feed and backspace.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from modeterm.surface.base import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """One write() call as recorded in the transcript."""

    text: str
    color: str | None = None


class BufferSurface(Surface):
    """Records writes and renders them into a scrollback of lines.

    Thread-safe so an HTTP handler can read the screen while the session
    task is typing.
    """

    def __init__(
        self,
        columns: int | None = 80,
        rows: int | None = None,
        scrollback_lines: int = 1000,
    ) -> None:
        self._columns = columns
        self._rows = rows
        self._scrollback_lines = scrollback_lines
        self._lock = threading.Lock()
        self._transcript: list[Span] = []
        self._lines: list[list[str]] = [[]]
        self._col = 0
        self._clear_count = 0
        self._foreground: str | None = None

    # -- Surface interface ---------------------------------------------------

    def write(self, text: str, color: str | None = None) -> None:
        with self._lock:
            self._transcript.append(Span(text, color))
            for char in text:
                self._put(char)

    def clear(self) -> None:
        with self._lock:
            self._lines = [[]]
            self._col = 0
            self._clear_count += 1
        logger.debug("Buffer surface cleared")

    def columns(self) -> int | None:
        return self._columns

    def set_foreground(self, color: str | None) -> None:
        self._foreground = color

    # -- Inspection ----------------------------------------------------------

    def resize(self, columns: int | None) -> None:
        self._columns = columns
        logger.debug("Buffer surface resized to %s columns", columns)

    @property
    def foreground(self) -> str | None:
        return self._foreground

    @property
    def clear_count(self) -> int:
        return self._clear_count

    @property
    def spans(self) -> list[Span]:
        with self._lock:
            return list(self._transcript)

    @property
    def output(self) -> str:
        """Everything ever written, including text since erased by clear()."""
        with self._lock:
            return "".join(span.text for span in self._transcript)

    def screen_lines(self) -> list[str]:
        """Visible lines since the last clear(), at most ``rows`` of them."""
        with self._lock:
            lines = self._lines[-self._rows :] if self._rows else self._lines
            return ["".join(line).rstrip() for line in lines]

    def screen_text(self) -> str:
        return "\n".join(self.screen_lines())

    # -- Internals -----------------------------------------------------------

    def _put(self, char: str) -> None:
        if char == "\r":
            self._col = 0
        elif char == "\n":
            self._lines.append([])
            if len(self._lines) > self._scrollback_lines:
                del self._lines[: len(self._lines) - self._scrollback_lines]
        elif char == "\b":
            self._col = max(self._col - 1, 0)
        else:
            line = self._lines[-1]
            if self._col < len(line):
                line[self._col] = char
            else:
                line.extend(" " * (self._col - len(line)))
                line.append(char)
            self._col += 1
