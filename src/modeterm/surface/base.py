"""Abstract base class for text surfaces.

A surface is whatever the session engine draws on: a real terminal, an
in-memory screen buffer, a test recorder. The engine only ever appends
text, clears, and asks how wide the surface is, so swapping surfaces
never touches the session logic.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

LINE_BREAK = "\r\n"
ERASE_CHAR = "\b \b"


class Surface(ABC):
    """Abstract interface for a character-cell text target.

    Example usage::

        surface = AnsiSurface(sys.stdout)
        surface.write("LAB42", color="#3A86FF")
        surface.write(" - Bio-Research Terminal\\r\\n")
        surface.clear()
    """

    @abstractmethod
    def write(self, text: str, color: str | None = None) -> None:
        """Append literal text at the cursor.

        Args:
            text: Characters to write. May contain ``\\r``, ``\\n`` and
                  ``\\b`` which move the cursor.
            color: Optional ``#RRGGBB`` override for this span only.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Erase all visible content and move the cursor to the origin."""
        ...

    @abstractmethod
    def columns(self) -> int | None:
        """Current width in character cells, or None if unknown."""
        ...

    def set_foreground(self, color: str | None) -> None:
        """Set the default color for uncolored text. Optional."""
        return None
