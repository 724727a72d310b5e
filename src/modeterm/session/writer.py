"""Typewriter-style output for a surface.

Text is written one character at a time with a fixed delay in between.
Before every character the writer asks whether the session is still
alive; once it is not, the rest of the line is silently dropped.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from modeterm.surface.base import LINE_BREAK, Surface

logger = logging.getLogger(__name__)


def _always_active() -> bool:
    return True


def centered(text: str, columns: int | None) -> str:
    """Left-pad text so it sits in the middle of ``columns`` cells.

    Text wider than the surface is returned unpadded, never truncated.
    """
    width = columns if columns is not None and columns > 0 else 0
    padding = max((width - len(text)) // 2, 0)
    return " " * padding + text


class AnimatedWriter:
    """Writes lines to a surface with a per-character delay.

    Example usage::

        writer = AnimatedWriter(surface, is_active=lambda: session.active)
        await writer.emit("LAB42 - Bio-Research Terminal", delay_ms=20, center=True)
    """

    def __init__(
        self,
        surface: Surface,
        is_active: Callable[[], bool] = _always_active,
    ) -> None:
        self._surface = surface
        self._is_active = is_active

    async def emit(self, text: str, delay_ms: int = 15, center: bool = False) -> bool:
        """Type ``text`` followed by a line break.

        Returns:
            True if the whole line (and its line break) was written,
            False if the session went inactive part way through.
        """
        display = centered(text, self._surface.columns()) if center else text
        delay = max(delay_ms, 0) / 1000

        for char in display:
            if not self._is_active():
                logger.debug("Emission aborted, session inactive")
                return False
            self._surface.write(char)
            if delay:
                await asyncio.sleep(delay)

        if not self._is_active():
            return False
        self._surface.write(LINE_BREAK)
        return True
