"""Text surfaces the session engine draws on.

Public API:
    Surface -- Abstract base class
    BufferSurface -- In-memory screen model
    AnsiSurface -- 24-bit color ANSI terminal output
"""

from modeterm.surface.ansi import AnsiSurface
from modeterm.surface.base import ERASE_CHAR, LINE_BREAK, Surface
from modeterm.surface.buffer import BufferSurface, Span

__all__ = [
    "AnsiSurface",
    "BufferSurface",
    "ERASE_CHAR",
    "LINE_BREAK",
    "Span",
    "Surface",
]
