"""Mode registry for modeterm.

Public API:
    ModeRegistry -- Ordered catalog with case-insensitive lookup
    InvalidModeError -- Raised by strict lookups that find nothing
    DEFAULT_MODES -- The built-in catalog
"""

from modeterm.modes.registry import DEFAULT_MODES, InvalidModeError, ModeRegistry

__all__ = ["DEFAULT_MODES", "InvalidModeError", "ModeRegistry"]
