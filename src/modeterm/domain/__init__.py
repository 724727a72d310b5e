"""Domain models for modeterm.

This package contains the core data structures and enumerations used
throughout the system. All models use Pydantic v2 for validation.
"""

from modeterm.domain.models import (
    Action,
    ErrorAction,
    KeyEvent,
    KeyKind,
    ListModes,
    Mode,
    Reprompt,
    SessionState,
    SwitchMode,
)

__all__ = [
    "Action",
    "ErrorAction",
    "KeyEvent",
    "KeyKind",
    "ListModes",
    "Mode",
    "Reprompt",
    "SessionState",
    "SwitchMode",
]
