"""Core domain models for the modeterm system.

These models represent the data flowing through the session engine:
selectable modes, key events delivered by a host, and the actions the
command interpreter produces from a submitted input line.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class SessionState(str, enum.Enum):
    """Lifecycle state of a session controller."""

    BOOTING = "booting"  # Banner is being typed
    READY = "ready"  # Prompt shown, accepting keys
    SWITCHING = "switching"  # Mode switch in progress
    DISPOSED = "disposed"  # Torn down, terminal state


class KeyKind(str, enum.Enum):
    """Kinds of key events the session understands."""

    ENTER = "enter"
    BACKSPACE = "backspace"
    CHARACTER = "character"


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


class Mode(BaseModel):
    """A named configuration selectable at runtime via ``switch``.

    The color is an opaque display token (``#RRGGBB``); surfaces decide
    how to render it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Unique name, matched case-insensitively")
    description: str = Field(default="", description="Shown next to the name in listings")
    color: str = Field(default="#FFFFFF", description="Display color token")


# ---------------------------------------------------------------------------
# Key Events
# ---------------------------------------------------------------------------


class KeyEvent(BaseModel):
    """One key delivered by the host."""

    model_config = ConfigDict(frozen=True)

    kind: KeyKind
    char: str | None = Field(default=None, description="The typed character for CHARACTER keys")

    @model_validator(mode="after")
    def _check_char(self) -> KeyEvent:
        if self.kind is KeyKind.CHARACTER:
            if self.char is None or len(self.char) != 1:
                raise ValueError("CHARACTER key events carry exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} key events carry no character")
        return self

    @classmethod
    def enter(cls) -> KeyEvent:
        return cls(kind=KeyKind.ENTER)

    @classmethod
    def backspace(cls) -> KeyEvent:
        return cls(kind=KeyKind.BACKSPACE)

    @classmethod
    def character(cls, char: str) -> KeyEvent:
        return cls(kind=KeyKind.CHARACTER, char=char)


# ---------------------------------------------------------------------------
# Actions (discriminated union)
# ---------------------------------------------------------------------------


class Reprompt(BaseModel):
    """Nothing to do beyond showing a fresh prompt."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["reprompt"] = "reprompt"


class ListModes(BaseModel):
    """List every registered mode in catalog order."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["list_modes"] = "list_modes"
    modes: list[Mode] = Field(description="Full catalog in insertion order")


class SwitchMode(BaseModel):
    """Switch the session to another mode and replay the banner."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["switch_mode"] = "switch_mode"
    mode: Mode


class ErrorAction(BaseModel):
    """Report an inline error; the session stays ready."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["error"] = "error"
    message: str


Action = Annotated[
    Union[Reprompt, ListModes, SwitchMode, ErrorAction],
    Field(discriminator="action_type"),
]
