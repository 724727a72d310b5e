"""Static catalog of selectable modes.

The registry is built once at startup and is read-only afterwards. Its
insertion order is the order in which ``modes`` lists them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from modeterm.config.settings import ModeConfig
from modeterm.domain.models import Mode

logger = logging.getLogger(__name__)

DEFAULT_MODES: tuple[Mode, ...] = (
    Mode(name="LAB42", description="Bio-Research Terminal", color="#3A86FF"),
    Mode(name="TOP-TRADERS", description="Market Analysis System", color="#00FF9D"),
    Mode(name="X-MANAGER", description="System Control Interface", color="#FF5F5F"),
    Mode(name="AI-ASSISTANT", description="Neural Network Terminal", color="#B18CFF"),
)


class InvalidModeError(Exception):
    """Raised when a mode name does not match any registered mode."""

    def __init__(self, mode_name: str, message: str = "invalid mode") -> None:
        super().__init__(message)
        self.mode_name = mode_name


class ModeRegistry:
    """Ordered, read-only collection of modes with case-insensitive lookup."""

    def __init__(self, modes: Iterable[Mode] = DEFAULT_MODES) -> None:
        self._modes: tuple[Mode, ...] = tuple(modes)
        if not self._modes:
            raise ValueError("ModeRegistry needs at least one mode")
        self._by_key: dict[str, Mode] = {}
        for mode in self._modes:
            key = mode.name.casefold()
            if key in self._by_key:
                raise ValueError(f"Duplicate mode name: {mode.name}")
            self._by_key[key] = mode
        logger.debug("Mode registry built with %d modes", len(self._modes))

    @classmethod
    def from_config(cls, modes: Iterable[ModeConfig]) -> ModeRegistry:
        return cls(
            Mode(name=m.name, description=m.description, color=m.color) for m in modes
        )

    @property
    def default(self) -> Mode:
        """The first registered mode."""
        return self._modes[0]

    def list(self) -> list[Mode]:
        """All modes in insertion order."""
        return list(self._modes)

    def find(self, name: str) -> Mode | None:
        """Case-insensitive exact lookup; None when nothing matches."""
        return self._by_key.get(name.casefold())

    def require(self, name: str) -> Mode:
        """Like find(), but raises InvalidModeError when nothing matches."""
        mode = self.find(name)
        if mode is None:
            raise InvalidModeError(name)
        return mode

    def __contains__(self, mode: object) -> bool:
        return mode in self._modes

    def __iter__(self) -> Iterator[Mode]:
        return iter(self._modes)

    def __len__(self) -> int:
        return len(self._modes)
