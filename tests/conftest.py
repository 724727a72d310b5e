"""Shared test fixtures for the modeterm test suite.

Provides common fixtures used across unit tests: the default mode
registry, an in-memory surface, and session controllers with all pacing
delays turned off so tests run instantly.
"""

from __future__ import annotations

import pytest

from modeterm.config.settings import SessionConfig, Settings
from modeterm.domain.models import KeyEvent
from modeterm.modes.registry import ModeRegistry
from modeterm.session.controller import SessionController
from modeterm.surface.buffer import BufferSurface


# ---------------------------------------------------------------------------
# Registry / Surface Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> ModeRegistry:
    """The built-in four-mode catalog."""
    return ModeRegistry()


@pytest.fixture
def surface() -> BufferSurface:
    """A 60-column in-memory surface."""
    return BufferSurface(columns=60)


# ---------------------------------------------------------------------------
# Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fast_session_config() -> SessionConfig:
    """Session settings with every delay set to zero."""
    return SessionConfig(
        switch_delay_ms=0,
        title_delay_ms=0,
        rule_delay_ms=0,
        line_delay_ms=0,
    )


@pytest.fixture
def fast_settings(fast_session_config: SessionConfig) -> Settings:
    return Settings(session=fast_session_config)


@pytest.fixture
def controller(surface: BufferSurface, registry: ModeRegistry) -> SessionController:
    """A controller on the default catalog with no pacing delays."""
    return SessionController(
        surface,
        registry=registry,
        switch_delay_ms=0,
        title_delay_ms=0,
        rule_delay_ms=0,
        line_delay_ms=0,
    )


async def _type_line(controller: SessionController, text: str, submit: bool = True) -> None:
    for char in text:
        await controller.handle_key(KeyEvent.character(char))
    if submit:
        await controller.handle_key(KeyEvent.enter())


@pytest.fixture
def type_line():
    """Deliver ``text`` one key at a time, optionally followed by Enter."""
    return _type_line
