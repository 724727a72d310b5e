"""Session controller: the state machine behind one terminal session.

Owns the current mode, the input line buffer and the liveness flag, and
sequences everything the user sees: the boot banner, key echo, command
results and the clear-and-replay transition of a mode switch.

Lifecycle::

    BOOTING -> READY -> (SWITCHING -> READY)* -> DISPOSED

Keys that arrive while the session is not READY are dropped. The Enter
that starts a switch returns immediately; the transition runs as its own
task and ``wait_ready()`` awaits it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import NamedTuple

from modeterm.config.settings import Settings
from modeterm.domain.models import (
    ErrorAction,
    KeyEvent,
    KeyKind,
    ListModes,
    Mode,
    SessionState,
    SwitchMode,
)
from modeterm.modes.registry import ModeRegistry
from modeterm.session.interpreter import interpret
from modeterm.session.writer import AnimatedWriter
from modeterm.surface.base import ERASE_CHAR, LINE_BREAK, Surface

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "> "
DEFAULT_SWITCH_DELAY_MS = 500
DEFAULT_ERROR_COLOR = "#FF4A4A"
DEFAULT_NOTICE_COLOR = "#FFD166"

RULE_CHAR = "━"
SWITCHING_NOTICE = "Switching mode..."
ERROR_MESSAGES = {
    "invalid mode": 'Invalid mode. Type "modes" to see available modes.',
}


class BannerLine(NamedTuple):
    text: str
    delay_ms: int
    center: bool


class SessionController:
    """Drives one session against a surface.

    Example usage::

        controller = SessionController(BufferSurface(columns=60))
        await controller.start()
        await controller.wait_ready()
        for char in "modes":
            await controller.handle_key(KeyEvent.character(char))
        await controller.handle_key(KeyEvent.enter())
        await controller.dispose()
    """

    def __init__(
        self,
        surface: Surface,
        registry: ModeRegistry | None = None,
        initial_mode: Mode | str | None = None,
        prompt: str = DEFAULT_PROMPT,
        switch_delay_ms: int = DEFAULT_SWITCH_DELAY_MS,
        title_delay_ms: int = 20,
        rule_delay_ms: int = 10,
        line_delay_ms: int = 15,
        rule_width: int = 40,
        error_color: str = DEFAULT_ERROR_COLOR,
        notice_color: str = DEFAULT_NOTICE_COLOR,
    ) -> None:
        self._surface = surface
        self._registry = registry if registry is not None else ModeRegistry()
        self._current_mode = self._resolve_mode(initial_mode)
        self._prompt = prompt
        self._switch_delay_ms = switch_delay_ms
        self._title_delay_ms = title_delay_ms
        self._rule_delay_ms = rule_delay_ms
        self._line_delay_ms = line_delay_ms
        self._rule_width = rule_width
        self._error_color = error_color
        self._notice_color = notice_color

        self._buffer: list[str] = []
        self._active = True
        self._started = False
        self._state = SessionState.BOOTING
        self._transition: asyncio.Task[None] | None = None
        self._writer = AnimatedWriter(surface, is_active=lambda: self._active)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        surface: Surface,
        initial_mode: str | None = None,
    ) -> SessionController:
        s = settings.session
        return cls(
            surface,
            registry=ModeRegistry.from_config(settings.modes),
            initial_mode=initial_mode or s.default_mode,
            prompt=s.prompt,
            switch_delay_ms=s.switch_delay_ms,
            title_delay_ms=s.title_delay_ms,
            rule_delay_ms=s.rule_delay_ms,
            line_delay_ms=s.line_delay_ms,
            rule_width=s.rule_width,
            error_color=settings.theme.error_color,
            notice_color=settings.theme.notice_color,
        )

    # -- Properties ----------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def current_mode(self) -> Mode:
        return self._current_mode

    @property
    def input_buffer(self) -> str:
        return "".join(self._buffer)

    @property
    def registry(self) -> ModeRegistry:
        return self._registry

    # -- Lifecycle -----------------------------------------------------------

    async def start(self) -> None:
        """Begin the boot banner. Calling start() again is a no-op."""
        if self._state is SessionState.DISPOSED:
            raise RuntimeError("Cannot start a disposed session")
        if self._started:
            return
        self._started = True
        logger.info("Session starting in mode %s", self._current_mode.name)
        self._spawn(self._boot, (), SessionState.BOOTING, "boot")

    async def wait_ready(self) -> None:
        """Wait until any pending boot or switch has finished.

        A transition that failed raises its error here once; later calls
        return normally.
        """
        task = self._transition
        if task is None:
            return
        if not task.done():
            await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            if self._transition is task:
                self._transition = None
            raise task.exception()

    async def dispose(self) -> None:
        """Tear the session down; no further output or key handling."""
        if self._state is SessionState.DISPOSED:
            return
        self._active = False
        self._state = SessionState.DISPOSED
        task = self._transition
        if task is not None and not task.done():
            task.cancel()
            if task is not asyncio.current_task():
                await asyncio.wait({task})
        self._buffer.clear()
        logger.info("Session disposed")

    # -- Key handling --------------------------------------------------------

    async def handle_key(self, event: KeyEvent) -> None:
        """Process one key event delivered by the host."""
        if self._state is not SessionState.READY:
            logger.debug("Dropped %s key while %s", event.kind.value, self._state.value)
            return

        if event.kind is KeyKind.ENTER:
            self._submit()
        elif event.kind is KeyKind.BACKSPACE:
            if self._buffer:
                self._buffer.pop()
                self._surface.write(ERASE_CHAR)
        elif event.char is not None and event.char.isprintable():
            self._buffer.append(event.char)
            self._surface.write(event.char)
        else:
            logger.debug("Ignored non-printable character %r", event.char)

    def _submit(self) -> None:
        line = "".join(self._buffer)
        self._buffer.clear()
        action = interpret(line, self._registry)
        logger.debug("Submitted %r -> %s", line, action.action_type)

        if isinstance(action, SwitchMode):
            self._spawn(self._switch, (action.mode,), SessionState.SWITCHING, "switch")
            return
        if isinstance(action, ListModes):
            self._render_modes(action.modes)
        elif isinstance(action, ErrorAction):
            self._render_error(action)
        self._surface.write(LINE_BREAK + self._prompt)

    # -- Rendering -----------------------------------------------------------

    def banner(self, mode: Mode) -> list[BannerLine]:
        """The lines typed at boot, with their pacing."""
        return [
            BannerLine(f"{mode.name} - {mode.description}", self._title_delay_ms, True),
            BannerLine(RULE_CHAR * self._rule_width, self._rule_delay_ms, True),
            BannerLine("", 0, False),
            BannerLine("▲ Initializing systems...", self._line_delay_ms, True),
            BannerLine(f"▲ Loading {mode.name.lower()} modules...", self._line_delay_ms, True),
            BannerLine("", 0, False),
            BannerLine('Type "modes" to see available modes', self._line_delay_ms, True),
            BannerLine('Type "switch <mode>" to change modes', self._line_delay_ms, True),
            BannerLine("", 0, False),
        ]

    def _render_modes(self, modes: list[Mode]) -> None:
        self._surface.write(LINE_BREAK)
        for mode in modes:
            self._surface.write(mode.name, color=mode.color)
            self._surface.write(f" - {mode.description}{LINE_BREAK}")

    def _render_error(self, action: ErrorAction) -> None:
        message = ERROR_MESSAGES.get(action.message, action.message)
        self._surface.write(LINE_BREAK)
        self._surface.write(message, color=self._error_color)
        self._surface.write(LINE_BREAK)

    # -- Transitions ---------------------------------------------------------

    async def _boot(self) -> None:
        mode = self._current_mode
        self._surface.set_foreground(mode.color)
        for line in self.banner(mode):
            if not await self._writer.emit(line.text, line.delay_ms, line.center):
                return
        if self._active:
            self._surface.write(self._prompt)

    async def _switch(self, mode: Mode) -> None:
        self._surface.write(LINE_BREAK)
        self._surface.write(SWITCHING_NOTICE, color=self._notice_color)
        self._surface.write(LINE_BREAK)
        await asyncio.sleep(self._switch_delay_ms / 1000)
        if not self._active:
            return
        self._surface.clear()
        previous, self._current_mode = self._current_mode, mode
        logger.info("Switched mode %s -> %s", previous.name, mode.name)
        await self._boot()

    def _spawn(self, step, args: tuple, state: SessionState, name: str) -> None:
        self._state = state
        self._transition = asyncio.create_task(
            self._run_transition(step, args), name=f"modeterm-{name}"
        )
        self._transition.add_done_callback(self._on_transition_done)

    async def _run_transition(self, step, args: tuple) -> None:
        try:
            await step(*args)
        finally:
            # Failed steps also return to READY.
            if self._active:
                self._state = SessionState.READY

    def _on_transition_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Session transition failed: %s", exc)

    def _resolve_mode(self, mode: Mode | str | None) -> Mode:
        if mode is None:
            return self._registry.default
        if isinstance(mode, str):
            return self._registry.require(mode)
        if mode not in self._registry:
            raise ValueError(f"Mode {mode.name} is not registered")
        return mode
