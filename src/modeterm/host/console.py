"""Interactive console host.

Runs a session on the controlling terminal: stdin is switched to raw
mode so every key press reaches the session immediately, and output is
rendered through an AnsiSurface on stdout. Ctrl+C or Ctrl+D ends the
session and restores the terminal.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import signal
import sys
import termios
import tty
from typing import TextIO

from modeterm.domain.models import KeyEvent
from modeterm.host.keys import decode_keys, split_interrupt, split_pending_escape
from modeterm.session.controller import SessionController
from modeterm.surface.ansi import AnsiSurface
from modeterm.surface.base import LINE_BREAK

logger = logging.getLogger(__name__)

READ_CHUNK = 1024


class ConsoleHost:
    """Feeds stdin key presses to a session controller.

    Key events are queued by a loop reader callback and handed to the
    controller one at a time from ``run()``. The controller itself drops
    keys that arrive while it is booting or switching.
    """

    def __init__(
        self,
        controller: SessionController,
        surface: AnsiSurface,
        stdin: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._surface = surface
        self._stdin = stdin if stdin is not None else sys.stdin
        self._queue: asyncio.Queue[KeyEvent | None] = asyncio.Queue()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def run(self) -> None:
        """Run until the user interrupts or stdin closes."""
        loop = asyncio.get_running_loop()
        fd = self._stdin.fileno()
        saved_attrs = termios.tcgetattr(fd) if os.isatty(fd) else None

        self._running = True
        try:
            if saved_attrs is not None:
                tty.setraw(fd)
            loop.add_reader(fd, self._on_readable, fd)
            self._watch_resize(loop)
            await self._controller.start()

            while True:
                event = await self._queue.get()
                if event is None:
                    break
                await self._controller.handle_key(event)
        finally:
            loop.remove_reader(fd)
            self._unwatch_resize(loop)
            await self._controller.dispose()
            self._surface.reset()
            self._surface.write(LINE_BREAK)
            if saved_attrs is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved_attrs)
            self._running = False
            logger.info("Console host stopped")

    def stop(self) -> None:
        """Ask run() to return after the queued keys are handled."""
        self._queue.put_nowait(None)

    def _on_readable(self, fd: int) -> None:
        data = os.read(fd, READ_CHUNK)
        if not data:
            logger.debug("stdin closed")
            self.stop()
            return
        text, interrupted = split_interrupt(self._pending + self._decoder.decode(data))
        self._pending = ""
        if not interrupted:
            # Held until the rest of the sequence arrives
            text, self._pending = split_pending_escape(text)
        for event in decode_keys(text):
            self._queue.put_nowait(event)
        if interrupted:
            logger.debug("Interrupt received")
            self.stop()

    def _watch_resize(self, loop: asyncio.AbstractEventLoop) -> None:
        # Width is read live on every centered line; this only reports it.
        try:
            loop.add_signal_handler(signal.SIGWINCH, self._on_resize)
        except (NotImplementedError, RuntimeError, AttributeError):
            logger.debug("Resize notifications unavailable")

    def _unwatch_resize(self, loop: asyncio.AbstractEventLoop) -> None:
        try:
            loop.remove_signal_handler(signal.SIGWINCH)
        except (NotImplementedError, RuntimeError, AttributeError):
            pass

    def _on_resize(self) -> None:
        logger.debug("Terminal resized to %s columns", self._surface.columns())
