"""Tests for the console host (stdin replaced by a pipe)."""

from __future__ import annotations

import asyncio
import io
import os
from unittest.mock import MagicMock

import pytest

from modeterm.domain.models import KeyEvent, SessionState
from modeterm.host.console import ConsoleHost
from modeterm.session.controller import SessionController
from modeterm.surface.ansi import AnsiSurface


class _PipeStdin:
    """Minimal stdin stand-in exposing a pipe's read end."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


class TestOnReadable:
    @pytest.mark.asyncio
    async def test_keys_are_queued_until_interrupt(self, pipe) -> None:
        r, w = pipe
        host = ConsoleHost(
            MagicMock(), AnsiSurface(io.StringIO(), fixed_columns=40), stdin=_PipeStdin(r)
        )
        os.write(w, b"ok\r\x03ignored")
        host._on_readable(r)

        queued = [host._queue.get_nowait() for _ in range(4)]
        assert queued == [
            KeyEvent.character("o"),
            KeyEvent.character("k"),
            KeyEvent.enter(),
            None,
        ]
        assert host._queue.empty()

    @pytest.mark.asyncio
    async def test_split_utf8_sequence(self, pipe) -> None:
        r, w = pipe
        host = ConsoleHost(
            MagicMock(), AnsiSurface(io.StringIO(), fixed_columns=40), stdin=_PipeStdin(r)
        )
        encoded = "é".encode()
        os.write(w, encoded[:1])
        host._on_readable(r)
        assert host._queue.empty()
        os.write(w, encoded[1:])
        host._on_readable(r)
        assert host._queue.get_nowait() == KeyEvent.character("é")

    @pytest.mark.asyncio
    async def test_escape_sequence_split_across_reads(self, pipe) -> None:
        r, w = pipe
        host = ConsoleHost(
            MagicMock(), AnsiSurface(io.StringIO(), fixed_columns=40), stdin=_PipeStdin(r)
        )
        os.write(w, b"a\x1b")
        host._on_readable(r)
        os.write(w, b"[Ab")
        host._on_readable(r)

        queued = []
        while not host._queue.empty():
            queued.append(host._queue.get_nowait())
        assert queued == [KeyEvent.character("a"), KeyEvent.character("b")]

    @pytest.mark.asyncio
    async def test_eof_stops(self, pipe) -> None:
        r, w = pipe
        host = ConsoleHost(
            MagicMock(), AnsiSurface(io.StringIO(), fixed_columns=40), stdin=_PipeStdin(r)
        )
        os.close(w)
        host._on_readable(r)
        assert host._queue.get_nowait() is None


class TestRun:
    @pytest.mark.asyncio
    async def test_session_runs_until_ctrl_d(self, pipe) -> None:
        r, w = pipe
        stream = io.StringIO()
        surface = AnsiSurface(stream, fixed_columns=60)
        controller = SessionController(
            surface, switch_delay_ms=0, title_delay_ms=0, rule_delay_ms=0, line_delay_ms=0
        )
        host = ConsoleHost(controller, surface, stdin=_PipeStdin(r))

        task = asyncio.create_task(host.run())
        for _ in range(200):
            if controller.state is SessionState.READY:
                break
            await asyncio.sleep(0.005)
        assert controller.state is SessionState.READY
        assert host.is_running

        os.write(w, b"modes\r\x04")
        await asyncio.wait_for(task, timeout=2.0)

        output = stream.getvalue()
        assert "Neural Network Terminal" in output
        assert controller.state is SessionState.DISPOSED
        assert not host.is_running
