"""FastAPI HTTP server hosting a session on an in-memory screen.

Receives key presses via HTTP and forwards them to the session
controller. The rendered screen can be read back at any time. Startup
waits for the boot banner and each key request waits for the transition
it triggers, so clients always observe a settled screen.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, Field

from modeterm.config.settings import Settings, load_settings
from modeterm.domain.models import KeyEvent
from modeterm.host.keys import key_from_name
from modeterm.session.controller import SessionController
from modeterm.surface.buffer import BufferSurface

logger = logging.getLogger(__name__)


class KeystrokeRequest(BaseModel):
    key: str = Field(description="Key name (e.g., 'Enter', 'Backspace', 'a')")


class TextInputRequest(BaseModel):
    text: str = Field(description="Text to type, one Character key per character")


class ResizeRequest(BaseModel):
    cols: int = Field(ge=0, description="New surface width in character cells")


class EndpointStatus(BaseModel):
    status: str = "ok"
    state: str
    active: bool


class SessionInfo(BaseModel):
    mode: str
    state: str
    input: str


def create_app(
    controller: SessionController | None = None,
    surface: BufferSurface | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    A controller and surface may be injected (tests); otherwise both are
    built from ``settings`` when the app starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Startup
        cfg = settings or Settings()
        s = app.state.surface
        c = app.state.controller
        if s is None:
            s = BufferSurface(columns=cfg.endpoint.columns, rows=cfg.endpoint.rows)
            app.state.surface = s
        if c is None:
            c = SessionController.from_settings(cfg, s)
            app.state.controller = c
        await c.start()
        await c.wait_ready()
        logger.info("Endpoint started (mode %s)", c.current_mode.name)
        yield
        # Shutdown
        await c.dispose()
        logger.info("Endpoint stopped")

    app = FastAPI(
        title="modeterm Endpoint",
        description="HTTP host for a modeterm session",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.controller = controller
    app.state.surface = surface

    async def _deliver(event: KeyEvent) -> None:
        c: SessionController = app.state.controller
        await c.handle_key(event)
        await c.wait_ready()

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        c: SessionController = app.state.controller
        return EndpointStatus(state=c.state.value, active=c.is_active)

    @app.post("/keystroke")
    async def receive_keystroke(request: KeystrokeRequest) -> dict[str, str]:
        event = key_from_name(request.key)
        if event is None:
            return {"status": "ignored", "reason": f"Unknown key: {request.key}"}
        await _deliver(event)
        return {"status": "ok", "key": request.key}

    @app.post("/text")
    async def receive_text(request: TextInputRequest) -> dict[str, str]:
        for char in request.text:
            await _deliver(KeyEvent.character(char))
        return {"status": "ok", "length": str(len(request.text))}

    @app.get("/screen")
    async def get_screen_content() -> dict[str, str]:
        s: BufferSurface = app.state.surface
        return {"content": s.screen_text()}

    @app.get("/session")
    async def get_session() -> SessionInfo:
        c: SessionController = app.state.controller
        return SessionInfo(mode=c.current_mode.name, state=c.state.value, input=c.input_buffer)

    @app.post("/resize")
    async def resize(request: ResizeRequest) -> dict[str, str]:
        s: BufferSurface = app.state.surface
        s.resize(request.cols)
        return {"status": "ok", "cols": str(request.cols)}

    return app


def main() -> None:
    """Entry point for running the endpoint server standalone."""
    settings = load_settings()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.endpoint.host, port=settings.endpoint.port)


if __name__ == "__main__":
    main()
