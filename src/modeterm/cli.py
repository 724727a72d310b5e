"""Command-line interface for modeterm.

Provides the main entry point for running a session on the current
terminal, serving one over HTTP, or listing the configured modes.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="modeterm",
        description="Animated mode-switching terminal session",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/modeterm.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Run a session on this terminal")
    run_parser.add_argument(
        "--mode", type=str, default=None,
        help="Mode to boot into (default: first configured mode)",
    )

    endpoint_parser = subparsers.add_parser("endpoint", help="Serve a session over HTTP")
    endpoint_parser.add_argument("--host", type=str, default=None)
    endpoint_parser.add_argument("--port", type=int, default=None)

    subparsers.add_parser("modes", help="List the configured modes")

    return parser.parse_args(argv)


async def _run_console(settings, args) -> None:
    """Build a console session and run it until interrupted."""
    from modeterm.host.console import ConsoleHost
    from modeterm.session.controller import SessionController
    from modeterm.surface.ansi import AnsiSurface

    surface = AnsiSurface(
        background=settings.theme.background, cursor=settings.theme.cursor
    )
    controller = SessionController.from_settings(settings, surface, initial_mode=args.mode)
    surface.clear()
    host = ConsoleHost(controller, surface)
    await host.run()


def _list_modes(settings) -> None:
    from modeterm.modes.registry import ModeRegistry

    registry = ModeRegistry.from_config(settings.modes)
    width = max(len(mode.name) for mode in registry)
    for mode in registry:
        print(f"{mode.name:<{width}}  {mode.color}  {mode.description}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the modeterm CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from modeterm.config.settings import load_settings
    from modeterm.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    # stdout is the rendering surface for `run`; keep log lines off it
    setup_logging(settings.logging, console=args.command != "run")

    if args.command == "run":
        logger.info("Starting console session")
        asyncio.run(_run_console(settings, args))

    elif args.command == "endpoint":
        logger.info("Starting endpoint server")
        from modeterm.endpoint.server import create_app
        import uvicorn
        ep = settings.endpoint
        app = create_app(settings=settings)
        uvicorn.run(
            app,
            host=args.host or ep.host,
            port=args.port or ep.port,
        )

    elif args.command == "modes":
        _list_modes(settings)


if __name__ == "__main__":
    main()
