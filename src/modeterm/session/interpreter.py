"""Command interpreter for submitted input lines.

Two commands are understood:

    modes               -- list every registered mode
    switch <mode>       -- switch to the named mode (case-insensitive)

Anything else, including an empty line, just re-issues the prompt. The
trimmed line is split on single spaces and only the first two tokens
matter; extra tokens after the mode name are ignored. A doubled space
makes the mode name empty, which is reported as an invalid mode.
"""

from __future__ import annotations

import logging

from modeterm.domain.models import Action, ErrorAction, ListModes, Reprompt, SwitchMode
from modeterm.modes.registry import InvalidModeError, ModeRegistry

logger = logging.getLogger(__name__)

MODES_COMMAND = "modes"
SWITCH_COMMAND = "switch"


def interpret(line: str, registry: ModeRegistry) -> Action:
    """Turn one submitted line into an Action. Pure; performs no I/O."""
    stripped = line.strip()
    if not stripped:
        return Reprompt()
    tokens = stripped.split(" ")

    command = tokens[0].casefold()

    if command == MODES_COMMAND:
        return ListModes(modes=registry.list())

    if command == SWITCH_COMMAND and len(tokens) > 1:
        try:
            mode = registry.require(tokens[1])
        except InvalidModeError as e:
            logger.debug("Rejected switch to %r", e.mode_name)
            return ErrorAction(message=str(e))
        return SwitchMode(mode=mode)

    return Reprompt()
