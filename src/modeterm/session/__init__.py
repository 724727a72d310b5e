"""Session engine for modeterm.

Public API:
    SessionController -- State machine owning mode, input buffer, liveness
    AnimatedWriter -- Typewriter-paced output
    interpret -- Pure command interpreter
"""

from modeterm.session.controller import SessionController
from modeterm.session.interpreter import interpret
from modeterm.session.writer import AnimatedWriter, centered

__all__ = ["AnimatedWriter", "SessionController", "centered", "interpret"]
