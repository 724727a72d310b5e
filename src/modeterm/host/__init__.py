"""Hosts that connect a real key source and surface to a session.

Public API:
    ConsoleHost -- Raw-mode terminal host (stdin keys, ANSI stdout)
    decode_keys -- Raw terminal input to key events
    key_from_name -- Key names ('Enter', 'a') to key events
"""

from modeterm.host.keys import decode_keys, key_from_name, split_interrupt

__all__ = ["ConsoleHost", "decode_keys", "key_from_name", "split_interrupt"]


def __getattr__(name: str) -> type:
    """Lazy import for the console host, which needs a POSIX terminal."""
    if name == "ConsoleHost":
        from modeterm.host.console import ConsoleHost
        return ConsoleHost
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
