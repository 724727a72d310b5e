"""modeterm -- Animated mode-switching terminal session engine.

This package implements a small interactive session that types its output
to a text surface with a teletype effect, collects key input into a line
buffer, and understands two commands: ``modes`` and ``switch <name>``.
Surfaces and key sources are pluggable, so the same engine drives a real
ANSI terminal or an in-memory screen served over HTTP.
"""

__version__ = "0.1.0"
