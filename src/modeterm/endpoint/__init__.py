"""HTTP endpoint host for modeterm.

Serves one session over HTTP: keys in, rendered screen out. Useful for
driving the session from scripts or another process.
"""
