"""Configuration management for modeterm.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides for every setting.
"""

from modeterm.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
