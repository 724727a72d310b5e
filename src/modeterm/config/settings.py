"""Configuration management for modeterm.

Loads settings from a YAML configuration file with environment variable
overrides (``MODETERM_`` prefix, ``__`` for nested sections). Supports
.env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/modeterm.yaml")

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ModeConfig(BaseModel):
    name: str = Field(min_length=1, description="Mode name, matched case-insensitively")
    description: str = Field(default="")
    color: str = Field(default="#FFFFFF", pattern=HEX_COLOR_PATTERN)


def _default_modes() -> list[ModeConfig]:
    return [
        ModeConfig(name="LAB42", description="Bio-Research Terminal", color="#3A86FF"),
        ModeConfig(name="TOP-TRADERS", description="Market Analysis System", color="#00FF9D"),
        ModeConfig(name="X-MANAGER", description="System Control Interface", color="#FF5F5F"),
        ModeConfig(name="AI-ASSISTANT", description="Neural Network Terminal", color="#B18CFF"),
    ]


class SessionConfig(BaseModel):
    prompt: str = Field(default="> ")
    default_mode: str | None = Field(
        default=None, description="Mode selected at boot (first catalog entry if unset)"
    )
    switch_delay_ms: int = Field(default=500, ge=0)
    title_delay_ms: int = Field(default=20, ge=0)
    rule_delay_ms: int = Field(default=10, ge=0)
    line_delay_ms: int = Field(default=15, ge=0)
    rule_width: int = Field(default=40, ge=0)


class ThemeConfig(BaseModel):
    error_color: str = Field(default="#FF4A4A", pattern=HEX_COLOR_PATTERN)
    notice_color: str = Field(default="#FFD166", pattern=HEX_COLOR_PATTERN)
    background: str = Field(default="#0B132B", pattern=HEX_COLOR_PATTERN)
    cursor: str = Field(default="#5DE2FF", pattern=HEX_COLOR_PATTERN)


class EndpointConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)
    columns: int = Field(default=60, gt=0)
    rows: int = Field(default=18, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the modeterm system.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "MODETERM_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    session: SessionConfig = Field(default_factory=SessionConfig)
    modes: list[ModeConfig] = Field(default_factory=_default_modes)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("modes")
    @classmethod
    def _modes_not_empty(cls, value: list[ModeConfig]) -> list[ModeConfig]:
        if not value:
            raise ValueError("at least one mode must be configured")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment must win over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
