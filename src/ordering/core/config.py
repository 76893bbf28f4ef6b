"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .errors import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"json", "console"}


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///./ordering.db"
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 10
    create_tables: bool = True  # Run CREATE TABLE IF NOT EXISTS on bootstrap


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "ORDERING_", "env_nested_delimiter": "__"}

    def validate_logging(self) -> None:
        """Reject log levels and formats the logging setup cannot honour."""
        level = self.observability.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.observability.log_level!r}")
        if self.observability.log_format not in _LOG_FORMATS:
            raise ConfigError(
                f"Unknown log format: {self.observability.log_format!r} "
                f"(expected one of {sorted(_LOG_FORMATS)})"
            )


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

    if overrides:
        data.update(overrides)

    return Settings(**data)
