"""Configuration management for gitfit."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitfit.errors import ConfigurationError

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GITFIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Alias source
    source: str | None = Field(default=None, description="URL or local path of the alias definition file")
    timeout_seconds: float = Field(default=20.0, gt=0, description="Network timeout for fetching the source")

    # Git
    git_executable: str = Field(default="git", description="Git binary used to write global configuration")

    # Shell profile
    customize_prompt: bool = Field(default=True, description="Patch the shell startup file to show the branch")
    profile_path: Path | None = Field(default=None, description="Shell startup file, detected from $SHELL if unset")

    # Logging
    log_level: LogLevel = Field(default="INFO", description="Log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


def get_settings(**overrides: object) -> Settings:
    """Build settings from the environment, applying non-None overrides.

    Args:
        overrides: Field values taken from command line options.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a setting does not validate.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"invalid settings: {problems}") from exc
