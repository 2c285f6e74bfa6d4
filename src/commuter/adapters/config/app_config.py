"""12-factor runtime settings using environment variables and an optional .env file."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Runtime settings following 12-factor principles.

    The provider API key is not a setting: it is stored by the configure
    command alongside the saved locations.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    storage_dir: Path = Field(
        default=Path.home() / ".commuter",
        description="Directory holding the stored configuration and saved locations",
    )
    request_timeout_seconds: float = Field(
        default=10, description="Timeout for mapping provider requests in seconds"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("storage_dir")
    @classmethod
    def expand_storage_dir(cls, v: Path) -> Path:
        """Expand a leading ~ in the storage directory."""
        return v.expanduser()

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level
