"""Configuration loading for calcapp.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Store configuration
    store_backend: Literal["memory", "sqlite"] = Field(
        default="memory",
        description="Backend for results and users",
    )
    result_store_enabled: bool = Field(
        default=True,
        description="Persist calculator results (logger-only calculator when False)",
    )
    store_sqlite_path: str = Field(
        default="./data/calcapp.db",
        description="SQLite database file path, or :memory:",
    )
    seed_users: list[str] = Field(
        default_factory=lambda: ["Alice", "Bob"],
        description="Names preloaded into an empty user repository",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("store_sqlite_path")
    @classmethod
    def validate_sqlite_path(cls, v: str) -> str:
        """Ensure the SQLite path is not blank."""
        if not v.strip():
            raise ValueError("store_sqlite_path must be a non-empty string")
        return v

    @field_validator("seed_users")
    @classmethod
    def validate_seed_users(cls, v: list[str]) -> list[str]:
        """Ensure every seed name is non-blank."""
        for name in v:
            if not name.strip():
                raise ValueError("seed_users entries must be non-empty strings")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
