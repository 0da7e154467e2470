"""Application configuration with environment validation.

Usage:
    from swimtracker.config import get_settings

    settings = get_settings()
    print(settings.data_file)
    print(settings.environment)

Environment variables (or a .env file in the working directory):
    ENVIRONMENT         local, development, production (default: local)
    DATA_FILE           Snapshot file used by the CLI (default: swimtracker.json)
    RECENT_TIMES_LIMIT  Races shown in a swimmer's recent list (default: 10)
    LOG_LEVEL           DEBUG, INFO, WARNING, ERROR (default: INFO)
    LOG_FORMAT          console, json (default: console)
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.LOCAL

    # Storage (host side only, the engine never reads it)
    data_file: Path = Field(
        default=Path("swimtracker.json"), description="JSON snapshot of swimmers and times"
    )

    # Profile view
    recent_times_limit: int = Field(
        default=10, ge=1, description="Number of races in a swimmer's recent list"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()

    Returns:
        Application settings
    """
    return Settings()
