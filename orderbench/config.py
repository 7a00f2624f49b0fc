"""Configuration loading for the orderbench service.

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
        extra="ignore",
    )

    # Order store configuration
    store_backend: Literal["console", "sqlite"] = Field(
        default="console",
        description="Order store backend type",
    )
    store_sqlite_path: str = Field(
        default="./data/orders.db",
        description="SQLite database file path",
    )

    # Notification configuration
    notification_backend: Literal["stdout", "webhook"] = Field(
        default="stdout",
        description="Notification backend type",
    )
    notification_webhook_url: str = Field(
        default="",
        description="Endpoint for webhook notifications",
    )
    notification_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for webhook notification requests",
    )

    # Calculator configuration
    subtract_delay_seconds: float = Field(
        default=3.0,
        description="Artificial delay applied before subtract returns",
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

    # Run mode
    run_mode: Literal["server", "cli"] = Field(
        default="server",
        description="Run mode",
    )

    # HTTP API configuration
    http_host: str = Field(
        default="127.0.0.1",
        description="Host to listen on for the HTTP API",
    )
    http_port: int = Field(
        default=8080,
        description="Port to listen on for the HTTP API",
    )
    http_api_key: str = Field(
        default="",
        description="API key for HTTP authentication",
    )
    http_require_auth: bool = Field(
        default=False,
        description="Require API key authentication for HTTP endpoints",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("subtract_delay_seconds")
    @classmethod
    def validate_subtract_delay(cls, v: float) -> float:
        """Ensure subtract delay is non-negative."""
        if v < 0:
            raise ValueError("subtract_delay_seconds must be non-negative")
        return v

    @field_validator("notification_timeout_seconds")
    @classmethod
    def validate_notification_timeout(cls, v: float) -> float:
        """Ensure notification timeout is positive."""
        if v <= 0:
            raise ValueError("notification_timeout_seconds must be positive")
        return v

    @field_validator("http_port")
    @classmethod
    def validate_http_port(cls, v: int) -> int:
        """Ensure HTTP port is in valid range (0 picks a free port)."""
        if v < 0 or v > 65535:
            raise ValueError("http_port must be between 0 and 65535")
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
