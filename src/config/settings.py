"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from src.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

ENV_PREFIX = "ARCHIVE_SCANNER_"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("LOG_LEVEL", "INFO")
        self.api_host: str = self._get_env("HOST", "127.0.0.1")
        self.api_port: int = self._get_port("PORT", "8000")
        self.reload: bool = self._get_env("RELOAD", "0").lower() in {"1", "true"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, raise error if unknown."""
        name = self._get_env(key, default).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level for {ENV_PREFIX}{key}: {name}")
        return level

    def _get_port(self, key: str, default: str) -> int:
        """Get a TCP port number, raise error if it is not a valid port."""
        value = self._get_env(key, default)
        try:
            port = int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"{ENV_PREFIX}{key} must be an integer, got {value!r}"
            ) from e
        if not 1 <= port <= 65535:
            raise ConfigurationError(f"{ENV_PREFIX}{key} out of range: {port}")
        return port


def get_settings() -> Settings:
    """Re-read settings from the current environment."""
    return Settings()


# Global settings instance
settings = Settings()


def configure_logging(level: int | None = None) -> None:
    logging.basicConfig(
        level=level if level is not None else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
