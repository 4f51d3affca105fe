"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from page_context.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("PAGE_CONTEXT_LOG_LEVEL", "INFO")
        self.default_entity_type: str = self._get_env(
            "PAGE_CONTEXT_DEFAULT_ENTITY_TYPE", "node"
        )

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a log level name, raise error if it is not a known level."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return value

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default) or default

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


# Global settings instance
settings = Settings()
