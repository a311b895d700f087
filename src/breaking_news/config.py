"""Configuration management."""

import logging
import os

# Global singleton instance
_config_instance: "Config | None" = None

DEFAULT_LOG_LEVEL = "INFO"


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration with defaults and env overrides."""
        self._log_level = _parse_log_level(
            os.environ.get("BREAKING_NEWS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        )

        # JSON logging
        json_logging_env = os.environ.get("BREAKING_NEWS_JSON_LOGGING", "false")
        self._json_logging = json_logging_env.strip().lower() in ("true", "1", "yes")

    @property
    def log_level(self) -> str:
        """Upper-case stdlib level name, e.g. "DEBUG"."""
        return self._log_level

    @property
    def json_logging(self) -> bool:
        """Whether to use JSON logging format."""
        return self._json_logging


def _parse_log_level(raw: str) -> str:
    """Normalize a level name from the environment.

    Args:
        raw: Level name as given, any case, surrounding whitespace allowed.

    Returns:
        The upper-case level name, or DEFAULT_LOG_LEVEL if stdlib logging
        does not know it.
    """
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        The singleton Config instance.
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance
