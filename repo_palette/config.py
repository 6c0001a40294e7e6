"""
Repository palette configuration.

Settings are read once from environment variables; every request shares
the same frozen instance.
"""

import logging
import os
from dataclasses import dataclass

from repo_palette.exceptions import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Service settings."""

    DEFAULT_API_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0
    DEFAULT_CONTENT_TYPE = "text/plain"

    api_url: str = DEFAULT_API_URL
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    content_type: str = DEFAULT_CONTENT_TYPE
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables:
            REPO_PALETTE_GITHUB_API_URL: Archive host API URL (optional, default: https://api.github.com)
            REPO_PALETTE_GITHUB_TOKEN: Token sent as a bearer credential (optional, falls back to GITHUB_TOKEN)
            REPO_PALETTE_TIMEOUT: Download timeout in seconds (optional, default: 30)
            REPO_PALETTE_CONTENT_TYPE: Content type of rendered palettes (optional, default: text/plain)
            REPO_PALETTE_LOG_LEVEL: Logging level name (optional, default: INFO)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        api_url = os.environ.get("REPO_PALETTE_GITHUB_API_URL", cls.DEFAULT_API_URL)
        token = os.environ.get("REPO_PALETTE_GITHUB_TOKEN") or os.environ.get("GITHUB_TOKEN")
        content_type = os.environ.get("REPO_PALETTE_CONTENT_TYPE", cls.DEFAULT_CONTENT_TYPE)

        timeout_str = os.environ.get("REPO_PALETTE_TIMEOUT", str(cls.DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_str)
        except ValueError:
            raise ConfigurationError(
                f"Invalid REPO_PALETTE_TIMEOUT: {timeout_str!r}. Must be a number of seconds"
            ) from None
        if timeout <= 0:
            raise ConfigurationError(
                f"Invalid REPO_PALETTE_TIMEOUT: {timeout_str!r}. Must be positive"
            )

        level_name = os.environ.get("REPO_PALETTE_LOG_LEVEL", "INFO").upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ConfigurationError(
                f"Invalid REPO_PALETTE_LOG_LEVEL: {level_name!r}"
            )

        return cls(
            api_url=api_url.rstrip("/"),
            token=token or None,
            timeout=timeout,
            content_type=content_type,
            log_level=log_level,
        )
