"""
Configuration management for the SDK.
"""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.stack0.dev"


class Settings(BaseSettings):
    """Client settings, read from ``STACK0_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="STACK0_", extra="ignore"
    )

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    cdn_url: Optional[str] = None
    timeout_seconds: float = 30
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def setup_logging(self) -> None:
        """Configure logging for the SDK."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        if self.debug:
            level = logging.DEBUG

        logger = logging.getLogger("stack0")
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)


def get_settings() -> Settings:
    return Settings()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"stack0.{name}")
