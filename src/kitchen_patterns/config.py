"""Application configuration via pydantic-settings.

Reads from environment variables (prefixed ``KITCHEN_``) and a .env file at
project root. Only logging is configurable; the pattern demos are fixed.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root is 2 levels up from this file:
# src/kitchen_patterns/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="KITCHEN_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---
    log_level: str = "INFO"
    log_to_file: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
