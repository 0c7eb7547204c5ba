# pokemon_review_api/config.py

"""
Configuration for the Pokemon Review API.

Values come from environment variables prefixed with ``POKEMON_API_`` (or a
local ``.env`` file), validated by pydantic-settings.

Environment variables
=====================

- POKEMON_API_DATABASE_URL
    SQLAlchemy database URL.
    Default: "sqlite:///./pokemon_review.db"

- POKEMON_API_ECHO_SQL
    Echo SQL statements emitted by the engine.
    Default: false

- POKEMON_API_CREATE_TABLES
    Create missing tables on startup.
    Default: true

- POKEMON_API_LOG_LEVEL / POKEMON_API_LOG_FORMAT
    Logging level and renderer ("json" or "console").
    Default: "INFO" / "console"

- POKEMON_API_CORS_ORIGINS
    Comma-separated list of allowed origins, "*" for all.
    Default: "*"

Typical usage
=============

    from pokemon_review_api.config import get_settings

    settings = get_settings()
    engine = create_engine(settings.database_url)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration registry for the HTTP service.
    """

    # --- Application Meta ---
    app_name: str = "Pokemon Review API"
    version: str = "0.1.0"
    debug: bool = False
    api_prefix: str = "/api"

    # --- Persistence ---
    database_url: str = "sqlite:///./pokemon_review.db"
    echo_sql: bool = False
    create_tables: bool = True

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "console"

    # --- HTTP ---
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_prefix="POKEMON_API_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value or value == "/":
            return ""
        if not value.startswith("/"):
            value = "/" + value
        return value.rstrip("/")

    @property
    def cors_origin_list(self) -> List[str]:
        """Parsed ``cors_origins``; an empty or "*" value allows every origin."""
        raw = self.cors_origins.strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]


# Singleton configuration instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the process-wide Settings, reading the environment on first use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Settings) -> None:
    """
    Replace the process-wide Settings.

    Mainly useful for tests that need a different database URL without
    touching environment variables.
    """
    global _SETTINGS
    _SETTINGS = settings


__all__ = ["Settings", "get_settings", "set_settings"]
