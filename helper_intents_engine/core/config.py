"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HELPER_INTENTS_LOG_LEVEL: str = Field(default="info")
    HELPER_INTENTS_LOG_DIR: Path | None = Field(default=None)
    HELPER_INTENTS_LOG_TO_FILE: bool = Field(default=True)
    HELPER_INTENTS_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    # Locale used when the platform request does not declare one
    DEFAULT_LOCALE: str = Field(default="en-US")
    # Directory of <locale>.json string tables; packaged tables when unset
    STRINGS_DIR: Path | None = Field(default=None)

    WEBHOOK_AUTH_TOKEN: str | None = Field(default=None)
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_WEBHOOK_AUTH: bool = Field(default=False)


settings = Settings()
config = settings  # Alias used by the API layer


__all__ = ["Settings", "settings", "config"]
