"""Paywall core configuration via Pydantic Settings v2."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Env vars are read with the ``PAYWALL_`` prefix (e.g. ``PAYWALL_LOG_LEVEL``)."""

    model_config = SettingsConfigDict(
        env_prefix="PAYWALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Templating ===
    placeholder_prefix: str = "</"
    placeholder_suffix: str = "/>"

    # === Logging ===
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("placeholder_prefix", "placeholder_suffix")
    @classmethod
    def _delimiter_not_empty(cls, v: str) -> str:
        if not v:
            msg = "Placeholder delimiters must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance (cached after first call)."""
    return Settings()
