from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the document store.

    Values are loaded from ``DOCSTORE_*`` environment variables (or ``.env``).
    The CLI's ``--count`` flag takes precedence over ``demo_document_count``.
    """

    # Random data generation
    random_max_age_seconds: PositiveInt = 1_000_000
    demo_document_count: PositiveInt = 10

    # Logging
    # Unset defers to LOG_LEVEL, then INFO.
    log_level: str | None = None
    # Unset defers to the LOG_FORMAT environment variable.
    log_format: Literal["plain", "json"] | None = None

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
