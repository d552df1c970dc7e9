"""
Configuration settings for passbleed.

Uses Pydantic Settings to load environment variables for logging, public
suffix list handling, and CSV parsing limits. Values can also come from a
local `.env` file.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Public suffix list
    psl_fetch: bool = Field(False, alias="PSL_FETCH")
    psl_private_domains: bool = Field(True, alias="PSL_PRIVATE_DOMAINS")
    psl_cache_dir: Optional[str] = Field(None, alias="PSL_CACHE_DIR")

    # CSV parsing
    csv_field_size_limit: int = Field(1_048_576, alias="CSV_FIELD_SIZE_LIMIT", gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
