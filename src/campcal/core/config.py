"""Configuration for campcal.

Settings come from environment variables (prefix ``CAMPCAL_``) and an
optional ``.env`` file.

Environment Variables:
    CAMPCAL_DEFAULT_CALENDAR: Calendar used when none is named (default: gregorian)
    CAMPCAL_CALENDAR_DIR: Directory of ``*.json`` calendars registered at startup
    CAMPCAL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CAMPCAL_JSON_LOGS: Emit JSON log lines instead of console output
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CampcalSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CAMPCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_calendar: str = Field(default="gregorian", min_length=1)
    calendar_dir: Path | None = Field(
        default=None,
        description="Directory of JSON calendar definitions to register at startup",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    json_logs: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> CampcalSettings:
    return CampcalSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` re-reads the environment."""
    get_settings.cache_clear()
