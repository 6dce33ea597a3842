"""Runtime configuration, read from ``GPX_PROFILE_*`` environment variables or a ``.env`` file."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class OutputFormat(str, Enum):
    JSON = "json"
    COMPACT_JSON = "compact-json"
    CSV = "csv"
    TEXT = "text"


class Settings(BaseSettings):
    """Defaults used by the CLI and the HTTP endpoint when no option overrides them."""

    model_config = SettingsConfigDict(env_prefix="GPX_PROFILE_", env_file=".env", extra="ignore")

    segment_distance_km: float = Field(
        default=1.0, gt=0, allow_inf_nan=False, description="Segment width in km"
    )
    output_format: OutputFormat = Field(default=OutputFormat.JSON)
    compact_json: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    # === Server ===
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, gt=0, lt=65536)
    reload: bool = Field(default=False, description="Restart the server on code changes")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
