"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings only shape the service/API layer; library functions never read them
    - get_settings() is cached (lru_cache) — single instance per process
    - Env vars use the CHRONO_INTERVALS_ prefix

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults mirror the library defaults: PER_DAY, offset 0, precision 1ms
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chrono_intervals.core.domain_types import Grouping, MAX_OFFSET_SECONDS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHRONO_INTERVALS_", env_file=".env", case_sensitive=False,
    )

    # Generation defaults (API requests may override per call)
    default_grouping: Grouping = Grouping.PER_DAY
    default_offset_west_secs: int = Field(
        0, gt=-MAX_OFFSET_SECONDS, lt=MAX_OFFSET_SECONDS,
    )
    default_precision_us: int = Field(1_000, gt=0)

    # Response-size guard
    max_intervals: int = Field(10_000, gt=0)

    @field_validator("default_grouping", mode="before")
    @classmethod
    def normalize_grouping(cls, v):
        """Accept PER_DAY / per-day / per_day spellings from the environment."""
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
