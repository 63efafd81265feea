"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default; nothing is required from the environment
    - get_settings() is cached (lru_cache) — single instance per process
    - square_delay_ms is never negative

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DRILLS_ prefix: avoids clashing with generic names like LOG_LEVEL
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Settings from DRILLS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DRILLS_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Delayed square
    square_delay_ms: int = 1000

    @field_validator("square_delay_ms")
    @classmethod
    def delay_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("square_delay_ms must be >= 0")
        return v

    # Catalog
    min_rating: float = 4.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
