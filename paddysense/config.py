"""Engine settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration: all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # ── Gauge geometry ──────────────────────────────────────────────────────
    # Absolute pipe scale: 0cm = pipe bottom, 15cm = soil surface, 30cm = top.
    soil_surface_cm: float = 15.0

    # ── Default thresholds ──────────────────────────────────────────────────
    default_threshold_low_cm: float = 5.0
    default_threshold_high_cm: float = 20.0

    # ── Rain forecast ───────────────────────────────────────────────────────
    rain_chance_expected_pct: float = 50.0
    rain_volume_expected_mm: float = 5.0

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
