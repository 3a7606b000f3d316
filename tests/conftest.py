"""Shared pytest fixtures: fixed clock, weather snapshots, stage factory."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime

import pytest

from paddysense.config import get_settings
from paddysense.observability import configure_structured_logging
from paddysense.schemas.crop import GrowthStageInfo
from paddysense.schemas.irrigation import Thresholds
from paddysense.schemas.weather import WeatherSnapshot
from paddysense.services.stage_service import stage_info_for_index


@pytest.fixture(autouse=True, scope="session")
def _structured_logging() -> None:
    configure_structured_logging()


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings are cached per process; tests that patch env vars need a reload."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now_utc() -> datetime:
    return datetime(2026, 3, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def default_thresholds() -> Thresholds:
    return Thresholds(low=5, high=20)


@pytest.fixture
def dry_weather() -> WeatherSnapshot:
    return WeatherSnapshot(
        temp_c=31.0,
        wind_kmh=8.0,
        humidity_pct=62.0,
        rain_chance_pct=10.0,
        rain_forecast_24h_mm=0.0,
        is_rainy=False,
    )


@pytest.fixture
def rainy_weather() -> WeatherSnapshot:
    return WeatherSnapshot(
        temp_c=26.0,
        wind_kmh=12.0,
        humidity_pct=80.0,
        rain_chance_pct=60.0,
        rain_forecast_24h_mm=2.0,
        is_rainy=True,
    )


@pytest.fixture
def make_stage() -> Callable[[int], GrowthStageInfo]:
    return stage_info_for_index
