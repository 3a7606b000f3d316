"""Pydantic records for normalized weather input and weather-driven alerts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from paddysense.models.enums import AdviceCategoryEnum, WeatherAlertKindEnum
from paddysense.schemas.crop import RECORD_CONFIG


class WeatherSnapshot(BaseModel):
	"""Current conditions plus the next-24h rain outlook from the provider."""

	model_config = RECORD_CONFIG

	temp_c: float
	wind_kmh: float = Field(ge=0)
	humidity_pct: float = Field(ge=0, le=100)
	rain_chance_pct: float = Field(default=0.0, ge=0, le=100)
	rain_forecast_24h_mm: float = Field(default=0.0, ge=0)
	is_rainy: bool = False
	condition_code: int | None = None


class WeatherAlert(BaseModel):
	model_config = RECORD_CONFIG

	kind: WeatherAlertKindEnum
	severity: AdviceCategoryEnum
	text: str
