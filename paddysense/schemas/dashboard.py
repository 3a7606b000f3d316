"""Pydantic record for one plot's combined evaluation."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from paddysense.schemas.alerts import PlotAlert
from paddysense.schemas.crop import RECORD_CONFIG, GrowthStageInfo
from paddysense.schemas.irrigation import IrrigationAdvice, Thresholds
from paddysense.schemas.weather import WeatherAlert


class PlotEvaluation(BaseModel):
	model_config = RECORD_CONFIG

	plot_id: str
	generated_at: datetime
	level: float
	thresholds: Thresholds
	crop_configured: bool
	stage: GrowthStageInfo | None = None
	advice: IrrigationAdvice
	weather_condition: str | None = None
	weather_alerts: tuple[WeatherAlert, ...] = ()
	alerts: tuple[PlotAlert, ...] = ()
