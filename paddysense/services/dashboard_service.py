"""Plot evaluation service: wires stage, advice and alerts for one plot."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import structlog

from paddysense.config import Settings, get_settings
from paddysense.observability import configure_structured_logging
from paddysense.schemas.crop import CropConfig
from paddysense.schemas.dashboard import PlotEvaluation
from paddysense.schemas.irrigation import Thresholds
from paddysense.schemas.weather import WeatherSnapshot
from paddysense.services.alerts_service import build_plot_alerts
from paddysense.services.irrigation_service import IrrigationAdvisor, load_thresholds
from paddysense.services.stage_service import InvalidConfigError, compute_stage
from paddysense.services.weather_service import analyze_weather, describe_weather_code


class PlotDashboardService:
	"""Evaluates a single plot from the records its caller has loaded.

	A missing or unreadable crop configuration is not an error here: the plot
	is reported as unconfigured and advice falls back to the stage-less ladder.
	"""

	def __init__(self, settings: Settings | None = None):
		configure_structured_logging()
		self.settings = settings or get_settings()
		self.advisor = IrrigationAdvisor(self.settings)
		self._logger = structlog.get_logger("paddysense.dashboard_service")

	def evaluate(
		self,
		plot_id: str,
		level: float,
		now: datetime,
		crop_config: CropConfig | Mapping[str, Any] | None = None,
		thresholds: Thresholds | Mapping[str, Any] | None = None,
		weather: WeatherSnapshot | None = None,
		plot_name: str | None = None,
	) -> PlotEvaluation:
		log = self._logger.bind(plot_id=plot_id)

		if not isinstance(thresholds, Thresholds):
			thresholds = load_thresholds(thresholds, self.settings)

		stage = None
		if crop_config is not None:
			try:
				stage = compute_stage(crop_config, now)
			except InvalidConfigError as exc:
				log.warning("crop_not_configured", error=str(exc))

		advice = self.advisor.compute_advice(level, thresholds, weather, stage)
		weather_alerts = analyze_weather(stage.stage_index, weather) if stage is not None else []
		alerts = build_plot_alerts(
			plot_id,
			plot_name or plot_id,
			level,
			thresholds,
			weather,
			stage,
			self.settings,
		)

		log.info(
			"plot_evaluated",
			stage_index=stage.stage_index if stage is not None else None,
			advice=advice.category.value,
			alert_count=len(alerts),
		)
		return PlotEvaluation(
			plot_id=plot_id,
			generated_at=now,
			level=level,
			thresholds=thresholds,
			crop_configured=stage is not None,
			stage=stage,
			advice=advice,
			weather_condition=describe_weather_code(weather.condition_code) if weather is not None else None,
			weather_alerts=tuple(weather_alerts),
			alerts=tuple(alerts),
		)
