"""Per-plot alert derivation for the alert centre.

Combines the crop stage's management tips, the water-level limits and the
weather snapshot into one severity-ordered list for a single plot.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import structlog

from paddysense.config import Settings, get_settings
from paddysense.models.enums import AlertGroupEnum, AlertSeverityEnum, TipCategoryEnum
from paddysense.schemas.alerts import PlotAlert
from paddysense.schemas.crop import GrowthStageInfo, Tip
from paddysense.schemas.irrigation import Thresholds
from paddysense.schemas.weather import WeatherSnapshot
from paddysense.services.irrigation_service import is_rain_expected
from paddysense.services.weather_service import FLOWERING_STAGE, HEAT_STRESS_C, HIGH_WIND_KMH

_logger = structlog.get_logger("paddysense.alerts_service")

_SEVERITY_RANK = {
	AlertSeverityEnum.critical: 0,
	AlertSeverityEnum.warning: 1,
	AlertSeverityEnum.action: 2,
	AlertSeverityEnum.info: 3,
}

_CROP_HEALTH_TIPS = {
	TipCategoryEnum.pest,
	TipCategoryEnum.disease,
	TipCategoryEnum.nutrient,
	TipCategoryEnum.weeds,
}

# Real-time alerts reflect a live condition and stay active while it persists.
_REALTIME_GROUPS = {AlertGroupEnum.irrigation, AlertGroupEnum.weather}


def _fmt(value: float) -> str:
	return f"{value:g}"


def _tip_severity(category: TipCategoryEnum) -> AlertSeverityEnum:
	if category in {TipCategoryEnum.pest, TipCategoryEnum.disease}:
		return AlertSeverityEnum.warning
	if category in {TipCategoryEnum.nutrient, TipCategoryEnum.weeds}:
		return AlertSeverityEnum.action
	return AlertSeverityEnum.info


def _tip_alert(plot_id: str, plot_name: str, stage_index: int, tip: Tip) -> PlotAlert:
	# Id carries the stage so a tip category re-appears when the crop advances.
	clean_category = re.sub(r"[^a-zA-Z0-9]", "", tip.category.value)
	return PlotAlert(
		id=f"{plot_id}-stg{stage_index}-{clean_category}",
		plot_id=plot_id,
		plot_name=plot_name,
		category=tip.category.value,
		group=AlertGroupEnum.crop_health if tip.category in _CROP_HEALTH_TIPS else AlertGroupEnum.other,
		title=f"{tip.category.value} Alert",
		message=tip.text,
		severity=_tip_severity(tip.category),
		icon=tip.icon,
		completable=True,
	)


def build_plot_alerts(
	plot_id: str,
	plot_name: str,
	level: float,
	thresholds: Thresholds | None = None,
	weather: WeatherSnapshot | None = None,
	stage: GrowthStageInfo | None = None,
	settings: Settings | None = None,
) -> list[PlotAlert]:
	"""Alerts for one plot, most urgent first."""
	settings = settings or get_settings()
	thresholds = thresholds or Thresholds.defaults(settings)
	rain_expected = is_rain_expected(weather, settings)
	rain_chance = weather.rain_chance_pct if weather is not None else 0.0

	alerts: list[PlotAlert] = []

	if stage is not None:
		alerts.extend(
			_tip_alert(plot_id, plot_name, stage.stage_index, tip) for tip in stage.management_tips
		)

	if level < thresholds.low:
		if rain_expected:
			alerts.append(
				PlotAlert(
					id=f"{plot_id}-water-wait",
					plot_id=plot_id,
					plot_name=plot_name,
					category="Irrigation",
					group=AlertGroupEnum.irrigation,
					title="Delay Irrigation",
					message=(
						f"Level is low ({_fmt(level)}cm) but rain is expected "
						f"({_fmt(rain_chance)}%). Wait and monitor."
					),
					severity=AlertSeverityEnum.warning,
					icon="cloud-rain",
				)
			)
		else:
			alerts.append(
				PlotAlert(
					id=f"{plot_id}-water-crit",
					plot_id=plot_id,
					plot_name=plot_name,
					category="Irrigation",
					group=AlertGroupEnum.irrigation,
					title="Start Irrigation",
					message=(
						f"Critical low level ({_fmt(level)}cm). "
						f"Irrigate immediately to {_fmt(settings.soil_surface_cm)}cm."
					),
					severity=AlertSeverityEnum.critical,
					icon="droplets",
				)
			)
	elif level > thresholds.high:
		alerts.append(
			PlotAlert(
				id=f"{plot_id}-water-high",
				plot_id=plot_id,
				plot_name=plot_name,
				category="Drainage",
				group=AlertGroupEnum.irrigation,
				title="Stop Irrigation / Drain",
				message=f"Water level excessive ({_fmt(level)}cm). Stop inflow immediately.",
				severity=AlertSeverityEnum.critical if rain_expected else AlertSeverityEnum.warning,
				icon="arrow-right",
			)
		)

	if weather is not None and stage is not None:
		if weather.wind_kmh > HIGH_WIND_KMH and stage.stage_index >= FLOWERING_STAGE:
			alerts.append(
				PlotAlert(
					id=f"{plot_id}-wind",
					plot_id=plot_id,
					plot_name=plot_name,
					category="Weather",
					group=AlertGroupEnum.weather,
					title="High Wind Alert",
					message=(
						f"Wind {_fmt(weather.wind_kmh)}km/h. Risk of lodging for "
						f"{stage.stage_name} crop. Drain field to anchor roots."
					),
					severity=AlertSeverityEnum.critical,
					icon="wind",
				)
			)
		if weather.temp_c > HEAT_STRESS_C and stage.stage_index == FLOWERING_STAGE:
			alerts.append(
				PlotAlert(
					id=f"{plot_id}-heat",
					plot_id=plot_id,
					plot_name=plot_name,
					category="Weather",
					group=AlertGroupEnum.weather,
					title="Heat Stress",
					message=(
						f"High temp ({_fmt(weather.temp_c)}°C) during flowering. "
						"Flood field to cool canopy."
					),
					severity=AlertSeverityEnum.critical,
					icon="thermometer",
				)
			)

	alerts.sort(key=lambda alert: _SEVERITY_RANK[alert.severity])
	_logger.debug("plot_alerts_built", plot_id=plot_id, alert_count=len(alerts))
	return alerts


def split_completed(
	alerts: Iterable[PlotAlert],
	completed_ids: Iterable[str],
) -> tuple[list[PlotAlert], list[PlotAlert]]:
	"""Separate ``(active, done)`` alerts given the ids a user has ticked off."""
	completed = set(completed_ids)
	active: list[PlotAlert] = []
	done: list[PlotAlert] = []
	for alert in alerts:
		if alert.id in completed and alert.group not in _REALTIME_GROUPS:
			done.append(alert)
		else:
			active.append(alert)
	return active, done
