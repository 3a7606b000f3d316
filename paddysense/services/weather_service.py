"""Stage-aware reading of the current weather snapshot."""

from __future__ import annotations

import structlog

from paddysense.models.enums import AdviceCategoryEnum, WeatherAlertKindEnum
from paddysense.schemas.weather import WeatherAlert, WeatherSnapshot

_logger = structlog.get_logger("paddysense.weather_service")

HIGH_WIND_KMH = 25
HIGH_HUMIDITY_PCT = 85
LOW_HUMIDITY_PCT = 40
HEAT_STRESS_C = 35

FLOWERING_STAGE = 4
LODGING_STAGES = range(4, 7)

# WMO weather interpretation codes (Open-Meteo), as inclusive ranges.
_WMO_CONDITIONS: tuple[tuple[int, int, str], ...] = (
	(0, 0, "Clear Sky"),
	(1, 3, "Cloudy"),
	(45, 48, "Foggy"),
	(51, 55, "Drizzle"),
	(61, 67, "Rain"),
	(71, 77, "Snow"),
	(80, 82, "Showers"),
)
THUNDERSTORM_CODE_MIN = 95


def describe_weather_code(code: int | None) -> str:
	if code is None:
		return "Unknown"
	if code >= THUNDERSTORM_CODE_MIN:
		return "Thunderstorm"
	for low, high, text in _WMO_CONDITIONS:
		if low <= code <= high:
			return text
	return "Unknown"


def analyze_weather(stage_index: int, weather: WeatherSnapshot | None) -> list[WeatherAlert]:
	"""Crop-condition alerts raised by wind, humidity and heat for a stage."""
	if weather is None:
		return []

	alerts: list[WeatherAlert] = []

	if weather.wind_kmh > HIGH_WIND_KMH:
		if stage_index in LODGING_STAGES:
			alerts.append(
				WeatherAlert(
					kind=WeatherAlertKindEnum.wind,
					severity=AdviceCategoryEnum.warn,
					text="High wind! Risk of lodging (falling over). Drain field to anchor roots.",
				)
			)
		else:
			alerts.append(
				WeatherAlert(
					kind=WeatherAlertKindEnum.wind,
					severity=AdviceCategoryEnum.info,
					text="Windy conditions. Avoid foliar spraying today.",
				)
			)

	if weather.humidity_pct > HIGH_HUMIDITY_PCT:
		if stage_index >= 2:
			alerts.append(
				WeatherAlert(
					kind=WeatherAlertKindEnum.humidity,
					severity=AdviceCategoryEnum.critical,
					text="High humidity. Monitor for Blast and Bacterial Leaf Blight.",
				)
			)
	elif weather.humidity_pct < LOW_HUMIDITY_PCT and stage_index == FLOWERING_STAGE:
		alerts.append(
			WeatherAlert(
				kind=WeatherAlertKindEnum.humidity,
				severity=AdviceCategoryEnum.warn,
				text="Low humidity. Pollen desiccation risk. Ensure water is adequate.",
			)
		)

	if weather.temp_c > HEAT_STRESS_C and stage_index == FLOWERING_STAGE:
		alerts.append(
			WeatherAlert(
				kind=WeatherAlertKindEnum.heat,
				severity=AdviceCategoryEnum.critical,
				text="Heat Stress! Flood field (10cm) to cool canopy.",
			)
		)

	_logger.debug("weather_analyzed", stage_index=stage_index, alert_count=len(alerts))
	return alerts
