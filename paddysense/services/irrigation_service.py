"""Irrigation advisor: turns a gauge reading into an action recommendation.

Advice is chosen by walking an ordered list of guard/builder rules; the
first guard that matches builds the result. Order is significant:

  0. a reading that is not a number (NaN) is reported as a sensor fault,
  1. harvest preparation (stages 6-7) always wins,
  2. then the user's high-water limit,
  3. then the user's critical-low limit,
  4. then stage-specific handling of the band between the two limits,
     with an absolute-scale ladder when no crop stage is known.

All levels are on the absolute 0-30cm gauge where 15cm is the soil surface.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import ValidationError

from paddysense.config import Settings, get_settings
from paddysense.models.enums import AdviceCategoryEnum
from paddysense.models.stages import AWD_ALLOWED_STAGES, DRAIN_STAGES, FLOOD_REQUIRED_STAGES
from paddysense.schemas.crop import GrowthStageInfo
from paddysense.schemas.irrigation import IrrigationAdvice, Thresholds
from paddysense.schemas.weather import WeatherSnapshot

_logger = structlog.get_logger("paddysense.irrigation_service")

FLOOD_TOP_UP_CM = 18

# Absolute ladder used when the crop stage is unknown.
GENERIC_DRY_CM = 5
GENERIC_SATURATED_CM = 15
GENERIC_STANDING_CM = 17
GENERIC_DEEP_CM = 25


def _cm(value: float) -> str:
	return f"{value:g}"


def is_rain_expected(weather: WeatherSnapshot | None, settings: Settings | None = None) -> bool:
	"""Rain counts as expected on a >50% chance or a >5mm 24h forecast."""
	if weather is None:
		return False
	settings = settings or get_settings()
	return (
		weather.rain_chance_pct > settings.rain_chance_expected_pct
		or weather.rain_forecast_24h_mm > settings.rain_volume_expected_mm
	)


def _coerce_limit(value: Any, fallback: float) -> float:
	if isinstance(value, bool) or value is None:
		return fallback
	try:
		number = float(value)
	except (TypeError, ValueError):
		return fallback
	return fallback if math.isnan(number) else number


def load_thresholds(raw: Mapping[str, Any] | None, settings: Settings | None = None) -> Thresholds:
	"""Build thresholds from persisted ``{"low": .., "high": ..}`` settings.

	Missing or non-numeric keys fall back to the configured defaults; a pair
	that fails validation (out of range or inverted) is replaced entirely.
	"""
	defaults = Thresholds.defaults(settings)
	if not raw:
		return defaults

	low = _coerce_limit(raw.get("low"), defaults.low)
	high = _coerce_limit(raw.get("high"), defaults.high)
	try:
		return Thresholds(low=low, high=high)
	except ValidationError as exc:
		_logger.warning("thresholds_rejected", low=low, high=high, errors=exc.error_count())
		return defaults


@dataclass(frozen=True)
class _Reading:
	level: float
	thresholds: Thresholds
	stage: GrowthStageInfo | None
	rain_expected: bool
	rain_chance: float
	soil: float

	@property
	def stage_index(self) -> int | None:
		return self.stage.stage_index if self.stage is not None else None

	@property
	def stage_name(self) -> str:
		return self.stage.stage_name if self.stage is not None else "Vegetative"

	def in_stages(self, stages: frozenset[int]) -> bool:
		return self.stage_index in stages


@dataclass(frozen=True)
class _Rule:
	name: str
	applies: Callable[[_Reading], bool]
	advise: Callable[[_Reading], IrrigationAdvice]


def _advice(
	category: AdviceCategoryEnum,
	action: str,
	target: str,
	rationale: str,
	smart_tip: str | None = None,
) -> IrrigationAdvice:
	return IrrigationAdvice(
		category=category,
		action_label=action,
		target_label=target,
		rationale=rationale,
		smart_tip=smart_tip,
	)


_A = AdviceCategoryEnum

_RULES: tuple[_Rule, ...] = (
	# ── Sensor fault ───────────────────────────────────────────────────────
	_Rule(
		"no_reading",
		lambda r: math.isnan(r.level),
		lambda r: _advice(
			_A.info,
			"Check Sensor",
			"No valid reading",
			"The gauge did not report a usable water level.",
			"Inspect the float and wiring, then check the field by hand.",
		),
	),
	# ── Harvest preparation ────────────────────────────────────────────────
	_Rule(
		"harvest_drain",
		lambda r: r.in_stages(DRAIN_STAGES) and r.level > r.soil,
		lambda r: _advice(
			_A.warn,
			"Drain Water",
			"Target: 0cm (Dry)",
			f"Stage {r.stage_name} requires dry soil for ripening. Gauge is at {_cm(r.level)}cm.",
			"Open outlets to drain completely.",
		),
	),
	_Rule(
		"harvest_dry",
		lambda r: r.in_stages(DRAIN_STAGES),
		lambda r: _advice(
			_A.good,
			"Keep Dry",
			"Ready for Harvest",
			f"Field is dry (Gauge {_cm(r.level)}cm) as required for {r.stage_name}.",
		),
	),
	# ── High-water safety ──────────────────────────────────────────────────
	_Rule(
		"high_water_rain",
		lambda r: r.level > r.thresholds.high and r.rain_expected,
		lambda r: _advice(
			_A.warn,
			"Drain Water",
			f"Drain to {_cm(r.soil)}cm",
			f"High level ({_cm(r.level)}cm, limit {_cm(r.thresholds.high)}cm) + "
			f"Rain Forecast ({_cm(r.rain_chance)}%). Risk of overflow.",
			f"Lower spillway to {_cm(r.soil)}cm mark.",
		),
	),
	_Rule(
		"high_water",
		lambda r: r.level > r.thresholds.high,
		lambda r: _advice(
			_A.info,
			"Stop Irrigation",
			f"Level > {_cm(r.thresholds.high)}cm",
			f"Water depth ({_cm(r.level)}cm) exceeds your upper limit ({_cm(r.thresholds.high)}cm).",
			"Let water subside naturally. Do not add water.",
		),
	),
	# ── Critical low ───────────────────────────────────────────────────────
	_Rule(
		"critical_low_rain",
		lambda r: r.level < r.thresholds.low and r.rain_expected,
		lambda r: _advice(
			_A.warn,
			"Delay Irrigation",
			f"Wait for Rain ({_cm(r.rain_chance)}%)",
			f"Level is low ({_cm(r.level)}cm, limit {_cm(r.thresholds.low)}cm) but rain is expected.",
			"Monitor closely. If rain fails, irrigate immediately.",
		),
	),
	_Rule(
		"critical_low",
		lambda r: r.level < r.thresholds.low,
		lambda r: _advice(
			_A.critical,
			"Start Irrigation",
			f"Target: {_cm(r.soil)}cm",
			f"Critical low level ({_cm(r.level)}cm). Below limit ({_cm(r.thresholds.low)}cm).",
			f"Irrigate immediately to restore soil saturation ({_cm(r.soil)}cm).",
		),
	),
	# ── Flood-required stages ──────────────────────────────────────────────
	_Rule(
		"flood_below_soil_rain",
		lambda r: r.in_stages(FLOOD_REQUIRED_STAGES) and r.level < r.soil and r.rain_expected,
		lambda r: _advice(
			_A.warn,
			"Delay Irrigation",
			"Wait for Rain",
			f"Water below soil surface ({_cm(r.level)}cm), but rain expected.",
		),
	),
	_Rule(
		"flood_below_soil",
		lambda r: r.in_stages(FLOOD_REQUIRED_STAGES) and r.level < r.soil,
		lambda r: _advice(
			_A.warn,
			"Start Irrigation",
			f"Target: {FLOOD_TOP_UP_CM}cm",
			f"{r.stage_name} stage requires standing water. Current: {_cm(r.level)}cm (Below Soil).",
			f"Top up water to {FLOOD_TOP_UP_CM}cm gauge reading.",
		),
	),
	_Rule(
		"flood_optimal",
		lambda r: r.in_stages(FLOOD_REQUIRED_STAGES),
		lambda r: _advice(
			_A.good,
			"Optimal Level",
			"Maintain this Level",
			f"Current level ({_cm(r.level)}cm) is perfect for {r.stage_name}.",
		),
	),
	# ── AWD-allowed stages ─────────────────────────────────────────────────
	_Rule(
		"awd_below_soil",
		lambda r: r.in_stages(AWD_ALLOWED_STAGES) and r.level < r.soil,
		lambda r: _advice(
			_A.info,
			"Stop Irrigation",
			f"Start Irrigation at {_cm(r.thresholds.low)}cm",
			f"AWD Phase: Allow water to drop. Current: {_cm(r.level)}cm. "
			f"Re-irrigate ONLY when it hits {_cm(r.thresholds.low)}cm.",
			"Allowing soil to aerate strengthens roots.",
		),
	),
	_Rule(
		"awd_above_soil",
		lambda r: r.in_stages(AWD_ALLOWED_STAGES),
		lambda r: _advice(
			_A.good,
			"Stop Irrigation",
			f"Maintain > {_cm(r.soil)}cm",
			f"Level ({_cm(r.level)}cm) is sufficient. No need to add water yet.",
			f"Let level drop naturally to {_cm(r.thresholds.low)}cm before next irrigation.",
		),
	),
	# ── No crop stage: absolute ladder ─────────────────────────────────────
	_Rule(
		"generic_dry_rain",
		lambda r: r.level < GENERIC_DRY_CM and r.rain_expected,
		lambda r: _advice(
			_A.warn,
			"Delay Irrigation",
			f"Wait for Rain ({_cm(r.rain_chance)}%)",
			f"Level is low ({_cm(r.level)}cm) but rain is expected.",
			"Monitor closely. If rain fails, irrigate immediately.",
		),
	),
	_Rule(
		"generic_dry",
		lambda r: r.level < GENERIC_DRY_CM,
		lambda r: _advice(
			_A.critical,
			"Start Irrigation",
			f"Target: {_cm(r.soil)}cm",
			f"Critical low level ({_cm(r.level)}cm). Below {GENERIC_DRY_CM}cm.",
			f"Irrigate immediately to restore soil saturation ({_cm(r.soil)}cm).",
		),
	),
	_Rule(
		"generic_awd",
		lambda r: r.level < GENERIC_SATURATED_CM,
		lambda r: _advice(
			_A.info,
			"Stop Irrigation",
			f"Start Irrigation at {_cm(r.thresholds.low)}cm",
			f"AWD: Water below soil surface ({_cm(r.level)}cm). "
			f"Re-irrigate when it hits {_cm(r.thresholds.low)}cm.",
			"Allowing soil to aerate strengthens roots.",
		),
	),
	_Rule(
		"generic_saturated",
		lambda r: r.level < GENERIC_STANDING_CM,
		lambda r: _advice(
			_A.info,
			"Soil Saturated",
			f"Maintain {GENERIC_SATURATED_CM}-{GENERIC_STANDING_CM}cm",
			f"Soil is saturated (Gauge {_cm(r.level)}cm) with no standing water.",
			"Set the crop stage to get stage-specific water targets.",
		),
	),
	_Rule(
		"generic_optimal",
		lambda r: r.level <= GENERIC_DEEP_CM,
		lambda r: _advice(
			_A.good,
			"Optimal Level",
			"Maintain this Level",
			f"Water depth ({_cm(r.level)}cm) is within the "
			f"{GENERIC_STANDING_CM}-{GENERIC_DEEP_CM}cm standing-water band.",
		),
	),
	_Rule(
		"generic_deep",
		lambda r: True,
		lambda r: _advice(
			_A.warn,
			"Drain Water",
			f"Drain to {GENERIC_DEEP_CM}cm",
			f"Water depth ({_cm(r.level)}cm) is above the {GENERIC_DEEP_CM}cm deep-water mark.",
			"Deep water weakens tillers. Open the spillway slightly.",
		),
	),
)


class IrrigationAdvisor:
	"""Stateless advisor bound to the gauge geometry and rain limits in settings."""

	def __init__(self, settings: Settings | None = None):
		self.settings = settings or get_settings()

	def compute_advice(
		self,
		level: float,
		thresholds: Thresholds | None = None,
		weather: WeatherSnapshot | None = None,
		stage: GrowthStageInfo | None = None,
	) -> IrrigationAdvice:
		reading = _Reading(
			level=level,
			thresholds=thresholds or Thresholds.defaults(self.settings),
			stage=stage,
			rain_expected=is_rain_expected(weather, self.settings),
			rain_chance=weather.rain_chance_pct if weather is not None else 0.0,
			soil=self.settings.soil_surface_cm,
		)
		rule = next(rule for rule in _RULES if rule.applies(reading))
		advice = rule.advise(reading)
		_logger.debug(
			"irrigation_advice_computed",
			rule=rule.name,
			level=level,
			stage_index=reading.stage_index,
			rain_expected=reading.rain_expected,
			category=advice.category.value,
		)
		return advice


def compute_advice(
	level: float,
	thresholds: Thresholds | None = None,
	weather: WeatherSnapshot | None = None,
	stage: GrowthStageInfo | None = None,
) -> IrrigationAdvice:
	"""Advise on irrigation using the process-wide settings."""
	return IrrigationAdvisor().compute_advice(level, thresholds, weather, stage)
