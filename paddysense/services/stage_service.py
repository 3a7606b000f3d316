"""Rice growth-stage calculator.

Maps a crop configuration and an explicit "now" onto the stage table in
``paddysense.models.stages``. Nothing here reads a clock or caches results;
callers re-invoke on every refresh and may memoize if they wish.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Mapping
from datetime import UTC, date, datetime, time, timedelta
from typing import Any

import structlog
from pydantic import ValidationError

from paddysense.models.crops import VARIETY_PROFILES, VarietyProfile
from paddysense.models.enums import VarietyClassEnum
from paddysense.models.stages import STAGE_LOWER_BOUNDS, STAGES, StageDefinition
from paddysense.schemas.crop import CropConfig, GrowthStageInfo, Tip

_logger = structlog.get_logger("paddysense.stage_service")

_ONE_DAY = timedelta(days=1)


class InvalidConfigError(ValueError):
	"""Raised when a crop configuration cannot be interpreted.

	Callers should treat this as "no crop configured" and prompt for setup.
	"""


def load_crop_config(raw: CropConfig | Mapping[str, Any] | None) -> CropConfig:
	"""Validate a persisted crop configuration (snake_case or camelCase keys)."""
	if isinstance(raw, CropConfig):
		return raw
	if raw is None:
		raise InvalidConfigError("crop configuration is missing")
	try:
		return CropConfig.model_validate(raw)
	except ValidationError as exc:
		_logger.warning("crop_config_rejected", errors=exc.error_count())
		raise InvalidConfigError(f"invalid crop configuration: {exc}") from exc


def _as_utc_instant(value: datetime | date) -> datetime:
	if isinstance(value, datetime):
		return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
	return datetime.combine(value, time.min, tzinfo=UTC)


def days_since(transplant_date: date, now: datetime | date) -> int:
	"""Whole days elapsed since transplanting, never negative."""
	elapsed = _as_utc_instant(now) - _as_utc_instant(transplant_date)
	return max(0, elapsed // _ONE_DAY)


def stage_for_percent(pct: float) -> StageDefinition:
	"""Pick the stage whose band contains ``pct`` (inclusive lower bound)."""
	position = bisect_right(STAGE_LOWER_BOUNDS, pct) - 1
	return STAGES[max(position, 0)]


def _build_stage_info(stage: StageDefinition, days: int, profile: VarietyProfile) -> GrowthStageInfo:
	progress = min(100.0 * days / profile.avg_days, 100.0)
	return GrowthStageInfo(
		days_elapsed=days,
		stage_index=stage.index,
		stage_name=stage.name,
		phase=stage.phase,
		total_duration_days=profile.avg_days,
		management_tips=tuple(
			Tip(category=tip.category, text=tip.text, icon=tip.icon) for tip in stage.tips
		),
		variety_name=profile.name,
		water_advice=stage.water_advice,
		progress_pct=progress,
	)


def compute_stage(config: CropConfig | Mapping[str, Any], now: datetime | date) -> GrowthStageInfo:
	"""Compute the growth stage of a crop at the instant ``now``."""
	crop = load_crop_config(config)
	profile = VARIETY_PROFILES[crop.variety]

	days = days_since(crop.transplant_date, now)
	pct = 100.0 * days / profile.avg_days
	stage = stage_for_percent(pct)

	_logger.debug(
		"growth_stage_computed",
		variety=crop.variety.value,
		days_elapsed=days,
		pct=round(pct, 2),
		stage_index=stage.index,
	)
	return _build_stage_info(stage, days, profile)


def stage_info_for_index(
	stage_index: int,
	days_elapsed: int = 0,
	variety: VarietyClassEnum = VarietyClassEnum.medium,
) -> GrowthStageInfo:
	"""Build the stage record for a known stage index."""
	if not 0 <= stage_index < len(STAGES):
		raise ValueError(f"stage_index must be between 0 and {len(STAGES) - 1}, got {stage_index}")
	return _build_stage_info(STAGES[stage_index], max(0, days_elapsed), VARIETY_PROFILES[variety])
