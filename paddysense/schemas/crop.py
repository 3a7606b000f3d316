"""Pydantic records for crop configuration and growth-stage results."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from paddysense.models.enums import GrowthPhaseEnum, TipCategoryEnum, VarietyClassEnum

RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CropConfig(BaseModel):
	model_config = RECORD_CONFIG

	variety: VarietyClassEnum
	transplant_date: date

	@field_validator("transplant_date", mode="before")
	@classmethod
	def _date_part(cls, value: Any) -> Any:
		if isinstance(value, datetime):
			return value.date()
		if isinstance(value, str) and len(value) > 10:
			try:
				return datetime.fromisoformat(value).date()
			except ValueError:
				return value
		return value


class Tip(BaseModel):
	model_config = RECORD_CONFIG

	category: TipCategoryEnum
	text: str
	icon: str


class GrowthStageInfo(BaseModel):
	model_config = RECORD_CONFIG

	days_elapsed: int = Field(ge=0)
	stage_index: int = Field(ge=0, le=7)
	stage_name: str
	phase: GrowthPhaseEnum
	total_duration_days: int = Field(gt=0)
	management_tips: tuple[Tip, ...] = ()
	variety_name: str | None = None
	water_advice: str | None = None
	progress_pct: float = Field(default=0.0, ge=0, le=100)
