"""Pydantic records for irrigation thresholds and advice."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from paddysense.config import Settings, get_settings
from paddysense.models.enums import AdviceCategoryEnum
from paddysense.schemas.crop import RECORD_CONFIG


class Thresholds(BaseModel):
	"""User limits on the absolute 0-30cm gauge scale."""

	model_config = RECORD_CONFIG

	low: float = Field(ge=0, le=10)
	high: float = Field(ge=15, le=30)

	@model_validator(mode="after")
	def _validate_order(self) -> "Thresholds":
		if self.low >= self.high:
			raise ValueError("low threshold must be below high threshold")
		return self

	@classmethod
	def defaults(cls, settings: Settings | None = None) -> "Thresholds":
		settings = settings or get_settings()
		return cls(low=settings.default_threshold_low_cm, high=settings.default_threshold_high_cm)


class IrrigationAdvice(BaseModel):
	model_config = RECORD_CONFIG

	category: AdviceCategoryEnum
	action_label: str
	target_label: str
	rationale: str
	smart_tip: str | None = None
