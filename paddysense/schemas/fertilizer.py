"""Pydantic records for the fertilizer calculator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from paddysense.models.enums import FertilizerStageEnum
from paddysense.schemas.crop import RECORD_CONFIG


class FertilizerPlan(BaseModel):
	model_config = RECORD_CONFIG

	stage: FertilizerStageEnum
	acres: float = Field(ge=0)
	urea_kg: int = Field(ge=0)
	dap_kg: int = Field(ge=0)
	mop_kg: int = Field(ge=0)
	estimated_cost: int = Field(ge=0)
