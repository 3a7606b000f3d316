"""Pydantic records for the harvest yield estimator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from paddysense.models.harvest import BAGS_PER_ACRE_MAX, BAGS_PER_ACRE_MIN
from paddysense.schemas.crop import RECORD_CONFIG


class YieldEstimate(BaseModel):
	model_config = RECORD_CONFIG

	acres: float = Field(ge=0)
	bags_per_acre: int = Field(ge=BAGS_PER_ACRE_MIN, le=BAGS_PER_ACRE_MAX)
	total_kg: float = Field(ge=0)
	total_tons: float = Field(ge=0)
	quintals: int = Field(ge=0)
