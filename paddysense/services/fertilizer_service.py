"""Field calculators for a plot: fertilizer requirement and harvest yield."""

from __future__ import annotations

import math

from paddysense.models.enums import FertilizerStageEnum
from paddysense.models.fertilizer import FERTILIZER_DOSES, FERTILIZER_PRICES
from paddysense.models.harvest import (
	BAG_WEIGHT_KG,
	BAGS_PER_ACRE_AVERAGE,
	BAGS_PER_ACRE_MAX,
	BAGS_PER_ACRE_MIN,
)
from paddysense.schemas.fertilizer import FertilizerPlan
from paddysense.schemas.harvest import YieldEstimate


def _check_acres(acres: float) -> None:
	if acres < 0:
		raise ValueError(f"acres must be non-negative, got {acres}")


def plan_fertilizer(stage: FertilizerStageEnum | str, acres: float) -> FertilizerPlan:
	"""Whole-kilogram urea/DAP/MOP totals and an indicative cost.

	Totals are rounded up so a partial bag is never under-applied.
	"""
	_check_acres(acres)
	stage = FertilizerStageEnum(stage)
	dose = FERTILIZER_DOSES[stage]

	urea = math.ceil(dose.urea_kg * acres)
	dap = math.ceil(dose.dap_kg * acres)
	mop = math.ceil(dose.mop_kg * acres)
	cost = math.ceil(
		urea * FERTILIZER_PRICES.urea_kg + dap * FERTILIZER_PRICES.dap_kg + mop * FERTILIZER_PRICES.mop_kg
	)
	return FertilizerPlan(stage=stage, acres=acres, urea_kg=urea, dap_kg=dap, mop_kg=mop, estimated_cost=cost)


def estimate_yield(acres: float, bags_per_acre: int = BAGS_PER_ACRE_AVERAGE) -> YieldEstimate:
	"""Expected harvest in 75kg bags, reported as kilograms, tons and quintals."""
	_check_acres(acres)
	if not BAGS_PER_ACRE_MIN <= bags_per_acre <= BAGS_PER_ACRE_MAX:
		raise ValueError(
			f"bags_per_acre must be between {BAGS_PER_ACRE_MIN} and {BAGS_PER_ACRE_MAX}, got {bags_per_acre}"
		)

	total_kg = acres * bags_per_acre * BAG_WEIGHT_KG
	return YieldEstimate(
		acres=acres,
		bags_per_acre=bags_per_acre,
		total_kg=total_kg,
		total_tons=total_kg / 1000,
		quintals=math.ceil(total_kg / 100),
	)
