"""Fertilizer dosage reference table (kg per acre, standard NPK programme).

Basal is applied before transplanting (DAP/MOP), tillering 15-20 days after
transplanting (urea) and panicle initiation 45-50 days after (urea/MOP).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from paddysense.models.enums import FertilizerStageEnum


@dataclass(frozen=True)
class FertilizerDose:
    urea_kg: float
    dap_kg: float
    mop_kg: float


FERTILIZER_DOSES: MappingProxyType[FertilizerStageEnum, FertilizerDose] = MappingProxyType(
    {
        FertilizerStageEnum.basal: FertilizerDose(urea_kg=20, dap_kg=50, mop_kg=25),
        FertilizerStageEnum.tillering: FertilizerDose(urea_kg=45, dap_kg=0, mop_kg=0),
        FertilizerStageEnum.panicle: FertilizerDose(urea_kg=35, dap_kg=0, mop_kg=25),
    }
)

# Indicative retail price per kg (INR).
FERTILIZER_PRICES = FertilizerDose(urea_kg=6, dap_kg=27, mop_kg=17)
