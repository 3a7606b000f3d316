"""Rice variety reference table.

Durations follow IRRI and generic rice growth models. ``avg_days`` is the
denominator of every percent-of-lifecycle calculation:

    short   100-120 days, 110 on average
    medium  120-140 days, 130 on average
    long    140-160 days, 150 on average
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from paddysense.models.enums import VarietyClassEnum


@dataclass(frozen=True)
class VarietyProfile:
    """Agronomic reference: duration envelope of a rice variety class."""

    name: str
    min_days: int
    max_days: int
    avg_days: int

    def __post_init__(self) -> None:
        if not self.min_days < self.avg_days < self.max_days:
            raise ValueError(
                f"{self.name}: expected min_days < avg_days < max_days, "
                f"got {self.min_days}/{self.avg_days}/{self.max_days}"
            )


VARIETY_PROFILES: MappingProxyType[VarietyClassEnum, VarietyProfile] = MappingProxyType(
    {
        VarietyClassEnum.short: VarietyProfile(
            name="Short Duration", min_days=100, max_days=120, avg_days=110
        ),
        VarietyClassEnum.medium: VarietyProfile(
            name="Medium Duration", min_days=120, max_days=140, avg_days=130
        ),
        VarietyClassEnum.long: VarietyProfile(
            name="Long Duration", min_days=140, max_days=160, avg_days=150
        ),
    }
)
