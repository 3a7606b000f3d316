"""Growth-stage reference table.

Stages are assigned from the percent of the variety's average lifecycle that
has elapsed since transplanting. Each band starts at ``lower_pct``
(inclusive) and ends where the next one starts; the last band is open ended.

    pct     index  stage                          phase
    <12     0      Transplanting/Recovery         Vegetative
    12-35   1      Active Tillering               Vegetative
    35-50   2      Stem Elongation                Vegetative
    50-65   3      Panicle Initiation (Booting)   Reproductive
    65-75   4      Heading/Flowering              Reproductive
    75-90   5      Milk/Dough Stage               Ripening
    90-110  6      Maturity/Ripening              Ripening
    >=110   7      Harvest Ready                  Finished
"""

from __future__ import annotations

from dataclasses import dataclass

from paddysense.models.enums import GrowthPhaseEnum, TipCategoryEnum


@dataclass(frozen=True)
class TipDefinition:
    category: TipCategoryEnum
    text: str
    icon: str


@dataclass(frozen=True)
class StageDefinition:
    """One row of the stage table."""

    index: int
    lower_pct: float
    name: str
    phase: GrowthPhaseEnum
    water_advice: str
    tips: tuple[TipDefinition, ...]


_T = TipCategoryEnum

STAGES: tuple[StageDefinition, ...] = (
    StageDefinition(
        index=0,
        lower_pct=0.0,
        name="Transplanting/Recovery",
        phase=GrowthPhaseEnum.vegetative,
        water_advice="Keep soil saturated (Gauge 15-17cm). Avoid deep flood.",
        tips=(
            TipDefinition(_T.pest, "Monitor for Golden Apple Snails (feed on seedlings)", "bug"),
            TipDefinition(_T.weeds, "Apply pre-emergence herbicide within 3-5 days", "alert-circle"),
            TipDefinition(_T.care, "Replant missing hills (gap filling) within 7 days", "sprout"),
            TipDefinition(_T.water, "Keep saturated. Deep water (>3cm) drowns seedlings", "droplets"),
        ),
    ),
    StageDefinition(
        index=1,
        lower_pct=12.0,
        name="Active Tillering",
        phase=GrowthPhaseEnum.vegetative,
        water_advice="Maintain 2-5cm water depth (Gauge 17-20cm). Apply N fertilizer.",
        tips=(
            TipDefinition(_T.nutrient, "Apply 1st Nitrogen Topdress (Urea) for tillers", "leaf"),
            TipDefinition(_T.weeds, "Critical time for weeding. Weeds steal light.", "alert-circle"),
            TipDefinition(_T.pest, "Check for Whorl Maggot or Caseworm damage", "bug"),
            TipDefinition(_T.water, "Shallow water promotes tillering. AWD is safe.", "droplets"),
        ),
    ),
    StageDefinition(
        index=2,
        lower_pct=35.0,
        name="Stem Elongation",
        phase=GrowthPhaseEnum.vegetative,
        water_advice="Periodic drying (AWD) is beneficial now. Allow soil to crack slightly.",
        tips=(
            TipDefinition(_T.water, "Practice AWD. Drying deepens root system", "droplets"),
            TipDefinition(_T.nutrient, "Apply Potassium (K) for strong stems", "leaf"),
            TipDefinition(_T.pest, "Scout for Stem Borer deadhearts (white heads)", "bug"),
            TipDefinition(_T.disease, "Inspect lower sheath for Sheath Blight", "alert-circle"),
        ),
    ),
    StageDefinition(
        index=3,
        lower_pct=50.0,
        name="Panicle Initiation (Booting)",
        phase=GrowthPhaseEnum.reproductive,
        water_advice="Flood Required! Keep 5cm+ depth (Gauge >20cm). Do not stress.",
        tips=(
            TipDefinition(_T.water, "Do NOT drain. Water stress reduces yield now", "droplets"),
            TipDefinition(_T.care, "Protect the flag leaf (provides 50% of yield)", "sun"),
            TipDefinition(_T.pest, "Control rats - they prefer sweet stalks now", "bug"),
            TipDefinition(_T.nutrient, "Stop Nitrogen to avoid attracting pests", "leaf"),
        ),
    ),
    StageDefinition(
        index=4,
        lower_pct=65.0,
        name="Heading/Flowering",
        phase=GrowthPhaseEnum.reproductive,
        water_advice="Maintain steady water. Avoid drainage. High sensitivity to stress.",
        tips=(
            TipDefinition(_T.care, "Avoid spraying 9am-3pm to save pollinators", "timer"),
            TipDefinition(_T.pest, "Rice Bug (Stink Bug) active morning/evening", "bug"),
            TipDefinition(_T.disease, "Monitor for False Smut or Neck Blast", "alert-circle"),
            TipDefinition(_T.weather, "High heat (>35°C) can cause sterility", "sun"),
        ),
    ),
    StageDefinition(
        index=5,
        lower_pct=75.0,
        name="Milk/Dough Stage",
        phase=GrowthPhaseEnum.ripening,
        water_advice="Keep soil saturated. Shallow water (Gauge 15-18cm) is sufficient.",
        tips=(
            TipDefinition(_T.pest, "Protect ripening grain from birds and rats", "bug"),
            TipDefinition(_T.water, "Standing water not required, just moist soil", "droplets"),
            TipDefinition(_T.care, "Remove off-types (rogueing) for purity", "sprout"),
            TipDefinition(_T.harvest, "Plan harvest when 85% grains are golden", "scissors"),
        ),
    ),
    StageDefinition(
        index=6,
        lower_pct=90.0,
        name="Maturity/Ripening",
        phase=GrowthPhaseEnum.ripening,
        water_advice="Drain field completely (Gauge <15cm) to hasten ripening.",
        tips=(
            TipDefinition(_T.water, "Drain field 10-15 days before harvest", "droplets"),
            TipDefinition(_T.harvest, "Check grain moisture (target 20-24%)", "scissors"),
            TipDefinition(_T.care, "Prepare threshing equipment and mats", "book-open"),
        ),
    ),
    StageDefinition(
        index=7,
        lower_pct=110.0,
        name="Harvest Ready",
        phase=GrowthPhaseEnum.finished,
        water_advice="Field should be dry.",
        tips=(
            TipDefinition(_T.harvest, "Harvest immediately to avoid shattering", "scissors"),
            TipDefinition(_T.post, "Dry grains to 14% moisture for storage", "sun"),
        ),
    ),
)

STAGE_LOWER_BOUNDS: tuple[float, ...] = tuple(stage.lower_pct for stage in STAGES)

# Stage groupings that drive irrigation guidance.
FLOOD_REQUIRED_STAGES = frozenset({0, 3, 4})
AWD_ALLOWED_STAGES = frozenset({1, 2, 5})
DRAIN_STAGES = frozenset({6, 7})
