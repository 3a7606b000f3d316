"""Static agronomic reference tables and enums.

Application code can import everything from here::

    from paddysense.models import STAGES, VARIETY_PROFILES, VarietyClassEnum
"""

# ── Enums ───────────────────────────────────────────────────────────────────
from paddysense.models.enums import (
    AdviceCategoryEnum,
    AlertGroupEnum,
    AlertSeverityEnum,
    FertilizerStageEnum,
    GrowthPhaseEnum,
    TipCategoryEnum,
    VarietyClassEnum,
    WeatherAlertKindEnum,
)

# ── Crop reference ──────────────────────────────────────────────────────────
from paddysense.models.crops import VARIETY_PROFILES, VarietyProfile

# ── Stage reference ─────────────────────────────────────────────────────────
from paddysense.models.stages import (
    AWD_ALLOWED_STAGES,
    DRAIN_STAGES,
    FLOOD_REQUIRED_STAGES,
    STAGE_LOWER_BOUNDS,
    STAGES,
    StageDefinition,
    TipDefinition,
)

# ── Tool reference ──────────────────────────────────────────────────────────
from paddysense.models.fertilizer import FERTILIZER_DOSES, FERTILIZER_PRICES, FertilizerDose
from paddysense.models.harvest import (
    BAG_WEIGHT_KG,
    BAGS_PER_ACRE_AVERAGE,
    BAGS_PER_ACRE_MAX,
    BAGS_PER_ACRE_MIN,
)

__all__ = [
    # Enums
    "AdviceCategoryEnum",
    "AlertGroupEnum",
    "AlertSeverityEnum",
    "FertilizerStageEnum",
    "GrowthPhaseEnum",
    "TipCategoryEnum",
    "VarietyClassEnum",
    "WeatherAlertKindEnum",
    # Crops
    "VARIETY_PROFILES",
    "VarietyProfile",
    # Stages
    "AWD_ALLOWED_STAGES",
    "DRAIN_STAGES",
    "FLOOD_REQUIRED_STAGES",
    "STAGE_LOWER_BOUNDS",
    "STAGES",
    "StageDefinition",
    "TipDefinition",
    # Tools
    "FERTILIZER_DOSES",
    "FERTILIZER_PRICES",
    "FertilizerDose",
    "BAG_WEIGHT_KG",
    "BAGS_PER_ACRE_AVERAGE",
    "BAGS_PER_ACRE_MAX",
    "BAGS_PER_ACRE_MIN",
]
