"""Stable enum values shared by every record the engine produces.

Presentation layers (summary cards, alert centre, detail page) re-derive
display text from these values independently, so members must never be
renamed.
"""

from enum import StrEnum

# ── Crop enums ──────────────────────────────────────────────────────────────


class VarietyClassEnum(StrEnum):
    """Rice variety duration class."""

    short = "short"
    medium = "medium"
    long = "long"


class GrowthPhaseEnum(StrEnum):
    """Coarse crop phase a growth stage belongs to."""

    vegetative = "Vegetative"
    reproductive = "Reproductive"
    ripening = "Ripening"
    finished = "Finished"


class TipCategoryEnum(StrEnum):
    """Management tip classification."""

    pest = "Pest"
    disease = "Disease"
    nutrient = "Nutrient"
    weeds = "Weeds"
    water = "Water"
    care = "Care"
    harvest = "Harvest"
    post = "Post"
    weather = "Weather"


# ── Advice enums ────────────────────────────────────────────────────────────


class AdviceCategoryEnum(StrEnum):
    """Graduated severity of an irrigation recommendation."""

    good = "good"
    warn = "warn"
    critical = "critical"
    info = "info"


class WeatherAlertKindEnum(StrEnum):
    """Which weather factor raised a crop-condition alert."""

    wind = "wind"
    humidity = "humidity"
    heat = "heat"


# ── Alert enums ─────────────────────────────────────────────────────────────


class AlertSeverityEnum(StrEnum):
    """Plot alert severity, ordered most to least urgent."""

    critical = "critical"
    warning = "warning"
    action = "action"
    info = "info"


class AlertGroupEnum(StrEnum):
    """Broad alert grouping used by the alert centre filters."""

    irrigation = "Irrigation"
    crop_health = "Crop Health"
    weather = "Weather"
    other = "Other"


# ── Tool enums ──────────────────────────────────────────────────────────────


class FertilizerStageEnum(StrEnum):
    """Fertilizer application window."""

    basal = "basal"
    tillering = "tillering"
    panicle = "panicle"
