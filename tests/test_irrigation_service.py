from __future__ import annotations

from collections.abc import Callable

import pytest
from pydantic import ValidationError

from paddysense.config import Settings
from paddysense.models.enums import AdviceCategoryEnum
from paddysense.schemas.crop import GrowthStageInfo
from paddysense.schemas.irrigation import Thresholds
from paddysense.schemas.weather import WeatherSnapshot
from paddysense.services.irrigation_service import (
    IrrigationAdvisor,
    compute_advice,
    is_rain_expected,
    load_thresholds,
)

StageFactory = Callable[[int], GrowthStageInfo]


def test_rain_override_without_stage(default_thresholds: Thresholds, rainy_weather: WeatherSnapshot) -> None:
    advice = compute_advice(3, default_thresholds, rainy_weather, None)

    assert advice.category == AdviceCategoryEnum.warn
    assert advice.action_label == "Delay Irrigation"
    assert advice.target_label == "Wait for Rain (60%)"
    assert advice.smart_tip == "Monitor closely. If rain fails, irrigate immediately."


def test_critical_low_without_rain_targets_soil_surface(default_thresholds: Thresholds) -> None:
    advice = compute_advice(3, default_thresholds, None, None)

    assert advice.category == AdviceCategoryEnum.critical
    assert advice.action_label == "Start Irrigation"
    assert advice.target_label == "Target: 15cm"
    assert advice.rationale == "Critical low level (3cm). Below limit (5cm)."


def test_flood_stage_low_level_starts_irrigation(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    advice = compute_advice(2, default_thresholds, None, make_stage(3))

    assert advice.category == AdviceCategoryEnum.critical
    assert advice.action_label == "Start Irrigation"
    assert advice.target_label == "Target: 15cm"


@pytest.mark.parametrize("stage_index", [6, 7])
def test_harvest_prep_beats_critical_low(
    stage_index: int,
    default_thresholds: Thresholds,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(1, default_thresholds, None, make_stage(stage_index))

    assert advice.category == AdviceCategoryEnum.good
    assert advice.action_label == "Keep Dry"
    assert advice.smart_tip is None


def test_harvest_prep_drains_standing_water(
    default_thresholds: Thresholds,
    rainy_weather: WeatherSnapshot,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(24, default_thresholds, rainy_weather, make_stage(6))

    assert advice.category == AdviceCategoryEnum.warn
    assert advice.action_label == "Drain Water"
    assert advice.target_label == "Target: 0cm (Dry)"
    assert "Maturity/Ripening" in advice.rationale
    assert "24cm" in advice.rationale


def test_harvest_prep_at_soil_surface_is_dry(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    assert compute_advice(15, default_thresholds, None, make_stage(7)).action_label == "Keep Dry"


def test_high_water_with_rain_drains_to_soil_surface(
    default_thresholds: Thresholds,
    rainy_weather: WeatherSnapshot,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(23.5, default_thresholds, rainy_weather, make_stage(3))

    assert advice.category == AdviceCategoryEnum.warn
    assert advice.action_label == "Drain Water"
    assert advice.target_label == "Drain to 15cm"
    assert "23.5cm" in advice.rationale
    assert "20cm" in advice.rationale
    assert advice.smart_tip == "Lower spillway to 15cm mark."


def test_high_water_without_rain_stops_irrigation(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    # High-water safety is checked before the stage band, so a tillering crop
    # above the upper limit is told to stop rather than "maintain".
    advice = compute_advice(22, default_thresholds, None, make_stage(1))

    assert advice.category == AdviceCategoryEnum.info
    assert advice.action_label == "Stop Irrigation"
    assert advice.target_label == "Level > 20cm"
    assert advice.rationale == "Water depth (22cm) exceeds your upper limit (20cm)."


def test_awd_stage_above_soil_maintains(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    advice = compute_advice(18, default_thresholds, None, make_stage(1))

    assert advice.category == AdviceCategoryEnum.good
    assert advice.action_label == "Stop Irrigation"
    assert advice.target_label == "Maintain > 15cm"
    assert advice.smart_tip == "Let level drop naturally to 5cm before next irrigation."


@pytest.mark.parametrize("stage_index", [1, 2, 5])
def test_awd_stage_below_soil_waits_for_low_limit(
    stage_index: int,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(9, Thresholds(low=7, high=22), None, make_stage(stage_index))

    assert advice.category == AdviceCategoryEnum.info
    assert advice.action_label == "Stop Irrigation"
    assert advice.target_label == "Start Irrigation at 7cm"
    assert "Re-irrigate ONLY when it hits 7cm." in advice.rationale


@pytest.mark.parametrize("stage_index", [0, 3, 4])
def test_flood_stage_below_soil_tops_up(
    stage_index: int,
    default_thresholds: Thresholds,
    dry_weather: WeatherSnapshot,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(12, default_thresholds, dry_weather, make_stage(stage_index))

    assert advice.category == AdviceCategoryEnum.warn
    assert advice.action_label == "Start Irrigation"
    assert advice.target_label == "Target: 18cm"
    assert advice.smart_tip == "Top up water to 18cm gauge reading."


def test_flood_stage_below_soil_delays_for_rain(
    default_thresholds: Thresholds,
    rainy_weather: WeatherSnapshot,
    make_stage: StageFactory,
) -> None:
    advice = compute_advice(12, default_thresholds, rainy_weather, make_stage(4))

    assert advice.category == AdviceCategoryEnum.warn
    assert advice.action_label == "Delay Irrigation"
    assert advice.smart_tip is None


def test_flood_stage_with_standing_water_is_optimal(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    advice = compute_advice(18, default_thresholds, None, make_stage(0))

    assert advice.category == AdviceCategoryEnum.good
    assert advice.action_label == "Optimal Level"
    assert advice.rationale == "Current level (18cm) is perfect for Transplanting/Recovery."


@pytest.mark.parametrize(
    ("level", "category", "action"),
    [
        (6, AdviceCategoryEnum.info, "Stop Irrigation"),
        (14.9, AdviceCategoryEnum.info, "Stop Irrigation"),
        (15, AdviceCategoryEnum.info, "Soil Saturated"),
        (16.5, AdviceCategoryEnum.info, "Soil Saturated"),
        (17, AdviceCategoryEnum.good, "Optimal Level"),
        (25, AdviceCategoryEnum.good, "Optimal Level"),
        (26, AdviceCategoryEnum.warn, "Drain Water"),
    ],
)
def test_generic_ladder_without_stage(
    level: float,
    category: AdviceCategoryEnum,
    action: str,
) -> None:
    advice = compute_advice(level, Thresholds(low=2, high=28), None, None)

    assert advice.category == category
    assert advice.action_label == action
    assert advice.rationale


def test_generic_ladder_dry_end_is_rain_aware(rainy_weather: WeatherSnapshot) -> None:
    thresholds = Thresholds(low=2, high=28)

    assert compute_advice(4, thresholds, None, None).category == AdviceCategoryEnum.critical
    assert compute_advice(4, thresholds, rainy_weather, None).action_label == "Delay Irrigation"


@pytest.mark.parametrize("level", [-40.0, -0.5, 31.0, 400.0])
def test_out_of_range_levels_still_get_advice(level: float, default_thresholds: Thresholds) -> None:
    advice = compute_advice(level, default_thresholds, None, None)
    assert advice.category in {AdviceCategoryEnum.critical, AdviceCategoryEnum.info}


@pytest.mark.parametrize("stage_index", [None, 2, 6, 7])
def test_missing_reading_is_a_sensor_fault(
    stage_index: int | None, default_thresholds: Thresholds, make_stage: StageFactory
) -> None:
    stage = make_stage(stage_index) if stage_index is not None else None

    advice = compute_advice(float("nan"), default_thresholds, None, stage)

    assert advice.category == AdviceCategoryEnum.info
    assert advice.action_label == "Check Sensor"


def test_deeply_negative_level_is_critical(default_thresholds: Thresholds, make_stage: StageFactory) -> None:
    advice = compute_advice(-12, default_thresholds, None, make_stage(2))
    assert advice.category == AdviceCategoryEnum.critical


def test_inputs_are_left_untouched(
    default_thresholds: Thresholds,
    rainy_weather: WeatherSnapshot,
    make_stage: StageFactory,
) -> None:
    stage = make_stage(3)
    before = (default_thresholds.model_dump(), rainy_weather.model_dump(), stage.model_dump())

    first = compute_advice(8, default_thresholds, rainy_weather, stage)
    second = compute_advice(8, default_thresholds, rainy_weather, stage)

    assert first == second
    assert before == (default_thresholds.model_dump(), rainy_weather.model_dump(), stage.model_dump())


def test_defaults_apply_when_thresholds_omitted() -> None:
    assert compute_advice(21).target_label == "Level > 20cm"


@pytest.mark.parametrize(
    ("chance", "volume", "expected"),
    [(50.0, 5.0, False), (51.0, 0.0, True), (0.0, 5.5, True), (10.0, 1.0, False)],
)
def test_rain_expected_predicate(chance: float, volume: float, expected: bool) -> None:
    weather = WeatherSnapshot(
        temp_c=28,
        wind_kmh=5,
        humidity_pct=70,
        rain_chance_pct=chance,
        rain_forecast_24h_mm=volume,
    )
    assert is_rain_expected(weather) is expected


def test_rain_expected_is_false_without_weather() -> None:
    assert is_rain_expected(None) is False


def test_advisor_uses_injected_soil_surface(default_thresholds: Thresholds) -> None:
    advisor = IrrigationAdvisor(Settings(soil_surface_cm=12))
    advice = advisor.compute_advice(3, default_thresholds)

    assert advice.target_label == "Target: 12cm"


def test_rain_limits_come_from_settings(monkeypatch: pytest.MonkeyPatch, default_thresholds: Thresholds) -> None:
    monkeypatch.setenv("RAIN_CHANCE_EXPECTED_PCT", "70")
    weather = WeatherSnapshot(temp_c=28, wind_kmh=5, humidity_pct=70, rain_chance_pct=60)

    assert is_rain_expected(weather) is False
    assert compute_advice(3, default_thresholds, weather).category == AdviceCategoryEnum.critical


def test_thresholds_reject_inverted_pair() -> None:
    with pytest.raises(ValidationError):
        Thresholds(low=10, high=10)


def test_thresholds_reject_out_of_range_values() -> None:
    with pytest.raises(ValidationError):
        Thresholds(low=12, high=20)
    with pytest.raises(ValidationError):
        Thresholds(low=5, high=31)


def test_load_thresholds_falls_back_per_key() -> None:
    assert load_thresholds(None) == Thresholds(low=5, high=20)
    assert load_thresholds({"low": 8}) == Thresholds(low=8, high=20)
    assert load_thresholds({"low": "7.5", "high": "NaN"}) == Thresholds(low=7.5, high=20)
    assert load_thresholds({"low": True, "high": 25}) == Thresholds(low=5, high=25)


def test_load_thresholds_replaces_invalid_pair() -> None:
    assert load_thresholds({"low": 9, "high": 40}) == Thresholds(low=5, high=20)
