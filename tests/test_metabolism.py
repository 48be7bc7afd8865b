"""Tests for metabolic calculations."""

import math

import pytest

from nutritrack.domain.profile import ActivityLevel, Sex
from nutritrack.services.metabolism import (
    bmi_category,
    calculate_metrics,
    round_half_up,
    water_goal_ml,
)


def test_calculate_metrics_for_reference_male() -> None:
    metrics = calculate_metrics(
        weight_kg=70,
        height_cm=170,
        age=30,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        body_fat_pct=20,
    )

    assert metrics.bmr == 1618
    assert metrics.tdee == 2508
    assert metrics.bmi == 24.2
    assert metrics.ffmi == 19.4


def test_female_and_other_use_female_constant() -> None:
    female = calculate_metrics(60, 165, 25, Sex.FEMALE, ActivityLevel.SEDENTARY)
    other = calculate_metrics(60, 165, 25, Sex.OTHER, ActivityLevel.SEDENTARY)

    assert female.bmr == 1345
    assert female.tdee == 1614
    assert other.bmr == female.bmr


def test_ffmi_is_absent_without_body_fat() -> None:
    metrics = calculate_metrics(70, 170, 30, Sex.MALE, ActivityLevel.SEDENTARY)

    assert metrics.ffmi is None


def test_tdee_grows_with_activity() -> None:
    tdees = [
        calculate_metrics(70, 170, 30, Sex.MALE, level).tdee for level in ActivityLevel
    ]

    assert tdees == sorted(tdees)


@pytest.mark.parametrize("height_cm", [0, -170, math.nan, math.inf])
def test_invalid_height_raises(height_cm: float) -> None:
    with pytest.raises(ValueError):
        calculate_metrics(70, height_cm, 30, Sex.MALE, ActivityLevel.SEDENTARY)


def test_invalid_weight_raises() -> None:
    with pytest.raises(ValueError):
        calculate_metrics(0, 170, 30, Sex.MALE, ActivityLevel.SEDENTARY)


def test_round_half_up_rounds_halves_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(1617.5) == 1618
    assert round_half_up(-0.5) == 0
    assert round_half_up(2.25, 1) == 2.3


def test_water_goal_is_33_ml_per_kg() -> None:
    assert water_goal_ml(70) == 2310
    assert water_goal_ml(60) == 1980


@pytest.mark.parametrize(
    ("bmi", "label"),
    [
        (17.0, "Underweight"),
        (18.5, "Normal"),
        (23.9, "Normal"),
        (24.0, "Overweight"),
        (27.0, "Obese"),
    ],
)
def test_bmi_category(bmi: float, label: str) -> None:
    assert bmi_category(bmi) == label
