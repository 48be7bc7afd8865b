"""Metabolic calculations: BMR, TDEE, BMI and FFMI."""

import math

from nutritrack.domain.profile import ActivityLevel, Sex
from nutritrack.domain.targets import MetabolicMetrics

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.SUPER_ACTIVE: 1.9,
}

WATER_ML_PER_KG = 33

_BMI_CATEGORIES: tuple[tuple[float, str], ...] = (
    (18.5, "Underweight"),
    (24.0, "Normal"),
    (27.0, "Overweight"),
)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, unlike Python's banker's rounding."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def calculate_metrics(  # noqa: PLR0913
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: Sex,
    activity_level: ActivityLevel,
    body_fat_pct: float | None = None,
) -> MetabolicMetrics:
    """Compute BMR (Mifflin-St Jeor), TDEE, BMI and, if body fat is known, FFMI."""
    _require_positive("weight_kg", weight_kg)
    _require_positive("height_cm", height_cm)

    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr += 5 if sex == Sex.MALE else -161
    bmr = int(round_half_up(bmr))

    tdee = int(round_half_up(bmr * ACTIVITY_MULTIPLIERS[activity_level]))

    height_m = height_cm / 100
    bmi = round_half_up(weight_kg / (height_m * height_m), 1)

    ffmi = None
    if body_fat_pct is not None:
        fat_free_mass = weight_kg * (1 - body_fat_pct / 100)
        ffmi = round_half_up(fat_free_mass / (height_m * height_m), 1)

    return MetabolicMetrics(bmr=bmr, tdee=tdee, bmi=bmi, ffmi=ffmi)


def water_goal_ml(weight_kg: float) -> int:
    """Return the daily water goal in ml (about 33 ml per kg)."""
    return int(round_half_up(weight_kg * WATER_ML_PER_KG))


def bmi_category(bmi: float) -> str:
    """Return a label for a BMI value."""
    for upper, label in _BMI_CATEGORIES:
        if bmi < upper:
            return label
    return "Obese"


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
