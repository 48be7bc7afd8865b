"""Domain model for the user profile."""

from dataclasses import dataclass, field
from enum import StrEnum

from nutritrack.domain.targets import CustomTargets, DailyTarget, ServingTargets


class Sex(StrEnum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class ActivityLevel(StrEnum):
    """Five ordinal activity tiers, least to most active."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "LightlyActive"
    MODERATELY_ACTIVE = "ModeratelyActive"
    VERY_ACTIVE = "VeryActive"
    SUPER_ACTIVE = "SuperActive"


class Goal(StrEnum):
    LOSE_WEIGHT = "LoseWeight"
    MAINTAIN = "Maintain"
    GAIN_MUSCLE = "GainMuscle"


class DietStrategy(StrEnum):
    BALANCED = "Balanced"
    CARB_CYCLING = "CarbCycling"


class CycleDay(StrEnum):
    """Carb-cycling day type; only meaningful under CarbCycling."""

    HIGH_CARB = "HighCarb"
    LOW_CARB = "LowCarb"


@dataclass(frozen=True)
class Profile:
    """A person's attributes plus the memoized targets derived from them.

    ``bmr``, ``tdee``, ``bmi``, ``ffmi``, ``active_target`` and (in automatic
    mode) ``water_goal_ml`` are written only by the target resolution
    functions in ``nutritrack.services.targets``.
    """

    name: str = "User"
    age: int = 30
    height_cm: float = 170.0
    weight_kg: float = 70.0
    body_fat_pct: float | None = 20.0
    muscle_mass_kg: float | None = None
    waist_cm: float | None = None
    goal_weight_kg: float = 65.0
    sex: Sex = Sex.MALE
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.LOSE_WEIGHT
    diet_strategy: DietStrategy = DietStrategy.BALANCED
    cycle_day: CycleDay = CycleDay.LOW_CARB
    is_custom_targets: bool = False
    custom_targets: CustomTargets = field(default_factory=CustomTargets)
    bmr: int = 0
    tdee: int = 0
    bmi: float = 0.0
    ffmi: float | None = None
    active_target: DailyTarget = field(
        default_factory=lambda: DailyTarget(calories=0, servings=ServingTargets())
    )
    water_goal_ml: int = 2300
    export_url: str = ""
    last_sync: str = ""
