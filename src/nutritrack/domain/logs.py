"""Domain models for daily logs."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID

from nutritrack.domain.targets import ServingTargets


class MealSlot(StrEnum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class ExerciseType(StrEnum):
    CARDIO = "Cardio"
    STRENGTH = "Strength"


@dataclass(frozen=True)
class FoodEntry:
    """A logged food with its calories and serving breakdown."""

    id: UUID
    name: str
    calories: float
    servings: ServingTargets
    meal: MealSlot
    main_category: str
    date: date
    notes: str | None = None


@dataclass(frozen=True)
class ExerciseEntry:
    """A logged workout."""

    id: UUID
    name: str
    calories_burned: float
    duration_minutes: float
    type: ExerciseType
    date: date
    notes: str | None = None


@dataclass(frozen=True)
class WaterEntry:
    """A single drink of water."""

    id: UUID
    date: date
    amount_ml: float


@dataclass(frozen=True)
class WeightEntry:
    """Body measurements for a date; at most one per date."""

    id: UUID
    date: date
    weight_kg: float
    body_fat_pct: float | None = None
    muscle_mass_kg: float | None = None
    waist_cm: float | None = None
