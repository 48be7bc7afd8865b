"""Request bodies accepted by the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from nutritrack.domain.classification import ServingsDraft
from nutritrack.domain.logs import (
    ExerciseEntry,
    ExerciseType,
    FoodEntry,
    MealSlot,
    WeightEntry,
)
from nutritrack.domain.profile import ActivityLevel, CycleDay, DietStrategy, Goal, Sex
from nutritrack.domain.targets import ServingTargets

_CLEARABLE_FIELDS = frozenset({"body_fat_pct", "muscle_mass_kg", "waist_cm"})


class ProfileUpdate(BaseModel):
    """Partial profile edit; only the fields sent are applied."""

    name: str | None = None
    age: int | None = Field(default=None, gt=0)
    height_cm: float | None = None
    weight_kg: float | None = None
    body_fat_pct: float | None = None
    muscle_mass_kg: float | None = None
    waist_cm: float | None = None
    goal_weight_kg: float | None = None
    sex: Sex | None = None
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
    diet_strategy: DietStrategy | None = None
    water_goal_ml: int | None = Field(default=None, ge=0)
    export_url: str | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields explicitly set; null only clears optional measurements."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name in _CLEARABLE_FIELDS
        }


class CustomModeRequest(BaseModel):
    enabled: bool


class CycleDayRequest(BaseModel):
    cycle_day: CycleDay


class CustomTargetRequest(BaseModel):
    """One calorie or serving value of a custom target."""

    field: str
    value: float = Field(ge=0.0)
    cycle_day: CycleDay | None = None


class FoodRequest(BaseModel):
    """Food entry fields as entered or confirmed by the user."""

    name: str
    calories: float = Field(ge=0.0, allow_inf_nan=False)
    servings: ServingsDraft = Field(default_factory=ServingsDraft)
    meal: MealSlot
    main_category: str = ""
    date: date
    notes: str | None = None

    def to_entry(self, entry_id: UUID) -> FoodEntry:
        return FoodEntry(
            id=entry_id,
            name=self.name,
            calories=self.calories,
            servings=ServingTargets(**self.servings.model_dump()),
            meal=self.meal,
            main_category=self.main_category,
            date=self.date,
            notes=self.notes,
        )


class ExerciseRequest(BaseModel):
    name: str
    calories_burned: float = Field(ge=0.0, allow_inf_nan=False)
    duration_minutes: float = Field(gt=0.0, allow_inf_nan=False)
    type: ExerciseType
    date: date
    notes: str | None = None

    def to_entry(self, entry_id: UUID) -> ExerciseEntry:
        return ExerciseEntry(
            id=entry_id,
            name=self.name,
            calories_burned=self.calories_burned,
            duration_minutes=self.duration_minutes,
            type=self.type,
            date=self.date,
            notes=self.notes,
        )


class WaterRequest(BaseModel):
    date: date
    amount_ml: float = Field(gt=0.0, allow_inf_nan=False)


class WeightRequest(BaseModel):
    """Body measurements for one date."""

    date: date
    weight_kg: float = Field(gt=0.0, allow_inf_nan=False)
    body_fat_pct: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    muscle_mass_kg: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    waist_cm: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)

    def to_entry(self, entry_id: UUID) -> WeightEntry:
        return WeightEntry(
            id=entry_id,
            date=self.date,
            weight_kg=self.weight_kg,
            body_fat_pct=self.body_fat_pct,
            muscle_mass_kg=self.muscle_mass_kg,
            waist_cm=self.waist_cm,
        )


class FoodTextRequest(BaseModel):
    description: str = Field(min_length=1)
    meal: MealSlot
    date: date


class ExerciseTextRequest(BaseModel):
    """Activity description; the profile weight is used when none is sent."""

    description: str = Field(min_length=1)
    duration_minutes: float
    date: date
    weight_kg: float | None = None
