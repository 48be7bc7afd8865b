"""Models for AI classification results."""

from pydantic import BaseModel, Field

from nutritrack.domain.logs import ExerciseType


class ServingsDraft(BaseModel):
    """Estimated servings per food group."""

    grains: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    proteins: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    vegetables: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    fruits: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    dairy: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    oils: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)


class FoodDraft(BaseModel):
    """Structured output for a food estimate."""

    name: str
    calories: float = Field(ge=0.0, allow_inf_nan=False)
    servings: ServingsDraft
    main_category: str
    notes: str | None = None


class ExerciseDraft(BaseModel):
    """Structured output for an exercise estimate."""

    name: str
    calories_burned: float = Field(ge=0.0, allow_inf_nan=False)
    type: ExerciseType
    notes: str | None = None
