"""AI classification of foods and exercises into log entries."""

import base64
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Protocol, TypeVar
from uuid import uuid4

from pydantic import ValidationError

from nutritrack.domain.classification import ExerciseDraft, FoodDraft
from nutritrack.domain.logs import ExerciseEntry, FoodEntry, MealSlot
from nutritrack.domain.profile import DietStrategy, Profile
from nutritrack.domain.targets import ServingTargets

_NUMBER = {"type": "number", "minimum": 0}
_NULLABLE_TEXT = {"anyOf": [{"type": "string"}, {"type": "null"}]}

FOOD_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "calories": _NUMBER,
        "servings": {
            "type": "object",
            "properties": {
                "grains": _NUMBER,
                "proteins": _NUMBER,
                "vegetables": _NUMBER,
                "fruits": _NUMBER,
                "dairy": _NUMBER,
                "oils": _NUMBER,
            },
            "required": [
                "grains",
                "proteins",
                "vegetables",
                "fruits",
                "dairy",
                "oils",
            ],
            "additionalProperties": False,
        },
        "main_category": {"type": "string"},
        "notes": _NULLABLE_TEXT,
    },
    "required": ["name", "calories", "servings", "main_category", "notes"],
    "additionalProperties": False,
}

EXERCISE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "calories_burned": _NUMBER,
        "type": {"type": "string", "enum": ["Cardio", "Strength"]},
        "notes": _NULLABLE_TEXT,
    },
    "required": ["name", "calories_burned", "type", "notes"],
    "additionalProperties": False,
}

FOOD_PROMPT = (
    "Estimate the total calories (kcal) of the food and break it down into "
    "servings of the six food groups using a standard food exchange list: "
    "grains (1 serving = 1/4 bowl cooked rice, 1 thin slice of toast), "
    "proteins (about 7 g protein: 1 egg, 30 g meat, 50 g seafood, 80 g tofu), "
    "vegetables (1/2 bowl cooked or 100 g raw), fruits (1 apple, 1/2 banana), "
    "dairy (240 ml milk) and oils (1 tsp oil or a small handful of nuts). "
    "Guess typical portions when amounts are missing. Return a short food "
    "name, the main category (the group with the most servings) and a short "
    "note on how the estimate was made."
)

ADVICE_FALLBACK = "No advice is available right now, please try again later."
ADVICE_RECENT_MEALS = 10

_logger = logging.getLogger(__name__)

_Draft = TypeVar("_Draft", FoodDraft, ExerciseDraft)


class ClassificationError(RuntimeError):
    """Raised when the AI service cannot produce a usable estimate."""


class ClassificationClient(Protocol):
    """Interface for structured LLM calls."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        """Return data matching ``schema`` for the prompt and optional image."""

    async def complete(self, *, model: str, store: bool, prompt: str) -> str:
        """Return free text for a prompt."""


@dataclass
class ClassificationService:
    """Turns descriptions and photos into draft log entries."""

    client: ClassificationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def classify_food_text(
        self, description: str, meal: MealSlot, day: date
    ) -> FoodEntry:
        """Estimate a food from a free-text description."""
        prompt = f'Analyze this food description: "{description}". {FOOD_PROMPT}'
        raw = await self._extract(prompt, "food_estimate", FOOD_SCHEMA)
        return _food_entry(_validate(FoodDraft, raw), meal, day)

    async def classify_food_image(
        self, image_bytes: bytes, meal: MealSlot, day: date
    ) -> FoodEntry:
        """Estimate a food from a photo."""
        prompt = f"Look at this food image. {FOOD_PROMPT}"
        raw = await self._extract(
            prompt,
            "food_estimate",
            FOOD_SCHEMA,
            image_data_url=_to_data_url(image_bytes),
        )
        return _food_entry(_validate(FoodDraft, raw), meal, day)

    async def classify_exercise(
        self, description: str, weight_kg: float, duration_minutes: float, day: date
    ) -> ExerciseEntry:
        """Estimate calories burned by an activity."""
        if duration_minutes <= 0:
            raise ValueError("Exercise duration must be positive")
        prompt = (
            f"User weight: {weight_kg} kg. "
            f'Exercise activity: "{description}". '
            f"Duration: {duration_minutes} minutes. "
            "Estimate the calories burned (kcal), classify the activity as "
            "Cardio (aerobic) or Strength (anaerobic, weights, HIIT, sprints) "
            "and give it a short standard name."
        )
        raw = await self._extract(prompt, "exercise_estimate", EXERCISE_SCHEMA)
        draft = _validate(ExerciseDraft, raw)
        return ExerciseEntry(
            id=uuid4(),
            name=draft.name,
            calories_burned=draft.calories_burned,
            duration_minutes=duration_minutes,
            type=draft.type,
            date=day,
            notes=draft.notes,
        )

    async def diet_advice(
        self, profile: Profile, food_logs: Sequence[FoodEntry]
    ) -> str:
        """Return three short tips based on the profile and recent meals."""
        recent = ", ".join(
            f"{entry.name} ({entry.calories:g} kcal, "
            f"grains {entry.servings.grains:g}, proteins {entry.servings.proteins:g})"
            for entry in food_logs[:ADVICE_RECENT_MEALS]
        )
        if profile.diet_strategy == DietStrategy.CARB_CYCLING:
            strategy = f"Carb cycling ({profile.cycle_day})"
        else:
            strategy = "Balanced diet"
        prompt = (
            "User profile:\n"
            f"- Goal: {profile.goal}\n"
            f"- BMI: {profile.bmi}\n"
            f"- TDEE: {profile.tdee}\n"
            f"- Diet strategy: {strategy}\n"
            f"- Target calories: {profile.active_target.calories}\n"
            f"- Recent meals: {recent or 'None recorded yet'}\n\n"
            "Give three concise, actionable bullet-point tips focused on the "
            "balance of the six food-group servings."
        )
        try:
            text = await self.client.complete(
                model=self.model, store=self.store, prompt=prompt
            )
        except Exception as exc:
            _logger.exception("Diet advice request failed")
            raise ClassificationError("Diet advice request failed") from exc
        return text.strip() or ADVICE_FALLBACK

    async def _extract(
        self,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        try:
            return await self.client.extract(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=prompt,
                schema_name=schema_name,
                schema=schema,
                image_data_url=image_data_url,
            )
        except Exception as exc:
            _logger.exception("Classification request failed: %s", schema_name)
            raise ClassificationError("AI analysis failed, please retry") from exc


def _validate(model: type[_Draft], raw: object) -> _Draft:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        _logger.warning("Classification returned invalid data: %s", exc)
        raise ClassificationError("AI returned an unusable estimate") from exc


def _food_entry(draft: FoodDraft, meal: MealSlot, day: date) -> FoodEntry:
    return FoodEntry(
        id=uuid4(),
        name=draft.name,
        calories=draft.calories,
        servings=ServingTargets(**draft.servings.model_dump()),
        meal=meal,
        main_category=draft.main_category,
        date=day,
        notes=draft.notes,
    )


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
