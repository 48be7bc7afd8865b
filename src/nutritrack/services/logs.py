"""Log mutation service for food, exercise, water and weight entries."""

import math
from dataclasses import dataclass
from datetime import date
from typing import TypeVar
from uuid import UUID, uuid4

from nutritrack.domain.logs import ExerciseEntry, FoodEntry, WaterEntry, WeightEntry
from nutritrack.domain.targets import FoodGroup
from nutritrack.services.state import StateStore

_Entry = TypeVar("_Entry", FoodEntry, ExerciseEntry, WaterEntry, WeightEntry)


@dataclass
class LogService:
    """Adds, replaces and deletes log entries with copy-on-write commits."""

    store: StateStore

    def add_food(self, entry: FoodEntry) -> FoodEntry:
        """Log a food entry; newest entries come first."""
        _validate_food(entry)
        food_logs = self.store.state.food_logs
        self.store.commit(food_logs=(entry, *food_logs))
        return entry

    def update_food(self, entry: FoodEntry) -> FoodEntry | None:
        """Replace the food entry with the same id, if present."""
        _validate_food(entry)
        updated = _replace_by_id(self.store.state.food_logs, entry)
        if updated is None:
            return None
        self.store.commit(food_logs=updated)
        return entry

    def delete_food(self, entry_id: UUID) -> bool:
        """Delete a food entry by id."""
        remaining = _without_id(self.store.state.food_logs, entry_id)
        if remaining is None:
            return False
        self.store.commit(food_logs=remaining)
        return True

    def add_exercise(self, entry: ExerciseEntry) -> ExerciseEntry:
        """Log an exercise entry; newest entries come first."""
        _validate_exercise(entry)
        exercise_logs = self.store.state.exercise_logs
        self.store.commit(exercise_logs=(entry, *exercise_logs))
        return entry

    def update_exercise(self, entry: ExerciseEntry) -> ExerciseEntry | None:
        """Replace the exercise entry with the same id, if present."""
        _validate_exercise(entry)
        updated = _replace_by_id(self.store.state.exercise_logs, entry)
        if updated is None:
            return None
        self.store.commit(exercise_logs=updated)
        return entry

    def delete_exercise(self, entry_id: UUID) -> bool:
        """Delete an exercise entry by id."""
        remaining = _without_id(self.store.state.exercise_logs, entry_id)
        if remaining is None:
            return False
        self.store.commit(exercise_logs=remaining)
        return True

    def add_water(self, day: date, amount_ml: float) -> WaterEntry:
        """Append a water entry for a date."""
        _require_positive("Water amount", amount_ml)
        entry = WaterEntry(id=uuid4(), date=day, amount_ml=amount_ml)
        self.store.commit(water_logs=(*self.store.state.water_logs, entry))
        return entry

    def delete_water(self, entry_id: UUID) -> bool:
        """Delete exactly one water entry by id; unknown ids are a no-op."""
        remaining = _without_id(self.store.state.water_logs, entry_id)
        if remaining is None:
            return False
        self.store.commit(water_logs=remaining)
        return True

    def record_weight(self, entry: WeightEntry) -> WeightEntry:
        """Store body measurements, replacing any entry for the same date."""
        _validate_weight(entry)
        others = tuple(
            existing
            for existing in self.store.state.weight_logs
            if existing.date != entry.date
        )
        self.store.commit(weight_logs=(*others, entry))
        return entry

    def delete_weight(self, entry_id: UUID) -> bool:
        """Delete a weight entry by id."""
        remaining = _without_id(self.store.state.weight_logs, entry_id)
        if remaining is None:
            return False
        self.store.commit(weight_logs=remaining)
        return True

    def entries_for(
        self, day: date
    ) -> tuple[list[FoodEntry], list[ExerciseEntry], list[WaterEntry]]:
        """Return the food, exercise and water entries logged on a date."""
        state = self.store.state
        return (
            [entry for entry in state.food_logs if entry.date == day],
            [entry for entry in state.exercise_logs if entry.date == day],
            [entry for entry in state.water_logs if entry.date == day],
        )


def _replace_by_id(
    entries: tuple[_Entry, ...], entry: _Entry
) -> tuple[_Entry, ...] | None:
    if not any(existing.id == entry.id for existing in entries):
        return None
    return tuple(entry if existing.id == entry.id else existing for existing in entries)


def _without_id(
    entries: tuple[_Entry, ...], entry_id: UUID
) -> tuple[_Entry, ...] | None:
    remaining = tuple(existing for existing in entries if existing.id != entry_id)
    if len(remaining) == len(entries):
        return None
    return remaining


def _validate_food(entry: FoodEntry) -> None:
    _require_non_negative("Food calories", entry.calories)
    for group in FoodGroup:
        _require_non_negative(f"{group} servings", entry.servings.get(group))


def _validate_exercise(entry: ExerciseEntry) -> None:
    _require_non_negative("Calories burned", entry.calories_burned)
    _require_positive("Exercise duration", entry.duration_minutes)


def _validate_weight(entry: WeightEntry) -> None:
    _require_positive("Weight", entry.weight_kg)
    for name in ("body_fat_pct", "muscle_mass_kg", "waist_cm"):
        value = getattr(entry, name)
        if value is not None:
            _require_non_negative(name, value)


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0, got {value!r}")


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
