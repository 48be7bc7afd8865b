"""Per-day roll-up of food, exercise, water and weight logs."""

from collections.abc import Iterable, Sequence
from datetime import date

from nutritrack.domain.logs import (
    ExerciseEntry,
    FoodEntry,
    MealSlot,
    WaterEntry,
    WeightEntry,
)
from nutritrack.domain.stats import DailySummary
from nutritrack.domain.targets import DailyTarget, ServingTargets


def summarize_day(  # noqa: PLR0913
    day: date,
    food_logs: Iterable[FoodEntry],
    exercise_logs: Iterable[ExerciseEntry],
    water_logs: Iterable[WaterEntry],
    weight_logs: Iterable[WeightEntry],
    target: DailyTarget,
    water_goal_ml: float,
) -> DailySummary:
    """Derive the metrics shown for a single day.

    Percentages are ``None`` when their denominator is not positive.
    """
    foods = [entry for entry in food_logs if entry.date == day]
    exercises = [entry for entry in exercise_logs if entry.date == day]

    calories_in = sum(entry.calories for entry in foods)
    calories_burned = sum(entry.calories_burned for entry in exercises)
    effective_budget = target.calories + calories_burned
    remaining = effective_budget - calories_in
    water_total = sum(entry.amount_ml for entry in water_logs if entry.date == day)

    has_data = bool(foods)
    is_over = remaining < 0
    return DailySummary(
        day=day,
        calories_in=calories_in,
        calories_burned=calories_burned,
        effective_budget=effective_budget,
        remaining=remaining,
        net_calories=calories_in - calories_burned,
        progress_pct=_capped_pct(calories_in, effective_budget),
        serving_totals=sum_servings(foods),
        water_total_ml=water_total,
        hydration_pct=_capped_pct(water_total, water_goal_ml),
        has_data=has_data,
        is_over=is_over,
        is_success=has_data and not is_over,
        has_exercise=bool(exercises),
        weight=find_weight_entry(weight_logs, day),
    )


def sum_servings(foods: Iterable[FoodEntry]) -> ServingTargets:
    """Return group-wise serving totals for food entries."""
    total = ServingTargets()
    for entry in foods:
        total = total.plus(entry.servings)
    return total


def find_weight_entry(
    weight_logs: Iterable[WeightEntry], day: date
) -> WeightEntry | None:
    """Return the weight entry for a date, if any."""
    for entry in weight_logs:
        if entry.date == day:
            return entry
    return None


def group_by_meal(
    food_logs: Sequence[FoodEntry], day: date
) -> dict[MealSlot, list[FoodEntry]]:
    """Return a day's food entries grouped by meal, in meal order."""
    return {
        meal: [entry for entry in food_logs if entry.date == day and entry.meal == meal]
        for meal in MealSlot
    }


def _capped_pct(value: float, denominator: float) -> float | None:
    if denominator <= 0:
        return None
    return min(value / denominator * 100, 100)
