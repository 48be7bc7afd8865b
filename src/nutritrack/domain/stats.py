"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from nutritrack.domain.logs import WeightEntry
from nutritrack.domain.targets import ServingTargets


@dataclass(frozen=True)
class DailySummary:
    """Derived metrics for one day; never persisted."""

    day: date
    calories_in: float
    calories_burned: float
    effective_budget: float
    remaining: float
    net_calories: float
    progress_pct: float | None
    serving_totals: ServingTargets
    water_total_ml: float
    hydration_pct: float | None
    has_data: bool
    is_over: bool
    is_success: bool
    has_exercise: bool
    weight: WeightEntry | None

    @property
    def has_weight(self) -> bool:
        return self.weight is not None


@dataclass(frozen=True)
class CalendarDay:
    """Calendar cell data for a single day."""

    day: date
    has_data: bool
    remaining: float
    is_over: bool
    is_success: bool
    has_weight: bool
    has_exercise: bool
