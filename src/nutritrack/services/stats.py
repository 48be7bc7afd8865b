"""Period statistics: day ranges, calendar months and the export document."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, timedelta

from nutritrack.domain.logs import WeightEntry
from nutritrack.domain.stats import CalendarDay, DailySummary
from nutritrack.services.aggregation import summarize_day
from nutritrack.services.state import StateStore, TrackerState, to_jsonable

DECEMBER = 12
WEIGHT_TREND_LIMIT = 14


@dataclass
class StatsService:
    """Service for computing summaries over the stored logs."""

    store: StateStore

    def get_day(self, day: date) -> DailySummary:
        """Return the summary for a single day."""
        return _summarize(day, self.store.state)

    def get_period(self, start: date, end: date) -> list[DailySummary]:
        """Return summaries for every day from start to end, inclusive."""
        if end < start:
            raise ValueError("Period end must not be before its start")
        span = (end - start).days + 1
        days = [start + timedelta(days=offset) for offset in range(span)]
        return summarize_period(days, self.store.state)

    def get_month(self, year: int, month: int) -> list[CalendarDay]:
        """Return calendar cells for a month."""
        return calendar_month(year, month, self.store.state)

    def get_history(self) -> list[DailySummary]:
        """Return summaries for every day that has any log entry."""
        state = self.store.state
        return summarize_period(logged_days(state), state)

    def get_weight_trend(self, limit: int = WEIGHT_TREND_LIMIT) -> list[WeightEntry]:
        """Return the most recent weight entries in date order."""
        return weight_trend(self.store.state.weight_logs, limit)


def summarize_period(days: Iterable[date], state: TrackerState) -> list[DailySummary]:
    """Summarize each distinct day, in ascending date order."""
    return [_summarize(day, state) for day in sorted(set(days))]


def calendar_month(year: int, month: int, state: TrackerState) -> list[CalendarDay]:
    """Return one calendar cell per day of the month."""
    start = date(year, month, 1)
    if month == DECEMBER:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, month + 1, 1)
    cells = []
    for offset in range((end - start).days):
        summary = _summarize(start + timedelta(days=offset), state)
        cells.append(
            CalendarDay(
                day=summary.day,
                has_data=summary.has_data,
                remaining=summary.remaining,
                is_over=summary.is_over,
                is_success=summary.is_success,
                has_weight=summary.has_weight,
                has_exercise=summary.has_exercise,
            )
        )
    return cells


def logged_days(state: TrackerState) -> list[date]:
    """Return every date with at least one entry in any log, ascending."""
    days: set[date] = set()
    for entries in (
        state.food_logs,
        state.exercise_logs,
        state.weight_logs,
        state.water_logs,
    ):
        days.update(entry.date for entry in entries)
    return sorted(days)


def weight_trend(
    weight_logs: Iterable[WeightEntry], limit: int = WEIGHT_TREND_LIMIT
) -> list[WeightEntry]:
    """Return the last ``limit`` weight entries sorted by date."""
    ordered = sorted(weight_logs, key=lambda entry: entry.date)
    if limit <= 0:
        return []
    return ordered[-limit:]


def build_export(state: TrackerState, synced_at: str) -> dict[str, object]:
    """Build the JSON export document: profile, raw logs and daily rows."""
    profile = replace(state.profile, last_sync=synced_at)
    return {
        "profile": to_jsonable("profile", profile),
        "food_logs": to_jsonable("food_logs", state.food_logs),
        "exercise_logs": to_jsonable("exercise_logs", state.exercise_logs),
        "weight_logs": to_jsonable("weight_logs", state.weight_logs),
        "water_logs": to_jsonable("water_logs", state.water_logs),
        "daily_summary": [
            _export_row(summary)
            for summary in summarize_period(logged_days(state), state)
        ],
    }


def _summarize(day: date, state: TrackerState) -> DailySummary:
    return summarize_day(
        day,
        state.food_logs,
        state.exercise_logs,
        state.water_logs,
        state.weight_logs,
        target=state.profile.active_target,
        water_goal_ml=state.profile.water_goal_ml,
    )


def _export_row(summary: DailySummary) -> dict[str, object]:
    weight = summary.weight
    servings = summary.serving_totals
    return {
        "date": summary.day.isoformat(),
        "calories_in": summary.calories_in,
        "calories_burned": summary.calories_burned,
        "net_calories": summary.net_calories,
        "water_ml": summary.water_total_ml,
        "weight": weight.weight_kg if weight else None,
        "body_fat": weight.body_fat_pct if weight else None,
        "grains": servings.grains,
        "proteins": servings.proteins,
        "vegetables": servings.vegetables,
        "fruits": servings.fruits,
        "dairy": servings.dairy,
        "oils": servings.oils,
    }
