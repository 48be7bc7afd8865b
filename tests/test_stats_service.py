"""Tests for stats service."""

from datetime import date

import pytest

from nutritrack.services.logs import LogService
from nutritrack.services.state import StateStore
from nutritrack.services.stats import (
    StatsService,
    build_export,
    logged_days,
    weight_trend,
)
from tests.conftest import make_exercise, make_food, make_weight


def test_get_day_uses_active_target(store: StateStore) -> None:
    LogService(store).add_food(make_food(date(2024, 5, 1), 1000))

    summary = StatsService(store).get_day(date(2024, 5, 1))

    assert summary.effective_budget == 2132
    assert summary.remaining == 1132
    assert summary.hydration_pct == 0


def test_get_period_is_inclusive(store: StateStore) -> None:
    summaries = StatsService(store).get_period(date(2024, 4, 29), date(2024, 5, 2))

    assert [summary.day for summary in summaries] == [
        date(2024, 4, 29),
        date(2024, 4, 30),
        date(2024, 5, 1),
        date(2024, 5, 2),
    ]


def test_get_period_rejects_reversed_range(store: StateStore) -> None:
    with pytest.raises(ValueError):
        StatsService(store).get_period(date(2024, 5, 2), date(2024, 5, 1))


def test_calendar_month_covers_every_day(store: StateStore) -> None:
    logs = LogService(store)
    logs.add_food(make_food(date(2024, 2, 10), 5000))
    logs.add_food(make_food(date(2024, 2, 11), 800))
    logs.record_weight(make_weight(date(2024, 2, 11)))

    cells = StatsService(store).get_month(2024, 2)

    assert len(cells) == 29
    by_day = {cell.day.day: cell for cell in cells}
    assert by_day[10].is_over is True
    assert by_day[11].is_success is True
    assert by_day[11].has_weight is True
    assert by_day[12].has_data is False


def test_calendar_december_rolls_into_next_year(store: StateStore) -> None:
    cells = StatsService(store).get_month(2024, 12)

    assert len(cells) == 31
    assert cells[-1].day == date(2024, 12, 31)


def test_history_lists_logged_days(store: StateStore) -> None:
    logs = LogService(store)
    logs.add_food(make_food(date(2024, 5, 3)))
    logs.add_exercise(make_exercise(date(2024, 5, 1)))
    logs.add_water(date(2024, 5, 3), 200)

    history = StatsService(store).get_history()

    assert [summary.day for summary in history] == [date(2024, 5, 1), date(2024, 5, 3)]
    assert logged_days(store.state) == [date(2024, 5, 1), date(2024, 5, 3)]


def test_weight_trend_keeps_latest_entries() -> None:
    entries = [make_weight(date(2024, 5, day)) for day in range(20, 0, -1)]

    trend = weight_trend(entries, limit=14)

    assert len(trend) == 14
    assert trend[0].date == date(2024, 5, 7)
    assert trend[-1].date == date(2024, 5, 20)


def test_build_export_includes_daily_rows(store: StateStore) -> None:
    logs = LogService(store)
    logs.add_food(make_food(date(2024, 5, 2), 700))
    logs.add_exercise(make_exercise(date(2024, 5, 2), 200))
    logs.record_weight(make_weight(date(2024, 5, 1), 70.2, body_fat_pct=19))

    document = build_export(store.state, "2024-05-03T10:00:00+00:00")

    assert document["profile"]["last_sync"] == "2024-05-03T10:00:00+00:00"
    assert len(document["food_logs"]) == 1
    rows = document["daily_summary"]
    assert [row["date"] for row in rows] == ["2024-05-01", "2024-05-02"]
    assert rows[0]["weight"] == 70.2
    assert rows[0]["body_fat"] == 19
    assert rows[1]["net_calories"] == 500
    assert rows[1]["grains"] == 2
    assert rows[1]["weight"] is None


def test_period_summaries_are_repeatable(store: StateStore) -> None:
    logs = LogService(store)
    logs.add_food(make_food(date(2024, 5, 1), 900))
    logs.add_exercise(make_exercise(date(2024, 5, 2)))
    logs.record_weight(make_weight(date(2024, 5, 2)))
    service = StatsService(store)

    first = service.get_period(date(2024, 5, 1), date(2024, 5, 3))

    assert service.get_period(date(2024, 5, 1), date(2024, 5, 3)) == first
    assert service.get_month(2024, 5) == service.get_month(2024, 5)
    assert build_export(store.state, "t") == build_export(store.state, "t")
