"""Daily, period, calendar and weight trend endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from nutritrack.api.auth import get_container, require_token
from nutritrack.domain.logs import WeightEntry
from nutritrack.domain.stats import CalendarDay, DailySummary
from nutritrack.services.stats import WEIGHT_TREND_LIMIT

router = APIRouter(
    prefix="/stats", tags=["stats"], dependencies=[Depends(require_token)]
)


@router.get("/day/{day}")
async def day_summary(day: date, request: Request) -> DailySummary:
    """Return the aggregated totals and flags for one day."""
    return get_container(request).stats_service.get_day(day)


@router.get("/period")
async def period_summary(
    request: Request, start: date = Query(), end: date = Query()
) -> list[DailySummary]:
    """Return one summary per day of an inclusive range."""
    return get_container(request).stats_service.get_period(start, end)


@router.get("/calendar/{year}/{month}")
async def calendar(year: int, month: int, request: Request) -> list[CalendarDay]:
    return get_container(request).stats_service.get_month(year, month)


@router.get("/history")
async def history(request: Request) -> list[DailySummary]:
    """Return summaries for every day with at least one entry."""
    return get_container(request).stats_service.get_history()


@router.get("/weight-trend")
async def weight_trend(
    request: Request, limit: int = Query(default=WEIGHT_TREND_LIMIT, ge=1)
) -> list[WeightEntry]:
    return get_container(request).stats_service.get_weight_trend(limit)
