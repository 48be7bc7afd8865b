"""Food, exercise, water and weight log endpoints."""

from datetime import date
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, status

from nutritrack.api.auth import get_container, require_token
from nutritrack.api.models import (
    ExerciseRequest,
    FoodRequest,
    WaterRequest,
    WeightRequest,
)
from nutritrack.domain.logs import ExerciseEntry, FoodEntry, WaterEntry, WeightEntry
from nutritrack.services.aggregation import find_weight_entry, group_by_meal

router = APIRouter(prefix="/logs", tags=["logs"], dependencies=[Depends(require_token)])

_OK = {"status": "ok"}


def _not_found(kind: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} entry not found"
    )


@router.get("/{day}")
async def day_logs(day: date, request: Request) -> dict[str, object]:
    """Return a day's entries with foods grouped by meal slot."""
    container = get_container(request)
    foods, exercises, waters = container.log_service.entries_for(day)
    weight = find_weight_entry(container.state_store.state.weight_logs, day)
    return {
        "date": day,
        "meals": group_by_meal(foods, day),
        "exercises": exercises,
        "water": waters,
        "weight": weight,
    }


@router.post("/food", status_code=status.HTTP_201_CREATED)
async def add_food(body: FoodRequest, request: Request) -> FoodEntry:
    return get_container(request).log_service.add_food(body.to_entry(uuid4()))


@router.put("/food/{entry_id}")
async def update_food(
    entry_id: UUID, body: FoodRequest, request: Request
) -> FoodEntry:
    """Replace a food entry, keeping its id."""
    updated = get_container(request).log_service.update_food(body.to_entry(entry_id))
    if updated is None:
        raise _not_found("Food")
    return updated


@router.delete("/food/{entry_id}")
async def delete_food(entry_id: UUID, request: Request) -> dict[str, str]:
    if not get_container(request).log_service.delete_food(entry_id):
        raise _not_found("Food")
    return _OK


@router.post("/exercise", status_code=status.HTTP_201_CREATED)
async def add_exercise(body: ExerciseRequest, request: Request) -> ExerciseEntry:
    return get_container(request).log_service.add_exercise(body.to_entry(uuid4()))


@router.put("/exercise/{entry_id}")
async def update_exercise(
    entry_id: UUID, body: ExerciseRequest, request: Request
) -> ExerciseEntry:
    """Replace an exercise entry, keeping its id."""
    service = get_container(request).log_service
    updated = service.update_exercise(body.to_entry(entry_id))
    if updated is None:
        raise _not_found("Exercise")
    return updated


@router.delete("/exercise/{entry_id}")
async def delete_exercise(entry_id: UUID, request: Request) -> dict[str, str]:
    if not get_container(request).log_service.delete_exercise(entry_id):
        raise _not_found("Exercise")
    return _OK


@router.post("/water", status_code=status.HTTP_201_CREATED)
async def add_water(body: WaterRequest, request: Request) -> WaterEntry:
    return get_container(request).log_service.add_water(body.date, body.amount_ml)


@router.delete("/water/{entry_id}")
async def delete_water(entry_id: UUID, request: Request) -> dict[str, str]:
    """Remove a single water entry."""
    if not get_container(request).log_service.delete_water(entry_id):
        raise _not_found("Water")
    return _OK


@router.put("/weight")
async def record_weight(body: WeightRequest, request: Request) -> WeightEntry:
    """Store measurements for a date, replacing any earlier entry for it."""
    return get_container(request).log_service.record_weight(body.to_entry(uuid4()))


@router.delete("/weight/{entry_id}")
async def delete_weight(entry_id: UUID, request: Request) -> dict[str, str]:
    if not get_container(request).log_service.delete_weight(entry_id):
        raise _not_found("Weight")
    return _OK
