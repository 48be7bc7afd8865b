"""AI estimation, diet advice and spreadsheet export endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from nutritrack.api.auth import get_container, require_token
from nutritrack.api.models import ExerciseTextRequest, FoodTextRequest
from nutritrack.domain.logs import ExerciseEntry, FoodEntry, MealSlot
from nutritrack.domain.profile import Profile

router = APIRouter(tags=["assistant"], dependencies=[Depends(require_token)])


@router.post("/ai/food/text")
async def estimate_food_text(body: FoodTextRequest, request: Request) -> FoodEntry:
    """Estimate a food from a description; the result is not logged."""
    service = get_container(request).classification_service
    return await service.classify_food_text(body.description, body.meal, body.date)


@router.post("/ai/food/image")
async def estimate_food_image(
    request: Request, meal: MealSlot = Query(), day: date = Query()
) -> FoodEntry:
    """Estimate a food from a raw image request body."""
    image_bytes = await request.body()
    if not image_bytes:
        raise ValueError("Image body is empty")
    service = get_container(request).classification_service
    return await service.classify_food_image(image_bytes, meal, day)


@router.post("/ai/exercise")
async def estimate_exercise(
    body: ExerciseTextRequest, request: Request
) -> ExerciseEntry:
    """Estimate calories burned; the profile weight is used by default."""
    container = get_container(request)
    weight_kg = body.weight_kg or container.profile_service.get_profile().weight_kg
    return await container.classification_service.classify_exercise(
        body.description, weight_kg, body.duration_minutes, body.date
    )


@router.get("/ai/advice")
async def diet_advice(request: Request) -> dict[str, str]:
    container = get_container(request)
    state = container.state_store.state
    advice = await container.classification_service.diet_advice(
        state.profile, state.food_logs
    )
    return {"advice": advice}


@router.post("/export")
async def export(request: Request) -> Profile:
    """Send everything to the configured spreadsheet and stamp the sync time."""
    return await get_container(request).export_service.sync()
