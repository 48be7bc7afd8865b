"""Profile and target configuration endpoints."""

from fastapi import APIRouter, Depends, Request

from nutritrack.api.auth import get_container, require_token
from nutritrack.api.models import (
    CustomModeRequest,
    CustomTargetRequest,
    CycleDayRequest,
    ProfileUpdate,
)
from nutritrack.domain.profile import Profile

router = APIRouter(
    prefix="/profile", tags=["profile"], dependencies=[Depends(require_token)]
)


@router.get("")
async def read_profile(request: Request) -> Profile:
    """Return the profile with its derived metrics and active target."""
    return get_container(request).profile_service.get_profile()


@router.patch("")
async def update_profile(body: ProfileUpdate, request: Request) -> Profile:
    """Edit profile fields; metrics and automatic targets follow."""
    return get_container(request).profile_service.update(**body.changes())


@router.get("/bmi")
async def read_bmi(request: Request) -> dict[str, object]:
    service = get_container(request).profile_service
    return {"bmi": service.get_profile().bmi, "category": service.bmi_category()}


@router.put("/custom-mode")
async def put_custom_mode(body: CustomModeRequest, request: Request) -> Profile:
    """Switch between automatic and custom targets."""
    return get_container(request).profile_service.set_custom_mode(body.enabled)


@router.put("/cycle-day")
async def put_cycle_day(body: CycleDayRequest, request: Request) -> Profile:
    return get_container(request).profile_service.switch_cycle_day(body.cycle_day)


@router.put("/custom-targets")
async def put_custom_target(body: CustomTargetRequest, request: Request) -> Profile:
    """Edit one value of a custom target table."""
    return get_container(request).profile_service.set_custom_target(
        body.field, body.value, cycle_day=body.cycle_day
    )
