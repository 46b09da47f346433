"""HTTP routes for the nutrition tracker resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Request, UploadFile, status

from nutritrack.api.models import (
    DayCaloriesResponse,
    ExistsResponse,
    FoodLogCreatedResponse,
    FoodLogPayload,
    MessageResponse,
    OwnedRecordPayload,
    UploadResponse,
    allergen_to_json,
    food_log_to_json,
    meal_plan_to_json,
    profile_to_json,
)
from nutritrack.domain.records import UploadedFile

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(prefix="/api", tags=["nutrition"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/allergens")
def list_allergens(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Return allergens recorded for an email."""
    allergens = _container(request).allergen_service.list_allergens(email)
    return [allergen_to_json(allergen) for allergen in allergens]


@router.post("/allergens", status_code=status.HTTP_201_CREATED)
def create_allergen(
    payload: OwnedRecordPayload, request: Request
) -> dict[str, object]:
    """Store an allergen."""
    allergen = _container(request).allergen_service.add_allergen(payload.to_payload())
    return allergen_to_json(allergen)


@router.get("/allergens/{allergen_id}")
def get_allergen(allergen_id: str, request: Request) -> dict[str, object]:
    """Return a single allergen."""
    allergen = _container(request).allergen_service.get_allergen(allergen_id)
    return allergen_to_json(allergen)


@router.delete("/allergens/{allergen_id}")
def delete_allergen(allergen_id: str, request: Request) -> MessageResponse:
    """Delete an allergen by identifier."""
    _container(request).allergen_service.delete_allergen(allergen_id)
    return MessageResponse(message="Allergen deleted successfully.")


@router.get("/mealPlanner")
def list_meal_plans(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Return meal planner entries for an email."""
    entries = _container(request).meal_plan_service.list_meal_plans(email)
    return [meal_plan_to_json(entry) for entry in entries]


@router.post("/mealPlanner", status_code=status.HTTP_201_CREATED)
def create_meal_plan(
    payload: OwnedRecordPayload, request: Request
) -> dict[str, object]:
    """Store a meal planner entry."""
    entry = _container(request).meal_plan_service.add_meal_plan(payload.to_payload())
    return meal_plan_to_json(entry)


@router.get("/profile")
def get_profile(request: Request, email: str | None = None) -> dict[str, object]:
    """Return the profile for an email."""
    profile = _container(request).profile_service.get_profile(email)
    return profile_to_json(profile)


@router.post("/profile", status_code=status.HTTP_201_CREATED)
def save_profile(
    payload: OwnedRecordPayload, request: Request
) -> dict[str, object]:
    """Create or fully replace the profile for an email."""
    profile = _container(request).profile_service.save_profile(payload.to_payload())
    return profile_to_json(profile)


@router.get("/hasdetails")
def has_details(request: Request, email: str | None = None) -> ExistsResponse:
    """Report whether a profile exists for an email."""
    exists = _container(request).profile_service.has_profile(email)
    return ExistsResponse(exists=exists)


@router.post("/scanfood")
async def scan_food(
    request: Request, file: UploadFile | None = File(default=None)
) -> UploadResponse:
    """Upload a food photo for scanning."""
    return await _forward_upload(request, file)


@router.post("/uploadImage")
async def upload_image(
    request: Request, file: UploadFile | None = File(default=None)
) -> UploadResponse:
    """Upload a general image."""
    return await _forward_upload(request, file)


@router.post("/foodLog", status_code=status.HTTP_201_CREATED)
def create_food_log(
    payload: FoodLogPayload, request: Request
) -> FoodLogCreatedResponse:
    """Store a food log entry."""
    entry = _container(request).food_log_service.log_food(payload.to_payload())
    return FoodLogCreatedResponse(message="Food log added successfully.", id=entry.id)


@router.get("/foodLog")
def list_food_logs(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Return food logs for an email."""
    entries = _container(request).food_log_service.list_food_logs(email)
    return [food_log_to_json(entry) for entry in entries]


@router.get("/weeklycalo")
def weekly_calories(
    request: Request, email: str | None = None
) -> list[DayCaloriesResponse]:
    """Return Sunday-to-Saturday calorie totals for the current week."""
    week = _container(request).weekly_calories_service.get_week(email)
    return [DayCaloriesResponse.from_domain(day) for day in week]


async def _forward_upload(request: Request, file: UploadFile | None) -> UploadResponse:
    uploaded = None
    if file is not None:
        uploaded = UploadedFile(
            filename=file.filename or "",
            content=await file.read(),
            content_type=file.content_type,
        )
    url = await _container(request).upload_service.upload(uploaded)
    return UploadResponse(url=url)
