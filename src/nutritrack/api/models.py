"""Pydantic models for request and response bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from nutritrack.domain.records import (
    Allergen,
    DayCalories,
    FoodLogEntry,
    MealPlanEntry,
    Profile,
)


class OwnedRecordPayload(BaseModel):
    """Free-form record submitted on behalf of an owner email."""

    model_config = ConfigDict(extra="allow")

    email: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class FoodLogPayload(OwnedRecordPayload):
    """Food log submission."""

    dishName: Any = None  # noqa: N815
    calories: Any = None
    ingredients: Any = None
    servingSize: Any = None  # noqa: N815
    healthiness: Any = None


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class FoodLogCreatedResponse(BaseModel):
    """Confirmation for a stored food log."""

    message: str
    id: str


class ExistsResponse(BaseModel):
    """Profile existence flag."""

    exists: bool


class UploadResponse(BaseModel):
    """Canonical URL of an uploaded file."""

    url: str


class DayCaloriesResponse(BaseModel):
    """Calorie total for one day."""

    day: str
    calories: float

    @classmethod
    def from_domain(cls, entry: DayCalories) -> "DayCaloriesResponse":
        return cls(day=entry.day, calories=entry.calories)


def profile_to_json(profile: Profile) -> dict[str, object]:
    return profile.to_document()


def allergen_to_json(allergen: Allergen) -> dict[str, object]:
    return {**allergen.details, "_id": allergen.id, "email": allergen.email}


def meal_plan_to_json(entry: MealPlanEntry) -> dict[str, object]:
    return {**entry.details, "_id": entry.id, "email": entry.email}


def food_log_to_json(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "_id": entry.id,
        "email": entry.email,
        "dishName": entry.dish_name,
        "calories": entry.calories,
        "ingredients": entry.ingredients,
        "servingSize": entry.serving_size,
        "healthiness": entry.healthiness,
        "timestamp": entry.timestamp.isoformat(),
    }
