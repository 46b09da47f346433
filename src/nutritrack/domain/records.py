"""Domain records for the nutrition tracker."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Profile:
    """A user's profile, one per email."""

    email: str
    details: dict[str, object] = field(default_factory=dict)

    def to_document(self) -> dict[str, object]:
        """Return the stored document shape."""
        return {**self.details, "email": self.email}


@dataclass(frozen=True)
class Allergen:
    """An allergen recorded for a user."""

    id: str
    email: str
    details: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class MealPlanEntry:
    """A meal planner entry for a user."""

    id: str
    email: str
    details: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class FoodLogDraft:
    """Validated food log fields before a timestamp is assigned."""

    email: str
    dish_name: str
    calories: float
    ingredients: object
    serving_size: object
    healthiness: object


@dataclass(frozen=True)
class FoodLogEntry:
    """A stored food log entry."""

    id: str
    email: str
    dish_name: str
    calories: object
    ingredients: object
    serving_size: object
    healthiness: object
    timestamp: datetime


@dataclass(frozen=True)
class DayCalories:
    """Calorie total for one day of the week."""

    day: str
    calories: float


@dataclass(frozen=True)
class UploadedFile:
    """An in-memory file received from a client."""

    filename: str
    content: bytes
    content_type: str | None = None
