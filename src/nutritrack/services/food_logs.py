"""Food log operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from nutritrack.domain.errors import ClientInputError
from nutritrack.domain.records import FoodLogDraft, FoodLogEntry
from nutritrack.services.clock import Clock
from nutritrack.services.validation import missing_fields, require_email

REQUIRED_FIELDS = ("dishName", "calories", "ingredients", "servingSize", "healthiness")


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def list_by_email(self, email: str) -> list[FoodLogEntry]:
        """Return all food logs for an email."""

    def list_between(
        self, email: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs with start <= timestamp <= end."""

    def create(self, draft: FoodLogDraft, timestamp: datetime) -> FoodLogEntry:
        """Store a food log stamped with the given time."""


@dataclass
class FoodLogService:
    """Application service for food logs."""

    repository: FoodLogRepository
    clock: Clock

    def list_food_logs(self, email: str | None) -> list[FoodLogEntry]:
        """Return food logs owned by an email."""
        return self.repository.list_by_email(require_email(email))

    def log_food(self, payload: dict[str, object]) -> FoodLogEntry:
        """Validate and store a food log with a server-assigned timestamp."""
        owner = require_email(payload.get("email"))
        missing = missing_fields(payload, REQUIRED_FIELDS)
        if missing:
            raise ClientInputError(f"Missing required fields: {', '.join(missing)}.")
        draft = FoodLogDraft(
            email=owner,
            dish_name=str(payload["dishName"]),
            calories=_parse_calories(payload["calories"]),
            ingredients=payload["ingredients"],
            serving_size=payload["servingSize"],
            healthiness=payload["healthiness"],
        )
        return self.repository.create(draft, timestamp=self.clock.now())


def _parse_calories(value: object) -> float:
    if isinstance(value, bool):
        raise ClientInputError("Calories must be a number.")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ClientInputError("Calories must be a number.") from exc
    raise ClientInputError("Calories must be a number.")
