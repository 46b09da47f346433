"""Meal planner operations."""

from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.records import MealPlanEntry
from nutritrack.services.validation import extra_details, require_email


class MealPlanRepository(Protocol):
    """Persistence interface for meal planner entries."""

    def list_by_email(self, email: str) -> list[MealPlanEntry]:
        """Return all meal planner entries for an email."""

    def create(self, email: str, details: dict[str, object]) -> MealPlanEntry:
        """Store a meal planner entry and return it."""


@dataclass
class MealPlanService:
    """Application service for the meal planner."""

    repository: MealPlanRepository

    def list_meal_plans(self, email: str | None) -> list[MealPlanEntry]:
        """Return meal planner entries owned by an email."""
        return self.repository.list_by_email(require_email(email))

    def add_meal_plan(self, payload: dict[str, object]) -> MealPlanEntry:
        """Record a meal planner entry."""
        owner = require_email(payload.get("email"))
        return self.repository.create(owner, extra_details(payload))
