"""Allergen list operations."""

from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.errors import NotFoundError
from nutritrack.domain.records import Allergen
from nutritrack.services.validation import extra_details, require_email


class AllergenRepository(Protocol):
    """Persistence interface for allergens."""

    def list_by_email(self, email: str) -> list[Allergen]:
        """Return all allergens recorded for an email."""

    def create(self, email: str, details: dict[str, object]) -> Allergen:
        """Store an allergen and return it with its identifier."""

    def get(self, allergen_id: str) -> Allergen | None:
        """Return an allergen by identifier, if present."""

    def delete(self, allergen_id: str) -> bool:
        """Delete an allergen and return True when one was removed."""


@dataclass
class AllergenService:
    """Application service for allergens."""

    repository: AllergenRepository

    def list_allergens(self, email: str | None) -> list[Allergen]:
        """Return the allergens owned by an email."""
        return self.repository.list_by_email(require_email(email))

    def add_allergen(self, payload: dict[str, object]) -> Allergen:
        """Record a new allergen."""
        owner = require_email(payload.get("email"))
        return self.repository.create(owner, extra_details(payload))

    def get_allergen(self, allergen_id: str) -> Allergen:
        """Return a single allergen by identifier."""
        allergen = self.repository.get(allergen_id)
        if allergen is None:
            raise NotFoundError("Allergen not found.")
        return allergen

    def delete_allergen(self, allergen_id: str) -> None:
        """Remove exactly one allergen by identifier."""
        if not self.repository.delete(allergen_id):
            raise NotFoundError("Allergen not found.")
