"""Profile lifecycle operations."""

from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.errors import NotFoundError
from nutritrack.domain.records import Profile
from nutritrack.services.validation import extra_details, require_email


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile for an email, if present."""

    def upsert(self, profile: Profile) -> None:
        """Replace the profile for its email, inserting when absent."""

    def exists(self, email: str) -> bool:
        """Return True when a profile exists for the email."""


@dataclass
class ProfileService:
    """Application service for user profiles."""

    repository: ProfileRepository

    def get_profile(self, email: str | None) -> Profile:
        """Return the profile for an email."""
        owner = require_email(email)
        profile = self.repository.get_by_email(owner)
        if profile is None:
            raise NotFoundError("Profile not found.")
        return profile

    def save_profile(self, payload: dict[str, object]) -> Profile:
        """Fully replace or create the profile keyed by its email."""
        owner = require_email(payload.get("email"))
        profile = Profile(email=owner, details=extra_details(payload))
        self.repository.upsert(profile)
        return profile

    def has_profile(self, email: str | None) -> bool:
        """Return whether a profile exists without exposing its contents."""
        return self.repository.exists(require_email(email))
