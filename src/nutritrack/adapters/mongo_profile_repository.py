"""MongoDB repository for user profiles."""

from dataclasses import dataclass

from nutritrack.adapters.mongo_store import (
    PROFILE_COLLECTION,
    Document,
    MongoCollection,
    MongoDocumentStore,
)
from nutritrack.domain.records import Profile
from nutritrack.services.profiles import ProfileRepository


@dataclass
class MongoProfileRepository(ProfileRepository):
    """MongoDB implementation for profile persistence."""

    store: MongoDocumentStore

    @property
    def collection(self) -> MongoCollection:
        return self.store.collection(PROFILE_COLLECTION)

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile for an email, if present."""
        document = self.collection.find_one({"email": email})
        if document is None:
            return None
        return _parse_profile(document)

    def upsert(self, profile: Profile) -> None:
        """Replace the whole profile document keyed by email."""
        self.collection.replace_one(
            {"email": profile.email}, profile.to_document(), upsert=True
        )

    def exists(self, email: str) -> bool:
        """Return True when a profile exists for the email."""
        return self.collection.find_one({"email": email}) is not None


def _parse_profile(document: Document) -> Profile:
    details = {
        key: value for key, value in document.items() if key not in {"_id", "email"}
    }
    return Profile(email=str(document["email"]), details=details)
