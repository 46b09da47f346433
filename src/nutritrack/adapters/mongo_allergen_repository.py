"""MongoDB repository for allergens."""

from dataclasses import dataclass

from nutritrack.adapters.mongo_store import (
    ALLERGENS_COLLECTION,
    Document,
    MongoCollection,
    MongoDocumentStore,
    parse_object_id,
)
from nutritrack.domain.records import Allergen
from nutritrack.services.allergens import AllergenRepository


@dataclass
class MongoAllergenRepository(AllergenRepository):
    """MongoDB implementation for allergen persistence."""

    store: MongoDocumentStore

    @property
    def collection(self) -> MongoCollection:
        return self.store.collection(ALLERGENS_COLLECTION)

    def list_by_email(self, email: str) -> list[Allergen]:
        """Return allergens for an email in store order."""
        return [
            _parse_allergen(doc) for doc in self.collection.find_many({"email": email})
        ]

    def create(self, email: str, details: dict[str, object]) -> Allergen:
        """Insert an allergen document."""
        inserted_id = self.collection.insert_one({**details, "email": email})
        return Allergen(id=str(inserted_id), email=email, details=dict(details))

    def get(self, allergen_id: str) -> Allergen | None:
        """Return an allergen by identifier, if present."""
        document = self.collection.find_one({"_id": parse_object_id(allergen_id)})
        if document is None:
            return None
        return _parse_allergen(document)

    def delete(self, allergen_id: str) -> bool:
        """Delete a single allergen by identifier."""
        deleted = self.collection.delete_one({"_id": parse_object_id(allergen_id)})
        return deleted > 0


def _parse_allergen(document: Document) -> Allergen:
    details = {
        key: value for key, value in document.items() if key not in {"_id", "email"}
    }
    return Allergen(
        id=str(document["_id"]),
        email=str(document.get("email", "")),
        details=details,
    )
