"""MongoDB repository for meal planner entries."""

from dataclasses import dataclass

from nutritrack.adapters.mongo_store import (
    MEAL_PLANNER_COLLECTION,
    Document,
    MongoCollection,
    MongoDocumentStore,
)
from nutritrack.domain.records import MealPlanEntry
from nutritrack.services.meal_plans import MealPlanRepository


@dataclass
class MongoMealPlanRepository(MealPlanRepository):
    """MongoDB implementation for the meal planner."""

    store: MongoDocumentStore

    @property
    def collection(self) -> MongoCollection:
        return self.store.collection(MEAL_PLANNER_COLLECTION)

    def list_by_email(self, email: str) -> list[MealPlanEntry]:
        """Return meal planner entries for an email."""
        return [_parse_entry(doc) for doc in self.collection.find_many({"email": email})]

    def create(self, email: str, details: dict[str, object]) -> MealPlanEntry:
        """Insert a meal planner entry."""
        inserted_id = self.collection.insert_one({**details, "email": email})
        return MealPlanEntry(id=str(inserted_id), email=email, details=dict(details))


def _parse_entry(document: Document) -> MealPlanEntry:
    details = {
        key: value for key, value in document.items() if key not in {"_id", "email"}
    }
    return MealPlanEntry(
        id=str(document["_id"]),
        email=str(document.get("email", "")),
        details=details,
    )
