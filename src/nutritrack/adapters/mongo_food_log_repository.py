"""MongoDB repository for food logs."""

from dataclasses import dataclass
from datetime import datetime

from nutritrack.adapters.mongo_store import (
    FOOD_LOG_COLLECTION,
    Document,
    MongoCollection,
    MongoDocumentStore,
)
from nutritrack.domain.records import FoodLogDraft, FoodLogEntry
from nutritrack.services.food_logs import FoodLogRepository


@dataclass
class MongoFoodLogRepository(FoodLogRepository):
    """MongoDB implementation for food log persistence."""

    store: MongoDocumentStore

    @property
    def collection(self) -> MongoCollection:
        return self.store.collection(FOOD_LOG_COLLECTION)

    def list_by_email(self, email: str) -> list[FoodLogEntry]:
        """Return food logs for an email in store order."""
        return [
            _parse_food_log(doc) for doc in self.collection.find_many({"email": email})
        ]

    def list_between(
        self, email: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs whose timestamp lies in the inclusive range."""
        documents = self.collection.find_many(
            {"email": email, "timestamp": {"$gte": start, "$lte": end}}
        )
        return [_parse_food_log(doc) for doc in documents]

    def create(self, draft: FoodLogDraft, timestamp: datetime) -> FoodLogEntry:
        """Insert a food log document."""
        inserted_id = self.collection.insert_one(
            {
                "email": draft.email,
                "dishName": draft.dish_name,
                "calories": draft.calories,
                "ingredients": draft.ingredients,
                "servingSize": draft.serving_size,
                "healthiness": draft.healthiness,
                "timestamp": timestamp,
            }
        )
        return FoodLogEntry(
            id=str(inserted_id),
            email=draft.email,
            dish_name=draft.dish_name,
            calories=draft.calories,
            ingredients=draft.ingredients,
            serving_size=draft.serving_size,
            healthiness=draft.healthiness,
            timestamp=timestamp,
        )


def _parse_food_log(document: Document) -> FoodLogEntry:
    """Parse a stored food log into a domain record."""
    return FoodLogEntry(
        id=str(document["_id"]),
        email=str(document.get("email", "")),
        dish_name=str(document.get("dishName", "")),
        calories=document.get("calories"),
        ingredients=document.get("ingredients"),
        serving_size=document.get("servingSize"),
        healthiness=document.get("healthiness"),
        timestamp=document["timestamp"],
    )
