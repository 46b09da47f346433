"""MongoDB document store adapter."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError, WriteError

from nutritrack.domain.errors import ClientInputError, ConflictError, StoreError

logger = logging.getLogger(__name__)

PROFILE_COLLECTION = "profile"
ALLERGENS_COLLECTION = "allergens"
MEAL_PLANNER_COLLECTION = "mealPlanner"
FOOD_LOG_COLLECTION = "foodLog"

Document = dict[str, Any]


@contextmanager
def _translate_errors(operation: str, collection_name: str) -> Iterator[None]:
    """Map driver faults onto the application error taxonomy."""
    try:
        yield
    except DuplicateKeyError as exc:
        logger.warning(
            "Duplicate key rejected",
            extra={"operation": operation, "collection": collection_name},
        )
        raise ConflictError("A record with this key already exists.") from exc
    except WriteError as exc:
        logger.warning(
            "Write rejected by store",
            extra={"operation": operation, "collection": collection_name},
        )
        raise ClientInputError(str(exc)) from exc
    except (InvalidDocument, OverflowError) as exc:
        raise ClientInputError(str(exc)) from exc
    except PyMongoError as exc:
        logger.exception(
            "Document store operation failed",
            extra={"operation": operation, "collection": collection_name},
        )
        raise StoreError(str(exc)) from exc


def parse_object_id(raw: str) -> ObjectId:
    """Parse a record identifier, rejecting malformed values."""
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise ClientInputError("Invalid identifier.") from exc


@dataclass
class MongoCollection:
    """Collection-scoped CRUD operations with translated errors."""

    collection: Any

    @property
    def name(self) -> str:
        """Return the collection name."""
        return self.collection.name

    def find_one(self, filter_doc: Document) -> Document | None:
        """Return the first document matching the filter, if any."""
        with _translate_errors("find_one", self.name):
            return self.collection.find_one(filter_doc)

    def find_many(self, filter_doc: Document) -> list[Document]:
        """Return all documents matching the filter in store order."""
        with _translate_errors("find", self.name):
            return list(self.collection.find(filter_doc))

    def insert_one(self, document: Document) -> ObjectId:
        """Insert a document and return its generated identifier."""
        with _translate_errors("insert_one", self.name):
            result = self.collection.insert_one(document)
        return result.inserted_id

    def replace_one(
        self, filter_doc: Document, document: Document, upsert: bool = True
    ) -> None:
        """Replace the matching document, inserting when absent."""
        with _translate_errors("replace_one", self.name):
            self.collection.replace_one(filter_doc, document, upsert=upsert)

    def delete_one(self, filter_doc: Document) -> int:
        """Delete one matching document and return the deleted count."""
        with _translate_errors("delete_one", self.name):
            result = self.collection.delete_one(filter_doc)
        return result.deleted_count

    def aggregate(self, pipeline: list[Document]) -> list[Document]:
        """Run an aggregation pipeline and return its documents."""
        with _translate_errors("aggregate", self.name):
            return list(self.collection.aggregate(pipeline))


@dataclass
class MongoDocumentStore:
    """Owns the shared client for a single logical database."""

    client: Any
    database_name: str

    @classmethod
    def create(
        cls, uri: str, database_name: str, server_selection_timeout_ms: int = 5000
    ) -> "MongoDocumentStore":
        """Create a store backed by a lazily connecting pymongo client."""
        client: MongoClient[Document] = MongoClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        return cls(client=client, database_name=database_name)

    @property
    def database(self) -> Any:
        """Return the database handle."""
        return self.client[self.database_name]

    def collection(self, name: str) -> MongoCollection:
        """Return a collection-scoped accessor."""
        return MongoCollection(self.database[name])

    def open(self) -> None:
        """Verify connectivity and create the profile email unique index."""
        with _translate_errors("open", PROFILE_COLLECTION):
            self.client.admin.command("ping")
            self.database[PROFILE_COLLECTION].create_index(
                [("email", ASCENDING)], unique=True
            )
        logger.info(
            "Connected to document store",
            extra={"database": self.database_name},
        )

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()
