"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from bson import ObjectId

from nutritrack.adapters.mongo_store import parse_object_id
from nutritrack.config import Settings
from nutritrack.containers import AppContainer
from nutritrack.domain.errors import UpstreamServiceError
from nutritrack.domain.records import (
    Allergen,
    FoodLogDraft,
    FoodLogEntry,
    MealPlanEntry,
    Profile,
)
from nutritrack.services.allergens import AllergenRepository, AllergenService
from nutritrack.services.clock import Clock
from nutritrack.services.food_logs import FoodLogRepository, FoodLogService
from nutritrack.services.meal_plans import MealPlanRepository, MealPlanService
from nutritrack.services.profiles import ProfileRepository, ProfileService
from nutritrack.services.uploads import BlobHostClient, UploadService
from nutritrack.services.weekly import WeeklyCaloriesService

TZ = ZoneInfo("America/New_York")
# Wednesday, 2026-10-14 12:00 local.
DEFAULT_NOW = datetime(2026, 10, 14, 12, 0, tzinfo=TZ)


@dataclass
class FixedClock(Clock):
    """Clock that always returns the same instant."""

    current: datetime = DEFAULT_NOW

    def now(self) -> datetime:
        return self.current


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, Profile] = field(default_factory=dict)
    reads: int = 0

    def get_by_email(self, email: str) -> Profile | None:
        self.reads += 1
        return self.profiles.get(email)

    def upsert(self, profile: Profile) -> None:
        self.profiles[profile.email] = profile

    def exists(self, email: str) -> bool:
        self.reads += 1
        return email in self.profiles


@dataclass
class InMemoryAllergenRepository(AllergenRepository):
    """In-memory allergen repository for tests."""

    allergens: dict[str, Allergen] = field(default_factory=dict)
    reads: int = 0

    def list_by_email(self, email: str) -> list[Allergen]:
        self.reads += 1
        return [item for item in self.allergens.values() if item.email == email]

    def create(self, email: str, details: dict[str, object]) -> Allergen:
        allergen = Allergen(id=str(ObjectId()), email=email, details=dict(details))
        self.allergens[allergen.id] = allergen
        return allergen

    def get(self, allergen_id: str) -> Allergen | None:
        parse_object_id(allergen_id)
        return self.allergens.get(allergen_id)

    def delete(self, allergen_id: str) -> bool:
        parse_object_id(allergen_id)
        return self.allergens.pop(allergen_id, None) is not None


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal planner repository for tests."""

    entries: list[MealPlanEntry] = field(default_factory=list)
    reads: int = 0

    def list_by_email(self, email: str) -> list[MealPlanEntry]:
        self.reads += 1
        return [entry for entry in self.entries if entry.email == email]

    def create(self, email: str, details: dict[str, object]) -> MealPlanEntry:
        entry = MealPlanEntry(id=str(ObjectId()), email=email, details=dict(details))
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodLogEntry] = field(default_factory=list)
    reads: int = 0

    def list_by_email(self, email: str) -> list[FoodLogEntry]:
        self.reads += 1
        return [entry for entry in self.entries if entry.email == email]

    def list_between(
        self, email: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        self.reads += 1
        return [
            entry
            for entry in self.entries
            if entry.email == email and start <= entry.timestamp <= end
        ]

    def create(self, draft: FoodLogDraft, timestamp: datetime) -> FoodLogEntry:
        entry = FoodLogEntry(
            id=str(ObjectId()),
            email=draft.email,
            dish_name=draft.dish_name,
            calories=draft.calories,
            ingredients=draft.ingredients,
            serving_size=draft.serving_size,
            healthiness=draft.healthiness,
            timestamp=timestamp,
        )
        self.entries.append(entry)
        return entry

    def add(self, email: str, calories: object, timestamp: datetime) -> FoodLogEntry:
        """Seed a stored entry with an explicit timestamp."""
        entry = FoodLogEntry(
            id=str(ObjectId()),
            email=email,
            dish_name="Oatmeal",
            calories=calories,
            ingredients="oats, milk",
            serving_size="1 bowl",
            healthiness="healthy",
            timestamp=timestamp,
        )
        self.entries.append(entry)
        return entry


@dataclass
class FakeBlobHostClient(BlobHostClient):
    """Fake file host that records uploads."""

    response_text: str = "https://0x0.st/abc123.jpg\n"
    fail: bool = False
    uploads: list[tuple[str, bytes, str | None]] = field(default_factory=list)

    async def upload_file(
        self, filename: str, content: bytes, content_type: str | None
    ) -> str:
        self.uploads.append((filename, content, content_type))
        if self.fail:
            raise UpstreamServiceError("Upload failed.")
        return self.response_text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        blob_host_url="https://0x0.st",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def allergen_repository() -> InMemoryAllergenRepository:
    return InMemoryAllergenRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def blob_client() -> FakeBlobHostClient:
    return FakeBlobHostClient()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    clock: FixedClock,
    profile_repository: InMemoryProfileRepository,
    allergen_repository: InMemoryAllergenRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
    food_log_repository: InMemoryFoodLogRepository,
    blob_client: FakeBlobHostClient,
) -> AppContainer:
    async def open_resources() -> None:
        return None

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        profile_service=ProfileService(profile_repository),
        allergen_service=AllergenService(allergen_repository),
        meal_plan_service=MealPlanService(meal_plan_repository),
        food_log_service=FoodLogService(food_log_repository, clock),
        weekly_calories_service=WeeklyCaloriesService(food_log_repository, clock),
        upload_service=UploadService(
            client=blob_client, base_url=settings.blob_host_url
        ),
        open_resources=open_resources,
        close_resources=close_resources,
    )
