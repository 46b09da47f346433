"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutritrack.adapters.blob_host_client import HttpxBlobHostClient
from nutritrack.adapters.mongo_allergen_repository import MongoAllergenRepository
from nutritrack.adapters.mongo_food_log_repository import MongoFoodLogRepository
from nutritrack.adapters.mongo_meal_plan_repository import MongoMealPlanRepository
from nutritrack.adapters.mongo_profile_repository import MongoProfileRepository
from nutritrack.adapters.mongo_store import MongoDocumentStore
from nutritrack.config import Settings
from nutritrack.services.allergens import AllergenService
from nutritrack.services.clock import SystemClock
from nutritrack.services.food_logs import FoodLogService
from nutritrack.services.meal_plans import MealPlanService
from nutritrack.services.profiles import ProfileService
from nutritrack.services.uploads import UploadService
from nutritrack.services.weekly import WeeklyCaloriesService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    allergen_service: AllergenService
    meal_plan_service: MealPlanService
    food_log_service: FoodLogService
    weekly_calories_service: WeeklyCaloriesService
    upload_service: UploadService
    open_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = MongoDocumentStore.create(
        resolved_settings.mongo_uri,
        resolved_settings.mongo_database,
        server_selection_timeout_ms=resolved_settings.mongo_server_selection_timeout_ms,
    )
    clock = SystemClock(resolved_settings.timezone)
    food_log_repository = MongoFoodLogRepository(store)
    blob_host_client = HttpxBlobHostClient.create(
        resolved_settings.blob_host_url,
        timeout=resolved_settings.blob_upload_timeout_seconds,
    )

    async def open_resources() -> None:
        store.open()

    async def close_resources() -> None:
        await blob_host_client.close()
        store.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=ProfileService(MongoProfileRepository(store)),
        allergen_service=AllergenService(MongoAllergenRepository(store)),
        meal_plan_service=MealPlanService(MongoMealPlanRepository(store)),
        food_log_service=FoodLogService(food_log_repository, clock),
        weekly_calories_service=WeeklyCaloriesService(food_log_repository, clock),
        upload_service=UploadService(
            client=blob_host_client, base_url=resolved_settings.blob_host_url
        ),
        open_resources=open_resources,
        close_resources=close_resources,
    )
