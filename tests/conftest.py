"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from nutritrack.config import Settings
from nutritrack.containers import AppContainer
from nutritrack.domain.logs import (
    ExerciseEntry,
    ExerciseType,
    FoodEntry,
    MealSlot,
    WaterEntry,
    WeightEntry,
)
from nutritrack.domain.targets import ServingTargets
from nutritrack.services.classification import (
    ClassificationClient,
    ClassificationService,
)
from nutritrack.services.export import ExportClient, ExportService
from nutritrack.services.logs import LogService
from nutritrack.services.profiles import ProfileService
from nutritrack.services.state import StateRepository, StateStore
from nutritrack.services.stats import StatsService

SYNC_TIME = datetime(2024, 5, 1, 8, 30, tzinfo=UTC)
EXPORT_URL = "https://script.google.com/macros/s/abc123/exec"


@dataclass
class InMemoryStateRepository(StateRepository):
    """In-memory key/value repository for tests."""

    values: dict[str, str] = field(default_factory=dict)
    saved_keys: list[str] = field(default_factory=list)

    def load_value(self, key: str) -> str | None:
        return self.values.get(key)

    def save_value(self, key: str, value: str) -> None:
        self.values[key] = value
        self.saved_keys.append(key)


@dataclass
class FakeClassificationClient(ClassificationClient):
    """Fake structured-output client keyed by schema name."""

    payloads: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "food_estimate": {
                "name": "Chicken rice",
                "calories": 650,
                "servings": {
                    "grains": 4,
                    "proteins": 3,
                    "vegetables": 0.5,
                    "fruits": 0,
                    "dairy": 0,
                    "oils": 2,
                },
                "main_category": "grains",
                "notes": "One bowl of rice with chicken",
            },
            "exercise_estimate": {
                "name": "Running",
                "calories_burned": 300,
                "type": "Cardio",
                "notes": None,
            },
        }
    )
    advice: str = "- Eat more vegetables"
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "schema_name": schema_name,
                "prompt": prompt,
                "image_data_url": image_data_url,
            }
        )
        if self.error:
            raise self.error
        return self.payloads[schema_name]

    async def complete(self, *, model: str, store: bool, prompt: str) -> str:
        self.calls.append({"prompt": prompt})
        if self.error:
            raise self.error
        return self.advice


@dataclass
class FakeExportClient(ExportClient):
    """Fake export client that records posted documents."""

    posted: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    error: Exception | None = None

    async def post_document(self, url: str, document: dict[str, object]) -> None:
        if self.error:
            raise self.error
        self.posted.append((url, document))


def make_food(  # noqa: PLR0913
    day: date,
    calories: float = 500,
    meal: MealSlot = MealSlot.LUNCH,
    name: str = "Rice bowl",
    servings: ServingTargets | None = None,
) -> FoodEntry:
    return FoodEntry(
        id=uuid4(),
        name=name,
        calories=calories,
        servings=servings or ServingTargets(grains=2, proteins=1),
        meal=meal,
        main_category="grains",
        date=day,
    )


def make_exercise(day: date, calories_burned: float = 200) -> ExerciseEntry:
    return ExerciseEntry(
        id=uuid4(),
        name="Cycling",
        calories_burned=calories_burned,
        duration_minutes=30,
        type=ExerciseType.CARDIO,
        date=day,
    )


def make_water(day: date, amount_ml: float = 250) -> WaterEntry:
    return WaterEntry(id=uuid4(), date=day, amount_ml=amount_ml)


def make_weight(
    day: date, weight_kg: float = 70.0, body_fat_pct: float | None = None
) -> WeightEntry:
    return WeightEntry(
        id=uuid4(), date=day, weight_kg=weight_kg, body_fat_pct=body_fat_pct
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def store(state_repository: InMemoryStateRepository) -> StateStore:
    return StateStore(state_repository)


@pytest.fixture
def classification_client() -> FakeClassificationClient:
    return FakeClassificationClient()


@pytest.fixture
def export_client() -> FakeExportClient:
    return FakeExportClient()


@pytest.fixture
def container(
    settings: Settings,
    store: StateStore,
    classification_client: FakeClassificationClient,
    export_client: FakeExportClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        state_store=store,
        profile_service=ProfileService(store),
        log_service=LogService(store),
        stats_service=StatsService(store),
        classification_service=ClassificationService(
            client=classification_client,
            model="gpt-5.2",
            reasoning_effort="high",
            store=False,
        ),
        export_service=ExportService(
            client=export_client, store=store, clock=lambda: SYNC_TIME
        ),
        close_resources=close_resources,
    )
