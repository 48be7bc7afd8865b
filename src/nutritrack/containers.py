"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutritrack.adapters.export_client import HttpxExportClient
from nutritrack.adapters.openai_classification_client import (
    OpenAIClassificationClient,
)
from nutritrack.adapters.supabase_state_repository import SupabaseStateRepository
from nutritrack.config import Settings
from nutritrack.services.classification import ClassificationService
from nutritrack.services.export import ExportService
from nutritrack.services.logs import LogService
from nutritrack.services.profiles import ProfileService
from nutritrack.services.state import StateStore
from nutritrack.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state_store: StateStore
    profile_service: ProfileService
    log_service: LogService
    stats_service: StatsService
    classification_service: ClassificationService
    export_service: ExportService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    state_store = StateStore(SupabaseStateRepository(supabase_client))
    openai_client = OpenAIClassificationClient.create(resolved_settings.openai_api_key)
    classification_service = ClassificationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    export_client = HttpxExportClient.create(
        timeout=resolved_settings.export_timeout_seconds
    )

    async def close_resources() -> None:
        await export_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        state_store=state_store,
        profile_service=ProfileService(state_store),
        log_service=LogService(state_store),
        stats_service=StatsService(state_store),
        classification_service=classification_service,
        export_service=ExportService(client=export_client, store=state_store),
        close_resources=close_resources,
    )
