"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from growth_tracker.adapters.json_file_backend import JsonFileBackend
from growth_tracker.adapters.openai_structured_client import OpenAIStructuredClient
from growth_tracker.config import Settings
from growth_tracker.domain.seed import no_seed, seed_entries
from growth_tracker.services.analysis import AnalysisService
from growth_tracker.services.cache import TtlCache
from growth_tracker.services.llm import ModelOptions
from growth_tracker.services.logs import LogService
from growth_tracker.services.nutrition import NutritionService
from growth_tracker.services.smart_fill import SmartFillService
from growth_tracker.services.stats import StatsService
from growth_tracker.services.store import EntryStore, KeyValueBackend


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: EntryStore
    log_service: LogService
    stats_service: StatsService
    analysis_service: AnalysisService
    nutrition_service: NutritionService
    smart_fill_service: SmartFillService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, backend: KeyValueBackend | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_backend = backend or JsonFileBackend(resolved_settings.data_dir)
    store = EntryStore(
        backend=resolved_backend,
        seed=seed_entries if resolved_settings.seed_demo_data else no_seed,
    )
    structured_client = OpenAIStructuredClient.create(
        api_key=resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    options = ModelOptions(
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await structured_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        log_service=LogService(store),
        stats_service=StatsService(store),
        analysis_service=AnalysisService(client=structured_client, options=options),
        nutrition_service=NutritionService(
            client=structured_client, options=options, cache=TtlCache()
        ),
        smart_fill_service=SmartFillService(
            client=structured_client, options=options
        ),
        close_resources=close_resources,
    )
