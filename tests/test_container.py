"""Tests for container wiring."""

import asyncio
from datetime import date

from growth_tracker.containers import build_container
from growth_tracker.domain.entries import Domain, MindLogInput
from tests.conftest import InMemoryBackend


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings, backend=InMemoryBackend())

    assert container.stats_service.source is container.store
    assert container.log_service.store is container.store
    assert container.analysis_service.options.model == settings.openai_model
    assert container.nutrition_service.client is container.smart_fill_service.client
    assert container.store.entries(Domain.MUSCLE) == []
    asyncio.run(container.close_resources())


def test_build_container_seeds_demo_data(settings) -> None:
    demo_settings = settings.model_copy(update={"seed_demo_data": True})

    container = build_container(demo_settings, backend=InMemoryBackend())

    assert len(container.store.entries(Domain.MIND)) == 3
    asyncio.run(container.close_resources())


def test_build_container_persists_under_data_dir(settings) -> None:
    container = build_container(settings)

    container.log_service.create(MindLogInput(date=date(2025, 11, 20)))
    asyncio.run(container.close_resources())

    assert (settings.data_dir / "mindTrackerData.json").exists()
