"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import date

import pytest

from growth_tracker.config import Settings
from growth_tracker.domain.entries import (
    MindLog,
    MuscleLog,
    Transaction,
    TransactionType,
)
from growth_tracker.domain.seed import no_seed
from growth_tracker.errors import MissingCredentialError
from growth_tracker.services.llm import ModelOptions, StructuredClient
from growth_tracker.services.logs import LogService
from growth_tracker.services.store import EntryStore, KeyValueBackend


@dataclass
class InMemoryBackend(KeyValueBackend):
    """In-memory key-value backend that records every write."""

    values: dict[str, bytes] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def load(self, key: str) -> bytes | None:
        return self.values.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.values[key] = data
        self.writes.append(key)


@dataclass
class FakeStructuredClient(StructuredClient):
    """Fake structured client returning a fixed payload and recording prompts."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "summary": "Solid week.",
            "tips": ["Sleep earlier", "Add protein", "Walk daily"],
        }
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls.append(
            {"model": model, "schema_name": schema_name, "prompt": prompt}
        )
        return self.payload


@dataclass
class FailingStructuredClient(StructuredClient):
    """Fake structured client that raises the configured error."""

    error: Exception = field(default_factory=lambda: RuntimeError("boom"))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        raise self.error


@dataclass
class MissingKeyClient(FailingStructuredClient):
    error: Exception = field(
        default_factory=lambda: MissingCredentialError("OPENAI_API_KEY is not set.")
    )


def muscle_log(day: str, entry_id: str = "", **fields: object) -> MuscleLog:
    values: dict[str, object] = {"weight": 80.0, "workout_duration": 0}
    values.update(fields)
    return MuscleLog(
        id=entry_id or f"muscle-{day}", date=date.fromisoformat(day), **values
    )


def mind_log(day: str, entry_id: str = "", **fields: object) -> MindLog:
    values: dict[str, object] = {"mind_score": 5}
    values.update(fields)
    return MindLog(
        id=entry_id or f"mind-{day}", date=date.fromisoformat(day), **values
    )


def transaction(
    day: str,
    kind: TransactionType,
    amount: float,
    entry_id: str = "",
    **fields: object,
) -> Transaction:
    return Transaction(
        id=entry_id or f"money-{day}-{amount}",
        date=date.fromisoformat(day),
        type=kind,
        amount=amount,
        **fields,
    )


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("growth_tracker")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        data_dir=tmp_path / "data",
        seed_demo_data=False,
    )


@pytest.fixture
def model_options() -> ModelOptions:
    return ModelOptions(model="gpt-5.2")


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def store(backend: InMemoryBackend) -> EntryStore:
    return EntryStore(backend=backend, seed=no_seed)


@pytest.fixture
def log_service(store: EntryStore) -> LogService:
    counter = iter(range(1, 1000))
    return LogService(store, id_factory=lambda: f"id-{next(counter)}")
