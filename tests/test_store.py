"""Tests for the entry store and its persistence."""

import json
from datetime import date

from growth_tracker.adapters.json_file_backend import JsonFileBackend
from growth_tracker.domain.entries import Domain, MindLog
from growth_tracker.domain.seed import no_seed, seed_entries
from growth_tracker.services.store import STORAGE_KEYS, EntryStore
from tests.conftest import InMemoryBackend, mind_log, muscle_log


def test_missing_keys_load_seed_collections() -> None:
    store = EntryStore(backend=InMemoryBackend())

    assert [entry.id for entry in store.entries(Domain.MUSCLE)] == ["1", "2", "3"]
    assert [entry.id for entry in store.entries(Domain.MONEY)] == ["m1", "m2", "m3"]
    assert [entry.id for entry in store.entries(Domain.MIND)] == ["md1", "md2", "md3"]


def test_loading_does_not_write_back() -> None:
    backend = InMemoryBackend()

    EntryStore(backend=backend)

    assert backend.writes == []


def test_corrupt_value_falls_back_to_seed(caplog) -> None:
    backend = InMemoryBackend(values={STORAGE_KEYS[Domain.MIND]: b"{not json"})

    store = EntryStore(backend=backend)

    assert store.entries(Domain.MIND) == seed_entries(Domain.MIND)
    assert "mindTrackerData" in caplog.text


def test_wrong_shape_falls_back_to_empty_seed() -> None:
    payload = json.dumps({"date": "2025-11-17"}).encode()
    backend = InMemoryBackend(values={STORAGE_KEYS[Domain.MUSCLE]: payload})

    store = EntryStore(backend=backend, seed=no_seed)

    assert store.entries(Domain.MUSCLE) == []


def test_loads_camel_case_payload_and_coerces_numbers() -> None:
    payload = json.dumps(
        [
            {
                "id": "x1",
                "date": "2025-11-20",
                "weight": "77.4",
                "workoutType": "Push Day",
                "workoutDuration": "",
                "sleepHours": None,
                "waterIntake": 4,
                "calories": "abc",
                "fiber": 20,
                "protein": 120,
                "carbs": 200,
                "fat": 60,
            }
        ]
    ).encode()
    backend = InMemoryBackend(values={STORAGE_KEYS[Domain.MUSCLE]: payload})

    store = EntryStore(backend=backend, seed=no_seed)

    [entry] = store.entries(Domain.MUSCLE)
    assert entry.weight == 77.4
    assert entry.workout_type == "Push Day"
    assert entry.workout_duration == 0
    assert entry.sleep_hours == 0
    assert entry.calories == 0


def test_each_mutation_persists_whole_collection(store, backend) -> None:
    key = STORAGE_KEYS[Domain.MIND]
    store.add(mind_log("2025-11-17", entry_id="a"))
    store.add(mind_log("2025-11-18", entry_id="b"))
    store.replace(Domain.MIND, "a", mind_log("2025-11-19", entry_id="a"))
    store.remove(Domain.MIND, "b")

    assert backend.writes == [key, key, key, key]
    saved = json.loads(backend.values[key])
    assert saved == [
        {
            "id": "a",
            "date": "2025-11-19",
            "mindScore": 5,
            "meditationMinutes": 0,
            "bookName": "",
            "pagesRead": 0,
            "screenTimeMinutes": 0,
            "topApps": "",
            "digitalDetox": False,
            "podcast": "",
        }
    ]


def test_replace_and_remove_report_missing_ids(store) -> None:
    store.add(muscle_log("2025-11-17", entry_id="a"))

    assert store.replace(Domain.MUSCLE, "zzz", muscle_log("2025-11-18")) is False
    assert store.remove(Domain.MUSCLE, "zzz") is False
    assert [entry.id for entry in store.entries(Domain.MUSCLE)] == ["a"]


def test_reload_from_file_backend(tmp_path) -> None:
    backend = JsonFileBackend(tmp_path / "data")
    store = EntryStore(backend=backend, seed=no_seed)
    store.add(mind_log("2025-11-17", entry_id="a", top_apps="Kindle"))

    reloaded = EntryStore(backend=JsonFileBackend(tmp_path / "data"), seed=no_seed)

    [entry] = reloaded.entries(Domain.MIND)
    assert isinstance(entry, MindLog)
    assert entry.date == date(2025, 11, 17)
    assert entry.top_apps == "Kindle"
    assert (tmp_path / "data" / "mindTrackerData.json").exists()
