"""In-memory entry collections backed by a key-value store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from growth_tracker.domain.entries import (
    Domain,
    Entry,
    MindLog,
    MuscleLog,
    Transaction,
)
from growth_tracker.domain.seed import seed_entries

STORAGE_KEYS: dict[Domain, str] = {
    Domain.MUSCLE: "fitTrackLogs",
    Domain.MIND: "mindTrackerData",
    Domain.MONEY: "moneyTrackerData",
}

_ADAPTERS: dict[Domain, TypeAdapter] = {
    Domain.MUSCLE: TypeAdapter(list[MuscleLog]),
    Domain.MIND: TypeAdapter(list[MindLog]),
    Domain.MONEY: TypeAdapter(list[Transaction]),
}

_logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """Durable storage for serialized collections."""

    def load(self, key: str) -> bytes | None:
        """Return the stored value for a key, or None if absent."""

    def save(self, key: str, data: bytes) -> None:
        """Store a value under a key, replacing any previous one."""


@dataclass
class EntryStore:
    """Owns the three domain collections and persists them on every change.

    Collections are loaded once at construction. A missing or unreadable
    value falls back to the seed collection and is not written back until
    the next mutation.
    """

    backend: KeyValueBackend
    seed: Callable[[Domain], list[Entry]] = seed_entries
    _collections: dict[Domain, list[Entry]] = field(
        init=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        for domain in Domain:
            self._collections[domain] = self._load(domain)

    def entries(self, domain: Domain) -> list[Entry]:
        """Return a copy of a domain collection in insertion order."""
        return list(self._collections[domain])

    def get(self, domain: Domain, entry_id: str) -> Entry | None:
        """Return the entry with the given id, if present."""
        for entry in self._collections[domain]:
            if entry.id == entry_id:
                return entry
        return None

    def add(self, entry: Entry) -> None:
        """Append an entry and persist its collection."""
        self._collections[entry.domain].append(entry)
        self._save(entry.domain)

    def replace(self, domain: Domain, entry_id: str, entry: Entry) -> bool:
        """Replace the entry with a matching id and persist. Returns whether found."""
        found = False
        updated: list[Entry] = []
        for current in self._collections[domain]:
            if current.id == entry_id:
                updated.append(entry)
                found = True
            else:
                updated.append(current)
        self._collections[domain] = updated
        self._save(domain)
        return found

    def remove(self, domain: Domain, entry_id: str) -> bool:
        """Drop entries with a matching id and persist. Returns whether any matched."""
        before = len(self._collections[domain])
        self._collections[domain] = [
            entry for entry in self._collections[domain] if entry.id != entry_id
        ]
        self._save(domain)
        return len(self._collections[domain]) != before

    def _load(self, domain: Domain) -> list[Entry]:
        key = STORAGE_KEYS[domain]
        try:
            raw = self.backend.load(key)
        except OSError:
            _logger.warning("Could not read %s, using seed data", key, exc_info=True)
            return self.seed(domain)
        if raw is None:
            return self.seed(domain)
        try:
            return list(_ADAPTERS[domain].validate_json(raw))
        except ValidationError as exc:
            _logger.warning(
                "Stored %s is not a valid %s collection (%s errors), using seed data",
                key,
                domain.value.lower(),
                exc.error_count(),
            )
            return self.seed(domain)

    def _save(self, domain: Domain) -> None:
        key = STORAGE_KEYS[domain]
        payload = _ADAPTERS[domain].dump_json(
            self._collections[domain], by_alias=True, exclude_none=True
        )
        self.backend.save(key, payload)
        _logger.debug(
            "Saved %s entries under %s", len(self._collections[domain]), key
        )
