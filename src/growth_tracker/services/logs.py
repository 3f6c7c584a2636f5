"""Create, update and delete operations over logged entries."""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import uuid4

from growth_tracker.domain.entries import (
    Domain,
    Entry,
    EntryInput,
    TransactionInput,
    signed_amount,
    with_id,
)
from growth_tracker.services.store import EntryStore


def _new_id() -> str:
    return str(uuid4())


@dataclass
class LogService:
    """Service that assigns identifiers and writes entries through the store."""

    store: EntryStore
    id_factory: Callable[[], str] = _new_id

    def list_entries(self, domain: Domain) -> list[Entry]:
        """Return entries newest first."""
        return sorted(
            self.store.entries(domain), key=lambda entry: entry.date, reverse=True
        )

    def get(self, domain: Domain, entry_id: str) -> Entry | None:
        return self.store.get(domain, entry_id)

    def create(self, data: EntryInput) -> Entry:
        """Store a new entry under a fresh identifier."""
        entry = with_id(_normalize(data), self.id_factory())
        self.store.add(entry)
        return entry

    def update(self, entry_id: str, data: EntryInput) -> Entry | None:
        """Replace an entry's fields, keeping its identifier.

        Unknown ids are ignored and return None.
        """
        entry = with_id(_normalize(data), entry_id)
        if not self.store.replace(data.domain, entry_id, entry):
            return None
        return entry

    def delete(self, domain: Domain, entry_id: str) -> None:
        """Remove an entry; unknown ids are ignored."""
        self.store.remove(domain, entry_id)


def _normalize(data: EntryInput) -> EntryInput:
    if isinstance(data, TransactionInput):
        return data.model_copy(
            update={"amount": signed_amount(data.type, data.amount)}
        )
    return data
