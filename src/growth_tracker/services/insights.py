"""State for the on-demand analysis panel."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from growth_tracker.domain.analysis import Analysis
from growth_tracker.domain.entries import Domain, Entry
from growth_tracker.errors import (
    AnalysisFailedError,
    MissingCredentialError,
    NotEnoughEntriesError,
)
from growth_tracker.services.analysis import AnalysisService

MIN_ANALYSIS_ENTRIES = 3
FAILURE_MESSAGE = "Failed to generate analysis. Please try again."

PANEL_TITLES: dict[Domain, str] = {
    Domain.MUSCLE: "Fitness Insights",
    Domain.MONEY: "Financial Advisor",
    Domain.MIND: "Wellness Coach",
}

_logger = logging.getLogger(__name__)


def ensure_enough_entries(
    domain: Domain, entries: Sequence[Entry], minimum: int = MIN_ANALYSIS_ENTRIES
) -> None:
    """Raise NotEnoughEntriesError when there is too little data to analyze."""
    if len(entries) < minimum:
        raise NotEnoughEntriesError(
            f"Please add at least {minimum} {domain.value.lower()} entries "
            "to get a meaningful analysis."
        )


@dataclass
class InsightsPanel:
    """Tracks one pending analysis at a time for the selected domain.

    Switching domains discards any in-flight result: when it finishes it is
    dropped instead of overwriting the new domain's state.
    """

    service: AnalysisService
    domain: Domain
    analysis: Analysis | None = None
    loading: bool = False
    error: str = ""
    _generation: int = field(default=0, repr=False)

    @property
    def title(self) -> str:
        return PANEL_TITLES[self.domain]

    def reset(self, domain: Domain | None = None) -> None:
        """Clear results and detach from any pending request."""
        if domain is not None:
            self.domain = domain
        self.analysis = None
        self.error = ""
        self.loading = False
        self._generation += 1

    async def run(self, entries: Sequence[Entry]) -> Analysis | None:
        """Request an analysis, updating panel state; returns it when applied."""
        if self.loading:
            return None
        try:
            ensure_enough_entries(self.domain, entries)
        except NotEnoughEntriesError as exc:
            self.error = str(exc)
            return None

        generation = self._generation
        self.loading = True
        self.error = ""
        try:
            result = await self.service.analyze(self.domain, entries)
        except MissingCredentialError as exc:
            self._finish(generation, error=str(exc))
            return None
        except AnalysisFailedError:
            self._finish(generation, error=FAILURE_MESSAGE)
            return None

        if generation != self._generation:
            _logger.debug("Discarding analysis for a panel that moved on")
            return None
        self.analysis = result
        self.loading = False
        return result

    def _finish(self, generation: int, *, error: str) -> None:
        if generation != self._generation:
            return
        self.error = error
        self.loading = False
