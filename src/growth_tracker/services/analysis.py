"""Weekly coaching analysis produced by a remote model."""

import json
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import assert_never

from growth_tracker.domain.analysis import Analysis
from growth_tracker.domain.entries import Domain, Entry
from growth_tracker.services.llm import (
    ModelOptions,
    StructuredClient,
    request_structured,
)

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "tips": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["summary", "tips"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Builds domain prompts and validates the returned analysis.

    There is no minimum-size check here; callers decide how much data is
    enough before asking.
    """

    client: StructuredClient
    options: ModelOptions

    async def analyze(self, domain: Domain, entries: Sequence[Entry]) -> Analysis:
        """Return a summary and tips for the given entries."""
        prompt = build_analysis_prompt(domain, entries)
        started = time.perf_counter()
        analysis = await request_structured(
            self.client,
            self.options,
            schema_name=f"{domain.value.lower()}_analysis",
            schema=ANALYSIS_SCHEMA,
            prompt=prompt,
            result_type=Analysis,
        )
        _logger.info(
            "Analysis for %s (%s entries) finished in %.2fs",
            domain.value.lower(),
            len(entries),
            time.perf_counter() - started,
        )
        return analysis


def build_analysis_prompt(domain: Domain, entries: Sequence[Entry]) -> str:
    """Return the coaching prompt for a domain with the entries embedded as JSON."""
    data = json.dumps(
        [
            entry.model_dump(mode="json", by_alias=True, exclude_none=True)
            for entry in entries
        ]
    )
    if domain is Domain.MUSCLE:
        instructions = (
            "Act as an elite fitness coach analyzing a week of training data. "
            "Focus on progressive overload, recovery efficiency and macro "
            "adherence. Give a concise, no-fluff summary of their physical "
            "adaptation, then 3 specific, technical and actionable tips "
            '(for example "Add 10g protein post-workout").'
        )
    elif domain is Domain.MIND:
        instructions = (
            "Act as a high-performance psychologist analyzing mental wellness "
            "data. Check whether high screen time lines up with lower mind "
            "scores and weigh reading and meditation against screen time. "
            "Summarize what you find, then give 3 habit-based tips to reach "
            "flow state and reduce mental fog."
        )
    elif domain is Domain.MONEY:
        instructions = (
            "Act as a financial strategist analyzing transaction data. "
            "Summarize cash flow, point out small recurring leaks and "
            "unnecessary category spending, and judge whether the savings "
            "rate is healthy. Then give 3 direct, actionable tips to grow net "
            'worth (for example "Cut dining by 15% to fund X").'
        )
    else:
        assert_never(domain)
    return f"{instructions}\n\nData: {data}"
