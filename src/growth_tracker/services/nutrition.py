"""Nutrition estimates for free-text food descriptions."""

import logging
from dataclasses import dataclass

from growth_tracker.domain.analysis import NutritionEstimate
from growth_tracker.domain.entries import MuscleLogInput
from growth_tracker.services.cache import Cache
from growth_tracker.services.llm import (
    ModelOptions,
    StructuredClient,
    request_structured,
)

NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": {"type": "number"},
        "protein": {"type": "number"},
        "carbs": {"type": "number"},
        "fat": {"type": "number"},
        "fiber": {"type": "number"},
    },
    "required": ["calories", "protein", "carbs", "fat", "fiber"],
    "additionalProperties": False,
}

_NUTRITION_FIELDS = ("calories", "protein", "carbs", "fat", "fiber")

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service for nutrition lookups with caching."""

    client: StructuredClient
    options: ModelOptions
    cache: Cache
    cache_ttl_seconds: int = 86400

    async def estimate(self, description: str) -> NutritionEstimate:
        """Return total nutrition for everything described; zeros on no match."""
        cleaned = " ".join(description.split())
        if not cleaned:
            return NutritionEstimate()
        cache_key = f"nutrition:{cleaned.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionEstimate):
            return cached

        estimate = await request_structured(
            self.client,
            self.options,
            schema_name="nutrition_estimate",
            schema=NUTRITION_SCHEMA,
            prompt=_nutrition_prompt(cleaned),
            result_type=NutritionEstimate,
        )
        if estimate.is_empty:
            _logger.info("No nutrition match for %r", cleaned)
        else:
            self.cache.set(cache_key, estimate, ttl_seconds=self.cache_ttl_seconds)
        return estimate


def apply_nutrition(
    data: MuscleLogInput, estimate: NutritionEstimate, *, add_to_existing: bool
) -> MuscleLogInput:
    """Add the estimate to the log's nutrition, or replace it, rounded to 0.1."""
    updates: dict[str, float] = {}
    for name in _NUTRITION_FIELDS:
        base = getattr(data, name) if add_to_existing else 0.0
        updates[name] = round(base + getattr(estimate, name), 1)
    return data.model_copy(update=updates)


def _nutrition_prompt(description: str) -> str:
    return (
        "You are a nutrition expert. Analyze the following food intake text. "
        "Correct obvious typos, recognize brand names, estimate standard "
        "serving sizes when quantities are vague, and return the TOTAL "
        "calories, protein (g), carbs (g), fat (g) and fiber (g) across all "
        "items. Return zeros if nothing recognizable is described.\n\n"
        f'Input: "{description}"'
    )
