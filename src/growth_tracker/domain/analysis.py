"""Models for structured model responses."""

import datetime as dt
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from growth_tracker.domain.coercion import to_float

Number = Annotated[float, BeforeValidator(to_float)]


class Analysis(BaseModel):
    """Narrative summary and actionable tips for a domain."""

    summary: str
    tips: list[str]


class NutritionEstimate(BaseModel):
    """Total nutrition for a free-text food description."""

    calories: Number = 0.0
    protein: Number = 0.0
    carbs: Number = 0.0
    fat: Number = 0.0
    fiber: Number = 0.0

    @property
    def is_empty(self) -> bool:
        """True when the description could not be matched to any food."""
        return self.calories == 0 and self.protein == 0


class ParsedDayLog(BaseModel):
    """Muscle log fields extracted from a free-text day summary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: dt.date | None = None
    weight: float | None = None
    workout_type: str | None = None
    workout_duration: float | None = None
    sleep_hours: float | None = None
    water_intake: float | None = None
    calories: float | None = None
    fiber: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
