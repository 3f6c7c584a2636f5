"""Domain models for weekly summaries."""

from dataclasses import dataclass
from datetime import date

from growth_tracker.domain.entries import MindLog, MuscleLog, Transaction


@dataclass(frozen=True)
class MuscleSummary:
    """Weekly training and nutrition rollup."""

    start_date: date
    end_date: date
    avg_weight: float
    weight_change: float
    total_workouts: int
    total_duration: float
    avg_duration: float
    avg_sleep: float
    avg_water_intake: float
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    avg_fiber: float
    window: list[MuscleLog]


@dataclass(frozen=True)
class DailyCashflow:
    """Income and spend for one calendar day."""

    day: date
    label: str
    income: float
    expense: float


@dataclass(frozen=True)
class CategoryTotal:
    """Total spend for one category."""

    name: str
    value: float


@dataclass(frozen=True)
class MoneySummary:
    """Weekly cash flow rollup."""

    start_date: date
    end_date: date
    income: float
    expense: float
    balance: float
    savings_rate: float
    daily_avg_spend: float
    daily: list[DailyCashflow]
    categories: list[CategoryTotal]
    window: list[Transaction]


@dataclass(frozen=True)
class MindSummary:
    """Weekly mental wellness rollup."""

    start_date: date
    end_date: date
    avg_score: float
    total_meditation: int
    total_pages: int
    avg_screen_time: float
    screen_time_display: str
    detox_count: int
    meditation_impact: float
    top_app: str
    window: list[MindLog]


Summary = MuscleSummary | MindSummary | MoneySummary
