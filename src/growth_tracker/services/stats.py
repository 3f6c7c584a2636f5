"""Weekly aggregation over logged entries.

Every summary is computed over a trailing window of ``WINDOW_DAYS`` calendar
days that ends on the date of the most recent entry, not on today's date.
An empty collection yields ``None`` rather than an error.

Two different denominators are used on purpose. Workout duration and spend
are averaged over a fixed week (``DURATION_AVERAGE_DAYS`` and
``SPEND_AVERAGE_DAYS``) so a partial week counts missing days as zero. Every
other muscle average divides by the number of entries actually in the window.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, TypeVar, assert_never

from growth_tracker.domain.coercion import to_float
from growth_tracker.domain.entries import (
    Domain,
    Entry,
    MindLog,
    MuscleLog,
    Transaction,
    TransactionType,
)
from growth_tracker.domain.stats import (
    CategoryTotal,
    DailyCashflow,
    MindSummary,
    MoneySummary,
    MuscleSummary,
    Summary,
)

WINDOW_DAYS = 7
DURATION_AVERAGE_DAYS = 7
SPEND_AVERAGE_DAYS = 7
UNCATEGORIZED = "Uncategorized"
NO_TOP_APP = "None"

EntryT = TypeVar("EntryT", MuscleLog, MindLog, Transaction)


class EntrySource(Protocol):
    """Read access to stored entries."""

    def entries(self, domain: Domain) -> list[Entry]:
        """Return all entries for a domain."""


@dataclass
class StatsService:
    """Service that computes weekly summaries from the current store state."""

    source: EntrySource

    def get_week(self, domain: Domain) -> Summary | None:
        """Return the latest-week summary for a domain, or None without data."""
        return summarize(domain, self.source.entries(domain))

    def get_muscle_week(self) -> MuscleSummary | None:
        return summarize_muscle(self.source.entries(Domain.MUSCLE))

    def get_mind_week(self) -> MindSummary | None:
        return summarize_mind(self.source.entries(Domain.MIND))

    def get_money_week(self) -> MoneySummary | None:
        return summarize_money(self.source.entries(Domain.MONEY))


def select_window(entries: Sequence[EntryT]) -> list[EntryT]:
    """Return entries within the 7 days ending on the latest entry, oldest first.

    Sorting is stable, so entries sharing a date keep their collection order.
    """
    if not entries:
        return []
    ordered = sorted(entries, key=lambda entry: entry.date)
    cutoff = ordered[-1].date - timedelta(days=WINDOW_DAYS - 1)
    return [entry for entry in ordered if entry.date >= cutoff]


def summarize(domain: Domain, entries: Sequence[Entry]) -> Summary | None:
    """Dispatch to the summary for a domain."""
    if domain is Domain.MUSCLE:
        return summarize_muscle([e for e in entries if isinstance(e, MuscleLog)])
    if domain is Domain.MIND:
        return summarize_mind([e for e in entries if isinstance(e, MindLog)])
    if domain is Domain.MONEY:
        return summarize_money([e for e in entries if isinstance(e, Transaction)])
    assert_never(domain)


def summarize_muscle(logs: Sequence[MuscleLog]) -> MuscleSummary | None:
    """Summarize the latest week of training logs."""
    window = select_window(logs)
    if not window:
        return None

    count = len(window)
    total_duration = _total(window, "workout_duration")
    first_weight = to_float(window[0].weight)
    last_weight = to_float(window[-1].weight)

    return MuscleSummary(
        start_date=window[0].date,
        end_date=window[-1].date,
        avg_weight=_total(window, "weight") / count,
        weight_change=last_weight - first_weight,
        total_workouts=sum(
            1 for log in window if to_float(log.workout_duration) > 0
        ),
        total_duration=total_duration,
        avg_duration=total_duration / DURATION_AVERAGE_DAYS,
        avg_sleep=_total(window, "sleep_hours") / count,
        avg_water_intake=_total(window, "water_intake") / count,
        avg_calories=_total(window, "calories") / count,
        avg_protein=_total(window, "protein") / count,
        avg_carbs=_total(window, "carbs") / count,
        avg_fat=_total(window, "fat") / count,
        avg_fiber=_total(window, "fiber") / count,
        window=window,
    )


def summarize_money(transactions: Sequence[Transaction]) -> MoneySummary | None:
    """Summarize the latest week of transactions."""
    window = select_window(transactions)
    if not window:
        return None

    income = sum(
        (
            to_float(t.amount)
            for t in window
            if t.type is TransactionType.INCOME and to_float(t.amount) > 0
        ),
        start=0.0,
    )
    expense = sum(
        (
            abs(to_float(t.amount))
            for t in window
            if t.type is TransactionType.EXPENSE
        ),
        start=0.0,
    )
    savings_rate = (income - expense) / income * 100 if income > 0 else 0.0

    return MoneySummary(
        start_date=window[0].date,
        end_date=window[-1].date,
        income=income,
        expense=expense,
        balance=income - expense,
        savings_rate=savings_rate,
        daily_avg_spend=expense / SPEND_AVERAGE_DAYS,
        daily=_daily_cashflow(window),
        categories=_expense_categories(window),
        window=window,
    )


def summarize_mind(logs: Sequence[MindLog]) -> MindSummary | None:
    """Summarize the latest week of mind logs."""
    window = select_window(logs)
    if not window:
        return None

    count = len(window)
    avg_screen_time = _total(window, "screen_time_minutes") / count

    return MindSummary(
        start_date=window[0].date,
        end_date=window[-1].date,
        avg_score=_total(window, "mind_score") / count,
        total_meditation=int(_total(window, "meditation_minutes")),
        total_pages=int(_total(window, "pages_read")),
        avg_screen_time=avg_screen_time,
        screen_time_display=format_minutes(avg_screen_time),
        detox_count=sum(1 for log in window if log.digital_detox),
        meditation_impact=_meditation_impact(window),
        top_app=_top_app(window),
        window=window,
    )


def format_minutes(minutes: float) -> str:
    """Render minutes as ``"Hh Mm"``; negative input renders as zero."""
    minutes = max(minutes, 0)
    hours = int(minutes // 60)
    remainder = round(minutes % 60)
    if remainder == 60:
        hours += 1
        remainder = 0
    return f"{hours}h {remainder}m"


def _total(entries: Sequence[Entry], field_name: str) -> float:
    return sum(to_float(getattr(entry, field_name, 0)) for entry in entries)


def _daily_cashflow(window: list[Transaction]) -> list[DailyCashflow]:
    end = window[-1].date
    days = [end - timedelta(days=offset) for offset in range(WINDOW_DAYS - 1, -1, -1)]
    totals = {day: [0.0, 0.0] for day in days}
    for transaction in window:
        bucket = totals.get(transaction.date)
        if bucket is None:
            continue
        amount = to_float(transaction.amount)
        if transaction.type is TransactionType.INCOME:
            bucket[0] += amount
        elif transaction.type is TransactionType.EXPENSE:
            bucket[1] += abs(amount)
    return [
        DailyCashflow(
            day=day,
            label=day.strftime("%a"),
            income=totals[day][0],
            expense=totals[day][1],
        )
        for day in days
    ]


def _expense_categories(window: list[Transaction]) -> list[CategoryTotal]:
    groups: dict[str, float] = {}
    for transaction in window:
        if transaction.type is not TransactionType.EXPENSE:
            continue
        name = transaction.category or UNCATEGORIZED
        groups[name] = groups.get(name, 0.0) + abs(to_float(transaction.amount))
    ranked = sorted(groups.items(), key=lambda item: item[1], reverse=True)
    return [CategoryTotal(name=name, value=value) for name, value in ranked]


def _meditation_impact(window: list[MindLog]) -> float:
    meditated = [log for log in window if to_float(log.meditation_minutes) > 0]
    skipped = [log for log in window if to_float(log.meditation_minutes) == 0]
    if not meditated or not skipped:
        return 0.0
    with_meditation = _total(meditated, "mind_score") / len(meditated)
    without_meditation = _total(skipped, "mind_score") / len(skipped)
    return with_meditation - without_meditation


def _top_app(window: list[MindLog]) -> str:
    tokens = [
        token.strip()
        for log in window
        for token in (log.top_apps or "").split(",")
        if token.strip()
    ]
    if not tokens:
        return NO_TOP_APP
    # most_common keeps first-seen order among equal counts
    return Counter(tokens).most_common(1)[0][0]
