"""Plain-text rendering of weekly summaries."""

from datetime import date

from growth_tracker.domain.stats import MindSummary, MoneySummary, MuscleSummary
from growth_tracker.services.stats import StatsService

NO_DATA = "No data available for the latest week. Start logging!"


def format_weekly_report(stats_service: StatsService) -> str:
    """Render all three weekly summaries."""
    sections = [
        "Growth Tracker weekly report",
        format_muscle_summary(stats_service.get_muscle_week()),
        format_mind_summary(stats_service.get_mind_week()),
        format_money_summary(stats_service.get_money_week()),
    ]
    return "\n\n".join(sections)


def format_muscle_summary(summary: MuscleSummary | None) -> str:
    """Format the training and nutrition week."""
    if summary is None:
        return f"Muscle\n{NO_DATA}"
    return "\n".join(
        [
            f"Muscle ({_period(summary.start_date, summary.end_date)})",
            f"Weight: {summary.avg_weight:.1f} kg ({summary.weight_change:+.1f} kg)",
            f"Workouts: {summary.total_workouts}, "
            f"{summary.total_duration:.0f} min "
            f"(avg {summary.avg_duration:.0f} min/day)",
            f"Sleep: {summary.avg_sleep:.1f} h, water: "
            f"{summary.avg_water_intake:.1f} L",
            f"Nutrition: {summary.avg_calories:.0f} kcal, "
            f"{summary.avg_protein:.1f}P / {summary.avg_carbs:.1f}C / "
            f"{summary.avg_fat:.1f}F, fiber {summary.avg_fiber:.1f} g",
        ]
    )


def format_mind_summary(summary: MindSummary | None) -> str:
    """Format the mental wellness week."""
    if summary is None:
        return f"Mind\n{NO_DATA}"
    return "\n".join(
        [
            f"Mind ({_period(summary.start_date, summary.end_date)})",
            f"Mind score: {summary.avg_score:.1f}/10",
            f"Meditation: {summary.total_meditation} min "
            f"(impact {summary.meditation_impact:+.1f})",
            f"Pages read: {summary.total_pages}",
            f"Screen time: {summary.screen_time_display}/day, "
            f"top app {summary.top_app}",
            f"Digital detox days: {summary.detox_count}",
        ]
    )


def format_money_summary(summary: MoneySummary | None) -> str:
    """Format the cash flow week."""
    if summary is None:
        return f"Money\n{NO_DATA}"
    lines = [
        f"Money ({_period(summary.start_date, summary.end_date)})",
        f"Income: {_currency(summary.income)}, "
        f"expense: {_currency(summary.expense)}, "
        f"balance: {_currency(summary.balance)}",
        f"Savings rate: {summary.savings_rate:.1f}%, "
        f"daily spend: {_currency(summary.daily_avg_spend)}",
    ]
    if summary.categories:
        lines.append("Top categories:")
        lines.extend(
            f"- {category.name}: {_currency(category.value)}"
            for category in summary.categories
        )
    return "\n".join(lines)


def _period(start: date, end: date) -> str:
    return f"{start.strftime('%b %d')} - {end.strftime('%b %d')}"


def _currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{abs(amount):,.0f}"
