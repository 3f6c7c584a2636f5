"""Print the weekly report for the locally stored logs."""

import asyncio

from growth_tracker.app_logging import configure_logging
from growth_tracker.containers import build_container
from growth_tracker.report import format_weekly_report


def main() -> None:
    configure_logging()
    container = build_container()
    try:
        print(format_weekly_report(container.stats_service))
    finally:
        asyncio.run(container.close_resources())


if __name__ == "__main__":
    main()
