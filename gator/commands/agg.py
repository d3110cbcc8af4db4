"""Aggregation command: poll feeds forever."""

from typing import List

from rich.console import Console

from ..ingestion import RSSFetcher
from ..pipeline import FeedScheduler, IntervalTimer, parse_duration
from .args import require_arg
from .state import State

console = Console()


def agg_handler(state: State, args: List[str]) -> None:
    """Fetch one feed per interval until the process is stopped."""
    interval_text = require_arg(args, 0, "agg <interval>  (e.g. 30s, 1m, 1h)")
    interval = parse_duration(interval_text)

    fetcher_config = state.config.config.fetcher
    scheduler = FeedScheduler(
        gateway=state.db,
        fetcher=RSSFetcher(user_agent=fetcher_config.user_agent, timeout=fetcher_config.timeout),
        timer=IntervalTimer(interval),
    )

    console.print(f"Collecting feeds every {interval_text}")
    scheduler.run()
