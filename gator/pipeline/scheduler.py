"""Feed polling scheduler."""

from datetime import datetime
from typing import Callable, Optional

import pendulum
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from ..db import Gateway
from ..errors import FetchError, GatorError
from ..ingestion import RSSFetcher
from ..models import Feed
from .ingest import IngestStats, ingest_items
from .timer import IntervalTimer

console = Console()


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return pendulum.now("UTC")


class TickResult(BaseModel):
    """What happened during one scheduler tick."""

    feed: Optional[Feed] = Field(None, description="Feed selected, None when there were no feeds")
    fetched_at: Optional[datetime] = Field(None, description="Time the feed was stamped")
    success: bool = Field(False, description="Whether the feed was fetched and ingested")
    error: Optional[str] = Field(None, description="Error message if the tick failed")
    stats: IngestStats = Field(default_factory=IngestStats)


class FeedScheduler:
    """Poll one feed per tick, least recently fetched first."""

    def __init__(
        self,
        gateway: Gateway,
        fetcher: RSSFetcher,
        timer: IntervalTimer,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.gateway = gateway
        self.fetcher = fetcher
        self.timer = timer
        self.clock = clock

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run ticks back to back on the timer; forever unless ``max_ticks`` is given.

        Returns the number of ticks run.
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.timer.wait()
            self.tick()
            ticks += 1
        return ticks

    def tick(self) -> TickResult:
        """Select, mark, fetch and ingest a single feed."""
        try:
            feed = self.gateway.get_next_feed_to_fetch()
        except GatorError as e:
            console.print(f"[red]Could not select a feed: {escape(str(e))}[/red]")
            return TickResult(error=str(e))

        if feed is None:
            console.print("[yellow]No feeds to fetch. Add one with 'gator addfeed <name> <url>'.[/yellow]")
            return TickResult()

        # Stamp before fetching so a failing feed cannot hog the front of the queue
        fetched_at = self.clock()
        try:
            self.gateway.mark_feed_fetched(feed.id, fetched_at)
        except GatorError as e:
            console.print(f"[red]Could not mark {escape(feed.name)} as fetched: {escape(str(e))}[/red]")
            return TickResult(feed=feed, error=str(e))

        try:
            document = self.fetcher.fetch(feed.url)
        except FetchError as e:
            console.print(f"[red]❌ {escape(feed.name)}: {escape(str(e))}[/red]")
            return TickResult(feed=feed, fetched_at=fetched_at, error=str(e))
        except Exception as e:
            console.print(f"[red]❌ {escape(feed.name)}: Unexpected error: {escape(str(e))}[/red]")
            return TickResult(feed=feed, fetched_at=fetched_at, error=f"Unexpected error: {e}")

        console.print(f"[bold]{escape(feed.name)}[/bold]: {len(document.items)} items")
        try:
            stats = ingest_items(self.gateway, feed, document.items, self.clock)
        except Exception as e:
            console.print(f"[red]❌ {escape(feed.name)}: Ingestion failed: {escape(str(e))}[/red]")
            return TickResult(feed=feed, fetched_at=fetched_at, error=f"Ingestion failed: {e}")
        console.print(
            f"[green]✅ {escape(feed.name)}: {stats.new} new[/green]"
            f" [dim]({stats.duplicates} existing, {stats.skipped} skipped, {stats.failed} failed)[/dim]"
        )

        return TickResult(feed=feed, fetched_at=fetched_at, success=True, stats=stats)
