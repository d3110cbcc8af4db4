"""Turn fetched feed items into stored posts."""

import uuid
from datetime import datetime
from typing import Callable, Iterable

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from ..db import Gateway
from ..errors import Conflict, DateParseError, GatorError
from ..ingestion import FeedItem, parse_pub_date
from ..models import Feed

console = Console()


class IngestStats(BaseModel):
    """Outcome counts for one batch of items."""

    total: int = Field(0, description="Items seen")
    new: int = Field(0, description="Posts inserted")
    duplicates: int = Field(0, description="Items already stored under the same URL")
    skipped: int = Field(0, description="Items with an unparseable publish date")
    failed: int = Field(0, description="Items rejected by storage for any other reason")


def ingest_items(
    gateway: Gateway,
    feed: Feed,
    items: Iterable[FeedItem],
    clock: Callable[[], datetime],
) -> IngestStats:
    """Store each item as a post, in feed order.

    A bad item is reported and counted; it never stops the rest of the batch.
    """
    stats = IngestStats()

    for item in items:
        stats.total += 1
        title = escape(item.title or item.link)

        try:
            published_at = parse_pub_date(item.pub_date)
        except DateParseError as e:
            stats.skipped += 1
            console.print(f"[yellow]Skipping '{title}': {escape(str(e))}[/yellow]")
            continue

        now = clock()
        try:
            gateway.create_post(
                id=uuid.uuid4(),
                created_at=now,
                updated_at=now,
                title=item.title,
                url=item.link,
                description=item.description or None,
                published_at=published_at,
                feed_id=feed.id,
            )
        except Conflict as e:
            if e.field == "url":
                stats.duplicates += 1
                console.print(f"[dim]Skipping '{title}', already exists[/dim]")
                continue
            stats.failed += 1
            console.print(f"[red]Could not create post '{title}': {escape(str(e))}[/red]")
            continue
        except GatorError as e:
            stats.failed += 1
            console.print(f"[red]Could not create post '{title}': {escape(str(e))}[/red]")
            continue

        stats.new += 1

    return stats
