"""Feed commands: addfeed, feeds."""

import uuid
from typing import List

import pendulum
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import User
from .args import require_arg
from .state import State

console = Console()


def addfeed_handler(state: State, args: List[str], user: User) -> None:
    """Register a feed and follow it as the active user."""
    name = require_arg(args, 0, "addfeed <name> <url>")
    url = require_arg(args, 1, "addfeed <name> <url>")

    now = pendulum.now("UTC")
    feed = state.db.create_feed(
        id=uuid.uuid4(),
        created_at=now,
        updated_at=now,
        name=name,
        url=url,
        user_id=user.id,
    )
    state.db.create_follow(
        id=uuid.uuid4(),
        created_at=now,
        updated_at=now,
        user_id=user.id,
        feed_id=feed.id,
    )

    console.print(f"[green]✅ Added feed: {escape(feed.name)}[/green]")
    console.print(f"[dim]{escape(feed.url)}[/dim]")


def feeds_handler(state: State, args: List[str]) -> None:
    """List every registered feed."""
    feeds = state.db.list_feeds()
    if not feeds:
        console.print("[yellow]No feeds registered.[/yellow]")
        return

    table = Table(title="Feeds")
    table.add_column("Name", style="cyan")
    table.add_column("Added by", style="magenta")
    table.add_column("Last fetched", style="green")
    table.add_column("URL", style="blue")

    for feed in feeds:
        last_fetched = feed.last_fetched_at.strftime("%Y-%m-%d %H:%M") if feed.last_fetched_at else "never"
        table.add_row(
            escape(feed.name),
            escape(feed.user_name or str(feed.user_id)),
            last_fetched,
            escape(feed.url),
        )

    console.print(table)
