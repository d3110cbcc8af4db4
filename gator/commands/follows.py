"""Subscription commands: follow, following, unfollow."""

import uuid
from typing import List

import pendulum
from rich.console import Console
from rich.markup import escape

from ..models import User
from .args import require_arg
from .state import State

console = Console()


def follow_handler(state: State, args: List[str], user: User) -> None:
    url = require_arg(args, 0, "follow <url>")

    feed = state.db.get_feed_by_url(url)
    now = pendulum.now("UTC")
    follow = state.db.create_follow(
        id=uuid.uuid4(),
        created_at=now,
        updated_at=now,
        user_id=user.id,
        feed_id=feed.id,
    )

    console.print(
        f"[green]{escape(follow.user_name or user.name)} is now following "
        f"{escape(follow.feed_name or feed.name)}[/green]"
    )


def following_handler(state: State, args: List[str], user: User) -> None:
    follows = state.db.list_follows_for_user(user.id)
    if not follows:
        console.print("[yellow]Not following any feeds.[/yellow]")
        return

    for follow in follows:
        console.print(f"- {escape(follow.feed_name or str(follow.feed_id))}")


def unfollow_handler(state: State, args: List[str], user: User) -> None:
    url = require_arg(args, 0, "unfollow <url>")

    feed = state.db.get_feed_by_url(url)
    removed = state.db.delete_follows_for_user(user.id, feed.url)

    if removed:
        console.print(f"[green]Unfollowed {escape(feed.name)}[/green]")
    else:
        console.print(f"[yellow]{escape(user.name)} was not following {escape(feed.name)}[/yellow]")
