"""Browse command."""

import re
from typing import List

from rich.console import Console
from rich.markup import escape

from ..errors import ValidationError
from ..models import User
from .state import State

console = Console()

DEFAULT_LIMIT = 10
MAX_LIMIT = 2**31 - 1

_LIMIT_RE = re.compile(r"[0-9]+")


def parse_limit(args: List[str]) -> int:
    """Read the optional post limit from the first argument."""
    if not args:
        return DEFAULT_LIMIT
    text = args[0]
    if not _LIMIT_RE.fullmatch(text):
        raise ValidationError(f"Could not parse limit '{text}': expected a positive integer")
    limit = int(text)
    if limit <= 0 or limit > MAX_LIMIT:
        raise ValidationError(f"Limit must be a positive integer up to {MAX_LIMIT}, got {text}")
    return limit


def browse_handler(state: State, args: List[str], user: User) -> None:
    """Show the newest posts from the feeds the user follows."""
    limit = parse_limit(args)

    posts = state.db.list_recent_posts_for_user(user.id, limit)
    if not posts:
        console.print("[yellow]No posts yet. Follow some feeds and run 'gator agg'.[/yellow]")
        return

    for post in posts:
        published = post.published_at.strftime("%a, %d %b %Y %H:%M")
        source = f" · {escape(post.feed_name)}" if post.feed_name else ""
        console.print(f"[dim]{published}{source}[/dim]")
        console.print(f"[bold]{escape(post.title)}[/bold]")
        console.print(f"[blue]{escape(post.url)}[/blue]")
        if post.description:
            console.print(escape(post.description))
        console.print()
