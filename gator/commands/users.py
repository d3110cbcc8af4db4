"""User account commands: register, login, reset, users."""

import uuid
from typing import List

import pendulum
from rich.console import Console
from rich.markup import escape

from .args import require_arg
from .state import State

console = Console()


def register_handler(state: State, args: List[str]) -> None:
    """Create a user and make it the active one."""
    name = require_arg(args, 0, "register <name>")

    now = pendulum.now("UTC")
    user = state.db.create_user(id=uuid.uuid4(), created_at=now, updated_at=now, name=name)
    state.config.set_current_user(user.name)

    console.print(f"[green]✅ User '{escape(user.name)}' created[/green]")
    console.print(f"[dim]id: {user.id}[/dim]")


def login_handler(state: State, args: List[str]) -> None:
    """Make an existing user the active one."""
    name = require_arg(args, 0, "login <name>")

    user = state.db.get_user_by_name(name)
    state.config.set_current_user(user.name)

    console.print(f"Hello {escape(user.name)}, you're now logged in")


def reset_handler(state: State, args: List[str]) -> None:
    """Delete every user, feed, follow and post."""
    state.db.delete_all_users()
    console.print("[green]✅ Database reset[/green]")


def users_handler(state: State, args: List[str]) -> None:
    """List users, marking the active one."""
    users = state.db.list_users()
    if not users:
        console.print("[yellow]No users registered.[/yellow]")
        return

    current = state.config.current_user_name
    for user in users:
        if user.name == current:
            console.print(f"* {escape(user.name)} [bold](current)[/bold]")
        else:
            console.print(f"* {escape(user.name)}")
