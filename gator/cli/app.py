"""Main CLI application."""

from pathlib import Path
from typing import List, Optional

import psycopg
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

# Load .env file if it exists
load_dotenv()

from ..commands import State, build_registry
from ..config import Config
from ..db import PostgresGateway, close_connection_pool, init_database, validate_connection
from ..errors import DatabaseConnectionError, GatorError, StorageError, UnknownCommand

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="gator",
    help="Gator - RSS feed aggregator",
    add_completion=False,
)

registry = build_registry()

COMMANDS_HELP = (
    "Command to run: login <name>, register <name>, reset, users, agg <interval>, "
    "addfeed <name> <url>, feeds, follow <url>, following, unfollow <url>, browse [limit]"
)


def open_state(config: Config) -> State:
    """Load configuration and connect to storage."""
    db_config = config.get_db_config()

    if not validate_connection(db_config):
        raise DatabaseConnectionError(
            "Database connection failed! Check the postgres settings in "
            f"{config.config_path} and ensure Postgres is running."
        )

    try:
        init_database(db_config)
    except psycopg.Error as e:
        raise StorageError(f"Failed to initialize database schema: {e}") from e

    return State(config=config, db=PostgresGateway(db_config))


@app.command(
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)
def main(
    command: str = typer.Argument(..., help=COMMANDS_HELP),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments for the command"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: $GATOR_CONFIG or ~/.config/gator/config.yaml)",
    ),
) -> None:
    """Run a gator command."""
    try:
        if command not in registry:
            raise UnknownCommand(command)

        state = open_state(Config(config_path))
        registry.dispatch(state, command, list(args or []))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except GatorError as e:
        err_console.print(f"[red]❌ {escape(str(e))}[/red]")
        if isinstance(e, UnknownCommand):
            err_console.print(f"Available commands: {', '.join(registry.names())}")
        raise typer.Exit(1)
    finally:
        close_connection_pool()


if __name__ == "__main__":
    app()
