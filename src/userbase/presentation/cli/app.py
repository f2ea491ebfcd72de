"""userbase CLI application using Typer.

Command-line utilities for running the API and preparing the database.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console

from userbase.infrastructure.persistence.sqlalchemy import init_database
from userbase_config.settings import get_settings

app = typer.Typer(
    name="userbase",
    help="userbase - user account service CLI",
    no_args_is_help=True,
)
console = Console()


def _display_url(database_url: str) -> str:
    """Strip credentials from a database URL for display."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "userbase.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@app.command("init-db")
def init_db(
    reset: bool = typer.Option(
        False,
        "--reset",
        help="Drop all tables before creating them (DELETES ALL DATA)",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Create the database schema (idempotent)."""
    database_url = get_settings().database_url
    console.print(f"Database: [cyan]{_display_url(database_url)}[/cyan]")

    if reset and not force:
        console.print("[bold red]WARNING:[/bold red] This will DELETE ALL DATA!")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(init_database(database_url, reset=reset))
    console.print("[bold green]Database schema is up to date.[/bold green]")


if __name__ == "__main__":
    app()
