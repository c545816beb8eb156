"""
CLI tool for oillab operations.

Provides commands for checking the runtime configuration and listing the
sort directives every list endpoint accepts.
"""

import asyncio

import typer
from pydantic import SecretStr
from pydantic import ValidationError as SettingsError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from oillab.query import SortDirectiveSet
from oillab.schemas.lubricant import lubricant_sort
from oillab.schemas.report import report_sort
from oillab.settings import Settings
from oillab.startup_validation import (
    REQUIRED_SETTINGS,
    StartupValidationError,
    missing_settings,
    validate_database_connection,
    validate_settings,
)
from oillab.storage.db import create_engine

SORT_SETS: tuple[SortDirectiveSet, ...] = (lubricant_sort, report_sort)

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="oillab-cli",
    help="Oil lab API management CLI - inspect configuration and list queries",
    add_completion=False,
)
console = Console()


async def _check_database(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await validate_database_connection(engine)
    finally:
        await engine.dispose()


@typer_app.command(name="check-config")
def check_config(
    database: bool = typer.Option(
        False,
        "--database",
        "-d",
        help="Also open a connection to the configured database",
    ),
):
    """
    Validate settings loaded from the environment and ``.env``.

    Shows every required setting and whether it is set. Secret values are
    never printed.

    Example:
        python cli.py check-config
        python cli.py check-config --database
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Configuration Check[/bold cyan]",
            border_style="cyan"
        )
    )
    console.print()

    try:
        settings = Settings()
    except SettingsError as ex:
        console.print(f"[red]✗ Invalid settings[/red]\n{ex}")
        raise typer.Exit(code=1)

    missing = set(missing_settings(settings))
    table = Table("Setting", "Value", title="Required Settings", show_lines=True)
    for key in REQUIRED_SETTINGS:
        value = getattr(settings, key)
        if key in missing:
            shown = "[red]missing[/red]"
        elif isinstance(value, SecretStr):
            shown = "[green]set[/green] [dim](secret)[/dim]"
        else:
            shown = f"[green]{value}[/green]"
        table.add_row(key, shown)

    console.print(table)
    console.print()

    try:
        validate_settings(settings)
        if database:
            asyncio.run(_check_database(settings))
    except StartupValidationError as ex:
        console.print(f"[red]✗ Validation Failed[/red]: {ex}")
        console.print()
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            "[green]✓ Configuration is valid[/green]\n\n"
            f"Mode: {settings.APP_MODE} | "
            f"Page size: {settings.DEFAULT_PAGE_SIZE} "
            f"(max {settings.MAX_PAGE_SIZE})",
            border_style="green",
            title="Success"
        )
    )
    console.print()


@typer_app.command(name="sort-directives")
def sort_directives():
    """
    Display the sort directives accepted by each list endpoint.

    Example:
        python cli.py sort-directives
    """
    console.print()
    for sort_set in SORT_SETS:
        table = Table(
            "Directive",
            "Field",
            "Direction",
            title=sort_set.name,
            show_lines=True,
        )
        for member in sort_set.enum:
            field, direction = sort_set.table[member.value]
            table.add_row(
                f"[yellow]{member.value}[/yellow]", field, direction.value
            )
        console.print(table)
        console.print()

    console.print(
        "[dim]Rows are always finally ordered by id ascending.[/dim]"
    )
    console.print()


if __name__ == "__main__":
    typer_app()
