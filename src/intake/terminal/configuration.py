# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from intake import configuration
from intake.repository.configuration import CONFIGURATION_REPO
from intake.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.upper()


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "confirm_deletes",
        "✓ Enabled" if config["confirm_deletes"] else "✗ Disabled",
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory that holds the entries file"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    confirm_deletes: Annotated[
        Optional[bool],
        typer.Option("--confirm-deletes/--no-confirm-deletes"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        confirm_deletes=confirm_deletes,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    logging.getLogger(__name__).info("Configuration updated")
    view()
