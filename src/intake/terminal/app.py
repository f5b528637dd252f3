# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from intake.initialize import initialize
from intake.terminal import configuration, entry
from intake.terminal.custom_typer import AliasedTyperGroup
from intake.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Intake - register and manage personal information entries",
    no_args_is_help=True,
)
app.command(name="add, a")(entry.add)
app.command(name="list, ls")(entry.list_entries)
app.command(name="show, s", no_args_is_help=True)(entry.show)
app.command(name="edit, e", no_args_is_help=True)(entry.edit)
app.command(name="delete, d", no_args_is_help=True)(entry.delete)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    Intake - register and manage personal information entries

    Global options that apply to all commands.
    """
    initialize()
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
