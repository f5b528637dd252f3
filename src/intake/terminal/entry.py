# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import pendulum
import typer

from intake import configuration
from intake.errors import EntryNotFoundError, IntakeError
from intake.repository.configuration import CONFIGURATION_REPO
from intake.repository.entry import EntryRepository
from intake.service.workflow import FormWorkflow
from intake.storage.slot import FileSlot
from intake.terminal.completion import complete_gender, complete_hobby
from intake.terminal.parse import parse_date
from intake.view import entry as entry_view


def get_workflow() -> FormWorkflow:
    repository = EntryRepository(FileSlot(configuration.DATA_PATH))
    return FormWorkflow(repository)


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _submit_and_report(workflow: FormWorkflow) -> None:
    if not workflow.submit():
        entry_view.validation_errors_view(workflow.errors)
        raise typer.Exit(1)

    saved_id = workflow.repository.last_saved_id
    saved_entry = (
        workflow.repository.get_entry(saved_id) if saved_id is not None else None
    )
    if saved_entry is not None:
        entry_view.single_entry_view(saved_entry)

    notification = workflow.take_notification()
    if notification is not None:
        entry_view.notification_view(notification)


def add(
    first_name: Annotated[str, typer.Option("--first-name", "-f")] = "",
    last_name: Annotated[str, typer.Option("--last-name", "-l")] = "",
    age: Annotated[str, typer.Option("--age", "-a")] = "",
    dob: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--dob",
            "-b",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today",
        ),
    ] = None,
    gender: Annotated[
        str,
        typer.Option("--gender", "-g", autocompletion=complete_gender),
    ] = "",
    hobbies: Annotated[
        Optional[list[str]],
        typer.Option(
            "--hobby",
            "-hb",
            help="accepts multiple hobby options",
            autocompletion=complete_hobby,
        ),
    ] = None,
    address: Annotated[str, typer.Option("--address", "-ad")] = "",
    city: Annotated[str, typer.Option("--city", "-c")] = "",
    pincode: Annotated[str, typer.Option("--pincode", "-p")] = "",
) -> None:
    """
    Register a new entry.
    """
    workflow = get_workflow()

    workflow.set_field("first_name", first_name)
    workflow.set_field("last_name", last_name)
    workflow.set_field("age", age)
    workflow.set_field("dob", dob)
    workflow.set_field("gender", gender)
    workflow.set_field("hobbies", hobbies or [])
    workflow.set_field("address", address)
    workflow.set_field("city", city)
    workflow.set_field("pincode", pincode)

    try:
        _submit_and_report(workflow)
    except IntakeError as error:
        _fail(error)


def list_entries() -> None:
    """
    Show every saved entry in the order it was added.
    """
    workflow = get_workflow()
    try:
        entries = workflow.entries
    except IntakeError as error:
        _fail(error)
    entry_view.entries_view(entries)


def show(id: int) -> None:
    """
    Show a single entry.
    """
    workflow = get_workflow()
    try:
        entry = workflow.repository.get_entry(id)
    except IntakeError as error:
        _fail(error)
    if entry is None:
        _fail(EntryNotFoundError(id))
    entry_view.single_entry_view(entry)


def edit(
    id: int,
    first_name: Annotated[Optional[str], typer.Option("--first-name", "-f")] = None,
    last_name: Annotated[Optional[str], typer.Option("--last-name", "-l")] = None,
    age: Annotated[Optional[str], typer.Option("--age", "-a")] = None,
    dob: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--dob",
            "-b",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today",
        ),
    ] = None,
    gender: Annotated[
        Optional[str],
        typer.Option("--gender", "-g", autocompletion=complete_gender),
    ] = None,
    hobbies: Annotated[
        Optional[list[str]],
        typer.Option(
            "--hobby",
            "-hb",
            help="replaces all hobbies; accepts multiple hobby options",
            autocompletion=complete_hobby,
        ),
    ] = None,
    add_hobbies: Annotated[
        Optional[list[str]],
        typer.Option("--add-hobby", "-ah", autocompletion=complete_hobby),
    ] = None,
    remove_hobbies: Annotated[
        Optional[list[str]],
        typer.Option("--remove-hobby", "-rh", autocompletion=complete_hobby),
    ] = None,
    address: Annotated[Optional[str], typer.Option("--address", "-ad")] = None,
    city: Annotated[Optional[str], typer.Option("--city", "-c")] = None,
    pincode: Annotated[Optional[str], typer.Option("--pincode", "-p")] = None,
) -> None:
    """
    Change an existing entry. Options that are not given keep their value.
    """
    workflow = get_workflow()

    try:
        workflow.edit(id)

        changes = {
            "first_name": first_name,
            "last_name": last_name,
            "age": age,
            "dob": dob,
            "gender": gender,
            "hobbies": hobbies,
            "address": address,
            "city": city,
            "pincode": pincode,
        }
        for field, value in changes.items():
            if value is not None:
                workflow.set_field(field, value)
        for hobby in add_hobbies or []:
            workflow.toggle_hobby(hobby, checked=True)
        for hobby in remove_hobbies or []:
            workflow.toggle_hobby(hobby, checked=False)

        _submit_and_report(workflow)
    except IntakeError as error:
        _fail(error)


def delete(
    id: int,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation"),
    ] = False,
) -> None:
    """
    Delete an entry after confirmation.
    """
    config = CONFIGURATION_REPO.get_config()
    workflow = get_workflow()

    try:
        entry = workflow.request_delete(id)

        if config["confirm_deletes"] and not yes:
            confirmed = typer.confirm(
                f"Delete entry {id} ({entry['first_name']} {entry['last_name']})?"
            )
            if not confirmed:
                workflow.cancel_delete()
                typer.echo("Deletion cancelled")
                return

        entries = workflow.confirm_delete()
    except IntakeError as error:
        _fail(error)

    notification = workflow.take_notification()
    if notification is not None:
        entry_view.notification_view(notification)
    entry_view.entries_view(entries)
