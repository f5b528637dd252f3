# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from intake.model.entry import Entry
from intake.service.validate import ValidationErrors
from intake.time import date_to_display_str
from intake.view.header import header

FIELD_LABELS: dict[str, str] = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "age": "Age",
    "dob": "Date of Birth",
    "gender": "Gender",
    "hobbies": "Hobbies",
    "address": "Address",
    "city": "City",
    "pincode": "Pincode",
}


def format_hobbies(hobbies: list[str]) -> str:
    return ", ".join(hobbies)


def entries_view(entries: list[Entry]) -> None:
    header("entries")

    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id")
    entries_table.add_column("name")
    entries_table.add_column("age")
    entries_table.add_column("dob")
    entries_table.add_column("gender")
    entries_table.add_column("hobbies")
    entries_table.add_column("address")
    entries_table.add_column("city")
    entries_table.add_column("pincode")

    for entry in entries:
        entries_table.add_row(
            str(entry["id"]),
            f"{entry['first_name']} {entry['last_name']}",
            entry["age"],
            date_to_display_str(entry["dob"]),
            entry["gender"],
            format_hobbies(entry["hobbies"]),
            entry["address"],
            entry["city"],
            entry["pincode"],
        )

    console = Console()
    console.print(entries_table)


def single_entry_view(entry: Entry) -> None:
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", str(entry["id"]))
    entry_table.add_row(FIELD_LABELS["first_name"], entry["first_name"])
    entry_table.add_row(FIELD_LABELS["last_name"], entry["last_name"])
    entry_table.add_row(FIELD_LABELS["age"], entry["age"])
    entry_table.add_row(FIELD_LABELS["dob"], date_to_display_str(entry["dob"]))
    entry_table.add_row(FIELD_LABELS["gender"], entry["gender"])
    entry_table.add_row(FIELD_LABELS["hobbies"], format_hobbies(entry["hobbies"]))
    entry_table.add_row(FIELD_LABELS["address"], entry["address"])
    entry_table.add_row(FIELD_LABELS["city"], entry["city"])
    entry_table.add_row(FIELD_LABELS["pincode"], entry["pincode"])

    console = Console()
    console.print(entry_table)


def validation_errors_view(errors: ValidationErrors) -> None:
    errors_table = Table(box=box.SIMPLE, title="[red]The entry was not saved[/red]")
    errors_table.add_column("field")
    errors_table.add_column("problem", style="red")

    for field, message in errors.items():
        errors_table.add_row(FIELD_LABELS.get(field, field), message)

    console = Console()
    console.print(errors_table)


def notification_view(message: str) -> None:
    console = Console()
    console.print(f"[green]{message}[/green]")
