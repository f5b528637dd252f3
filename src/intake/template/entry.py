# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import cast

from intake.model.entry import Draft, Entry, EntryFields


def get_draft_template() -> Draft:
    return {
        "first_name": "",
        "last_name": "",
        "age": "",
        "dob": None,
        "gender": "",
        "hobbies": [],
        "address": "",
        "city": "",
        "pincode": "",
    }


def draft_from_entry(entry: Entry) -> Draft:
    """Seed a draft with the values of a saved entry."""
    draft = get_draft_template()
    for key in draft:
        draft[key] = deepcopy(entry[key])  # type: ignore[literal-required]
    return draft


def entry_fields_from_draft(draft: Draft) -> EntryFields:
    # Only meaningful for a clean draft; validate first.
    return cast(EntryFields, deepcopy(draft))
