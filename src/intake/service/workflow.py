# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from intake.errors import EntryNotFoundError
from intake.model.edit_state import EditState, Idle
from intake.model.entity_id import EntityId
from intake.model.entry import FIELD_NAMES, Draft, Entry
from intake.repository.entry import EntryRepository
from intake.service.validate import ValidationErrors, is_clean, validate
from intake.template.entry import (
    draft_from_entry,
    entry_fields_from_draft,
    get_draft_template,
)

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Entry added successfully!"
UPDATED_MESSAGE = "Entry updated successfully!"
DELETED_MESSAGE = "Entry deleted successfully!"


class FormWorkflow:
    """
    Glue between a presentation layer and the entry repository.

    Holds the transient draft with its error map, the pending deletion
    request, and the message to show after a successful save or delete.
    None of this state is persisted.
    """

    def __init__(self, repository: EntryRepository) -> None:
        self.repository = repository
        self.draft: Draft = get_draft_template()
        self.errors: ValidationErrors = {}
        self.pending_delete: Optional[Entry] = None
        self._notification: Optional[str] = None

    @property
    def entries(self) -> list[Entry]:
        return self.repository.entries

    @property
    def edit_state(self) -> EditState:
        return self.repository.edit_state

    def set_field(self, field: str, value: Any) -> None:
        if field not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {field}")
        self.draft[field] = deepcopy(value)  # type: ignore[literal-required]

    def toggle_hobby(self, hobby: str, checked: bool) -> None:
        hobbies = [existing for existing in self.draft["hobbies"] if existing != hobby]
        if checked:
            hobbies.append(hobby)
        self.draft["hobbies"] = hobbies

    def submit(self) -> bool:
        """
        Validate the draft and save it when clean.

        Returns False and keeps the draft when any field is invalid; the
        messages are in self.errors.
        """
        self.errors = validate(self.draft)
        if not is_clean(self.errors):
            logger.debug("Submission blocked by %d field errors", len(self.errors))
            return False

        was_editing = not isinstance(self.repository.edit_state, Idle)
        self.repository.upsert(entry_fields_from_draft(self.draft))

        self.draft = get_draft_template()
        self.errors = {}
        if self.repository.last_saved_id is not None:
            self._notification = UPDATED_MESSAGE if was_editing else ADDED_MESSAGE
        return True

    def edit(self, entry_id: EntityId) -> None:
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            logger.warning("Cannot edit entry %s: it is not in the collection", entry_id)
            raise EntryNotFoundError(entry_id)
        self.repository.begin_edit(entry_id)
        self.draft = draft_from_entry(entry)
        self.errors = {}

    def new_entry(self) -> None:
        """Leave edit mode without saving and start from an empty draft."""
        self.repository.clear_edit()
        self.draft = get_draft_template()
        self.errors = {}

    def request_delete(self, entry_id: EntityId) -> Entry:
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        self.pending_delete = entry
        return entry

    def confirm_delete(self) -> list[Entry]:
        if self.pending_delete is None:
            raise ValueError("No deletion is pending")
        entries = self.repository.delete(self.pending_delete["id"])
        self.pending_delete = None
        self._notification = DELETED_MESSAGE
        return entries

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def take_notification(self) -> Optional[str]:
        notification = self._notification
        self._notification = None
        return notification
