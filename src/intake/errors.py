# SPDX-License-Identifier: MIT


class IntakeError(Exception):
    """Base exception for intake failures."""


class StorageUnavailableError(IntakeError):
    """Raised when the durable slot backend is missing or cannot be used."""


class EntryNotFoundError(IntakeError):
    """Raised when an entry id does not exist in the collection."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"No entry with id {entry_id}")
        self.entry_id = entry_id
