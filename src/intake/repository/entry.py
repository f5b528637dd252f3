# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from intake import configuration, time
from intake.errors import StorageUnavailableError
from intake.model.edit_state import IDLE, EditState, Editing, Idle
from intake.model.entity_id import EntityId, generate_entity_id
from intake.model.entry import PERSISTED_FIELD_NAMES, Entry, EntryFields
from intake.storage.slot import DurableSlot

logger = logging.getLogger(__name__)


class EntryRepository:
    """
    Owns the saved entries, the edit cursor and their persistence.

    Every mutation rewrites the whole collection into the slot before the
    in-memory view is replaced, so the view always matches what a fresh
    load() would return.
    """

    def __init__(
        self,
        slot: Optional[DurableSlot],
        key: str = configuration.ENTRIES_SLOT_KEY,
    ) -> None:
        self._slot = slot
        self._key = key
        self._entries: Optional[list[Entry]] = None
        self._edit_state: EditState = IDLE
        self._high_water_mark: EntityId = 0
        self.last_saved_id: Optional[EntityId] = None

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.load()
        if self._entries is None:
            raise ValueError()
        return deepcopy(self._entries)

    @property
    def edit_state(self) -> EditState:
        return self._edit_state

    @property
    def current_edit_id(self) -> Optional[EntityId]:
        if isinstance(self._edit_state, Editing):
            return self._edit_state.entry_id
        return None

    def __require_slot(self) -> DurableSlot:
        if self._slot is None:
            raise StorageUnavailableError("No durable slot is configured for entries")
        return self._slot

    def load(self) -> list[Entry]:
        raw = self.__require_slot().read(self._key)
        if raw is None:
            self._entries = []
        else:
            try:
                self._entries = self.__deserialize(raw)
            except (YAMLError, ValueError, KeyError, TypeError) as exc:
                logger.warning(
                    "Stored entries in slot '%s' are unreadable, starting empty: %s",
                    self._key,
                    exc,
                )
                self._entries = []

        self._high_water_mark = max(
            [self._high_water_mark] + [entry["id"] for entry in self._entries]
        )
        return deepcopy(self._entries)

    def __save_data(self, entries: list[Entry]) -> None:
        self.__require_slot().write(self._key, self.__serialize(entries))

    def __serialize(self, entries: list[Entry]) -> bytes:
        document = {
            "entries": [
                self.__convert_entry_for_serialization(deepcopy(entry))
                for entry in entries
            ]
        }
        return cast(
            bytes,
            dump(
                document,
                Dumper=Dumper,
                sort_keys=False,
                allow_unicode=True,
                encoding="utf-8",
            ),
        )

    def __deserialize(self, raw: bytes) -> list[Entry]:
        document = load(raw.decode("utf-8"), Loader=Loader)
        if document is None:
            return []
        if not isinstance(document, dict) or not isinstance(
            document.get("entries"), list
        ):
            raise ValueError("expected a mapping with an 'entries' list")

        entries = [
            self.__convert_entry_for_deserialization(raw_entry)
            for raw_entry in document["entries"]
        ]
        ids = [entry["id"] for entry in entries]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate entry ids")
        return entries

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["dob"] = time.date_to_str(serializable_entry["dob"])
        serializable_entry["hobbies"] = list(serializable_entry["hobbies"])
        return {
            persisted_name: serializable_entry[key]
            for key, persisted_name in PERSISTED_FIELD_NAMES.items()
        }

    def __convert_entry_for_deserialization(self, entry: Any) -> Entry:
        if not isinstance(entry, dict):
            raise TypeError(f"expected a mapping per entry, got {type(entry).__name__}")
        deserializable_entry = {
            key: entry[persisted_name]
            for key, persisted_name in PERSISTED_FIELD_NAMES.items()
        }

        entity_id = deserializable_entry["id"]
        if isinstance(entity_id, bool) or not isinstance(entity_id, int):
            raise TypeError(f"entry id must be an integer, got {entity_id!r}")

        # An unquoted date in a hand-edited file loads as datetime.date
        dob = deserializable_entry["dob"]
        if not isinstance(dob, (str, datetime.date)):
            raise TypeError(f"dob must be a date string, got {dob!r}")
        deserializable_entry["dob"] = time.date_from_str(str(dob))

        hobbies = deserializable_entry["hobbies"]
        if not isinstance(hobbies, list):
            raise TypeError(f"hobbies must be a list, got {hobbies!r}")
        if not all(isinstance(hobby, str) for hobby in hobbies):
            raise TypeError(f"hobbies must be strings, got {hobbies!r}")

        for key in (
            "first_name",
            "last_name",
            "age",
            "gender",
            "address",
            "city",
            "pincode",
        ):
            value = deserializable_entry[key]
            if not isinstance(value, str):
                raise TypeError(f"{key} must be a string, got {value!r}")
        return cast(Entry, deserializable_entry)

    def begin_edit(self, entry_id: EntityId) -> None:
        self._edit_state = Editing(entry_id)

    def clear_edit(self) -> None:
        self._edit_state = IDLE

    def get_entry(self, entry_id: EntityId) -> Optional[Entry]:
        for entry in self.entries:
            if entry["id"] == entry_id:
                return entry
        return None

    def upsert(self, candidate: EntryFields) -> list[Entry]:
        """
        Create or update an entry depending on the edit cursor.

        Idle appends a new entry with a fresh id. Editing replaces the entry
        with the cursor's id in place; if that id is gone the collection is
        left as it is. Either way the collection is persisted and the cursor
        returns to Idle.
        """
        entries = self.entries
        edit_state = self._edit_state
        saved_id: Optional[EntityId] = None

        if isinstance(edit_state, Idle):
            saved_id = generate_entity_id(self._high_water_mark)
            entries.append(cast(Entry, {**deepcopy(candidate), "id": saved_id}))
            self._high_water_mark = saved_id
        else:
            entity_id = edit_state.entry_id
            index = next(
                (i for i, entry in enumerate(entries) if entry["id"] == entity_id),
                None,
            )
            if index is None:
                logger.warning(
                    "Edit cursor points at entry %s which is not in the collection; "
                    "nothing was updated",
                    entity_id,
                )
            else:
                saved_id = entity_id
                entries[index] = cast(Entry, {**deepcopy(candidate), "id": entity_id})

        self.__save_data(entries)
        self._entries = entries
        self._edit_state = IDLE
        self.last_saved_id = saved_id
        logger.debug("Saved entry %s (%d entries stored)", saved_id, len(entries))
        return deepcopy(entries)

    def delete(self, entry_id: EntityId) -> list[Entry]:
        entries = [entry for entry in self.entries if entry["id"] != entry_id]
        self.__save_data(entries)
        self._entries = entries
        logger.debug("Deleted entry %s (%d entries stored)", entry_id, len(entries))
        return deepcopy(entries)
