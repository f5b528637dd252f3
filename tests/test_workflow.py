from __future__ import annotations

from typing import Callable

import pendulum
import pytest

from intake.errors import EntryNotFoundError
from intake.model.edit_state import IDLE, Editing
from intake.model.entry import Draft
from intake.repository.entry import EntryRepository
from intake.service.workflow import (
    ADDED_MESSAGE,
    DELETED_MESSAGE,
    UPDATED_MESSAGE,
    FormWorkflow,
)
from intake.storage.slot import MemorySlot
from intake.template.entry import get_draft_template

MakeDraft = Callable[..., Draft]


def _fill(workflow: FormWorkflow, draft: Draft) -> None:
    for field, value in draft.items():
        workflow.set_field(field, value)


@pytest.fixture
def workflow(repository: EntryRepository) -> FormWorkflow:
    return FormWorkflow(repository)


def test_submitting_ann_lee_appends_one_entry(
    workflow: FormWorkflow, slot: MemorySlot, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())

    assert workflow.submit() is True

    entries = workflow.entries
    assert len(entries) == 1
    assert entries[0]["first_name"] == "Ann"
    assert entries[0]["dob"] == pendulum.date(1994, 5, 1)
    assert isinstance(entries[0]["id"], int)
    assert len(EntryRepository(slot).load()) == 1
    assert workflow.draft == get_draft_template()
    assert workflow.errors == {}
    assert workflow.take_notification() == ADDED_MESSAGE
    assert workflow.take_notification() is None


def test_invalid_submit_keeps_draft_and_saves_nothing(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft(first_name="John1", pincode="1234"))

    assert workflow.submit() is False

    assert set(workflow.errors) == {"first_name", "pincode"}
    assert workflow.draft["first_name"] == "John1"
    assert workflow.entries == []
    assert workflow.take_notification() is None


def test_errors_are_recomputed_on_every_submit(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft(city=""))
    assert workflow.submit() is False
    assert workflow.errors == {"city": "City is required"}

    workflow.set_field("city", "Pune")

    assert workflow.submit() is True
    assert workflow.errors == {}


def test_set_field_rejects_unknown_fields(workflow: FormWorkflow) -> None:
    with pytest.raises(KeyError):
        workflow.set_field("nickname", "Annie")


def test_toggle_hobby(workflow: FormWorkflow) -> None:
    workflow.toggle_hobby("Cricket", checked=True)
    workflow.toggle_hobby("Walking", checked=True)
    workflow.toggle_hobby("Cricket", checked=True)
    assert workflow.draft["hobbies"] == ["Walking", "Cricket"]

    workflow.toggle_hobby("Walking", checked=False)
    assert workflow.draft["hobbies"] == ["Cricket"]


def test_edit_seeds_draft_and_updates_in_place(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    for name in ("Alpha", "Bravo", "Charlie"):
        _fill(workflow, make_draft(first_name=name))
        workflow.submit()
    workflow.take_notification()
    a, b, c = workflow.entries

    workflow.edit(b["id"])
    assert workflow.edit_state == Editing(b["id"])
    assert workflow.draft["first_name"] == "Bravo"
    assert workflow.draft["dob"] == b["dob"]

    workflow.set_field("first_name", "Beta")
    assert workflow.submit() is True

    assert [entry["first_name"] for entry in workflow.entries] == [
        "Alpha",
        "Beta",
        "Charlie",
    ]
    assert [entry["id"] for entry in workflow.entries] == [a["id"], b["id"], c["id"]]
    assert workflow.edit_state == IDLE
    assert workflow.take_notification() == UPDATED_MESSAGE


def test_editing_draft_does_not_touch_saved_entry(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())
    workflow.submit()
    entry = workflow.entries[0]

    workflow.edit(entry["id"])
    workflow.toggle_hobby("Squash", checked=True)

    assert workflow.entries[0]["hobbies"] == ["Cricket"]


def test_new_entry_leaves_edit_mode_without_saving(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())
    workflow.submit()
    entry = workflow.entries[0]

    workflow.edit(entry["id"])
    workflow.set_field("city", "Mumbai")
    workflow.new_entry()

    assert workflow.edit_state == IDLE
    assert workflow.draft == get_draft_template()
    assert workflow.entries == [entry]


def test_edit_of_unknown_entry_raises(workflow: FormWorkflow) -> None:
    with pytest.raises(EntryNotFoundError):
        workflow.edit(42)
    assert workflow.edit_state == IDLE


def test_cancelled_delete_leaves_collection(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())
    workflow.submit()
    before = workflow.entries

    candidate = workflow.request_delete(before[0]["id"])
    assert workflow.pending_delete == candidate

    workflow.cancel_delete()

    assert workflow.pending_delete is None
    assert workflow.entries == before


def test_confirmed_delete_removes_only_the_candidate(
    workflow: FormWorkflow, slot: MemorySlot, make_draft: MakeDraft
) -> None:
    for name in ("Alpha", "Bravo"):
        _fill(workflow, make_draft(first_name=name))
        workflow.submit()
    workflow.take_notification()
    alpha, bravo = workflow.entries

    workflow.request_delete(alpha["id"])
    remaining = workflow.confirm_delete()

    assert remaining == [bravo]
    assert EntryRepository(slot).load() == [bravo]
    assert workflow.pending_delete is None
    assert workflow.take_notification() == DELETED_MESSAGE


def test_confirm_without_request_is_an_error(workflow: FormWorkflow) -> None:
    with pytest.raises(ValueError):
        workflow.confirm_delete()


def test_deleting_entry_under_edit_keeps_draft(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())
    workflow.submit()
    entry = workflow.entries[0]

    workflow.edit(entry["id"])
    workflow.request_delete(entry["id"])
    workflow.confirm_delete()

    assert workflow.draft["first_name"] == "Ann"
    assert workflow.edit_state == Editing(entry["id"])
    assert workflow.entries == []


def test_editing_while_delete_is_pending(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    for name in ("Alpha", "Bravo"):
        _fill(workflow, make_draft(first_name=name))
        workflow.submit()
    alpha, bravo = workflow.entries

    workflow.request_delete(alpha["id"])
    workflow.edit(bravo["id"])

    assert workflow.pending_delete == alpha
    assert workflow.edit_state == Editing(bravo["id"])


def test_submit_after_edited_entry_was_deleted_saves_nothing(
    workflow: FormWorkflow, make_draft: MakeDraft
) -> None:
    _fill(workflow, make_draft())
    workflow.submit()
    workflow.take_notification()
    entry = workflow.entries[0]

    workflow.edit(entry["id"])
    workflow.request_delete(entry["id"])
    workflow.confirm_delete()
    workflow.take_notification()

    assert workflow.submit() is True
    assert workflow.entries == []
    assert workflow.edit_state == IDLE
    assert workflow.take_notification() is None
