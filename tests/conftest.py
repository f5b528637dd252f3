from __future__ import annotations

from pathlib import Path
from typing import Callable

import pendulum
import pytest

from intake import configuration
from intake.model.entry import Draft
from intake.repository.configuration import CONFIGURATION_REPO
from intake.repository.entry import EntryRepository
from intake.storage.slot import MemorySlot


def _ann_lee() -> Draft:
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "age": "30",
        "dob": pendulum.date(1994, 5, 1),
        "gender": "Female",
        "hobbies": ["Cricket"],
        "address": "1 Rd",
        "city": "Pune",
        "pincode": "411001",
    }


@pytest.fixture
def make_draft() -> Callable[..., Draft]:
    """Build a clean draft, overriding any fields passed as keywords."""

    def _make(**overrides: object) -> Draft:
        draft = _ann_lee()
        draft.update(overrides)  # type: ignore[typeddict-item]
        return draft

    return _make


@pytest.fixture
def slot() -> MemorySlot:
    return MemorySlot()


@pytest.fixture
def repository(slot: MemorySlot) -> EntryRepository:
    return EntryRepository(slot)


@pytest.fixture
def app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data paths at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return data_path
