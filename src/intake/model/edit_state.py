# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import TypeAlias

from intake.model.entity_id import EntityId


@dataclass(frozen=True, slots=True)
class Idle:
    """No entry is open for editing."""


@dataclass(frozen=True, slots=True)
class Editing:
    entry_id: EntityId


EditState: TypeAlias = Idle | Editing

IDLE = Idle()
