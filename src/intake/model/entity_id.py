# SPDX-License-Identifier: MIT

from typing import TypeAlias

import pendulum

EntityId: TypeAlias = int


def generate_entity_id(high_water_mark: EntityId = 0) -> EntityId:
    """
    Derive an id from the current time in milliseconds.

    The result is always greater than high_water_mark, so ids issued by a
    single writer never repeat even when two are issued in the same
    millisecond.
    """
    candidate = int(pendulum.now("UTC").timestamp() * 1000)
    return max(candidate, high_water_mark + 1)
