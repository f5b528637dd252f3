# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from intake.model.entity_id import EntityId

Gender = Literal["Male", "Female", "Other"]
Hobby = Literal["Cricket", "Squash", "Walking"]

GENDERS: tuple[str, ...] = get_args(Gender)
HOBBY_CATALOG: tuple[str, ...] = get_args(Hobby)


class EntryFields(TypedDict):
    first_name: str
    last_name: str
    age: str  # positive integer, kept as entered
    dob: pendulum.Date
    gender: Gender
    hobbies: list[Hobby]
    address: str
    city: str
    pincode: str


class Entry(EntryFields):
    id: EntityId


class Draft(TypedDict):
    first_name: str
    last_name: str
    age: str
    dob: Optional[pendulum.Date]
    gender: str
    hobbies: list[str]
    address: str
    city: str
    pincode: str


FIELD_NAMES: tuple[str, ...] = tuple(Draft.__annotations__)

# Python key -> key used in the persisted record
PERSISTED_FIELD_NAMES: dict[str, str] = {
    "id": "id",
    "first_name": "firstName",
    "last_name": "lastName",
    "age": "age",
    "dob": "dob",
    "gender": "gender",
    "hobbies": "hobbies",
    "address": "address",
    "city": "city",
    "pincode": "pincode",
}
