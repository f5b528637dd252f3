# SPDX-License-Identifier: MIT

import re
from typing import Optional, TypeAlias

from intake.model.entry import GENDERS, HOBBY_CATALOG, Draft

LETTERS_ONLY = re.compile(r"[A-Za-z]+")
AGE = re.compile(r"\d+", re.ASCII)
PINCODE = re.compile(r"\d{5,6}", re.ASCII)

ValidationErrors: TypeAlias = dict[str, str]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _validate_name(value: str, label: str) -> Optional[str]:
    if _is_blank(value):
        return f"{label} is required"
    if not LETTERS_ONLY.fullmatch(value):
        return "Only letters are allowed"
    return None


def _validate_age(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Age is required"
    if not AGE.fullmatch(value) or int(value) <= 0:
        return "Enter a valid age"
    return None


def _validate_gender(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Gender is required"
    if value not in GENDERS:
        return "Select a valid gender"
    return None


def _validate_hobbies(hobbies: list[str]) -> Optional[str]:
    if len(hobbies) == 0:
        return "Select at least one hobby"
    if any(hobby not in HOBBY_CATALOG for hobby in hobbies):
        return "Unknown hobby selected"
    return None


def _validate_pincode(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Pincode is required"
    if not PINCODE.fullmatch(value):
        return "Enter a valid pincode"
    return None


def validate(draft: Draft) -> ValidationErrors:
    """
    Check every field of a draft and collect one message per failing field.

    All checks run, so the result reports every invalid field at once. The
    draft is not modified; an empty result means the draft is clean.
    """
    checks: dict[str, Optional[str]] = {
        "first_name": _validate_name(draft["first_name"], "First Name"),
        "last_name": _validate_name(draft["last_name"], "Last Name"),
        "age": _validate_age(draft["age"]),
        "dob": "Date of Birth is required" if draft["dob"] is None else None,
        "gender": _validate_gender(draft["gender"]),
        "hobbies": _validate_hobbies(draft["hobbies"]),
        "address": "Address is required" if _is_blank(draft["address"]) else None,
        "city": "City is required" if _is_blank(draft["city"]) else None,
        "pincode": _validate_pincode(draft["pincode"]),
    }
    return {field: message for field, message in checks.items() if message is not None}


def is_clean(errors: ValidationErrors) -> bool:
    return len(errors) == 0
