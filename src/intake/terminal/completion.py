# SPDX-License-Identifier: MIT

from intake.model.entry import GENDERS, HOBBY_CATALOG


def complete_gender(incomplete: str) -> list[str]:
    """Return the gender choices for shell completion."""
    return [gender for gender in GENDERS if gender.startswith(incomplete)]


def complete_hobby(incomplete: str) -> list[str]:
    """Return the hobby catalog for shell completion."""
    return [hobby for hobby in HOBBY_CATALOG if hobby.startswith(incomplete)]
