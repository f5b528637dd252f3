# SPDX-License-Identifier: MIT

import datetime

import pendulum


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_str(date: datetime.date) -> str:
    """Format a date in the fixed-width 'YYYY-MM-DD' storage format."""
    return date.isoformat()


def date_from_str(date_str: str) -> pendulum.Date:
    """
    Parse a 'YYYY-MM-DD' string into a pendulum.Date.

    Raises ValueError for anything that is not a calendar date in that format.
    """
    parsed = pendulum.from_format(date_str.strip(), "YYYY-MM-DD")
    return parsed.date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
