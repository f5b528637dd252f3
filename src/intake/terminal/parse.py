# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from intake.time import date_from_str, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = date_param.strip()

    if date == "today" or date == "t":
        return today_local()

    try:
        return date_from_str(date)
    except ValueError:
        raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")
