"""Century resolution and calendar validation of the birth date."""

from __future__ import annotations

import calendar
from datetime import date

from hetu.core.constants import CENTURY_MAP, SEPARATOR_INDEX
from hetu.core.types import SSNString


def parse_year_of_birth(ssn: SSNString) -> int:
    """Four-digit year: century prefix from the separator plus ``yy``."""
    century = CENTURY_MAP[ssn[SEPARATOR_INDEX]]
    return int(century + ssn[4:6])


def parse_date_of_birth(ssn: SSNString) -> date | None:
    """Decode ``ddmmyy`` into a date, or None if no such day exists.

    Nominal ranges are checked first; the month length then comes from
    the resolved year, so 29 February depends on the separator as well
    as on ``yy``.
    """
    try:
        day = int(ssn[0:2])
        month = int(ssn[2:4])
    except ValueError:
        return None

    if not 1 <= day <= 31 or not 1 <= month <= 12:
        return None

    year = parse_year_of_birth(ssn)

    # monthrange covers leap years
    if day > calendar.monthrange(year, month)[1]:
        return None

    return date(year, month, day)
