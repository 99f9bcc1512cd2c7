"""Sex from the parity of the individual number."""

from __future__ import annotations

from hetu.core.constants import ROLLING_NUMBER_END, ROLLING_NUMBER_START
from hetu.core.types import SSNString
from hetu.models.gender import Gender


def parse_gender(ssn: SSNString) -> Gender:
    rolling_number = int(ssn[ROLLING_NUMBER_START:ROLLING_NUMBER_END])
    return Gender.FEMALE if rolling_number % 2 == 0 else Gender.MALE
