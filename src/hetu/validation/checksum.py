"""Modulo-31 check character over the date and individual-number digits."""

from __future__ import annotations

from hetu.core.constants import (
    CHECKSUM_CHARS,
    CHECKSUM_INDEX,
    CHECKSUM_MODULUS,
    DATE_PART_LENGTH,
    ROLLING_NUMBER_END,
    ROLLING_NUMBER_START,
)
from hetu.core.types import CheckDigits, SSNString


def check_digits(ssn: SSNString) -> CheckDigits:
    """ddmmyy + rrr with the separator dropped."""
    return ssn[:DATE_PART_LENGTH] + ssn[ROLLING_NUMBER_START:ROLLING_NUMBER_END]


def compute_checksum_char(digits: CheckDigits) -> str | None:
    """Expected check character for ``digits``, or None if they don't parse."""
    try:
        check_number = int(digits)
    except ValueError:
        return None

    index = check_number % CHECKSUM_MODULUS
    if index > len(CHECKSUM_CHARS) - 1:
        return None
    return CHECKSUM_CHARS[index]


def passes_checksum(ssn: SSNString) -> bool:
    expected = compute_checksum_char(check_digits(ssn))
    return expected is not None and expected == ssn[CHECKSUM_INDEX]
