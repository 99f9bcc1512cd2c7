"""Structural check of the ddmmyysrrrc layout, no semantics."""

from __future__ import annotations

from hetu.core.constants import (
    CHECKSUM_CHAR_SET,
    CHECKSUM_INDEX,
    DATE_PART_LENGTH,
    DIGITS,
    EXPECTED_LENGTH,
    ROLLING_NUMBER_END,
    ROLLING_NUMBER_START,
    SEPARATOR_INDEX,
    SEPARATORS,
)


def _all_digits(chars: str) -> bool:
    return all(c in DIGITS for c in chars)


def is_correct_format(ssn: object) -> bool:
    """Return True if ``ssn`` is an 11-char string with every position in its class.

    Positions 0-5 and 7-9 must be ASCII digits, position 6 a century
    separator and position 10 a checksum symbol.
    """
    if not isinstance(ssn, str) or len(ssn) != EXPECTED_LENGTH:
        return False

    return (
        _all_digits(ssn[:DATE_PART_LENGTH])
        and ssn[SEPARATOR_INDEX] in SEPARATORS
        and _all_digits(ssn[ROLLING_NUMBER_START:ROLLING_NUMBER_END])
        and ssn[CHECKSUM_INDEX] in CHECKSUM_CHAR_SET
    )
