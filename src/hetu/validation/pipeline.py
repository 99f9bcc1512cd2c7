"""Stage composition: format, checksum, birth date, gender."""

from __future__ import annotations

from datetime import date

from hetu.core.exceptions import (
    ChecksumMismatchError,
    InvalidDateOfBirthError,
    InvalidFormatError,
)
from hetu.core.types import SSNString
from hetu.models.gender import Gender
from hetu.validation.birth_date import parse_date_of_birth
from hetu.validation.checksum import passes_checksum
from hetu.validation.format_gate import is_correct_format
from hetu.validation.gender import parse_gender


def decode(ssn: SSNString) -> tuple[date, Gender]:
    """Run every stage in order and return ``(date_of_birth, gender)``.

    Raises:
        InvalidFormatError: Wrong length or character class.
        ChecksumMismatchError: Check character does not match.
        InvalidDateOfBirthError: No such calendar day.
    """
    if not is_correct_format(ssn):
        raise InvalidFormatError(ssn)

    if not passes_checksum(ssn):
        raise ChecksumMismatchError(ssn)

    date_of_birth = parse_date_of_birth(ssn)
    if date_of_birth is None:
        raise InvalidDateOfBirthError(ssn)

    return date_of_birth, parse_gender(ssn)


def is_decodable(ssn: SSNString) -> bool:
    """Same stages as ``decode`` without raising."""
    return (
        is_correct_format(ssn)
        and passes_checksum(ssn)
        and parse_date_of_birth(ssn) is not None
    )
