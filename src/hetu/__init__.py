"""Finnish personal identity code (henkilötunnus) parsing and validation."""

from __future__ import annotations

from hetu.core.exceptions import (
    ChecksumMismatchError,
    HetuError,
    InvalidDateOfBirthError,
    InvalidFormatError,
    MissingSSNError,
    SSNFormatError,
)
from hetu.core.log import configure_logging
from hetu.models.gender import Gender
from hetu.models.identifier import FinnishSSN
from hetu.parser import is_valid_finnish_ssn, parse, try_parse

__all__ = [
    "ChecksumMismatchError",
    "FinnishSSN",
    "Gender",
    "HetuError",
    "InvalidDateOfBirthError",
    "InvalidFormatError",
    "MissingSSNError",
    "SSNFormatError",
    "configure_logging",
    "is_valid_finnish_ssn",
    "parse",
    "try_parse",
]
