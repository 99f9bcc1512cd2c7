"""Fixed layout and lookup tables for the ddmmyysrrrc identity code."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from hetu.core.types import CenturyPrefix

# ddmmyysrrrc
EXPECTED_LENGTH = 11
DATE_PART_LENGTH = 6  # ddmmyy
SEPARATOR_LENGTH = 1  # s
ROLLING_NUMBER_LENGTH = 3  # rrr
CHECKSUM_LENGTH = 1  # c

SEPARATOR_INDEX = DATE_PART_LENGTH
ROLLING_NUMBER_START = SEPARATOR_INDEX + SEPARATOR_LENGTH
ROLLING_NUMBER_END = ROLLING_NUMBER_START + ROLLING_NUMBER_LENGTH
CHECKSUM_INDEX = ROLLING_NUMBER_END

DIGITS = frozenset("0123456789")
SEPARATORS = frozenset("+-YXWVUABCDEF")

CHECKSUM_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"
CHECKSUM_CHAR_SET = frozenset(CHECKSUM_CHARS)
CHECKSUM_MODULUS = 31

CENTURY_MAP: Mapping[str, CenturyPrefix] = MappingProxyType({
    "+": "18",
    "-": "19",
    "Y": "19",
    "X": "19",
    "W": "19",
    "V": "19",
    "U": "19",
    "A": "20",
    "B": "20",
    "C": "20",
    "D": "20",
    "E": "20",
    "F": "20",
})
