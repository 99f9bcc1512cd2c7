"""Tests for the modulo-31 checksum stage."""

from __future__ import annotations

import pytest

from hetu.core.constants import CHECKSUM_CHARS, CHECKSUM_MODULUS
from hetu.validation.checksum import check_digits, compute_checksum_char, passes_checksum


class TestAlphabet:
    def test_has_one_symbol_per_remainder(self):
        assert len(CHECKSUM_CHARS) == CHECKSUM_MODULUS == 31
        assert len(set(CHECKSUM_CHARS)) == 31

    def test_skips_ambiguous_letters(self):
        for letter in "GIOQZ":
            assert letter not in CHECKSUM_CHARS


class TestCheckDigits:
    def test_drops_separator_and_checksum(self):
        assert check_digits("131052-308T") == "131052308"


class TestComputeChecksumChar:
    @pytest.mark.parametrize(
        "digits, expected",
        [
            ("131052308", "T"),  # 131052308 % 31 == 25
            ("010100935", "L"),  # leading zero, 10100935 % 31 == 19
            ("290200123", "9"),
            ("000000000", "0"),
        ],
    )
    def test_known_values(self, digits, expected):
        assert compute_checksum_char(digits) == expected

    def test_unparseable_digits_give_none(self):
        assert compute_checksum_char("13105X308") is None


class TestPassesChecksum:
    @pytest.mark.parametrize("ssn", ["131052-308T", "081176+9177", "290224A975Y", "230345-0051"])
    def test_matching_checksum(self, ssn):
        assert passes_checksum(ssn)

    @pytest.mark.parametrize("ssn", ["170665+989H", "190544-988J", "010905A9639", "010875A970A"])
    def test_mismatching_checksum(self, ssn):
        assert not passes_checksum(ssn)

    def test_separator_does_not_affect_checksum(self):
        for separator in "+-YXWVUABCDEF":
            assert passes_checksum(f"010100{separator}935L")
