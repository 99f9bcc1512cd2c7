"""Tests for the structural format check."""

from __future__ import annotations

import pytest

from hetu.validation.format_gate import is_correct_format


class TestAccepts:
    @pytest.mark.parametrize("ssn", ["131052-308T", "010100A935L", "081176+9177", "311216A9061"])
    def test_well_formed(self, ssn):
        assert is_correct_format(ssn)

    @pytest.mark.parametrize("separator", list("+-YXWVUABCDEF"))
    def test_every_separator(self, separator):
        assert is_correct_format(f"010100{separator}935L")

    def test_ignores_checksum_value(self):
        # structurally fine, the checksum stage rejects it
        assert is_correct_format("170665+989H")


class TestLength:
    @pytest.mark.parametrize(
        "ssn",
        ["", "010106A933", "010106A93333", "Lorem ipsum dolor sit amet", "1008911-945V", "041275A956☢️"],
    )
    def test_wrong_length(self, ssn):
        assert not is_correct_format(ssn)


class TestCharacterClasses:
    @pytest.mark.parametrize(
        "ssn",
        [
            "           ",
            "123456ä123å",
            "13105a-308T",  # letter in date part
            "131052Z308T",  # unknown separator
            "131052 308T",
            "131052-3O8T",  # letter O in individual number
            "131052-308G",  # G is not a checksum symbol
            "131052-308I",
            "131052-308t",  # lowercase not accepted
            "١٣١٠٥٢-308T",  # non-ASCII digits
        ],
    )
    def test_rejects_wrong_class(self, ssn):
        assert len(ssn) == 11
        assert not is_correct_format(ssn)


class TestNonString:
    @pytest.mark.parametrize("value", [None, 13105230, b"131052-308T", ["131052-308T"]])
    def test_rejects_non_string(self, value):
        assert not is_correct_format(value)
