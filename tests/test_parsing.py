"""
Tests — Coordinate Cell Parsing
================================
Unit tests for :mod:`src.etrs_csv_converter.parsing`.
"""

from __future__ import annotations

import pytest

from src.etrs_csv_converter.parsing import (
    CoordinatePair,
    is_multi_pair,
    parse_multi_pair,
    parse_number,
    parse_single_pair,
)
from shared.python.exceptions import CoordinateParseError


class TestParseNumber:
    def test_valid_float(self) -> None:
        parsed = parse_number("385000.25")
        assert parsed.ok
        assert parsed.value == 385000.25

    def test_integer_literal(self) -> None:
        assert parse_number("12").value == 12.0

    def test_invalid_falls_back_to_zero(self) -> None:
        parsed = parse_number("12,5")
        assert not parsed.ok
        assert parsed.value == 0.0
        assert parsed.text == "12,5"

    def test_empty_string_is_invalid(self) -> None:
        assert not parse_number("").ok

    @pytest.mark.parametrize("text", ["1_000", " 12", "12\n", "12 ", "\u0661\u0662"])
    def test_loose_float_syntax_rejected(self, text: str) -> None:
        parsed = parse_number(text)
        assert not parsed.ok
        assert parsed.value == 0.0

    @pytest.mark.parametrize(("text", "expected"), [("-1.5e3", -1500.0), ("+7", 7.0), (".5", 0.5)])
    def test_plain_literals_accepted(self, text: str, expected: float) -> None:
        assert parse_number(text).value == expected


class TestSinglePair:
    def test_basic(self) -> None:
        assert parse_single_pair("[123.000000 456.000000]") == CoordinatePair(
            "123.000000", "456.000000"
        )

    def test_extra_tokens_ignored(self) -> None:
        assert parse_single_pair("[1 2 3]") == CoordinatePair("1", "2")

    def test_double_space_yields_empty_token(self) -> None:
        """Values are split on single spaces, so a second space gives an empty y."""
        assert parse_single_pair("[1  2]") == CoordinatePair("1", "")

    @pytest.mark.parametrize("value", ["", "[", "]"])
    def test_too_short_raises(self, value: str) -> None:
        with pytest.raises(CoordinateParseError, match="shorter than two"):
            parse_single_pair(value)

    def test_missing_brackets_raises(self) -> None:
        with pytest.raises(CoordinateParseError, match="wrapped"):
            parse_single_pair("1 2")

    def test_single_value_raises(self) -> None:
        with pytest.raises(CoordinateParseError, match="two space-separated"):
            parse_single_pair("[12]")


class TestMultiPair:
    def test_is_multi_pair(self) -> None:
        assert is_multi_pair("[[1 2] [3 4]]")
        assert not is_multi_pair("[1 2]")

    def test_two_pairs_in_order(self) -> None:
        assert parse_multi_pair("[[1 2] [3 4]]") == [
            CoordinatePair("1", "2"),
            CoordinatePair("3", "4"),
        ]

    def test_single_pair_in_list_form(self) -> None:
        assert parse_multi_pair("[[5.5 6.5]]") == [CoordinatePair("5.5", "6.5")]

    def test_many_pairs(self) -> None:
        cell = "[[1 2] [3 4] [5 6] [7 8]]"
        pairs = parse_multi_pair(cell)
        assert [p.x_text for p in pairs] == ["1", "3", "5", "7"]
        assert [p.y_text for p in pairs] == ["2", "4", "6", "8"]

    def test_unbalanced_brackets_raise(self) -> None:
        with pytest.raises(CoordinateParseError, match="end with"):
            parse_multi_pair("[[1 2] [3 4]")

    def test_fragment_with_one_value_raises(self) -> None:
        with pytest.raises(CoordinateParseError):
            parse_multi_pair("[[1 2] [3]]")

    def test_empty_list_raises(self) -> None:
        with pytest.raises(CoordinateParseError):
            parse_multi_pair("[[]]")
