"""
Tests — Row Conversion
=======================
Unit tests for :func:`~src.etrs_csv_converter.rows.find_coordinate_column`
and :class:`~src.etrs_csv_converter.rows.RowConverter`.

Most tests use a fake transformer with an easy-to-check formula so the
expected latitude/longitude strings can be written out literally.
"""

from __future__ import annotations

import pytest

from src.etrs_csv_converter.geodesy import GeodeticTransformer, TransformOutcome
from src.etrs_csv_converter.rows import (
    NOT_FOUND,
    RowConverter,
    find_coordinate_column,
    format_number,
)
from shared.python.exceptions import CoordinateParseError


class ScaledTransformer:
    """Stand-in transformer: lon = x / 10, lat = y / 10."""

    def __init__(self) -> None:
        self.calls: list[tuple[float, float]] = []

    def to_lonlat(self, x: float, y: float) -> TransformOutcome:
        self.calls.append((x, y))
        return TransformOutcome(lon=x / 10, lat=y / 10, ok=True)


class FailingTransformer:
    def to_lonlat(self, x: float, y: float) -> TransformOutcome:
        return TransformOutcome(lon=0.0, lat=0.0, ok=False)


# ---------------------------------------------------------------------------
# Column locator
# ---------------------------------------------------------------------------


class TestFindCoordinateColumn:
    def test_single_match(self) -> None:
        assert find_coordinate_column(["id", "sijainti_koordinaatit", "nimi"]) == 1

    def test_case_insensitive(self) -> None:
        assert find_coordinate_column(["KOORDINAATIT", "x"]) == 0

    def test_no_match_returns_sentinel(self) -> None:
        assert find_coordinate_column(["id", "nimi"]) == NOT_FOUND

    def test_empty_header(self) -> None:
        assert find_coordinate_column([]) == NOT_FOUND

    def test_last_match_wins(self) -> None:
        header = ["Koordinaatit alku", "id", "koordinaatit loppu", "nimi"]
        assert find_coordinate_column(header) == 2

    def test_custom_marker(self) -> None:
        assert find_coordinate_column(["id", "Coords"], marker="COORDS") == 1


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0.000000"),
            (1.0, "1.000000"),
            (-0.5, "-0.500000"),
            (60.123456789, "60.123457"),
            (6651411.19, "6651411.190000"),
            (1e-7, "0.000000"),
        ],
    )
    def test_six_decimals(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


# ---------------------------------------------------------------------------
# RowConverter
# ---------------------------------------------------------------------------


class TestRowConverterSinglePair:
    def test_one_row_cell_unchanged(self) -> None:
        transformer = ScaledTransformer()
        converter = RowConverter(1, transformer)  # type: ignore[arg-type]
        rows = converter.convert(["a", "[123.000000 456.000000]", "b"])

        assert len(rows) == 1
        assert rows[0].fields == [
            "a", "[123.000000 456.000000]", "b", "45.600000", "12.300000",
        ]
        assert rows[0].warnings == []
        assert transformer.calls == [(123.0, 456.0)]

    def test_input_row_not_mutated(self) -> None:
        row = ["a", "[1 2]"]
        RowConverter(1, ScaledTransformer()).convert(row)  # type: ignore[arg-type]
        assert row == ["a", "[1 2]"]

    def test_bad_number_becomes_zero_with_warning(self) -> None:
        converter = RowConverter(0, ScaledTransformer())  # type: ignore[arg-type]
        rows = converter.convert(["[abc 20]"])
        assert rows[0].fields == ["[abc 20]", "2.000000", "0.000000"]
        assert len(rows[0].warnings) == 1
        assert "'abc'" in rows[0].warnings[0]

    def test_strict_numbers_raises(self) -> None:
        converter = RowConverter(0, ScaledTransformer(), strict_numbers=True)  # type: ignore[arg-type]
        with pytest.raises(CoordinateParseError, match="not a number"):
            converter.convert(["[abc 20]"])

    def test_short_cell_raises(self) -> None:
        converter = RowConverter(0, ScaledTransformer())  # type: ignore[arg-type]
        with pytest.raises(CoordinateParseError):
            converter.convert(["["])

    def test_transform_failure_warns(self) -> None:
        converter = RowConverter(0, FailingTransformer())  # type: ignore[arg-type]
        rows = converter.convert(["[1 2]"])
        assert rows[0].fields[-2:] == ["0.000000", "0.000000"]
        assert any("transform" in w for w in rows[0].warnings)

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            RowConverter(-1, ScaledTransformer())  # type: ignore[arg-type]


class TestRowConverterMultiPair:
    def test_expands_in_order(self) -> None:
        transformer = ScaledTransformer()
        converter = RowConverter(1, transformer)  # type: ignore[arg-type]
        rows = converter.convert(["id-7", "[[1 2] [3 4]]", "x"])

        assert [r.fields for r in rows] == [
            ["id-7", "[1.000000 2.000000]", "x", "0.200000", "0.100000"],
            ["id-7", "[3.000000 4.000000]", "x", "0.400000", "0.300000"],
        ]
        assert transformer.calls == [(1.0, 2.0), (3.0, 4.0)]

    def test_bad_number_only_warns_its_own_row(self) -> None:
        converter = RowConverter(0, ScaledTransformer())  # type: ignore[arg-type]
        rows = converter.convert(["[[10 20] [x 40]]"])
        assert rows[0].warnings == []
        assert rows[1].fields[0] == "[0.000000 40.000000]"
        assert len(rows[1].warnings) == 1

    def test_malformed_list_raises(self) -> None:
        converter = RowConverter(0, ScaledTransformer())  # type: ignore[arg-type]
        with pytest.raises(CoordinateParseError):
            converter.convert(["[[1 2] [3 4]"])


class TestRowConverterWithPyproj:
    def test_reference_point_on_central_meridian(self) -> None:
        """Easting 500 000 on zone 35N is the 27°E central meridian."""
        converter = RowConverter(0, GeodeticTransformer())
        rows = converter.convert(["[500000 6651411.19]"])
        lat, lon = (float(v) for v in rows[0].fields[-2:])
        assert lat == pytest.approx(60.0, abs=1e-5)
        assert lon == pytest.approx(27.0, abs=1e-6)
