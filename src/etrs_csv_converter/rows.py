"""
ETRS CSV Converter — Row Conversion
====================================
Locates the coordinate column in a header and expands each data row into
one or more output rows carrying ``latitude`` and ``longitude``.

Classes:
    ConvertedRow    One output row plus any warnings raised building it.
    RowConverter    Converts data rows for a known coordinate column.

Functions:
    find_coordinate_column   Index of the coordinate column, or ``NOT_FOUND``.
    format_number            Fixed-point, six decimals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from shared.python.exceptions import CoordinateParseError
from src.etrs_csv_converter.geodesy import GeodeticTransformer
from src.etrs_csv_converter.parsing import (
    CoordinatePair,
    ParsedNumber,
    is_multi_pair,
    parse_multi_pair,
    parse_number,
    parse_single_pair,
)

logger = logging.getLogger("geoscripthub.etrs_csv_converter.rows")

DEFAULT_MARKER = "koordinaatit"
NOT_FOUND = -1
OUTPUT_COLUMNS = ("latitude", "longitude")


# ---------------------------------------------------------------------------
# Column locator
# ---------------------------------------------------------------------------


def find_coordinate_column(header: Sequence[str], marker: str = DEFAULT_MARKER) -> int:
    """Return the index of the coordinate column in *header*.

    A column matches when its lower-cased name contains *marker*.  When
    several columns match, the one furthest to the right wins.

    Args:
        header: Column names from the first CSV record.
        marker: Substring identifying the coordinate column.

    Returns:
        The matching index, or :data:`NOT_FOUND` (``-1``).

    Example::

        >>> find_coordinate_column(["id", "Koordinaatit", "nimi"])
        1
    """
    needle = marker.lower()
    return max(
        (i for i, name in enumerate(header) if needle in name.lower()),
        default=NOT_FOUND,
    )


def format_number(value: float) -> str:
    """Format *value* fixed-point with six digits after the decimal point."""
    return f"{value:f}"


# ---------------------------------------------------------------------------
# Row converter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConvertedRow:
    """A single output row.

    Attributes:
        fields: Original fields (coordinate cell possibly rewritten) followed
                by latitude and longitude.
        warnings: Human-readable notes about values that fell back to zero.
    """

    fields: list[str]
    warnings: list[str] = field(default_factory=list)


class RowConverter:
    """Expand data rows into output rows with WGS84 latitude/longitude.

    Single-pair cells yield one row with the cell left untouched.
    Multi-pair cells yield one row per pair, each with the cell rewritten
    to hold only that pair as ``"[x y]"``.

    Args:
        column_index: Index of the coordinate column in every row.
        transformer: The :class:`GeodeticTransformer` to apply.
        strict_numbers: When ``True`` an unparseable number raises
            :class:`CoordinateParseError`.  When ``False`` (default) it is
            treated as ``0.0`` and a warning is attached to the row.
    """

    def __init__(
        self,
        column_index: int,
        transformer: GeodeticTransformer,
        *,
        strict_numbers: bool = False,
    ) -> None:
        if column_index < 0:
            raise ValueError(f"column_index must be non-negative, got {column_index}")
        self.column_index = column_index
        self.transformer = transformer
        self.strict_numbers = strict_numbers

    def convert(self, row: Sequence[str]) -> list[ConvertedRow]:
        """Convert one data row.

        The input *row* is never modified.

        Raises:
            CoordinateParseError: If the coordinate cell is malformed, or a
                number is invalid while ``strict_numbers`` is set.
            IndexError: If *row* is too short to hold the coordinate column.
        """
        cell = row[self.column_index]

        if is_multi_pair(cell):
            converted = []
            for pair in parse_multi_pair(cell):
                x, y, warnings = self._parse_pair(cell, pair)
                fields = list(row)
                fields[self.column_index] = f"[{format_number(x)} {format_number(y)}]"
                converted.append(self._finish(fields, x, y, warnings))
            return converted

        x, y, warnings = self._parse_pair(cell, parse_single_pair(cell))
        return [self._finish(list(row), x, y, warnings)]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _parse_pair(
        self, cell: str, pair: CoordinatePair
    ) -> tuple[float, float, list[str]]:
        warnings: list[str] = []
        x = self._number(cell, pair.x_text, "x", warnings)
        y = self._number(cell, pair.y_text, "y", warnings)
        return x.value, y.value, warnings

    def _number(
        self, cell: str, text: str, axis: str, warnings: list[str]
    ) -> ParsedNumber:
        parsed = parse_number(text)
        if not parsed.ok:
            if self.strict_numbers:
                raise CoordinateParseError(cell, f"{axis} value {text!r} is not a number")
            warnings.append(f"{axis} value {text!r} is not a number; using 0.0")
        return parsed

    def _finish(
        self, fields: list[str], x: float, y: float, warnings: list[str]
    ) -> ConvertedRow:
        outcome = self.transformer.to_lonlat(x, y)
        if not outcome.ok:
            warnings = warnings + [
                f"transform of ({format_number(x)}, {format_number(y)}) failed; using 0.0"
            ]
        fields.append(format_number(outcome.lat))
        fields.append(format_number(outcome.lon))
        return ConvertedRow(fields=fields, warnings=warnings)
