"""
ETRS CSV Converter — Exception Hierarchy
=========================================
Every error the converter raises on purpose comes from this module, so
callers (and the CLI) can catch at whichever level they care about.

Hierarchy::

    GeoScriptHubError                          ← catch-all base
    ├── InputValidationError                   ← bad directory, file or header
    │   ├── ColumnNotFoundError                ← CSV column missing
    │   │   └── CoordinateColumnNotFoundError  ← no header matches the marker
    │   ├── HeaderReadError                    ← empty or unreadable header
    │   └── RowReadError                       ← record cannot be read
    ├── CoordinateParseError                   ← malformed coordinate cell
    ├── CRSError                               ← invalid / unknown CRS string
    └── OutputWriteError                       ← cannot create or write output

Usage::

    from shared.python.exceptions import CoordinateParseError

    raise CoordinateParseError("[1 2", "missing closing bracket")
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class GeoScriptHubError(Exception):
    """Base exception for the converter.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(GeoScriptHubError):
    """Raised when an input directory or file cannot be used."""


class ColumnNotFoundError(InputValidationError):
    """Raised when an expected column is absent from a CSV header.

    Args:
        column: Name (or name fragment) of the missing column.
        available: Column names that ARE present.
    """

    def __init__(self, column: str, available: list[str]) -> None:
        available_str = ", ".join(f"'{c}'" for c in available)
        super().__init__(
            f"Column '{column}' not found. Available columns: {available_str}"
        )
        self.column: str = column
        self.available: list[str] = available


class CoordinateColumnNotFoundError(ColumnNotFoundError):
    """Raised when no header entry contains the coordinate marker.

    Args:
        marker: The substring searched for (e.g. ``"koordinaatit"``).
        available: Header entries of the offending file.
        source: File the header was read from, if known.

    Example::

        raise CoordinateColumnNotFoundError("koordinaatit", ["id", "nimi"])
    """

    def __init__(
        self,
        marker: str,
        available: list[str],
        source: str | None = None,
    ) -> None:
        super().__init__(marker, available)
        where = f" in '{source}'" if source else ""
        self.message = (
            f"Could not find any header entry that contains '{marker}'{where}."
        )
        self.args = (self.message,)
        self.marker: str = marker
        self.source: str | None = source


class HeaderReadError(InputValidationError):
    """Raised when the first record of a CSV file cannot be read.

    Args:
        source: File whose header failed.
        reason: Why it failed (empty file, decode error, ...).
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot read header of '{source}': {reason}")
        self.source: str = source
        self.reason: str = reason


class RowReadError(InputValidationError):
    """Raised when a data record cannot be read.

    Args:
        source: File being read.
        line_number: 1-based physical line of the reader when it failed.
        reason: Underlying parser message.
    """

    def __init__(self, source: str, line_number: int, reason: str) -> None:
        super().__init__(f"Cannot read record on line {line_number} of '{source}': {reason}")
        self.source: str = source
        self.line_number: int = line_number
        self.reason: str = reason


# ---------------------------------------------------------------------------
# Coordinate cells
# ---------------------------------------------------------------------------


class CoordinateParseError(GeoScriptHubError):
    """Raised when a coordinate cell does not follow the bracket encoding.

    Args:
        value: The raw cell text.
        reason: Short explanation of what is wrong with it.

    Example::

        raise CoordinateParseError("[", "cell is shorter than two characters")
    """

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Malformed coordinate cell {value!r}: {reason}")
        self.value: str = value
        self.reason: str = reason


# ---------------------------------------------------------------------------
# CRS
# ---------------------------------------------------------------------------


class CRSError(GeoScriptHubError):
    """Raised when a coordinate reference system string cannot be parsed.

    Args:
        crs_string: The raw CRS string that caused the error.
    """

    def __init__(self, crs_string: str) -> None:
        super().__init__(
            f"Invalid or unrecognised CRS: '{crs_string}'. "
            "Use an EPSG code (e.g. 'EPSG:25835') or a valid WKT/PROJ string."
        )
        self.crs_string: str = crs_string


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(GeoScriptHubError):
    """Raised when an output file cannot be created or written.

    Args:
        output_path: String representation of the path that failed.
        reason: Underlying OS or library error message.
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write output to '{output_path}': {reason}"
        )
        self.output_path: str = output_path
        self.reason: str = reason
