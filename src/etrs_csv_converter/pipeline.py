"""
ETRS CSV Converter — File Pipeline
===================================
Converts one semicolon-delimited CSV file into its ``-out.csv`` sibling.

Steps for a single file:

1. Open the input and create the output (overwriting it).
2. Read the header and locate the coordinate column.
3. Write the header extended with ``latitude`` and ``longitude``.
4. Stream every data record through :class:`RowConverter`, writing each
   produced row immediately.

Fatal conditions raise; row write failures are logged and counted.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from shared.python.exceptions import (
    CoordinateColumnNotFoundError,
    HeaderReadError,
    InputValidationError,
    OutputWriteError,
    RowReadError,
)
from src.etrs_csv_converter.geodesy import GeodeticTransformer
from src.etrs_csv_converter.rows import (
    DEFAULT_MARKER,
    NOT_FOUND,
    OUTPUT_COLUMNS,
    RowConverter,
    find_coordinate_column,
)

logger = logging.getLogger("geoscripthub.etrs_csv_converter.pipeline")

DEFAULT_DELIMITER = ";"
INPUT_SUFFIX = ".csv"
OUTPUT_SUFFIX = "-out.csv"


@dataclass(frozen=True)
class FileResult:
    """Outcome of converting one file.

    Attributes:
        input_path: File that was read.
        output_path: File that was (or would have been) written.
        rows_read: Data records read, header excluded.
        rows_written: Output rows successfully written, header excluded.
        warnings: Number of rows that needed a zero fallback.
        write_failures: Row writes, flushes or closes of the output that
                        failed.  Buffered rows lost this way are still
                        counted in ``rows_written``.
        error: Message of the error that stopped this file, else ``None``.
    """

    input_path: Path
    output_path: Path
    rows_read: int = 0
    rows_written: int = 0
    warnings: int = 0
    write_failures: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def summary(self) -> str:
        """Return a one-line description for logging."""
        if not self.success:
            return f"{self.input_path.name}: FAILED — {self.error}"
        return (
            f"{self.input_path.name} → {self.output_path.name}: "
            f"{self.rows_read} rows read, {self.rows_written} rows written, "
            f"{self.warnings} warning(s), {self.write_failures} write failure(s)"
        )


def output_path_for(input_path: Path) -> Path:
    """Return the output path for *input_path*.

    The file name is lower-cased and its first ``.csv`` is replaced with
    ``-out.csv``; the directory is kept.

    Example::

        >>> output_path_for(Path("data/Kohteet.CSV"))
        PosixPath('data/kohteet-out.csv')
    """
    input_path = Path(input_path)
    name = input_path.name.lower().replace(INPUT_SUFFIX, OUTPUT_SUFFIX, 1)
    return input_path.with_name(name)


def convert_file(
    input_path: Path,
    transformer: GeodeticTransformer,
    *,
    marker: str = DEFAULT_MARKER,
    delimiter: str = DEFAULT_DELIMITER,
    strict_numbers: bool = False,
) -> FileResult:
    """Convert *input_path* and write its ``-out.csv`` sibling.

    Args:
        input_path: CSV file to convert.
        transformer: Shared :class:`GeodeticTransformer`.
        marker: Substring identifying the coordinate column.
        delimiter: Field delimiter for both input and output.
        strict_numbers: Forwarded to :class:`RowConverter`.

    Returns:
        A successful :class:`FileResult`.

    Raises:
        InputValidationError: If the input cannot be opened.
        OutputWriteError: If the output cannot be created.
        HeaderReadError: If the file has no readable header.
        CoordinateColumnNotFoundError: If no header entry contains *marker*.
        RowReadError: If a record cannot be read or has the wrong field count.
        CoordinateParseError: If a coordinate cell is malformed.
    """
    input_path = Path(input_path)
    output_path = output_path_for(input_path)
    source = str(input_path)

    try:
        in_fh = open(input_path, "r", newline="", encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(f"Cannot open '{input_path}': {exc}") from exc

    with in_fh:
        reader = csv.reader(in_fh, delimiter=delimiter, strict=True)

        try:
            out_fh = open(output_path, "w", newline="", encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

        rows_read = rows_written = warnings = write_failures = 0
        try:
            writer = csv.writer(out_fh, delimiter=delimiter, lineterminator="\n")

            header = _read_header(reader, source)
            column = find_coordinate_column(header, marker)
            if column == NOT_FOUND:
                raise CoordinateColumnNotFoundError(marker, header, source)
            logger.debug("Coordinate column in %s: %d (%r)", input_path.name, column, header[column])

            if not _write_row(writer, [*header, *OUTPUT_COLUMNS], output_path):
                write_failures += 1

            converter = RowConverter(column, transformer, strict_numbers=strict_numbers)

            for record in _iter_records(reader, source, len(header)):
                rows_read += 1
                for converted in converter.convert(record):
                    if converted.warnings:
                        warnings += 1
                        for message in converted.warnings:
                            logger.warning(
                                "%s line %d: %s", input_path.name, reader.line_num, message
                            )
                    if _write_row(writer, converted.fields, output_path):
                        rows_written += 1
                    else:
                        write_failures += 1

            try:
                out_fh.flush()
            except OSError as exc:
                write_failures += 1
                logger.warning("Could not flush %s: %s", output_path.name, exc)
        finally:
            # Closing flushes whatever is still buffered, so it can fail too.
            try:
                out_fh.close()
            except OSError as exc:
                write_failures += 1
                logger.warning("Could not close %s: %s", output_path.name, exc)

    return FileResult(
        input_path=input_path,
        output_path=output_path,
        rows_read=rows_read,
        rows_written=rows_written,
        warnings=warnings,
        write_failures=write_failures,
    )


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _write_row(writer, fields: list[str], output_path: Path) -> bool:
    """Write one row; log and return ``False`` instead of raising on failure."""
    try:
        writer.writerow(fields)
    except (OSError, csv.Error) as exc:
        logger.warning("Could not write row to %s: %s", output_path.name, exc)
        return False
    return True


def _read_header(reader, source: str) -> list[str]:
    try:
        header = next(reader, None)
    except (csv.Error, UnicodeDecodeError) as exc:
        raise HeaderReadError(source, str(exc)) from exc
    if header is None:
        raise HeaderReadError(source, "file is empty")
    return header


def _iter_records(reader, source: str, width: int):
    """Yield data records, skipping blank lines.

    Every record must have exactly *width* fields, like the header.
    """
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as exc:
            raise RowReadError(source, reader.line_num, str(exc)) from exc

        if not record:
            continue
        if len(record) != width:
            raise RowReadError(
                source,
                reader.line_num,
                f"expected {width} fields, got {len(record)}",
            )
        yield record
