"""
ETRS CSV Converter — CLI Entry Point
=====================================
Command-line interface built with Click.  Installed as the
``geo-etrs-convert`` command via ``pyproject.toml``.

Usage:
    geo-etrs-convert                       # convert every CSV in the cwd
    geo-etrs-convert -d exports --on-error skip --report run-report.txt

Run ``geo-etrs-convert --help`` for a full list of options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from shared.python.exceptions import GeoScriptHubError
from src.etrs_csv_converter.converter import ConverterConfig, EtrsCsvConverter
from src.etrs_csv_converter.geodesy import SOURCE_CRS, TARGET_CRS
from src.etrs_csv_converter.pipeline import DEFAULT_DELIMITER
from src.etrs_csv_converter.rows import DEFAULT_MARKER


@click.command(
    name="geo-etrs-convert",
    help=(
        "Append WGS84 latitude/longitude columns to semicolon-delimited CSV files.\n\n"
        "Every *.csv file in DIRECTORY (except earlier *-out.csv results) is read, "
        "the coordinate column is transformed from FROM_CRS to TO_CRS, and the "
        "result is written next to it as <name>-out.csv."
    ),
)
@click.option(
    "--directory", "-d",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Directory to scan for CSV files.",
)
# ---------------------------------------------------------------------------
# Conversion settings
# ---------------------------------------------------------------------------
@click.option(
    "--marker",
    default=DEFAULT_MARKER,
    show_default=True,
    help="Case-insensitive text that identifies the coordinate column header.",
)
@click.option(
    "--from-crs",
    default=SOURCE_CRS,
    show_default=True,
    help="CRS of the input coordinates.",
)
@click.option(
    "--to-crs",
    default=TARGET_CRS,
    show_default=True,
    help="CRS of the appended latitude/longitude columns.",
)
@click.option(
    "--delimiter",
    default=DEFAULT_DELIMITER,
    show_default=True,
    help="CSV field delimiter used for reading and writing.",
)
# ---------------------------------------------------------------------------
# Error handling & reporting
# ---------------------------------------------------------------------------
@click.option(
    "--on-error",
    type=click.Choice(["abort", "skip"], case_sensitive=False),
    default="abort",
    show_default=True,
    help="'abort' stops at the first failing file; 'skip' logs it and continues.",
)
@click.option(
    "--strict-numbers",
    is_flag=True,
    default=False,
    help="Fail on unparseable coordinate numbers instead of writing zeros.",
)
@click.option(
    "--report",
    "report_path",
    default=None,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Write a per-file summary CSV here.  Keep it out of DIRECTORY or "
         "give it a name that does not end in .csv, otherwise the next run "
         "will try to convert it.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(
    directory: Path,
    marker: str,
    from_crs: str,
    to_crs: str,
    delimiter: str,
    on_error: str,
    strict_numbers: bool,
    report_path: Path | None,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into EtrsCsvConverter."""
    config = ConverterConfig(
        marker=marker,
        from_crs=from_crs,
        to_crs=to_crs,
        delimiter=delimiter,
        on_error=on_error.lower(),  # type: ignore[arg-type]
        strict_numbers=strict_numbers,
        report_path=report_path,
    )

    tool = EtrsCsvConverter(directory, config, verbose=verbose)

    try:
        tool.run()
    except GeoScriptHubError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    result = tool.result
    if result is not None:
        click.echo(result.summary())
        for failed in result.failed:
            click.echo(f"Failed: {failed.input_path.name}: {failed.error}", err=True)
        if result.failed:
            sys.exit(1)


if __name__ == "__main__":
    main()
