"""
ETRS CSV Converter — Batch Tool
================================
Provides :class:`EtrsCsvConverter`, which scans a directory for CSV files
holding ETRS89 / UTM zone 35N coordinates and writes a ``-out.csv`` copy
of each with WGS84 ``latitude`` and ``longitude`` columns appended.

Classes:
    ConverterConfig     Settings for a batch run.
    BatchResult         Per-file results of a batch run.
    EtrsCsvConverter    Primary tool class (inherits GeoTool).

Typical usage::

    from pathlib import Path
    from src.etrs_csv_converter.converter import ConverterConfig, EtrsCsvConverter

    tool = EtrsCsvConverter(Path("exports"), ConverterConfig(on_error="skip"))
    tool.run()
    print(tool.result.summary())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import pandas as pd

from shared.python.base_tool import GeoTool
from shared.python.exceptions import GeoScriptHubError, OutputWriteError
from shared.python.validators import Validators
from src.etrs_csv_converter.geodesy import SOURCE_CRS, TARGET_CRS, GeodeticTransformer
from src.etrs_csv_converter.pipeline import (
    DEFAULT_DELIMITER,
    FileResult,
    convert_file,
    output_path_for,
)
from src.etrs_csv_converter.rows import DEFAULT_MARKER
from src.etrs_csv_converter.scanner import scan_directory

logger = logging.getLogger("geoscripthub.etrs_csv_converter")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class ConverterConfig:
    """Configuration bundle for :class:`EtrsCsvConverter`.

    Attributes:
        marker: Case-insensitive substring that identifies the coordinate
                column in each header.
        from_crs: CRS of the input coordinates.
        to_crs: CRS of the appended latitude/longitude.
        delimiter: Single-character field delimiter for input and output.
        on_error: ``"abort"`` stops the whole batch at the first file that
                  fails; ``"skip"`` logs the failure and moves on to the
                  next file.
        strict_numbers: Treat unparseable coordinate numbers as errors
                        instead of zeros.
        report_path: Optional CSV file that receives one summary row per
                     processed file.
    """

    marker: str = DEFAULT_MARKER
    from_crs: str = SOURCE_CRS
    to_crs: str = TARGET_CRS
    delimiter: str = DEFAULT_DELIMITER
    on_error: Literal["abort", "skip"] = "abort"
    strict_numbers: bool = False
    report_path: Path | None = None


@dataclass
class BatchResult:
    """Results for every file attempted in one run, in processing order."""

    files: list[FileResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[FileResult]:
        return [f for f in self.files if f.success]

    @property
    def failed(self) -> list[FileResult]:
        return [f for f in self.files if not f.success]

    def summary(self) -> str:
        """Return a human-readable summary string for logging or display."""
        rows = sum(f.rows_written for f in self.files)
        return (
            f"Converted {len(self.succeeded)}/{len(self.files)} file(s) | "
            f"{rows} row(s) written | {len(self.failed)} failed"
        )

    def to_frame(self) -> pd.DataFrame:
        """Return one DataFrame row per file, for reporting."""
        columns = [
            "input_file", "output_file", "rows_read", "rows_written",
            "warnings", "write_failures", "success", "error",
        ]
        records = [
            {
                "input_file": f.input_path.name,
                "output_file": f.output_path.name,
                "rows_read": f.rows_read,
                "rows_written": f.rows_written,
                "warnings": f.warnings,
                "write_failures": f.write_failures,
                "success": f.success,
                "error": f.error or "",
            }
            for f in self.files
        ]
        return pd.DataFrame.from_records(records, columns=columns)


# ---------------------------------------------------------------------------
# Main tool class
# ---------------------------------------------------------------------------


class EtrsCsvConverter(GeoTool):
    """Convert every pending CSV file in a directory.

    Inherits the Template Method pipeline from :class:`~shared.python.GeoTool`:
    ``validate_inputs`` → ``process`` → ``_report_success``.

    Output files are written next to their inputs, so ``output_path`` is the
    scanned directory itself.

    Args:
        directory: Directory to scan.
        config: A :class:`ConverterConfig`.  Defaults reproduce the plain
                ``koordinaatit`` / EPSG:25835 → EPSG:4326 conversion.
        verbose: Enable DEBUG-level logging.
    """

    def __init__(
        self,
        directory: Path,
        config: ConverterConfig | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(directory, directory, verbose=verbose)
        self.config: ConverterConfig = config or ConverterConfig()

        self._result: BatchResult | None = None

    # ------------------------------------------------------------------
    # GeoTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Check the directory, the CRS strings and the delimiter.

        Raises:
            InputValidationError: If the directory is missing or the
                delimiter is not a single character.
            CRSError: If either CRS cannot be parsed by pyproj.
            OutputWriteError: If the report directory cannot be created.
        """
        Validators.assert_directory_exists(self.input_path)
        Validators.assert_crs_valid(self.config.from_crs)
        Validators.assert_crs_valid(self.config.to_crs)
        Validators.assert_single_character(self.config.delimiter)
        if self.config.report_path is not None:
            Validators.assert_output_dir_writable(self.config.report_path)

        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Scan the directory and convert each file in turn.

        Raises:
            GeoScriptHubError: The first file failure when ``on_error`` is
                ``"abort"``.
        """
        files = scan_directory(self.input_path)
        if self.config.report_path is not None:
            report = Path(self.config.report_path).resolve()
            files = [p for p in files if p.resolve() != report]
        if not files:
            logger.warning("No CSV files to convert in %s", self.input_path)

        transformer = GeodeticTransformer(self.config.from_crs, self.config.to_crs)
        result = BatchResult()
        self._result = result

        for path in files:
            logger.info("Parsing file: %s", path.name)
            try:
                file_result = convert_file(
                    path,
                    transformer,
                    marker=self.config.marker,
                    delimiter=self.config.delimiter,
                    strict_numbers=self.config.strict_numbers,
                )
            except GeoScriptHubError as exc:
                result.files.append(
                    FileResult(
                        input_path=path,
                        output_path=output_path_for(path),
                        error=exc.message,
                    )
                )
                if self.config.on_error == "abort":
                    self._write_report(result)
                    raise
                logger.error("Skipping %s: %s", path.name, exc.message)
                continue

            result.files.append(file_result)
            logger.info(file_result.summary())

        self._write_report(result)
        logger.info(result.summary())

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write_report(self, result: BatchResult) -> None:
        report_path = self.config.report_path
        if report_path is None:
            return
        try:
            result.to_frame().to_csv(report_path, index=False)
        except OSError as exc:
            raise OutputWriteError(str(report_path), str(exc)) from exc
        logger.debug("Run report written to %s", report_path)

    @property
    def result(self) -> BatchResult | None:
        """The :class:`BatchResult` of the last :meth:`run`, or ``None``."""
        return self._result
