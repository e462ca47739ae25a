"""
ETRS CSV Converter — Input Validators
======================================
Static precondition checks used before any file is converted.

Every method raises an exception from :mod:`shared.python.exceptions`
instead of returning a boolean, which keeps ``validate_inputs``
implementations flat::

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            Validators.assert_directory_exists(self.input_path)
            Validators.assert_crs_valid(self.config.from_crs)
"""

from __future__ import annotations

from pathlib import Path

# pyproj is imported lazily inside assert_crs_valid so that importing the
# validators does not pull in PROJ.

from shared.python.exceptions import (
    CRSError,
    InputValidationError,
    OutputWriteError,
)


class Validators:
    """Namespace of static precondition checks.  Never instantiated."""

    # ------------------------------------------------------------------
    # File-system checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_directory_exists(path: Path) -> None:
        """Assert that *path* is an existing directory.

        Args:
            path: Directory that will be scanned for CSV files.

        Raises:
            InputValidationError: If *path* does not exist or is not a
                directory.
        """
        path = Path(path)
        if not path.exists():
            raise InputValidationError(
                f"Input directory not found: '{path}'."
            )
        if not path.is_dir():
            raise InputValidationError(
                f"Expected a directory but got a file: '{path}'."
            )

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Create the parent directory of *output_path* if it is missing.

        Raises:
            OutputWriteError: If the parent directory cannot be created.
        """
        parent = Path(output_path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    # ------------------------------------------------------------------
    # CSV dialect checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_single_character(value: str, label: str = "Delimiter") -> None:
        """Assert that *value* is exactly one character long.

        Example::

            Validators.assert_single_character(";")
        """
        if len(value) != 1:
            raise InputValidationError(
                f"{label} must be a single character, got {value!r}."
            )

    # ------------------------------------------------------------------
    # CRS / projection checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_crs_valid(crs_string: str) -> None:
        """Assert that *crs_string* can be parsed by pyproj.

        Accepts EPSG codes (``"EPSG:25835"``), PROJ strings and WKT.

        Raises:
            CRSError: If *crs_string* is not recognised.
        """
        try:
            from pyproj import CRS  # noqa: PLC0415

            CRS.from_user_input(crs_string)
        except Exception as exc:
            raise CRSError(crs_string) from exc
