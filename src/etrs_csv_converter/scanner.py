"""
ETRS CSV Converter — Directory Scanner
=======================================
Finds the CSV files in a directory that still need converting.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from shared.python.exceptions import InputValidationError
from src.etrs_csv_converter.pipeline import INPUT_SUFFIX, OUTPUT_SUFFIX

logger = logging.getLogger("geoscripthub.etrs_csv_converter.scanner")


def is_generated_output(name: str) -> bool:
    """Return ``True`` if *name* looks like a file this tool wrote."""
    return name.lower().endswith(OUTPUT_SUFFIX)


def is_candidate(name: str) -> bool:
    """Return ``True`` if *name* is a ``.csv`` file that is not an output.

    Both checks are case-insensitive.
    """
    return name.lower().endswith(INPUT_SUFFIX) and not is_generated_output(name)


def scan_directory(directory: Path) -> list[Path]:
    """List the convertible CSV files directly inside *directory*.

    Only regular files are returned; symlinks and directories named
    ``*.csv`` are skipped.  Files are returned sorted by name, so inputs
    whose names differ only in case always convert in the same order.

    Raises:
        InputValidationError: If the directory cannot be listed.
    """
    directory = Path(directory)
    try:
        with os.scandir(directory) as entries:
            found = [
                directory / entry.name
                for entry in entries
                if entry.is_file(follow_symlinks=False) and is_candidate(entry.name)
            ]
    except OSError as exc:
        raise InputValidationError(f"Cannot list directory '{directory}': {exc}") from exc

    logger.debug("Found %d candidate file(s) in %s", len(found), directory)
    return sorted(found, key=lambda p: p.name)
