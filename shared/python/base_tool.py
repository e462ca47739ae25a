"""
ETRS CSV Converter — Base Tool
===============================
Abstract base class for the converter's batch tool.

Design Pattern:
    Template Method — :meth:`GeoTool.run` fixes the order
    validate → process → report, and subclasses fill in
    :meth:`validate_inputs` and :meth:`process`.

Usage::

    from shared.python.base_tool import GeoTool

    class DirectoryTool(GeoTool):
        def validate_inputs(self) -> None:
            ...
        def process(self) -> None:
            ...
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

# Parent logger.  Modules log through children of it, e.g.
#   logging.getLogger("geoscripthub.etrs_csv_converter.pipeline")
logger = logging.getLogger("geoscripthub")


class GeoTool(ABC):
    """Abstract base class for directory/file oriented geospatial tools.

    Attributes:
        input_path: Directory (or file) the tool reads from.
        output_path: Directory (or file) the tool writes to.
        verbose: When ``True`` DEBUG messages are logged as well.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        self.verbose: bool = verbose

        self._configure_logging()

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Check every precondition before any output is produced.

        Raises:
            InputValidationError: If a directory is missing or a setting
                is unusable.
            CRSError: If a CRS string cannot be parsed.
        """

    @abstractmethod
    def process(self) -> None:
        """Do the actual work.  Called by :meth:`run` after validation."""

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Validate, process, then log how long the run took.

        Exceptions from either step propagate unchanged.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        self._report_success(elapsed)

    # ------------------------------------------------------------------
    # Protected helpers
    # ------------------------------------------------------------------

    def _report_success(self, elapsed: float) -> None:
        logger.info(
            "%s completed in %.2fs → %s",
            self.__class__.__name__,
            elapsed,
            self.output_path,
        )

    def _configure_logging(self) -> None:
        """Attach a console handler to the ``geoscripthub`` logger once.

        Level is DEBUG when ``self.verbose`` is set, INFO otherwise.
        """
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    fmt="[%(asctime)s] %(levelname)-8s %(name)s — %(message)s",
                    datefmt="%H:%M:%S",
                )
            )
            logger.addHandler(handler)

        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"input_path={self.input_path!r}, "
            f"output_path={self.output_path!r})"
        )
