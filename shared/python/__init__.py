"""
ETRS CSV Converter — Shared Foundation
=======================================
Re-exports the base tool, the exception hierarchy and the validators so
the converter modules can import from one place::

    from shared.python import GeoTool, Validators
    from shared.python.exceptions import CoordinateParseError
"""

from shared.python.base_tool import GeoTool
from shared.python.exceptions import (
    ColumnNotFoundError,
    CoordinateColumnNotFoundError,
    CoordinateParseError,
    CRSError,
    GeoScriptHubError,
    HeaderReadError,
    InputValidationError,
    OutputWriteError,
    RowReadError,
)
from shared.python.validators import Validators

__all__ = [
    "GeoTool",
    "Validators",
    "GeoScriptHubError",
    "InputValidationError",
    "ColumnNotFoundError",
    "CoordinateColumnNotFoundError",
    "HeaderReadError",
    "RowReadError",
    "CoordinateParseError",
    "CRSError",
    "OutputWriteError",
]
