"""
ETRS CSV Converter
==================
Appends WGS84 latitude/longitude columns to semicolon-delimited CSV files
whose coordinate column holds ETRS89 / UTM zone 35N (EPSG:25835) pairs.

Public API::

    from src.etrs_csv_converter import EtrsCsvConverter, ConverterConfig
"""

from src.etrs_csv_converter.converter import BatchResult, ConverterConfig, EtrsCsvConverter
from src.etrs_csv_converter.pipeline import FileResult, convert_file, output_path_for

__all__ = [
    "EtrsCsvConverter",
    "ConverterConfig",
    "BatchResult",
    "FileResult",
    "convert_file",
    "output_path_for",
]
__version__ = "1.0.0"
