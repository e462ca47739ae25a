"""
ETRS CSV Converter — Geodetic Transform
========================================
Thin adapter around :class:`pyproj.Transformer` that converts projected
ETRS89 / UTM zone 35N (EPSG:25835) coordinates to WGS84 longitude and
latitude (EPSG:4326).

EPSG:25835 is identical to ETRS-TM35FIN (EPSG:3067) apart from its area of
use; both have easting first.

Failures inside PROJ never raise out of :meth:`GeodeticTransformer.to_lonlat`.
They come back as a :class:`TransformOutcome` with ``ok=False`` and zero
coordinates so the caller can decide what to report.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pyproj
from pyproj.exceptions import ProjError

from shared.python.exceptions import CRSError

logger = logging.getLogger("geoscripthub.etrs_csv_converter.geodesy")

SOURCE_CRS = "EPSG:25835"
TARGET_CRS = "EPSG:4326"


@dataclass(frozen=True)
class TransformOutcome:
    """Result of transforming one point.

    Attributes:
        lon: Longitude in degrees (``0.0`` on failure).
        lat: Latitude in degrees (``0.0`` on failure).
        ok: ``False`` if PROJ raised or returned a non-finite value.
    """

    lon: float
    lat: float
    ok: bool


class GeodeticTransformer:
    """Convert (x, y) in *from_crs* to (lon, lat) in *to_crs*.

    The underlying transformer is built once and reused for every point,
    always with (x, y) / (lon, lat) axis order.

    Args:
        from_crs: Source CRS.  Defaults to ETRS89 / UTM zone 35N.
        to_crs: Target CRS.  Defaults to WGS84 geographic.

    Raises:
        CRSError: If either CRS string is not understood by pyproj.

    Example::

        transformer = GeodeticTransformer()
        outcome = transformer.to_lonlat(385_000.0, 6_672_000.0)
    """

    def __init__(self, from_crs: str = SOURCE_CRS, to_crs: str = TARGET_CRS) -> None:
        self.from_crs = from_crs
        self.to_crs = to_crs
        try:
            self._transformer = pyproj.Transformer.from_crs(
                from_crs, to_crs, always_xy=True
            )
        except ProjError as exc:
            bad = to_crs if _is_valid_crs(from_crs) else from_crs
            raise CRSError(bad) from exc

    def to_lonlat(self, x: float, y: float) -> TransformOutcome:
        """Transform a single point at zero elevation."""
        try:
            lon, lat, _ = self._transformer.transform(x, y, 0.0)
        except ProjError as exc:
            logger.debug("Transform of (%r, %r) failed: %s", x, y, exc)
            return TransformOutcome(lon=0.0, lat=0.0, ok=False)

        if not (math.isfinite(lon) and math.isfinite(lat)):
            logger.debug("Transform of (%r, %r) produced a non-finite result.", x, y)
            return TransformOutcome(lon=0.0, lat=0.0, ok=False)

        return TransformOutcome(lon=lon, lat=lat, ok=True)

    def __repr__(self) -> str:
        return f"GeodeticTransformer(from_crs={self.from_crs!r}, to_crs={self.to_crs!r})"


def _is_valid_crs(crs_string: str) -> bool:
    try:
        pyproj.CRS.from_user_input(crs_string)
    except ProjError:
        return False
    return True
