"""
Affine approximation for CRSs without a dedicated codec.

Treats the grid as a local equirectangular plane around the record's origin.
Only good near the origin; it exists so every catalog record converts to
something plausible.
"""

import math
from typing import Tuple

from georef.core.crs.ellipsoid import DEG_TO_RAD, TOLERANCE
from georef.models.crs import CrsRecord

METERS_PER_DEGREE_LON = 111320.0
METERS_PER_DEGREE_LAT = 110540.0


def _longitude_scale(crs: CrsRecord) -> float:
    cos_lat0 = math.cos(crs.latitude_origin * DEG_TO_RAD)
    if abs(cos_lat0) < TOLERANCE:
        return METERS_PER_DEGREE_LON
    return METERS_PER_DEGREE_LON * cos_lat0


def approximate_inverse(x: float, y: float, crs: CrsRecord) -> Tuple[float, float]:
    """
    Approximate projected-to-geographic conversion.

    The result is clamped to the valid longitude/latitude range.

    Args:
        x: Easting in meters
        y: Northing in meters
        crs: Record supplying origin and false offsets

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    longitude = crs.central_meridian + (x - crs.false_easting) / _longitude_scale(crs)
    latitude = crs.latitude_origin + (y - crs.false_northing) / METERS_PER_DEGREE_LAT
    return (
        max(-180.0, min(180.0, longitude)),
        max(-90.0, min(90.0, latitude)),
    )


def approximate_forward(longitude: float, latitude: float, crs: CrsRecord) -> Tuple[float, float]:
    """Approximate geographic-to-projected conversion, inverse of ``approximate_inverse``."""
    x = crs.false_easting + (longitude - crs.central_meridian) * _longitude_scale(crs)
    y = crs.false_northing + (latitude - crs.latitude_origin) * METERS_PER_DEGREE_LAT
    return (x, y)
