"""
Cross-checks against the PROJ library.

The engine's closed-form codecs are independent of PROJ. This module runs
the same conversion through pyproj, using the record's EPSG id, so the two
can be compared. It is a validation aid; conversions never depend on it.
"""

import logging
import math
from functools import lru_cache
from typing import Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError as ProjCRSError, ProjError

from georef.core.crs.geodesic import vincenty_distance
from georef.core.crs.transformer import to_geographic
from georef.core.errors import ReferenceUnavailableError
from georef.models.crs import CrsRecord

logger = logging.getLogger(__name__)

WGS84_GEOGRAPHIC_EPSG = 4326


@lru_cache(maxsize=64)
def _reference_transformer(source_epsg: int, target_epsg: int) -> Transformer:
    return Transformer.from_crs(
        CRS.from_epsg(source_epsg),
        CRS.from_epsg(target_epsg),
        always_xy=True,
    )


def reference_to_geographic(
    x: float,
    y: float,
    crs: CrsRecord,
    target_epsg: int = WGS84_GEOGRAPHIC_EPSG,
) -> Tuple[float, float]:
    """
    Convert projected coordinates to longitude/latitude with PROJ.

    Args:
        x: Easting in meters
        y: Northing in meters
        crs: Source record; must carry an EPSG id
        target_epsg: Geographic CRS of the result (4326 by default)

    Returns:
        Tuple of (longitude, latitude) in decimal degrees

    Raises:
        ReferenceUnavailableError: If the record has no EPSG id or PROJ
            cannot build or run the transformation
    """
    if crs.epsg <= 0:
        raise ReferenceUnavailableError(
            f"{crs.code} has no EPSG id", crs_code=crs.code
        )

    try:
        transformer = _reference_transformer(crs.epsg, target_epsg)
        longitude, latitude = transformer.transform(x, y)
    except (ProjCRSError, ProjError) as e:
        raise ReferenceUnavailableError(
            f"PROJ cannot convert EPSG:{crs.epsg} to EPSG:{target_epsg}: {e}",
            crs_code=crs.code,
            details={"source_epsg": crs.epsg, "target_epsg": target_epsg},
        )

    if not (math.isfinite(longitude) and math.isfinite(latitude)):
        raise ReferenceUnavailableError(
            f"PROJ returned no result for ({x}, {y}) in EPSG:{crs.epsg}",
            crs_code=crs.code,
            details={"source_epsg": crs.epsg, "target_epsg": target_epsg},
        )

    return (float(longitude), float(latitude))


def inverse_error_meters(
    x: float,
    y: float,
    crs: CrsRecord,
    target_epsg: int = WGS84_GEOGRAPHIC_EPSG,
) -> float:
    """
    Geodesic distance between the engine's and PROJ's inverse of a point.

    ``target_epsg`` should be the geographic CRS the record's codec actually
    produces (e.g. 4171 for RGF93 grids, 4313 for Belgian Lambert 72).

    Returns:
        Distance in meters

    Raises:
        ReferenceUnavailableError: If the reference conversion is unavailable
    """
    engine_lon, engine_lat = to_geographic(x, y, crs)
    ref_lon, ref_lat = reference_to_geographic(x, y, crs, target_epsg)
    error = vincenty_distance(engine_lon, engine_lat, ref_lon, ref_lat)
    logger.debug(
        f"{crs.code} inverse at ({x}, {y}) differs from PROJ by {error:.3f} m"
    )
    return error


def validate_inverse_accuracy(
    x: float,
    y: float,
    crs: CrsRecord,
    max_error_meters: float = 0.01,
    target_epsg: int = WGS84_GEOGRAPHIC_EPSG,
) -> bool:
    """
    Check that the engine's inverse of a point agrees with PROJ.

    Args:
        x: Easting in meters
        y: Northing in meters
        crs: Source record
        max_error_meters: Maximum acceptable distance
        target_epsg: Geographic CRS to compare in

    Returns:
        True if the two results are within ``max_error_meters``

    Raises:
        ReferenceUnavailableError: If the reference conversion is unavailable
    """
    return inverse_error_meters(x, y, crs, target_epsg) <= max_error_meters
