"""
Coordinate transformation facade.

Routes a conversion to the codec of the record's projection family. The
family is resolved once when the record is built, so dispatch here is a
plain lookup on ``crs.family``.

Only Lambert-93 and UTM have an exact forward projection; every other
projected family goes through the affine approximation when projecting.
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from georef.core.crs.codecs.affine import approximate_forward, approximate_inverse
from georef.core.crs.codecs.dutch import dutch_rd_to_wgs84
from georef.core.crs.codecs.lambert import (
    belgian_lambert_to_wgs84,
    conic_zone_to_wgs84,
    lambert93_to_wgs84,
    ntf_lambert_to_wgs84,
    wgs84_to_lambert93,
)
from georef.core.crs.codecs.swiss import swiss_to_wgs84
from georef.core.crs.codecs.transverse_mercator import (
    british_grid_to_wgs84,
    luxembourg_to_wgs84,
    utm_forward,
    utm_to_wgs84,
)
from georef.core.errors import TransformationError
from georef.models.crs import CrsRecord, ProjectionFamily
from georef.utils.logging import log_performance

logger = logging.getLogger(__name__)

ArrayLike = Union[List[float], np.ndarray]
_Inverse = Callable[[float, float, CrsRecord], Tuple[float, float]]

_INVERSE: Dict[ProjectionFamily, _Inverse] = {
    ProjectionFamily.LAMBERT_93: lambda x, y, crs: lambert93_to_wgs84(x, y),
    ProjectionFamily.CONIC_ZONE: lambda x, y, crs: conic_zone_to_wgs84(x, y, crs.zone.zone_number),
    ProjectionFamily.UTM: lambda x, y, crs: utm_to_wgs84(
        x, y, crs.zone.zone_number, crs.zone.is_northern
    ),
    ProjectionFamily.NTF_LAMBERT: lambda x, y, crs: ntf_lambert_to_wgs84(x, y, crs.variant),
    ProjectionFamily.SWISS: lambda x, y, crs: swiss_to_wgs84(x, y, crs.variant),
    ProjectionFamily.BELGIAN_LAMBERT: lambda x, y, crs: belgian_lambert_to_wgs84(x, y, crs.variant),
    ProjectionFamily.LUXEMBOURG: lambda x, y, crs: luxembourg_to_wgs84(x, y),
    ProjectionFamily.DUTCH_RD: lambda x, y, crs: dutch_rd_to_wgs84(x, y),
    ProjectionFamily.BRITISH_GRID: lambda x, y, crs: british_grid_to_wgs84(x, y),
}


def _require_crs(crs: Optional[CrsRecord]) -> CrsRecord:
    if crs is None:
        raise TransformationError(
            "A CRS record is required",
            details={"reason": "crs is None"},
        )
    return crs


def to_geographic(x: float, y: float, crs: Optional[CrsRecord]) -> Tuple[float, float]:
    """
    Convert projected coordinates to longitude/latitude.

    Geographic records pass the input through unchanged. Records without a
    dedicated codec use the affine approximation.

    Args:
        x: Easting in the record's unit
        y: Northing in the record's unit
        crs: Source CRS record

    Returns:
        Tuple of (longitude, latitude) in decimal degrees

    Raises:
        TransformationError: If crs is None
        ZoneOutOfRangeError: If the record carries an invalid zone
    """
    crs = _require_crs(crs)

    if crs.is_geographic or crs.family == ProjectionFamily.GEOGRAPHIC:
        return (x, y)

    inverse = _INVERSE.get(crs.family)
    if inverse is None:
        logger.debug(f"No dedicated codec for {crs.code}, using affine approximation")
        return approximate_inverse(x, y, crs)

    return inverse(x, y, crs)


def to_projected(longitude: float, latitude: float, crs: Optional[CrsRecord]) -> Tuple[float, float]:
    """
    Convert longitude/latitude to projected coordinates.

    Lambert-93 and UTM are projected exactly, UTM in the record's own zone
    and hemisphere. Geographic records pass through; every other family uses
    the affine approximation.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        crs: Target CRS record

    Returns:
        Tuple of (x, y) in the record's unit

    Raises:
        TransformationError: If crs is None
    """
    crs = _require_crs(crs)

    if crs.is_geographic or crs.family == ProjectionFamily.GEOGRAPHIC:
        return (longitude, latitude)
    if crs.family == ProjectionFamily.LAMBERT_93:
        return wgs84_to_lambert93(longitude, latitude)
    if crs.family == ProjectionFamily.UTM:
        return utm_forward(longitude, latitude, crs.zone.zone_number, crs.zone.is_northern)

    return approximate_forward(longitude, latitude, crs)


def _as_pair(first: ArrayLike, second: ArrayLike, names: Tuple[str, str]) -> Tuple[np.ndarray, np.ndarray]:
    a = np.asarray(first, dtype=float)
    b = np.asarray(second, dtype=float)
    if a.shape != b.shape:
        raise TransformationError(
            f"{names[0]} and {names[1]} must have same length",
            details={names[0]: list(a.shape), names[1]: list(b.shape)},
        )
    return a, b


@log_performance()
def to_geographic_batch(
    xs: ArrayLike,
    ys: ArrayLike,
    crs: Optional[CrsRecord],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert arrays of projected coordinates to longitude/latitude.

    Args:
        xs: Eastings
        ys: Northings, same shape as ``xs``

    Returns:
        Tuple of (longitudes, latitudes) arrays with the input shape

    Raises:
        TransformationError: If crs is None or the shapes differ
    """
    crs = _require_crs(crs)
    x_arr, y_arr = _as_pair(xs, ys, ("xs", "ys"))

    lons = np.empty_like(x_arr)
    lats = np.empty_like(y_arr)
    for idx in np.ndindex(x_arr.shape):
        lons[idx], lats[idx] = to_geographic(float(x_arr[idx]), float(y_arr[idx]), crs)
    return (lons, lats)


@log_performance()
def to_projected_batch(
    longitudes: ArrayLike,
    latitudes: ArrayLike,
    crs: Optional[CrsRecord],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert arrays of longitude/latitude to projected coordinates.

    Returns:
        Tuple of (xs, ys) arrays with the input shape

    Raises:
        TransformationError: If crs is None or the shapes differ
    """
    crs = _require_crs(crs)
    lon_arr, lat_arr = _as_pair(longitudes, latitudes, ("longitudes", "latitudes"))

    xs = np.empty_like(lon_arr)
    ys = np.empty_like(lat_arr)
    for idx in np.ndindex(lon_arr.shape):
        xs[idx], ys[idx] = to_projected(float(lon_arr[idx]), float(lat_arr[idx]), crs)
    return (xs, ys)


def round_trip_error(x: float, y: float, crs: CrsRecord) -> float:
    """
    Distance between a point and its projected -> geographic -> projected image.

    Only meaningful for families with an exact forward projection
    (Lambert-93, UTM); for the others it measures the gap between the codec
    and the affine approximation.

    Returns:
        Error in the record's unit
    """
    longitude, latitude = to_geographic(x, y, crs)
    x_back, y_back = to_projected(longitude, latitude, crs)
    return math.hypot(x - x_back, y - y_back)


def validate_round_trip_accuracy(
    x: float,
    y: float,
    crs: CrsRecord,
    max_error_meters: float = 0.001,
) -> bool:
    """
    Check that a point survives a round trip through the record's codecs.

    Args:
        x: Easting in meters
        y: Northing in meters
        crs: CRS record
        max_error_meters: Maximum acceptable error

    Returns:
        True if the round-trip error is within tolerance
    """
    return round_trip_error(x, y, crs) <= max_error_meters
