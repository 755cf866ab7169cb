"""
Transverse Mercator codecs.

One parametrised implementation serves UTM (both directions), the
Luxembourg LUREF grid and the British National Grid (inverse only). It uses
Krüger's series in the third flattening ``n``, carried to ``n**6``, which
keeps forward and inverse consistent to a few nanometers across a full UTM
zone.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from georef.core.crs.ellipsoid import (
    AIRY_1830,
    DEG_TO_RAD,
    INTERNATIONAL_1924,
    RAD_TO_DEG,
    TOLERANCE,
    WGS84,
    Ellipsoid,
    isometric_latitude,
    latitude_from_isometric,
)
from georef.core.crs.utm import (
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING_SOUTH,
    UTM_SCALE_FACTOR,
    calculate_utm_central_meridian,
    detect_utm_zone,
)


@dataclass(frozen=True)
class TransverseMercatorParams:
    """
    Parameters of a Transverse Mercator projection.

    Attributes:
        central_meridian: Longitude of natural origin in degrees
        latitude_origin: Latitude of natural origin in degrees
        scale_factor: Scale factor on the central meridian
        false_easting: False easting in meters
        false_northing: False northing in meters
        ellipsoid: Reference ellipsoid
    """

    central_meridian: float
    latitude_origin: float
    scale_factor: float
    false_easting: float
    false_northing: float
    ellipsoid: Ellipsoid = WGS84


@dataclass(frozen=True)
class _KruegerSeries:
    rectifying_radius: float
    alpha: Tuple[float, ...]
    beta: Tuple[float, ...]


@lru_cache(maxsize=None)
def _krueger_series(ellipsoid: Ellipsoid) -> _KruegerSeries:
    """Rectifying radius and the forward/inverse coefficients for an ellipsoid."""
    f = ellipsoid.f
    n = f / (2 - f)
    n2 = n * n
    n3 = n2 * n
    n4 = n3 * n
    n5 = n4 * n
    n6 = n5 * n

    radius = ellipsoid.a / (1 + n) * (1 + n2 / 4 + n4 / 64 + n6 / 256)
    alpha = (
        n / 2 - 2 * n2 / 3 + 5 * n3 / 16 + 41 * n4 / 180 - 127 * n5 / 288 + 7891 * n6 / 37800,
        13 * n2 / 48 - 3 * n3 / 5 + 557 * n4 / 1440 + 281 * n5 / 630 - 1983433 * n6 / 1935360,
        61 * n3 / 240 - 103 * n4 / 140 + 15061 * n5 / 26880 + 167603 * n6 / 181440,
        49561 * n4 / 161280 - 179 * n5 / 168 + 6601661 * n6 / 7257600,
        34729 * n5 / 80640 - 3418889 * n6 / 1995840,
        212378941 * n6 / 319334400,
    )
    beta = (
        n / 2 - 2 * n2 / 3 + 37 * n3 / 96 - n4 / 360 - 81 * n5 / 512 + 96199 * n6 / 604800,
        n2 / 48 + n3 / 15 - 437 * n4 / 1440 + 46 * n5 / 105 - 1118711 * n6 / 3870720,
        17 * n3 / 480 - 37 * n4 / 840 - 209 * n5 / 4480 + 5569 * n6 / 90720,
        4397 * n4 / 161280 - 11 * n5 / 504 - 830251 * n6 / 7257600,
        4583 * n5 / 161280 - 108847 * n6 / 3991680,
        20648693 * n6 / 638668800,
    )
    return _KruegerSeries(radius, alpha, beta)


def _conformal_sphere_coords(lat: float, dlon: float, e: float) -> Tuple[float, float]:
    # Gauss-Schreiber coordinates (xi', eta') of a point
    if math.cos(lat) < TOLERANCE:
        return (math.copysign(math.pi / 2, lat), 0.0)
    tau = math.sinh(isometric_latitude(lat, e))
    cos_dlon = math.cos(dlon)
    xi = math.atan2(tau, cos_dlon)
    eta = math.asinh(math.sin(dlon) / math.hypot(tau, cos_dlon))
    return xi, eta


def _origin_arc(p: TransverseMercatorParams, series: _KruegerSeries) -> float:
    """Meridian distance from the equator to the latitude of origin."""
    if p.latitude_origin == 0.0:
        return 0.0
    xi_p, _ = _conformal_sphere_coords(p.latitude_origin * DEG_TO_RAD, 0.0, p.ellipsoid.e)
    xi = xi_p
    for j, a_j in enumerate(series.alpha, start=1):
        xi += a_j * math.sin(2 * j * xi_p)
    return series.rectifying_radius * xi


def tm_forward(longitude: float, latitude: float, p: TransverseMercatorParams) -> Tuple[float, float]:
    """
    Project geographic coordinates with a Transverse Mercator projection.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        p: Projection parameters

    Returns:
        Tuple of (easting, northing) in meters
    """
    series = _krueger_series(p.ellipsoid)
    k0 = p.scale_factor

    xi_p, eta_p = _conformal_sphere_coords(
        latitude * DEG_TO_RAD,
        (longitude - p.central_meridian) * DEG_TO_RAD,
        p.ellipsoid.e,
    )
    xi = xi_p
    eta = eta_p
    for j, a_j in enumerate(series.alpha, start=1):
        xi += a_j * math.sin(2 * j * xi_p) * math.cosh(2 * j * eta_p)
        eta += a_j * math.cos(2 * j * xi_p) * math.sinh(2 * j * eta_p)

    easting = p.false_easting + k0 * series.rectifying_radius * eta
    northing = p.false_northing + k0 * (series.rectifying_radius * xi - _origin_arc(p, series))
    return (easting, northing)


def tm_inverse(x: float, y: float, p: TransverseMercatorParams) -> Tuple[float, float]:
    """
    Recover geographic coordinates from Transverse Mercator coordinates.

    A point at a pole returns the central meridian as longitude.

    Args:
        x: Easting in meters
        y: Northing in meters
        p: Projection parameters

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    series = _krueger_series(p.ellipsoid)
    scale = p.scale_factor * series.rectifying_radius

    xi = (y - p.false_northing + p.scale_factor * _origin_arc(p, series)) / scale
    eta = (x - p.false_easting) / scale

    xi_p = xi
    eta_p = eta
    for j, b_j in enumerate(series.beta, start=1):
        xi_p -= b_j * math.sin(2 * j * xi) * math.cosh(2 * j * eta)
        eta_p -= b_j * math.cos(2 * j * xi) * math.sinh(2 * j * eta)

    sinh_eta_p = math.sinh(eta_p)
    cos_xi_p = math.cos(xi_p)
    r = math.hypot(sinh_eta_p, cos_xi_p)
    if r < TOLERANCE:
        return (p.central_meridian, math.copysign(90.0, xi_p))

    lat_iso = math.asinh(math.sin(xi_p) / r)
    lat = latitude_from_isometric(lat_iso, p.ellipsoid.e)
    dlon = math.atan2(sinh_eta_p, cos_xi_p)

    return (p.central_meridian + dlon * RAD_TO_DEG, lat * RAD_TO_DEG)


# ---------------------------------------------------------------------------
# UTM
# ---------------------------------------------------------------------------


def utm_params(zone: int, northern: bool = True) -> TransverseMercatorParams:
    """
    Transverse Mercator parameters of a WGS84 UTM zone.

    Raises:
        ZoneOutOfRangeError: If zone is outside 1-60
    """
    return TransverseMercatorParams(
        central_meridian=calculate_utm_central_meridian(zone),
        latitude_origin=0.0,
        scale_factor=UTM_SCALE_FACTOR,
        false_easting=UTM_FALSE_EASTING,
        false_northing=0.0 if northern else UTM_FALSE_NORTHING_SOUTH,
        ellipsoid=WGS84,
    )


def utm_to_wgs84(
    easting: float,
    northing: float,
    zone: int,
    northern: bool = True,
) -> Tuple[float, float]:
    """
    Convert UTM coordinates to WGS84 longitude/latitude.

    Args:
        easting: Easting in meters
        northing: Northing in meters
        zone: UTM zone number (1-60)
        northern: True for northern hemisphere

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    return tm_inverse(easting, northing, utm_params(zone, northern))


def utm_forward(
    longitude: float,
    latitude: float,
    zone: int,
    northern: bool = True,
) -> Tuple[float, float]:
    """
    Project WGS84 longitude/latitude into a given UTM zone.

    Returns:
        Tuple of (easting, northing) in meters
    """
    return tm_forward(longitude, latitude, utm_params(zone, northern))


def wgs84_to_utm(longitude: float, latitude: float) -> Tuple[int, float, float, bool]:
    """
    Convert WGS84 longitude/latitude to UTM, picking the zone automatically.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees

    Returns:
        Tuple of (zone, easting, northing, is_northern)

    Raises:
        ValueError: If coordinates are out of valid range
    """
    zone, northern = detect_utm_zone(longitude, latitude)
    easting, northing = utm_forward(longitude, latitude, zone, northern)
    return (zone, easting, northing, northern)


# ---------------------------------------------------------------------------
# LUREF / Luxembourg TM
# ---------------------------------------------------------------------------

LUXEMBOURG_TM = TransverseMercatorParams(
    central_meridian=6.166666666667,
    latitude_origin=49.833333333333,
    scale_factor=1.0,
    false_easting=80000.0,
    false_northing=100000.0,
    ellipsoid=INTERNATIONAL_1924,
)


def luxembourg_to_wgs84(x: float, y: float) -> Tuple[float, float]:
    """
    Convert LUREF / Luxembourg TM coordinates to longitude/latitude.

    Results are on the LUREF datum; no datum shift is applied.
    """
    return tm_inverse(x, y, LUXEMBOURG_TM)


# ---------------------------------------------------------------------------
# OSGB36 / British National Grid
# ---------------------------------------------------------------------------

BRITISH_NATIONAL_GRID = TransverseMercatorParams(
    central_meridian=-2.0,
    latitude_origin=49.0,
    scale_factor=0.9996012717,
    false_easting=400000.0,
    false_northing=-100000.0,
    ellipsoid=AIRY_1830,
)

# Constant OSGB36 -> WGS84 offset in degrees. Known approximation: the
# exact Helmert parameters are out of scope.
OSGB36_SHIFT_LON = 0.000089
OSGB36_SHIFT_LAT = 0.000050


def british_grid_to_wgs84(x: float, y: float) -> Tuple[float, float]:
    """
    Convert British National Grid coordinates to approximate WGS84.

    The grid is inverted on the Airy 1830 ellipsoid and a small constant
    offset is added, so results are only good to the size of the OSGB36 to
    WGS84 datum difference.

    Args:
        x: Easting in meters
        y: Northing in meters

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    longitude, latitude = tm_inverse(x, y, BRITISH_NATIONAL_GRID)
    return (longitude + OSGB36_SHIFT_LON, latitude + OSGB36_SHIFT_LAT)
