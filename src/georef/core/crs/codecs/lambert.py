"""
Lambert Conformal Conic codecs.

Every Lambert-based system in the catalog (Lambert-93, the CC42-CC50
regional zones, the legacy NTF zones and the Belgian grids) is reduced to the
same four projection constants and shares one forward/inverse pair:

    n   cone constant
    c   projection constant (radius scale, meters)
    xs  easting of the cone apex
    ys  northing of the cone apex

Only Lambert-93 exposes a forward projection; the other systems are used to
geo-locate existing drawings and implement the inverse only.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

from georef.core.crs.ellipsoid import (
    CLARKE_1880_IGN,
    DEG_TO_RAD,
    GRS80,
    INTERNATIONAL_1924,
    RAD_TO_DEG,
    TOLERANCE,
    Ellipsoid,
    isometric_latitude,
    latitude_from_isometric,
)
from georef.core.errors import ZoneOutOfRangeError


@dataclass(frozen=True)
class LambertConstants:
    """
    Constants of a Lambert Conformal Conic projection.

    Attributes:
        n: Cone constant
        c: Projection constant in meters
        xs: Easting of the cone apex
        ys: Northing of the cone apex
        lon0: Central meridian in degrees (Greenwich)
        e: First eccentricity of the ellipsoid
    """

    n: float
    c: float
    xs: float
    ys: float
    lon0: float
    e: float


def lambert_forward(longitude: float, latitude: float, k: LambertConstants) -> Tuple[float, float]:
    """
    Project geographic coordinates with a Lambert Conformal Conic projection.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        k: Projection constants

    Returns:
        Tuple of (x, y) in meters
    """
    lat_iso = isometric_latitude(latitude * DEG_TO_RAD, k.e)
    r = k.c * math.exp(-k.n * lat_iso)
    gamma = k.n * (longitude - k.lon0) * DEG_TO_RAD
    return (k.xs + r * math.sin(gamma), k.ys - r * math.cos(gamma))


def lambert_inverse(x: float, y: float, k: LambertConstants) -> Tuple[float, float]:
    """
    Recover geographic coordinates from Lambert Conformal Conic coordinates.

    A point at the cone apex (radius below tolerance) maps to the pole on the
    central meridian instead of dividing by zero.

    Args:
        x: Easting in meters
        y: Northing in meters
        k: Projection constants

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    dx = x - k.xs
    dy = k.ys - y
    r = math.hypot(dx, dy)
    if r < TOLERANCE:
        return (k.lon0, math.copysign(90.0, k.n))

    gamma = math.atan2(dx, dy)
    lat_iso = math.log(k.c / r) / k.n

    longitude = k.lon0 + (gamma / k.n) * RAD_TO_DEG
    latitude = latitude_from_isometric(lat_iso, k.e) * RAD_TO_DEG
    return (longitude, latitude)


def secant_lambert_constants(
    lat1: float,
    lat2: float,
    lat0: float,
    lon0: float,
    false_easting: float,
    false_northing: float,
    ellipsoid: Ellipsoid,
) -> LambertConstants:
    """
    Derive Lambert constants from two standard parallels.

    When both parallels coincide within tolerance the cone is tangent to
    their mean parallel. A latitude of origin at a pole puts the apex on
    the false origin.

    Args:
        lat1: First standard parallel in degrees
        lat2: Second standard parallel in degrees
        lat0: Latitude of the false origin in degrees
        lon0: Central meridian in degrees
        false_easting: Easting of the false origin in meters
        false_northing: Northing of the false origin in meters
        ellipsoid: Reference ellipsoid

    Returns:
        LambertConstants for the projection
    """
    e = ellipsoid.e
    phi1 = lat1 * DEG_TO_RAD
    phi2 = lat2 * DEG_TO_RAD
    phi0 = lat0 * DEG_TO_RAD

    def m(phi: float) -> float:
        sin_phi = math.sin(phi)
        return math.cos(phi) / math.sqrt(1 - ellipsoid.e2 * sin_phi * sin_phi)

    if abs(phi1 - phi2) < TOLERANCE:
        phi1 = phi2 = (phi1 + phi2) / 2
        n = math.sin(phi1)
    else:
        n = (math.log(m(phi1)) - math.log(m(phi2))) / (
            isometric_latitude(phi2, e) - isometric_latitude(phi1, e)
        )

    c = ellipsoid.a * m(phi1) * math.exp(n * isometric_latitude(phi1, e)) / n

    if abs(abs(phi0) - math.pi / 2) < TOLERANCE:
        rho0 = 0.0
    else:
        rho0 = c * math.exp(-n * isometric_latitude(phi0, e))

    return LambertConstants(
        n=n,
        c=c,
        xs=false_easting,
        ys=false_northing + rho0,
        lon0=lon0,
        e=e,
    )


# ---------------------------------------------------------------------------
# RGF93 / Lambert-93
# ---------------------------------------------------------------------------

LAMBERT_93 = LambertConstants(
    n=0.7256077650532670,
    c=11754255.426096,
    xs=700000.0,
    ys=12655612.049876,
    lon0=3.0,
    e=0.0818191910428158,
)


def lambert93_to_wgs84(x: float, y: float) -> Tuple[float, float]:
    """
    Convert RGF93 / Lambert-93 coordinates to WGS84 longitude/latitude.

    Args:
        x: Easting in meters
        y: Northing in meters

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    return lambert_inverse(x, y, LAMBERT_93)


def wgs84_to_lambert93(longitude: float, latitude: float) -> Tuple[float, float]:
    """
    Convert WGS84 longitude/latitude to RGF93 / Lambert-93 coordinates.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees

    Returns:
        Tuple of (x, y) in meters
    """
    return lambert_forward(longitude, latitude, LAMBERT_93)


# ---------------------------------------------------------------------------
# RGF93 / CC42 to CC50
# ---------------------------------------------------------------------------

CONIC_ZONE_MIN = 42
CONIC_ZONE_MAX = 50


@lru_cache(maxsize=None)
def conic_zone_constants(zone: int) -> LambertConstants:
    """
    Lambert constants of a CC regional zone.

    Each zone is secant along ``zone - 0.75`` and ``zone + 0.75`` degrees,
    with its false origin on parallel ``zone`` at (1 700 000,
    (zone - 41) * 1 000 000 + 200 000).

    Args:
        zone: Zone number (42-50)

    Returns:
        LambertConstants for the zone

    Raises:
        ZoneOutOfRangeError: If zone is outside 42-50
    """
    if not CONIC_ZONE_MIN <= zone <= CONIC_ZONE_MAX:
        raise ZoneOutOfRangeError(zone, CONIC_ZONE_MIN, CONIC_ZONE_MAX, "Conic conformal")

    return secant_lambert_constants(
        lat1=zone - 0.75,
        lat2=zone + 0.75,
        lat0=float(zone),
        lon0=3.0,
        false_easting=1700000.0,
        false_northing=(zone - 41) * 1000000.0 + 200000.0,
        ellipsoid=GRS80,
    )


def conic_zone_to_wgs84(x: float, y: float, zone: int) -> Tuple[float, float]:
    """
    Convert RGF93 / CCxx coordinates to WGS84 longitude/latitude.

    Args:
        x: Easting in meters
        y: Northing in meters
        zone: Zone number (42-50)

    Returns:
        Tuple of (longitude, latitude) in decimal degrees

    Raises:
        ZoneOutOfRangeError: If zone is outside 42-50
    """
    return lambert_inverse(x, y, conic_zone_constants(zone))


# ---------------------------------------------------------------------------
# NTF (Paris) / Lambert zones I-IV
# ---------------------------------------------------------------------------

PARIS_MERIDIAN = 2.337229167

# Constant NTF -> WGS84 offset in degrees. Known approximation: a full
# Helmert transformation is out of scope.
NTF_DATUM_SHIFT_LAT = -0.00015
NTF_DATUM_SHIFT_LON = 0.00008

_NTF_ZONES: Dict[str, LambertConstants] = {
    "I": LambertConstants(0.7604059656, 11603796.98, 600000.0, 5657616.674, PARIS_MERIDIAN, CLARKE_1880_IGN.e),
    "II": LambertConstants(0.7289686274, 11745793.39, 600000.0, 6199695.768, PARIS_MERIDIAN, CLARKE_1880_IGN.e),
    "IIE": LambertConstants(0.7289686274, 11745793.39, 600000.0, 8199695.768, PARIS_MERIDIAN, CLARKE_1880_IGN.e),
    "III": LambertConstants(0.6959127966, 11947992.52, 600000.0, 6791905.085, PARIS_MERIDIAN, CLARKE_1880_IGN.e),
    "IV": LambertConstants(0.6712679322, 12136281.99, 234.358, 7239161.542, PARIS_MERIDIAN, CLARKE_1880_IGN.e),
}

NTF_DEFAULT_VARIANT = "IIE"


def ntf_lambert_to_wgs84(x: float, y: float, variant: str = NTF_DEFAULT_VARIANT) -> Tuple[float, float]:
    """
    Convert NTF Lambert coordinates to approximate WGS84 longitude/latitude.

    The result carries a constant datum offset rather than a full NTF to
    WGS84 transformation and is good to a few meters.

    Args:
        x: Easting in meters
        y: Northing in meters
        variant: Zone key ("I", "II", "IIE", "III", "IV"); unknown keys use
            Lambert II étendu

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    k = _NTF_ZONES.get(variant.upper(), _NTF_ZONES[NTF_DEFAULT_VARIANT])
    longitude, latitude = lambert_inverse(x, y, k)
    return (longitude + NTF_DATUM_SHIFT_LON, latitude + NTF_DATUM_SHIFT_LAT)


# ---------------------------------------------------------------------------
# Belgian Lambert 72 / Lambert 2008
# ---------------------------------------------------------------------------

_BELGIAN_VARIANTS: Dict[str, LambertConstants] = {
    "72": secant_lambert_constants(
        lat1=51.0 + 10.0 / 60 + 0.00204 / 3600,
        lat2=49.0 + 50.0 / 60 + 0.00204 / 3600,
        lat0=90.0,
        lon0=4.367486666667,
        false_easting=150000.013,
        false_northing=5400088.438,
        ellipsoid=INTERNATIONAL_1924,
    ),
    "2008": secant_lambert_constants(
        lat1=49.0 + 50.0 / 60,
        lat2=51.0 + 10.0 / 60,
        lat0=50.797815,
        lon0=4.359215833333,
        false_easting=649328.0,
        false_northing=665262.0,
        ellipsoid=GRS80,
    ),
}

BELGIAN_DEFAULT_VARIANT = "72"


def belgian_lambert_to_wgs84(x: float, y: float, variant: str = BELGIAN_DEFAULT_VARIANT) -> Tuple[float, float]:
    """
    Convert Belgian Lambert coordinates to longitude/latitude.

    Lambert 72 results are on the BD72 datum (no datum shift applied);
    Lambert 2008 results are ETRS89, which matches WGS84 at map scale.

    Args:
        x: Easting in meters
        y: Northing in meters
        variant: "72" or "2008"

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    k = _BELGIAN_VARIANTS.get(variant, _BELGIAN_VARIANTS[BELGIAN_DEFAULT_VARIANT])
    return lambert_inverse(x, y, k)
