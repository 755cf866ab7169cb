"""
Ellipsoid constants and shared numeric helpers.

All projection codecs work in radians internally and share the isometric
latitude helpers defined here. The inverse helper runs a fixed number of
fixed-point iterations; reference values were validated against that exact
count, so it is not a tunable convergence setting.
"""

import math
from dataclasses import dataclass

# WGS84 defining parameters
EARTH_RADIUS_EQUATORIAL = 6378137.0
EARTH_RADIUS_POLAR = 6356752.314245
EARTH_FLATTENING = 1.0 / 298.257223563
EARTH_ECCENTRICITY_SQUARED = 0.00669437999014

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Guards every near-zero comparison (parallel cones, apex points, poles)
TOLERANCE = 1e-10

ISOMETRIC_ITERATIONS = 10


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid.

    Attributes:
        name: Ellipsoid name
        a: Semi-major axis in meters
        e2: First eccentricity squared
    """

    name: str
    a: float
    e2: float

    @property
    def e(self) -> float:
        """First eccentricity."""
        return math.sqrt(self.e2)

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * math.sqrt(1.0 - self.e2)

    @property
    def f(self) -> float:
        """Flattening."""
        return 1.0 - math.sqrt(1.0 - self.e2)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1.0 - self.e2)


WGS84 = Ellipsoid("WGS 84", EARTH_RADIUS_EQUATORIAL, EARTH_ECCENTRICITY_SQUARED)
GRS80 = Ellipsoid("GRS 1980", 6378137.0, 0.00669438002290)
CLARKE_1880_IGN = Ellipsoid("Clarke 1880 (IGN)", 6378249.2, 0.08248325676 ** 2)
INTERNATIONAL_1924 = Ellipsoid("International 1924", 6378388.0, 0.006722670022)
AIRY_1830 = Ellipsoid("Airy 1830", 6377563.396, 0.00667054)


def isometric_latitude(lat: float, e: float) -> float:
    """
    Compute the isometric latitude of a geodetic latitude.

    Args:
        lat: Geodetic latitude in radians
        e: First eccentricity of the ellipsoid

    Returns:
        Isometric latitude (dimensionless)
    """
    sin_lat = math.sin(lat)
    return math.log(
        math.tan(math.pi / 4 + lat / 2)
        * ((1 - e * sin_lat) / (1 + e * sin_lat)) ** (e / 2)
    )


def latitude_from_isometric(lat_iso: float, e: float) -> float:
    """
    Recover the geodetic latitude from an isometric latitude.

    Starts from the spherical inverse and applies exactly
    ``ISOMETRIC_ITERATIONS`` fixed-point refinements, which is well below a
    millimeter for terrestrial eccentricities.

    Args:
        lat_iso: Isometric latitude
        e: First eccentricity of the ellipsoid

    Returns:
        Geodetic latitude in radians
    """
    exp_iso = math.exp(lat_iso)
    lat = 2 * math.atan(exp_iso) - math.pi / 2
    for _ in range(ISOMETRIC_ITERATIONS):
        sin_lat = math.sin(lat)
        lat = (
            2 * math.atan(exp_iso * ((1 + e * sin_lat) / (1 - e * sin_lat)) ** (e / 2))
            - math.pi / 2
        )
    return lat


def meridional_arc(lat: float, ellipsoid: Ellipsoid) -> float:
    """
    Distance along the meridian from the equator to ``lat``.

    Series expansion truncated after the sixth power of the eccentricity.

    Args:
        lat: Geodetic latitude in radians
        ellipsoid: Reference ellipsoid

    Returns:
        Meridional arc length in meters
    """
    e2 = ellipsoid.e2
    e4 = e2 * e2
    e6 = e4 * e2
    return ellipsoid.a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * lat)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * lat)
        - (35 * e6 / 3072) * math.sin(6 * lat)
    )
