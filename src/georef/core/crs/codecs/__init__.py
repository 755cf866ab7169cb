"""
Projection codecs.

Pure functions converting between projected grid coordinates and WGS84
longitude/latitude, one module per projection family.
"""

from georef.core.crs.codecs.affine import approximate_forward, approximate_inverse
from georef.core.crs.codecs.dutch import dutch_rd_to_wgs84
from georef.core.crs.codecs.lambert import (
    LAMBERT_93,
    LambertConstants,
    belgian_lambert_to_wgs84,
    conic_zone_constants,
    conic_zone_to_wgs84,
    lambert93_to_wgs84,
    lambert_forward,
    lambert_inverse,
    ntf_lambert_to_wgs84,
    secant_lambert_constants,
    wgs84_to_lambert93,
)
from georef.core.crs.codecs.swiss import swiss_to_wgs84
from georef.core.crs.codecs.transverse_mercator import (
    TransverseMercatorParams,
    british_grid_to_wgs84,
    luxembourg_to_wgs84,
    tm_forward,
    tm_inverse,
    utm_forward,
    utm_to_wgs84,
    wgs84_to_utm,
)

__all__ = [
    # Affine fallback
    "approximate_forward",
    "approximate_inverse",
    # Lambert
    "LAMBERT_93",
    "LambertConstants",
    "belgian_lambert_to_wgs84",
    "conic_zone_constants",
    "conic_zone_to_wgs84",
    "lambert93_to_wgs84",
    "lambert_forward",
    "lambert_inverse",
    "ntf_lambert_to_wgs84",
    "secant_lambert_constants",
    "wgs84_to_lambert93",
    # Transverse Mercator
    "TransverseMercatorParams",
    "british_grid_to_wgs84",
    "luxembourg_to_wgs84",
    "tm_forward",
    "tm_inverse",
    "utm_forward",
    "utm_to_wgs84",
    "wgs84_to_utm",
    # Polynomial grids
    "dutch_rd_to_wgs84",
    "swiss_to_wgs84",
]
