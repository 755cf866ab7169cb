"""
Dutch Amersfoort / RD New grid to WGS84.

Polynomial approximation of the RD to geographic conversion with the
published Schreutelkamp and Strang van Hees coefficients. Good to about a
meter inside the Netherlands.
"""

from typing import Tuple

RD_ORIGIN_X = 155000.0
RD_ORIGIN_Y = 463000.0
RD_ORIGIN_LAT = 52.15517440
RD_ORIGIN_LON = 5.38720621

# (power of dX, power of dY, coefficient in arc-seconds)
_LATITUDE_TERMS = (
    (0, 1, 3235.65389),
    (2, 0, -32.58297),
    (0, 2, -0.24750),
    (2, 1, -0.84978),
    (0, 3, -0.06550),
    (2, 2, -0.01709),
    (1, 0, -0.00738),
    (4, 0, 0.00530),
    (2, 3, -0.00039),
    (4, 1, 0.00033),
    (1, 1, -0.00012),
)

_LONGITUDE_TERMS = (
    (1, 0, 5260.52916),
    (1, 1, 105.94684),
    (1, 2, 2.45656),
    (3, 0, -0.81885),
    (1, 3, 0.05594),
    (3, 1, -0.05607),
    (0, 1, 0.01199),
    (3, 2, -0.00256),
    (1, 4, 0.00128),
    (0, 2, 0.00022),
    (2, 0, -0.00022),
    (5, 0, 0.00026),
)


def dutch_rd_to_wgs84(x: float, y: float) -> Tuple[float, float]:
    """
    Convert RD New coordinates to WGS84 longitude/latitude.

    Args:
        x: Easting in meters
        y: Northing in meters

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    dx = (x - RD_ORIGIN_X) * 1e-5
    dy = (y - RD_ORIGIN_Y) * 1e-5

    lat_seconds = sum(k * dx ** p * dy ** q for p, q, k in _LATITUDE_TERMS)
    lon_seconds = sum(k * dx ** p * dy ** q for p, q, k in _LONGITUDE_TERMS)

    return (RD_ORIGIN_LON + lon_seconds / 3600, RD_ORIGIN_LAT + lat_seconds / 3600)
