"""
UTM zone helpers.

Zone numbering, central meridians and EPSG ids for the Universal Transverse
Mercator grid. The projection math itself lives in
``georef.core.crs.codecs.transverse_mercator``.
"""

import math
from typing import Tuple

from georef.core.errors import ZoneOutOfRangeError

UTM_ZONE_MIN = 1
UTM_ZONE_MAX = 60
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING_SOUTH = 10000000.0


def _check_zone(zone_number: int) -> None:
    if not UTM_ZONE_MIN <= zone_number <= UTM_ZONE_MAX:
        raise ZoneOutOfRangeError(zone_number, UTM_ZONE_MIN, UTM_ZONE_MAX, "UTM")


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, bool]:
    """
    Detect the appropriate UTM zone for given WGS84 coordinates.

    UTM zones are numbered from 1 to 60, each covering 6 degrees of longitude.
    Zone 1 starts at 180°W. The hemisphere (north/south) is determined by latitude.

    Special cases:
    - Norway: Uses zone 32V instead of 31V for some areas
    - Svalbard: Uses zones 31X, 33X, 35X and 37X only

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, is_northern_hemisphere)

    Raises:
        ValueError: If coordinates are out of valid range
    """
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")

    is_northern = latitude >= 0

    zone_number = int((longitude + 180) / 6) + 1

    # 180° belongs to zone 1
    if zone_number > UTM_ZONE_MAX:
        zone_number = 1

    # Norway
    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        zone_number = 32

    # Svalbard
    if 72.0 <= latitude < 84.0:
        if 0.0 <= longitude < 9.0:
            zone_number = 31
        elif 9.0 <= longitude < 21.0:
            zone_number = 33
        elif 21.0 <= longitude < 33.0:
            zone_number = 35
        elif 33.0 <= longitude < 42.0:
            zone_number = 37

    return zone_number, is_northern


def zone_from_meridian(central_meridian: float) -> int:
    """
    Derive the UTM zone whose band contains a central meridian.

    Args:
        central_meridian: Longitude in decimal degrees

    Returns:
        Zone number (1-60)
    """
    zone_number = int(math.floor((central_meridian + 180) / 6)) + 1
    return min(max(zone_number, UTM_ZONE_MIN), UTM_ZONE_MAX)


def get_utm_epsg(zone_number: int, is_northern: bool) -> int:
    """
    Get the WGS84 EPSG code of a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)
        is_northern: True for northern hemisphere, False for southern

    Returns:
        EPSG code (326xx north, 327xx south)

    Raises:
        ZoneOutOfRangeError: If zone_number is out of valid range
    """
    _check_zone(zone_number)
    return (32600 if is_northern else 32700) + zone_number


def calculate_utm_central_meridian(zone_number: int) -> float:
    """
    Calculate the central meridian for a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        ZoneOutOfRangeError: If zone_number is out of valid range
    """
    _check_zone(zone_number)
    return -180.0 + (zone_number - 1) * 6 + 3


def format_utm_zone(zone_number: int, is_northern: bool) -> str:
    """Format a UTM zone as a string, e.g. "31N" or "40S"."""
    return f"{zone_number}{'N' if is_northern else 'S'}"
