"""
Swiss CH1903 / CH1903+ grid to WGS84.

Uses the swisstopo approximate polynomial, good to about one meter over
Switzerland.
"""

from typing import Dict, Tuple

# (false easting, false northing) of the Bern origin per frame
SWISS_ORIGINS: Dict[str, Tuple[float, float]] = {
    "LV03": (600000.0, 200000.0),
    "LV95": (2600000.0, 1200000.0),
}

SWISS_DEFAULT_VARIANT = "LV03"


def swiss_to_wgs84(x: float, y: float, variant: str = SWISS_DEFAULT_VARIANT) -> Tuple[float, float]:
    """
    Convert Swiss grid coordinates to WGS84 longitude/latitude.

    Args:
        x: Easting (Y in Swiss notation) in meters
        y: Northing (X in Swiss notation) in meters
        variant: "LV03" or "LV95"; anything else is read as LV03

    Returns:
        Tuple of (longitude, latitude) in decimal degrees
    """
    origin_e, origin_n = SWISS_ORIGINS.get(variant.upper(), SWISS_ORIGINS[SWISS_DEFAULT_VARIANT])

    # auxiliary values in units of 1000 km
    y_aux = (x - origin_e) / 1000000
    x_aux = (y - origin_n) / 1000000

    lon = (
        2.6779094
        + 4.728982 * y_aux
        + 0.791484 * y_aux * x_aux
        + 0.1306 * y_aux * x_aux * x_aux
        - 0.0436 * y_aux * y_aux * y_aux
    )
    lat = (
        16.9023892
        + 3.238272 * x_aux
        - 0.270978 * y_aux * y_aux
        - 0.002528 * x_aux * x_aux
        - 0.0447 * y_aux * y_aux * x_aux
        - 0.0140 * x_aux * x_aux * x_aux
    )

    # 10000" units to degrees
    return (lon * 100 / 36, lat * 100 / 36)
