"""
Geodesic distance on the WGS84 ellipsoid (Vincenty inverse formula).
"""

import logging
import math

from georef.core.crs.ellipsoid import (
    DEG_TO_RAD,
    EARTH_FLATTENING,
    EARTH_RADIUS_EQUATORIAL,
    EARTH_RADIUS_POLAR,
    TOLERANCE,
    WGS84,
    meridional_arc,
)

logger = logging.getLogger(__name__)

VINCENTY_CONVERGENCE = 1e-12
VINCENTY_MAX_ITERATIONS = 200


def vincenty_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Compute the geodesic distance between two WGS84 points.

    Iterates on the difference in longitude on the auxiliary sphere until
    it changes by less than 1e-12 radians. Exactly antipodal points are
    half a meridian apart. Nearly antipodal points may not converge; they
    return NaN instead of raising.

    Args:
        lon1: Longitude of the first point in decimal degrees
        lat1: Latitude of the first point in decimal degrees
        lon2: Longitude of the second point in decimal degrees
        lat2: Latitude of the second point in decimal degrees

    Returns:
        Distance in meters, or ``math.nan`` if the iteration did not converge
    """
    if lon1 == lon2 and lat1 == lat2:
        return 0.0

    a = EARTH_RADIUS_EQUATORIAL
    b = EARTH_RADIUS_POLAR
    f = EARTH_FLATTENING

    big_l = (lon2 - lon1) * DEG_TO_RAD
    u1 = math.atan((1 - f) * math.tan(lat1 * DEG_TO_RAD))
    u2 = math.atan((1 - f) * math.tan(lat2 * DEG_TO_RAD))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = big_l
    for _ in range(VINCENTY_MAX_ITERATIONS):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2
            + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        if sin_sigma < TOLERANCE:
            if cos_sigma > 0:
                return 0.0
            # antipodal: the shortest line runs along a meridian through a pole
            logger.debug(
                f"Antipodal points ({lon1}, {lat1}) -> ({lon2}, {lat2}), "
                "using half the meridian length"
            )
            return 2 * meridional_arc(math.pi / 2, WGS84)

        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos2_alpha = 1 - sin_alpha * sin_alpha
        # equatorial line
        if abs(cos2_alpha) < TOLERANCE:
            cos_2sigma_m = 0.0
        else:
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos2_alpha

        c = f / 16 * cos2_alpha * (4 + f * (4 - 3 * cos2_alpha))
        lam_prev = lam
        lam = big_l + (1 - c) * f * sin_alpha * (
            sigma
            + c * sin_sigma * (cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
        )
        if abs(lam - lam_prev) <= VINCENTY_CONVERGENCE:
            break
    else:
        logger.debug(
            f"Vincenty did not converge after {VINCENTY_MAX_ITERATIONS} iterations "
            f"for ({lon1}, {lat1}) -> ({lon2}, {lat2})"
        )
        return math.nan

    u_sq = cos2_alpha * (a * a - b * b) / (b * b)
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = big_b * sin_sigma * (
        cos_2sigma_m
        + big_b
        / 4
        * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            - big_b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )

    return b * big_a * (sigma - delta_sigma)
