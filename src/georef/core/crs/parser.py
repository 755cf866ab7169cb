"""
CRS code parsing.

Turns a catalog code such as "RGF93.CC49", "WGS84.UTM-40S" or
"NTF.Lambert-2e-ClrkIGN" (plus its EPSG id) into the projection family,
zone and variant used to dispatch conversions. Matching is done on the
upper-cased code with a fixed priority order; the first rule that applies
wins.
"""

import logging
import re
from typing import Tuple

from georef.core.crs.codecs.lambert import CONIC_ZONE_MAX, CONIC_ZONE_MIN, NTF_DEFAULT_VARIANT
from georef.core.crs.utm import (
    UTM_FALSE_NORTHING_SOUTH,
    UTM_ZONE_MAX,
    UTM_ZONE_MIN,
    zone_from_meridian,
)
from georef.models.crs import UNDETERMINED_ZONE, CrsUnit, ProjectionFamily, ZoneInfo

logger = logging.getLogger(__name__)

CONIC_ZONE_EPSG_MIN = 3942
CONIC_ZONE_EPSG_MAX = 3950

_CONIC_ZONE_PATTERN = re.compile(r"CC(\d{2})(?!\d)", re.IGNORECASE)
_NTF_ZONE_PATTERN = re.compile(r"(?:LAMBERT|ZONE)[-_ ]?(IV|III|II|I|[1-4])(E?)(?![A-Z0-9])")
_TOKEN_SEPARATORS = re.compile(r"[-_]")

_NTF_EPSG_VARIANTS = {
    27561: "I",
    27562: "II",
    27563: "III",
    27564: "IV",
    27572: "IIE",
}
_NTF_DIGIT_TO_ROMAN = {"1": "I", "2": "II", "3": "III", "4": "IV"}


def extract_conic_zone(code: str) -> int:
    """
    Extract the CC zone number from a code.

    Args:
        code: CRS code, e.g. "RGF93.CC49" or "cc44"

    Returns:
        The two digits following "CC", or 0 if there are none. The value is
        not range-checked.
    """
    match = _CONIC_ZONE_PATTERN.search(code or "")
    return int(match.group(1)) if match else 0


def extract_utm_zone(
    code: str,
    central_meridian: float = 0.0,
    false_northing: float = 0.0,
) -> ZoneInfo:
    """
    Extract the UTM zone and hemisphere from a code.

    The code is split on '-' and '_'; the first token that is a number in
    1-60 once a trailing 'N'/'S' is stripped gives the zone, and a trailing
    'S' marks the southern hemisphere. When no such token exists the zone is
    derived from a non-zero central meridian. A false northing of 10 000 km
    or more always means southern.

    Args:
        code: CRS code, e.g. "WGS84.UTM-31N" or "RGR92.UTM-zone-40S"
        central_meridian: Central meridian of the record in degrees
        false_northing: False northing of the record in meters

    Returns:
        ZoneInfo; zone_number is 0 when the zone could not be determined
    """
    zone = 0
    northern = True

    tokens = [t for t in _TOKEN_SEPARATORS.split((code or "").upper()) if t]
    for token in tokens:
        stripped = token.rstrip("NS")
        if stripped.isdigit() and UTM_ZONE_MIN <= int(stripped) <= UTM_ZONE_MAX:
            zone = int(stripped)
            northern = not token.endswith("S")
            break
    else:
        if any(t in ("S", "SOUTH") for t in tokens):
            northern = False

    if zone == 0 and central_meridian != 0:
        zone = zone_from_meridian(central_meridian)

    if false_northing >= UTM_FALSE_NORTHING_SOUTH:
        northern = False

    return ZoneInfo(zone, northern)


def extract_ntf_variant(code: str, epsg: int = 0) -> str:
    """
    Determine which NTF Lambert zone a code refers to.

    Recognizes "Lambert-1".."Lambert-4", "Lambert-2e" and the roman
    "Zone-I".."Zone-IV" spellings; "Zone-II" never matches zone I. Falls
    back on the EPSG id, then on Lambert II étendu.

    Returns:
        One of "I", "II", "IIE", "III", "IV"
    """
    upper = (code or "").upper()
    match = _NTF_ZONE_PATTERN.search(upper)
    if match:
        zone = _NTF_DIGIT_TO_ROMAN.get(match.group(1), match.group(1))
        extended = bool(match.group(2)) or "ETENDU" in upper
        if zone == "II" and extended:
            return "IIE"
        return zone

    return _NTF_EPSG_VARIANTS.get(epsg, NTF_DEFAULT_VARIANT)


def resolve_projection(
    code: str,
    epsg: int = 0,
    unit: CrsUnit = CrsUnit.METRIC,
    central_meridian: float = 0.0,
    false_northing: float = 0.0,
) -> Tuple[ProjectionFamily, ZoneInfo, str]:
    """
    Resolve the projection family of a CRS from its code and EPSG id.

    Args:
        code: CRS code
        epsg: EPSG id, 0 when unknown
        unit: Coordinate unit of the record
        central_meridian: Central meridian in degrees (UTM zone fallback)
        false_northing: False northing in meters (UTM hemisphere)

    Returns:
        Tuple of (family, zone, variant). ``zone`` is only determined for
        CONIC_ZONE and UTM; ``variant`` is only set for NTF_LAMBERT, SWISS and
        BELGIAN_LAMBERT.
    """
    if unit == CrsUnit.DEGREES:
        return (ProjectionFamily.GEOGRAPHIC, UNDETERMINED_ZONE, "")

    upper = (code or "").upper()

    if "LAMB93" in upper or epsg == 2154:
        return (ProjectionFamily.LAMBERT_93, UNDETERMINED_ZONE, "")

    if "CC" in upper or CONIC_ZONE_EPSG_MIN <= epsg <= CONIC_ZONE_EPSG_MAX:
        zone = extract_conic_zone(upper)
        if zone == 0 and CONIC_ZONE_EPSG_MIN <= epsg <= CONIC_ZONE_EPSG_MAX:
            zone = epsg - 3900
        if CONIC_ZONE_MIN <= zone <= CONIC_ZONE_MAX:
            return (ProjectionFamily.CONIC_ZONE, ZoneInfo(zone, True), "")
        logger.debug(f"No valid CC zone in '{code}' (got {zone}), trying other families")

    if "UTM" in upper:
        zone_info = extract_utm_zone(upper, central_meridian, false_northing)
        if zone_info.is_determined:
            return (ProjectionFamily.UTM, zone_info, "")

    if ("NTF" in upper and "LAMBERT" in upper) or epsg in _NTF_EPSG_VARIANTS:
        return (ProjectionFamily.NTF_LAMBERT, UNDETERMINED_ZONE, extract_ntf_variant(upper, epsg))

    if "CH1903" in upper or "LV03" in upper or "LV95" in upper:
        variant = "LV95" if "LV95" in upper or epsg == 2056 else "LV03"
        return (ProjectionFamily.SWISS, UNDETERMINED_ZONE, variant)

    if "BELGIAN" in upper or "BD72" in upper or epsg in (31370, 3812):
        variant = "2008" if epsg == 3812 or "2008" in upper else "72"
        return (ProjectionFamily.BELGIAN_LAMBERT, UNDETERMINED_ZONE, variant)

    if "LUREF" in upper or "LUXEMBOURG" in upper or epsg == 2169:
        return (ProjectionFamily.LUXEMBOURG, UNDETERMINED_ZONE, "")

    if "AMERSFOORT" in upper or "RD-NEW" in upper or epsg == 28992:
        return (ProjectionFamily.DUTCH_RD, UNDETERMINED_ZONE, "")

    if "OSGB" in upper or "BRITISH" in upper or epsg == 27700:
        return (ProjectionFamily.BRITISH_GRID, UNDETERMINED_ZONE, "")

    return (ProjectionFamily.APPROXIMATE, UNDETERMINED_ZONE, "")
