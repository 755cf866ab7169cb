"""
CRS detection from raw coordinates.

Guesses which catalog CRS a drawing uses from the magnitude of its
coordinates: a point is matched against the typical extent of every metric
record. Regional conic zones are preferred over Lambert-93 where both
extents overlap, since a drawing in CCxx coordinates would otherwise be read
as a national-grid one.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from georef.core.config import settings
from georef.core.crs.catalog import CrsCatalog
from georef.models.crs import CrsRecord, ProjectionFamily

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _threshold(threshold: Optional[float]) -> float:
    return settings.origin_threshold if threshold is None else threshold


def _near_origin(x: float, y: float, threshold: float) -> bool:
    return abs(x) <= threshold and abs(y) <= threshold


def _priority(record: CrsRecord) -> Tuple[bool, bool, str]:
    return (
        record.family != ProjectionFamily.CONIC_ZONE,
        record.family != ProjectionFamily.LAMBERT_93,
        record.code,
    )


def candidate_crs(catalog: CrsCatalog, x: float, y: float) -> List[CrsRecord]:
    """
    List every metric CRS whose typical extent contains a point.

    Args:
        catalog: Catalog to search
        x: Easting
        y: Northing

    Returns:
        Matching records, conic zones first, then Lambert-93, then by code
    """
    matches = [
        record
        for record in catalog.records
        if not record.is_geographic and record.contains_point(x, y)
    ]
    return sorted(matches, key=_priority)


def detect_crs(
    catalog: CrsCatalog,
    x: float,
    y: float,
    threshold: Optional[float] = None,
) -> Optional[CrsRecord]:
    """
    Guess the CRS of a projected point.

    Points within ``threshold`` of the origin on both axes are treated as
    local drawing coordinates and never matched.

    Args:
        catalog: Catalog to search
        x: Easting
        y: Northing
        threshold: Origin window half-size, defaults to
            ``settings.origin_threshold``

    Returns:
        The best matching record, or None
    """
    if _near_origin(x, y, _threshold(threshold)):
        logger.debug(f"Point ({x}, {y}) is near the origin, no CRS detected")
        return None

    candidates = candidate_crs(catalog, x, y)
    if not candidates:
        logger.debug(f"No CRS extent contains ({x}, {y})")
        return None

    best = candidates[0]
    logger.debug(
        f"Detected {best.code} for ({x}, {y}) among {len(candidates)} candidates"
    )
    return best


def detect_crs_from_points(
    catalog: CrsCatalog,
    points: Iterable[Sequence[float]],
    threshold: Optional[float] = None,
) -> Optional[CrsRecord]:
    """
    Guess the CRS of a set of projected points.

    Points near the origin are discarded and the mean of the remaining ones
    is matched with ``detect_crs``.

    Args:
        catalog: Catalog to search
        points: Iterable of (x, y) pairs
        threshold: Origin window half-size, defaults to
            ``settings.origin_threshold``

    Returns:
        The best matching record, or None if no point is usable
    """
    limit = _threshold(threshold)
    usable = [
        (float(p[0]), float(p[1]))
        for p in points
        if not _near_origin(float(p[0]), float(p[1]), limit)
    ]
    if not usable:
        return None

    mean_x, mean_y = np.asarray(usable, dtype=float).mean(axis=0)
    return detect_crs(catalog, float(mean_x), float(mean_y), threshold=limit)
