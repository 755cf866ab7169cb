"""
Coordinate Reference System (CRS) engine.

This module provides:
- A catalog of known CRSs with lookup and search
- Conversion between projected coordinates and WGS84 longitude/latitude
- CRS detection from raw drawing coordinates
- UTM zone utilities and geodesic distance
"""

from georef.core.crs.catalog import CrsCatalog, load_catalog_file
from georef.core.crs.detector import candidate_crs, detect_crs, detect_crs_from_points
from georef.core.crs.geodesic import vincenty_distance
from georef.core.crs.parser import (
    extract_conic_zone,
    extract_ntf_variant,
    extract_utm_zone,
    resolve_projection,
)
from georef.core.crs.service import CoordinateService
from georef.core.crs.transformer import (
    round_trip_error,
    to_geographic,
    to_geographic_batch,
    to_projected,
    to_projected_batch,
    validate_round_trip_accuracy,
)
from georef.core.crs.utm import (
    calculate_utm_central_meridian,
    detect_utm_zone,
    format_utm_zone,
    get_utm_epsg,
    zone_from_meridian,
)

__all__ = [
    # Catalog
    "CrsCatalog",
    "load_catalog_file",
    # Detector
    "candidate_crs",
    "detect_crs",
    "detect_crs_from_points",
    # Geodesy
    "vincenty_distance",
    # Parser
    "extract_conic_zone",
    "extract_ntf_variant",
    "extract_utm_zone",
    "resolve_projection",
    # Service
    "CoordinateService",
    # Transformer
    "round_trip_error",
    "to_geographic",
    "to_geographic_batch",
    "to_projected",
    "to_projected_batch",
    "validate_round_trip_accuracy",
    # UTM utilities
    "calculate_utm_central_meridian",
    "detect_utm_zone",
    "format_utm_zone",
    "get_utm_epsg",
    "zone_from_meridian",
]
