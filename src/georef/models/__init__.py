"""
Data models and schemas.
"""

from .crs import (
    UNDETERMINED_ZONE,
    BoundingBox,
    CrsRecord,
    CrsUnit,
    ProjectionFamily,
    ZoneInfo,
)

__all__ = [
    "UNDETERMINED_ZONE",
    "BoundingBox",
    "CrsRecord",
    "CrsUnit",
    "ProjectionFamily",
    "ZoneInfo",
]
