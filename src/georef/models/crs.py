"""
Data models for coordinate reference system (CRS) records.

This module defines the catalog record describing one projected or
geographic CRS, its typical coordinate extent, and the projection-family tag
used to route conversions to the right codec.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CrsUnit(str, Enum):
    """Unit of the coordinates expressed in a CRS."""

    METRIC = "m"
    DEGREES = "deg"


_UNIT_ALIASES: Dict[str, CrsUnit] = {
    "m": CrsUnit.METRIC,
    "metre": CrsUnit.METRIC,
    "meter": CrsUnit.METRIC,
    "meters": CrsUnit.METRIC,
    "metres": CrsUnit.METRIC,
    "metric": CrsUnit.METRIC,
    "deg": CrsUnit.DEGREES,
    "degree": CrsUnit.DEGREES,
    "degrees": CrsUnit.DEGREES,
    "geographic-degrees": CrsUnit.DEGREES,
}


class ProjectionFamily(str, Enum):
    """Projection algorithm used to convert a CRS to and from WGS84."""

    LAMBERT_93 = "lambert_93"
    CONIC_ZONE = "conic_zone"
    UTM = "utm"
    NTF_LAMBERT = "ntf_lambert"
    SWISS = "swiss"
    BELGIAN_LAMBERT = "belgian_lambert"
    LUXEMBOURG = "luxembourg"
    DUTCH_RD = "dutch_rd"
    BRITISH_GRID = "british_grid"
    GEOGRAPHIC = "geographic"
    APPROXIMATE = "approximate"


class ZoneInfo(NamedTuple):
    """Zone number and hemisphere extracted from a CRS code.

    ``zone_number == 0`` means the zone could not be determined.
    """

    zone_number: int
    is_northern: bool = True

    @property
    def is_determined(self) -> bool:
        return self.zone_number != 0


UNDETERMINED_ZONE = ZoneInfo(0, True)


class BoundingBox(BaseModel):
    """
    Typical coordinate extent of a CRS.

    Used by detection heuristics only; conversions never reject points
    outside it.

    Attributes:
        min_x: Minimum X coordinate (or longitude)
        min_y: Minimum Y coordinate (or latitude)
        max_x: Maximum X coordinate (or longitude)
        max_y: Maximum Y coordinate (or latitude)
    """

    model_config = ConfigDict(frozen=True)

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @model_validator(mode="after")
    def validate_extent(self) -> "BoundingBox":
        """Reject inverted rectangles."""
        if self.min_x > self.max_x:
            raise ValueError(f"min_x ({self.min_x}) must be <= max_x ({self.max_x})")
        if self.min_y > self.max_y:
            raise ValueError(f"min_y ({self.min_y}) must be <= max_y ({self.max_y})")
        return self

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
        )

    def contains(self, x: float, y: float) -> bool:
        """
        Check if a point lies within the box, edges included.

        Args:
            x: X coordinate (or longitude)
            y: Y coordinate (or latitude)

        Returns:
            True if the point is within bounds
        """
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


# Input keys are matched case-insensitively with underscores removed, so the
# external catalog shape ("CentralMeridian", "MinX") validates as well.
_FIELD_KEYS: Dict[str, str] = {
    "code": "code",
    "name": "name",
    "country": "country",
    "region": "region",
    "description": "description",
    "epsg": "epsg",
    "unit": "unit",
    "centralmeridian": "central_meridian",
    "latitudeorigin": "latitude_origin",
    "falseeasting": "false_easting",
    "falsenorthing": "false_northing",
    "bounds": "bounds",
    "family": "family",
    "zone": "zone",
    "variant": "variant",
}

_BOUNDS_KEYS: Dict[str, str] = {
    "minx": "min_x",
    "maxx": "max_x",
    "miny": "min_y",
    "maxy": "max_y",
}


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class CrsRecord(BaseModel):
    """
    Description of one coordinate reference system.

    ``family``, ``zone`` and ``variant`` are resolved once from the code and
    EPSG id when the record is built, so conversions dispatch on the tag
    instead of re-reading the code string.

    Attributes:
        code: Human-readable identifier, e.g. "RGF93.CC49"
        name: Display name
        country: Main country of use
        region: Region or area of use
        description: Free-text description
        epsg: EPSG identifier, 0 when unknown
        unit: Coordinate unit
        central_meridian: Central meridian in degrees
        latitude_origin: Latitude of origin in degrees
        false_easting: False easting in meters
        false_northing: False northing in meters
        bounds: Typical coordinate extent
        family: Projection family used for conversions
        zone: Zone number and hemisphere for zoned families
        variant: Family-specific variant key (e.g. "LV95", "2008", "IIE")
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "code": "RGF93.LAMB93",
                "name": "RGF93 / Lambert 93",
                "country": "France",
                "region": "France métropolitaine",
                "epsg": 2154,
                "unit": "m",
                "central_meridian": 3.0,
                "latitude_origin": 46.5,
                "false_easting": 700000,
                "false_northing": 6600000,
                "bounds": {
                    "min_x": 100000,
                    "max_x": 1200000,
                    "min_y": 6000000,
                    "max_y": 7200000,
                },
            }
        },
    )

    code: str = Field(..., description="Human-readable CRS identifier")
    name: str = Field(default="", description="Display name")
    country: str = Field(default="", description="Main country of use")
    region: str = Field(default="", description="Region or area of use")
    description: str = Field(default="", description="Free-text description")
    epsg: int = Field(default=0, description="EPSG identifier, 0 if unknown", ge=0)
    unit: CrsUnit = Field(default=CrsUnit.METRIC, description="Coordinate unit")
    central_meridian: float = Field(default=0.0, description="Central meridian (degrees)")
    latitude_origin: float = Field(default=0.0, description="Latitude of origin (degrees)")
    false_easting: float = Field(default=0.0, description="False easting (meters)")
    false_northing: float = Field(default=0.0, description="False northing (meters)")
    bounds: BoundingBox = Field(default_factory=BoundingBox, description="Typical extent")
    family: ProjectionFamily = Field(
        default=ProjectionFamily.APPROXIMATE, description="Projection family"
    )
    zone: ZoneInfo = Field(default=UNDETERMINED_ZONE, description="Zone and hemisphere")
    variant: str = Field(default="", description="Family-specific variant key")

    @model_validator(mode="before")
    @classmethod
    def normalize_input(cls, data: Any) -> Any:
        """Fold external key spellings and resolve the projection family."""
        if not isinstance(data, dict):
            return data

        normalized: Dict[str, Any] = {}
        bounds: Dict[str, Any] = {}
        for key, value in data.items():
            squashed = str(key).replace("_", "").lower()
            if squashed in _FIELD_KEYS:
                normalized[_FIELD_KEYS[squashed]] = value
            elif squashed in _BOUNDS_KEYS:
                bounds[_BOUNDS_KEYS[squashed]] = value

        if bounds and "bounds" not in normalized:
            normalized["bounds"] = bounds

        from georef.core.crs.parser import resolve_projection

        family, zone, variant = resolve_projection(
            code=str(normalized.get("code", "")),
            epsg=_as_int(normalized.get("epsg", 0)),
            unit=_coerce_unit(normalized.get("unit", CrsUnit.METRIC)),
            central_meridian=_as_float(normalized.get("central_meridian", 0.0)),
            false_northing=_as_float(normalized.get("false_northing", 0.0)),
        )
        normalized.setdefault("family", family)
        normalized.setdefault("zone", zone)
        normalized.setdefault("variant", variant)
        return normalized

    @model_validator(mode="after")
    def validate_zone(self) -> "CrsRecord":
        """Zoned families must carry a zone their codec accepts."""
        from georef.core.crs.codecs.lambert import CONIC_ZONE_MAX, CONIC_ZONE_MIN
        from georef.core.crs.utm import UTM_ZONE_MAX, UTM_ZONE_MIN

        limits = {
            ProjectionFamily.CONIC_ZONE: (CONIC_ZONE_MIN, CONIC_ZONE_MAX),
            ProjectionFamily.UTM: (UTM_ZONE_MIN, UTM_ZONE_MAX),
        }
        if self.family in limits:
            low, high = limits[self.family]
            if not low <= self.zone.zone_number <= high:
                raise ValueError(
                    f"{self.family.value} record {self.code!r} needs a zone between "
                    f"{low} and {high}, got {self.zone.zone_number}"
                )
        return self

    @field_validator("unit", mode="before")
    @classmethod
    def validate_unit(cls, v: Any) -> Any:
        """Accept the unit aliases used by external catalogs."""
        return _coerce_unit(v)

    @property
    def display_name(self) -> str:
        return f"{self.name} [{self.code}]"

    @property
    def is_geographic(self) -> bool:
        return self.unit == CrsUnit.DEGREES

    def contains_point(self, x: float, y: float) -> bool:
        """Check whether a point lies within this CRS's typical extent."""
        return self.bounds.contains(x, y)

    def __str__(self) -> str:
        return self.display_name


def _coerce_unit(value: Any) -> Any:
    if isinstance(value, CrsUnit):
        return value
    if isinstance(value, str):
        return _UNIT_ALIASES.get(value.strip().lower(), value)
    return value
