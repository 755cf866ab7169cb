"""
Host-facing coordinate service.

Bundles a catalog with the conversion, detection and distance helpers so a
host application holds one object instead of threading the catalog through
every call.
"""

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from georef.core.config import Settings, settings as default_settings
from georef.core.crs.catalog import CrsCatalog
from georef.core.crs.detector import candidate_crs, detect_crs, detect_crs_from_points
from georef.core.crs.geodesic import vincenty_distance
from georef.core.crs.transformer import to_geographic, to_projected
from georef.models.crs import CrsRecord


class CoordinateService:
    """
    Coordinate conversion service bound to one CRS catalog.

    Example:
        >>> service = CoordinateService()
        >>> crs = service.get_by_code("RGF93.LAMB93")
        >>> service.to_geographic(652709.4, 6862785.6, crs)
        (2.35..., 48.85...)
    """

    def __init__(
        self,
        catalog: Optional[CrsCatalog] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            catalog: Catalog to use; a new one reading ``settings.catalog_path``
                is created when omitted
            settings: Settings overriding the module defaults
        """
        self.settings = settings if settings is not None else default_settings
        self.catalog = catalog if catalog is not None else CrsCatalog(self.settings.catalog_path)

    # Conversions

    def to_geographic(self, x: float, y: float, crs: Optional[CrsRecord]) -> Tuple[float, float]:
        """Convert projected coordinates to (longitude, latitude)."""
        return to_geographic(x, y, crs)

    def to_projected(
        self, longitude: float, latitude: float, crs: Optional[CrsRecord]
    ) -> Tuple[float, float]:
        """Convert (longitude, latitude) to projected coordinates."""
        return to_projected(longitude, latitude, crs)

    # Catalog lookups

    def get_by_code(self, code: Optional[str]) -> Optional[CrsRecord]:
        return self.catalog.get_by_code(code)

    def get_by_epsg(self, epsg: int) -> Optional[CrsRecord]:
        return self.catalog.get_by_epsg(epsg)

    def search(self, text: Optional[str]) -> Iterator[CrsRecord]:
        return self.catalog.search(text)

    # Detection

    def detect(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        points: Optional[Iterable[Sequence[float]]] = None,
    ) -> Optional[CrsRecord]:
        """
        Guess the CRS of a point or of a set of points.

        Args:
            x: Easting of a single point
            y: Northing of a single point
            points: Iterable of (x, y) pairs, used instead of x/y when given

        Returns:
            The best matching record, or None

        Raises:
            ValueError: If neither a point nor a point list is given
        """
        threshold = self.settings.origin_threshold
        if points is not None:
            return detect_crs_from_points(self.catalog, points, threshold=threshold)
        if x is None or y is None:
            raise ValueError("detect() needs x and y, or points")
        return detect_crs(self.catalog, x, y, threshold=threshold)

    def candidates(self, x: float, y: float) -> Tuple[CrsRecord, ...]:
        """All records whose extent contains a point, best first."""
        return tuple(candidate_crs(self.catalog, x, y))

    # Geodesy

    def vincenty_distance(self, lon1: float, lat1: float, lon2: float, lat2: float) -> float:
        """Geodesic distance in meters between two WGS84 points, NaN if it does not converge."""
        return vincenty_distance(lon1, lat1, lon2, lat2)
