"""
Tests for the host-facing coordinate service.
"""

import json
import math
from pathlib import Path

import pytest

from georef.core.config import Settings
from georef.core.crs.catalog import CrsCatalog
from georef.core.crs.service import CoordinateService
from georef.core.errors import TransformationError


@pytest.fixture
def service() -> CoordinateService:
    """Service over the built-in catalog."""
    return CoordinateService(catalog=CrsCatalog(data_path=None))


class TestCoordinateService:
    """Tests for CoordinateService."""

    def test_lookup_and_convert(self, service: CoordinateService) -> None:
        """Test looking up a CRS and converting through it."""
        crs = service.get_by_code("RGF93.LAMB93")
        lon, lat = service.to_geographic(652709.4, 6862785.6, crs)
        assert lon == pytest.approx(2.3522, abs=1e-4)
        assert lat == pytest.approx(48.8566, abs=1e-4)

        x, y = service.to_projected(lon, lat, crs)
        assert math.hypot(x - 652709.4, y - 6862785.6) < 0.001

    def test_get_by_epsg(self, service: CoordinateService) -> None:
        """Test EPSG lookup."""
        assert service.get_by_epsg(2056).code == "CH1903+.LV95"
        assert service.get_by_epsg(0) is None

    def test_search(self, service: CoordinateService) -> None:
        """Test text search."""
        codes = [r.code for r in service.search("luxembourg")]
        assert codes == ["LUREF.Luxembourg-TM"]

    def test_missing_crs(self, service: CoordinateService) -> None:
        """Test conversions without a record raise."""
        with pytest.raises(TransformationError):
            service.to_geographic(1.0, 2.0, service.get_by_code("UNKNOWN"))

    def test_detect_point(self, service: CoordinateService) -> None:
        """Test single-point detection."""
        assert service.detect(1700000.0, 9200000.0).code == "RGF93.CC49"
        assert service.detect(10.0, 10.0) is None

    def test_detect_points(self, service: CoordinateService) -> None:
        """Test multi-point detection."""
        record = service.detect(points=[(0.0, 0.0), (652709.4, 6862785.6)])
        assert record.code == "RGF93.LAMB93"

    def test_detect_requires_input(self, service: CoordinateService) -> None:
        """Test detect() without coordinates is an error."""
        with pytest.raises(ValueError):
            service.detect()

    def test_detect_uses_settings_threshold(self) -> None:
        """Test the origin threshold comes from the service settings."""
        service = CoordinateService(
            catalog=CrsCatalog(data_path=None),
            settings=Settings(origin_threshold=10.0),
        )
        assert service.detect(500.0, 500.0) is not None

    def test_candidates(self, service: CoordinateService) -> None:
        """Test candidates are returned best first."""
        candidates = service.candidates(1200000.0, 7100000.0)
        assert isinstance(candidates, tuple)
        assert candidates[0].code == "RGF93.CC48"

    def test_vincenty_distance(self, service: CoordinateService) -> None:
        """Test the distance helper."""
        assert service.vincenty_distance(2.0, 48.0, 2.0, 48.0) == 0.0
        assert service.vincenty_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111319.49, abs=0.01)

    def test_default_catalog_reads_settings(self, tmp_path: Path) -> None:
        """Test the service builds its catalog from settings when none is given."""
        path = tmp_path / "crs.json"
        path.write_text(
            json.dumps([{"code": "RGF93.LAMB93", "epsg": 2154, "unit": "m"}]),
            encoding="utf-8",
        )

        service = CoordinateService(settings=Settings(catalog_path=path))

        assert len(service.catalog) == 1
        assert service.catalog.source == str(path)
