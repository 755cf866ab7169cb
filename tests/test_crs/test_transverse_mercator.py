"""
Tests for the Transverse Mercator codecs (UTM, Luxembourg, British grid).
"""

import math

import pytest

from georef.core.crs.codecs import transverse_mercator as tm
from georef.core.crs.ellipsoid import WGS84, meridional_arc
from georef.core.errors import ZoneOutOfRangeError


class TestUTM:
    """Tests for UTM conversions."""

    def test_zone_origin_north(self) -> None:
        """Test the equator on the central meridian of zone 31N."""
        assert tm.utm_to_wgs84(500000.0, 0.0, 31, True) == pytest.approx((3.0, 0.0))
        assert tm.utm_forward(3.0, 0.0, 31, True) == pytest.approx((500000.0, 0.0))

    def test_zone_origin_south(self) -> None:
        """Test southern zones use a 10 000 km false northing."""
        lon, lat = tm.utm_to_wgs84(500000.0, 10000000.0, 40, False)
        assert lon == pytest.approx(57.0)
        assert lat == pytest.approx(0.0, abs=1e-12)

    def test_paris_forward(self) -> None:
        """Test Paris projects into the expected zone 31N range."""
        easting, northing = tm.utm_forward(2.3522, 48.8566, 31)
        assert 440000 < easting < 460000
        assert 5400000 < northing < 5420000

    @pytest.mark.parametrize(
        "lon,lat,zone,northern",
        [
            (2.3522, 48.8566, 31, True),  # Paris
            (7.2620, 43.7102, 32, True),  # Nice
            (55.4500, -20.8800, 40, False),  # Saint-Denis, La Réunion
            (-61.5340, 16.2410, 20, True),  # Pointe-à-Pitre
        ],
    )
    def test_roundtrip_within_millimeter(
        self, lon: float, lat: float, zone: int, northern: bool
    ) -> None:
        """Test forward then inverse then forward is stable to 1 mm."""
        easting, northing = tm.utm_forward(lon, lat, zone, northern)
        lon_back, lat_back = tm.utm_to_wgs84(easting, northing, zone, northern)
        e2, n2 = tm.utm_forward(lon_back, lat_back, zone, northern)
        assert math.hypot(easting - e2, northing - n2) < 0.001
        assert lon_back == pytest.approx(lon, abs=1e-7)
        assert lat_back == pytest.approx(lat, abs=1e-7)

    def test_pole_returns_central_meridian(self) -> None:
        """Test a point at the pole maps to the central meridian."""
        params = tm.utm_params(31)
        _, northing = tm.tm_forward(3.0, 90.0, params)
        lon, lat = tm.tm_inverse(500000.0, northing, params)
        assert lon == 3.0
        assert lat == 90.0

    def test_pole_northing_is_quarter_meridian(self) -> None:
        """Test the northing of the pole is the scaled quarter meridian."""
        params = tm.utm_params(31)
        _, northing = tm.tm_forward(3.0, 90.0, params)
        expected = meridional_arc(math.pi / 2, WGS84) * params.scale_factor
        assert northing == pytest.approx(expected, abs=0.01)

    @pytest.mark.parametrize(
        "easting,northing",
        [
            (166000.0, 0.0),
            (166000.0, 5000000.0),
            (834000.0, 5000000.0),
            (166000.0, 9400000.0),
            (834000.0, 9400000.0),
        ],
    )
    def test_zone_edges_roundtrip(self, easting: float, northing: float) -> None:
        """Test grid points far from the central meridian survive a round trip."""
        lon, lat = tm.utm_to_wgs84(easting, northing, 31, True)
        e2, n2 = tm.utm_forward(lon, lat, 31, True)
        assert math.hypot(easting - e2, northing - n2) < 0.001

    def test_off_meridian_point_matches_published_value(self) -> None:
        """Test a point 3° off the central meridian against its UTM coordinates."""
        easting, northing = tm.utm_forward(0.0, 45.0, 31)
        assert easting == pytest.approx(263553.8, abs=0.5)
        assert northing == pytest.approx(4987329.5, abs=0.5)

    def test_invalid_zone(self) -> None:
        """Test zone numbers outside 1-60 are rejected."""
        with pytest.raises(ZoneOutOfRangeError):
            tm.utm_to_wgs84(500000.0, 0.0, 61)
        with pytest.raises(ValueError):
            tm.utm_forward(3.0, 45.0, 0)


class TestWgs84ToUtm:
    """Tests for automatic zone selection."""

    def test_paris(self) -> None:
        """Test Paris lands in zone 31N."""
        zone, easting, northing, northern = tm.wgs84_to_utm(2.3522, 48.8566)
        assert zone == 31
        assert northern is True
        assert (easting, northing) == pytest.approx(tm.utm_forward(2.3522, 48.8566, 31))

    def test_southern_hemisphere(self) -> None:
        """Test La Réunion lands in zone 40S."""
        zone, _, northing, northern = tm.wgs84_to_utm(55.45, -20.88)
        assert zone == 40
        assert northern is False
        assert 7600000 < northing < 7800000

    def test_norway_exception(self) -> None:
        """Test Bergen uses zone 32 instead of 31."""
        zone, _, _, _ = tm.wgs84_to_utm(5.32, 60.39)
        assert zone == 32

    def test_out_of_range(self) -> None:
        """Test invalid longitudes are rejected."""
        with pytest.raises(ValueError):
            tm.wgs84_to_utm(200.0, 45.0)


class TestLuxembourg:
    """Tests for LUREF / Luxembourg TM."""

    def test_false_origin(self) -> None:
        """Test the false origin maps to the natural origin."""
        lon, lat = tm.luxembourg_to_wgs84(80000.0, 100000.0)
        assert lon == pytest.approx(6.166666666667, abs=1e-9)
        assert lat == pytest.approx(49.833333333333, abs=1e-6)

    def test_luxembourg_city(self) -> None:
        """Test a point near Luxembourg City stays in the country."""
        lon, lat = tm.luxembourg_to_wgs84(77000.0, 75000.0)
        assert 5.7 < lon < 6.6
        assert 49.4 < lat < 50.2


class TestBritishNationalGrid:
    """Tests for OSGB36 / British National Grid."""

    def test_true_origin(self) -> None:
        """Test the true origin (2°W, 49°N) plus the datum offset."""
        lon, lat = tm.british_grid_to_wgs84(400000.0, -100000.0)
        assert lon == pytest.approx(-2.0 + tm.OSGB36_SHIFT_LON, abs=1e-9)
        assert lat == pytest.approx(49.0 + tm.OSGB36_SHIFT_LAT, abs=1e-6)

    def test_london(self) -> None:
        """Test a central London grid reference."""
        lon, lat = tm.british_grid_to_wgs84(530000.0, 180000.0)
        assert lon == pytest.approx(-0.13, abs=0.02)
        assert lat == pytest.approx(51.51, abs=0.02)
