"""
Tests for CRS code parsing and projection family resolution.
"""

import pytest

from georef.core.crs import parser
from georef.models.crs import CrsUnit, ProjectionFamily, ZoneInfo


class TestExtractConicZone:
    """Tests for CC zone extraction."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("RGF93.CC49", 49),
            ("RGF93.CC42", 42),
            ("cc44", 44),
            ("CC99", 99),
            ("NoZoneHere", 0),
            ("RGF93.CC", 0),
            ("", 0),
        ],
    )
    def test_extract(self, code: str, expected: int) -> None:
        """Test the two digits after CC are returned without range check."""
        assert parser.extract_conic_zone(code) == expected


class TestExtractUtmZone:
    """Tests for UTM zone and hemisphere extraction."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("UTM-32N", ZoneInfo(32, True)),
            ("UTM-10S", ZoneInfo(10, False)),
            ("WGS84.UTM-31N", ZoneInfo(31, True)),
            ("RGR92.UTM-zone-40S", ZoneInfo(40, False)),
            ("ETRS89.UTM-zone-33N", ZoneInfo(33, True)),
            ("UTM_20", ZoneInfo(20, True)),
        ],
    )
    def test_zone_from_code(self, code: str, expected: ZoneInfo) -> None:
        """Test zone and hemisphere come from the first numeric token."""
        assert parser.extract_utm_zone(code) == expected

    def test_out_of_range_token_is_ignored(self) -> None:
        """Test numbers outside 1-60 are not read as zones."""
        assert parser.extract_utm_zone("UTM-61N") == ZoneInfo(0, True)

    def test_central_meridian_fallback(self) -> None:
        """Test the zone is derived from the central meridian when absent."""
        assert parser.extract_utm_zone("UTM", central_meridian=3.0) == ZoneInfo(31, True)
        assert parser.extract_utm_zone("UTM", central_meridian=-63.0) == ZoneInfo(20, True)

    def test_south_token(self) -> None:
        """Test a standalone S token marks the southern hemisphere."""
        assert parser.extract_utm_zone("UTM-S", central_meridian=57.0) == ZoneInfo(40, False)

    def test_false_northing_forces_south(self) -> None:
        """Test a 10 000 km false northing always means southern."""
        info = parser.extract_utm_zone("UTM", central_meridian=45.0, false_northing=10000000.0)
        assert info == ZoneInfo(38, False)

        info = parser.extract_utm_zone("UTM-38N", false_northing=10000000.0)
        assert info == ZoneInfo(38, False)

    def test_undetermined(self) -> None:
        """Test a code without a zone and a zero meridian stays undetermined."""
        info = parser.extract_utm_zone("UTM")
        assert info.zone_number == 0
        assert not info.is_determined


class TestExtractNtfVariant:
    """Tests for NTF Lambert zone extraction."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("NTF.Lambert-1-ClrkIGN", "I"),
            ("NTF.Lambert-2-ClrkIGN", "II"),
            ("NTF.Lambert-2e-ClrkIGN", "IIE"),
            ("NTF.Lambert-3-ClrkIGN", "III"),
            ("NTF.Lambert-4-ClrkIGN", "IV"),
            ("NTF.ZONE-I", "I"),
            ("NTF.ZONE-II", "II"),
            ("NTF.ZONE-III", "III"),
            ("NTF.ZONE-IV", "IV"),
            ("NTF Lambert II etendu", "IIE"),
        ],
    )
    def test_from_code(self, code: str, expected: str) -> None:
        """Test digit and roman spellings."""
        assert parser.extract_ntf_variant(code) == expected

    def test_zone_ii_is_not_zone_i(self) -> None:
        """Test the roman II is never mistaken for I."""
        assert parser.extract_ntf_variant("NTF.ZONE-II") != "I"

    @pytest.mark.parametrize(
        "epsg,expected",
        [(27561, "I"), (27562, "II"), (27563, "III"), (27564, "IV"), (27572, "IIE")],
    )
    def test_epsg_fallback(self, epsg: int, expected: str) -> None:
        """Test the EPSG id decides when the code has no zone."""
        assert parser.extract_ntf_variant("NTF-LAMBERT", epsg) == expected

    def test_default_variant(self) -> None:
        """Test Lambert II étendu is the default."""
        assert parser.extract_ntf_variant("NTF-LAMBERT") == "IIE"


class TestResolveProjection:
    """Tests for projection family resolution."""

    @pytest.mark.parametrize(
        "code,epsg,family",
        [
            ("RGF93.LAMB93", 2154, ProjectionFamily.LAMBERT_93),
            ("ANYTHING", 2154, ProjectionFamily.LAMBERT_93),
            ("RGF93.CC49", 3949, ProjectionFamily.CONIC_ZONE),
            ("WGS84.UTM-31N", 32631, ProjectionFamily.UTM),
            ("NTF.Lambert-2e-ClrkIGN", 27572, ProjectionFamily.NTF_LAMBERT),
            ("CH1903.LV03", 21781, ProjectionFamily.SWISS),
            ("BD72.Belgian-Lambert-72", 31370, ProjectionFamily.BELGIAN_LAMBERT),
            ("LUREF.Luxembourg-TM", 2169, ProjectionFamily.LUXEMBOURG),
            ("Amersfoort.RD-New", 28992, ProjectionFamily.DUTCH_RD),
            ("OSGB36.British-National-Grid", 27700, ProjectionFamily.BRITISH_GRID),
            ("NAD83.MTM-zone-7", 32187, ProjectionFamily.APPROXIMATE),
            ("RDN2008.Italy-zone", 6875, ProjectionFamily.APPROXIMATE),
        ],
    )
    def test_family(self, code: str, epsg: int, family: ProjectionFamily) -> None:
        """Test each known code resolves to its family."""
        assert parser.resolve_projection(code, epsg)[0] == family

    def test_degrees_are_geographic(self) -> None:
        """Test a degree unit wins over every code rule."""
        family, _, _ = parser.resolve_projection("RGF93.LAMB93", 2154, CrsUnit.DEGREES)
        assert family == ProjectionFamily.GEOGRAPHIC

    def test_conic_zone_from_epsg(self) -> None:
        """Test the CC zone falls back on the EPSG id."""
        family, zone, _ = parser.resolve_projection("RGF93", 3946)
        assert family == ProjectionFamily.CONIC_ZONE
        assert zone == ZoneInfo(46, True)

    def test_invalid_conic_zone_falls_through(self) -> None:
        """Test an out-of-range CC zone does not select the conic family."""
        family, _, _ = parser.resolve_projection("XCC99", 0)
        assert family == ProjectionFamily.APPROXIMATE

    def test_utm_zone_and_hemisphere(self) -> None:
        """Test UTM records carry their zone."""
        family, zone, _ = parser.resolve_projection(
            "RGR92.UTM-zone-40S", 2975, central_meridian=57.0, false_northing=10000000.0
        )
        assert family == ProjectionFamily.UTM
        assert zone == ZoneInfo(40, False)

    def test_undetermined_utm_zone_falls_through(self) -> None:
        """Test a UTM code without any zone information is approximated."""
        family, _, _ = parser.resolve_projection("CUSTOM.UTM", 0)
        assert family == ProjectionFamily.APPROXIMATE

    @pytest.mark.parametrize(
        "code,epsg,variant",
        [
            ("CH1903.LV03", 21781, "LV03"),
            ("CH1903+.LV95", 2056, "LV95"),
            ("BD72.Belgian-Lambert-72", 31370, "72"),
            ("ETRS89.Belgian-Lambert-2008", 3812, "2008"),
            ("NTF.Lambert-4-ClrkIGN", 27564, "IV"),
        ],
    )
    def test_variants(self, code: str, epsg: int, variant: str) -> None:
        """Test variant keys for multi-variant families."""
        assert parser.resolve_projection(code, epsg)[2] == variant

    def test_unknown_code(self) -> None:
        """Test unknown codes use the affine approximation."""
        assert parser.resolve_projection("SOMETHING.ELSE")[0] == ProjectionFamily.APPROXIMATE
