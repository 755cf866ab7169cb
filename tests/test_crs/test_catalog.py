"""
Tests for the CRS catalog.
"""

import inspect
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List

import pytest

from georef.core.config import settings
from georef.core.crs import catalog as catalog_module
from georef.core.crs.catalog import CrsCatalog, load_catalog_file
from georef.core.errors import CatalogError, ConfigurationError
from georef.models.crs import ProjectionFamily, ZoneInfo


def _write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _sample_rows() -> List[Dict[str, Any]]:
    return [
        {
            "code": "RGF93.LAMB93",
            "name": "RGF93 / Lambert 93",
            "country": "France",
            "epsg": 2154,
            "unit": "m",
            "central_meridian": 3.0,
            "latitude_origin": 46.5,
            "false_easting": 700000,
            "false_northing": 6600000,
            "bounds": {"min_x": 100000, "max_x": 1200000, "min_y": 6000000, "max_y": 7200000},
        },
        {
            "Code": "RGF93.CC49",
            "Name": "RGF93 / CC49",
            "Country": "France",
            "Epsg": 3949,
            "Unit": "metre",
            "CentralMeridian": 3.0,
            "LatitudeOrigin": 49.0,
            "FalseEasting": 1700000,
            "FalseNorthing": 9200000,
            "MinX": 1200000,
            "MaxX": 2200000,
            "MinY": 9000000,
            "MaxY": 9400000,
        },
    ]


@pytest.fixture
def builtin_catalog() -> CrsCatalog:
    """Catalog backed by the compiled-in table."""
    return CrsCatalog(data_path=None)


class TestBuiltinCatalog:
    """Tests for the compiled-in table."""

    def test_record_count(self, builtin_catalog: CrsCatalog) -> None:
        """Test the built-in table size."""
        assert len(builtin_catalog) == 40
        assert builtin_catalog.source == "builtin"

    def test_records_is_immutable_tuple(self, builtin_catalog: CrsCatalog) -> None:
        """Test records are exposed as a tuple."""
        assert isinstance(builtin_catalog.records, tuple)

    def test_codes_are_unique(self, builtin_catalog: CrsCatalog) -> None:
        """Test no two records share a code."""
        codes = [r.code.upper() for r in builtin_catalog]
        assert len(codes) == len(set(codes))

    def test_every_family_is_resolved(self, builtin_catalog: CrsCatalog) -> None:
        """Test the expected family per record."""
        by_code = {r.code: r for r in builtin_catalog}
        assert by_code["RGF93.LAMB93"].family == ProjectionFamily.LAMBERT_93
        assert by_code["RGF93.CC42"].family == ProjectionFamily.CONIC_ZONE
        assert by_code["RGR92.UTM-zone-40S"].zone == ZoneInfo(40, False)
        assert by_code["NTF.Lambert-4-ClrkIGN"].variant == "IV"
        assert by_code["CH1903+.LV95"].variant == "LV95"
        assert by_code["LL84"].family == ProjectionFamily.GEOGRAPHIC
        assert by_code["NAD83.MTM-zone-8"].family == ProjectionFamily.APPROXIMATE

    def test_utm_records_match_their_meridian(self, builtin_catalog: CrsCatalog) -> None:
        """Test every UTM record's zone is consistent with its central meridian."""
        for record in builtin_catalog:
            if record.family == ProjectionFamily.UTM:
                expected_meridian = -180.0 + (record.zone.zone_number - 1) * 6 + 3
                assert record.central_meridian == expected_meridian, record.code


class TestLookups:
    """Tests for code, EPSG and text lookups."""

    def test_get_by_code_ignores_case(self, builtin_catalog: CrsCatalog) -> None:
        """Test case-insensitive code lookup."""
        record = builtin_catalog.get_by_code("rgf93.lamb93")
        assert record is not None
        assert record.epsg == 2154

    def test_get_by_code_strips_whitespace(self, builtin_catalog: CrsCatalog) -> None:
        """Test surrounding whitespace is ignored."""
        assert builtin_catalog.get_by_code("  RGF93.CC49 ") is not None

    @pytest.mark.parametrize("code", [None, "", "   ", "UNKNOWN.CRS"])
    def test_get_by_code_misses(self, builtin_catalog: CrsCatalog, code: Any) -> None:
        """Test blank and unknown codes return None."""
        assert builtin_catalog.get_by_code(code) is None

    def test_get_by_epsg(self, builtin_catalog: CrsCatalog) -> None:
        """Test EPSG lookup."""
        record = builtin_catalog.get_by_epsg(3949)
        assert record is not None
        assert record.code == "RGF93.CC49"

    @pytest.mark.parametrize("epsg", [0, -1, 999999])
    def test_get_by_epsg_misses(self, builtin_catalog: CrsCatalog, epsg: int) -> None:
        """Test non-positive and unknown ids return None."""
        assert builtin_catalog.get_by_epsg(epsg) is None

    def test_search_is_lazy(self, builtin_catalog: CrsCatalog) -> None:
        """Test search returns a generator."""
        assert inspect.isgenerator(builtin_catalog.search("lambert"))

    def test_search_blank_yields_all(self, builtin_catalog: CrsCatalog) -> None:
        """Test blank text yields every record in order."""
        assert tuple(builtin_catalog.search("")) == builtin_catalog.records
        assert tuple(builtin_catalog.search(None)) == builtin_catalog.records

    def test_search_by_country(self, builtin_catalog: CrsCatalog) -> None:
        """Test matching on country, ignoring case."""
        codes = [r.code for r in builtin_catalog.search("SUISSE")]
        assert codes == ["CH1903.LV03", "CH1903+.LV95"]

    def test_search_by_epsg(self, builtin_catalog: CrsCatalog) -> None:
        """Test matching on the EPSG id."""
        codes = [r.code for r in builtin_catalog.search("2154")]
        assert "RGF93.LAMB93" in codes

    def test_search_no_match(self, builtin_catalog: CrsCatalog) -> None:
        """Test a search with no hit yields nothing."""
        assert list(builtin_catalog.search("atlantis")) == []

    def test_group_by_country(self, builtin_catalog: CrsCatalog) -> None:
        """Test grouping keeps every record and sorts countries."""
        groups = builtin_catalog.group_by_country()
        assert list(groups) == sorted(groups)
        assert sum(len(v) for v in groups.values()) == len(builtin_catalog)
        assert any(r.code == "RGF93.LAMB93" for r in groups["France"])
        assert [r.code for r in groups["Belgique"]] == [
            "BD72.Belgian-Lambert-72",
            "ETRS89.Belgian-Lambert-2008",
        ]


class TestCatalogFile:
    """Tests for loading an external JSON catalog."""

    def test_load_file(self, tmp_path: Path) -> None:
        """Test records are read in file order with external key spellings."""
        path = _write_json(tmp_path / "crs.json", _sample_rows())
        catalog = CrsCatalog(path)

        assert len(catalog) == 2
        assert catalog.source == str(path)

        cc49 = catalog.get_by_code("RGF93.CC49")
        assert cc49 is not None
        assert cc49.family == ProjectionFamily.CONIC_ZONE
        assert cc49.bounds.to_tuple() == (1200000, 9000000, 2200000, 9400000)

    def test_settings_path_is_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the configured catalog path is used when none is given."""
        path = _write_json(tmp_path / "crs.json", _sample_rows())
        monkeypatch.setattr(settings, "catalog_path", path)

        assert len(CrsCatalog()) == 2

    def test_invalid_json_falls_back(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test unparsable files fall back to the built-in table with a warning."""
        path = tmp_path / "crs.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="georef.core.crs.catalog"):
            catalog = CrsCatalog(path)
            assert len(catalog) == 40

        assert catalog.source == "builtin"
        assert "Falling back to built-in CRS catalog" in caplog.text

    def test_empty_list_falls_back(self, tmp_path: Path) -> None:
        """Test an empty array falls back to the built-in table."""
        path = _write_json(tmp_path / "crs.json", [])
        assert len(CrsCatalog(path)) == 40

    def test_invalid_record_falls_back(self, tmp_path: Path) -> None:
        """Test a record with an inverted extent invalidates the file."""
        rows = _sample_rows()
        rows[0]["bounds"] = {"min_x": 10, "max_x": 0, "min_y": 0, "max_y": 10}
        path = _write_json(tmp_path / "crs.json", rows)
        assert CrsCatalog(path).source == "builtin"

    def test_zoned_family_without_zone_falls_back(self, tmp_path: Path) -> None:
        """Test an explicit UTM family with no zone invalidates the file."""
        rows = _sample_rows()
        rows.append({"Code": "CUSTOM.GRID", "Family": "utm", "Epsg": 0})
        path = _write_json(tmp_path / "crs.json", rows)

        with pytest.raises(CatalogError, match="invalid records"):
            load_catalog_file(path)
        assert CrsCatalog(path).source == "builtin"

    def test_missing_file_uses_builtin(self, tmp_path: Path) -> None:
        """Test a missing file silently uses the built-in table."""
        catalog = CrsCatalog(tmp_path / "missing.json")
        assert len(catalog) == 40
        assert catalog.source == "builtin"

    def test_directory_path_raises(self, tmp_path: Path) -> None:
        """Test a directory is a configuration error, raised on first access."""
        catalog = CrsCatalog(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            catalog.load()

        assert exc_info.value.details["config_key"] == "catalog_path"


class TestLoadCatalogFile:
    """Tests for the raw file loader."""

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test invalid JSON raises CatalogError with the position."""
        path = tmp_path / "crs.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogError) as exc_info:
            load_catalog_file(path)

        assert exc_info.value.details["file_path"] == str(path)
        assert "line" in exc_info.value.details

    def test_invalid_records(self, tmp_path: Path) -> None:
        """Test schema errors are reported."""
        path = _write_json(tmp_path / "crs.json", [{"name": "no code"}])

        with pytest.raises(CatalogError) as exc_info:
            load_catalog_file(path)

        assert exc_info.value.details["errors"]

    def test_empty(self, tmp_path: Path) -> None:
        """Test an empty list is rejected."""
        path = _write_json(tmp_path / "crs.json", [])
        with pytest.raises(CatalogError, match="no records"):
            load_catalog_file(path)


class TestReloadAndConcurrency:
    """Tests for snapshot swapping and one-time loading."""

    def test_reload_swaps_snapshot(self, tmp_path: Path) -> None:
        """Test reload picks up new data without touching handed-out tuples."""
        path = _write_json(tmp_path / "crs.json", _sample_rows()[:1])
        catalog = CrsCatalog(path)
        before = catalog.records
        assert len(before) == 1

        _write_json(path, _sample_rows())
        catalog.reload()

        assert len(catalog) == 2
        assert len(before) == 1
        assert catalog.get_by_epsg(3949) is not None

    def test_load_is_idempotent(self, builtin_catalog: CrsCatalog) -> None:
        """Test repeated loads keep the same snapshot."""
        builtin_catalog.load()
        first = builtin_catalog.records
        builtin_catalog.load()
        assert builtin_catalog.records is first

    def test_concurrent_first_access_loads_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test concurrent first readers populate the catalog exactly once."""
        calls = []
        original = catalog_module.builtin_records

        def counting_builtin_records():
            calls.append(1)
            return original()

        monkeypatch.setattr(catalog_module, "builtin_records", counting_builtin_records)

        catalog = CrsCatalog(data_path=None)
        barrier = threading.Barrier(8)
        results = []

        def reader() -> None:
            barrier.wait()
            results.append(len(catalog.records))

        threads = [threading.Thread(target=reader) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert results == [40] * 8

    def test_lookups_without_load_populate_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test lookups on a fresh catalog load it on first use only."""
        calls = []
        original = catalog_module.builtin_records

        def counting_builtin_records():
            calls.append(1)
            return original()

        monkeypatch.setattr(catalog_module, "builtin_records", counting_builtin_records)
        catalog = CrsCatalog(data_path=None)

        assert catalog.get_by_epsg(2154).code == "RGF93.LAMB93"
        assert catalog.get_by_code("RGF93.CC49") is not None
        assert catalog.source == "builtin"
        catalog.load()

        assert len(calls) == 1
