"""
Compiled-in CRS table.

Used when no external catalog file is configured or when that file cannot be
read. Records are built on demand so importing this module stays cheap.
"""

from typing import Any, Dict, List, Tuple

from georef.models.crs import CrsRecord

# (zone, region) of the RGF93 conic conformal zones
_CONIC_ZONE_REGIONS: Tuple[Tuple[int, str], ...] = (
    (42, "Corse, Côte d'Azur (sud)"),
    (43, "Provence, Languedoc-Roussillon (sud)"),
    (44, "Aquitaine, Midi-Pyrénées (sud)"),
    (45, "Nouvelle-Aquitaine, Auvergne"),
    (46, "Centre-Val de Loire, Bourgogne"),
    (47, "Pays de la Loire, Bretagne (est)"),
    (48, "Île-de-France, Normandie, Bretagne"),
    (49, "Hauts-de-France, Grand Est (ouest)"),
    (50, "Nord-Pas-de-Calais, Flandres"),
)

# (zone, central meridian, region) of the plain WGS84 UTM zones
_WGS84_UTM_ZONES: Tuple[Tuple[int, float, str], ...] = (
    (29, -9.0, "Longitude -12° à -6° (Portugal, Açores)"),
    (30, -3.0, "Longitude -6° à 0° (Espagne, UK ouest)"),
    (31, 3.0, "Longitude 0° à 6° (France ouest, Benelux)"),
    (32, 9.0, "Longitude 6° à 12° (France est, Allemagne)"),
    (33, 15.0, "Longitude 12° à 18° (Europe centrale)"),
)

_UTM_BOUNDS = {"min_x": 166000, "max_x": 834000, "min_y": 0, "max_y": 9400000}
_UTM_SOUTH_BOUNDS = {"min_x": 166000, "max_x": 834000, "min_y": 0, "max_y": 10000000}

_NTF_MERIDIAN = 2.337229167
_NTF_BOUNDS = {"min_x": 0, "max_x": 1200000, "min_y": 0, "max_y": 400000}


def _conic_zone(zone: int, region: str) -> Dict[str, Any]:
    false_northing = (zone - 41) * 1000000 + 200000
    return {
        "code": f"RGF93.CC{zone}",
        "name": f"RGF93 / CC{zone}",
        "country": "France",
        "region": region,
        "epsg": 3900 + zone,
        "unit": "m",
        "central_meridian": 3.0,
        "latitude_origin": float(zone),
        "false_easting": 1700000,
        "false_northing": false_northing,
        "bounds": {
            "min_x": 1200000,
            "max_x": 2200000,
            "min_y": false_northing - 200000,
            "max_y": false_northing + 200000,
        },
        "description": f"Zone CC{zone} - Latitude origine {zone}°N",
    }


def _utm(
    code: str,
    name: str,
    country: str,
    region: str,
    epsg: int,
    central_meridian: float,
    description: str,
    southern: bool = False,
) -> Dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "country": country,
        "region": region,
        "epsg": epsg,
        "unit": "m",
        "central_meridian": central_meridian,
        "latitude_origin": 0.0,
        "false_easting": 500000,
        "false_northing": 10000000 if southern else 0,
        "bounds": _UTM_SOUTH_BOUNDS if southern else _UTM_BOUNDS,
        "description": description,
    }


def _ntf_zone(
    code: str,
    name: str,
    region: str,
    epsg: int,
    latitude_origin: float,
    description: str,
    false_easting: float = 600000,
    false_northing: float = 200000,
    bounds: Dict[str, float] = _NTF_BOUNDS,
) -> Dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "country": "France",
        "region": region,
        "epsg": epsg,
        "unit": "m",
        "central_meridian": _NTF_MERIDIAN,
        "latitude_origin": latitude_origin,
        "false_easting": false_easting,
        "false_northing": false_northing,
        "bounds": bounds,
        "description": description,
    }


def _builtin_rows() -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = [
        # France - RGF93 / Lambert 93
        {
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
            "bounds": {"min_x": 100000, "max_x": 1200000, "min_y": 6000000, "max_y": 7200000},
            "description": "Projection conique conforme de Lambert - Système national français",
        },
    ]

    # France - RGF93 / CC42 to CC50
    rows.extend(_conic_zone(zone, region) for zone, region in _CONIC_ZONE_REGIONS)

    # France - NTF (Paris) / Lambert zones
    rows.extend(
        [
            _ntf_zone(
                "NTF.Lambert-1-ClrkIGN",
                "NTF (Paris) / Lambert zone I",
                "Nord de la France",
                27561,
                49.5,
                "Ancien système NTF - Zone I (Nord)",
            ),
            _ntf_zone(
                "NTF.Lambert-2-ClrkIGN",
                "NTF (Paris) / Lambert zone II",
                "Centre de la France",
                27562,
                46.8,
                "Ancien système NTF - Zone II (Centre)",
            ),
            _ntf_zone(
                "NTF.Lambert-2e-ClrkIGN",
                "NTF (Paris) / Lambert zone II étendu",
                "France métropolitaine",
                27572,
                46.8,
                "Ancien système NTF - Zone II étendu (France entière)",
                false_northing=2200000,
                bounds={"min_x": 0, "max_x": 1200000, "min_y": 1600000, "max_y": 2800000},
            ),
            _ntf_zone(
                "NTF.Lambert-3-ClrkIGN",
                "NTF (Paris) / Lambert zone III",
                "Sud de la France",
                27563,
                44.1,
                "Ancien système NTF - Zone III (Sud)",
            ),
            _ntf_zone(
                "NTF.Lambert-4-ClrkIGN",
                "NTF (Paris) / Lambert zone IV",
                "Corse",
                27564,
                42.165,
                "Ancien système NTF - Zone IV (Corse)",
                false_easting=234.358,
                false_northing=185861.369,
                bounds={"min_x": 450000, "max_x": 650000, "min_y": 0, "max_y": 400000},
            ),
        ]
    )

    rows.extend(
        [
            # Belgium
            {
                "code": "BD72.Belgian-Lambert-72",
                "name": "BD72 / Belgian Lambert 72",
                "country": "Belgique",
                "region": "Belgique",
                "epsg": 31370,
                "unit": "m",
                "central_meridian": 4.367486666667,
                "latitude_origin": 90.0,
                "false_easting": 150000.013,
                "false_northing": 5400088.438,
                "bounds": {"min_x": 0, "max_x": 300000, "min_y": 0, "max_y": 300000},
                "description": "Système belge Lambert 72",
            },
            {
                "code": "ETRS89.Belgian-Lambert-2008",
                "name": "ETRS89 / Belgian Lambert 2008",
                "country": "Belgique",
                "region": "Belgique",
                "epsg": 3812,
                "unit": "m",
                "central_meridian": 4.359215833333,
                "latitude_origin": 50.797815,
                "false_easting": 649328,
                "false_northing": 665262,
                "bounds": {"min_x": 500000, "max_x": 800000, "min_y": 500000, "max_y": 800000},
                "description": "Système belge Lambert 2008 (ETRS89)",
            },
            # Switzerland
            {
                "code": "CH1903.LV03",
                "name": "CH1903 / LV03",
                "country": "Suisse",
                "region": "Suisse",
                "epsg": 21781,
                "unit": "m",
                "central_meridian": 7.439583333333,
                "latitude_origin": 46.952405555556,
                "false_easting": 600000,
                "false_northing": 200000,
                "bounds": {"min_x": 480000, "max_x": 840000, "min_y": 70000, "max_y": 300000},
                "description": "Ancien système suisse LV03",
            },
            {
                "code": "CH1903+.LV95",
                "name": "CH1903+ / LV95",
                "country": "Suisse",
                "region": "Suisse",
                "epsg": 2056,
                "unit": "m",
                "central_meridian": 7.439583333333,
                "latitude_origin": 46.952405555556,
                "false_easting": 2600000,
                "false_northing": 1200000,
                "bounds": {"min_x": 2480000, "max_x": 2840000, "min_y": 1070000, "max_y": 1300000},
                "description": "Système suisse actuel LV95",
            },
            # Luxembourg
            {
                "code": "LUREF.Luxembourg-TM",
                "name": "LUREF / Luxembourg TM",
                "country": "Luxembourg",
                "region": "Luxembourg",
                "epsg": 2169,
                "unit": "m",
                "central_meridian": 6.166666666667,
                "latitude_origin": 49.833333333333,
                "false_easting": 80000,
                "false_northing": 100000,
                "bounds": {"min_x": 45000, "max_x": 115000, "min_y": 55000, "max_y": 145000},
                "description": "Système luxembourgeois Transverse Mercator",
            },
        ]
    )

    # Germany / Spain - ETRS89 UTM
    rows.extend(
        [
            _utm(
                "ETRS89.UTM-zone-32N",
                "ETRS89 / UTM zone 32N",
                "Allemagne",
                "Allemagne (ouest), France (est)",
                25832,
                9.0,
                "UTM zone 32N sur datum ETRS89",
            ),
            _utm(
                "ETRS89.UTM-zone-33N",
                "ETRS89 / UTM zone 33N",
                "Allemagne",
                "Allemagne (est), Pologne (ouest)",
                25833,
                15.0,
                "UTM zone 33N sur datum ETRS89",
            ),
            _utm(
                "ETRS89.UTM-zone-30N",
                "ETRS89 / UTM zone 30N",
                "Espagne",
                "Espagne (ouest), Portugal",
                25830,
                -3.0,
                "UTM zone 30N sur datum ETRS89",
            ),
            _utm(
                "ETRS89.UTM-zone-31N",
                "ETRS89 / UTM zone 31N",
                "Espagne",
                "Espagne (est), France (sud-ouest)",
                25831,
                3.0,
                "UTM zone 31N sur datum ETRS89",
            ),
        ]
    )

    rows.extend(
        [
            # Italy
            {
                "code": "RDN2008.Italy-zone",
                "name": "RDN2008 / Italy zone (E-N)",
                "country": "Italie",
                "region": "Italie",
                "epsg": 6875,
                "unit": "m",
                "central_meridian": 12.0,
                "latitude_origin": 0.0,
                "false_easting": 3000000,
                "false_northing": 0,
                "bounds": {"min_x": 2400000, "max_x": 3600000, "min_y": 3600000, "max_y": 5300000},
                "description": "Système italien RDN2008",
            },
            # United Kingdom
            {
                "code": "OSGB36.British-National-Grid",
                "name": "OSGB 1936 / British National Grid",
                "country": "Royaume-Uni",
                "region": "Grande-Bretagne",
                "epsg": 27700,
                "unit": "m",
                "central_meridian": -2.0,
                "latitude_origin": 49.0,
                "false_easting": 400000,
                "false_northing": -100000,
                "bounds": {"min_x": 0, "max_x": 700000, "min_y": 0, "max_y": 1300000},
                "description": "British National Grid",
            },
            # Netherlands
            {
                "code": "Amersfoort.RD-New",
                "name": "Amersfoort / RD New",
                "country": "Pays-Bas",
                "region": "Pays-Bas",
                "epsg": 28992,
                "unit": "m",
                "central_meridian": 5.387638888889,
                "latitude_origin": 52.156160555556,
                "false_easting": 155000,
                "false_northing": 463000,
                "bounds": {"min_x": 0, "max_x": 300000, "min_y": 300000, "max_y": 630000},
                "description": "Système néerlandais RD New (Rijksdriehoek)",
            },
            # Canada - Quebec MTM
            {
                "code": "NAD83.MTM-zone-7",
                "name": "NAD83 / MTM zone 7",
                "country": "Canada",
                "region": "Québec (Montréal)",
                "epsg": 32187,
                "unit": "m",
                "central_meridian": -70.5,
                "latitude_origin": 0.0,
                "false_easting": 304800,
                "false_northing": 0,
                "bounds": {"min_x": 0, "max_x": 610000, "min_y": 4800000, "max_y": 5400000},
                "description": "Modified Transverse Mercator zone 7 (Québec)",
            },
            {
                "code": "NAD83.MTM-zone-8",
                "name": "NAD83 / MTM zone 8",
                "country": "Canada",
                "region": "Québec (Québec City)",
                "epsg": 32188,
                "unit": "m",
                "central_meridian": -73.5,
                "latitude_origin": 0.0,
                "false_easting": 304800,
                "false_northing": 0,
                "bounds": {"min_x": 0, "max_x": 610000, "min_y": 4800000, "max_y": 5400000},
                "description": "Modified Transverse Mercator zone 8 (Québec)",
            },
        ]
    )

    # WGS84 UTM
    rows.extend(
        _utm(
            f"WGS84.UTM-{zone}N",
            f"WGS 84 / UTM zone {zone}N",
            "Global",
            region,
            32600 + zone,
            meridian,
            f"UTM zone {zone}N sur WGS84",
        )
        for zone, meridian, region in _WGS84_UTM_ZONES
    )

    # French overseas territories
    rows.extend(
        [
            _utm(
                "RGAF09.UTM-zone-20N",
                "RGAF09 / UTM zone 20N",
                "France",
                "Antilles françaises (Guadeloupe, Martinique)",
                5490,
                -63.0,
                "UTM zone 20N pour les Antilles françaises",
            ),
            _utm(
                "RGFG95.UTM-zone-22N",
                "RGFG95 / UTM zone 22N",
                "France",
                "Guyane française",
                2972,
                -51.0,
                "UTM zone 22N pour la Guyane française",
            ),
            _utm(
                "RGR92.UTM-zone-40S",
                "RGR92 / UTM zone 40S",
                "France",
                "La Réunion",
                2975,
                57.0,
                "UTM zone 40S pour La Réunion",
                southern=True,
            ),
            _utm(
                "RGM04.UTM-zone-38S",
                "RGM04 / UTM zone 38S",
                "France",
                "Mayotte",
                4471,
                45.0,
                "UTM zone 38S pour Mayotte",
                southern=True,
            ),
        ]
    )

    # Geographic pseudo-CRSs
    rows.extend(
        [
            {
                "code": "LL84",
                "name": "WGS 84 (géographique)",
                "country": "Global",
                "region": "Monde entier",
                "epsg": 4326,
                "unit": "deg",
                "bounds": {"min_x": -180, "max_x": 180, "min_y": -90, "max_y": 90},
                "description": "Coordonnées géographiques WGS84 (longitude/latitude)",
            },
            {
                "code": "LL-RGF93",
                "name": "RGF93 (géographique)",
                "country": "France",
                "region": "France métropolitaine",
                "epsg": 4171,
                "unit": "deg",
                "bounds": {"min_x": -10, "max_x": 15, "min_y": 40, "max_y": 55},
                "description": "Coordonnées géographiques RGF93 (longitude/latitude)",
            },
        ]
    )
    return rows


def builtin_records() -> List[CrsRecord]:
    """
    Build the compiled-in CRS table.

    Returns:
        A fresh list of records, in catalog display order
    """
    return [CrsRecord(**row) for row in _builtin_rows()]
