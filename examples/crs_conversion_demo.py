"""
Example usage of the georef coordinate service.

Converts a few well-known points between national grids and WGS84,
detects the CRS of raw drawing coordinates and measures a geodesic
distance.
"""

from georef.core.crs import CoordinateService
from georef.core.logging_config import setup_logging


def example_conversions(service: CoordinateService):
    """Convert points from several national grids to longitude/latitude."""
    print("Converting grid coordinates to WGS84...")

    samples = [
        ("RGF93.LAMB93", 652709.4, 6862785.6, "Paris"),
        ("RGF93.CC49", 1700000.0, 9200000.0, "CC49 origin"),
        ("CH1903+.LV95", 2600000.0, 1200000.0, "Bern"),
        ("Amersfoort.RD-New", 121000.0, 487000.0, "Amsterdam"),
        ("WGS84.UTM-31N", 500000.0, 5400000.0, "UTM 31N"),
    ]

    for code, x, y, label in samples:
        crs = service.get_by_code(code)
        lon, lat = service.to_geographic(x, y, crs)
        print(f"  {label:12s} {code:20s} -> lon={lon:.6f} lat={lat:.6f}")


def example_round_trip(service: CoordinateService):
    """Project a point to Lambert-93 and back."""
    print("Lambert-93 round trip...")

    crs = service.get_by_epsg(2154)
    x, y = service.to_projected(2.3522, 48.8566, crs)
    lon, lat = service.to_geographic(x, y, crs)
    print(f"  projected: x={x:.3f} y={y:.3f}")
    print(f"  back:      lon={lon:.8f} lat={lat:.8f}")


def example_detection(service: CoordinateService):
    """Guess the CRS of raw drawing coordinates."""
    print("Detecting CRS from coordinates...")

    points = [(1199000.0, 7100000.0), (1201000.0, 7101000.0), (12.0, 3.0)]
    detected = service.detect(points=points)
    print(f"  detected: {detected.display_name if detected else 'none'}")

    for record in service.candidates(1200000.0, 7100000.0):
        print(f"  candidate: {record.code}")


def example_distance(service: CoordinateService):
    """Measure the distance between Paris and London."""
    print("Geodesic distance...")

    distance = service.vincenty_distance(2.3522, 48.8566, -0.1276, 51.5072)
    print(f"  Paris -> London: {distance / 1000:.1f} km")


def main():
    """Run all examples."""
    setup_logging(log_level="INFO")
    service = CoordinateService()

    print("=" * 60)
    print("georef Coordinate Examples")
    print("=" * 60)
    print()

    example_conversions(service)
    print()
    example_round_trip(service)
    print()
    example_detection(service)
    print()
    example_distance(service)
    print()
    print("=" * 60)
    print("Examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
