"""
georef - geodetic coordinate conversion engine.

Converts coordinates between a catalog of national and regional projected
coordinate reference systems and WGS84 longitude/latitude, detects the CRS of
raw drawing coordinates and computes geodesic distances.
"""

__version__ = "0.1.0"
