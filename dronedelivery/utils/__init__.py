"""Mini README: Utility helpers for dronedelivery.

Currently exports the GeoJSON builders used by the result writer and the
HTTP interface.
"""

from .geojson import path_to_geojson, region_feature

__all__ = ["path_to_geojson", "region_feature"]
