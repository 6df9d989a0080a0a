"""Mini README: GeoJSON helpers for flight logs and regions.

``path_to_geojson`` turns the day's movements into a FeatureCollection whose
first feature is the flown ``LineString``. Regions can be appended as polygon
features so map previews show the no-fly zones and central area alongside the
path. Keeping the logic isolated avoids importing web framework dependencies
when the CLI writes result files.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..geometry import Region
from ..route_planning import Movement


def region_feature(region: Region) -> Dict:
    """Build a closed GeoJSON polygon feature for ``region``."""

    ring: List[List[float]] = [[vertex.longitude, vertex.latitude] for vertex in region.vertices]
    if ring and ring[0] != ring[-1]:
        ring.append(list(ring[0]))
    return {
        "type": "Feature",
        "properties": {"name": region.name},
        "geometry": {"type": "Polygon", "coordinates": [ring]},
    }


def path_to_geojson(movements: Sequence[Movement], regions: Iterable[Region] = ()) -> Dict:
    """Return a FeatureCollection with the flight line and optional regions."""

    coordinates = [[movement.start.longitude, movement.start.latitude] for movement in movements]
    if movements:
        last = movements[-1].end
        coordinates.append([last.longitude, last.latitude])
    features = [
        {
            "type": "Feature",
            "properties": {},
            "geometry": {"type": "LineString", "coordinates": coordinates},
        }
    ]
    features.extend(region_feature(region) for region in regions)
    return {"type": "FeatureCollection", "features": features}
