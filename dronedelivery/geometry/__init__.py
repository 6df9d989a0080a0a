"""Mini README: Geometry primitives for the planner.

Exports the ``Position`` and ``Region`` value types together with the
stateless orientation, segment and point-in-polygon helpers.
"""

from .shapes import (
    Orientation,
    Position,
    Region,
    on_segment,
    orientation,
    point_in_polygon,
    segments_intersect,
)

__all__ = [
    "Orientation",
    "Position",
    "Region",
    "on_segment",
    "orientation",
    "point_in_polygon",
    "segments_intersect",
]
