"""Mini README: Planar geometry primitives used by the flight planner.

Structure:
    * Position - immutable (longitude, latitude) pair in degrees.
    * Region - named polygon, implicitly closed, with ``contains``.
    * Orientation - result of the three-point orientation test.
    * orientation / on_segment / segments_intersect - segment helpers.
    * point_in_polygon - ray casting with boundary-counts-as-inside.

All functions are pure and compare floats exactly. Coordinates are treated
as a flat plane: the operating area is a few kilometres across so the
curvature error is far below the drone's step length. Collinearity is an
exact zero test, which means points that are collinear only up to rounding
are classified as strictly left or right of a segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence, Tuple

# Longitude of the far end of the casting ray; outside any valid longitude.
RAY_LONGITUDE = 999.99


@dataclass(frozen=True, slots=True)
class Position:
    """Point on the map, exact equality and hashable."""

    longitude: float
    latitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.longitude, self.latitude)


@dataclass(frozen=True, slots=True)
class Region:
    """Named polygon whose last vertex connects back to the first."""

    name: str
    vertices: Tuple[Position, ...] = field(default_factory=tuple)

    @classmethod
    def from_coordinates(cls, name: str, coordinates: Iterable[Sequence[float]]) -> "Region":
        """Build a region from ``(longitude, latitude)`` pairs."""

        return cls(name=name, vertices=tuple(Position(float(lng), float(lat)) for lng, lat in coordinates))

    def contains(self, position: Position) -> bool:
        """Return True when ``position`` is inside or on the boundary."""

        return point_in_polygon(self.vertices, position)


class Orientation(IntEnum):
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def orientation(a: Position, b: Position, c: Position) -> Orientation:
    """Classify the turn ``a -> b -> c``."""

    value = (b.latitude - a.latitude) * (c.longitude - b.longitude) - (
        b.longitude - a.longitude
    ) * (c.latitude - b.latitude)
    if value == 0:
        return Orientation.COLLINEAR
    return Orientation.COUNTER_CLOCKWISE if value < 0 else Orientation.CLOCKWISE


def on_segment(p: Position, q: Position, point: Position) -> bool:
    """Return True when ``point`` lies within the bounding box of segment ``pq``."""

    return (
        min(p.longitude, q.longitude) <= point.longitude <= max(p.longitude, q.longitude)
        and min(p.latitude, q.latitude) <= point.latitude <= max(p.latitude, q.latitude)
    )


def segments_intersect(p1: Position, p2: Position, q1: Position, q2: Position) -> bool:
    """Return True when segment ``p1p2`` touches or crosses segment ``q1q2``."""

    d1 = orientation(p1, p2, q1)
    d2 = orientation(p1, p2, q2)
    d3 = orientation(q1, q2, p1)
    d4 = orientation(q1, q2, p2)

    if d1 != d2 and d3 != d4:
        return True

    # Collinear endpoints only count when they fall on the other segment.
    if d1 == Orientation.COLLINEAR and on_segment(p1, p2, q1):
        return True
    if d2 == Orientation.COLLINEAR and on_segment(p1, p2, q2):
        return True
    if d3 == Orientation.COLLINEAR and on_segment(q1, q2, p1):
        return True
    if d4 == Orientation.COLLINEAR and on_segment(q1, q2, p2):
        return True
    return False


def point_in_polygon(vertices: Sequence[Position], point: Position) -> bool:
    """Ray-cast ``point`` against the polygon described by ``vertices``.

    A horizontal ray is extended to ``RAY_LONGITUDE`` and the crossed edges
    are counted; an odd count means inside. When the point is collinear with
    a crossed edge the answer is decided by that edge alone: on the edge is
    inside, beyond its end is outside. Polygons with fewer than three vertices
    contain nothing.
    """

    count = len(vertices)
    if count < 3:
        return False

    ray_end = Position(RAY_LONGITUDE, point.latitude)
    crossings = 0
    for index in range(count):
        edge_start = vertices[index]
        edge_end = vertices[(index + 1) % count]
        if not segments_intersect(edge_start, edge_end, point, ray_end):
            continue
        if orientation(edge_start, point, edge_end) == Orientation.COLLINEAR:
            return on_segment(edge_start, edge_end, point)
        crossings += 1
    return crossings % 2 == 1
