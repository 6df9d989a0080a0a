"""Mini README: Position arithmetic and the discrete compass movement model.

Structure:
    * DRONE_MOVE_DISTANCE / DRONE_IS_CLOSE_DISTANCE - default system constants.
    * COMPASS_HEADINGS / HOVER_HEADING - the permitted headings.
    * InvalidHeading - raised for headings outside the compass rose.
    * distance / is_close / step / reverse_heading - stateless helpers.

The drone moves in fixed-length steps along one of sixteen compass headings
(multiples of 22.5 degrees, 0 pointing east and 90 north) or hovers in
place. Distances are Euclidean in degree space.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..geometry import Position

DRONE_MOVE_DISTANCE = 0.00015
DRONE_IS_CLOSE_DISTANCE = 0.00015

HEADING_INCREMENT = 22.5
COMPASS_HEADINGS: Tuple[float, ...] = tuple(index * HEADING_INCREMENT for index in range(16))
HOVER_HEADING = 999.0


class InvalidHeading(ValueError):
    """Raised when a heading is neither hover nor a compass multiple of 22.5."""

    def __init__(self, heading: float) -> None:
        super().__init__(
            f"Heading {heading!r} must be {HOVER_HEADING} (hover) or a multiple of "
            f"{HEADING_INCREMENT} in [0, 360)"
        )
        self.heading = heading


def is_valid_heading(heading: float) -> bool:
    if heading == HOVER_HEADING:
        return True
    return 0 <= heading < 360 and heading % HEADING_INCREMENT == 0


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions in degrees."""

    return math.hypot(b.longitude - a.longitude, b.latitude - a.latitude)


def is_close(a: Position, b: Position, threshold: float = DRONE_IS_CLOSE_DISTANCE) -> bool:
    """Return True when ``a`` and ``b`` are within ``threshold`` of each other."""

    return distance(a, b) <= threshold


def step(position: Position, heading: float, move_distance: float = DRONE_MOVE_DISTANCE) -> Position:
    """Return the position reached by one move along ``heading``."""

    if heading == HOVER_HEADING:
        return position
    if not is_valid_heading(heading):
        raise InvalidHeading(heading)
    radians = math.radians(heading)
    return Position(
        position.longitude + move_distance * math.cos(radians),
        position.latitude + move_distance * math.sin(radians),
    )


def reverse_heading(heading: float) -> float:
    """Heading pointing the opposite way; hover stays hover."""

    if heading == HOVER_HEADING:
        return HOVER_HEADING
    if not is_valid_heading(heading):
        raise InvalidHeading(heading)
    return (heading + 180) % 360
