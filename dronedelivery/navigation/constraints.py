"""Mini README: Flight constraints applied to every candidate move.

Structure:
    * is_move_allowed - stateless rule check for a single move.
    * ConstraintChecker - binds the session's regions and audits paths.

Two rules apply. The end of a move may never lie inside (or on the edge of)
a no-fly zone. The central area may be left but not re-entered: a move is
allowed while the drone is inside it, or when the move does not take the
drone into it.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..geometry import Position, Region
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def is_move_allowed(
    current: Position,
    candidate: Position,
    no_fly_zones: Iterable[Region],
    central_area: Region,
) -> bool:
    """Return True when moving from ``current`` to ``candidate`` is legal."""

    for zone in no_fly_zones:
        if zone.contains(candidate):
            return False
    was_inside = central_area.contains(current)
    will_be_inside = central_area.contains(candidate)
    return was_inside or not will_be_inside


class ConstraintChecker:
    """Apply the no-fly and central-area rules for one planning session."""

    def __init__(self, no_fly_zones: Sequence[Region], central_area: Region) -> None:
        self.no_fly_zones: Tuple[Region, ...] = tuple(no_fly_zones)
        self.central_area = central_area
        LOGGER.debug(
            "ConstraintChecker bound to %s no-fly zones and central area '%s'",
            len(self.no_fly_zones),
            central_area.name,
        )

    def is_move_allowed(self, current: Position, candidate: Position) -> bool:
        return is_move_allowed(current, candidate, self.no_fly_zones, self.central_area)

    def in_no_fly_zone(self, position: Position) -> bool:
        return any(zone.contains(position) for zone in self.no_fly_zones)

    def violations(self, positions: Iterable[Position]) -> List[Position]:
        """Return the positions that lie inside a no-fly zone."""

        return [position for position in positions if self.in_no_fly_zone(position)]
