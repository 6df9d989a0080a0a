"""Mini README: Movement records and flight path containers.

Structure:
    * Movement - one immutable drone step tagged with an order number.
    * FlightPath - ordered collection of movements with export helpers.
    * return_leg - mirror an outbound leg into the journey back.

Movements are never mutated. Replaying a stored path for another order goes
through ``Movement.relabel`` which builds a new instance with the same
geometry, so two orders served from the same restaurant never share
movement objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Sequence

from ..geometry import Position
from ..navigation import HOVER_HEADING, reverse_heading


@dataclass(frozen=True, slots=True)
class Movement:
    """Single step from ``start`` to ``end`` along ``heading``."""

    start: Position
    end: Position
    heading: float
    order_no: str = ""

    @property
    def is_hover(self) -> bool:
        return self.heading == HOVER_HEADING

    def relabel(self, order_no: str) -> "Movement":
        """Return a copy carrying ``order_no``."""

        return replace(self, order_no=order_no)

    def reversed(self) -> "Movement":
        """Return the same step flown in the opposite direction."""

        return Movement(
            start=self.end,
            end=self.start,
            heading=reverse_heading(self.heading),
            order_no=self.order_no,
        )

    def as_record(self) -> Dict[str, object]:
        """Flight-path record using the field names of the result files."""

        return {
            "orderNo": self.order_no,
            "fromLongitude": self.start.longitude,
            "fromLatitude": self.start.latitude,
            "angle": self.heading,
            "toLongitude": self.end.longitude,
            "toLatitude": self.end.latitude,
        }


def return_leg(outbound: Sequence[Movement]) -> List[Movement]:
    """Mirror ``outbound`` without its terminal hover into the trip back."""

    steps = [movement for movement in outbound if not movement.is_hover]
    return [movement.reversed() for movement in reversed(steps)]


@dataclass(slots=True)
class FlightPath:
    """Ordered collection of movements forming one journey."""

    movements: List[Movement] = field(default_factory=list)
    description: str = ""

    def __len__(self) -> int:
        return len(self.movements)

    def __iter__(self) -> Iterator[Movement]:
        return iter(self.movements)

    @property
    def start(self) -> Position:
        if not self.movements:
            raise ValueError("An empty flight path has no start")
        return self.movements[0].start

    @property
    def end(self) -> Position:
        if not self.movements:
            raise ValueError("An empty flight path has no end")
        return self.movements[-1].end

    @property
    def hover_count(self) -> int:
        return sum(1 for movement in self.movements if movement.is_hover)

    def positions(self) -> List[Position]:
        """Every position visited, starting point first."""

        if not self.movements:
            return []
        return [self.movements[0].start] + [movement.end for movement in self.movements]

    def relabelled(self, order_no: str) -> "FlightPath":
        """Return an independent copy tagged with ``order_no``."""

        return FlightPath(
            movements=[movement.relabel(order_no) for movement in self.movements],
            description=self.description,
        )

    def as_records(self) -> List[Dict[str, object]]:
        return [movement.as_record() for movement in self.movements]
