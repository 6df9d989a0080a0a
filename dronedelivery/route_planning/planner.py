"""Mini README: Greedy flight path planner with round-trip caching.

Structure:
    * UnreachableDestination - raised when a one-way search cannot finish.
    * PathPlanner - computes one-way legs and cached round trips.

A one-way leg is a greedy local search. At every step the sixteen compass
headings are tried in order; candidates already visited or rejected by the
constraint checker are skipped, and the candidate closest to the target wins
(the earliest heading wins ties). Once the drone is close to the target a
hover movement marks the arrival.

The search is not guaranteed to terminate for every map. It stops with
``UnreachableDestination`` when every heading is blocked or when the step
limit from the settings is exceeded.

A round trip is the outbound leg followed by the same leg flown backwards,
so the only hover is the one at the destination.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from ..configuration import get_settings
from ..geometry import Position, Region
from ..logging_utils import get_logger
from ..navigation import COMPASS_HEADINGS, HOVER_HEADING, ConstraintChecker, distance, is_close, step
from .cache import RouteCache
from .movements import FlightPath, Movement, return_leg

LOGGER = get_logger(__name__)


class UnreachableDestination(RuntimeError):
    """Raised when the greedy search dead-ends or runs out of steps."""

    def __init__(self, start: Position, end: Position, steps: int, reason: str) -> None:
        super().__init__(
            f"Cannot reach ({end.longitude}, {end.latitude}) from "
            f"({start.longitude}, {start.latitude}) after {steps} steps: {reason}"
        )
        self.start = start
        self.end = end
        self.steps = steps
        self.reason = reason


class PathPlanner:
    """Plan drone flights for one session of fixed no-fly zones and central area."""

    def __init__(
        self,
        no_fly_zones: Sequence[Region],
        central_area: Region,
        *,
        move_distance: Optional[float] = None,
        close_threshold: Optional[float] = None,
        max_search_steps: Optional[int] = None,
        cache: Optional[RouteCache] = None,
    ) -> None:
        settings = get_settings()
        self.constraints = ConstraintChecker(no_fly_zones, central_area)
        self.move_distance = move_distance if move_distance is not None else settings.move_distance
        self.close_threshold = close_threshold if close_threshold is not None else settings.close_threshold
        self.max_search_steps = max_search_steps if max_search_steps is not None else settings.max_search_steps
        self.cache = cache if cache is not None else RouteCache()
        LOGGER.debug(
            "Initialised PathPlanner with move_distance=%s close_threshold=%s max_search_steps=%s",
            self.move_distance,
            self.close_threshold,
            self.max_search_steps,
        )

    @property
    def cache_size(self) -> int:
        return len(self.cache)

    def compute_one_way(self, start: Position, end: Position, order_no: str = "") -> FlightPath:
        """Search a path from ``start`` until close to ``end``, ending with a hover."""

        current = start
        visited = {start}
        movements: List[Movement] = []

        while not is_close(current, end, self.close_threshold):
            if len(movements) >= self.max_search_steps:
                raise UnreachableDestination(start, end, len(movements), "step limit exceeded")

            best_heading: Optional[float] = None
            best_position = current
            best_distance = math.inf
            for heading in COMPASS_HEADINGS:
                candidate = step(current, heading, self.move_distance)
                if candidate in visited:
                    continue
                if not self.constraints.is_move_allowed(current, candidate):
                    continue
                remaining = distance(candidate, end)
                if remaining < best_distance:
                    best_heading = heading
                    best_position = candidate
                    best_distance = remaining

            if best_heading is None:
                LOGGER.error("Search dead-ended at (%s, %s)", current.longitude, current.latitude)
                raise UnreachableDestination(start, end, len(movements), "no admissible heading")

            movements.append(Movement(current, best_position, best_heading, order_no))
            current = best_position
            visited.add(current)

        movements.append(Movement(current, current, HOVER_HEADING, order_no))
        LOGGER.debug("One-way leg finished in %s steps", len(movements) - 1)
        return FlightPath(movements=movements, description="One-way leg")

    def _build_round_trip(self, origin: Position, destination: Position) -> List[Movement]:
        outbound = self.compute_one_way(origin, destination).movements
        return outbound + return_leg(outbound)

    def find_round_trip(self, base: Position, destination: Position, order_no: str) -> FlightPath:
        """Return the round trip ``base -> destination -> base`` tagged with ``order_no``.

        The first request for a pair computes and stores the trip; later
        requests, from either end, replay an independent copy.
        """

        movements = self.cache.fetch(base, destination, order_no, self._build_round_trip)
        LOGGER.info(
            "Round trip for order %s to (%s, %s) has %s movements",
            order_no,
            destination.longitude,
            destination.latitude,
            len(movements),
        )
        return FlightPath(movements=movements, description="Round trip")
