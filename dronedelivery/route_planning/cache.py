"""Mini README: Round-trip cache shared by the orders of one planning session.

Structure:
    * route_key - unordered key for a pair of endpoints.
    * RouteTemplate - canonical round trip stored for a pair.
    * RouteCache - lock-protected mapping that only ever hands out copies.

The cache owns the canonical movements. Callers receive freshly built lists
tagged with their own order number. A template is stored for the origin it
was computed from; asking for the same pair from the other end replays the
trip rotated so that it departs from the requested base.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from ..geometry import Position
from ..logging_utils import get_logger
from ..navigation import HOVER_HEADING
from .movements import Movement

LOGGER = get_logger(__name__)

RouteKey = Tuple[Tuple[float, float], Tuple[float, float]]
RoundTripBuilder = Callable[[Position, Position], Sequence[Movement]]


def route_key(a: Position, b: Position) -> RouteKey:
    """Key identifying the pair ``{a, b}`` regardless of direction."""

    first, second = sorted((a.as_tuple(), b.as_tuple()))
    return (first, second)


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """Round trip computed from ``origin``; order numbers are placeholders."""

    origin: Position
    movements: Tuple[Movement, ...]

    def _midpoint(self) -> int:
        for index, movement in enumerate(self.movements):
            if movement.is_hover:
                return index
        raise ValueError("Round-trip template has no hover movement")

    def replay(self, origin: Position, order_no: str) -> List[Movement]:
        """Return new movements for ``order_no`` departing from ``origin``."""

        if origin == self.origin:
            return [movement.relabel(order_no) for movement in self.movements]

        middle = self._midpoint()
        outbound = self.movements[:middle]
        inbound = self.movements[middle + 1 :]
        pivot = self.movements[0].start
        rotated = list(inbound) + [Movement(pivot, pivot, HOVER_HEADING)] + list(outbound)
        return [movement.relabel(order_no) for movement in rotated]


class RouteCache:
    """Map endpoint pairs to round-trip templates for one planning session."""

    def __init__(self) -> None:
        self._entries: Dict[RouteKey, RouteTemplate] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: Tuple[Position, Position]) -> bool:
        return route_key(*pair) in self._entries

    def fetch(
        self,
        origin: Position,
        destination: Position,
        order_no: str,
        build: RoundTripBuilder,
    ) -> List[Movement]:
        """Return the round trip for the pair, computing it on first use.

        The lock is held while ``build`` runs so each pair is computed once
        even when orders are assembled from several threads.
        """

        key = route_key(origin, destination)
        with self._lock:
            template = self._entries.get(key)
            if template is None:
                self.misses += 1
                LOGGER.debug("Route cache miss for %s", key)
                template = RouteTemplate(origin=origin, movements=tuple(build(origin, destination)))
                self._entries[key] = template
            else:
                self.hits += 1
                LOGGER.debug("Route cache hit for %s", key)
        return template.replay(origin, order_no)
