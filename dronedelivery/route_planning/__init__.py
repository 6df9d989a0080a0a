"""Mini README: Route planning subsystem for delivery flights.

Exports the greedy ``PathPlanner`` with its round-trip ``RouteCache``, the
``Movement``/``FlightPath`` records it produces and the ``RouteAssembler``
that strings a day's orders together.
"""

from .assembler import RestaurantNotFound, RouteAssembler
from .cache import RouteCache, route_key
from .movements import FlightPath, Movement, return_leg
from .planner import PathPlanner, UnreachableDestination

__all__ = [
    "FlightPath",
    "Movement",
    "PathPlanner",
    "RestaurantNotFound",
    "RouteAssembler",
    "RouteCache",
    "UnreachableDestination",
    "return_leg",
    "route_key",
]
