"""Mini README: Assemble a day's flight log from validated orders.

Structure:
    * RestaurantNotFound - no single restaurant serves every pizza of an order.
    * RouteAssembler - looks up each order's restaurant and concatenates the
      round trips in order sequence.

Orders are flown in the order they arrive; no reordering across orders is
attempted. Routed orders are marked ``DELIVERED``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..configuration import get_settings
from ..geometry import Position
from ..logging_utils import get_logger
from ..orders import Order, OrderStatus, Restaurant
from .movements import Movement
from .planner import PathPlanner

LOGGER = get_logger(__name__)


class RestaurantNotFound(LookupError):
    """Raised when no restaurant menu covers all pizzas of an order."""

    def __init__(self, order_no: str) -> None:
        super().__init__(f"No restaurant serves every pizza of order {order_no}")
        self.order_no = order_no


class RouteAssembler:
    """Turn a sequence of validated orders into one ordered movement log."""

    def __init__(
        self,
        planner: PathPlanner,
        restaurants: Sequence[Restaurant],
        *,
        base: Optional[Position] = None,
    ) -> None:
        if base is None:
            settings = get_settings()
            base = Position(settings.base_longitude, settings.base_latitude)
        self.planner = planner
        self.restaurants = tuple(restaurants)
        self.base = base

    def find_restaurant(self, order: Order) -> Restaurant:
        """Return the first restaurant whose menu covers the whole order."""

        wanted = order.pizza_names()
        for restaurant in self.restaurants:
            if wanted <= restaurant.menu_names():
                return restaurant
        raise RestaurantNotFound(order.order_no)

    def assemble(self, orders: Iterable[Order]) -> List[Movement]:
        """Plan every order's round trip and return the concatenated movements."""

        movements: List[Movement] = []
        routed = 0
        for order in orders:
            restaurant = self.find_restaurant(order)
            path = self.planner.find_round_trip(self.base, restaurant.location, order.order_no)
            movements.extend(path.movements)
            order.order_status = OrderStatus.DELIVERED
            routed += 1
            LOGGER.debug("Order %s routed via %s", order.order_no, restaurant.name)
        LOGGER.info(
            "Assembled %s movements for %s orders (%s distinct routes)",
            len(movements),
            routed,
            self.planner.cache_size,
        )
        return movements
