"""Mini README: Order validation ahead of route planning.

Structure:
    * OrderValidator - applies menu, opening-day, card and price checks.

Checks run in a fixed order and the first failure decides the validation
code. Orders that pass are marked ``VALID_BUT_NOT_DELIVERED``; only those are
handed to the route assembler.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..configuration import get_settings
from ..logging_utils import get_logger
from .models import Order, OrderStatus, OrderValidationCode, Restaurant

LOGGER = get_logger(__name__)


def card_expiry_cutoff(expiry: str) -> Optional[date]:
    """First day after the ``MM/YY`` expiry month, or None when malformed."""

    parts = expiry.strip().split("/")
    if len(parts) != 2 or not all(part.isdigit() and len(part) == 2 for part in parts):
        return None
    month, year = int(parts[0]), 2000 + int(parts[1])
    if not 1 <= month <= 12:
        return None
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


class OrderValidator:
    """Validate orders against the restaurant catalogue."""

    def __init__(
        self,
        *,
        max_pizzas_per_order: Optional[int] = None,
        order_charge_in_pence: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.max_pizzas_per_order = (
            max_pizzas_per_order if max_pizzas_per_order is not None else settings.max_pizzas_per_order
        )
        self.order_charge_in_pence = (
            order_charge_in_pence if order_charge_in_pence is not None else settings.order_charge_in_pence
        )

    def validate(self, order: Order, restaurants: Sequence[Restaurant]) -> Order:
        """Set the order's status and validation code and return it."""

        code = self._first_failure(order, restaurants)
        if code is None:
            return order.mark(OrderStatus.VALID_BUT_NOT_DELIVERED, OrderValidationCode.NO_ERROR)
        LOGGER.warning("Order %s rejected: %s", order.order_no, code.value)
        return order.mark(OrderStatus.INVALID, code)

    def valid_orders(self, orders: Iterable[Order], restaurants: Sequence[Restaurant]) -> List[Order]:
        """Validate every order and keep the valid ones in input order."""

        valid = [
            order
            for order in orders
            if self.validate(order, restaurants).order_status != OrderStatus.INVALID
        ]
        LOGGER.info("%s orders passed validation", len(valid))
        return valid

    def _first_failure(
        self, order: Order, restaurants: Sequence[Restaurant]
    ) -> Optional[OrderValidationCode]:
        if not order.pizzas_in_order:
            return OrderValidationCode.EMPTY_ORDER

        restaurant_per_pizza: Dict[str, Restaurant] = {}
        for restaurant in restaurants:
            for pizza in restaurant.menu:
                restaurant_per_pizza[pizza.name.strip()] = restaurant

        chosen: Optional[Restaurant] = None
        for pizza in order.pizzas_in_order:
            restaurant = restaurant_per_pizza.get(pizza.name.strip())
            if restaurant is None:
                return OrderValidationCode.PIZZA_NOT_DEFINED
            if chosen is None:
                chosen = restaurant
            elif chosen.name != restaurant.name:
                return OrderValidationCode.PIZZA_FROM_MULTIPLE_RESTAURANTS

        if len(order.pizzas_in_order) > self.max_pizzas_per_order:
            return OrderValidationCode.MAX_PIZZA_COUNT_EXCEEDED

        if chosen is not None and not chosen.is_open_on(order.order_date):
            return OrderValidationCode.RESTAURANT_CLOSED

        card = order.credit_card_information
        number = card.credit_card_number.strip()
        if len(number) != 16 or not number.isdigit():
            return OrderValidationCode.CARD_NUMBER_INVALID
        cvv = card.cvv.strip()
        if len(cvv) != 3 or not cvv.isdigit():
            return OrderValidationCode.CVV_INVALID
        cutoff = card_expiry_cutoff(card.credit_card_expiry)
        if cutoff is None or order.order_date >= cutoff:
            return OrderValidationCode.EXPIRY_DATE_INVALID

        total = sum(pizza.price_in_pence for pizza in order.pizzas_in_order)
        if total + self.order_charge_in_pence != order.price_total_in_pence:
            return OrderValidationCode.TOTAL_INCORRECT
        return None
