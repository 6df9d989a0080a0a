"""Mini README: Order and restaurant domain records.

Structure:
    * OrderStatus / OrderValidationCode - enums shared with the REST service.
    * DayOfWeek - restaurant opening days.
    * Pizza / Restaurant / CreditCardInformation / Order - dataclasses.

Only an order's status and validation code change after loading: the
validator sets them and the route assembler marks routed orders delivered.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import FrozenSet, Tuple

from ..geometry import Position


class OrderStatus(str, Enum):
    UNDEFINED = "UNDEFINED"
    INVALID = "INVALID"
    VALID_BUT_NOT_DELIVERED = "VALID_BUT_NOT_DELIVERED"
    DELIVERED = "DELIVERED"

    @classmethod
    def from_str(cls, value: object) -> "OrderStatus":
        """Coerce a payload value, falling back to ``UNDEFINED``."""

        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.UNDEFINED


class OrderValidationCode(str, Enum):
    UNDEFINED = "UNDEFINED"
    NO_ERROR = "NO_ERROR"
    CARD_NUMBER_INVALID = "CARD_NUMBER_INVALID"
    EXPIRY_DATE_INVALID = "EXPIRY_DATE_INVALID"
    CVV_INVALID = "CVV_INVALID"
    TOTAL_INCORRECT = "TOTAL_INCORRECT"
    PRICE_FOR_PIZZA_INVALID = "PRICE_FOR_PIZZA_INVALID"
    EMPTY_ORDER = "EMPTY_ORDER"
    MAX_PIZZA_COUNT_EXCEEDED = "MAX_PIZZA_COUNT_EXCEEDED"
    PIZZA_NOT_DEFINED = "PIZZA_NOT_DEFINED"
    PIZZA_FROM_MULTIPLE_RESTAURANTS = "PIZZA_FROM_MULTIPLE_RESTAURANTS"
    RESTAURANT_CLOSED = "RESTAURANT_CLOSED"

    @classmethod
    def from_str(cls, value: object) -> "OrderValidationCode":
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.UNDEFINED


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, day: date) -> "DayOfWeek":
        return list(cls)[day.weekday()]


@dataclass(frozen=True, slots=True)
class Pizza:
    name: str
    price_in_pence: int


@dataclass(frozen=True, slots=True)
class Restaurant:
    """Pickup point with its menu and opening days."""

    name: str
    location: Position
    opening_days: Tuple[DayOfWeek, ...] = ()
    menu: Tuple[Pizza, ...] = ()

    def menu_names(self) -> FrozenSet[str]:
        """Menu item names with surrounding whitespace removed."""

        return frozenset(pizza.name.strip() for pizza in self.menu)

    def is_open_on(self, day: date) -> bool:
        return DayOfWeek.of(day) in self.opening_days


@dataclass(frozen=True, slots=True)
class CreditCardInformation:
    credit_card_number: str
    credit_card_expiry: str
    cvv: str


@dataclass(slots=True)
class Order:
    """Customer order as delivered by the REST service."""

    order_no: str
    order_date: date
    price_total_in_pence: int
    pizzas_in_order: Tuple[Pizza, ...]
    credit_card_information: CreditCardInformation
    order_status: OrderStatus = OrderStatus.UNDEFINED
    order_validation_code: OrderValidationCode = OrderValidationCode.UNDEFINED

    def pizza_names(self) -> FrozenSet[str]:
        return frozenset(pizza.name.strip() for pizza in self.pizzas_in_order)

    def mark(self, status: OrderStatus, code: OrderValidationCode) -> "Order":
        self.order_status = status
        self.order_validation_code = code
        return self
