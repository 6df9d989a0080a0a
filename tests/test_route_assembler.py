"""Mini README: Tests for assembling a day's movements from orders."""

from __future__ import annotations

from datetime import date

import pytest

from dronedelivery.geometry import Position, Region
from dronedelivery.orders import CreditCardInformation, DayOfWeek, Order, OrderStatus, Pizza, Restaurant
from dronedelivery.route_planning import PathPlanner, RestaurantNotFound, RouteAssembler

APPLETON = Position(-3.186874, 55.944494)
CENTRAL = Region.from_coordinates(
    "central",
    [(-3.20, 55.93), (-3.18, 55.93), (-3.18, 55.95), (-3.20, 55.95)],
)
CIVERINOS = Restaurant(
    name="Civerinos Slice",
    location=Position(-3.1912869215011597, 55.945535152517735),
    opening_days=tuple(DayOfWeek),
    menu=(Pizza("Margarita", 1000), Pizza("Calzone", 1400)),
)
SORA = Restaurant(
    name="Sora Lella Vegan Restaurant",
    location=Position(-3.202541470527649, 55.943284737579376),
    opening_days=tuple(DayOfWeek),
    menu=(Pizza("Meat Lover", 1400), Pizza("Vegan Delight ", 1100)),
)
CARD = CreditCardInformation("1234567812345678", "12/30", "123")


def _order(order_no: str, *names: str) -> Order:
    pizzas = tuple(Pizza(name, 1000) for name in names)
    return Order(order_no, date(2025, 1, 23), 1000 * len(pizzas) + 100, pizzas, CARD)


def _assembler() -> RouteAssembler:
    planner = PathPlanner([], CENTRAL, move_distance=0.00015, close_threshold=0.00015)
    return RouteAssembler(planner, [CIVERINOS, SORA], base=APPLETON)


def test_find_restaurant_matches_trimmed_menu_names() -> None:
    assembler = _assembler()
    assert assembler.find_restaurant(_order("A", "Margarita", "Calzone")) is CIVERINOS
    assert assembler.find_restaurant(_order("B", " Vegan Delight")) is SORA


def test_unknown_pizza_raises_restaurant_not_found() -> None:
    with pytest.raises(RestaurantNotFound) as raised:
        _assembler().find_restaurant(_order("C", "Margarita", "Meat Lover"))
    assert raised.value.order_no == "C"
    assert isinstance(raised.value, LookupError)


def test_assemble_keeps_order_sequence_and_marks_delivered() -> None:
    assembler = _assembler()
    orders = [_order("O1", "Margarita"), _order("O2", "Meat Lover"), _order("O3", "Calzone")]
    movements = assembler.assemble(orders)

    sequence = []
    for movement in movements:
        if not sequence or sequence[-1] != movement.order_no:
            sequence.append(movement.order_no)
    assert sequence == ["O1", "O2", "O3"]
    assert all(order.order_status == OrderStatus.DELIVERED for order in orders)
    assert assembler.planner.cache_size == 2
    assert sum(1 for movement in movements if movement.is_hover) == 3

    first = [m for m in movements if m.order_no == "O1"]
    third = [m for m in movements if m.order_no == "O3"]
    assert [(m.start, m.end, m.heading) for m in first] == [(m.start, m.end, m.heading) for m in third]
    assert first[0].start == APPLETON and first[-1].end == APPLETON


def test_assemble_propagates_missing_restaurant() -> None:
    assembler = _assembler()
    orders = [_order("O1", "Margarita"), _order("O2", "Unknown")]
    with pytest.raises(RestaurantNotFound):
        assembler.assemble(orders)
    assert orders[0].order_status == OrderStatus.DELIVERED
    assert orders[1].order_status == OrderStatus.UNDEFINED


def test_base_defaults_to_settings() -> None:
    planner = PathPlanner([], CENTRAL)
    assert RouteAssembler(planner, [CIVERINOS]).base == APPLETON
