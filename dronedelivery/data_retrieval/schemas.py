"""Mini README: Pydantic schemas mirroring the REST service payloads.

Structure:
    * LngLatSchema / RegionSchema - coordinates and named polygons.
    * PizzaSchema / RestaurantSchema - restaurant catalogue entries.
    * CreditCardSchema / OrderSchema - orders with payment details.
    * PlanRequest - body accepted by the HTTP planning endpoint.

Field aliases follow the service's camelCase names. Each schema converts to
the corresponding domain dataclass through ``to_domain`` so the planner never
depends on pydantic.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..geometry import Position, Region
from ..orders import (
    CreditCardInformation,
    DayOfWeek,
    Order,
    OrderStatus,
    OrderValidationCode,
    Pizza,
    Restaurant,
)


class _ServiceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LngLatSchema(_ServiceModel):
    lng: float
    lat: float

    def to_domain(self) -> Position:
        return Position(self.lng, self.lat)


class RegionSchema(_ServiceModel):
    name: str = ""
    vertices: List[LngLatSchema] = Field(default_factory=list)

    def to_domain(self) -> Region:
        return Region(name=self.name, vertices=tuple(vertex.to_domain() for vertex in self.vertices))


class PizzaSchema(_ServiceModel):
    name: str
    price_in_pence: int = Field(0, alias="priceInPence")

    def to_domain(self) -> Pizza:
        return Pizza(name=self.name, price_in_pence=self.price_in_pence)


class RestaurantSchema(_ServiceModel):
    name: str
    location: LngLatSchema
    opening_days: List[str] = Field(default_factory=list, alias="openingDays")
    menu: List[PizzaSchema] = Field(default_factory=list)

    def to_domain(self) -> Restaurant:
        known = {day.value for day in DayOfWeek}
        days = tuple(DayOfWeek(day.upper()) for day in self.opening_days if day.upper() in known)
        return Restaurant(
            name=self.name,
            location=self.location.to_domain(),
            opening_days=days,
            menu=tuple(pizza.to_domain() for pizza in self.menu),
        )


class CreditCardSchema(_ServiceModel):
    credit_card_number: str = Field("", alias="creditCardNumber")
    credit_card_expiry: str = Field("", alias="creditCardExpiry")
    cvv: str = ""

    def to_domain(self) -> CreditCardInformation:
        return CreditCardInformation(
            credit_card_number=self.credit_card_number,
            credit_card_expiry=self.credit_card_expiry,
            cvv=self.cvv,
        )


class OrderSchema(_ServiceModel):
    order_no: str = Field(alias="orderNo")
    order_date: date = Field(alias="orderDate")
    order_status: Optional[str] = Field(None, alias="orderStatus")
    order_validation_code: Optional[str] = Field(None, alias="orderValidationCode")
    price_total_in_pence: int = Field(0, alias="priceTotalInPence")
    pizzas_in_order: List[PizzaSchema] = Field(default_factory=list, alias="pizzasInOrder")
    credit_card_information: Optional[CreditCardSchema] = Field(None, alias="creditCardInformation")

    def to_domain(self) -> Order:
        card = self.credit_card_information or CreditCardSchema()
        return Order(
            order_no=self.order_no,
            order_date=self.order_date,
            price_total_in_pence=self.price_total_in_pence,
            pizzas_in_order=tuple(pizza.to_domain() for pizza in self.pizzas_in_order),
            credit_card_information=card.to_domain(),
            order_status=OrderStatus.from_str(self.order_status),
            order_validation_code=OrderValidationCode.from_str(self.order_validation_code),
        )


class PlanRequest(_ServiceModel):
    """Everything needed to plan one day without contacting the service."""

    restaurants: List[RestaurantSchema]
    orders: List[OrderSchema]
    central_area: RegionSchema = Field(alias="centralArea")
    no_fly_zones: List[RegionSchema] = Field(default_factory=list, alias="noFlyZones")
    base: Optional[LngLatSchema] = None
