"""Mini README: Retrieval of restaurants, orders and regions from the REST service."""

from .api_client import ApiError, DeliveryApiClient
from .schemas import (
    CreditCardSchema,
    LngLatSchema,
    OrderSchema,
    PizzaSchema,
    PlanRequest,
    RegionSchema,
    RestaurantSchema,
)

__all__ = [
    "ApiError",
    "CreditCardSchema",
    "DeliveryApiClient",
    "LngLatSchema",
    "OrderSchema",
    "PizzaSchema",
    "PlanRequest",
    "RegionSchema",
    "RestaurantSchema",
]
