"""Mini README: Order domain package.

``models`` defines orders, restaurants and their enums; ``validation`` holds
the validator that decides which orders are routed.
"""

from .models import (
    CreditCardInformation,
    DayOfWeek,
    Order,
    OrderStatus,
    OrderValidationCode,
    Pizza,
    Restaurant,
)
from .validation import OrderValidator

__all__ = [
    "CreditCardInformation",
    "DayOfWeek",
    "Order",
    "OrderStatus",
    "OrderValidationCode",
    "OrderValidator",
    "Pizza",
    "Restaurant",
]
