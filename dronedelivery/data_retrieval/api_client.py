"""Mini README: HTTP client for the restaurant/order REST service.

Structure:
    * ApiError - raised for non-200 responses and transport failures.
    * DeliveryApiClient - health check plus retrieval of restaurants, orders,
      the central area and the no-fly zones.

Responses are validated through the pydantic schemas and returned as domain
objects. Orders are fetched in full and filtered by date on the client, as
the service exposes no date filter.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..configuration import get_settings
from ..geometry import Region
from ..logging_utils import get_logger
from ..orders import Order, Restaurant
from .schemas import OrderSchema, RegionSchema, RestaurantSchema

LOGGER = get_logger(__name__)

_RESTAURANTS = TypeAdapter(List[RestaurantSchema])
_ORDERS = TypeAdapter(List[OrderSchema])
_REGIONS = TypeAdapter(List[RegionSchema])


class ApiError(RuntimeError):
    """Raised when the REST service cannot provide a usable response."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DeliveryApiClient:
    """Thin wrapper around ``httpx.Client`` for the delivery REST service."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not base_url:
            raise ValueError("REST service base URL is not configured.")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else get_settings().request_timeout_seconds
        self._client = client or httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DeliveryApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        LOGGER.debug("GET %s", url)
        try:
            response = self._client.get(url)
        except httpx.HTTPError as error:
            raise ApiError(f"Request to {url} failed: {error}", url=url) from error
        if response.status_code != 200:
            raise ApiError(
                f"Failed to fetch data: HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as error:
            raise ApiError(f"Response from {url} is not valid JSON", url=url) from error

    def _fetch(self, path: str, adapter: TypeAdapter, what: str) -> List[Any]:
        payload = self._get(path)
        if isinstance(payload, dict):
            payload = [payload]
        try:
            return adapter.validate_python(payload)
        except ValidationError as error:
            raise ApiError(f"Malformed {what} payload: {error}", url=f"{self.base_url}{path}") from error

    def service_alive(self) -> bool:
        """Return True when the liveness probe reports ``UP``."""

        payload = self._get("/actuator/health/livenessState")
        status = str(payload.get("status", "")) if isinstance(payload, dict) else ""
        alive = status.upper() == "UP"
        LOGGER.info("Service at %s alive: %s", self.base_url, alive)
        return alive

    def fetch_restaurants(self) -> List[Restaurant]:
        restaurants = self._fetch("/restaurants", _RESTAURANTS, "restaurants")
        LOGGER.info("Fetched %s restaurants", len(restaurants))
        return [restaurant.to_domain() for restaurant in restaurants]

    def fetch_orders(self, day: str) -> List[Order]:
        """Return the orders placed on ``day`` (``YYYY-MM-DD``)."""

        orders = self._fetch("/orders", _ORDERS, "orders")
        selected = [order.to_domain() for order in orders if order.order_date.isoformat() == day]
        LOGGER.info("Fetched %s orders, %s for %s", len(orders), len(selected), day)
        return selected

    def fetch_central_area(self) -> Region:
        regions = self._fetch("/centralArea", _REGIONS, "central area")
        if not regions:
            raise ApiError("Central area payload is empty", url=f"{self.base_url}/centralArea")
        return regions[0].to_domain()

    def fetch_no_fly_zones(self) -> List[Region]:
        zones = self._fetch("/noFlyZones", _REGIONS, "no-fly zones")
        LOGGER.info("Fetched %s no-fly zones", len(zones))
        return [zone.to_domain() for zone in zones]
