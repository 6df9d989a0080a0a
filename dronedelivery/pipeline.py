"""Mini README: End-to-end planning of one delivery day.

Structure:
    * validate_arguments - checks the date and service URL supplied by users.
    * PlannedDay - orders and movements produced for a day.
    * plan_day - validate orders and assemble their round trips.
    * run_day - fetch from the REST service, plan and write result files.

Usage:
    The CLI calls ``run_day``; the HTTP interface calls ``plan_day`` with
    data supplied in the request body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from .configuration import get_settings
from .data_retrieval import DeliveryApiClient
from .export import ResultFiles, ResultWriter
from .geometry import Position, Region
from .logging_utils import get_logger
from .orders import Order, OrderValidator, Restaurant
from .route_planning import Movement, PathPlanner, RouteAssembler

LOGGER = get_logger(__name__)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_arguments(day: str, url: str) -> None:
    """Raise ``ValueError`` when the date or service URL is malformed."""

    if not _DATE_PATTERN.match(day):
        raise ValueError("Date error: Date must be in YYYY-MM-DD format")
    try:
        date.fromisoformat(day)
    except ValueError as error:
        raise ValueError(f"Date error: {day} is not a calendar date") from error
    if not url.startswith("https://"):
        raise ValueError("URL error: URL must begin with 'https://'")


@dataclass(slots=True)
class PlannedDay:
    orders: List[Order]
    movements: List[Movement]
    files: Optional[ResultFiles] = None
    routed_orders: List[Order] = field(default_factory=list)


def plan_day(
    restaurants: Sequence[Restaurant],
    orders: Sequence[Order],
    central_area: Region,
    no_fly_zones: Sequence[Region],
    *,
    base: Optional[Position] = None,
) -> PlannedDay:
    """Validate ``orders`` and plan the round trips of the valid ones."""

    valid = OrderValidator().valid_orders(orders, restaurants)
    planner = PathPlanner(no_fly_zones, central_area)
    assembler = RouteAssembler(planner, restaurants, base=base)
    movements = assembler.assemble(valid)
    return PlannedDay(orders=list(orders), movements=movements, routed_orders=valid)


def run_day(
    day: str,
    url: str,
    *,
    output_directory: Optional[Path] = None,
    client: Optional[DeliveryApiClient] = None,
) -> PlannedDay:
    """Plan ``day`` against the service at ``url`` and write the result files."""

    validate_arguments(day, url)
    api = client or DeliveryApiClient(url, timeout=get_settings().request_timeout_seconds)
    try:
        if not api.service_alive():
            raise RuntimeError("Service error: Service is not responding")
        restaurants = api.fetch_restaurants()
        orders = api.fetch_orders(day)
        central_area = api.fetch_central_area()
        no_fly_zones = api.fetch_no_fly_zones()
    finally:
        if client is None:
            api.close()

    LOGGER.info("Planning %s orders for %s", len(orders), day)
    planned = plan_day(restaurants, orders, central_area, no_fly_zones)
    planned.files = ResultWriter(output_directory).write_day(day, planned.orders, planned.movements)
    return planned
