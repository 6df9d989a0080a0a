"""Mini README: FastAPI-powered planning service.

Structure:
    * create_application - application factory wiring the routes.

Routes:
    * GET /health - liveness probe mirroring the upstream service format.
    * POST /plan - plans a day from restaurants, orders and regions sent in
      the body and returns deliveries, flight-path records and GeoJSON.

The service keeps no state between requests: each call builds a fresh
planner, so its route cache lives for exactly one request.
"""

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..data_retrieval import PlanRequest
from ..export import deliveries_payload, flightpath_payload
from ..logging_utils import get_logger
from ..pipeline import plan_day
from ..route_planning import RestaurantNotFound, UnreachableDestination
from ..utils.geojson import path_to_geojson

LOGGER = get_logger(__name__)


def create_application() -> FastAPI:
    """Create the FastAPI application with its routes."""

    app = FastAPI(title="Drone Delivery Planner", version="0.1.0")

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "UP"}

    @app.post("/plan")
    def plan(request: PlanRequest) -> JSONResponse:
        """Plan every valid order in the request body."""

        central_area = request.central_area.to_domain()
        no_fly_zones = [zone.to_domain() for zone in request.no_fly_zones]
        try:
            planned = plan_day(
                [restaurant.to_domain() for restaurant in request.restaurants],
                [order.to_domain() for order in request.orders],
                central_area,
                no_fly_zones,
                base=request.base.to_domain() if request.base else None,
            )
        except RestaurantNotFound as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        except UnreachableDestination as error:
            LOGGER.warning("Planning failed: %s", error)
            raise HTTPException(status_code=409, detail=str(error)) from error

        LOGGER.info(
            "Planned %s movements for %s orders", len(planned.movements), len(planned.routed_orders)
        )
        return JSONResponse(
            {
                "deliveries": deliveries_payload(planned.orders),
                "flightpath": flightpath_payload(planned.movements),
                "geojson": path_to_geojson(planned.movements, [central_area, *no_fly_zones]),
            }
        )

    return app
