"""Mini README: Serialise a planned day into the three result files.

Structure:
    * deliveries_payload - per-order outcome records.
    * flightpath_payload - one record per drone movement.
    * ResultWriter - writes deliveries, flightpath and GeoJSON files for a date.

File names follow ``deliveries-YYYY-MM-DD.json``,
``flightpath-YYYY-MM-DD.json`` and ``drone-YYYY-MM-DD.geojson``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..configuration import get_settings
from ..logging_utils import get_logger
from ..orders import Order
from ..route_planning import Movement
from ..utils.geojson import path_to_geojson

LOGGER = get_logger(__name__)


def deliveries_payload(orders: Sequence[Order]) -> List[Dict[str, object]]:
    return [
        {
            "orderNo": order.order_no,
            "orderStatus": order.order_status.value,
            "orderValidationCode": order.order_validation_code.value,
            "costInPence": order.price_total_in_pence,
        }
        for order in orders
    ]


def flightpath_payload(movements: Sequence[Movement]) -> List[Dict[str, object]]:
    return [movement.as_record() for movement in movements]


@dataclass(slots=True)
class ResultFiles:
    """Paths written for one planned day."""

    deliveries: Path
    flightpath: Path
    geojson: Path


class ResultWriter:
    """Persist a planned day to ``directory``."""

    def __init__(self, directory: Optional[Path] = None) -> None:
        self.directory = Path(directory) if directory is not None else get_settings().result_directory

    def _write(self, destination: Path, payload: object) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle)
        LOGGER.info("Wrote %s", destination)
        return destination

    def write_day(self, day: str, orders: Sequence[Order], movements: Sequence[Movement]) -> ResultFiles:
        """Write the three result files for ``day`` and return their paths."""

        return ResultFiles(
            deliveries=self._write(self.directory / f"deliveries-{day}.json", deliveries_payload(orders)),
            flightpath=self._write(self.directory / f"flightpath-{day}.json", flightpath_payload(movements)),
            geojson=self._write(self.directory / f"drone-{day}.geojson", path_to_geojson(movements)),
        )
