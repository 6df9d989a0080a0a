"""Mini README: Tests for the result payloads, GeoJSON and file writer."""

from __future__ import annotations

import json
from datetime import date

from dronedelivery.export import ResultWriter, deliveries_payload, flightpath_payload
from dronedelivery.geometry import Position, Region
from dronedelivery.navigation import HOVER_HEADING
from dronedelivery.orders import CreditCardInformation, Order, OrderStatus, OrderValidationCode, Pizza
from dronedelivery.route_planning import Movement
from dronedelivery.utils.geojson import path_to_geojson

A = Position(-3.186874, 55.944494)
B = Position(-3.186724, 55.944494)

MOVEMENTS = [
    Movement(A, B, 0.0, "ORDER01"),
    Movement(B, B, HOVER_HEADING, "ORDER01"),
    Movement(B, A, 180.0, "ORDER01"),
]
ORDER = Order(
    "ORDER01",
    date(2025, 1, 23),
    1100,
    (Pizza("Margarita", 1000),),
    CreditCardInformation("1234567812345678", "12/30", "123"),
    OrderStatus.DELIVERED,
    OrderValidationCode.NO_ERROR,
)


def test_flightpath_records() -> None:
    records = flightpath_payload(MOVEMENTS)
    assert records[0] == {
        "orderNo": "ORDER01",
        "fromLongitude": A.longitude,
        "fromLatitude": A.latitude,
        "angle": 0.0,
        "toLongitude": B.longitude,
        "toLatitude": B.latitude,
    }
    assert records[1]["angle"] == HOVER_HEADING


def test_deliveries_records() -> None:
    assert deliveries_payload([ORDER]) == [
        {
            "orderNo": "ORDER01",
            "orderStatus": "DELIVERED",
            "orderValidationCode": "NO_ERROR",
            "costInPence": 1100,
        }
    ]


def test_geojson_line_and_regions() -> None:
    square = Region.from_coordinates("zone", [(0, 0), (1, 0), (1, 1), (0, 1)])
    collection = path_to_geojson(MOVEMENTS, [square])
    line, polygon = collection["features"]
    assert collection["type"] == "FeatureCollection"
    assert line["geometry"]["type"] == "LineString"
    assert len(line["geometry"]["coordinates"]) == len(MOVEMENTS) + 1
    assert line["geometry"]["coordinates"][-1] == [A.longitude, A.latitude]
    ring = polygon["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1]
    assert polygon["properties"]["name"] == "zone"


def test_empty_path_geojson() -> None:
    collection = path_to_geojson([])
    assert collection["features"][0]["geometry"]["coordinates"] == []


def test_write_day_creates_three_files(tmp_path) -> None:
    files = ResultWriter(tmp_path / "resultfiles").write_day("2025-01-23", [ORDER], MOVEMENTS)
    assert files.deliveries.name == "deliveries-2025-01-23.json"
    assert files.flightpath.name == "flightpath-2025-01-23.json"
    assert files.geojson.name == "drone-2025-01-23.geojson"
    assert len(json.loads(files.flightpath.read_text(encoding="utf-8"))) == 3
    assert json.loads(files.deliveries.read_text(encoding="utf-8"))[0]["orderNo"] == "ORDER01"
    assert json.loads(files.geojson.read_text(encoding="utf-8"))["type"] == "FeatureCollection"
