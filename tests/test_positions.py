"""Mini README: Tests for the compass step model and distance helpers."""

from __future__ import annotations

import pytest

from dronedelivery.geometry import Position
from dronedelivery.navigation import (
    COMPASS_HEADINGS,
    DRONE_IS_CLOSE_DISTANCE,
    DRONE_MOVE_DISTANCE,
    HOVER_HEADING,
    InvalidHeading,
    distance,
    is_close,
    reverse_heading,
    step,
)

APPLETON = Position(-3.186874, 55.944494)


def test_distance_is_euclidean() -> None:
    assert distance(Position(0.0, 0.0), Position(3.0, 4.0)) == pytest.approx(5.0)
    assert distance(APPLETON, APPLETON) == 0
    assert is_close(APPLETON, APPLETON)


def test_is_close_threshold() -> None:
    origin = Position(0.0, 0.0)
    assert is_close(origin, Position(0.0, DRONE_IS_CLOSE_DISTANCE * 0.9999))
    assert not is_close(origin, Position(0.0, DRONE_IS_CLOSE_DISTANCE * 1.1))
    assert is_close(origin, Position(0.0, 0.5), threshold=1.0)


def test_sixteen_compass_headings() -> None:
    assert len(COMPASS_HEADINGS) == 16
    assert COMPASS_HEADINGS[0] == 0
    assert COMPASS_HEADINGS[-1] == 337.5
    assert HOVER_HEADING not in COMPASS_HEADINGS


@pytest.mark.parametrize("heading", COMPASS_HEADINGS)
def test_every_step_covers_move_distance(heading: float) -> None:
    moved = step(APPLETON, heading)
    assert distance(APPLETON, moved) == pytest.approx(DRONE_MOVE_DISTANCE, rel=1e-6)


def test_step_directions() -> None:
    origin = Position(0.0, 0.0)
    east = step(origin, 0.0)
    assert east.longitude == pytest.approx(DRONE_MOVE_DISTANCE)
    assert east.latitude == pytest.approx(0.0)
    north = step(origin, 90.0)
    assert north.longitude == pytest.approx(0.0, abs=1e-12)
    assert north.latitude == pytest.approx(DRONE_MOVE_DISTANCE)
    assert step(origin, 90.0, move_distance=1.0).latitude == pytest.approx(1.0)


def test_hover_keeps_position() -> None:
    assert step(APPLETON, HOVER_HEADING) == APPLETON


@pytest.mark.parametrize("heading", [15.0, 360.0, -22.5, 400.0, 998.0])
def test_invalid_headings_are_rejected(heading: float) -> None:
    with pytest.raises(InvalidHeading):
        step(APPLETON, heading)


def test_invalid_heading_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="multiple of 22.5"):
        step(APPLETON, 15.0)


def test_reverse_heading() -> None:
    assert reverse_heading(0.0) == 180.0
    assert reverse_heading(202.5) == 22.5
    assert reverse_heading(HOVER_HEADING) == HOVER_HEADING
    with pytest.raises(InvalidHeading):
        reverse_heading(10.0)
