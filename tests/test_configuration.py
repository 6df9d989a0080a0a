"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dronedelivery.configuration import APPLETON_TOWER, DeliverySettings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("DRONEDELIVERY_MOVE_DISTANCE", "DRONEDELIVERY_CLOSE_THRESHOLD", "DRONEDELIVERY_RESULT_DIRECTORY"):
        monkeypatch.delenv(name, raising=False)
    settings = DeliverySettings(_env_file=None)
    assert settings.move_distance == 0.00015
    assert settings.close_threshold == 0.00015
    assert (settings.base_longitude, settings.base_latitude) == APPLETON_TOWER
    assert settings.max_pizzas_per_order == 4
    assert settings.order_charge_in_pence == 100
    assert settings.result_directory == Path("resultfiles")


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DRONEDELIVERY_MOVE_DISTANCE", "0.0001")
    monkeypatch.setenv("DRONEDELIVERY_RESULT_DIRECTORY", "~/drone-results")
    settings = DeliverySettings(_env_file=None)
    assert settings.move_distance == 0.0001
    assert settings.result_directory == Path("~/drone-results").expanduser()


def test_close_threshold_must_cover_a_step() -> None:
    with pytest.raises(ValidationError):
        DeliverySettings(_env_file=None, move_distance=0.0002, close_threshold=0.0001)


def test_get_settings_is_cached(monkeypatch) -> None:
    get_settings.cache_clear()
    try:
        first = get_settings()
        monkeypatch.setenv("DRONEDELIVERY_ORDER_CHARGE_IN_PENCE", "250")
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings().order_charge_in_pence == 250
    finally:
        monkeypatch.delenv("DRONEDELIVERY_ORDER_CHARGE_IN_PENCE", raising=False)
        get_settings.cache_clear()
