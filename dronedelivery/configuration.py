"""Mini README: Centralised configuration for the delivery planner.

Structure:
    * DeliverySettings - pydantic-settings model describing runtime knobs.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the drone step length, the arrival
    threshold, the base coordinates, order charges and service ports. Values
    come from ``DRONEDELIVERY_*`` environment variables or a ``.env`` file.
    The configuration is cached so validation happens once per process; tests
    call ``get_settings.cache_clear()`` after patching the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APPLETON_TOWER = (-3.186874, 55.944494)


class DeliverySettings(BaseSettings):
    """Runtime configuration for planning a day of drone deliveries."""

    model_config = SettingsConfigDict(
        env_prefix="DRONEDELIVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    move_distance: float = Field(
        0.00015,
        gt=0,
        description="Length of one drone step in coordinate degrees.",
    )
    close_threshold: float = Field(
        0.00015,
        gt=0,
        description="Distance in degrees under which two positions count as close.",
    )
    max_search_steps: int = Field(
        20_000,
        ge=1,
        description="Upper bound on steps of a single one-way search before giving up.",
    )
    base_longitude: float = Field(APPLETON_TOWER[0], ge=-180, le=180)
    base_latitude: float = Field(APPLETON_TOWER[1], ge=-90, le=90)
    max_pizzas_per_order: int = Field(4, ge=1)
    order_charge_in_pence: int = Field(100, ge=0)
    result_directory: Path = Field(
        Path("resultfiles"),
        description="Directory receiving deliveries, flightpath and GeoJSON files.",
    )
    request_timeout_seconds: float = Field(30.0, gt=0)
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(8000, ge=1, le=65535)
    api_base_url: Optional[str] = Field(
        None,
        description="Default REST service URL when the CLI is not given one.",
    )

    @field_validator("result_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories; creation is left to the writers."""

        return Path(value).expanduser()

    @model_validator(mode="after")
    def _check_thresholds(self) -> "DeliverySettings":
        if self.close_threshold < self.move_distance:
            raise ValueError(
                "close_threshold must be at least move_distance or the search cannot converge"
            )
        return self


@lru_cache()
def get_settings() -> DeliverySettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DeliverySettings()
