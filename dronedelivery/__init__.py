"""Mini README: Core package initializer for the dronedelivery planner.

The package plans round-trip drone flights from a fixed base to restaurant
pickup points while avoiding no-fly zones and honouring the central-area
rule. Subpackages are layered leaves first: ``geometry`` -> ``navigation`` ->
``route_planning``, with ``orders``, ``data_retrieval``, ``export`` and
``interface`` wrapped around the core.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
