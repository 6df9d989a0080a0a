"""Mini README: Export utilities for planned delivery days.

Exposes the payload builders and the ``ResultWriter`` that persists the
deliveries, flight-path and GeoJSON files.
"""

from .result_writer import ResultFiles, ResultWriter, deliveries_payload, flightpath_payload

__all__ = ["ResultFiles", "ResultWriter", "deliveries_payload", "flightpath_payload"]
