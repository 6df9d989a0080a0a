"""Mini README: Application-wide logging helpers for dronedelivery.

Structure:
    * configure_root_logger - installs the single console handler and level.
    * get_logger - factory returning module loggers with baseline config.

Usage:
    Every module creates ``LOGGER = get_logger(__name__)``. The first call
    installs a console handler on the root logger; later calls only adjust the
    level so the CLI can switch to verbose output without stacking handlers
    when the planner is imported from several entry points.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once and apply ``level`` on every call."""

    global _HANDLER
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring a handler is installed."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
