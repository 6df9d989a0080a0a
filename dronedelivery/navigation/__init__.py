"""Mini README: Movement model and flight constraints.

``positions`` holds the compass step model and distance helpers while
``constraints`` applies the no-fly and central-area rules to candidate moves.
"""

from .constraints import ConstraintChecker, is_move_allowed
from .positions import (
    COMPASS_HEADINGS,
    DRONE_IS_CLOSE_DISTANCE,
    DRONE_MOVE_DISTANCE,
    HOVER_HEADING,
    InvalidHeading,
    distance,
    is_close,
    is_valid_heading,
    reverse_heading,
    step,
)

__all__ = [
    "COMPASS_HEADINGS",
    "ConstraintChecker",
    "DRONE_IS_CLOSE_DISTANCE",
    "DRONE_MOVE_DISTANCE",
    "HOVER_HEADING",
    "InvalidHeading",
    "distance",
    "is_close",
    "is_move_allowed",
    "is_valid_heading",
    "reverse_heading",
    "step",
]
