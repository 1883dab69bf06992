"""Core value types for trajectory generation.

This package contains immutable value classes and the vector/quaternion helpers.
"""

from drone_trajectory.models.config import DEFAULT_CONFIG, TrajectoryConfig
from drone_trajectory.models.quaternion import IDENTITY, Quaternion, normalize_quaternion
from drone_trajectory.models.vector import (
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    ZERO,
    Vector3,
    add,
    cross,
    distance,
    dot,
    lerp,
    magnitude,
    magnitude_2d,
    normalize,
    scale,
    subtract,
)
from drone_trajectory.models.waypoint import Waypoint

__all__ = [
    "Vector3",
    "Quaternion",
    "Waypoint",
    "TrajectoryConfig",
    "DEFAULT_CONFIG",
    "IDENTITY",
    "ZERO",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "add",
    "subtract",
    "scale",
    "dot",
    "cross",
    "magnitude",
    "magnitude_2d",
    "normalize",
    "lerp",
    "distance",
    "normalize_quaternion",
]
