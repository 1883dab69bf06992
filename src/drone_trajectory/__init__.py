"""Jerk-limited trajectory segments for racing drone simulation."""

from .models import DEFAULT_CONFIG, Quaternion, TrajectoryConfig, Vector3, Waypoint
from .segments import ArcSegment, LineSegment, TrajectorySegment

__all__ = [
    "LineSegment",
    "ArcSegment",
    "TrajectorySegment",
    "Vector3",
    "Quaternion",
    "Waypoint",
    "TrajectoryConfig",
    "DEFAULT_CONFIG",
]
