"""Immutable quaternion type."""

import math
from dataclasses import dataclass

from drone_trajectory.models.vector import EPSILON


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion stored as (w, x, y, z)."""

    w: float
    x: float
    y: float
    z: float


IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)


def normalize_quaternion(q: Quaternion) -> Quaternion:
    """Scale a quaternion to unit length.

    Returns:
        Unit quaternion, or IDENTITY when the input magnitude is below EPSILON
    """
    mag = math.sqrt(q.w * q.w + q.x * q.x + q.y * q.y + q.z * q.z)
    if mag < EPSILON:
        return IDENTITY
    return Quaternion(q.w / mag, q.x / mag, q.y / mag, q.z / mag)
