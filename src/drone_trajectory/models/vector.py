"""Immutable 3D vector type and free-function vector algebra."""

import math
from dataclasses import dataclass

# Magnitudes below this are treated as zero when normalizing
EPSILON = 1e-10


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space (y is the vertical axis)."""

    x: float
    y: float
    z: float


ZERO = Vector3(0.0, 0.0, 0.0)
UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    """Return a - b."""
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector3, s: float) -> Vector3:
    return Vector3(v.x * s, v.y * s, v.z * s)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def magnitude(v: Vector3) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def magnitude_2d(v: Vector3) -> float:
    """Magnitude of the horizontal (x, z) part of a vector."""
    return math.sqrt(v.x * v.x + v.z * v.z)


def normalize(v: Vector3) -> Vector3:
    """Scale a vector to unit length.

    Returns:
        Unit vector, or the zero vector when the input magnitude is below EPSILON
    """
    mag = magnitude(v)
    if mag < EPSILON:
        return ZERO
    return Vector3(v.x / mag, v.y / mag, v.z / mag)


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation from a (t=0) to b (t=1), not clamped."""
    return Vector3(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def distance(a: Vector3, b: Vector3) -> float:
    return magnitude(subtract(a, b))
