"""Finite-difference derivatives for functions of time.

Used where an analytic derivative is impractical (e.g. jerk and heading rate of
a sampled trajectory). Central differences carry O(dt^2) truncation error,
forward differences O(dt).
"""

from typing import Callable

from drone_trajectory.models.vector import Vector3

NUMERICAL_DIFF_DT = 0.001


def numerical_derivative(
    fn: Callable[[float], float], t: float, dt: float = NUMERICAL_DIFF_DT
) -> float:
    """Central-difference derivative of a scalar function at t.

    Examples:
        >>> round(numerical_derivative(lambda x: x * x, 3.0), 6)
        6.0
    """
    return (fn(t + dt) - fn(t - dt)) / (2.0 * dt)


def numerical_derivative_vector(
    fn: Callable[[float], Vector3], t: float, dt: float = NUMERICAL_DIFF_DT
) -> Vector3:
    """Central-difference derivative of a vector function at t."""
    p1 = fn(t + dt)
    p0 = fn(t - dt)
    inv = 1.0 / (2.0 * dt)
    return Vector3((p1.x - p0.x) * inv, (p1.y - p0.y) * inv, (p1.z - p0.z) * inv)


def forward_derivative(
    fn: Callable[[float], float], t: float, dt: float = NUMERICAL_DIFF_DT
) -> float:
    """Forward-difference derivative of a scalar function at t.

    Only samples at t and t + dt, so it can be used at the start of a domain.
    """
    return (fn(t + dt) - fn(t)) / dt


def forward_derivative_vector(
    fn: Callable[[float], Vector3], t: float, dt: float = NUMERICAL_DIFF_DT
) -> Vector3:
    """Forward-difference derivative of a vector function at t."""
    p1 = fn(t + dt)
    p0 = fn(t)
    return Vector3((p1.x - p0.x) / dt, (p1.y - p0.y) / dt, (p1.z - p0.z) / dt)
