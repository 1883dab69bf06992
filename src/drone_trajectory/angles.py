"""Angle wrapping and heading/quaternion conversion.

Headings are rotations about the vertical (y) axis. These helpers feed an
external rigid-body simulator, so they are kept as plain closed-form functions
whose results do not depend on call order or history.
"""

import math

from drone_trajectory.models.quaternion import Quaternion

TWO_PI = 2.0 * math.pi

# Beyond this many periods the correction loops are replaced by one remainder
MAX_LOOP_TURNS = 1e6


def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi].

    Uses repeated 2*pi corrections rather than a modulo so that the result for
    accumulated angles matches step-by-step wrapping exactly. Angles more than
    MAX_LOOP_TURNS periods out are reduced with math.remainder first; non-finite
    angles give nan.

    Examples:
        >>> wrap_angle(3 * math.pi / 2)
        -1.5707963267948966
        >>> wrap_angle(-math.pi)
        3.141592653589793
    """
    if not math.isfinite(angle):
        return math.nan
    if abs(angle) > MAX_LOOP_TURNS * TWO_PI:
        angle = math.remainder(angle, TWO_PI)
    while angle > math.pi:
        angle -= TWO_PI
    while angle <= -math.pi:
        angle += TWO_PI
    return angle


def wrap_angle_rate(rate: float, dt: float) -> float:
    """Wrap an angular rate into (-pi/dt, pi/dt].

    A heading difference taken over one step of length dt is ambiguous by
    multiples of 2*pi; this picks the smallest equivalent rate.

    Args:
        rate: Angular rate in rad/s
        dt: Step length in seconds (must be positive)
    """
    limit = math.pi / dt
    if not math.isfinite(rate):
        return math.nan
    if abs(rate) > MAX_LOOP_TURNS * 2.0 * limit:
        rate = math.remainder(rate, 2.0 * limit)
    while rate > limit:
        rate -= 2.0 * limit
    while rate <= -limit:
        rate += 2.0 * limit
    return rate


def angle_difference(target: float, current: float) -> float:
    """Shortest signed rotation from current to target, in (-pi, pi]."""
    return wrap_angle(target - current)


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate from angle a to angle b along the shorter direction."""
    return wrap_angle(a + angle_difference(b, a) * t)


def quaternion_from_heading(heading: float) -> Quaternion:
    """Build a heading-only quaternion (rotation about the y axis)."""
    half = heading / 2.0
    return Quaternion(w=math.cos(half), x=0.0, y=math.sin(half), z=0.0)


def heading_from_quaternion(q: Quaternion) -> float:
    """Extract the heading (yaw about the y axis) from a quaternion."""
    siny_cosp = 2.0 * (q.w * q.y + q.x * q.z)
    cosy_cosp = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return math.atan2(siny_cosp, cosy_cosp)
