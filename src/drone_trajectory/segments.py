"""Line and arc trajectory segments with jerk-limited speed profiles.

Every segment is evaluated at a normalized parameter t in [0, 1] that maps
linearly onto its own duration. Values of t outside that range are clamped.
Segments are built once and only queried afterwards; queries never raise.

Example:
    >>> from drone_trajectory.models import Vector3
    >>> line = LineSegment(Vector3(0, 0, 0), Vector3(10, 0, 0), v0=1.0, v1=1.0)
    >>> line.get_duration()
    10.0
    >>> line.get_position(0.5)
    Vector3(x=5.0, y=0.0, z=0.0)
"""

import logging
import math
from typing import Optional, Union

from drone_trajectory.angles import wrap_angle
from drone_trajectory.models.config import DEFAULT_CONFIG, TrajectoryConfig
from drone_trajectory.models.vector import (
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    ZERO,
    Vector3,
    add,
    cross,
    dot,
    magnitude,
    normalize,
    scale,
    subtract,
)
from drone_trajectory.speed_profile import JerkLimitedProfile

logger = logging.getLogger(__name__)


class _JerkLimitedSegment:
    """Shared profile handling and accessors for line and arc segments."""

    def __init__(
        self, length: float, v0: float, v1: float, config: TrajectoryConfig
    ) -> None:
        self._config = config
        self._profile = JerkLimitedProfile.from_boundary_speeds(length, v0, v1, config)

    @property
    def profile(self) -> JerkLimitedProfile:
        """Speed profile along the segment."""
        return self._profile

    def is_degenerate(self) -> bool:
        """True when the segment collapsed to a stationary point."""
        return self._profile.is_degenerate

    def _elapsed(self, t: float) -> float:
        """Map normalized t (clamped to [0, 1]) to elapsed time in seconds."""
        t = max(0.0, min(1.0, t))
        return t * self._profile.duration

    def get_duration(self) -> float:
        """Total traversal time in seconds."""
        return self._profile.duration

    def get_length(self) -> float:
        """Path length in meters."""
        return self._profile.length

    def get_start_speed(self) -> float:
        return self._profile.start_speed

    def get_end_speed(self) -> float:
        return self._profile.end_speed


class LineSegment(_JerkLimitedSegment):
    """Straight-line motion from p0 to p1.

    Acceleration is purely tangential: the speed profile scaled along the
    unit direction from p0 to p1.

    Args:
        p0: Start point
        p1: End point
        v0: Start speed in m/s (floored to config.min_speed)
        v1: End speed in m/s (floored to config.min_speed)
        config: Numerical thresholds (default: DEFAULT_CONFIG)

    Note:
        When p0 and p1 are closer than config.length_epsilon the segment is
        degenerate: duration and length are 0, every position query returns
        p0 and velocity/acceleration are zero.
    """

    def __init__(
        self,
        p0: Vector3,
        p1: Vector3,
        v0: float,
        v1: float,
        config: TrajectoryConfig = DEFAULT_CONFIG,
    ) -> None:
        self._p0 = p0
        self._p1 = p1

        delta = subtract(p1, p0)
        length = magnitude(delta)
        if length < config.length_epsilon:
            logger.debug("Line segment from %s to %s is degenerate", p0, p1)
            self._direction = UNIT_X
            length = 0.0
        else:
            self._direction = scale(delta, 1.0 / length)

        super().__init__(length, v0, v1, config)

    @property
    def direction(self) -> Vector3:
        """Unit direction of travel (UNIT_X for degenerate segments)."""
        return self._direction

    def get_position(self, t: float) -> Vector3:
        """Position at normalized parameter t."""
        if self.is_degenerate():
            return self._p0
        s = self._profile.distance(self._elapsed(t))
        return add(self._p0, scale(self._direction, s))

    def get_velocity(self, t: float) -> Vector3:
        """Velocity at normalized parameter t."""
        if self.is_degenerate():
            return ZERO
        return scale(self._direction, self._profile.speed(self._elapsed(t)))

    def get_acceleration(self, t: float) -> Vector3:
        """Acceleration at normalized parameter t (along the line only)."""
        if self.is_degenerate():
            return ZERO
        return scale(self._direction, self._profile.acceleration(self._elapsed(t)))

    def get_start_position(self) -> Vector3:
        return self._p0

    def get_end_position(self) -> Vector3:
        return self._p1

    def __repr__(self) -> str:
        return (
            f"LineSegment(p0={self._p0}, p1={self._p1}, "
            f"v0={self.get_start_speed()}, v1={self.get_end_speed()})"
        )


class ArcSegment(_JerkLimitedSegment):
    """Circular arc motion around a center point.

    The arc lies in a plane (horizontal by default) and always takes the
    shorter direction between start_angle and end_angle: the span is wrapped
    into (-pi, pi]. A caller that wants the long way around has to split the
    turn into several arcs.

    For the default horizontal plane, the point at angle a is
    (center.x + r*cos(a), height, center.z + r*sin(a)).

    Acceleration is the vector sum of the centripetal part (speed^2 / radius
    toward the center) and the tangential part from the speed profile.

    Args:
        center: Arc center
        radius: Arc radius in meters (radius <= 0 gives a degenerate arc)
        start_angle: Start angle in radians
        end_angle: End angle in radians
        v0: Start speed in m/s (floored to config.min_speed)
        v1: End speed in m/s (floored to config.min_speed)
        height: Plane offset along the normal (default: the center's own offset,
            i.e. center.y for the horizontal plane)
        plane_normal: Normal of the arc plane (default: +Y). A near-zero normal
            falls back to +Y.
        config: Numerical thresholds (default: DEFAULT_CONFIG)
    """

    def __init__(
        self,
        center: Vector3,
        radius: float,
        start_angle: float,
        end_angle: float,
        v0: float,
        v1: float,
        height: Optional[float] = None,
        plane_normal: Optional[Vector3] = None,
        config: TrajectoryConfig = DEFAULT_CONFIG,
    ) -> None:
        self._radius = radius
        self._start_angle = start_angle
        self._angle_span = wrap_angle(end_angle - start_angle)
        self._direction_sign = 1.0 if self._angle_span >= 0 else -1.0

        self._normal, self._axis_u, self._axis_w = _plane_basis(plane_normal, config)
        if plane_normal is None:
            self._origin = Vector3(center.x, center.y if height is None else height, center.z)
        elif height is None:
            self._origin = center
        else:
            offset = height - dot(center, self._normal)
            self._origin = add(center, scale(self._normal, offset))

        arc_length = radius * abs(self._angle_span)
        if arc_length < config.length_epsilon:
            logger.debug(
                "Arc segment with radius %.3g and span %.3g rad is degenerate",
                radius,
                self._angle_span,
            )
        super().__init__(arc_length, v0, v1, config)

    @property
    def center(self) -> Vector3:
        """Center of the circle, placed in the arc plane."""
        return self._origin

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def angle_span(self) -> float:
        """Signed angle traversed, in (-pi, pi]."""
        return self._angle_span

    def _point_at_angle(self, angle: float) -> Vector3:
        radial = add(
            scale(self._axis_u, self._radius * math.cos(angle)),
            scale(self._axis_w, self._radius * math.sin(angle)),
        )
        return add(self._origin, radial)

    def _tangent_at_angle(self, angle: float) -> Vector3:
        """Unit tangent in the direction of travel."""
        tangent = add(
            scale(self._axis_u, -math.sin(angle)),
            scale(self._axis_w, math.cos(angle)),
        )
        return scale(tangent, self._direction_sign)

    def _angle_at_time(self, time: float) -> float:
        fraction = self._profile.distance(time) / self._profile.length
        return self._start_angle + fraction * self._angle_span

    def get_position(self, t: float) -> Vector3:
        """Position at normalized parameter t."""
        if self.is_degenerate():
            return self._point_at_angle(self._start_angle)
        return self._point_at_angle(self._angle_at_time(self._elapsed(t)))

    def get_velocity(self, t: float) -> Vector3:
        """Velocity at normalized parameter t (tangent to the circle)."""
        if self.is_degenerate():
            return ZERO
        time = self._elapsed(t)
        angle = self._angle_at_time(time)
        return scale(self._tangent_at_angle(angle), self._profile.speed(time))

    def get_acceleration(self, t: float) -> Vector3:
        """Acceleration at normalized parameter t: centripetal plus tangential."""
        if self.is_degenerate():
            return ZERO
        time = self._elapsed(t)
        angle = self._angle_at_time(time)
        speed = self._profile.speed(time)

        to_center = subtract(self._origin, self._point_at_angle(angle))
        to_center_mag = magnitude(to_center)
        if to_center_mag > self._config.direction_epsilon:
            centripetal_mag = speed * speed / self._radius
            centripetal = scale(to_center, centripetal_mag / to_center_mag)
        else:
            centripetal = ZERO

        tangential = scale(self._tangent_at_angle(angle), self._profile.acceleration(time))
        return add(centripetal, tangential)

    def get_start_position(self) -> Vector3:
        return self._point_at_angle(self._start_angle)

    def get_end_position(self) -> Vector3:
        return self._point_at_angle(self._start_angle + self._angle_span)

    def __repr__(self) -> str:
        return (
            f"ArcSegment(center={self._origin}, radius={self._radius}, "
            f"start_angle={self._start_angle}, angle_span={self._angle_span}, "
            f"v0={self.get_start_speed()}, v1={self.get_end_speed()})"
        )


def _plane_basis(
    plane_normal: Optional[Vector3], config: TrajectoryConfig
) -> tuple[Vector3, Vector3, Vector3]:
    """Return (normal, u, w) for an arc plane.

    u is the projection of +X onto the plane (+Z when the normal is close to
    +X) and w = u x normal, so the default +Y normal gives u = +X, w = +Z.
    """
    if plane_normal is None:
        return UNIT_Y, UNIT_X, UNIT_Z

    normal = normalize(plane_normal)
    if magnitude(normal) < config.direction_epsilon:
        return UNIT_Y, UNIT_X, UNIT_Z

    reference = UNIT_X if abs(dot(normal, UNIT_X)) < 0.9 else UNIT_Z
    axis_u = normalize(subtract(reference, scale(normal, dot(reference, normal))))
    axis_w = cross(axis_u, normal)
    return normal, axis_u, axis_w


TrajectorySegment = Union[LineSegment, ArcSegment]
