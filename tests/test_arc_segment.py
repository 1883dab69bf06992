"""Tests for jerk-limited circular arc segments."""

import math

import pytest

from drone_trajectory.models import (
    UNIT_Z,
    ZERO,
    Vector3,
    dot,
    magnitude,
    normalize,
    scale,
    subtract,
)
from drone_trajectory.segments import ArcSegment


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-9) -> None:
    assert abs(actual.x - expected.x) < tol
    assert abs(actual.y - expected.y) < tol
    assert abs(actual.z - expected.z) < tol


class TestArcSegmentGeometry:
    """Tests for arc construction, span resolution and accessors."""

    def test_quarter_circle(self):
        """Center origin, r=5, 0 -> pi/2, v=1: length = duration = 5*pi/2."""
        arc = ArcSegment(Vector3(0, 0, 0), 5.0, 0.0, math.pi / 2, v0=1.0, v1=1.0)

        assert math.isclose(arc.get_length(), 5 * math.pi / 2)
        assert math.isclose(arc.get_duration(), 5 * math.pi / 2)
        assert_vec_close(arc.get_start_position(), Vector3(5.0, 0.0, 0.0))
        assert_vec_close(arc.get_end_position(), Vector3(0.0, 0.0, 5.0))

    def test_long_way_request_takes_short_way(self):
        """0 -> 3*pi/2 becomes a -pi/2 turn, not a 3*pi/2 one."""
        arc = ArcSegment(Vector3(0, 0, 0), 5.0, 0.0, 3 * math.pi / 2, v0=1.0, v1=1.0)

        assert math.isclose(arc.angle_span, -math.pi / 2)
        assert math.isclose(arc.get_length(), 5 * math.pi / 2)
        assert_vec_close(arc.get_end_position(), Vector3(0.0, 0.0, -5.0))
        # Constant speed: halfway in time is halfway in angle, at -pi/4
        expected_mid = Vector3(5 * math.cos(-math.pi / 4), 0.0, 5 * math.sin(-math.pi / 4))
        assert_vec_close(arc.get_position(0.5), expected_mid)

    def test_span_across_seam(self):
        arc = ArcSegment(Vector3(0, 0, 0), 1.0, math.pi - 0.1, -math.pi + 0.1, 1.0, 1.0)
        assert math.isclose(arc.angle_span, 0.2)

    def test_half_turn_span_is_positive(self):
        """A span of exactly -pi resolves to +pi."""
        arc = ArcSegment(Vector3(0, 0, 0), 1.0, 0.0, -math.pi, 1.0, 1.0)
        assert arc.angle_span == math.pi

    def test_huge_end_angle_is_wrapped(self):
        arc = ArcSegment(Vector3(0, 0, 0), 1.0, 0.0, 1e17, 1.0, 1.0)

        assert -math.pi < arc.angle_span <= math.pi
        assert math.isfinite(arc.get_duration())

    def test_height_defaults_to_center(self):
        arc = ArcSegment(Vector3(2, 4, 6), 3.0, 0.0, 1.0, 1.0, 1.0)
        assert arc.get_start_position() == Vector3(5.0, 4.0, 6.0)

    def test_height_override(self):
        """All positions lie on the requested height."""
        arc = ArcSegment(Vector3(0, 0, 0), 3.0, 0.0, 2.0, 1.0, 4.0, height=7.0)

        assert arc.center == Vector3(0.0, 7.0, 0.0)
        for i in range(11):
            assert arc.get_position(i / 10).y == 7.0
            assert arc.get_velocity(i / 10).y == 0.0
            assert arc.get_acceleration(i / 10).y == 0.0

    def test_accessors(self):
        arc = ArcSegment(Vector3(1, 2, 3), 4.0, 0.5, 1.5, v0=0.0, v1=6.0)

        assert arc.radius == 4.0
        assert arc.get_start_speed() == 0.1
        assert arc.get_end_speed() == 6.0
        assert repr(arc).startswith("ArcSegment(")


class TestArcSegmentKinematics:
    """Tests for position, velocity and acceleration along an arc."""

    @pytest.fixture
    def center(self):
        return Vector3(0.0, 3.0, 0.0)

    def test_positions_stay_on_circle(self, center):
        arc = ArcSegment(center, 10.0, 0.0, math.pi / 2, v0=2.0, v1=9.0)

        for i in range(21):
            pos = arc.get_position(i / 20)
            assert math.isclose(magnitude(subtract(pos, center)), 10.0)

    def test_endpoints_match(self, center):
        arc = ArcSegment(center, 10.0, 0.3, 2.1, v0=2.0, v1=9.0)

        assert_vec_close(arc.get_position(0.0), arc.get_start_position())
        assert_vec_close(arc.get_position(1.0), arc.get_end_position())

    def test_boundary_speeds_match(self, center):
        arc = ArcSegment(center, 10.0, 0.0, math.pi / 2, v0=5.0, v1=15.0)

        assert math.isclose(magnitude(arc.get_velocity(0.0)), 5.0)
        assert math.isclose(magnitude(arc.get_velocity(1.0)), 15.0)

    def test_velocity_is_tangent(self, center):
        arc = ArcSegment(center, 10.0, 0.0, math.pi / 2, v0=5.0, v1=15.0)

        for t in [0.0, 0.3, 0.5, 0.9]:
            radial = subtract(arc.get_position(t), center)
            assert abs(dot(radial, arc.get_velocity(t))) < 1e-9

    def test_velocity_direction_follows_travel(self):
        """Clockwise (negative span) arcs move toward decreasing angle."""
        ccw = ArcSegment(Vector3(0, 0, 0), 5.0, 0.0, math.pi / 2, v0=2.0, v1=2.0)
        cw = ArcSegment(Vector3(0, 0, 0), 5.0, 0.0, -math.pi / 2, v0=2.0, v1=2.0)

        assert_vec_close(ccw.get_velocity(0.0), Vector3(0.0, 0.0, 2.0))
        assert_vec_close(cw.get_velocity(0.0), Vector3(0.0, 0.0, -2.0))

    def test_distance_traveled_monotonic(self, center):
        """The angle swept grows with t."""
        arc = ArcSegment(center, 4.0, 0.0, 2.5, v0=8.0, v1=0.5)
        start = arc.get_start_position()
        previous = -1.0
        for i in range(101):
            chord = magnitude(subtract(arc.get_position(i / 100), start))
            assert chord > previous or i == 0
            previous = chord

    def test_centripetal_acceleration_at_constant_speed(self, center):
        """With v0 == v1 the acceleration is v^2/r pointing at the center."""
        arc = ArcSegment(center, 10.0, 0.0, math.pi / 2, v0=10.0, v1=10.0)

        pos = arc.get_position(0.5)
        acc = arc.get_acceleration(0.5)
        to_center = normalize(subtract(center, pos))

        assert math.isclose(magnitude(acc), 10.0)
        assert math.isclose(dot(acc, to_center), magnitude(acc))

    def test_acceleration_combines_centripetal_and_tangential(self, center):
        """Accelerating arcs carry both components, not just the tangential one."""
        arc = ArcSegment(center, 10.0, 0.0, math.pi / 2, v0=5.0, v1=15.0)
        t = 0.25
        time = t * arc.get_duration()
        speed = arc.profile.speed(time)

        pos = arc.get_position(t)
        acc = arc.get_acceleration(t)
        to_center = normalize(subtract(center, pos))
        tangent = normalize(arc.get_velocity(t))

        assert math.isclose(dot(acc, to_center), speed * speed / 10.0)
        assert math.isclose(dot(acc, tangent), arc.profile.acceleration(time))
        assert magnitude(acc) > speed * speed / 10.0

    def test_t_clamped(self, center):
        arc = ArcSegment(center, 10.0, 0.0, 1.0, v0=5.0, v1=15.0)

        assert arc.get_position(-1.0) == arc.get_position(0.0)
        assert arc.get_position(3.0) == arc.get_position(1.0)
        assert arc.get_acceleration(3.0) == arc.get_acceleration(1.0)


class TestTiltedArc:
    """Tests for arcs in a plane other than the horizontal one."""

    def test_vertical_plane(self):
        """Normal +Z puts the arc in the x/y plane."""
        center = Vector3(1.0, 2.0, 3.0)
        arc = ArcSegment(center, 2.0, 0.0, math.pi / 2, 3.0, 3.0, plane_normal=UNIT_Z)

        assert_vec_close(arc.get_start_position(), Vector3(3.0, 2.0, 3.0))
        for i in range(11):
            t = i / 10
            offset = subtract(arc.get_position(t), center)
            assert math.isclose(magnitude(offset), 2.0)
            assert abs(offset.z) < 1e-12
            assert abs(arc.get_velocity(t).z) < 1e-12

    def test_tilted_plane_centripetal(self):
        normal = Vector3(0.0, 1.0, 1.0)
        arc = ArcSegment(ZERO, 4.0, 0.0, 1.0, 2.0, 2.0, plane_normal=normal)

        pos = arc.get_position(0.5)
        acc = arc.get_acceleration(0.5)

        assert math.isclose(magnitude(pos), 4.0)
        assert abs(dot(pos, normalize(normal))) < 1e-12
        assert math.isclose(dot(acc, scale(pos, -0.25)), 1.0)

    def test_zero_normal_falls_back_to_horizontal(self):
        default = ArcSegment(Vector3(0, 1, 0), 2.0, 0.0, 1.0, 1.0, 2.0)
        fallback = ArcSegment(Vector3(0, 1, 0), 2.0, 0.0, 1.0, 1.0, 2.0, plane_normal=ZERO)

        for t in [0.0, 0.5, 1.0]:
            assert fallback.get_position(t) == default.get_position(t)


class TestDegenerateArc:
    """Tests for arcs with zero span or zero radius."""

    def test_zero_span(self):
        arc = ArcSegment(Vector3(0, 0, 0), 5.0, 1.0, 1.0, v0=3.0, v1=4.0)
        start = Vector3(5 * math.cos(1.0), 0.0, 5 * math.sin(1.0))

        assert arc.is_degenerate()
        assert arc.get_duration() == 0.0
        assert arc.get_length() == 0.0
        for t in [0.0, 0.5, 1.0]:
            assert_vec_close(arc.get_position(t), start)
            assert arc.get_velocity(t) == ZERO
            assert arc.get_acceleration(t) == ZERO

    def test_full_turn_collapses(self):
        """A 2*pi request has zero shortest span."""
        arc = ArcSegment(Vector3(0, 0, 0), 5.0, 0.0, 2 * math.pi, v0=3.0, v1=4.0)
        assert arc.is_degenerate()

    def test_zero_radius(self):
        center = Vector3(1.0, 2.0, 3.0)
        arc = ArcSegment(center, 0.0, 0.0, 1.0, v0=3.0, v1=4.0)

        assert arc.is_degenerate()
        assert arc.get_position(0.5) == center
        assert arc.get_acceleration(0.5) == ZERO
