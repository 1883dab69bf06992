"""Waypoint evaluation and sampling of segments and segment chains.

Segments only answer point queries. This module turns them into full
waypoints for a dynamics integrator, into numpy arrays for analysis and
plotting, and checks junctions between consecutive segments.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from drone_trajectory.angles import wrap_angle_rate
from drone_trajectory.models.config import DEFAULT_CONFIG, TrajectoryConfig
from drone_trajectory.models.vector import ZERO, Vector3, distance, magnitude, scale, subtract
from drone_trajectory.models.waypoint import Waypoint
from drone_trajectory.segments import TrajectorySegment


def _heading_of(velocity: Vector3) -> float:
    return math.atan2(velocity.x, velocity.z)


def waypoint_at(
    segment: TrajectorySegment,
    t: float,
    time_offset: float = 0.0,
    config: TrajectoryConfig = DEFAULT_CONFIG,
) -> Waypoint:
    """Evaluate the full kinematic state of a segment at normalized parameter t.

    Position, velocity and acceleration come straight from the segment. Jerk and
    heading rate are central differences over segment time with step
    config.derivative_step (one-sided at the segment ends), clamped to
    config.max_jerk and config.max_heading_rate.

    Args:
        segment: Segment to evaluate
        t: Normalized parameter (clamped to [0, 1])
        time_offset: Start time of the segment within a longer trajectory
        config: Numerical thresholds and limits

    Returns:
        Waypoint with time = time_offset + t * duration. Degenerate segments
        report zero jerk, heading 0 and heading rate 0.
    """
    t = max(0.0, min(1.0, t))
    duration = segment.get_duration()
    position = segment.get_position(t)
    velocity = segment.get_velocity(t)
    acceleration = segment.get_acceleration(t)

    if duration == 0.0:
        return Waypoint(
            position=position,
            velocity=velocity,
            acceleration=acceleration,
            jerk=ZERO,
            heading=0.0,
            heading_rate=0.0,
            time=time_offset,
        )

    dt = config.derivative_step
    time = t * duration

    # Central difference, one-sided where the window would leave [0, duration]
    lo = max(0.0, time - dt)
    hi = min(duration, time + dt)
    window = hi - lo

    jerk = scale(
        subtract(segment.get_acceleration(hi / duration), segment.get_acceleration(lo / duration)),
        1.0 / window,
    )
    jerk_mag = magnitude(jerk)
    if jerk_mag > config.max_jerk:
        jerk = scale(jerk, config.max_jerk / jerk_mag)

    heading_lo = _heading_of(segment.get_velocity(lo / duration))
    heading_hi = _heading_of(segment.get_velocity(hi / duration))
    heading_rate = wrap_angle_rate((heading_hi - heading_lo) / window, window)
    heading_rate = max(-config.max_heading_rate, min(config.max_heading_rate, heading_rate))

    return Waypoint(
        position=position,
        velocity=velocity,
        acceleration=acceleration,
        jerk=jerk,
        heading=_heading_of(velocity),
        heading_rate=heading_rate,
        time=time_offset + time,
    )


@dataclass(frozen=True)
class SegmentSamples:
    """Uniformly sampled kinematics.

    Attributes:
        times: Sample times in seconds, shape (N,)
        positions: Positions, shape (N, 3)
        velocities: Velocities, shape (N, 3)
        accelerations: Accelerations, shape (N, 3)
        speeds: Velocity magnitudes, shape (N,)
    """

    times: np.ndarray
    positions: np.ndarray
    velocities: np.ndarray
    accelerations: np.ndarray
    speeds: np.ndarray

    def __len__(self) -> int:
        return len(self.times)


def _as_row(v: Vector3) -> List[float]:
    return [v.x, v.y, v.z]


def sample_segment(
    segment: TrajectorySegment, num_samples: int = 50, time_offset: float = 0.0
) -> SegmentSamples:
    """Sample a segment at num_samples evenly spaced values of t in [0, 1].

    Raises:
        ValueError: If num_samples is less than 2
    """
    if num_samples < 2:
        raise ValueError(f"num_samples must be >= 2, got {num_samples}")

    ts = np.linspace(0.0, 1.0, num_samples)
    positions = np.array([_as_row(segment.get_position(t)) for t in ts])
    velocities = np.array([_as_row(segment.get_velocity(t)) for t in ts])
    accelerations = np.array([_as_row(segment.get_acceleration(t)) for t in ts])

    return SegmentSamples(
        times=time_offset + ts * segment.get_duration(),
        positions=positions,
        velocities=velocities,
        accelerations=accelerations,
        speeds=np.linalg.norm(velocities, axis=1),
    )


def total_duration(segments: Sequence[TrajectorySegment]) -> float:
    """Sum of segment durations in seconds."""
    return sum(seg.get_duration() for seg in segments)


def sample_path(
    segments: Sequence[TrajectorySegment], samples_per_segment: int = 50
) -> SegmentSamples:
    """Sample consecutive segments on a shared time axis.

    Each segment starts at the cumulative duration of the ones before it.
    Junction samples appear twice (end of one segment, start of the next).

    Returns:
        Concatenated samples; empty arrays when segments is empty
    """
    if not segments:
        return SegmentSamples(
            times=np.empty(0),
            positions=np.empty((0, 3)),
            velocities=np.empty((0, 3)),
            accelerations=np.empty((0, 3)),
            speeds=np.empty(0),
        )

    parts = []
    offset = 0.0
    for seg in segments:
        parts.append(sample_segment(seg, samples_per_segment, time_offset=offset))
        offset += seg.get_duration()

    return SegmentSamples(
        times=np.concatenate([p.times for p in parts]),
        positions=np.concatenate([p.positions for p in parts]),
        velocities=np.concatenate([p.velocities for p in parts]),
        accelerations=np.concatenate([p.accelerations for p in parts]),
        speeds=np.concatenate([p.speeds for p in parts]),
    )


@dataclass(frozen=True)
class Discontinuity:
    """Mismatch at the junction between segment index and index + 1.

    Attributes:
        index: Index of the segment whose end does not meet the next start
        position_gap: Distance between end position and next start position (m)
        speed_gap: Next start speed minus end speed (m/s)
    """

    index: int
    position_gap: float
    speed_gap: float


def find_discontinuities(
    segments: Sequence[TrajectorySegment],
    position_tolerance: float = 1e-6,
    speed_tolerance: float = 1e-6,
) -> List[Discontinuity]:
    """Report junctions where consecutive segments do not chain smoothly.

    A junction is continuous when the end position of one segment matches the
    start position of the next and the end speed matches the next start speed.

    Args:
        segments: Segments in traversal order
        position_tolerance: Allowed position gap in meters
        speed_tolerance: Allowed speed gap in m/s

    Returns:
        One Discontinuity per offending junction, in order
    """
    gaps = []
    for i, (current, following) in enumerate(zip(segments, segments[1:])):
        position_gap = distance(current.get_end_position(), following.get_start_position())
        speed_gap = following.get_start_speed() - current.get_end_speed()

        if position_gap > position_tolerance or abs(speed_gap) > speed_tolerance:
            gaps.append(Discontinuity(index=i, position_gap=position_gap, speed_gap=speed_gap))

    return gaps
