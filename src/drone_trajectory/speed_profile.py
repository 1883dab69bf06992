"""Jerk-limited S-curve speed profile shared by all segment types.

The profile covers a path of length L in total time T = 2L / (v0 + v1) using
two constant-jerk pieces split at T/2:

    first half  (time <= T/2):  v(time) = v0 + (j/2) * time^2
    second half (time >  T/2):  v(time) = v1 - (j/2) * (T - time)^2

with j = 4 (v1 - v0) / T^2. Acceleration is continuous and zero at both ends,
so segments whose boundary speeds match can be chained without velocity or
acceleration jumps.
"""

import logging
from dataclasses import dataclass

from drone_trajectory.models.config import DEFAULT_CONFIG, TrajectoryConfig

logger = logging.getLogger(__name__)


def floor_speed(speed: float, config: TrajectoryConfig = DEFAULT_CONFIG) -> float:
    """Apply the minimum boundary speed.

    Zero or negative speeds would make the duration infinite, so they are
    raised to config.min_speed instead of being rejected.
    """
    if speed < config.min_speed:
        logger.debug("Boundary speed %.6g raised to floor %.6g", speed, config.min_speed)
        return config.min_speed
    return speed


@dataclass(frozen=True)
class JerkLimitedProfile:
    """Closed-form speed, acceleration and distance along a single segment.

    Attributes:
        start_speed: Speed at time 0 (already floored)
        end_speed: Speed at time duration (already floored)
        length: Path length covered by the profile (0 when degenerate)
        duration: Total traversal time in seconds (0 when degenerate)
        jerk: Signed jerk of the first half; the second half mirrors it
    """

    start_speed: float
    end_speed: float
    length: float
    duration: float
    jerk: float

    @classmethod
    def from_boundary_speeds(
        cls,
        length: float,
        v0: float,
        v1: float,
        config: TrajectoryConfig = DEFAULT_CONFIG,
    ) -> "JerkLimitedProfile":
        """Build the profile for a path length and boundary speeds.

        Args:
            length: Path length in meters
            v0: Requested start speed in m/s (floored to config.min_speed)
            v1: Requested end speed in m/s (floored to config.min_speed)
            config: Numerical thresholds

        Returns:
            Profile with duration 2L / (v0 + v1), or a degenerate profile with
            zero length, duration and jerk when length is below config.length_epsilon
        """
        v0 = floor_speed(v0, config)
        v1 = floor_speed(v1, config)

        if length < config.length_epsilon:
            logger.debug("Path length %.3g below threshold, using stationary profile", length)
            return cls(start_speed=v0, end_speed=v1, length=0.0, duration=0.0, jerk=0.0)

        duration = (2.0 * length) / (v0 + v1)
        jerk = (4.0 * (v1 - v0)) / (duration * duration)
        return cls(start_speed=v0, end_speed=v1, length=length, duration=duration, jerk=jerk)

    @property
    def is_degenerate(self) -> bool:
        """True when the profile describes a stationary point."""
        return self.duration == 0.0

    def _clamp_time(self, time: float) -> float:
        return max(0.0, min(self.duration, time))

    def speed(self, time: float) -> float:
        """Speed in m/s at elapsed time (clamped to [0, duration])."""
        if self.is_degenerate:
            return 0.0
        time = self._clamp_time(time)
        half = self.duration / 2.0

        if time <= half:
            return self.start_speed + (self.jerk / 2.0) * time * time
        dt_end = self.duration - time
        return self.end_speed - (self.jerk / 2.0) * dt_end * dt_end

    def acceleration(self, time: float) -> float:
        """Tangential acceleration in m/s^2 at elapsed time (clamped to [0, duration])."""
        if self.is_degenerate:
            return 0.0
        time = self._clamp_time(time)
        half = self.duration / 2.0

        if time <= half:
            return self.jerk * time
        return self.jerk * (self.duration - time)

    def distance(self, time: float) -> float:
        """Distance traveled in meters at elapsed time (clamped to [0, duration]).

        The second half integrates v1 - (j/2)(T - tau)^2 from T/2, so the
        result equals the first-half expression at T/2 and reaches exactly
        (v0 + v1) * T / 2 = length at T.
        """
        if self.is_degenerate:
            return 0.0
        time = self._clamp_time(time)
        half = self.duration / 2.0
        j6 = self.jerk / 6.0

        if time <= half:
            return self.start_speed * time + j6 * time * time * time

        distance_at_half = self.start_speed * half + j6 * half * half * half
        dt_end = self.duration - time
        return (
            distance_at_half
            + self.end_speed * (time - half)
            + j6 * (dt_end * dt_end * dt_end - half * half * half)
        )
