"""Waypoint model: the full kinematic target handed to a dynamics integrator."""

from dataclasses import dataclass

from drone_trajectory.models.vector import Vector3


@dataclass(frozen=True)
class Waypoint:
    """Trajectory state at a single instant.

    Attributes:
        position: Position in meters
        velocity: Velocity in meters per second
        acceleration: Acceleration in meters per second squared
        jerk: Jerk in meters per second cubed (numerical estimate)
        heading: Yaw angle in radians, measured as atan2(vx, vz)
        heading_rate: Yaw rate in radians per second
        time: Time from trajectory start in seconds
    """

    position: Vector3
    velocity: Vector3
    acceleration: Vector3
    jerk: Vector3
    heading: float
    heading_rate: float
    time: float
