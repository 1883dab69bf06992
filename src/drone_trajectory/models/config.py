"""Trajectory generation configuration model."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class TrajectoryConfig:
    """Numerical thresholds and limits used by segment generation.

    Attributes:
        min_speed: Floor applied to boundary speeds (zero speed means infinite duration)
        length_epsilon: Segments shorter than this collapse to a stationary point
        direction_epsilon: Minimum magnitude for normalizing direction vectors
        derivative_step: Time step in seconds for numerical differentiation
        max_jerk: Upper bound on the magnitude of numerically estimated jerk
        max_heading_rate: Upper bound on the magnitude of heading rate in rad/s
    """

    min_speed: float = 0.1
    length_epsilon: float = 1e-6
    direction_epsilon: float = 1e-6
    derivative_step: float = 0.001
    max_jerk: float = 100.0
    max_heading_rate: float = 5.0

    def __post_init__(self) -> None:
        """Validate that all values are positive."""
        for field in fields(self):
            value = getattr(self, field.name)
            if value <= 0:
                raise ValueError(f"{field.name} must be positive, got {value}")


DEFAULT_CONFIG = TrajectoryConfig()
