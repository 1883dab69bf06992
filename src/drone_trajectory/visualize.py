"""Visualization utilities for trajectory segment analysis.

This module provides functions to plot speed and acceleration profiles over
time and the top-down shape of a chain of segments.
"""

from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from drone_trajectory.sampling import sample_path
from drone_trajectory.segments import ArcSegment, TrajectorySegment


def _segment_start_times(segments: Sequence[TrajectorySegment]) -> np.ndarray:
    """Calculate cumulative start time of each segment.

    Args:
        segments: List of segments

    Returns:
        Array of cumulative times at the start of each segment
    """
    times = [0.0]
    for seg in segments[:-1]:
        times.append(times[-1] + seg.get_duration())
    return np.array(times)


def plot_speed_profile(
    segments: List[TrajectorySegment],
    title: Optional[str] = None,
    samples_per_segment: int = 50,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot speed and acceleration magnitude over time.

    Creates a two-panel visualization showing:
    - Speed over time
    - Acceleration magnitude over time (tangential plus centripetal on arcs)

    Dashed vertical lines mark segment boundaries.

    Args:
        segments: Segments in traversal order
        title: Optional custom title (default: auto-generated)
        samples_per_segment: Samples taken on each segment
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> from drone_trajectory import LineSegment, Vector3
        >>> seg = LineSegment(Vector3(0, 0, 0), Vector3(20, 0, 0), v0=5.0, v1=15.0)
        >>> plot_speed_profile([seg])
    """
    if not segments:
        raise ValueError("Cannot plot empty segment list")

    samples = sample_path(segments, samples_per_segment)
    accel_mags = np.linalg.norm(samples.accelerations, axis=1)
    boundaries = _segment_start_times(segments)

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 7), sharex=True)

    if title is None:
        n_arcs = sum(1 for seg in segments if isinstance(seg, ArcSegment))
        title = (
            f"Speed Profile\n"
            f"{len(segments)} segments ({n_arcs} arcs) | "
            f"Duration: {samples.times[-1]:.2f}s"
        )

    fig.suptitle(title, fontsize=14, fontweight="bold")

    # Plot 1: Speed
    ax1.plot(samples.times, samples.speeds, linewidth=2, label="Speed")
    ax1.set_ylabel("Speed (m/s)")
    ax1.set_title("Speed")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # Plot 2: Acceleration
    ax2.plot(samples.times, accel_mags, color="purple", linewidth=2, label="|Acceleration|")
    ax2.set_ylabel("Acceleration (m/s²)")
    ax2.set_xlabel("Time (seconds)")
    ax2.set_title("Acceleration Magnitude")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    for ax in (ax1, ax2):
        for boundary in boundaries[1:]:
            ax.axvline(boundary, color="gray", linestyle="--", alpha=0.5)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_path(
    segments: List[TrajectorySegment],
    title: Optional[str] = None,
    samples_per_segment: int = 50,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot the horizontal (x, z) shape of a chain of segments (single panel).

    Args:
        segments: Segments in traversal order
        title: Optional custom title (default: "Path (top-down)")
        samples_per_segment: Samples taken on each segment
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not segments:
        raise ValueError("Cannot plot empty segment list")

    samples = sample_path(segments, samples_per_segment)
    start_points = [seg.get_start_position() for seg in segments]
    starts = np.array([[p.x, p.z] for p in start_points])

    if title is None:
        title = "Path (top-down)"

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.plot(samples.positions[:, 0], samples.positions[:, 2], linewidth=2, label="Path")
    ax.scatter(starts[:, 0], starts[:, 1], color="red", zorder=3, label="Segment start")
    ax.set_xlabel("x (m)")
    ax.set_ylabel("z (m)")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
