"""Helper functions for creating matplotlib plots in examples."""

import os
from typing import List, Optional

from drone_trajectory import TrajectorySegment
from drone_trajectory.visualize import plot_path, plot_speed_profile


def save_trajectory_plots(
    segments: List[TrajectorySegment],
    filename_base: str,
    title: Optional[str] = None,
) -> None:
    """Save the speed profile and top-down path plots to files.

    Args:
        segments: Segments in traversal order
        filename_base: Output path without extension (e.g., "my_plot")
        title: Optional custom title for the speed profile
    """
    profile_file = f"{filename_base}_profile.png"
    path_file = f"{filename_base}_path.png"

    plot_speed_profile(segments, title=title, show=False, save_path=profile_file)
    plot_path(segments, show=False, save_path=path_file)
    print(f"  Plot saved: {profile_file}")
    print(f"  Plot saved: {path_file}")


def generate_example_plots(
    name: str,
    segments: List[TrajectorySegment],
    output_dir: Optional[str] = None,
) -> None:
    """Generate and save plots with automatic naming.

    Args:
        name: Base name for the plots (e.g., "basic_usage")
        segments: Segments in traversal order
        output_dir: Optional output directory (defaults to caller's directory)
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        caller_file = caller_frame.filename
        output_dir = os.path.dirname(os.path.abspath(caller_file))

    save_trajectory_plots(
        segments=segments,
        filename_base=os.path.join(output_dir, name),
        title=name.replace("_", " ").title(),
    )
