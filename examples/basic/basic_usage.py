"""Basic usage example.

This example demonstrates:
- Creating line and arc segments
- Chaining them so boundary speeds match
- Sampling full waypoints along the chain
- Checking junctions for discontinuities

This is the simplest way to use the trajectory segments.
"""

import math
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plots

from drone_trajectory import ArcSegment, LineSegment, Vector3
from drone_trajectory.models import magnitude
from drone_trajectory.sampling import find_discontinuities, total_duration, waypoint_at


def main():
    """Line -> left turn -> line at 4m altitude."""

    print("=" * 80)
    print("BASIC TRAJECTORY SEGMENT USAGE")
    print("=" * 80)

    height = 4.0
    segments = [
        # Accelerate along +x out of the start gate
        LineSegment(Vector3(0.0, height, 0.0), Vector3(20.0, height, 0.0), v0=2.0, v1=12.0),
        # Quarter turn toward +z at constant speed (radius 8m)
        ArcSegment(
            center=Vector3(20.0, height, 8.0),
            radius=8.0,
            start_angle=-math.pi / 2,
            end_angle=0.0,
            v0=12.0,
            v1=12.0,
        ),
        # Brake along +z into the next gate
        LineSegment(Vector3(28.0, height, 8.0), Vector3(28.0, height, 30.0), v0=12.0, v1=4.0),
    ]

    print(f"\nSegments: {len(segments)}")
    print(f"  {'#':<4} {'Type':<12} {'Length':<10} {'Duration':<10} {'v0':<8} {'v1'}")
    print(f"  {'':4} {'':12} {'(m)':<10} {'(s)':<10} {'(m/s)':<8} {'(m/s)'}")
    print("  " + "-" * 60)
    for i, seg in enumerate(segments):
        print(
            f"  {i:<4} {type(seg).__name__:<12} {seg.get_length():<10.2f} "
            f"{seg.get_duration():<10.3f} {seg.get_start_speed():<8.1f} {seg.get_end_speed():.1f}"
        )
    print(f"\nTotal duration: {total_duration(segments):.3f} s")

    print("\nWaypoints:")
    print(f"  {'time':<8} {'x':<8} {'z':<8} {'speed':<8} {'|acc|':<8} {'heading':<10} {'rate'}")
    print("  " + "-" * 64)
    offset = 0.0
    for seg in segments:
        for t in (0.0, 0.5, 1.0):
            wp = waypoint_at(seg, t, time_offset=offset)
            print(
                f"  {wp.time:<8.3f} {wp.position.x:<8.2f} {wp.position.z:<8.2f} "
                f"{magnitude(wp.velocity):<8.2f} {magnitude(wp.acceleration):<8.2f} "
                f"{math.degrees(wp.heading):<10.1f} {wp.heading_rate:.3f}"
            )
        offset += seg.get_duration()

    gaps = find_discontinuities(segments)
    print("\nJunction check:")
    if not gaps:
        print("  All junctions continuous in position and speed.")
    for gap in gaps:
        print(
            f"  Segment {gap.index} -> {gap.index + 1}: "
            f"position gap {gap.position_gap:.4f} m, speed gap {gap.speed_gap:+.2f} m/s"
        )

    print("\n" + "=" * 80)
    print("GENERATING PLOTS")
    print("=" * 80)
    generate_example_plots("basic_usage", segments)
    print()


if __name__ == "__main__":
    main()
