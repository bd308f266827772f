"""Example: 2D shadow of the E8 root system, rotated in a few planes."""

import numpy as np
from e8_visualizer import (
    generate_root_system,
    plane_pairs,
    plane_names,
    view_2d,
    plot_projection,
)


def main():
    """Rotate E8 in the 0-4 and 2-6 planes and plot the 2D projection."""
    print("Generating the E8 root system...")
    system = generate_root_system()
    print(f"  {len(system)} roots in {system.dimension} dimensions")

    # One angle per plane, ordered as plane_pairs()
    planes = plane_pairs()
    angles = np.zeros(len(planes))
    angles[planes.index((0, 4))] = np.pi / 5
    angles[planes.index((2, 6))] = np.pi / 7

    active = [name for name, a in zip(plane_names(planes), angles) if a != 0]
    print(f"Rotating in: {', '.join(active)}")

    frame = view_2d(system, angles, max_roots=None)
    print(f"Projected {len(frame.points)} roots, {len(frame.edges)} connecting lines")

    plot_projection(
        frame,
        title="E8 Root System Projection (2D)",
        save_path="e8_projection_2d.png"
    )
    print("Plot saved as e8_projection_2d.png")


if __name__ == "__main__":
    main()
