"""Example: auto-rotating the E8 root system in 8D, viewed in 3D."""

import numpy as np
from e8_visualizer import (
    DEFAULT_PLANES,
    generate_root_system,
    advance_angles,
    combine_angles,
    view_3d,
    plot_projection,
)


def main():
    """Step the auto-rotation for a number of frames and plot the last one."""
    system = generate_root_system()

    n_frames = 600
    auto = np.zeros(len(DEFAULT_PLANES))
    manual = np.zeros(len(DEFAULT_PLANES))
    manual[0] = np.pi / 6  # D1-D2

    print(f"Advancing {n_frames} auto-rotation frames...")
    for _ in range(n_frames):
        auto = advance_angles(auto)
        frame = view_3d(system, combine_angles(auto, manual), show_connections=False)

    frame = view_3d(system, combine_angles(auto, manual))
    print(f"Final frame: {len(frame.points)} points, {len(frame.edges)} connections")
    print(f"Final angles (deg): {np.round(np.degrees(auto + manual), 1)}")

    plot_projection(
        frame,
        title="E8 Root System in 3D (8D rotation)",
        save_path="e8_rotation_3d.png"
    )
    print("Plot saved as e8_rotation_3d.png")


if __name__ == "__main__":
    main()
