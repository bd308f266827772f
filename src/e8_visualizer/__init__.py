"""
e8_visualizer: rotate and project the E8 root system for display.

This package provides tools for:
- Generating the 240 roots of E8 with its Cartan matrix
- Building rotations of 8D space from per-plane angles
- Projecting rotated roots to 2D or 3D and connecting nearby points
"""

import logging

from .roots import (
    RootVector,
    RootSystem,
    generate_root_system,
    root_summary,
)

from .rotation import (
    DEFAULT_PLANES,
    plane_pairs,
    plane_names,
    rotation_matrix,
    plane_rotation_matrix,
    apply_rotation,
)

from .projection import (
    DEFAULT_PROJECTION_2D,
    DEFAULT_PROJECTION_3D,
    SCENE_PROJECTION_3D,
    project,
    project_2d,
    project_3d,
    pca_projection_matrix,
)

from .adjacency import (
    compute_adjacency,
    edge_segments,
)

from .frame import (
    Frame,
    render_frame,
    view_2d,
    view_3d,
    advance_angles,
    combine_angles,
)

from .plotting import plot_projection

from .logging_config import setup_logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RootVector",
    "RootSystem",
    "generate_root_system",
    "root_summary",
    "DEFAULT_PLANES",
    "plane_pairs",
    "plane_names",
    "rotation_matrix",
    "plane_rotation_matrix",
    "apply_rotation",
    "DEFAULT_PROJECTION_2D",
    "DEFAULT_PROJECTION_3D",
    "SCENE_PROJECTION_3D",
    "project",
    "project_2d",
    "project_3d",
    "pca_projection_matrix",
    "compute_adjacency",
    "edge_segments",
    "Frame",
    "render_frame",
    "view_2d",
    "view_3d",
    "advance_angles",
    "combine_angles",
    "plot_projection",
    "setup_logging",
]
