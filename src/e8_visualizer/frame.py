"""
Per-update pipeline: rotate the roots, project them, connect neighbours.

Everything here is a pure function of its arguments. The caller owns the
angle state and passes a consistent snapshot for each frame.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple

import numpy as np

from .adjacency import compute_adjacency
from .config import (
    AUTO_ROTATE_BASE_STEP,
    AUTO_ROTATE_STEP_INCREMENT,
    VIEW_2D_DEFAULT_ROOTS,
    VIEW_2D_EDGE_LIMIT,
    VIEW_2D_THRESHOLD,
    VIEW_3D_MIN_DISTANCE,
    VIEW_3D_SCALE,
    VIEW_3D_THRESHOLD,
)
from .projection import DEFAULT_PROJECTION_2D, SCENE_PROJECTION_3D, project
from .roots import RootSystem
from .rotation import DEFAULT_PLANES, apply_rotation, plane_rotation_matrix, rotation_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Frame:
    """Projected points and edges for one display update."""

    points: np.ndarray
    edges: np.ndarray
    rotation: np.ndarray
    indices: np.ndarray

    @property
    def n_components(self) -> int:
        return self.points.shape[1]


def render_frame(
    system: RootSystem,
    angles: Sequence[float],
    projection_matrix: Optional[np.ndarray] = None,
    *,
    planes: Optional[Sequence[Tuple[int, int]]] = None,
    max_roots: Optional[int] = None,
    threshold: Optional[float] = None,
    min_distance: float = 0.0,
    edge_limit: Optional[int] = None,
    method: Literal["brute", "kdtree"] = "brute"
) -> Frame:
    """
    Rotate, project and connect the roots for one update.

    Parameters
    ----------
    system : RootSystem
        Roots to display
    angles : sequence of float
        One angle per plane. With planes=None these are the 28 canonical
        planes of rotation_matrix.
    projection_matrix : np.ndarray, optional
        N x 2 or N x 3 matrix, defaults to DEFAULT_PROJECTION_2D
    planes : sequence of (int, int), optional
        Restrict rotation to these planes (plane_rotation_matrix)
    max_roots : int, optional
        Show only the first max_roots roots
    threshold : float, optional
        Edge distance threshold; no edges are computed when None
    min_distance : float, optional
        Lower distance bound for edges
    edge_limit : int, optional
        Only the first edge_limit displayed points get edges
    method : str
        Adjacency backend, "brute" or "kdtree"

    Returns
    -------
    Frame
        Projected points, edges, the rotation used and the root indices
    """
    if planes is None:
        R = rotation_matrix(angles, system.dimension)
    else:
        R = plane_rotation_matrix(angles, planes, system.dimension)

    roots = system.roots
    if max_roots is not None:
        if max_roots < 0:
            raise ValueError(f"max_roots must be non-negative, got {max_roots}")
        roots = roots[:max_roots]

    indices = np.array([root.index for root in roots], dtype=int)
    coords = np.array([root.coordinates for root in roots], dtype=float)
    coords = coords.reshape(-1, system.dimension)

    rotated = apply_rotation(coords, R)
    points = project(rotated, projection_matrix)

    if threshold is None:
        edges = np.empty((0, 2), dtype=int)
    else:
        edges = compute_adjacency(
            points,
            threshold,
            min_distance=min_distance,
            limit=edge_limit,
            method=method,
        )

    logger.debug(f"Frame: {len(points)} points, {len(edges)} edges")
    return Frame(points=points, edges=edges, rotation=R, indices=indices)


def view_2d(
    system: RootSystem,
    angles: Sequence[float],
    max_roots: Optional[int] = VIEW_2D_DEFAULT_ROOTS,
    show_lines: bool = True
) -> Frame:
    """
    The 2D view: all 28 planes, default 2D shadow, edges among the first 50.

    Parameters
    ----------
    system : RootSystem
        Roots to display
    angles : sequence of float
        28 angles, ordered as plane_pairs()
    max_roots : int, optional
        Number of roots shown, None for all
    show_lines : bool, optional
        Whether to compute connecting lines

    Returns
    -------
    Frame
        2D frame
    """
    return render_frame(
        system,
        angles,
        DEFAULT_PROJECTION_2D,
        max_roots=max_roots,
        threshold=VIEW_2D_THRESHOLD if show_lines else None,
        edge_limit=VIEW_2D_EDGE_LIMIT,
    )


def view_3d(
    system: RootSystem,
    angles: Sequence[float],
    scale: float = VIEW_3D_SCALE,
    show_connections: bool = True,
    method: Literal["brute", "kdtree"] = "brute"
) -> Frame:
    """
    The 3D scene: eight rotation planes, scene projection, scaled points.

    Distances are compared on the scaled points with threshold 1.2 * scale
    and a minimum of 0.1.

    Parameters
    ----------
    system : RootSystem
        Roots to display
    angles : sequence of float
        One angle per plane of DEFAULT_PLANES
    scale : float, optional
        Scale applied to the projected points
    show_connections : bool, optional
        Whether to compute connecting lines
    method : str
        Adjacency backend

    Returns
    -------
    Frame
        3D frame with scaled points
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    frame = render_frame(
        system,
        angles,
        SCENE_PROJECTION_3D,
        planes=DEFAULT_PLANES,
    )
    points = frame.points * scale

    if show_connections:
        edges = compute_adjacency(
            points,
            VIEW_3D_THRESHOLD * scale,
            min_distance=VIEW_3D_MIN_DISTANCE,
            method=method,
        )
    else:
        edges = np.empty((0, 2), dtype=int)

    return Frame(points=points, edges=edges, rotation=frame.rotation, indices=frame.indices)


def advance_angles(
    angles: Sequence[float],
    base_step: float = AUTO_ROTATE_BASE_STEP,
    step_increment: float = AUTO_ROTATE_STEP_INCREMENT
) -> np.ndarray:
    """
    One auto-rotation step: plane k turns by base_step + k * step_increment.

    Parameters
    ----------
    angles : sequence of float
        Current auto-rotation angles
    base_step : float, optional
        Step of the first plane, in radians
    step_increment : float, optional
        Extra step per plane index

    Returns
    -------
    np.ndarray
        New angles; the input is not modified
    """
    theta = np.asarray(angles, dtype=float)
    if theta.ndim != 1:
        raise ValueError(f"Angles must be a 1D sequence, got shape {theta.shape}")
    return theta + base_step + np.arange(len(theta)) * step_increment


def combine_angles(auto: Sequence[float], manual: Sequence[float]) -> np.ndarray:
    """Element-wise sum of auto-rotation and manual angles."""
    a = np.asarray(auto, dtype=float)
    m = np.asarray(manual, dtype=float)
    if a.shape != m.shape or a.ndim != 1:
        raise ValueError(f"Angle sets differ in shape: {a.shape} vs {m.shape}")
    return a + m
