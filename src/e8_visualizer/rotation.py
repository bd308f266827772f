"""Rotations of N-dimensional space built from plane rotations."""

import logging
from itertools import combinations
from typing import Sequence, Tuple

import numpy as np

from .config import DIMENSION
from .roots import as_point_array

logger = logging.getLogger(__name__)

# Rotation planes of the 3D scene: adjacent pairs, then pairs four apart
DEFAULT_PLANES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (2, 3),
    (4, 5),
    (6, 7),
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
)


def plane_pairs(dimension: int = DIMENSION) -> list:
    """
    All coordinate planes (i, j) with i < j in canonical order.

    The order is i ascending, then j ascending, which is the order of the
    angles expected by rotation_matrix.

    Parameters
    ----------
    dimension : int, optional
        Dimension of the space

    Returns
    -------
    list
        C(dimension, 2) axis pairs
    """
    return list(combinations(range(dimension), 2))


def plane_names(planes: Sequence[Tuple[int, int]]) -> list:
    """Labels like 'Plane 0-1' for a list of planes."""
    return [f"Plane {i}-{j}" for i, j in planes]


def givens_rotation(dimension: int, i: int, j: int, theta: float) -> np.ndarray:
    """
    Elementary rotation by theta in the (i, j) plane.

    Parameters
    ----------
    dimension : int
        Dimension of the space
    i, j : int
        Axes spanning the plane
    theta : float
        Angle in radians

    Returns
    -------
    np.ndarray
        Identity except G[i,i] = G[j,j] = cos, G[i,j] = -sin, G[j,i] = sin
    """
    _check_plane(i, j, dimension)
    c, s = np.cos(theta), np.sin(theta)
    G = np.eye(dimension)
    G[i, i] = c
    G[i, j] = -s
    G[j, i] = s
    G[j, j] = c
    return G


def rotation_matrix(angles: Sequence[float], dimension: int = DIMENSION) -> np.ndarray:
    """
    Build a rotation from one angle per coordinate plane.

    Plane rotations are left-multiplied onto the identity in the order of
    plane_pairs, so later planes act after earlier ones. Planes with a zero
    angle are skipped.

    Parameters
    ----------
    angles : sequence of float
        C(dimension, 2) angles in radians, ordered as plane_pairs(dimension)
    dimension : int, optional
        Dimension of the space

    Returns
    -------
    np.ndarray
        dimension x dimension orthogonal matrix, applied as R @ p

    Raises
    ------
    ValueError
        If the number of angles does not match the number of planes
    """
    planes = plane_pairs(dimension)
    theta = _as_angles(angles, len(planes))

    R = np.eye(dimension)
    for (i, j), t in zip(planes, theta):
        if t != 0:
            R = givens_rotation(dimension, i, j, t) @ R

    logger.debug(f"Built rotation from {np.count_nonzero(theta)} active planes")
    return R


def plane_rotation_matrix(
    angles: Sequence[float],
    planes: Sequence[Tuple[int, int]] = DEFAULT_PLANES,
    dimension: int = DIMENSION
) -> np.ndarray:
    """
    Build a rotation from angles on a caller-chosen list of planes.

    Each plane rotation is composed with the running result by mixing rows
    i and j from their values before that plane.

    Parameters
    ----------
    angles : sequence of float
        One angle per plane, in radians
    planes : sequence of (int, int), optional
        Axis pairs to rotate in, in application order
    dimension : int, optional
        Dimension of the space

    Returns
    -------
    np.ndarray
        dimension x dimension orthogonal matrix, applied as R @ p

    Raises
    ------
    ValueError
        If the angle count differs from the plane count or a plane is invalid
    """
    planes = [tuple(plane) for plane in planes]
    for plane in planes:
        if len(plane) != 2:
            raise ValueError(f"Plane must be an axis pair, got {plane}")
        _check_plane(plane[0], plane[1], dimension)
    theta = _as_angles(angles, len(planes))

    R = np.eye(dimension)
    for (i, j), t in zip(planes, theta):
        c, s = np.cos(t), np.sin(t)
        row_i = R[i].copy()
        row_j = R[j].copy()
        R[i] = c * row_i - s * row_j
        R[j] = s * row_i + c * row_j

    return R


def apply_rotation(points, matrix: np.ndarray) -> np.ndarray:
    """
    Rotate one point or a stack of points.

    Parameters
    ----------
    points : array-like, RootSystem or sequence of RootVector
        A single N-vector or an (n_points, N) array
    matrix : np.ndarray
        N x N rotation from rotation_matrix or plane_rotation_matrix

    Returns
    -------
    np.ndarray
        Rotated points, same shape as the input

    Raises
    ------
    ValueError
        If the matrix is not square or the point dimension does not match
    """
    R = np.asarray(matrix, dtype=float)
    if R.ndim != 2 or R.shape[0] != R.shape[1]:
        raise ValueError(f"Rotation matrix must be square, got shape {R.shape}")

    P = as_point_array(points, dimension=R.shape[0])
    if P.shape[-1] != R.shape[0]:
        raise ValueError(
            f"Point dimension {P.shape[-1]} does not match rotation size {R.shape[0]}"
        )

    if P.ndim == 1:
        return R @ P
    return P @ R.T


def is_orthogonal(matrix: np.ndarray, atol: float = 1e-6) -> bool:
    """Check that M^T M is the identity within atol."""
    M = np.asarray(matrix, dtype=float)
    return bool(np.allclose(M.T @ M, np.eye(M.shape[0]), atol=atol))


def _check_plane(i: int, j: int, dimension: int) -> None:
    if i == j:
        raise ValueError(f"Rotation plane needs two distinct axes, got ({i}, {j})")
    for axis in (i, j):
        if not 0 <= axis < dimension:
            raise ValueError(f"Axis {axis} out of range for dimension {dimension}")


def _as_angles(angles: Sequence[float], expected: int) -> np.ndarray:
    theta = np.asarray(angles, dtype=float)
    if theta.ndim != 1 or theta.shape[0] != expected:
        raise ValueError(f"Expected {expected} angles, got shape {theta.shape}")
    if not np.all(np.isfinite(theta)):
        raise ValueError("Angles must be finite")
    return theta
