"""Linear projections from 8D to 2D and 3D display coordinates."""

import logging
from typing import Optional

import numpy as np
from sklearn.decomposition import PCA

from .roots import as_point_array

logger = logging.getLogger(__name__)

# Hand-picked shadows of the root system. They are not orthonormal and carry
# no algebraic meaning.
DEFAULT_PROJECTION_2D = np.array([
    [1.0, 0.0],
    [0.0, 1.0],
    [0.5, 0.5],
    [0.5, -0.5],
    [0.0, 0.0],
    [0.0, 0.0],
    [0.0, 0.0],
    [0.0, 0.0],
])

DEFAULT_PROJECTION_3D = np.array([
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 1.0],
    [0.5, 0.5, 0.0],
    [0.5, 0.0, 0.5],
    [0.0, 0.5, 0.5],
    [0.0, 0.0, 0.0],
    [0.0, 0.0, 0.0],
])

# Used by the 3D scene, mixes in the last two axes
SCENE_PROJECTION_3D = np.array([
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 1.0],
    [0.5, 0.5, 0.0],
    [0.5, 0.0, 0.5],
    [0.0, 0.5, 0.5],
    [0.3, 0.3, 0.3],
    [-0.3, 0.3, -0.3],
])

for _matrix in (DEFAULT_PROJECTION_2D, DEFAULT_PROJECTION_3D, SCENE_PROJECTION_3D):
    _matrix.setflags(write=False)


def project(points, projection_matrix: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Project points with a linear map.

    Each output coordinate d is sum_j p[j] * P[j, d].

    Parameters
    ----------
    points : RootSystem, sequence of RootVector, or array-like
        (n_points, N) coordinates or a single N-vector
    projection_matrix : np.ndarray, optional
        N x M matrix with M in {2, 3}. Defaults to DEFAULT_PROJECTION_2D.

    Returns
    -------
    np.ndarray
        (n_points, M) projected coordinates, or (M,) for a single point

    Raises
    ------
    ValueError
        If M is not 2 or 3, or the point dimension differs from N
    """
    if projection_matrix is None:
        projection_matrix = DEFAULT_PROJECTION_2D
    P = np.asarray(projection_matrix, dtype=float)
    if P.ndim != 2 or P.shape[1] not in (2, 3):
        raise ValueError(f"Projection matrix must be N x 2 or N x 3, got shape {P.shape}")

    X = as_point_array(points, dimension=P.shape[0])
    if X.ndim not in (1, 2):
        raise ValueError(f"Points must be a vector or a 2D array, got shape {X.shape}")
    if X.shape[-1] != P.shape[0]:
        raise ValueError(
            f"Point dimension {X.shape[-1]} does not match projection rows {P.shape[0]}"
        )

    return X @ P


def project_2d(points, projection_matrix: Optional[np.ndarray] = None) -> np.ndarray:
    """Project to 2D, using DEFAULT_PROJECTION_2D when no matrix is given."""
    if projection_matrix is None:
        projection_matrix = DEFAULT_PROJECTION_2D
    return _project_to(points, projection_matrix, 2)


def project_3d(points, projection_matrix: Optional[np.ndarray] = None) -> np.ndarray:
    """Project to 3D, using DEFAULT_PROJECTION_3D when no matrix is given."""
    if projection_matrix is None:
        projection_matrix = DEFAULT_PROJECTION_3D
    return _project_to(points, projection_matrix, 3)


def pca_projection_matrix(points, n_components: int = 2) -> np.ndarray:
    """
    Projection matrix onto the leading principal axes of a point set.

    The root system is centred, so for the E8 roots the projection equals
    the PCA scores exactly.

    Parameters
    ----------
    points : RootSystem, sequence of RootVector, or array-like
        (n_points, N) coordinates
    n_components : int, optional
        Output dimension, 2 or 3

    Returns
    -------
    np.ndarray
        N x n_components matrix with orthonormal columns
    """
    if n_components not in (2, 3):
        raise ValueError(f"n_components must be 2 or 3, got {n_components}")

    X = as_point_array(points)
    if X.ndim != 2 or X.shape[0] < n_components:
        raise ValueError(f"Need at least {n_components} points, got shape {X.shape}")

    pca = PCA(n_components=n_components)
    pca.fit(X)
    logger.debug(
        f"PCA explained variance ratio: {np.round(pca.explained_variance_ratio_, 4)}"
    )
    return pca.components_.T


def _project_to(points, projection_matrix: np.ndarray, n_out: int) -> np.ndarray:
    P = np.asarray(projection_matrix, dtype=float)
    if P.ndim != 2 or P.shape[1] != n_out:
        raise ValueError(f"Expected an N x {n_out} projection matrix, got shape {P.shape}")
    return project(points, P)
