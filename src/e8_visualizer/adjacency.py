"""Proximity edges between projected points."""

import logging
from typing import Literal, Optional

import numpy as np
from scipy.spatial import cKDTree
from scipy.spatial.distance import pdist, squareform

logger = logging.getLogger(__name__)


def compute_adjacency(
    points: np.ndarray,
    threshold: float,
    min_distance: float = 0.0,
    limit: Optional[int] = None,
    method: Literal["brute", "kdtree"] = "brute"
) -> np.ndarray:
    """
    Find pairs of points closer than a threshold.

    A pair (i, j) with i < j is an edge when min_distance < d < threshold,
    where d is the Euclidean distance. With min_distance = 0 coincident
    points are also connected.

    Parameters
    ----------
    points : np.ndarray
        (n_points, M) coordinates
    threshold : float
        Exclusive upper bound on the distance
    min_distance : float, optional
        Exclusive lower bound on the distance (ignored when 0)
    limit : int, optional
        Only the first `limit` points take part
    method : str
        "brute" scans all pairs, "kdtree" queries a spatial index

    Returns
    -------
    np.ndarray
        (n_edges, 2) integer array of index pairs, sorted lexicographically
    """
    X = np.asarray(points, dtype=float)
    if X.ndim != 2:
        raise ValueError(f"Points must be a 2D array, got shape {X.shape}")
    if threshold <= 0:
        raise ValueError(f"Threshold must be positive, got {threshold}")
    if min_distance < 0 or min_distance >= threshold:
        raise ValueError(
            f"min_distance must be in [0, threshold), got {min_distance}"
        )
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        X = X[:limit]

    if len(X) < 2:
        return np.empty((0, 2), dtype=int)

    if method == "brute":
        edges = _brute_force_edges(X, threshold, min_distance)
    elif method == "kdtree":
        edges = _kdtree_edges(X, threshold, min_distance)
    else:
        raise ValueError(f"Unknown adjacency method: {method}")

    logger.debug(f"{len(edges)} edges among {len(X)} points ({method})")
    return edges


def edge_segments(points: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """
    Line segment endpoints for a set of edges.

    Parameters
    ----------
    points : np.ndarray
        (n_points, M) coordinates
    edges : np.ndarray
        (n_edges, 2) index pairs

    Returns
    -------
    np.ndarray
        (n_edges, 2, M) array of segment endpoints
    """
    X = np.asarray(points, dtype=float)
    E = np.asarray(edges, dtype=int).reshape(-1, 2)
    return X[E]


def _brute_force_edges(X: np.ndarray, threshold: float, min_distance: float) -> np.ndarray:
    D = squareform(pdist(X))
    mask = D < threshold
    if min_distance > 0:
        mask &= D > min_distance
    i, j = np.nonzero(np.triu(mask, k=1))
    return np.column_stack([i, j]).astype(int)


def _kdtree_edges(X: np.ndarray, threshold: float, min_distance: float) -> np.ndarray:
    tree = cKDTree(X)
    # query_pairs is inclusive of r
    pairs = tree.query_pairs(r=threshold, output_type='ndarray')
    if len(pairs) == 0:
        return np.empty((0, 2), dtype=int)

    d = np.linalg.norm(X[pairs[:, 0]] - X[pairs[:, 1]], axis=1)
    keep = d < threshold
    if min_distance > 0:
        keep &= d > min_distance
    pairs = np.sort(pairs[keep], axis=1)
    order = np.lexsort((pairs[:, 1], pairs[:, 0]))
    return pairs[order].astype(int)
