"""Generation of the E8 root system."""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Optional, Tuple

import numpy as np

from .config import DIMENSION, WEYL_GROUP_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootVector:
    """A root of the system with its stable index."""

    coordinates: Tuple[float, ...]
    index: int

    def as_array(self) -> np.ndarray:
        return np.array(self.coordinates, dtype=float)

    @property
    def is_half_integer(self) -> bool:
        return all(abs(c) == 0.5 for c in self.coordinates)


@dataclass(frozen=True)
class RootSystem:
    """
    The E8 roots together with their structural constants.

    The Cartan matrix and Weyl group order are descriptive constants of E8
    and are not derived from the generated roots.
    """

    roots: Tuple[RootVector, ...]
    dimension: int
    rank: int
    cartan_matrix: Tuple[Tuple[int, ...], ...]
    weyl_group_order: int

    def __len__(self) -> int:
        return len(self.roots)

    def coordinates(self) -> np.ndarray:
        """
        Return the roots as an array.

        Returns
        -------
        np.ndarray
            (n_roots, dimension) array, row k is root k
        """
        return np.array([root.coordinates for root in self.roots], dtype=float)

    def cartan_array(self) -> np.ndarray:
        return np.array(self.cartan_matrix, dtype=int)


def cartan_matrix(rank: int = DIMENSION) -> Tuple[Tuple[int, ...], ...]:
    """
    Tridiagonal Cartan matrix: 2 on the diagonal, -1 next to it.

    Parameters
    ----------
    rank : int, optional
        Size of the matrix

    Returns
    -------
    tuple of tuple of int
        rank x rank integer matrix
    """
    rows = []
    for i in range(rank):
        row = [0] * rank
        row[i] = 2
        if i > 0:
            row[i - 1] = -1
        if i < rank - 1:
            row[i + 1] = -1
        rows.append(tuple(row))
    return tuple(rows)


def integer_roots(dimension: int = DIMENSION) -> list:
    """
    Roots of the form (+-1, +-1, 0, ..., 0).

    Axis pairs are enumerated with i < j, i outermost, and for each pair the
    signs run (-1, -1), (-1, +1), (+1, -1), (+1, +1).

    Parameters
    ----------
    dimension : int, optional
        Number of axes

    Returns
    -------
    list
        Coordinate tuples, C(dimension, 2) * 4 of them
    """
    roots = []
    for i, j in combinations(range(dimension), 2):
        for s1 in (-1.0, 1.0):
            for s2 in (-1.0, 1.0):
                coords = [0.0] * dimension
                coords[i] = s1
                coords[j] = s2
                roots.append(tuple(coords))
    return roots


def half_integer_roots(dimension: int = DIMENSION) -> list:
    """
    Roots with every coordinate +-1/2 and an even number of minus signs.

    Bit k of the sign mask makes coordinate k negative, masks are taken in
    ascending order.

    Parameters
    ----------
    dimension : int, optional
        Number of axes

    Returns
    -------
    list
        Coordinate tuples, 2 ** (dimension - 1) of them
    """
    roots = []
    for mask in range(2 ** dimension):
        negatives = bin(mask).count("1")
        if negatives % 2:
            continue
        roots.append(tuple(
            -0.5 if (mask >> k) & 1 else 0.5 for k in range(dimension)
        ))
    return roots


def generate_root_system() -> RootSystem:
    """
    Generate the E8 root system.

    Integer-type roots come first, then half-integer-type roots; each root's
    index is its position in that sequence.

    Returns
    -------
    RootSystem
        240 roots in 8 dimensions with the E8 Cartan matrix and Weyl order
    """
    coordinates = integer_roots(DIMENSION) + half_integer_roots(DIMENSION)
    roots = tuple(
        RootVector(coordinates=coords, index=k)
        for k, coords in enumerate(coordinates)
    )
    logger.debug(f"Generated {len(roots)} roots in {DIMENSION} dimensions")

    return RootSystem(
        roots=roots,
        dimension=DIMENSION,
        rank=DIMENSION,
        cartan_matrix=cartan_matrix(DIMENSION),
        weyl_group_order=WEYL_GROUP_ORDER,
    )


def root_summary(system: RootSystem) -> dict:
    """
    Summarize a root system.

    Parameters
    ----------
    system : RootSystem
        Root system to describe

    Returns
    -------
    dict
        Root counts per family, dimension, rank and Weyl group order
    """
    half = sum(1 for root in system.roots if root.is_half_integer)
    norms = np.sum(system.coordinates() ** 2, axis=1)
    return {
        'num_roots': len(system.roots),
        'integer_roots': len(system.roots) - half,
        'half_integer_roots': half,
        'dimension': system.dimension,
        'rank': system.rank,
        'weyl_group_order': system.weyl_group_order,
        'squared_norms': sorted(set(norms.tolist())),
    }


def as_point_array(points, dimension: Optional[int] = None) -> np.ndarray:
    """
    Convert roots or raw coordinates to a float array.

    Parameters
    ----------
    points : RootSystem, sequence of RootVector, or array-like
        Points to convert
    dimension : int, optional
        Point dimension used to shape an empty input as (0, dimension)

    Returns
    -------
    np.ndarray
        (n_points, dimension) array, or (dimension,) for a single point
    """
    if isinstance(points, RootSystem):
        return points.coordinates()
    if isinstance(points, RootVector):
        return points.as_array()
    if len(points) and isinstance(points[0], RootVector):
        return np.array([root.coordinates for root in points], dtype=float)
    X = np.asarray(points, dtype=float)
    if X.size == 0 and X.ndim == 1 and dimension is not None:
        return X.reshape(0, dimension)
    return X
