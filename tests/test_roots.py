"""Tests for E8 root system generation."""

import numpy as np
import pytest
from e8_visualizer.roots import (
    RootVector,
    generate_root_system,
    integer_roots,
    half_integer_roots,
    cartan_matrix,
    root_summary,
    as_point_array,
)


@pytest.fixture(scope="module")
def system():
    return generate_root_system()


class TestRootCounts:
    """Test the size and shape of the generated system."""

    def test_total_count(self, system):
        """Test that 240 roots are generated."""
        assert len(system.roots) == 240
        assert len(system) == 240

    def test_family_counts(self):
        """Test 112 integer-type and 128 half-integer-type roots."""
        assert len(integer_roots()) == 112
        assert len(half_integer_roots()) == 128

    def test_coordinate_length(self, system):
        """Test that every root has 8 coordinates."""
        for root in system.roots:
            assert len(root.coordinates) == 8

    def test_metadata(self, system):
        """Test dimension, rank and Weyl group order."""
        assert system.dimension == 8
        assert system.rank == 8
        assert system.weyl_group_order == 696729600


class TestRootProperties:
    """Test mathematical properties of the roots."""

    def test_squared_norm_two(self, system):
        """Test that every root has squared length exactly 2."""
        X = system.coordinates()
        np.testing.assert_array_equal(np.sum(X ** 2, axis=1), np.full(240, 2.0))

    def test_even_parity(self, system):
        """Test that half-integer roots have an even number of minus signs."""
        half = [root for root in system.roots if root.is_half_integer]
        assert len(half) == 128
        for root in half:
            negatives = sum(1 for c in root.coordinates if c < 0)
            assert negatives % 2 == 0

    def test_unique(self, system):
        """Test that no two roots coincide."""
        assert len({root.coordinates for root in system.roots}) == 240

    def test_closed_under_negation(self, system):
        """Test that -r is a root for every root r."""
        coords = {root.coordinates for root in system.roots}
        for c in coords:
            assert tuple(-x + 0.0 for x in c) in coords

    def test_index_stability(self, system):
        """Test that roots[k].index == k."""
        for k, root in enumerate(system.roots):
            assert root.index == k

    def test_deterministic(self, system):
        """Test that generation is repeatable."""
        assert generate_root_system() == system


class TestRootOrdering:
    """Test the canonical enumeration order."""

    def test_first_root(self, system):
        """Test that root 0 is (-1, -1, 0, ..., 0)."""
        assert system.roots[0].coordinates == (-1, -1, 0, 0, 0, 0, 0, 0)

    def test_sign_order_within_pair(self, system):
        """Test sign order (-,-), (-,+), (+,-), (+,+) for the first pair."""
        firsts = [system.roots[k].coordinates[:2] for k in range(4)]
        assert firsts == [(-1, -1), (-1, 1), (1, -1), (1, 1)]
        assert system.roots[4].coordinates == (-1, 0, -1, 0, 0, 0, 0, 0)

    def test_half_integer_roots_follow_integer_roots(self, system):
        """Test that roots 112.. are the half-integer family."""
        assert not any(root.is_half_integer for root in system.roots[:112])
        assert all(root.is_half_integer for root in system.roots[112:])

    def test_first_and_last_half_integer_root(self, system):
        """Test the positions of all-plus and all-minus half roots."""
        assert system.roots[112].coordinates == (0.5,) * 8
        assert system.roots[113].coordinates == (-0.5, -0.5) + (0.5,) * 6
        assert system.roots[239].coordinates == (-0.5,) * 8

    def test_even_and_odd_examples(self, system):
        """Test presence of all-plus and absence of a single minus sign."""
        coords = {root.coordinates for root in system.roots}
        assert (0.5,) * 8 in coords
        assert (-0.5,) + (0.5,) * 7 not in coords


class TestCartanMatrix:
    """Test the attached Cartan matrix."""

    def test_tridiagonal(self, system):
        """Test 2 on the diagonal and -1 on the off-diagonals."""
        C = system.cartan_array()
        expected = 2 * np.eye(8, dtype=int) - np.eye(8, k=1, dtype=int) - np.eye(8, k=-1, dtype=int)
        np.testing.assert_array_equal(C, expected)

    def test_symmetric(self):
        """Test that the matrix is symmetric for any rank."""
        for rank in [1, 2, 5, 8]:
            C = np.array(cartan_matrix(rank))
            assert C.shape == (rank, rank)
            np.testing.assert_array_equal(C, C.T)


class TestImmutability:
    """Test that generated data cannot be modified."""

    def test_root_vector_frozen(self, system):
        """Test that root attributes cannot be reassigned."""
        with pytest.raises(AttributeError):
            system.roots[0].index = 5

    def test_coordinates_array_is_a_copy(self, system):
        """Test that editing the coordinate array leaves the system intact."""
        X = system.coordinates()
        X[0, 0] = 99.0
        assert system.roots[0].coordinates[0] == -1


class TestHelpers:
    """Test summary and conversion helpers."""

    def test_summary(self, system):
        """Test the summary counts."""
        summary = root_summary(system)
        assert summary['num_roots'] == 240
        assert summary['integer_roots'] == 112
        assert summary['half_integer_roots'] == 128
        assert summary['squared_norms'] == [2.0]

    def test_as_point_array(self, system):
        """Test conversion of systems, root lists and raw arrays."""
        assert as_point_array(system).shape == (240, 8)
        assert as_point_array(list(system.roots[:3])).shape == (3, 8)
        assert as_point_array(system.roots[0]).shape == (8,)
        root = RootVector(coordinates=(1.0, 2.0), index=0)
        np.testing.assert_array_equal(as_point_array([root]), [[1.0, 2.0]])
        np.testing.assert_array_equal(as_point_array([[1, 2]]), [[1.0, 2.0]])

    def test_as_point_array_empty(self):
        """Test that an empty list takes the given dimension."""
        assert as_point_array([], dimension=8).shape == (0, 8)
        assert as_point_array([]).shape == (0,)
