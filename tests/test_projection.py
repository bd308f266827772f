"""Tests for linear projections."""

import numpy as np
import pytest
from e8_visualizer import generate_root_system
from e8_visualizer.rotation import rotation_matrix, apply_rotation
from e8_visualizer.projection import (
    DEFAULT_PROJECTION_2D,
    DEFAULT_PROJECTION_3D,
    SCENE_PROJECTION_3D,
    project,
    project_2d,
    project_3d,
    pca_projection_matrix,
)


class TestDefaultMatrices:
    """Test the documented default projection matrices."""

    def test_shapes(self):
        """Test 8 x 2 and 8 x 3 shapes."""
        assert DEFAULT_PROJECTION_2D.shape == (8, 2)
        assert DEFAULT_PROJECTION_3D.shape == (8, 3)
        assert SCENE_PROJECTION_3D.shape == (8, 3)

    def test_scene_matrix_extends_default(self):
        """Test that the scene matrix only differs in the last two rows."""
        np.testing.assert_array_equal(SCENE_PROJECTION_3D[:6], DEFAULT_PROJECTION_3D[:6])
        np.testing.assert_array_equal(SCENE_PROJECTION_3D[6], [0.3, 0.3, 0.3])
        np.testing.assert_array_equal(SCENE_PROJECTION_3D[7], [-0.3, 0.3, -0.3])

    def test_read_only(self):
        """Test that the module constants cannot be modified in place."""
        with pytest.raises(ValueError):
            DEFAULT_PROJECTION_2D[0, 0] = 5.0


class TestProject:
    """Test the projection operation."""

    def test_basis_vectors(self):
        """Test that basis vectors map to rows of the matrix."""
        for k in range(8):
            e = np.eye(8)[k]
            np.testing.assert_allclose(project(e), DEFAULT_PROJECTION_2D[k])
            np.testing.assert_allclose(project_3d(e), DEFAULT_PROJECTION_3D[k])

    def test_first_root(self):
        """Test the 2D image of root 0."""
        system = generate_root_system()
        points = project(system)
        assert points.shape == (240, 2)
        np.testing.assert_allclose(points[0], [-1.0, -1.0])

    def test_accepts_root_vectors(self):
        """Test that lists of roots and raw arrays give the same result."""
        system = generate_root_system()
        np.testing.assert_allclose(
            project(list(system.roots)),
            project(system.coordinates())
        )

    def test_linearity(self):
        """Test project(a) + project(b) == project(a + b)."""
        rng = np.random.default_rng(0)
        for P in (DEFAULT_PROJECTION_2D, DEFAULT_PROJECTION_3D, rng.normal(size=(8, 3))):
            a = rng.normal(size=8)
            b = rng.normal(size=8)
            np.testing.assert_allclose(
                project([a], P) + project([b], P),
                project([a + b], P),
                atol=1e-12
            )

    def test_zero_rotation_round_trip(self):
        """Test that a zero rotation does not change the 3D projection."""
        system = generate_root_system()
        R = rotation_matrix(np.zeros(28))
        rotated = apply_rotation(system, R)
        np.testing.assert_allclose(
            project(rotated, DEFAULT_PROJECTION_3D),
            project(system, DEFAULT_PROJECTION_3D),
            atol=1e-12
        )

    def test_custom_matrix(self):
        """Test an arbitrary caller-supplied matrix."""
        P = np.arange(16, dtype=float).reshape(8, 2)
        x = np.ones(8)
        np.testing.assert_allclose(project(x, P), P.sum(axis=0))

    def test_dimension_mismatch(self):
        """Test that point and matrix sizes must agree."""
        with pytest.raises(ValueError):
            project(np.zeros((3, 7)))

    def test_output_dimension(self):
        """Test that only 2 or 3 output dimensions are allowed."""
        with pytest.raises(ValueError):
            project(np.zeros((3, 8)), np.zeros((8, 4)))
        with pytest.raises(ValueError):
            project(np.zeros((3, 8)), np.zeros(8))

    def test_wrapper_shape_checks(self):
        """Test that project_2d and project_3d check the matrix width."""
        with pytest.raises(ValueError):
            project_2d(np.zeros((3, 8)), DEFAULT_PROJECTION_3D)
        with pytest.raises(ValueError):
            project_3d(np.zeros((3, 8)), DEFAULT_PROJECTION_2D)


    def test_empty_input(self):
        """Test that no points project to an empty (0, M) array."""
        system = generate_root_system()
        assert project([]).shape == (0, 2)
        assert project(system.roots[:0]).shape == (0, 2)
        assert project_3d(np.empty((0, 8))).shape == (0, 3)

class TestPCAProjection:
    """Test the data-driven projection matrix."""

    def test_orthonormal_columns(self):
        """Test that PCA axes are orthonormal."""
        system = generate_root_system()
        for n in (2, 3):
            P = pca_projection_matrix(system, n_components=n)
            assert P.shape == (8, n)
            np.testing.assert_allclose(P.T @ P, np.eye(n), atol=1e-9)

    def test_leading_axis(self):
        """Test that the first axis follows the direction of largest spread."""
        rng = np.random.default_rng(1)
        X = rng.normal(size=(500, 8)) * np.array([10, 1, 1, 1, 1, 1, 1, 1])
        P = pca_projection_matrix(X)
        assert abs(P[0, 0]) > 0.99

    def test_usable_with_project(self):
        """Test that the matrix feeds straight into project."""
        system = generate_root_system()
        P = pca_projection_matrix(system, n_components=3)
        assert project(system, P).shape == (240, 3)

    def test_invalid_components(self):
        """Test that 4 components are rejected."""
        with pytest.raises(ValueError):
            pca_projection_matrix(np.eye(8), n_components=4)
