import numpy as np
import pytest
from trigger_volumes.geometry.degeneracy import validate_points, are_points_coplanar, matrix_rank

# Regular tetrahedron with edge length 2, centered on the origin
TETRA = np.array([[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]], dtype=np.float64) / np.sqrt(2.0)
UNIT_SQUARE = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=np.float64)


def test_few_points_are_coplanar():
    """Three or fewer points always lie on a plane."""
    assert are_points_coplanar([])
    assert are_points_coplanar([[0, 0, 0]])
    assert are_points_coplanar([[0, 0, 0], [1, 2, 3]])
    assert are_points_coplanar(TETRA[:3])


def test_square_is_coplanar():
    assert are_points_coplanar(UNIT_SQUARE)


def test_tetrahedron_is_not_coplanar():
    assert not are_points_coplanar(TETRA)


def test_tilted_plane_many_points():
    """Points on an arbitrary tilted plane, at large scale, are still coplanar."""
    rng = np.random.default_rng(7)
    uv = rng.uniform(-500, 500, size=(40, 2))
    e1 = np.array([1.0, 2.0, -0.5])
    e2 = np.array([0.3, -1.0, 2.0])
    pts = uv[:, :1] * e1 + uv[:, 1:] * e2 + np.array([1000.0, -20.0, 3.0])
    assert are_points_coplanar(pts)

    # One point lifted off the plane breaks it
    lifted = pts.copy()
    lifted[5] += 10.0 * np.cross(e1, e2)
    assert not are_points_coplanar(lifted)


def test_tiny_tetrahedron_is_rescaled():
    """Scaling into the unit ball makes the test independent of size."""
    assert not are_points_coplanar(TETRA * 1e-4)


def test_matrix_rank_matches_numpy():
    rng = np.random.default_rng(3)
    for rows in (2, 4, 7):
        m = rng.normal(size=(rows, 4))
        assert matrix_rank(m) == np.linalg.matrix_rank(m)

    # Duplicate rows and zero columns reduce rank
    m = np.array([[1.0, 2.0, 0.0, 1.0],
                  [2.0, 4.0, 0.0, 2.0],
                  [0.0, 1.0, 0.0, 1.0]])
    assert matrix_rank(m) == 2
    assert matrix_rank(np.zeros((3, 4))) == 0


def test_matrix_rank_does_not_modify_input():
    m = np.eye(4)
    matrix_rank(m)
    assert np.array_equal(m, np.eye(4))


def test_validate_points_too_close():
    pts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 5e-7, 0.0]]
    assert not validate_points(pts)


def test_validate_points_boundary():
    """Exactly the minimum separation is still acceptable."""
    assert validate_points([[0.0, 0.0, 0.0], [1e-6, 0.0, 0.0]])
    assert validate_points(TETRA)


def test_validate_points_trivial():
    assert validate_points([])
    assert validate_points([[1.0, 2.0, 3.0]])


def test_validate_points_custom_eps():
    assert not validate_points(UNIT_SQUARE, eps=1.5)
    assert validate_points(UNIT_SQUARE, eps=1.0)
