import numpy as np
import pytest
from trigger_volumes.geometry.extrude import extrude, plane_normal
from trigger_volumes.geometry.degeneracy import are_points_coplanar
from trigger_volumes.geometry.hull import build_hull
from trigger_volumes.types import TriggerConstructionError

UNIT_SQUARE = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=np.float64)


def test_square_extrusion_doubles_anchors():
    out = extrude(UNIT_SQUARE)
    assert out.shape == (8, 3)
    assert not are_points_coplanar(out)


def test_extrusion_offsets_along_normal():
    """Each anchor is followed by its mirror on the other side of the plane."""
    out = extrude(UNIT_SQUARE, thickness=0.1)
    assert np.allclose(out[0::2, :2], UNIT_SQUARE[:, :2])
    assert np.allclose(out[1::2, :2], UNIT_SQUARE[:, :2])
    assert np.allclose(np.abs(out[:, 2]), 0.05)
    assert np.allclose(out[0::2, 2], -out[1::2, 2])


def test_extruded_square_builds_a_box():
    tris = build_hull(extrude(UNIT_SQUARE))
    assert len(tris) == 12


def test_plane_normal_of_tilted_triangle():
    pts = np.array([[0, 0, 0], [1, 0, 1], [0, 1, 0], [1, 1, 1]], dtype=np.float64)
    n = plane_normal(pts)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(np.abs(n), np.array([1.0, 0.0, 1.0]) / np.sqrt(2.0))


def test_collinear_leading_anchors():
    """A line of leading anchors falls through to the first anchor off the line."""
    pts = np.array([[0, 0, 0], [1, 0, 0], [2, 0, 0], [0, 3, 0], [2, 3, 0]], dtype=np.float64)
    assert np.allclose(np.abs(plane_normal(pts)), [0.0, 0.0, 1.0])

    out = extrude(pts)
    assert len(out) == 10
    assert not are_points_coplanar(out)


def test_duplicate_leading_anchor():
    pts = np.array([[0, 0, 0], [0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float64)
    assert np.allclose(np.abs(plane_normal(pts)), [0.0, 0.0, 1.0])


def test_all_collinear_fails():
    pts = np.array([[0, 0, 0], [1, 1, 1], [2, 2, 2], [5, 5, 5]], dtype=np.float64)
    with pytest.raises(TriggerConstructionError):
        extrude(pts)


def test_all_coincident_fails():
    with pytest.raises(TriggerConstructionError):
        plane_normal(np.ones((4, 3)))
