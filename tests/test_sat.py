import numpy as np
import pytest
from trigger_volumes.geometry.hull import build_hull
from trigger_volumes.geometry.sat import separating_axes, sat_overlap, project_onto_axes, WORLD_AXES
from trigger_volumes.types import Hitbox, LocalPoints, WorldPoints

TETRA = np.array([[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]], dtype=np.float64) / np.sqrt(2.0)


def _tetra_axes():
    return separating_axes(build_hull(TETRA))


def test_axes_include_world_axes():
    axes = _tetra_axes()
    assert axes.shape == (7, 3)
    assert np.allclose(axes[-3:], np.eye(3))
    assert np.allclose(separating_axes([]), WORLD_AXES)


def test_projection_bounds():
    mins, maxs = project_onto_axes(np.eye(3), TETRA)
    assert np.allclose(mins, -1.0 / np.sqrt(2.0))
    assert np.allclose(maxs, 1.0 / np.sqrt(2.0))


def test_centroid_is_contained():
    hull = WorldPoints(TETRA)
    assert sat_overlap(_tetra_axes(), hull, WorldPoints([TETRA.mean(axis=0)]))


def test_far_point_is_not_contained():
    hull = WorldPoints(TETRA)
    assert not sat_overlap(_tetra_axes(), hull, WorldPoints([[10.0, 0.0, 0.0]]))


def test_point_outside_face_but_inside_bounds():
    """The world axes alone would accept this point; a face normal rejects it."""
    hull = WorldPoints(TETRA)
    # Just past the face opposite vertex (1, 1, 1), still inside the bounding box
    p = -np.ones(3) / np.sqrt(3.0) * 0.6
    assert np.all(np.abs(p) < 1.0 / np.sqrt(2.0))
    assert not sat_overlap(_tetra_axes(), hull, WorldPoints([p]))
    assert sat_overlap(WORLD_AXES, hull, WorldPoints([p]))


def test_box_straddling_a_face_overlaps():
    hull = WorldPoints(TETRA)
    corners = Hitbox(0.2, 0.2, 0.2).corners(-np.ones(3) / np.sqrt(3.0) * 0.45)
    assert sat_overlap(_tetra_axes(), hull, corners)


def test_translated_sets():
    """Overlap depends only on relative placement."""
    offset = np.array([100.0, -40.0, 7.0])
    hull = LocalPoints(TETRA).to_world(offset)
    assert sat_overlap(_tetra_axes(), hull, WorldPoints([offset]))
    assert not sat_overlap(_tetra_axes(), hull, WorldPoints([[0.0, 0.0, 0.0]]))


def test_local_points_rejected():
    with pytest.raises(TypeError):
        sat_overlap(_tetra_axes(), LocalPoints(TETRA), WorldPoints([[0.0, 0.0, 0.0]]))


def test_empty_query_never_overlaps():
    assert not sat_overlap(_tetra_axes(), WorldPoints(TETRA), WorldPoints(np.empty((0, 3))))


def test_hitbox_corners():
    corners = Hitbox(width=0.6, height=1.8, depth=0.4).corners((10.0, 64.0, -3.0)).coords
    assert corners.shape == (8, 3)
    assert np.allclose(corners[0], [9.7, 64.0, -3.2])
    assert np.allclose(corners[-1], [10.3, 65.8, -2.8])
    # Feet anchored: bottom at the position, top one full height above
    assert set(np.round(corners[:, 1], 9)) == {64.0, 65.8}
    assert np.allclose(corners.mean(axis=0), [10.0, 64.9, -3.0])
