# MIT License (see LICENSE)
"""
Separating Axis Theorem (SAT) overlap test.

Two convex point sets are disjoint iff some axis exists on which their
projections do not overlap. Candidate axes are the hull's triangle normals
plus the three world axes.

This is a simplification of full polytope-vs-polytope SAT:
- triangle normals are used as-is, so a planar face split into several
  triangles contributes the same axis several times;
- the query shape's own face normals and the edge-edge cross products are
  not tested.
For small axis-aligned query boxes the world axes stand in for the box's
face normals, which is what the tick driver feeds in.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Triangle, WorldPoints

WORLD_AXES = np.eye(3, dtype=np.float64)


def separating_axes(triangles: Sequence[Triangle]) -> np.ndarray:
    """
    Stack candidate separating axes for a hull.

    Args:
        triangles: Hull faces; only their normals are used, so the frame
            they are expressed in does not matter.

    Returns:
        Array of shape (len(triangles) + 3, 3).
    """
    if not triangles:
        return WORLD_AXES.copy()
    normals = np.stack([tri.normal for tri in triangles])
    return np.vstack([normals, WORLD_AXES])


def project_onto_axes(axes: np.ndarray, points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Project points onto every axis at once.

    Returns:
        (mins, maxs), each of shape (n_axes,).
    """
    proj = points @ axes.T
    return proj.min(axis=0), proj.max(axis=0)


def sat_overlap(axes: np.ndarray, hull: WorldPoints, query: WorldPoints) -> bool:
    """
    Test whether two point sets overlap on every candidate axis.

    Args:
        axes: Candidate axes, shape (K, 3).
        hull: The trigger's anchors in the world frame.
        query: The points to test, e.g. an actor's hitbox corners.

    Returns:
        True if no axis separates the sets.

    Raises:
        TypeError: If either point set is not expressed in the world frame.
    """
    if not isinstance(hull, WorldPoints) or not isinstance(query, WorldPoints):
        raise TypeError("SAT overlap requires WorldPoints; translate local points with to_world() first")
    if len(hull) == 0 or len(query) == 0:
        return False

    hull_min, hull_max = project_onto_axes(axes, hull.coords)
    query_min, query_max = project_onto_axes(axes, query.coords)
    return bool(np.all(hull_min <= query_max) and np.all(query_min <= hull_max))
