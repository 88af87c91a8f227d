# MIT License (see LICENSE)
"""
Convex hull construction for trigger anchors.

The hull is computed by Qhull (through scipy.spatial.ConvexHull). Qhull
reports a triangulated boundary in which a planar face with more than three
vertices shows up as several triangles sharing one plane equation, in no
particular winding. This module merges those triangles back into planar
faces, orders each face counter-clockwise around its outward normal and
fan-triangulates it again, so every produced Triangle has a consistent
outward normal computed from its own corners.

Typical usage:
    triangles = build_hull(anchors)
    for tri in triangles:
        ...  # tri.normal points away from the hull interior
"""
from __future__ import annotations
import logging

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from ..constants import FACE_MERGE_TOL, MIN_ANCHORS
from ..types import Triangle, TriggerConstructionError
from ..util import f64, unit

logger = logging.getLogger(__name__)


def face_normal(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Unit normal of triangle (a, b, c): (b - a) x (c - a), normalized."""
    return unit(np.cross(b - a, c - a))


def _order_face(vertices: np.ndarray, indices: list[int], normal: np.ndarray) -> list[int]:
    """
    Order the vertex indices of a planar convex face counter-clockwise around normal.

    The face is flattened into an in-plane (u, v) basis with u x v = normal.
    Faces with more than three vertices go through a 2D hull, which returns
    its vertices counter-clockwise and drops points lying on an edge.
    """
    pts = vertices[indices]
    center = pts.mean(axis=0)
    u = unit(pts[0] - center)
    v = np.cross(normal, u)
    rel = pts - center
    flat = np.column_stack([rel @ u, rel @ v])

    if len(indices) > 3:
        try:
            return [indices[i] for i in ConvexHull(flat).vertices]
        except QhullError:
            logger.debug("2D hull of a %d-vertex face failed, ordering by angle", len(indices))

    angles = np.arctan2(flat[:, 1], flat[:, 0])
    return [indices[i] for i in np.argsort(angles, kind="stable")]


def hull_faces(hull: ConvexHull, tol: float = FACE_MERGE_TOL) -> list[list[int]]:
    """
    Decompose a Qhull result into planar faces.

    Facets whose plane equations agree within tol are merged into one face.

    Args:
        hull: A 3D scipy ConvexHull.
        tol: Absolute tolerance on the (normal, offset) plane equation.

    Returns:
        One list of point indices per planar face, ordered counter-clockwise
        when seen from outside the hull.
    """
    planes: list[np.ndarray] = []
    members: list[set[int]] = []

    for simplex, equation in zip(hull.simplices, hull.equations):
        for i, plane in enumerate(planes):
            if np.allclose(plane, equation, rtol=0.0, atol=tol):
                members[i].update(int(k) for k in simplex)
                break
        else:
            planes.append(equation)
            members.append({int(k) for k in simplex})

    return [
        _order_face(hull.points, sorted(idx), plane[:3])
        for plane, idx in zip(planes, members)
    ]


def triangulate_faces(vertices, faces: list[list[int]]) -> list[Triangle]:
    """
    Split polygonal faces into triangle fans anchored at each face's first vertex.

    Faces with fewer than 3 indices are degenerate and skipped.

    Args:
        vertices: Array of shape (N, 3) the face indices refer to.
        faces: Index lists, each ordered around its face.

    Returns:
        Triangles with normals computed from their corner order.
    """
    verts = f64(vertices)
    tris: list[Triangle] = []
    for face in faces:
        if len(face) < 3:
            continue
        a = verts[face[0]]
        for i in range(1, len(face) - 1):
            b = verts[face[i]]
            c = verts[face[i + 1]]
            tris.append(Triangle(a, b, c, face_normal(a, b, c)))
    return tris


def build_hull(points) -> list[Triangle]:
    """
    Compute the triangulated convex hull of a point cloud.

    Near-coplanar or near-duplicate input is left to Qhull's own tolerances.
    Near-duplicate anchors far from the origin can produce sliver triangles
    whose normals are dominated by rounding, so a few faces may not bound
    the hull exactly; TriggerManager warns about such anchor sets. If Qhull rejects the cloud outright (typically because it is flat), the
    build is retried once with joggled input; if that fails too, an empty
    hull is returned and a warning logged.

    Args:
        points: Array-like of shape (N, 3), N >= 4.

    Returns:
        The hull's triangles, normals pointing outward.

    Raises:
        TriggerConstructionError: If fewer than 4 points are given or the
            array is not N x 3.
    """
    pts = f64(points)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise TriggerConstructionError(f"Expected an (N, 3) array of anchors, got shape {pts.shape}")
    if len(pts) < MIN_ANCHORS:
        raise TriggerConstructionError(
            f"Insufficient anchors to compute a hull: need at least {MIN_ANCHORS}, got {len(pts)}"
        )

    try:
        hull = ConvexHull(pts)
    except QhullError as exc:
        logger.warning("Qhull rejected %d anchors, retrying with joggled input: %s", len(pts), exc)
        try:
            hull = ConvexHull(pts, qhull_options="QJ")
        except QhullError as exc2:
            logger.warning("Hull construction failed for %d anchors: %s", len(pts), exc2)
            return []

    return triangulate_faces(hull.points, hull_faces(hull))
