# MIT License (see LICENSE)
"""
Geometric building blocks of trigger volumes.

This subpackage provides:
    - Hull: Qhull-backed convex hull, merged into planar faces and fan-triangulated.
    - Degeneracy: Near-duplicate and coplanarity analysis of anchor sets.
    - Extrude: Thin 3D shells for flat anchor sets.
    - SAT: Separating-axis overlap test between a hull and query points.

Typical usage:
    from trigger_volumes.geometry import are_points_coplanar, extrude, build_hull

    if are_points_coplanar(anchors):
        anchors = extrude(anchors)
    triangles = build_hull(anchors)
"""
from .hull import build_hull, hull_faces, triangulate_faces, face_normal
from .degeneracy import validate_points, are_points_coplanar, matrix_rank
from .extrude import extrude, plane_normal
from .sat import separating_axes, sat_overlap, project_onto_axes, WORLD_AXES

__all__ = [
    # Hull
    "build_hull",
    "hull_faces",
    "triangulate_faces",
    "face_normal",
    # Degeneracy
    "validate_points",
    "are_points_coplanar",
    "matrix_rank",
    # Extrusion
    "extrude",
    "plane_normal",
    # SAT
    "separating_axes",
    "sat_overlap",
    "project_onto_axes",
    "WORLD_AXES",
]
