# MIT License (see LICENSE)
"""
Numeric tolerances and geometric defaults used throughout the package.

All distances are in world units (one block in a voxel world, one meter
elsewhere).
"""
from __future__ import annotations

# A hull needs at least a tetrahedron's worth of anchors.
MIN_ANCHORS: int = 4

# Anchors closer than this are considered near-duplicates. Qhull tolerates
# them, but the resulting facets may be slivers with unreliable normals.
MIN_ANCHOR_SEPARATION: float = 1e-6

# Coplanarity test: squared spread below which the cloud is not rescaled,
# and the pivot threshold of the rank elimination.
COPLANAR_SCALE_EPS: float = 1e-14
COPLANAR_PIVOT_EPS: float = 1e-12

# Total thickness of the shell synthesized around a flat anchor set.
EXTRUSION_THICKNESS: float = 0.1

# check_radius = CHECK_RADIUS_FACTOR * max anchor distance from the origin.
CHECK_RADIUS_FACTOR: float = 1.5

# Qhull facets whose plane equations agree within this tolerance belong
# to the same planar face.
FACE_MERGE_TOL: float = 1e-9

# Default debug render color (RGB).
DEFAULT_COLOR: tuple[int, int, int] = (255, 0, 0)
