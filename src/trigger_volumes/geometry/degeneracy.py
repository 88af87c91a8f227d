# MIT License (see LICENSE)
"""
Degeneracy analysis of anchor sets.

Two independent checks run over the same anchors before a hull is built:

- validate_points: are any two anchors so close that hull facets between
  them become numerically unreliable? Advisory only.
- are_points_coplanar: do the anchors span a volume at all? A flat set
  must be extruded before the hull builder can use it.
"""
from __future__ import annotations

import numpy as np
from scipy.spatial.distance import pdist

from ..constants import COPLANAR_PIVOT_EPS, COPLANAR_SCALE_EPS, MIN_ANCHOR_SEPARATION
from ..util import f64


def validate_points(points, eps: float = MIN_ANCHOR_SEPARATION) -> bool:
    """
    Check that all points are sufficiently spaced.

    Args:
        points: Array-like of shape (N, 3).
        eps: Minimum allowed pairwise distance.

    Returns:
        True if every pair is at least eps apart, False if any pair is closer.
    """
    pts = f64(points)
    if len(pts) < 2:
        return True
    return bool(np.min(pdist(pts)) >= eps)


def matrix_rank(matrix: np.ndarray, eps: float = COPLANAR_PIVOT_EPS) -> int:
    """
    Rank of a matrix by Gauss-Jordan elimination with partial pivoting.

    For each column the unused row with the largest magnitude entry above
    eps becomes the pivot. Entries that fall below eps during elimination
    are snapped to zero so rounding noise cannot create spurious pivots.

    Args:
        matrix: 2D array; it is copied, not modified.
        eps: Pivot threshold.

    Returns:
        Number of pivots found.
    """
    m = f64(matrix)
    rows, cols = m.shape
    row_used = np.zeros(rows, dtype=bool)
    rank = 0

    for c in range(cols):
        candidates = np.where(row_used, 0.0, np.abs(m[:, c]))
        pivot = int(np.argmax(candidates))
        if candidates[pivot] <= eps:
            continue

        row_used[pivot] = True
        rank += 1
        m[pivot, c:] /= m[pivot, c]

        for r in range(rows):
            if r == pivot or abs(m[r, c]) <= eps:
                continue
            m[r, c:] -= m[r, c] * m[pivot, c:]
            tail = m[r, c:]
            tail[np.abs(tail) < eps] = 0.0

    return rank


def are_points_coplanar(points) -> bool:
    """
    Check whether points lie on a single plane.

    The points are centered on their centroid and scaled into the unit ball
    so the pivot threshold is independent of the trigger's size. Appending a
    constant column turns "all centered points span at most a plane" into
    "the N x 4 matrix has rank at most 3".

    Args:
        points: Array-like of shape (N, 3).

    Returns:
        True if the points are coplanar (always True for 3 or fewer points).
    """
    pts = f64(points)
    if len(pts) <= 3:
        return True

    centered = pts - pts.mean(axis=0)
    max_dist_sq = float(np.max(np.einsum("ij,ij->i", centered, centered)))
    if max_dist_sq > COPLANAR_SCALE_EPS:
        centered = centered / np.sqrt(max_dist_sq)

    matrix = np.hstack([centered, np.ones((len(pts), 1), dtype=np.float64)])
    return matrix_rank(matrix, COPLANAR_PIVOT_EPS) <= 3
