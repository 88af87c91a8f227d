# MIT License (see LICENSE)
"""
Extrusion of flat anchor sets into thin 3D shells.

A coplanar anchor set has no volume, so its hull would be infinitely thin
and actors could never be judged inside it. Offsetting every anchor a
little to both sides of the plane yields a slab the hull builder can use.
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import EXTRUSION_THICKNESS
from ..types import TriggerConstructionError
from ..util import f64, norm, unit

logger = logging.getLogger(__name__)


def plane_normal(points, eps: float = 1e-12) -> np.ndarray:
    """
    Unit normal of the plane through a coplanar point set.

    Uses the first point as origin and the edges to the next two points.
    When those three are collinear, later points are tried in order until
    one spans a plane with the first edge.

    Args:
        points: Array-like of shape (N, 3).
        eps: Minimum length for an edge or cross product to count.

    Returns:
        Unit normal vector.

    Raises:
        TriggerConstructionError: If all points lie on one line.
    """
    pts = f64(points)
    origin = pts[0]

    edge1 = None
    first = 0
    for i in range(1, len(pts)):
        if norm(pts[i] - origin) > eps:
            edge1 = pts[i] - origin
            first = i
            break
    if edge1 is None:
        raise TriggerConstructionError("Cannot extrude anchors: all anchors coincide")

    for j in range(first + 1, len(pts)):
        n = np.cross(edge1, pts[j] - origin)
        if norm(n) > eps:
            if (first, j) != (1, 2):
                logger.debug("Leading anchors are collinear, plane normal taken from anchors 0, %d, %d", first, j)
            return unit(n)

    raise TriggerConstructionError("Cannot extrude anchors: all anchors are collinear")


def extrude(points, thickness: float = EXTRUSION_THICKNESS) -> np.ndarray:
    """
    Double a flat anchor set into two parallel copies around its plane.

    Each anchor p becomes p + n * thickness / 2 followed by
    p - n * thickness / 2, where n is the plane normal.

    Args:
        points: Coplanar anchors, shape (N, 3).
        thickness: Total thickness of the resulting shell.

    Returns:
        Array of shape (2N, 3).
    """
    pts = f64(points)
    offset = plane_normal(pts) * (thickness / 2)
    out = np.empty((2 * len(pts), 3), dtype=np.float64)
    out[0::2] = pts + offset
    out[1::2] = pts - offset
    return out
