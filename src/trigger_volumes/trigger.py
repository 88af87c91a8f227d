# MIT License (see LICENSE)
"""
The Trigger entity: one convex volume placed in the world.

A trigger's shape is the convex hull ("shrink wrap") of its anchors. Anchors
and the resulting triangles are stored in the trigger's local frame, so
moving a trigger is a cheap position update while changing its shape means
a full hull recompute. Hull computation is far too expensive to run per
movement event; triggers are meant to be static or rarely moved.

Should be used through TriggerManager, which owns the movement hooks.
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from uuid import UUID, uuid4

import numpy as np

from .constants import CHECK_RADIUS_FACTOR, DEFAULT_COLOR, MIN_ANCHORS
from .events import TriggerCallback
from .geometry.hull import build_hull
from .geometry.sat import WORLD_AXES, sat_overlap, separating_axes
from .types import LocalPoints, Triangle, TriggerConstructionError, WorldPoints
from .util import distance2, vec3

logger = logging.getLogger(__name__)


def _as_anchors(anchors) -> LocalPoints:
    if isinstance(anchors, WorldPoints):
        raise TypeError("Trigger anchors must be local; convert with WorldPoints.to_local(position)")
    if not isinstance(anchors, LocalPoints):
        try:
            anchors = LocalPoints(anchors)
        except ValueError as exc:
            raise TriggerConstructionError(str(exc)) from exc
    if len(anchors) < MIN_ANCHORS:
        raise TriggerConstructionError(
            f"Insufficient anchors to compute: need at least {MIN_ANCHORS}, got {len(anchors)}"
        )
    return anchors


@dataclass(eq=False)
class Trigger:
    """
    A convex trigger volume.

    Attributes:
        anchors: Points defining the shape, relative to position.
        position: World position of the trigger's origin.
        uuid: Identity of the trigger. Random by default.
        name: Display name.
        color: RGB color used by debug renderers.
        callback: Receives TriggerEvents; may be None or swapped at any time.
        triangles: Hull faces in the local frame (computed).
        check_radius: Culling radius around position (computed).
        last_computation_time: Duration of the last hull pass in milliseconds.

    Raises:
        TriggerConstructionError: On construction with fewer than 4 anchors
            or a malformed anchor array.
    """
    anchors: LocalPoints
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    uuid: UUID = field(default_factory=uuid4)
    name: str = "unnamed"
    color: tuple[int, int, int] = DEFAULT_COLOR
    callback: TriggerCallback | None = None

    triangles: list[Triangle] = field(init=False, repr=False, default_factory=list)
    check_radius: float = field(init=False, default=0.0)
    last_computation_time: float = field(init=False, repr=False, default=0.0)
    _axes: np.ndarray = field(init=False, repr=False, default_factory=lambda: WORLD_AXES.copy())

    def __post_init__(self) -> None:
        self.position = vec3(self.position)
        self.anchors = _as_anchors(self.anchors)
        self._compute(self.anchors)

    def _compute(self, anchors: LocalPoints) -> None:
        t0 = time.perf_counter()
        triangles = build_hull(anchors.coords)
        radius = CHECK_RADIUS_FACTOR * float(np.max(np.linalg.norm(anchors.coords, axis=1)))
        axes = separating_axes(triangles)

        # Anchors, faces and radius change together.
        self.anchors = anchors
        self.triangles = triangles
        self.check_radius = radius
        self._axes = axes

        self.last_computation_time = 1e3 * (time.perf_counter() - t0)
        logger.debug(
            "Computed hull of %s: %d triangles, check radius %.3f, %.3fms",
            self.name, len(triangles), radius, self.last_computation_time,
        )

    def recompute(self, anchors=None) -> None:
        """
        Compute the hull again, optionally from new anchors. Don't call too often.

        New anchors are used as given. TriggerManager.recompute() runs the
        near-duplicate check and flat-set extrusion first.

        Args:
            anchors: Replacement local-frame anchors. If omitted, the current
                     anchors are reused.
        """
        self._compute(self.anchors if anchors is None else _as_anchors(anchors))

    def set_position(self, position) -> None:
        """Move the trigger. The hull is stored locally, so no recompute is needed."""
        self.position = vec3(position)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def world_anchors(self) -> WorldPoints:
        """The anchors translated to the trigger's current world position."""
        return self.anchors.to_world(self.position)

    def in_check_range(self, point) -> bool:
        """Cheap culling test: is point within check_radius of the trigger's position?"""
        return distance2(self.position, vec3(point)) <= self.check_radius * self.check_radius

    def contains(self, points: WorldPoints) -> bool:
        """
        Check whether a world-frame point set overlaps the hull.

        A trigger whose hull could not be built never contains anything.
        """
        if not self.triangles:
            return False
        return sat_overlap(self._axes, self.world_anchors(), points)

    def edges(self) -> list[tuple[np.ndarray, np.ndarray]]:
        """World-frame line segments along every triangle edge, for debug rendering."""
        out = []
        for tri in self.triangles:
            a, b, c = tri.vertices.to_world(self.position).coords
            out.extend([(a, b), (b, c), (c, a)])
        return out
