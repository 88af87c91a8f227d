# MIT License (see LICENSE)
"""
Core type definitions for trigger volumes.

Defines the fundamental data structures:
- LocalPoints / WorldPoints: point sets tagged with their coordinate frame
- Triangle: one face of a hull, in the trigger's local frame
- Hitbox: an actor's feet-anchored bounding box dimensions

Two frames are in play. Anchors and hull faces live in a trigger's local
frame (relative to its position) so the trigger can be moved without
recomputing its hull. Actor positions and containment queries live in the
world frame. The point-set types keep the two apart: the only way across is
an explicit to_world() / to_local() call with the trigger's origin.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64, vec3


class TriggerConstructionError(ValueError):
    """Raised when a trigger cannot be built from the supplied anchors."""


def _as_point_array(coords) -> np.ndarray:
    arr = f64(coords)
    if arr.size == 0:
        arr = arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected an (N, 3) array of points, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


# =============================================================================
# Frame-tagged point sets
# =============================================================================

@dataclass(frozen=True, eq=False)
class LocalPoints:
    """
    Points expressed relative to a trigger's origin.

    Attributes:
        coords: Read-only float64 array of shape (N, 3).
    """
    coords: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_point_array(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def to_world(self, origin) -> WorldPoints:
        """Translate into the world frame given the trigger's world position."""
        return WorldPoints(self.coords + vec3(origin))


@dataclass(frozen=True, eq=False)
class WorldPoints:
    """
    Points expressed in absolute world coordinates.

    Attributes:
        coords: Read-only float64 array of shape (N, 3).
    """
    coords: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_point_array(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def to_local(self, origin) -> LocalPoints:
        """Express these points relative to a trigger positioned at origin."""
        return LocalPoints(self.coords - vec3(origin))


# =============================================================================
# Hull faces
# =============================================================================

@dataclass(frozen=True, eq=False)
class Triangle:
    """
    A triangular hull face in the owning trigger's local frame.

    Attributes:
        a, b, c: Corners, ordered counter-clockwise seen from outside.
        normal: Unit outward normal, (b - a) x (c - a) normalized.
    """
    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    normal: np.ndarray

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "normal"):
            v = vec3(getattr(self, name))
            v.setflags(write=False)
            object.__setattr__(self, name, v)

    @property
    def vertices(self) -> LocalPoints:
        return LocalPoints(np.stack([self.a, self.b, self.c]))


# =============================================================================
# Actor hitbox
# =============================================================================

# x in {-1, 1}, y in {0, 1}, z in {-1, 1}; y is scaled by the full height
# because actor positions sit at the feet, not the center of the box.
_CORNER_SIGNS = np.array(
    [(sx, sy, sz) for sx in (-1, 1) for sy in (0, 1) for sz in (-1, 1)],
    dtype=np.float64,
)


@dataclass(frozen=True)
class Hitbox:
    """
    Axis-aligned bounding box dimensions of an actor.

    The box is anchored at the actor's feet: it extends half the width and
    half the depth to either side of the position, and the full height
    upwards from it.

    Attributes:
        width: Extent along x.
        height: Extent along y.
        depth: Extent along z.
    """
    width: float
    height: float
    depth: float

    def corners(self, base) -> WorldPoints:
        """
        Compute the 8 corners of the box for an actor standing at base.

        Args:
            base: World position of the actor's feet.

        Returns:
            The corners ordered by x sign, then y (bottom, top), then z sign.
        """
        extents = np.array([self.width / 2, self.height, self.depth / 2], dtype=np.float64)
        return WorldPoints(vec3(base) + _CORNER_SIGNS * extents)
