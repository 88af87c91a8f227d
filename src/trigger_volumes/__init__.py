# MIT License (see LICENSE)
"""
trigger_volumes - Convex 3D trigger volumes for real-time multiplayer worlds.

This package builds convex volumes from a handful of anchor points and
reports, for every actor movement, whether the actor entered, left or
stayed inside each volume.

Main entry points:
    - TriggerManager: Registry of triggers plus the movement hooks.
    - Trigger: One convex volume with its hull, position and callback.
    - Hitbox: An actor's feet-anchored bounding box.
    - TriggerEvent, TransitionKind: What callbacks receive.

Submodules:
    - geometry: Hull building, degeneracy checks, extrusion, SAT.
    - io: JSON serialization/deserialization.
    - renderer: Optional debug wireframe adapters.

Example:
    from trigger_volumes import TriggerManager, Hitbox

    manager = TriggerManager()
    manager.create(anchors, position=(10, 64, 10), name="spawn", callback=print)
    manager.on_move(player, old_pos, new_pos, Hitbox(0.6, 1.8, 0.6))
"""
from .manager import TriggerManager
from .trigger import Trigger
from .types import Hitbox, LocalPoints, WorldPoints, Triangle, TriggerConstructionError
from .events import TransitionKind, TriggerEvent

__all__ = [
    # Registry
    "TriggerManager",
    "Trigger",
    # Types
    "Hitbox",
    "LocalPoints",
    "WorldPoints",
    "Triangle",
    "TriggerConstructionError",
    # Events
    "TransitionKind",
    "TriggerEvent",
]
