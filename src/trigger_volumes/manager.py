# MIT License (see LICENSE)
"""
Trigger registry and movement tick driver.

TriggerManager owns a set of triggers and glues them to the host's
movement notifications. For every move, teleport or spawn it:
    1. Computes the actor's hitbox corners at the old and new position.
    2. Skips triggers whose check radius excludes either position.
    3. Runs the SAT overlap test against both corner sets.
    4. Emits ENTERED / EXITED / TICK according to the before/after pair.

Per-actor containment is never stored; it is re-derived from the two
positions every time.

The driver is synchronous and single-threaded. Adding or removing triggers
while a movement pass is running is not supported; hosts should route both
through the same tick thread.

Structure:
    - Host creates a TriggerManager.
    - Host creates triggers via create() (or add() for prebuilt ones).
    - Host forwards movement to on_move() / on_teleport() / on_spawn().
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, ContextManager, Iterable, Iterator
from uuid import UUID

from .constants import DEFAULT_COLOR, MIN_ANCHORS
from .events import TransitionKind, TriggerCallback, TriggerEvent
from .geometry.degeneracy import are_points_coplanar, validate_points
from .geometry.extrude import extrude
from .profiler import Profiler
from .trigger import Trigger
from .types import Hitbox, LocalPoints, TriggerConstructionError
from .util import debug_enabled, f64, vec3

logger = logging.getLogger(__name__)


def transition_events(was_inside: bool, is_inside: bool) -> list[TransitionKind]:
    """
    Map a before/after containment pair to the events it produces.

    | before | after | events  |
    |--------|-------|---------|
    | False  | False | -       |
    | False  | True  | ENTERED |
    | True   | False | EXITED  |
    | True   | True  | TICK    |
    """
    if was_inside and is_inside:
        return [TransitionKind.TICK]
    if is_inside:
        return [TransitionKind.ENTERED]
    if was_inside:
        return [TransitionKind.EXITED]
    return []


@dataclass
class TriggerManager:
    """
    Registry of triggers plus the movement hooks that drive their callbacks.

    Attributes:
        debug: Log hull computation times at INFO level. Defaults to the
               TRIGGER_VOLUMES_DEBUG environment variable.
        profiler: Optional Profiler; records "hull" and "move" sections.
    """
    debug: bool = field(default_factory=debug_enabled)
    profiler: Profiler | None = None

    # Internal state
    _triggers: list[Trigger] = field(init=False, repr=False, default_factory=list)
    _total_triangles: int = field(init=False, default=0)

    def _section(self, name: str) -> ContextManager:
        return self.profiler.section(name) if self.profiler else nullcontext()

    def _refresh_totals(self) -> None:
        self._total_triangles = sum(t.triangle_count for t in self._triggers)

    def _prepare_anchors(self, anchors, name: str, extrude_flat: bool) -> LocalPoints:
        """
        Validate raw anchors and extrude them if they are flat.

        Raises:
            TriggerConstructionError: On a malformed array or fewer than 4 anchors.
        """
        if isinstance(anchors, LocalPoints):
            anchors = anchors.coords
        points = f64(anchors)
        if points.ndim != 2 or points.shape[1] != 3:
            raise TriggerConstructionError(f"Expected an (N, 3) array of anchors, got shape {points.shape}")
        if len(points) < MIN_ANCHORS:
            raise TriggerConstructionError(
                f"Insufficient anchors to compute: need at least {MIN_ANCHORS}, got {len(points)}"
            )

        if not validate_points(points):
            logger.warning(
                "Detected very close anchors for %s, collision detection may break "
                "due to numerical instability, use at your own risk", name,
            )

        if extrude_flat and are_points_coplanar(points):
            logger.debug("Anchors of %s are coplanar, extruding %d anchors", name, len(points))
            points = extrude(points)
        return LocalPoints(points)

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def create(
        self,
        anchors,
        position=(0.0, 0.0, 0.0),
        *,
        name: str = "unnamed",
        color: tuple[int, int, int] = DEFAULT_COLOR,
        callback: TriggerCallback | None = None,
        uuid: UUID | None = None,
        extrude_flat: bool = True,
    ) -> Trigger:
        """
        Build a trigger from anchors and register it.

        Near-duplicate anchors are reported with a warning but accepted.
        Coplanar anchors are extruded into a thin shell first, since their
        hull would otherwise have no volume.

        Args:
            anchors: Local-frame anchor points, shape (N, 3), N >= 4.
            position: World position of the trigger's origin.
            name: Display name.
            color: Debug render color.
            callback: Receives TriggerEvents for this trigger.
            uuid: Identity; random if omitted.
            extrude_flat: Set False to keep flat anchor sets flat.

        Returns:
            The registered trigger.

        Raises:
            TriggerConstructionError: If the anchors cannot form a trigger.
        """
        points = self._prepare_anchors(anchors, name, extrude_flat)

        kwargs: dict[str, Any] = {"uuid": uuid} if uuid is not None else {}
        with self._section("hull"):
            trigger = Trigger(
                anchors=points,
                position=position,
                name=name,
                color=color,
                callback=callback,
                **kwargs,
            )

        if self.debug:
            logger.info("Hull computation of %s took %.3fms", trigger.name, trigger.last_computation_time)

        self.add(trigger)
        return trigger

    def add(self, trigger: Trigger) -> bool:
        """
        Register an existing trigger, e.g. one loaded from JSON.

        Returns:
            True if added, False if it was already registered.
        """
        if trigger in self:
            return False
        self._triggers.append(trigger)
        self._refresh_totals()
        return True

    def extend(self, triggers: Iterable[Trigger]) -> int:
        """Register several triggers. Returns how many were newly added."""
        return sum(1 for t in triggers if self.add(t))

    def remove(self, trigger: Trigger) -> bool:
        """
        Unregister a trigger.

        Returns:
            True if the trigger was removed, False if it was not registered.
        """
        if trigger not in self:
            return False
        self._triggers = [t for t in self._triggers if t is not trigger]
        self._refresh_totals()
        return True

    def recompute(self, trigger: Trigger, anchors=None, *, extrude_flat: bool = True) -> None:
        """
        Recompute a registered trigger's hull and refresh the triangle count.

        Replacement anchors go through the same checks as in create(): a
        warning for near-duplicates and extrusion of flat sets.

        Args:
            trigger: A trigger owned by this manager.
            anchors: Optional replacement local-frame anchors.
            extrude_flat: Set False to keep flat anchor sets flat.

        Raises:
            ValueError: If the trigger is not registered here.
            TriggerConstructionError: If the new anchors cannot form a trigger.
        """
        if trigger not in self:
            raise ValueError(f"Trigger {trigger.name} ({trigger.uuid}) is not registered")
        if anchors is not None:
            anchors = self._prepare_anchors(anchors, trigger.name, extrude_flat)
        with self._section("hull"):
            trigger.recompute(anchors)
        self._refresh_totals()
        if self.debug:
            logger.info("Hull computation of %s took %.3fms", trigger.name, trigger.last_computation_time)

    def get(self, uuid: UUID) -> Trigger | None:
        """Look up a trigger by identity."""
        for t in self._triggers:
            if t.uuid == uuid:
                return t
        return None

    def __contains__(self, trigger: object) -> bool:
        return any(t is trigger for t in self._triggers)

    def __iter__(self) -> Iterator[Trigger]:
        return iter(tuple(self._triggers))

    def __len__(self) -> int:
        return len(self._triggers)

    @property
    def triggers(self) -> tuple[Trigger, ...]:
        """A snapshot of the registered triggers."""
        return tuple(self._triggers)

    @property
    def total_triangles(self) -> int:
        """Combined triangle count of all registered triggers."""
        return self._total_triangles

    # -------------------------------------------------------------------------
    # Movement hooks
    # -------------------------------------------------------------------------

    def _deliver(self, event: TriggerEvent) -> None:
        callback = event.trigger.callback
        if callback is None:
            logger.debug("Trigger %s has no callback, dropping %s", event.trigger.name, event.kind.name)
            return
        callback(event)

    def on_move(self, actor: Any, old_position, new_position, hitbox: Hitbox) -> list[TriggerEvent]:
        """
        Process one movement of an actor.

        Args:
            actor: The moving entity; passed through to events untouched.
            old_position: World position of the actor's feet before the move.
            new_position: World position after the move.
            hitbox: The actor's bounding box dimensions.

        Returns:
            The events emitted, in delivery order.
        """
        old_pos = vec3(old_position)
        new_pos = vec3(new_position)

        with self._section("move"):
            previous = hitbox.corners(old_pos)
            current = hitbox.corners(new_pos)

            events: list[TriggerEvent] = []
            for trigger in self.triggers:
                # Skip expensive checks if the actor is nowhere near the trigger.
                if not trigger.in_check_range(old_pos) or not trigger.in_check_range(new_pos):
                    continue

                was_inside = trigger.contains(previous)
                is_inside = trigger.contains(current)
                for kind in transition_events(was_inside, is_inside):
                    event = TriggerEvent(actor, trigger, kind)
                    events.append(event)
                    self._deliver(event)

        return events

    def on_teleport(self, actor: Any, old_position, new_position, hitbox: Hitbox) -> list[TriggerEvent]:
        """Process a teleport. Only the two endpoints are tested, as for a move."""
        return self.on_move(actor, old_position, new_position, hitbox)

    def on_spawn(self, actor: Any, position, hitbox: Hitbox) -> list[TriggerEvent]:
        """
        Process an actor appearing in the world.

        An actor spawning inside a trigger gets TICK followed by ENTERED.

        Returns:
            The events emitted, in delivery order.
        """
        pos = vec3(position)

        with self._section("move"):
            current = hitbox.corners(pos)

            events: list[TriggerEvent] = []
            for trigger in self.triggers:
                if not trigger.in_check_range(pos):
                    continue
                if not trigger.contains(current):
                    continue
                spawned = [
                    TriggerEvent(actor, trigger, TransitionKind.TICK),
                    TriggerEvent(actor, trigger, TransitionKind.ENTERED),
                ]
                events.extend(spawned)
                for event in spawned:
                    self._deliver(event)

        return events
