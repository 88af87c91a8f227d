# MIT License (see LICENSE)
"""
Transition events delivered to trigger callbacks.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .trigger import Trigger


class TransitionKind(Enum):
    """What happened between an actor and a trigger during one movement."""
    ENTERED = "entered"
    EXITED = "exited"
    TICK = "tick"


@dataclass(frozen=True)
class TriggerEvent:
    """
    A single callback invocation.

    Attributes:
        actor: The moving entity, as supplied by the host.
        trigger: The trigger whose boundary was involved.
        kind: The transition kind.
    """
    actor: Any
    trigger: "Trigger"
    kind: TransitionKind


TriggerCallback = Callable[[TriggerEvent], None]
