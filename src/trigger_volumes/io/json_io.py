# MIT License (see LICENSE)
"""
JSON serialization and deserialization for triggers.

Only the data needed to rebuild a trigger's shape is stored; the hull is
recomputed from the stored anchors on load. Callbacks are never persisted
and must be re-attached by the loader.

JSON Schema Overview:
---------------------
{
  "triggers": [
    {
      "uuid": string,                       # Default: fresh random uuid
      "name": string,                       # Default: "unnamed"
      "position": {"x": f, "y": f, "z": f}, # Default: origin
      "anchors": [{"x": f, "y": f, "z": f}, ...],   # Required, >= 4
      "color": [r, g, b]                    # Optional, default [255, 0, 0]
    }
  ]
}

Anchors are the ones the trigger owns, i.e. after extrusion of flat sets,
so loading does not extrude again.
"""
from __future__ import annotations
import json
from typing import Any, Iterable
from uuid import UUID, uuid4

import numpy as np

from ..constants import DEFAULT_COLOR
from ..events import TriggerCallback
from ..trigger import Trigger
from ..types import LocalPoints


def _point_to_json(p: np.ndarray) -> dict[str, float]:
    return {"x": float(p[0]), "y": float(p[1]), "z": float(p[2])}


def _point_from_json(d: dict[str, Any]) -> list[float]:
    return [float(d.get("x", 0.0)), float(d.get("y", 0.0)), float(d.get("z", 0.0))]


def trigger_to_json(trigger: Trigger) -> dict[str, Any]:
    """
    Serialize a Trigger to a dictionary (round-trip compatible).

    The default color is omitted to keep the output concise.
    """
    result: dict[str, Any] = {
        "uuid": str(trigger.uuid),
        "name": trigger.name,
        "position": _point_to_json(trigger.position),
        "anchors": [_point_to_json(a) for a in trigger.anchors.coords],
    }
    if tuple(trigger.color) != DEFAULT_COLOR:
        result["color"] = list(trigger.color)
    return result


def trigger_from_json(d: dict[str, Any], callback: TriggerCallback | None = None) -> Trigger:
    """
    Rebuild a trigger from a dictionary produced by trigger_to_json.

    The result is not registered anywhere; add it to a TriggerManager.

    Args:
        d: Trigger record.
        callback: Callback to attach to the rebuilt trigger.

    Returns:
        A trigger with a freshly computed hull.

    Raises:
        ValueError: If the record has no anchors or an invalid uuid.
        TriggerConstructionError: If the anchors cannot form a hull.
    """
    if "anchors" not in d:
        raise ValueError("Trigger definition missing required 'anchors' field.")

    anchors = LocalPoints([_point_from_json(a) for a in d["anchors"]])
    position = _point_from_json(d.get("position", {}))
    uid = UUID(d["uuid"]) if "uuid" in d else uuid4()
    color = tuple(int(c) for c in d.get("color", DEFAULT_COLOR))
    if len(color) != 3:
        raise ValueError(f"Trigger color must have 3 components, got {len(color)}")

    return Trigger(
        anchors=anchors,
        position=position,
        uuid=uid,
        name=str(d.get("name", "unnamed")),
        color=color,
        callback=callback,
    )


def triggers_to_json(triggers: Iterable[Trigger]) -> dict[str, Any]:
    """Serialize several triggers into one document."""
    return {"triggers": [trigger_to_json(t) for t in triggers]}


def triggers_from_json(data: dict[str, Any], callback: TriggerCallback | None = None) -> list[Trigger]:
    """Rebuild every trigger in a document produced by triggers_to_json."""
    return [trigger_from_json(d, callback) for d in data.get("triggers", [])]


def load_triggers_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a trigger file without building hulls.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_triggers(path: str, callback: TriggerCallback | None = None) -> list[Trigger]:
    """
    Load and rebuild all triggers stored in a JSON file.

    Args:
        path: Path to the JSON file.
        callback: Callback attached to every loaded trigger.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a trigger record is malformed.
    """
    return triggers_from_json(load_triggers_raw(path), callback)


def save_triggers(triggers: Iterable[Trigger], path: str, indent: int = 2) -> None:
    """Save triggers to a JSON file on disk."""
    data = triggers_to_json(triggers)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
