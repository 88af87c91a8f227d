import json
from uuid import UUID

import numpy as np
import pytest
from trigger_volumes.io.json_io import (
    trigger_to_json,
    trigger_from_json,
    triggers_to_json,
    load_triggers,
    load_triggers_raw,
    save_triggers,
)
from trigger_volumes.manager import TriggerManager
from trigger_volumes.trigger import Trigger
from trigger_volumes.types import Hitbox
from trigger_volumes.events import TransitionKind

CUBE = np.array([[x, y, z] for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)], dtype=np.float64)


def _sorted_normals(trigger):
    normals = np.round(np.array([t.normal for t in trigger.triangles]), 9)
    return normals[np.lexsort(normals.T)]


def test_round_trip_preserves_shape_and_identity():
    original = Trigger(CUBE, position=(3.0, -2.0, 1.5), name="vault", color=(0, 128, 255))
    restored = trigger_from_json(json.loads(json.dumps(trigger_to_json(original))))

    assert restored.uuid == original.uuid
    assert restored.name == "vault"
    assert restored.color == (0, 128, 255)
    assert np.allclose(restored.position, original.position)
    assert np.allclose(restored.anchors.coords, original.anchors.coords)
    assert restored.triangle_count == original.triangle_count
    assert np.allclose(_sorted_normals(restored), _sorted_normals(original))
    assert restored.check_radius == pytest.approx(original.check_radius)


def test_default_color_is_omitted():
    d = trigger_to_json(Trigger(CUBE))
    assert "color" not in d
    assert set(d) == {"uuid", "name", "position", "anchors"}
    assert d["position"] == {"x": 0.0, "y": 0.0, "z": 0.0}
    assert len(d["anchors"]) == 8


def test_minimal_record_uses_defaults():
    record = {"anchors": [{"x": float(x), "y": float(y), "z": float(z)} for x, y, z in CUBE]}
    t = trigger_from_json(record)
    assert isinstance(t.uuid, UUID)
    assert t.name == "unnamed"
    assert t.color == (255, 0, 0)
    assert np.allclose(t.position, 0.0)


def test_missing_anchors():
    with pytest.raises(ValueError, match="anchors"):
        trigger_from_json({"name": "broken"})


def test_bad_color():
    d = trigger_to_json(Trigger(CUBE))
    d["color"] = [1, 2]
    with pytest.raises(ValueError):
        trigger_from_json(d)


def test_save_and_load(tmp_path):
    """Saved triggers come back with a fresh callback and work in a manager."""
    path = tmp_path / "triggers.json"
    manager = TriggerManager()
    a = manager.create(CUBE, name="a")
    manager.create(CUBE * 2.0, position=(30.0, 0.0, 0.0), name="b")
    save_triggers(manager, str(path))

    raw = load_triggers_raw(str(path))
    assert [t["name"] for t in raw["triggers"]] == ["a", "b"]

    events = []
    loaded = load_triggers(str(path), callback=events.append)
    assert [t.uuid for t in loaded] == [t.uuid for t in manager]

    fresh = TriggerManager()
    assert fresh.extend(loaded) == 2
    assert fresh.total_triangles == manager.total_triangles

    fresh.on_spawn("kim", a.position, Hitbox(0.2, 0.2, 0.2))
    assert [e.kind for e in events] == [TransitionKind.TICK, TransitionKind.ENTERED]
    assert events[0].trigger.uuid == a.uuid


def test_document_shape():
    doc = triggers_to_json([Trigger(CUBE), Trigger(CUBE)])
    assert list(doc) == ["triggers"]
    assert len(doc["triggers"]) == 2
