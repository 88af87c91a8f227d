# examples/flat_square.py
from trigger_volumes import TriggerManager, Hitbox
from trigger_volumes.io.json_io import triggers_to_json
from trigger_volumes.renderer.adapter import DebugRenderer

manager = TriggerManager()
floor = manager.create(
    [(-5, 0, -5), (5, 0, -5), (5, 0, 5), (-5, 0, 5)],
    position=(0.0, 64.0, 0.0),
    name="pressure plate",
    color=(0, 200, 255),
    callback=lambda e: print(e.actor, e.kind.value),
)

print("anchors:", len(floor.anchors), "triangles:", floor.triangle_count)

player = Hitbox(width=0.6, height=1.8, depth=0.6)
manager.on_spawn("alice", (0.0, 64.0, 0.0), player)
manager.on_move("alice", (0.0, 64.0, 0.0), (1.0, 64.0, 0.0), player)
manager.on_move("alice", (1.0, 64.0, 0.0), (1.0, 66.0, 0.0), player)

print(triggers_to_json(manager))
DebugRenderer().render_manager(manager)
