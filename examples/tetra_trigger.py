# examples/tetra_trigger.py
import numpy as np
from trigger_volumes import TriggerManager, Hitbox
from trigger_volumes.logging_config import setup_logging

setup_logging()

tetra = np.array([[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]]) / np.sqrt(2.0)

manager = TriggerManager(debug=True)
manager.create(tetra, position=(0.0, 0.0, 0.0), name="tetra",
               callback=lambda e: print(e.actor, e.kind.value, e.trigger.name))

box = Hitbox(0.1, 0.1, 0.1)
path = [-np.ones(3) * 0.85, np.zeros(3), np.array([0.05, 0.0, 0.0]), -np.ones(3) * 0.85]
for old, new in zip(path, path[1:]):
    manager.on_move("player", old, new, box)
