"""
Microbenchmark: time per movement pass vs number of triggers.
Run:
  python benchmarks/bench_moves.py
"""
import time
import numpy as np
from trigger_volumes.manager import TriggerManager
from trigger_volumes.profiler import Profiler
from trigger_volumes.types import Hitbox

def run(n: int, moves: int = 2000):
    prof = Profiler()
    manager = TriggerManager(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # scatter random convex triggers over a square area
    side = int(np.ceil(np.sqrt(n)))
    for k in range(n):
        ix, iz = k % side, k // side
        anchors = rng.normal(size=(12, 3)) * 2.0
        manager.create(anchors, position=(8.0 * ix, 0.0, 8.0 * iz))

    box = Hitbox(0.6, 1.8, 0.6)
    extent = 8.0 * side
    path = rng.uniform(0.0, extent, size=(moves + 1, 3)) * (1.0, 0.0, 1.0)

    t0 = time.perf_counter()
    for old, new in zip(path, path[1:]):
        # small steps, like a walking player
        manager.on_move("bench", old, old + 0.05 * (new - old), box)
    t1 = time.perf_counter()

    total = t1 - t0
    per_move = total / moves
    return per_move, prof.stats.report()

if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_move, report = run(n)
        print(f"N={n:4d}  move={1e3*per_move:8.3f} ms  moves/s={1/per_move:8.1f}")
        print(report)
        print()
