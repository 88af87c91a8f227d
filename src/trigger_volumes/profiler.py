# MIT License (see LICENSE)
"""
Timing instrumentation for hull builds and movement passes.

TriggerManager records two sections when a profiler is attached:
    - "hull": every hull computation done through create() or recompute()
    - "move": every on_move / on_teleport / on_spawn pass

Example:
    profiler = Profiler()
    manager = TriggerManager(profiler=profiler)
    ...
    print(profiler.stats.report())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np


@dataclass
class ProfileStats:
    """
    Timing samples per named section, in seconds.

    Attributes:
        samples: Section name -> recorded durations, in insertion order.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics in milliseconds.

        Returns:
            Section name -> {"n", "mean_ms", "p95_ms", "max_ms", "total_ms"}.
            Sections without samples are left out.
        """
        out: dict[str, dict[str, float]] = {}
        for name, times in self.samples.items():
            if not times:
                continue
            ms = 1e3 * np.asarray(times, dtype=np.float64)
            out[name] = {
                "n": len(ms),
                "mean_ms": float(ms.mean()),
                "p95_ms": float(np.percentile(ms, 95)),
                "max_ms": float(ms.max()),
                "total_ms": float(ms.sum()),
            }
        return out

    def report(self) -> str:
        """One line per section, slowest total first."""
        rows = sorted(self.summary().items(), key=lambda kv: kv[1]["total_ms"], reverse=True)
        return "\n".join(
            f"{name:>8s}  n={s['n']:6d}  mean={s['mean_ms']:8.3f}ms  "
            f"p95={s['p95_ms']:8.3f}ms  max={s['max_ms']:8.3f}ms"
            for name, s in rows
        )


class Profiler:
    """Collects section timings into a ProfileStats."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name. A block that raises is still recorded."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
