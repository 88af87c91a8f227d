# MIT License (see LICENSE)
"""
Rendering adapters for trigger debug visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the line-drawing interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer.
    - BufferedRenderer: Records segments per frame.

Typical usage:
    from trigger_volumes.renderer import DebugRenderer

    DebugRenderer().render_manager(manager)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
