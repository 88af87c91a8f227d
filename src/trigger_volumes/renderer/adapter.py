# MIT License (see LICENSE)
"""
Renderer adapters for trigger debug visualization.

This module provides an abstract base class for drawing trigger wireframes
and a few concrete implementations. The core package has no rendering
dependency; hosts plug in their own adapter (particles, debug lines, ...).
Drawing every edge of every trigger each tick can be very slow.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys
import numpy as np

if TYPE_CHECKING:
    from ..manager import TriggerManager
    from ..trigger import Trigger

Color = tuple[int, int, int]


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame()
        renderer.render_trigger(trigger)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_manager(manager)
    """

    @abstractmethod
    def begin_frame(self) -> None:
        """Begin a new frame."""
        ...

    @abstractmethod
    def draw_line(self, start: np.ndarray, end: np.ndarray, color: Color) -> None:
        """
        Draw a single world-frame line segment.

        Args:
            start: Segment start [x, y, z].
            end: Segment end [x, y, z].
            color: RGB color.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_trigger(self, trigger: "Trigger") -> None:
        """Draw every triangle edge of a trigger in its color."""
        for start, end in trigger.edges():
            self.draw_line(start, end, trigger.color)

    def render_manager(self, manager: "TriggerManager") -> None:
        """Convenience method to draw all triggers of a manager as one frame."""
        self.begin_frame()
        for trigger in manager:
            self.render_trigger(trigger)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame 0 ===
        (0.00, 0.00, 0.00) -> (1.00, 0.00, 0.00) #ff0000
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout
        self._frame = 0

    def begin_frame(self) -> None:
        self.output.write(f"=== Frame {self._frame} ===\n")

    def draw_line(self, start: np.ndarray, end: np.ndarray, color: Color) -> None:
        r, g, b = color
        self.output.write(
            f"({start[0]:.2f}, {start[1]:.2f}, {start[2]:.2f}) -> "
            f"({end[0]:.2f}, {end[1]:.2f}, {end[2]:.2f}) #{r:02x}{g:02x}{b:02x}\n"
        )

    def end_frame(self) -> None:
        self._frame += 1
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, useful as a placeholder or for timing without drawing."""

    def begin_frame(self) -> None:
        pass

    def draw_line(self, start: np.ndarray, end: np.ndarray, color: Color) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers line segments per frame for later retrieval.

    Example:
        renderer = BufferedRenderer()
        renderer.render_manager(manager)
        segments = renderer.frames[0]
    """

    def __init__(self):
        self.frames: list[list[dict]] = []
        self._current_frame: list[dict] | None = None

    def begin_frame(self) -> None:
        self._current_frame = []

    def draw_line(self, start: np.ndarray, end: np.ndarray, color: Color) -> None:
        if self._current_frame is None:
            return
        self._current_frame.append({
            "start": np.asarray(start).tolist(),
            "end": np.asarray(end).tolist(),
            "color": tuple(color),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
