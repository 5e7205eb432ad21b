"""Timed debug primitives (lines, circles, boxes) drawn over the scene."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from promethean.renderer import BatchRenderer

Vec2 = tuple[float, float]

CIRCLE_SEGMENTS = 16
_WHITE = (1.0, 1.0, 1.0, 1.0)


def _vec2(value: Sequence[float]) -> Vec2:
    return (float(value[0]), float(value[1]))


@dataclass
class DebugLine:
    start: Vec2
    end: Vec2
    duration: float


@dataclass
class DebugCircle:
    center: Vec2
    radius: float
    duration: float


@dataclass
class DebugBox:
    min: Vec2
    max: Vec2
    duration: float


class DebugOverlay:
    """Stores debug primitives for a limited time and renders them as lines."""

    _instance: ClassVar[Optional["DebugOverlay"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lines: list[DebugLine] = []
        self._circles: list[DebugCircle] = []
        self._boxes: list[DebugBox] = []

    @classmethod
    def instance(cls) -> "DebugOverlay":
        """Return the shared overlay, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def lines(self) -> tuple[DebugLine, ...]:
        return tuple(self._lines)

    @property
    def circles(self) -> tuple[DebugCircle, ...]:
        return tuple(self._circles)

    @property
    def boxes(self) -> tuple[DebugBox, ...]:
        return tuple(self._boxes)

    def add_line(self, a: Sequence[float], b: Sequence[float], duration: float) -> None:
        """Add a line lasting ``duration`` seconds."""
        self._lines.append(DebugLine(_vec2(a), _vec2(b), float(duration)))

    def add_circle(self, center: Sequence[float], radius: float, duration: float) -> None:
        """Add a circle lasting ``duration`` seconds."""
        self._circles.append(DebugCircle(_vec2(center), float(radius), float(duration)))

    def add_box(
        self, box_min: Sequence[float], box_max: Sequence[float], duration: float
    ) -> None:
        """Add an axis-aligned box lasting ``duration`` seconds."""
        self._boxes.append(DebugBox(_vec2(box_min), _vec2(box_max), float(duration)))

    def update(self, dt: float) -> None:
        """Age every primitive by ``dt`` and drop those whose time ran out."""
        for primitives in (self._lines, self._circles, self._boxes):
            for primitive in primitives:
                primitive.duration -= dt
            primitives[:] = [p for p in primitives if p.duration > 0.0]

    def render(self, renderer: BatchRenderer) -> None:
        """Draw all primitives as white lines and flush the renderer."""
        renderer.begin(1, 1)

        for line in self._lines:
            renderer.draw_line(line.start, line.end, _WHITE)

        for box in self._boxes:
            (x0, y0), (x1, y1) = box.min, box.max
            corners = ((x0, y0), (x1, y0), (x1, y1), (x0, y1))
            for a, b in zip(corners, corners[1:] + corners[:1]):
                renderer.draw_line(a, b, _WHITE)

        step = math.tau / CIRCLE_SEGMENTS
        for circle in self._circles:
            cx, cy = circle.center
            points = [
                (cx + circle.radius * math.cos(step * i), cy + circle.radius * math.sin(step * i))
                for i in range(CIRCLE_SEGMENTS + 1)
            ]
            for a, b in zip(points, points[1:]):
                renderer.draw_line(a, b, _WHITE)

        renderer.flush()

    def reset(self) -> None:
        """Remove every primitive."""
        self._lines.clear()
        self._circles.clear()
        self._boxes.clear()