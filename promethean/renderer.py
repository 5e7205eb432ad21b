"""Immediate-mode 2D quad and line renderer that records the draw state it submits."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from promethean.events import EventBus
from promethean.log import LogSystem

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]
Matrix4 = tuple[tuple[float, float, float, float], ...]

WHITE: Vec4 = (1.0, 1.0, 1.0, 1.0)
_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class QuadUV:
    """Texture coordinates of the four corners of a quad."""

    bottom_left: Vec2 = (0.0, 1.0)
    top_left: Vec2 = (0.0, 0.0)
    top_right: Vec2 = (1.0, 0.0)
    bottom_right: Vec2 = (1.0, 1.0)


@dataclass(frozen=True)
class FrameRenderedEvent:
    """Published every time the renderer flushes a frame."""


class Primitive(enum.Enum):
    TRIANGLES = "triangles"
    LINES = "lines"


def _ortho(left: float, right: float, bottom: float, top: float) -> Matrix4:
    """Row-major orthographic projection with a depth range of [-1, 1]."""
    return (
        (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
        (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
        (0.0, 0.0, -1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def _vec2(value: Sequence[float]) -> Vec2:
    return (float(value[0]), float(value[1]))


def _vec4(value: Sequence[float]) -> Vec4:
    return (float(value[0]), float(value[1]), float(value[2]), float(value[3]))


class BatchRenderer:
    """Draws quads and lines one call at a time in screen coordinates.

    No graphics device is driven; the renderer keeps the state each draw would
    have submitted (vertices, tint, bound texture, projection) for inspection.
    """

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus if bus is not None else EventBus.instance()
        self._initialized = False
        self._bound_texture = 0
        self._draw_calls = 0
        self.bind_count = 0
        self.draw_arrays_count = 0
        self.viewport: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.projection: Matrix4 = _IDENTITY
        self.last_vertices: tuple[float, ...] = ()
        self.last_tint: Vec4 = (0.0, 0.0, 0.0, 0.0)
        self.last_texture_unit = 0
        self.last_primitive: Optional[Primitive] = None

    def __enter__(self) -> "BatchRenderer":
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def bound_texture(self) -> int:
        return self._bound_texture

    def init(self) -> None:
        """Prepare the renderer; calling it again has no effect."""
        self._initialized = True

    def shutdown(self) -> None:
        """Release the renderer; calling it when not initialised has no effect."""
        if not self._initialized:
            return
        self._initialized = False
        self._bound_texture = 0

    def _require_init(self, what: str) -> None:
        if not self._initialized:
            message = f"{what} called before init"
            LogSystem.instance().error(message)
            raise RuntimeError(message)

    def begin(self, width: int, height: int) -> None:
        """Start a frame: reset the draw-call count and set up the projection."""
        self._require_init("begin")
        self._draw_calls = 0
        self.viewport = (0, 0, int(width), int(height))
        self.projection = _ortho(0.0, float(width), float(height), 0.0)

    def project(self, point: Sequence[float]) -> Vec2:
        """Map a screen point to normalised device coordinates."""
        x, y = _vec2(point)
        row_x, row_y = self.projection[0], self.projection[1]
        return (
            row_x[0] * x + row_x[1] * y + row_x[3],
            row_y[0] * x + row_y[1] * y + row_y[3],
        )

    def bind_texture(self, texture_id: int) -> None:
        """Bind a texture for the following draws; rebinding the same one is skipped."""
        if texture_id == 0:
            raise ValueError("texture id 0 cannot be bound")
        if texture_id == self._bound_texture:
            return
        self._bound_texture = texture_id
        LogSystem.instance().debug("BatchRenderer::BindTexture {}", texture_id)
        self.bind_count += 1

    def _submit(self, vertices: tuple[float, ...], tint: Vec4, primitive: Primitive) -> None:
        self.last_vertices = vertices
        self.last_tint = tint
        self.last_texture_unit = 0
        self.last_primitive = primitive
        self.draw_arrays_count += 1
        self._draw_calls += 1

    def draw_quad(
        self,
        pos: Sequence[float],
        size: Sequence[float],
        uv: Optional[QuadUV] = None,
        tint: Sequence[float] = WHITE,
    ) -> None:
        """Draw one textured, tinted quad as two triangles."""
        self._require_init("draw_quad")
        uv = uv if uv is not None else QuadUV()
        x, y = _vec2(pos)
        w, h = _vec2(size)
        tl, tr, br, bl = uv.top_left, uv.top_right, uv.bottom_right, uv.bottom_left
        vertices = (
            x, y, *tl,
            x + w, y, *tr,
            x + w, y + h, *br,
            x, y, *tl,
            x + w, y + h, *br,
            x, y + h, *bl,
        )
        self._submit(tuple(float(v) for v in vertices), _vec4(tint), Primitive.TRIANGLES)

    def draw_line(
        self,
        a: Sequence[float],
        b: Sequence[float],
        color: Sequence[float] = WHITE,
    ) -> None:
        """Draw a coloured line from ``a`` to ``b``."""
        self._require_init("draw_line")
        ax, ay = _vec2(a)
        bx, by = _vec2(b)
        self._submit((ax, ay, 0.0, 0.0, bx, by, 1.0, 1.0), _vec4(color), Primitive.LINES)

    def flush(self) -> None:
        """Finish the pending draws and publish a FrameRenderedEvent."""
        self._require_init("flush")
        LogSystem.instance().debug("BatchRenderer::Flush")
        self._bus.publish(FrameRenderedEvent())

    def end(self) -> None:
        """End the frame; the same as flush."""
        self.flush()

    @property
    def draw_call_count(self) -> int:
        """Draw calls issued since the last begin or reset."""
        return self._draw_calls

    def reset_stats(self) -> None:
        self._draw_calls = 0