"""Collision layer built from a tile map's "collision" object group."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from promethean.log import LogSystem
from promethean.tilemap import TileMap

Point = tuple[int, int]

CELL_SIZE = 256.0
_MAX_QUERY_RESULTS = 16
_LAYER_NAME = "collision"


class MissingCollisionLayerError(LookupError):
    """Raised when a tile map has no "collision" object group."""


@dataclass(frozen=True)
class AABBCollider:
    min: tuple[float, float] = (0.0, 0.0)
    max: tuple[float, float] = (0.0, 0.0)

    def contains(self, x: float, y: float) -> bool:
        return self.min[0] <= x <= self.max[0] and self.min[1] <= y <= self.max[1]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cell(value: float) -> int:
    return math.floor(value / CELL_SIZE)


class CollisionLayer:
    """Axis-aligned colliders with a spatial hash and a walkability grid."""

    def __init__(self) -> None:
        self._colliders: list[AABBCollider] = []
        self._hash: dict[Point, list[int]] = {}
        self._width = 0
        self._height = 0
        self._walkable: list[bool] = []

    def build(self, tile_map: TileMap) -> None:
        """Rebuild from ``tile_map``; raise MissingCollisionLayerError without a layer.

        Even when the layer is missing, the grid is reset to the map size and
        every cell is walkable.
        """
        self._colliders.clear()
        self._hash.clear()
        self._width, self._height = tile_map.map_size
        self._walkable = [True] * max(self._width * self._height, 0)

        group = next((g for g in tile_map.object_groups if g.name == _LAYER_NAME), None)
        if group is None:
            LogSystem.instance().debug("Collision layer not found")
            raise MissingCollisionLayerError("collision layer not found")

        tile = tile_map.tile_w
        for obj in group.objects:
            px, py = obj.pos
            sx, sy = obj.size
            collider = AABBCollider((float(px), float(py)), (float(px + sx), float(py + sy)))
            index = len(self._colliders)
            self._colliders.append(collider)

            x_start, y_start = _trunc_div(px, tile), _trunc_div(py, tile)
            x_end, y_end = _trunc_div(px + sx - 1, tile), _trunc_div(py + sy - 1, tile)
            for y in range(max(y_start, 0), min(y_end + 1, self._height)):
                for x in range(max(x_start, 0), min(x_end + 1, self._width)):
                    self._walkable[y * self._width + x] = False

            x0, y0 = _cell(collider.min[0]), _cell(collider.min[1])
            x1, y1 = _cell(collider.max[0] - 1), _cell(collider.max[1] - 1)
            for y in range(y0, y1 + 1):
                for x in range(x0, x1 + 1):
                    self._hash.setdefault((x, y), []).append(index)

    def query(self, point: Sequence[float]) -> list[AABBCollider]:
        """Colliders containing ``point`` (at most 16)."""
        x, y = float(point[0]), float(point[1])
        result: list[AABBCollider] = []
        for index in self._hash.get((_cell(x), _cell(y)), ()):
            collider = self._colliders[index]
            if collider.contains(x, y):
                result.append(collider)
                if len(result) >= _MAX_QUERY_RESULTS:
                    break
        return result

    def is_walkable(self, cell: Sequence[int]) -> bool:
        x, y = cell[0], cell[1]
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return False
        return self._walkable[y * self._width + x]

    @property
    def size(self) -> Point:
        """Grid size in cells as ``(width, height)``."""
        return (self._width, self._height)