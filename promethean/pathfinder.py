"""A* path search over the walkable cells of a collision layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from promethean.collision import CollisionLayer
from promethean.pathfinding import _search

Point = tuple[int, int]


class PathError(enum.Enum):
    NONE = "none"
    NO_PATH = "no_path"
    INVALID_ENDPOINT = "invalid_endpoint"


@dataclass
class PathResult:
    cells: list[Point] = field(default_factory=list)
    error: PathError = PathError.NONE

    @property
    def ok(self) -> bool:
        return self.error is PathError.NONE


class Pathfinder:
    """Finds 4-connected paths on a collision layer's walkability grid."""

    def __init__(self, collision: Optional[CollisionLayer] = None) -> None:
        self._collision: Optional[CollisionLayer] = None
        self.init(collision)

    def init(self, collision: Optional[CollisionLayer]) -> None:
        self._collision = collision

    def find_path(self, start: Sequence[int], goal: Sequence[int]) -> PathResult:
        """Search from ``start`` to ``goal``; the result carries any error."""
        collision = self._collision
        start_cell = (int(start[0]), int(start[1]))
        goal_cell = (int(goal[0]), int(goal[1]))
        if (
            collision is None
            or not collision.is_walkable(start_cell)
            or not collision.is_walkable(goal_cell)
        ):
            return PathResult(error=PathError.INVALID_ENDPOINT)
        cells = _search(collision.is_walkable, start_cell, goal_cell)
        if cells is None:
            return PathResult(error=PathError.NO_PATH)
        return PathResult(cells=cells)