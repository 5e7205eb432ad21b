"""Component types stored by the entity registry, and the pool that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

Point = tuple[int, int]
C = TypeVar("C")


def _xy_json(x: float, y: float) -> dict[str, Any]:
    return {"x": x, "y": y}


def _xy_from_json(data: dict[str, Any]) -> tuple[float, float]:
    return float(data.get("x", 0.0)), float(data.get("y", 0.0))


@dataclass
class Position:
    """World position of an entity."""

    x: float = 0.0
    y: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return _xy_json(self.x, self.y)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Position":
        x, y = _xy_from_json(data)
        return cls(x=x, y=y)


@dataclass
class Velocity:
    """Velocity of an entity."""

    x: float = 0.0
    y: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return _xy_json(self.x, self.y)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Velocity":
        x, y = _xy_from_json(data)
        return cls(x=x, y=y)


@dataclass
class Renderable:
    """Texture region and depth used to draw an entity."""

    texture_id: int = 0
    u: float = 0.0
    v: float = 0.0
    w: float = 1.0
    h: float = 1.0
    z: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "texture_id": self.texture_id,
            "u": self.u,
            "v": self.v,
            "w": self.w,
            "h": self.h,
            "z": self.z,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Renderable":
        return cls(
            texture_id=int(data.get("texture_id", 0)),
            u=float(data.get("u", 0.0)),
            v=float(data.get("v", 0.0)),
            w=float(data.get("w", 1.0)),
            h=float(data.get("h", 1.0)),
            z=float(data.get("z", 0.0)),
        )


def _point_json(point: Point) -> dict[str, int]:
    return {"x": point[0], "y": point[1]}


def _point_from_json(data: dict[str, Any]) -> Point:
    return (int(data.get("x", 0)), int(data.get("y", 0)))


@dataclass
class NavComponent:
    """Grid navigation state: current cell, goal cell and the computed path."""

    position: Point = (0, 0)
    destination: Point = (0, 0)
    path: list[Point] = field(default_factory=list)
    current: int = 0

    def to_json(self) -> dict[str, Any]:
        return {
            "position": _point_json(self.position),
            "destination": _point_json(self.destination),
            "current": self.current,
            "path": [_point_json(step) for step in self.path],
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "NavComponent":
        """Build from JSON; ``position`` and ``destination`` are required."""
        return cls(
            position=_point_from_json(data["position"]),
            destination=_point_from_json(data["destination"]),
            path=[_point_from_json(step) for step in data.get("path", [])],
            current=int(data.get("current", 0)),
        )


class BehaviorState(enum.IntEnum):
    IDLE = 0
    SEEK = 1
    FLEE = 2
    PATROL = 3


@dataclass
class BehaviorComponent:
    """Simple steering behaviour driven by a small state machine."""

    state: BehaviorState = BehaviorState.IDLE
    target: tuple[float, float] = (0.0, 0.0)
    timer: float = 0.0
    idle_duration: float = 1.0
    speed: float = 1.0

    def to_json(self) -> dict[str, Any]:
        return {
            "state": int(self.state),
            "target": {"x": self.target[0], "y": self.target[1]},
            "timer": self.timer,
            "idleDuration": self.idle_duration,
            "speed": self.speed,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "BehaviorComponent":
        target = (0.0, 0.0)
        if "target" in data:
            raw = data["target"]
            target = (float(raw.get("x", 0.0)), float(raw.get("y", 0.0)))
        return cls(
            state=BehaviorState(int(data.get("state", 0))),
            target=target,
            timer=float(data.get("timer", 0.0)),
            idle_duration=float(data.get("idleDuration", 1.0)),
            speed=float(data.get("speed", 1.0)),
        )


class ComponentPool(Generic[C]):
    """Densely packed storage of one component type, keyed by entity id."""

    def __init__(self) -> None:
        self._data: list[C] = []
        self._entities: list[int] = []
        self._lookup: dict[int, int] = {}

    def emplace(self, entity_id: int, component: C) -> C:
        """Store ``component`` for the entity; an existing one is kept and returned."""
        index = self._lookup.get(entity_id)
        if index is not None:
            return self._data[index]
        self._lookup[entity_id] = len(self._data)
        self._data.append(component)
        self._entities.append(entity_id)
        return component

    def remove(self, entity_id: int) -> None:
        """Drop the entity's component, moving the last one into its slot."""
        index = self._lookup.pop(entity_id, None)
        if index is None:
            return
        last_data = self._data.pop()
        last_entity = self._entities.pop()
        if index < len(self._data):
            self._data[index] = last_data
            self._entities[index] = last_entity
            self._lookup[last_entity] = index

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._lookup

    def __len__(self) -> int:
        return len(self._data)

    def get(self, entity_id: int) -> Optional[C]:
        index = self._lookup.get(entity_id)
        return None if index is None else self._data[index]

    def entities(self) -> list[int]:
        """Ids of the entities holding a component, in storage order."""
        return list(self._entities)