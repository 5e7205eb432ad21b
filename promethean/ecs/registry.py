"""Entity registry, entity handles and the system base class."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from promethean.ecs.components import (
    BehaviorComponent,
    ComponentPool,
    NavComponent,
    Position,
    Renderable,
    Velocity,
)
from promethean.log import LogSystem

COMPONENT_TYPES: tuple[type, ...] = (
    Position,
    Velocity,
    Renderable,
    NavComponent,
    BehaviorComponent,
)


@dataclass
class Entity:
    """Handle to an entity living in a registry."""

    registry: Optional["Registry"] = field(default=None, repr=False, compare=False)
    id: int = 0

    @property
    def valid(self) -> bool:
        return self.registry is not None and self.id != 0

    def destroy(self) -> None:
        """Destroy the entity in its registry and invalidate this handle."""
        if self.registry is not None:
            self.registry.destroy(self.id)
            self.registry = None
            self.id = 0


class Registry:
    """Creates entities and stores their components in per-type pools."""

    def __init__(self) -> None:
        self._next_id = 1
        self._free: list[int] = []
        self._lock = threading.Lock()
        self._pools: dict[type, ComponentPool] = {t: ComponentPool() for t in COMPONENT_TYPES}

    def create(self) -> Entity:
        """Create an entity, reusing the most recently freed id if any."""
        with self._lock:
            if self._free:
                entity_id = self._free.pop()
                if entity_id % 256 == 0:
                    LogSystem.instance().info("Recycled ID {}", entity_id)
            else:
                entity_id = self._next_id
                self._next_id += 1
        return Entity(self, entity_id)

    def destroy(self, entity_id: int) -> None:
        """Remove every component of the entity and free its id."""
        with self._lock:
            for pool in self._pools.values():
                pool.remove(entity_id)
            self._free.append(entity_id)

    def pool(self, component_type: type) -> ComponentPool:
        try:
            return self._pools[component_type]
        except KeyError:
            raise TypeError(f"unsupported component type {component_type!r}") from None

    def add(self, entity_id: int, component: Any) -> Any:
        """Attach ``component``; an existing component of that type is kept and returned."""
        return self.pool(type(component)).emplace(entity_id, component)

    def remove(self, component_type: type, entity_id: int) -> None:
        self.pool(component_type).remove(entity_id)

    def has(self, component_type: type, entity_id: int) -> bool:
        return entity_id in self.pool(component_type)

    def get(self, component_type: type, entity_id: int) -> Any:
        return self.pool(component_type).get(entity_id)

    def view(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield component tuples for entities holding every given type.

        Entities are visited in the storage order of the first type's pool.
        """
        if not args:
            raise TypeError("view needs at least one component type")
        pools = [self.pool(component_type) for component_type in args]
        return self._iter_view(pools)

    @staticmethod
    def _iter_view(pools: list[ComponentPool]) -> Iterator[tuple[Any, ...]]:
        for entity_id in pools[0].entities():
            if all(entity_id in pool for pool in pools):
                yield tuple(pool.get(entity_id) for pool in pools)

    def active(self) -> int:
        """Number of entities created and not destroyed."""
        with self._lock:
            return self._next_id - 1 - len(self._free)


class System(ABC):
    """Base class for logic that runs over a registry every frame."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the system by ``dt`` seconds."""