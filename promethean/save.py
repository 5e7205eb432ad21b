"""Saving and loading the components of a registry as JSON."""

from __future__ import annotations

import dataclasses
import json
import os
from typing import Any, Union

from promethean.ecs.components import (
    BehaviorComponent,
    NavComponent,
    Position,
    Renderable,
    Velocity,
)
from promethean.ecs.registry import Entity, Registry

PathLike = Union[str, "os.PathLike[str]"]

_COMPONENTS: tuple[tuple[str, type], ...] = (
    ("Position", Position),
    ("Velocity", Velocity),
    ("Renderable", Renderable),
    ("NavComponent", NavComponent),
    ("BehaviorComponent", BehaviorComponent),
)


def serialize(registry: Registry, entity: Entity) -> dict[str, Any]:
    """Return the JSON representation of one entity and its components."""
    data: dict[str, Any] = {"id": entity.id}
    for name, component_type in _COMPONENTS:
        component = registry.get(component_type, entity.id)
        if component is not None:
            data[name] = component.to_json()
    return data


def deserialize(registry: Registry, entity: Entity, data: dict[str, Any]) -> None:
    """Add or overwrite the entity's components from ``data``."""
    for name, component_type in _COMPONENTS:
        if name not in data:
            continue
        loaded = component_type.from_json(data[name])
        stored = registry.add(entity.id, loaded)
        if stored is not loaded:
            for f in dataclasses.fields(loaded):
                setattr(stored, f.name, getattr(loaded, f.name))


def save_to_file(path: PathLike, registry: Registry) -> None:
    """Write every entity that holds at least one component to ``path``."""
    ids = dict.fromkeys(
        entity_id
        for _, component_type in _COMPONENTS
        for entity_id in registry.pool(component_type).entities()
    )
    root = {"entities": [serialize(registry, Entity(registry, entity_id)) for entity_id in ids]}
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(root, fh, indent=4)


def load_from_file(path: PathLike, registry: Registry) -> list[Entity]:
    """Create one new entity per saved entry and return them in file order."""
    with open(path, encoding="utf-8") as fh:
        root = json.load(fh)
    if not isinstance(root, dict) or "entities" not in root:
        raise ValueError(f"{os.fspath(path)} has no 'entities' list")
    created = []
    for entity_data in root["entities"]:
        entity = registry.create()
        deserialize(registry, entity, entity_data)
        created.append(entity)
    return created