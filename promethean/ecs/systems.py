"""Systems updating behaviour and grid navigation components."""

from __future__ import annotations

import math
from typing import Optional

from promethean.ecs.components import BehaviorComponent, BehaviorState, NavComponent, Position
from promethean.ecs.registry import Registry, System
from promethean.pathfinding import Grid, find_path

_ARRIVAL_DISTANCE = 0.1


class BehaviorSystem(System):
    """Alternates entities between idling and seeking their target."""

    def update(self, dt: float) -> None:
        for behavior, position in self.registry.view(BehaviorComponent, Position):
            if behavior.state is BehaviorState.IDLE:
                behavior.timer += dt
                if behavior.timer >= behavior.idle_duration:
                    behavior.timer = 0.0
                    behavior.state = BehaviorState.SEEK
            elif behavior.state is BehaviorState.SEEK:
                dx = behavior.target[0] - position.x
                dy = behavior.target[1] - position.y
                distance = math.hypot(dx, dy)
                if distance < _ARRIVAL_DISTANCE:
                    behavior.state = BehaviorState.IDLE
                    behavior.timer = 0.0
                elif distance > 0.0:
                    step = behavior.speed * dt / distance
                    position.x += dx * step
                    position.y += dy * step


class PathfindingSystem(System):
    """Moves navigating entities one grid cell per update along an A* path."""

    def __init__(self, registry: Registry, grid: Optional[Grid] = None) -> None:
        super().__init__(registry)
        self.grid = grid

    def update(self, dt: float) -> None:
        if self.grid is None:
            return
        for (nav,) in self.registry.view(NavComponent):
            if nav.position == nav.destination:
                continue
            if not nav.path or nav.current >= len(nav.path):
                nav.path = find_path(self.grid, nav.position, nav.destination)
                nav.current = 1 if nav.path else 0
            if nav.path and nav.current < len(nav.path):
                nav.position = nav.path[nav.current]
                nav.current += 1