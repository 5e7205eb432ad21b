"""Core of a 2D tile-based game engine: events, states, input, ECS, tile maps, pathfinding and saves."""

__version__ = "1.0.0"