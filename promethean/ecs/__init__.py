"""Entity-component system: components, the registry and the behaviour and pathfinding systems."""