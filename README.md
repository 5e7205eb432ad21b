# promethean

The core of a small tile-based 2D game engine in plain Python, with no
third-party runtime dependencies. It is a library: it has no command-line
program and opens no window.

## What is in it

- **Logging** – `promethean.log.LogSystem` (shared via `LogSystem.instance()`)
  writes `{}`-formatted messages to standard output above a `LogLevel`
  threshold.
- **Events** – `promethean.events.EventBus` delivers published events
  synchronously to the handlers subscribed to the event's exact type;
  `subscribe` returns an id for `unsubscribe`. A handler that raises is logged
  and the others still run.
- **Game states** – subclass `promethean.states.State` and drive them with
  `StateStack`. `request(StateAction.PUSH / POP / REPLACE, state)` queues a
  change; `apply_requests()` applies the queue, calling `on_enter`, `on_exit`,
  `pause` and `resume`. `handle_event`, `update` and `render` go to the top
  state.
- **Input** – `promethean.input.InputManager` keeps key, mouse-button and
  pointer state from `KeyEvent`, `MouseButtonEvent`, `MouseMotionEvent` and
  `FingerEvent` values. Its `ActionMapper` maps scancodes and touch `Rect`s to
  `PlayerAction`s and publishes an `ActionStateChangedEvent` whenever an
  action's state changes.
- **Entity–component system** – `promethean.ecs.registry.Registry` creates
  `Entity` handles (recycling freed ids) and stores the components of
  `promethean.ecs.components`: `Position`, `Velocity`, `Renderable`,
  `NavComponent` and `BehaviorComponent`. `view(*types)` yields the component
  tuples of entities holding every given type. `promethean.ecs.systems` has
  `BehaviorSystem` (idle for `idle_duration`, then seek the target at `speed`)
  and `PathfindingSystem` (moves a `NavComponent` one grid cell per update
  along an A* path).
- **Saves** – `promethean.save.save_to_file(path, registry)` writes every
  entity holding a component as JSON; `load_from_file(path, registry)` creates
  a new entity per saved entry and returns them. `serialize` and `deserialize`
  work on one entity.
- **Tile maps** – `promethean.tilemap.load_tile_map(path)` reads orthogonal
  TMX maps with CSV-encoded layers, embedded or external tilesets and object
  groups, raising `TileMapError` when the file cannot be used.
  `promethean.editor.WorldEditor` creates and edits a one-layer map and stores
  it with `save_json` / `load_json`.
- **Collision and pathfinding** – `promethean.collision.CollisionLayer.build`
  turns a map's `collision` object group into axis-aligned colliders and a
  walkability grid (raising `MissingCollisionLayerError` when there is no such
  group); `query(point)` returns up to 16 colliders containing a point.
  `promethean.pathfinder.Pathfinder` searches that grid and returns a
  `PathResult` with a `PathError`; `promethean.pathfinding.find_path(grid,
  start, goal)` runs the same 4-connected A* on a list of rows where `0` is
  free.
- **Settings** – `promethean.settings.AudioSettings` holds bus volumes (0–128)
  and mute flags and saves / loads them as JSON; `SettingsManager` remembers
  the file they live in.
- **Rendering front end** – `promethean.renderer.BatchRenderer` takes quad and
  line draws in screen coordinates, counts draw calls, and publishes a
  `FrameRenderedEvent` on `flush`. `promethean.debug_overlay.DebugOverlay`
  keeps timed lines, circles and boxes and draws them through a renderer.
  `promethean.assets.AssetManager` loads textures, sounds and fonts through an
  LRU cache. `promethean.tilemap_renderer.render_tile_map` draws every visible
  layer of a map, one quad per non-empty tile.

## What it does not do

- There is no main loop, window, or graphics device. `BatchRenderer` records
  the vertices, tint, bound texture and projection each draw would submit
  (`last_vertices`, `last_tint`, `bound_texture`, `projection`, …) so that a
  real back end or a test can read them; it draws nothing itself.
- `AssetManager` reads asset files as raw bytes; it does not decode images,
  audio or fonts.
- There is no audio playback: only the audio settings are stored.
- There is no scripting or plugin loading.

## Installation

```
pip install .
```

## Example

```python
from promethean.ecs.registry import Registry
from promethean.ecs.components import Position, BehaviorComponent
from promethean.ecs.systems import BehaviorSystem
from promethean.pathfinding import find_path
from promethean.save import save_to_file

registry = Registry()
entity = registry.create()
registry.add(entity.id, Position(0.0, 0.0))
registry.add(entity.id, BehaviorComponent(target=(5.0, 0.0)))

system = BehaviorSystem(registry)
for _ in range(100):
    system.update(0.1)

grid = [
    [0, 0, 0],
    [1, 1, 0],
    [0, 0, 0],
]
print(find_path(grid, (0, 0), (0, 2)))  # points are (x, y); grid is grid[y][x]

save_to_file("world.json", registry)
```

## Running the tests

```
pip install .[test]
pytest
```