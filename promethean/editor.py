"""A minimal world editor working on a single tile layer."""

from __future__ import annotations

import json
import os
from typing import Union

from promethean.tilemap import TileMap, TileMapLayer, TilesetInfo

PathLike = Union[str, "os.PathLike[str]"]

_DEFAULT_TILE_SIZE = 32


class WorldEditor:
    """Creates, edits and stores a one-layer tile map."""

    def __init__(self) -> None:
        self._map = TileMap()

    @property
    def map(self) -> TileMap:
        """The map being edited."""
        return self._map

    def new_map(self, width: int, height: int, tile_w: int, tile_h: int) -> None:
        """Replace the map with a blank one of the given size."""
        self._map.map_size = (width, height)
        self._map.tile_w = tile_w
        self._map.tile_h = tile_h
        self._map.tilesets = [TilesetInfo(first_gid=1, columns=1, tile_w=tile_w, tile_h=tile_h)]
        self._map.layers = [
            TileMapLayer(
                name="Layer1",
                visible=True,
                size=(width, height),
                gids=[0] * max(width * height, 0),
                tileset_id=0,
            )
        ]

    def set_tile(self, x: int, y: int, gid: int) -> None:
        """Set a tile of the first layer; coordinates outside it are ignored."""
        if not self._map.layers:
            return
        layer = self._map.layers[0]
        width, height = layer.size
        if 0 <= x < width and 0 <= y < height:
            layer.gids[y * width + x] = gid

    def remove_tile(self, x: int, y: int) -> None:
        self.set_tile(x, y, 0)

    def save_json(self, path: PathLike) -> None:
        """Write the map to ``path`` as JSON; raise ValueError if there is no map."""
        if not self._map.layers:
            raise ValueError("no map to save")
        data = {
            "width": self._map.map_size[0],
            "height": self._map.map_size[1],
            "tileW": self._map.tile_w,
            "tileH": self._map.tile_h,
            "gids": list(self._map.layers[0].gids),
        }
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=4)

    def load_json(self, path: PathLike) -> None:
        """Load a map saved by ``save_json``; raise ValueError without tile data.

        Tile data whose length does not match the map size is replaced by zeros.
        """
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict) or "gids" not in data:
            raise ValueError(f"{os.fspath(path)} has no tile data")
        width = int(data.get("width", 0))
        height = int(data.get("height", 0))
        tile_w = int(data.get("tileW", _DEFAULT_TILE_SIZE))
        tile_h = int(data.get("tileH", _DEFAULT_TILE_SIZE))
        gids = [int(gid) for gid in data["gids"]]
        self.new_map(width, height, tile_w, tile_h)
        if len(gids) == width * height:
            self._map.layers[0].gids = gids