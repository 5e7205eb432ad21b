"""Tile maps and a loader for orthogonal TMX files with CSV layer data."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from promethean.log import LogSystem

PathLike = Union[str, "os.PathLike[str]"]
Point = tuple[int, int]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TileMapError(Exception):
    """Raised when a tile map cannot be loaded."""


@dataclass
class TilesetInfo:
    first_gid: int = 0
    image_path: str = ""
    columns: int = 0
    tile_w: int = 0
    tile_h: int = 0


@dataclass
class TileMapLayer:
    name: str = ""
    visible: bool = True
    size: Point = (0, 0)
    gids: list[int] = field(default_factory=list)
    tileset_id: int = -1


@dataclass
class MapObject:
    name: str = ""
    pos: Point = (0, 0)
    size: Point = (0, 0)


@dataclass
class ObjectGroup:
    name: str = ""
    objects: list[MapObject] = field(default_factory=list)


@dataclass
class TileMap:
    map_size: Point = (0, 0)
    tile_w: int = 0
    tile_h: int = 0
    tilesets: list[TilesetInfo] = field(default_factory=list)
    layers: list[TileMapLayer] = field(default_factory=list)
    object_groups: list[ObjectGroup] = field(default_factory=list)


def _int_attr(element: ET.Element, name: str, default: int = 0) -> int:
    """Read the leading integer of an attribute, or ``default`` if there is none."""
    value = element.get(name)
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else default


def _parse_tileset(element: ET.Element, base: Path) -> TilesetInfo:
    info = TilesetInfo(
        first_gid=_int_attr(element, "firstgid"),
        columns=_int_attr(element, "columns"),
        tile_w=_int_attr(element, "tilewidth"),
        tile_h=_int_attr(element, "tileheight"),
    )
    image = element.find("image")
    if image is not None:
        source = image.get("source")
        if source is not None:
            info.image_path = str(base / source)
    return info


def _assign_tileset(layer: TileMapLayer, tilesets: list[TilesetInfo]) -> bool:
    for gid in layer.gids:
        if not gid:
            continue
        for index in range(len(tilesets) - 1, -1, -1):
            if gid >= tilesets[index].first_gid:
                layer.tileset_id = index
                return True
    return False


def _parse_csv(text: Optional[str], path: Path) -> list[int]:
    if text is None or not text.strip():
        return []
    try:
        return [int(item) for item in text.split(",")]
    except ValueError as exc:
        raise TileMapError(f"bad CSV tile data in {path}") from exc


def _load_external_tileset(element: ET.Element, source: str, directory: Path) -> Optional[TilesetInfo]:
    tsx_path = directory / source
    try:
        root = ET.parse(tsx_path).getroot()
    except (OSError, ET.ParseError):
        return None
    if root.tag != "tileset":
        return None
    info = _parse_tileset(root, tsx_path.parent)
    info.first_gid = _int_attr(element, "firstgid", info.first_gid)
    return info


def load_tile_map(path: PathLike) -> TileMap:
    """Load an orthogonal TMX map; raise TileMapError if it cannot be read."""
    path = Path(path)
    log = LogSystem.instance()
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        log.error("Failed to load TMX {}", path)
        raise TileMapError(f"failed to load TMX {path}") from exc
    if root.tag != "map":
        raise TileMapError(f"{path} has no map element")
    orientation = root.get("orientation")
    if orientation is not None and orientation != "orthogonal":
        log.error("Unsupported orientation {}", orientation)
        raise TileMapError(f"unsupported orientation {orientation}")

    directory = path.parent
    tile_map = TileMap(
        map_size=(_int_attr(root, "width"), _int_attr(root, "height")),
        tile_w=_int_attr(root, "tilewidth"),
        tile_h=_int_attr(root, "tileheight"),
    )

    for element in root.findall("tileset"):
        source = element.get("source")
        if source is not None:
            info = _load_external_tileset(element, source, directory)
            if info is not None:
                tile_map.tilesets.append(info)
        else:
            tile_map.tilesets.append(_parse_tileset(element, directory))

    for element in root.findall("layer"):
        layer = TileMapLayer(
            name=element.get("name", ""),
            visible=element.get("visible") != "0",
            size=(_int_attr(element, "width"), _int_attr(element, "height")),
        )
        data = element.find("data")
        if data is None or data.get("encoding") != "csv":
            continue
        layer.gids = _parse_csv(data.text, path)
        if not _assign_tileset(layer, tile_map.tilesets):
            layer.tileset_id = 0
        tile_map.layers.append(layer)

    for element in root.findall("objectgroup"):
        group = ObjectGroup(name=element.get("name", ""))
        for obj in element.findall("object"):
            group.objects.append(
                MapObject(
                    name=obj.get("name", ""),
                    pos=(_int_attr(obj, "x"), _int_attr(obj, "y")),
                    size=(_int_attr(obj, "width"), _int_attr(obj, "height")),
                )
            )
        tile_map.object_groups.append(group)

    return tile_map