"""Drawing the tile layers of a tile map."""

from __future__ import annotations

from promethean.assets import AssetManager
from promethean.renderer import BatchRenderer, QuadUV
from promethean.tilemap import TileMap


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def render_tile_map(renderer: BatchRenderer, assets: AssetManager, tile_map: TileMap) -> None:
    """Draw every visible layer of ``tile_map`` as one quad per non-empty tile."""
    for layer in tile_map.layers:
        if not layer.visible:
            continue
        tileset = tile_map.tilesets[layer.tileset_id]
        texture = assets.load_texture(tileset.image_path) if tileset.image_path else None
        if texture is None:
            texture = AssetManager.missing_texture()
        renderer.bind_texture(texture.id)

        width, height = layer.size
        columns = tileset.columns
        step = 1.0 / columns if columns else 0.0
        for y in range(height):
            for x in range(width):
                gid = layer.gids[y * width + x]
                if gid == 0:
                    continue
                tv, tu = _trunc_divmod(gid - tileset.first_gid, columns)
                u = tu / columns
                v = tv / columns
                uv = QuadUV(
                    top_left=(u, v),
                    top_right=(u + step, v),
                    bottom_right=(u + step, v + step),
                    bottom_left=(u, v + step),
                )
                renderer.draw_quad(
                    (x * tile_map.tile_w, y * tile_map.tile_h),
                    (tile_map.tile_w, tile_map.tile_h),
                    uv,
                )