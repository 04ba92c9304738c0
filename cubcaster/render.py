"""Drawing the minimap, the weapon and the 3D scene."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .assets import HEIGHT, M_OFFSET, AssetManager
from .geometry import CELL_PX, FOV, DPoint, Player
from .image import Image
from .raycast import WIDTH, Ray
from .sprite import Sprite

_BPP = 4
CAMERA_PLANE_DIST = (WIDTH // 2) / math.tan(FOV / 2)


def draw_map_player(map_image: Image, marker: Image, prev: DPoint, current: DPoint) -> None:
    """Erase the player marker at prev and draw it at current on the map image."""
    map_image.clear_region(int(prev.x), int(prev.y), marker.width, marker.height)
    x, y = int(current.x), int(current.y)
    width = min(marker.width, map_image.width - x)
    height = min(marker.height, map_image.height - y)
    if x < 0 or y < 0 or width <= 0 or height <= 0:
        return
    map_image.copy_from(marker, width, height, 0, 0, x, y)


def _window_axis(centre: float, extent: int, span: int) -> tuple[int, int]:
    start = max(int(centre - span // 2), 0)
    length = span
    if start + span > extent:
        start = max(extent - span, 0)
        if start == 0:
            length = extent
    return start, length


def minimap_window(
    position: DPoint,
    map_width: int,
    map_height: int,
    size: tuple[int, int] = (200, 200),
) -> tuple[int, int, int, int]:
    """Return (x, y, width, height) of the map area the minimap shows.

    The window is centred on position and kept inside the map; a map
    smaller than the window is shown whole.
    """
    x, width = _window_axis(position.x, map_width, size[0])
    y, height = _window_axis(position.y, map_height, size[1])
    return x, y, width, height


def draw_minimap(
    minimap: Image, map_image: Image, player: Player, map_width: int, map_height: int
) -> None:
    """Copy the part of the map around the player into the minimap."""
    x, y, width, height = minimap_window(
        player.current, map_width, map_height, (minimap.width, minimap.height)
    )
    minimap.copy_from(map_image, width, height, x, y)


def draw_weapon(target: Image, sprite: Sprite) -> None:
    """Copy the sprite's current frame into target."""
    target.copy_from(sprite.current_frame(), target.width, target.height)


def wall_height(distance: float) -> float:
    """On-screen height in pixels of a wall cell seen at distance."""
    if distance == 0:
        return math.inf
    return CELL_PX / distance * CAMERA_PLANE_DIST


def _draw_column(scene: Image, column: int, texture: Image, im_position: int,
                 height: float, scale: float) -> None:
    screen_h = scene.height
    half = screen_h // 2
    offset = 0.0
    if height >= screen_h:
        offset = screen_h - height
        height = screen_h - 1
    start_y = int(half - height / 2)
    texture_y = (start_y - half + height / 2) * scale * offset
    if not math.isfinite(texture_y):
        texture_y = 0.0
    last_row = texture.height - 1
    col = min(max(im_position, 0), texture.width - 1)
    pixels = scene.pixels
    tex_pixels = texture.pixels
    for y in range(start_y, start_y + math.ceil(height)):
        row = int(texture_y)
        texture_y += scale
        if not 0 <= row < last_row:
            row = last_row
        if not 0 <= y < screen_h:
            continue
        src = (row * texture.width + col) * _BPP
        dst = (y * scene.width + column) * _BPP
        pixels[dst:dst + _BPP] = tex_pixels[src:src + _BPP]


def draw_scene(scene: Image, rays: Sequence[Ray]) -> None:
    """Clear the scene and draw one textured wall column per ray."""
    if len(rays) > scene.width:
        raise ValueError(f"{len(rays)} rays for a scene {scene.width} pixels wide")
    if any(ray.image is None for ray in rays):
        raise ValueError("ray has no wall texture")
    scene.clear()
    for column, ray in enumerate(rays):
        height = wall_height(ray.distance)
        if height <= 0:
            continue
        texture = ray.image
        assert texture is not None
        _draw_column(scene, column, texture, ray.im_position, height, texture.height / height)


def compose_frame(assets: AssetManager) -> list[tuple[Image, int, int]]:
    """Return the images of one frame with their window positions, bottom first."""
    weapon = assets.player
    return [
        (assets.ceiling, 0, 0),
        (assets.floor, 0, HEIGHT // 2),
        (assets.scene, 0, 0),
        (assets.m_map_bg, M_OFFSET, M_OFFSET),
        (assets.m_map, M_OFFSET, M_OFFSET),
        (weapon, WIDTH // 2 - weapon.width // 2, HEIGHT - weapon.height + 10),
    ]