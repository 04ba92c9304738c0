"""Loading textures and preparing every image the game draws."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PIL import Image as PILImage

from .cubmap import CubMap
from .elements import ElementType
from .errors import AssetError
from .geometry import CELL_PX, PLAYER_SIZE
from .image import Color, Image
from .raycast import WIDTH
from .sprite import Sprite, SpriteDirection, SpriteOptions

HEIGHT = 960
M_OFFSET = 10
M_PX = 32
M_WIDTH = 200
M_HEIGHT = 200
RAY_TEXTURE_SIZE = 4
MINIMAP_BACKGROUND = Color(45, 52, 54, 255)

WEAPON_SPRITE = Path("sprites") / "weapon.png"
MINI_WALL = Path("textures") / "mini_wall.png"
MINI_SPACE = Path("textures") / "mini_space.png"
MINI_PLAYER = Path("textures") / "mini_player.png"
WEAPON_OPTIONS = SpriteOptions(4, 6, 1, SpriteDirection.VERTICAL)


def load_png(path: str | os.PathLike[str] | None, size: tuple[int, int] | None = None) -> Image:
    """Load a PNG as an RGBA image, scaled to size=(width, height) if given."""
    if path is None:
        raise AssetError("load_png: Invalid parameter(s)")
    try:
        with PILImage.open(path) as picture:
            rgba = picture.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise AssetError("load_png: cannot load image", os.fspath(path)) from exc
    image = Image(rgba.width, rgba.height, rgba.tobytes())
    if size is not None:
        try:
            image = image.resized(*size)
        except ValueError as exc:
            raise AssetError("load_png: cannot resize image", os.fspath(path)) from exc
    return image


def load_ray_texture(path: str | os.PathLike[str]) -> Image:
    """Load a PNG scaled down to the small square used for ray markers."""
    return load_png(path, (RAY_TEXTURE_SIZE, RAY_TEXTURE_SIZE))


def render_map_image(cub_map: CubMap, wall: Image) -> Image:
    """Draw the whole map, one wall tile per wall cell, on a blank image."""
    image = Image(cub_map.width, cub_map.height)
    for row in range(cub_map.max_rows):
        for col in range(cub_map.max_cols):
            if not cub_map.is_wall(row, col):
                continue
            try:
                image.copy_from(wall, M_PX, M_PX, 0, 0, col * M_PX, row * M_PX)
            except IndexError as exc:
                raise AssetError("render_map_image: cannot draw wall tile", str(exc)) from exc
    return image


def _filled(width: int, height: int, color: int | Color) -> Image:
    image = Image(width, height)
    image.fill(color)
    return image


@dataclass
class AssetManager:
    """Every image and sprite the game draws with."""

    sprite_weapon: Sprite
    player: Image
    walls: dict[ElementType, Image]
    ceiling: Image
    floor: Image
    map: Image
    scene: Image
    m_wall: Image
    m_space: Image
    m_player: Image
    m_map: Image
    m_map_bg: Image

    @classmethod
    def build(cls, cub_map: CubMap, asset_dir: str | os.PathLike[str] = "assets") -> "AssetManager":
        """Load the textures named by cub_map and the bundled assets in asset_dir."""
        base = Path(asset_dir)
        sprite = Sprite.from_sheet(load_png(base / WEAPON_SPRITE), WEAPON_OPTIONS)
        m_wall = load_png(base / MINI_WALL, (M_PX, M_PX))
        m_player = load_png(base / MINI_PLAYER, (PLAYER_SIZE, PLAYER_SIZE))
        m_space = load_png(base / MINI_SPACE, (M_PX, M_PX))
        if cub_map.c_color is None or cub_map.f_color is None:
            raise AssetError("build: floor or ceiling colour missing")
        walls = {
            ElementType.NO: load_png(cub_map.no_path),
            ElementType.SO: load_png(cub_map.so_path),
            ElementType.EA: load_png(cub_map.ea_path),
            ElementType.WE: load_png(cub_map.we_path),
        }
        return cls(
            sprite_weapon=sprite,
            player=Image(sprite.frame_w, sprite.frame_h),
            walls=walls,
            ceiling=_filled(WIDTH, HEIGHT // 2, cub_map.c_color),
            floor=_filled(WIDTH, HEIGHT // 2, cub_map.f_color),
            map=render_map_image(cub_map, m_wall),
            scene=Image(WIDTH, HEIGHT),
            m_wall=m_wall,
            m_space=m_space,
            m_player=m_player,
            m_map=Image(M_WIDTH, M_HEIGHT),
            m_map_bg=_filled(M_WIDTH, M_HEIGHT, MINIMAP_BACKGROUND),
        )