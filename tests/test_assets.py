import pytest
from PIL import Image as PILImage

from cubcaster.assets import (
    HEIGHT,
    M_HEIGHT,
    M_PX,
    M_WIDTH,
    MINIMAP_BACKGROUND,
    RAY_TEXTURE_SIZE,
    AssetManager,
    load_png,
    load_ray_texture,
    render_map_image,
)
from cubcaster.cubmap import CubMap
from cubcaster.elements import ElementType
from cubcaster.errors import AssetError
from cubcaster.geometry import PLAYER_SIZE
from cubcaster.image import Color, Image
from cubcaster.raycast import WIDTH


def _write_png(path, size, color):
    path.parent.mkdir(parents=True, exist_ok=True)
    PILImage.new("RGBA", size, color).save(path)
    return path


def test_load_png_keeps_pixels(tmp_path):
    path = _write_png(tmp_path / "a.png", (3, 2), (10, 20, 30, 40))
    image = load_png(path)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(2, 1) == Color(10, 20, 30, 40).to_int()


def test_load_png_resizes(tmp_path):
    path = _write_png(tmp_path / "a.png", (8, 8), (1, 2, 3, 255))
    image = load_png(path, (5, 3))
    assert (image.width, image.height) == (5, 3)
    assert image.get_pixel(4, 2) == Color(1, 2, 3).to_int()


def test_load_png_missing_file(tmp_path):
    missing = tmp_path / "missing.png"
    with pytest.raises(AssetError) as info:
        load_png(missing)
    assert info.value.detail == str(missing)


def test_load_png_rejects_garbage_and_none(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    with pytest.raises(AssetError):
        load_png(bad)
    with pytest.raises(AssetError):
        load_png(None)


def test_load_ray_texture_is_small_square(tmp_path):
    path = _write_png(tmp_path / "r.png", (16, 16), (9, 9, 9, 255))
    image = load_ray_texture(path)
    assert (image.width, image.height) == (RAY_TEXTURE_SIZE, RAY_TEXTURE_SIZE)


def test_render_map_image_draws_walls_only():
    cub_map = CubMap(grid=["111", "101", "111"])
    wall = Image(M_PX, M_PX)
    wall.fill(Color(200, 0, 0))
    image = render_map_image(cub_map, wall)
    assert (image.width, image.height) == (cub_map.width, cub_map.height)
    assert image.get_pixel(0, 0) == Color(200, 0, 0).to_int()
    assert image.get_pixel(2 * M_PX + 5, 2 * M_PX + 5) == Color(200, 0, 0).to_int()
    assert image.get_pixel(M_PX + 5, M_PX + 5) == 0


def test_render_map_image_rejects_small_tile():
    cub_map = CubMap(grid=["1"])
    with pytest.raises(AssetError):
        render_map_image(cub_map, Image(4, 4))


def _scene(tmp_path):
    assets = tmp_path / "assets"
    _write_png(assets / "sprites" / "weapon.png", (12, 8), (5, 5, 5, 255))
    _write_png(assets / "textures" / "mini_wall.png", (16, 16), (100, 100, 100, 255))
    _write_png(assets / "textures" / "mini_space.png", (16, 16), (0, 0, 0, 255))
    _write_png(assets / "textures" / "mini_player.png", (16, 16), (0, 255, 0, 255))
    paths = {
        name: str(_write_png(tmp_path / f"{name}.png", (8, 8), (i, i, i, 255)))
        for i, name in enumerate(("no", "so", "we", "ea"))
    }
    cub_map = CubMap(
        no_path=paths["no"],
        so_path=paths["so"],
        we_path=paths["we"],
        ea_path=paths["ea"],
        f_color=Color(10, 20, 30).to_int(),
        c_color=Color(40, 50, 60).to_int(),
        grid=["111", "101", "111"],
    )
    return cub_map, assets


def test_build_prepares_every_image(tmp_path):
    cub_map, assets = _scene(tmp_path)
    am = AssetManager.build(cub_map, assets)
    assert set(am.walls) == {ElementType.NO, ElementType.SO, ElementType.WE, ElementType.EA}
    assert am.walls[ElementType.NO] == load_png(cub_map.no_path)
    assert am.ceiling.get_pixel(0, 0) == cub_map.c_color
    assert am.floor.get_pixel(WIDTH - 1, HEIGHT // 2 - 1) == cub_map.f_color
    assert am.m_map_bg.get_pixel(0, 0) == MINIMAP_BACKGROUND.to_int()
    assert (am.m_map.width, am.m_map.height) == (M_WIDTH, M_HEIGHT)
    assert (am.scene.width, am.scene.height) == (WIDTH, HEIGHT)
    assert (am.m_player.width, am.m_player.height) == (PLAYER_SIZE, PLAYER_SIZE)
    assert (am.player.width, am.player.height) == (am.sprite_weapon.frame_w, am.sprite_weapon.frame_h)
    assert am.sprite_weapon.frame_count == len(am.sprite_weapon.frames)
    assert am.map == render_map_image(cub_map, am.m_wall)


def test_build_missing_texture_raises(tmp_path):
    cub_map, assets = _scene(tmp_path)
    cub_map.so_path = str(tmp_path / "gone.png")
    with pytest.raises(AssetError):
        AssetManager.build(cub_map, assets)