import io
from pathlib import Path

import pytest

from cubcaster.elements import PNG_SIGNATURE
from cubcaster.errors import MapError
from cubcaster.geometry import PI
from cubcaster.reader import load_map, read_map, validate_map_path
from cubcaster.textutil import parse_rgb

HEADER = (
    "NO north.png\n"
    "SO south.png\n"
    "WE west.png\n"
    "EA east.png\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
)
GRID_ROWS = ["111111", "100101", "1000N1", "111111"]
GRID = "".join(row + "\n" for row in GRID_ROWS)


@pytest.fixture
def textures(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("north", "south", "west", "east"):
        (tmp_path / f"{name}.png").write_bytes(PNG_SIGNATURE + bytes(8))
    return tmp_path


def test_read_map_full(textures):
    cub_map, player = read_map(io.StringIO(HEADER + "\n" + GRID))
    assert cub_map.no_path == "north.png"
    assert cub_map.ea_path == "east.png"
    assert cub_map.f_color == parse_rgb(["220", "100", "0"])
    assert cub_map.c_color == parse_rgb(["225", "30", "0"])
    assert cub_map.max_rows == len(GRID_ROWS)
    assert cub_map.max_cols == len(GRID_ROWS[0])
    assert player.angle == PI / 2
    assert cub_map.grid[2] == GRID_ROWS[2].replace("N", "0")


def test_blank_lines_before_grid_are_skipped(textures):
    cub_map, _ = read_map(io.StringIO(HEADER + "\n\n\n" + GRID))
    assert cub_map.max_rows == len(GRID_ROWS)
    assert cub_map.grid[0] == GRID_ROWS[0]


def test_elements_in_any_order(textures):
    lines = HEADER.splitlines(keepends=True)
    shuffled = "".join(reversed(lines))
    cub_map, _ = read_map(io.StringIO(shuffled + GRID))
    assert cub_map.so_path == "south.png"
    assert cub_map.we_path == "west.png"


def test_final_line_without_newline_is_dropped(textures):
    with pytest.raises(MapError, match="Map is unclosed by walls."):
        read_map(io.StringIO(HEADER + GRID.rstrip("\n")))


def test_blank_line_inside_grid(textures):
    text = HEADER + GRID_ROWS[0] + "\n\n" + "".join(r + "\n" for r in GRID_ROWS[1:])
    with pytest.raises(MapError, match="Invalid elements or map."):
        read_map(io.StringIO(text))


def test_blank_line_after_grid(textures):
    with pytest.raises(MapError, match="Invalid elements or map."):
        read_map(io.StringIO(HEADER + GRID + "\n"))


def test_grid_before_elements_complete(textures):
    with pytest.raises(MapError, match="Invalid element format."):
        read_map(io.StringIO("NO north.png\n111\n"))


def test_header_only(textures):
    with pytest.raises(MapError, match="Invalid map."):
        read_map(io.StringIO(HEADER))


def test_load_map_from_file(textures):
    (textures / "level.cub").write_text(HEADER + GRID)
    cub_map, player = load_map("level.cub")
    assert cub_map.grid[1] == GRID_ROWS[1]
    assert player.angle == PI / 2


def test_load_map_missing_file(textures):
    with pytest.raises(MapError) as info:
        load_map("missing.cub")
    assert info.value.message == "missing.cub"


def test_load_map_wrong_extension(textures):
    with pytest.raises(MapError) as info:
        load_map("level.txt")
    assert info.value.detail == "Not a .cub file"


def test_validate_map_path_ok():
    assert validate_map_path("maps/level.cub") == Path("maps/level.cub")


@pytest.mark.parametrize("path", ["", "  ", "\n"])
def test_validate_map_path_empty(path):
    with pytest.raises(MapError) as info:
        validate_map_path(path)
    assert info.value.detail == "Is an empty path"


@pytest.mark.parametrize("path", [".cub", "level.cu", "level.cub.txt"])
def test_validate_map_path_extension(path):
    with pytest.raises(MapError) as info:
        validate_map_path(path)
    assert info.value.detail == "Not a .cub file"