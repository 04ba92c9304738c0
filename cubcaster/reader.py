"""Reading a whole scene description file."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .cubmap import CubMap, validate_grid
from .elements import read_element
from .errors import MapError
from .geometry import Player
from .textutil import is_all_whitespace, iter_lines


def validate_map_path(path: str | os.PathLike[str]) -> Path:
    """Check that path names a .cub file and return it as a Path."""
    text = os.fspath(path)
    if not text or is_all_whitespace(text):
        raise MapError(text, "Is an empty path")
    if len(text) < 5 or not text.endswith(".cub"):
        raise MapError(text, "Not a .cub file")
    return Path(text)


def _process_line(cub_map: CubMap, line: str) -> None:
    if not cub_map.elements_done():
        read_element(cub_map, line)
        return
    if not line:
        if cub_map.grid:
            raise MapError("Invalid elements or map.")
        return
    cub_map.add_row(line)


def read_map(stream: Iterable[str]) -> tuple[CubMap, Player]:
    """Read and validate a scene from lines of text; return the map and player."""
    cub_map = CubMap()
    for line in iter_lines(stream):
        _process_line(cub_map, line)
    player = validate_grid(cub_map)
    return cub_map, player


def load_map(path: str | os.PathLike[str]) -> tuple[CubMap, Player]:
    """Open, read and validate the scene file at path."""
    map_path = validate_map_path(path)
    try:
        handle = open(map_path, encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise MapError(os.fspath(path), exc.strerror or str(exc)) from exc
    with handle:
        return read_map(handle)