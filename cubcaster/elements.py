"""Parsing of the texture and colour lines of a scene file."""

from __future__ import annotations

from enum import Enum

from .cubmap import CubMap
from .errors import MapError
from .textutil import count_commas, is_all_whitespace, parse_rgb

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class ElementType(Enum):
    """The identifiers that may start an element line."""

    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"
    F = "F"
    C = "C"


_FIELDS = {
    ElementType.NO: "no_path",
    ElementType.SO: "so_path",
    ElementType.WE: "we_path",
    ElementType.EA: "ea_path",
    ElementType.F: "f_color",
    ElementType.C: "c_color",
}
_COLOR_TYPES = frozenset({ElementType.F, ElementType.C})


def parse_element_type(token: str) -> ElementType:
    """Return the element type named by token."""
    try:
        return ElementType(token)
    except ValueError:
        raise MapError("Invalid element types.") from None


def validate_png(path: str) -> str:
    """Check that path names a readable PNG file and return it."""
    if not path or is_all_whitespace(path):
        raise MapError(path, "Is an empty path")
    if len(path) < 5 or not path.endswith(".png"):
        raise MapError(path, "Not a .png file")
    try:
        with open(path, "rb") as handle:
            header = handle.read(len(PNG_SIGNATURE))
    except IsADirectoryError:
        raise MapError(path, "Not a valid PNG file") from None
    except OSError as exc:
        raise MapError(path, exc.strerror or str(exc)) from exc
    if header != PNG_SIGNATURE:
        raise MapError(path, "Not a valid PNG file")
    return path


def _parse_color(text: str) -> int:
    if count_commas(text) != 2:
        raise MapError("Invalid color format.")
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3 or text.endswith(","):
        raise MapError("Invalid color format.")
    return parse_rgb(parts)


def read_element(cub_map: CubMap, line: str) -> None:
    """Read one element line into cub_map; an empty line is ignored."""
    if not line:
        return
    parts = [part for part in line.split(" ") if part]
    if len(parts) != 2:
        raise MapError("Invalid element format.")
    kind = parse_element_type(parts[0])
    value = parts[1]
    attribute = _FIELDS[kind]
    if getattr(cub_map, attribute) is not None:
        raise MapError("Elements duplicated.")
    if kind in _COLOR_TYPES:
        setattr(cub_map, attribute, _parse_color(value))
    else:
        setattr(cub_map, attribute, validate_png(value))