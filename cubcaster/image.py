"""RGBA pixel buffers and colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_BPP = 4


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def to_int(self) -> int:
        """Pack the colour into a 0xRRGGBBAA integer."""
        return (
            (self.red & 0xFF) << 24
            | (self.green & 0xFF) << 16
            | (self.blue & 0xFF) << 8
            | (self.alpha & 0xFF)
        )


ColorLike = Union[int, Color]


def _as_int(color: ColorLike) -> int:
    if isinstance(color, Color):
        return color.to_int()
    return color & 0xFFFFFFFF


class Image:
    """A width x height buffer of RGBA pixels, four bytes each."""

    __slots__ = ("width", "height", "pixels")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int, pixels: bytes | bytearray | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        size = width * height * _BPP
        if pixels is None:
            buffer = bytearray(size)
        else:
            buffer = bytearray(pixels)
            if len(buffer) != size:
                raise ValueError(f"pixel buffer holds {len(buffer)} bytes, expected {size}")
        self.width = width
        self.height = height
        self.pixels = buffer

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width, self.height, self.pixels) == (other.width, other.height, other.pixels)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"out of bounds [x={x}, y={y}] [w={self.width}, h={self.height}]"
            )
        return (y * self.width + x) * _BPP

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) as a 0xRRGGBBAA integer."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + _BPP], "big")

    def set_pixel(self, x: int, y: int, color: ColorLike) -> None:
        """Write one pixel."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + _BPP] = _as_int(color).to_bytes(_BPP, "big")

    def copy_from(
        self,
        src: "Image",
        width: int,
        height: int,
        src_x: int = 0,
        src_y: int = 0,
        dst_x: int = 0,
        dst_y: int = 0,
    ) -> None:
        """Copy a width x height block of src at (src_x, src_y) to (dst_x, dst_y).

        Raises IndexError, leaving this image untouched, if either block
        does not fit inside its image.
        """
        if width <= 0 or height <= 0:
            return
        src._offset(src_x, src_y)
        src._offset(src_x + width - 1, src_y + height - 1)
        self._offset(dst_x, dst_y)
        self._offset(dst_x + width - 1, dst_y + height - 1)
        span = width * _BPP
        for row in range(height):
            s = src._offset(src_x, src_y + row)
            d = self._offset(dst_x, dst_y + row)
            self.pixels[d:d + span] = src.pixels[s:s + span]

    def clear_region(self, x: int, y: int, width: int, height: int) -> None:
        """Zero a rectangle of pixels; parts outside the image are ignored."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + width, self.width), min(y + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        blank = bytes((x1 - x0) * _BPP)
        for row in range(y0, y1):
            start = (row * self.width + x0) * _BPP
            self.pixels[start:start + len(blank)] = blank

    def clear(self) -> None:
        """Zero every pixel."""
        self.pixels[:] = bytes(len(self.pixels))

    def fill(self, color: ColorLike) -> None:
        """Set every pixel to one colour."""
        self.pixels[:] = _as_int(color).to_bytes(_BPP, "big") * (self.width * self.height)

    def _pixel_bytes(self, x: int, y: int) -> bytes:
        offset = (y * self.width + x) * _BPP
        return bytes(self.pixels[offset:offset + _BPP])

    def resized(self, width: int, height: int) -> "Image":
        """Return a copy scaled to width x height by nearest-neighbour sampling."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        columns = [x * self.width // width for x in range(width)]
        rows = (
            b"".join(self._pixel_bytes(sx, y * self.height // height) for sx in columns)
            for y in range(height)
        )
        return Image(width, height, b"".join(rows))

    def crop(self, x: int, y: int, width: int, height: int) -> "Image":
        """Return the width x height block at (x, y) as a new image."""
        result = Image(width, height)
        result.copy_from(self, width, height, x, y)
        return result