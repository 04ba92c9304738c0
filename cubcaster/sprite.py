"""Sprite sheets cut into animation frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import AssetError
from .image import Image

FRAME_TIME = 0.099


class SpriteDirection(Enum):
    """The axis along which a sheet's frames follow each other."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class SpriteOptions:
    """How a sheet is divided: its grid, a band offset and the frame axis."""

    rows: int
    cols: int
    offset: int = 0
    direction: SpriteDirection = SpriteDirection.VERTICAL


@dataclass
class Sprite:
    """An animation: its frames and the position in the animation."""

    frames: list[Image]
    frame_w: int
    frame_h: int
    options: SpriteOptions
    offset_px: int = 0
    idx: int = 0
    elapsed_time: float = 0.0
    _unused: None = field(default=None, repr=False, compare=False)

    @property
    def rows(self) -> int:
        """Rows of the sheet grid."""
        return self.options.rows

    @property
    def cols(self) -> int:
        """Columns of the sheet grid."""
        return self.options.cols

    @property
    def frame_count(self) -> int:
        """Number of frames along the sheet's frame axis."""
        if self.options.direction is SpriteDirection.HORIZONTAL:
            return self.options.cols
        return self.options.rows

    @classmethod
    def from_sheet(cls, sheet: Image, options: SpriteOptions) -> "Sprite":
        """Cut a sheet into frames.

        Frames run along one axis; the band they are taken from is shifted
        across the other axis by offset frame sizes along the frame axis.
        """
        if options.rows <= 0 or options.cols <= 0:
            raise AssetError("load_sprite: invalid sprite grid", f"{options.rows}x{options.cols}")
        frame_w = sheet.width // options.cols
        frame_h = sheet.height // options.rows
        if frame_w <= 0 or frame_h <= 0:
            raise AssetError("load_sprite: sheet too small", f"{sheet.width}x{sheet.height}")
        horizontal = options.direction is SpriteDirection.HORIZONTAL
        if horizontal:
            offset_px = frame_w * options.offset
            count = options.cols
        else:
            offset_px = frame_h * options.offset
            count = options.rows
        frames = []
        for i in range(count):
            if horizontal:
                x, y = frame_w * i, offset_px
            else:
                x, y = offset_px, frame_h * i
            try:
                frames.append(sheet.crop(x, y, frame_w, frame_h))
            except IndexError as exc:
                raise AssetError("load_sprite: frame outside the sheet", str(exc)) from exc
        return cls(frames=frames, frame_w=frame_w, frame_h=frame_h,
                   options=options, offset_px=offset_px)

    def advance(self, elapsed: float) -> bool:
        """Move the animation on by elapsed seconds.

        Returns True when the last frame has been passed, in which case the
        animation is back at its first frame.
        """
        self.elapsed_time += elapsed
        if self.elapsed_time >= FRAME_TIME:
            self.idx += 1
            self.elapsed_time -= FRAME_TIME
        if self.idx >= self.frame_count:
            self.idx = 0
            return True
        return False

    def reset(self) -> None:
        """Go back to the first frame."""
        self.idx = 0

    def current_frame(self) -> Image:
        """The frame to show now."""
        return self.frames[self.idx]