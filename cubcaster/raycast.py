"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .elements import ElementType
from .geometry import CELL_PX, PI, PLAYER_SIZE, Cell, DPoint, Player, rescale
from .image import Image

WIDTH = 1280

_FAR = sys.float_info.max


class HitDirection(Enum):
    """Which kind of grid line a ray crossed to reach its wall."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Ray:
    """One ray from the player to the wall it hits."""

    start: DPoint = field(default_factory=DPoint)
    end: DPoint = field(default_factory=DPoint)
    hit: Cell = field(default_factory=Cell)
    direction: DPoint = field(default_factory=DPoint)
    angle: float = 0.0
    distance: float = 0.0
    hit_direction: HitDirection = HitDirection.HORIZONTAL
    image: Image | None = None
    im_position: int = 0


def ray_angle(player_angle: float, index: int, count: int = WIDTH) -> float:
    """Angle of the ray for screen column index out of count columns."""
    fraction = index / (count - 1) if count > 1 else 0.5
    return rescale(player_angle + (PI / 3) * (0.5 - fraction))


def init_ray(player: Player, index: int, count: int = WIDTH) -> Ray:
    """Create the ray for one column, starting at the player's centre."""
    half = PLAYER_SIZE // 2
    angle = ray_angle(player.angle, index, count)
    start = DPoint(player.current.x + half, player.current.y + half)
    return Ray(
        start=start,
        end=DPoint(start.x, start.y),
        hit=Cell(int(start.y / CELL_PX), int(start.x / CELL_PX)),
        direction=DPoint(math.cos(angle), math.sin(angle)),
        angle=angle,
    )


def _step_length(component: float) -> float:
    return abs(CELL_PX / component) if component else math.inf


def _cell(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    raise ValueError(f"ray left the map at row {row}, column {col}")


def find_hit_point(ray: Ray, grid: Sequence[str]) -> Ray:
    """Walk the ray cell by cell until it reaches a wall; update and return it.

    A positive y direction points up the map, towards lower row numbers.
    """
    cur_x = math.fmod(ray.start.x, CELL_PX)
    cur_y = math.fmod(ray.start.y, CELL_PX)
    to_vertical = to_horizontal = _FAR
    step_col = step_row = 1
    dx, dy = ray.direction.x, ray.direction.y
    if dx > 0:
        to_vertical = abs((CELL_PX - cur_x) / dx)
    elif dx < 0:
        to_vertical = abs(cur_x / dx)
        step_col = -1
    if dy > 0:
        to_horizontal = abs(cur_y / dy)
        step_row = -1
    elif dy < 0:
        to_horizontal = abs((CELL_PX - cur_y) / dy)
    step_x = _step_length(dx)
    step_y = _step_length(dy)
    while _cell(grid, ray.hit.row, ray.hit.col) != "1":
        if to_vertical < to_horizontal:
            to_vertical += step_x
            ray.hit.col += step_col
            ray.hit_direction = HitDirection.VERTICAL
        else:
            to_horizontal += step_y
            ray.hit.row += step_row
            ray.hit_direction = HitDirection.HORIZONTAL
    return ray


def _set_vertical_end(ray: Ray) -> None:
    ray.end.x = float(ray.hit.col * CELL_PX)
    if ray.end.x < ray.start.x:
        ray.end.x += CELL_PX
    delta_x = ray.end.x - ray.start.x
    delta_y = abs(delta_x * math.tan(ray.angle))
    if ray.direction.y > 0:
        ray.end.y = ray.start.y - delta_y
    else:
        ray.end.y = ray.start.y + delta_y


def _set_horizontal_end(ray: Ray) -> None:
    ray.end.y = float(ray.hit.row * CELL_PX)
    if ray.end.y < ray.start.y:
        ray.end.y += CELL_PX
    delta_y = ray.end.y - ray.start.y
    tangent = math.tan(ray.angle)
    delta_x = abs(delta_y / tangent) if tangent else math.inf
    if ray.direction.x > 0:
        ray.end.x = ray.start.x + delta_x
    else:
        ray.end.x = ray.start.x - delta_x


def process_ray_hit(ray: Ray, walls: Mapping[ElementType, Image], player_angle: float) -> Ray:
    """Find the exact hit point, wall texture, texture column and distance."""
    if ray.hit_direction is HitDirection.VERTICAL:
        _set_vertical_end(ray)
        side = ElementType.WE if ray.end.x > ray.start.x else ElementType.EA
        along = ray.end.y
    else:
        _set_horizontal_end(ray)
        side = ElementType.SO if ray.end.y < ray.start.y else ElementType.NO
        along = ray.end.x
    ray.image = walls[side]
    ray.im_position = int(math.fmod(along, CELL_PX) * ray.image.width / CELL_PX)
    if ray.direction.x == 0:
        ray.distance = abs(ray.end.y - ray.start.y)
    else:
        ray.distance = abs((ray.end.x - ray.start.x) / ray.direction.x)
    ray.distance *= abs(math.cos(rescale(player_angle - ray.angle)))
    return ray


def cast_rays(
    player: Player,
    grid: Sequence[str],
    walls: Mapping[ElementType, Image],
    count: int = WIDTH,
) -> list[Ray]:
    """Cast count rays across the field of view, left to right."""
    rays = []
    for index in range(count):
        ray = init_ray(player, index, count)
        find_hit_point(ray, grid)
        process_ray_hit(ray, walls, player.angle)
        rays.append(ray)
    return rays