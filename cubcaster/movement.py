"""Player movement from keys and mouse, and wall collision."""

from __future__ import annotations

import math
from collections.abc import Collection
from enum import Enum

from .cubmap import CubMap
from .geometry import CELL_PX, PI, PLAYER_SIZE, DPoint, Player, rescale

TURN_STEP = PI / 36


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


def next_point(current: DPoint, angle: float, key: Key) -> DPoint:
    """Return where one step for key moves a point facing angle."""
    if key is Key.W:
        return DPoint(current.x + math.cos(angle), current.y - math.sin(angle))
    if key is Key.S:
        return DPoint(current.x - math.cos(angle), current.y + math.sin(angle))
    if key is Key.A:
        side = angle + PI / 2
        return DPoint(current.x + math.cos(side), current.y - math.sin(side))
    if key is Key.D:
        side = angle + 3 * PI / 2
        return DPoint(current.x + math.cos(side), current.y - math.sin(side))
    return DPoint(current.x, current.y)


def apply_keys(player: Player, pressed: Collection[Key]) -> bool:
    """Move and turn the player for the pressed keys.

    Returns True if escape is pressed, in which case nothing else is applied.
    Each movement key steps from the same starting point; the last of W, S,
    A, D that is pressed wins.
    """
    start = DPoint(player.current.x, player.current.y)
    player.prev = DPoint(start.x, start.y)
    if Key.ESCAPE in pressed:
        return True
    for key in (Key.W, Key.S, Key.A, Key.D):
        if key in pressed:
            player.current = next_point(start, player.angle, key)
    if Key.LEFT in pressed:
        player.angle = rescale(player.angle + TURN_STEP)
    if Key.RIGHT in pressed:
        player.angle = rescale(player.angle - TURN_STEP)
    return False


def apply_mouse_motion(player: Player, last_x: int, mouse_x: int) -> None:
    """Turn the player by one step against the horizontal mouse motion."""
    if last_x < mouse_x:
        player.angle = rescale(player.angle - TURN_STEP)
    if last_x > mouse_x:
        player.angle = rescale(player.angle + TURN_STEP)


def is_valid_pos(cub_map: CubMap, x: float, y: float) -> bool:
    """True if the pixel (x, y) lies inside the map and not in a wall."""
    x, y = int(x), int(y)
    if x < 0 or x >= cub_map.width or y < 0 or y >= cub_map.height:
        return False
    return not cub_map.is_wall(y // CELL_PX, x // CELL_PX)


def is_collision(cub_map: CubMap, x: float, y: float) -> bool:
    """True if any corner of the player square at (x, y) is blocked."""
    x, y = int(x), int(y)
    corners = (
        (x, y),
        (x + PLAYER_SIZE, y),
        (x, y + PLAYER_SIZE),
        (x + PLAYER_SIZE, y + PLAYER_SIZE),
    )
    return not all(is_valid_pos(cub_map, cx, cy) for cx, cy in corners)


def _correct_x(player: Player, x: int) -> None:
    col = int(x / CELL_PX)
    if player.prev.x > x:
        player.current.x = float((col + 1) * CELL_PX)
    elif player.prev.x < x:
        player.current.x = float((col + 1) * CELL_PX - 1 - PLAYER_SIZE)


def _correct_y(player: Player, y: int) -> None:
    row = int(y / CELL_PX)
    if player.prev.y > player.current.y:
        player.current.y = float((row + 1) * CELL_PX)
    elif player.prev.y < player.current.y:
        player.current.y = float((row + 1) * CELL_PX - 1 - PLAYER_SIZE)


def resolve_collision(player: Player, cub_map: CubMap) -> None:
    """Push the player back out of any wall it has moved into."""
    if is_collision(cub_map, player.current.x, player.prev.y):
        _correct_x(player, int(player.current.x))
    if is_collision(cub_map, player.prev.x, player.current.y):
        _correct_y(player, int(player.current.y))
    if is_collision(cub_map, player.current.x, player.current.y):
        _correct_x(player, int(player.current.x))
        _correct_y(player, int(player.current.y))