"""Points, grid cells, the player state and angle helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

PI = 3.14159265359
FOV = 1.04719755120
CELL_PX = 32
PLAYER_SIZE = 10


@dataclass
class DPoint:
    """A point with floating coordinates in map pixels."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Cell:
    """A grid cell addressed by row and column."""

    row: int = 0
    col: int = 0


@dataclass
class Player:
    """Position, heading and attack state of the player."""

    prev: DPoint = field(default_factory=DPoint)
    current: DPoint = field(default_factory=DPoint)
    angle: float = 0.0
    speed: float = 0.0
    is_attacking: bool = False


def rescale(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into [0, 2*PI)."""
    if angle < 0:
        return angle + 2 * PI
    if angle >= 2 * PI:
        return angle - 2 * PI
    return angle