"""The map grid, its textures and colours, and grid validation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import MapError
from .geometry import CELL_PX, PI, PLAYER_SIZE, DPoint, Player

_SPAWN_ANGLES = {"N": PI / 2, "S": 3 * PI / 2, "W": PI, "E": 2 * PI}
_ALLOWED = frozenset(" 01NSEW")
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class CubMap:
    """Wall textures, floor and ceiling colours and the grid of a scene."""

    no_path: str | None = None
    so_path: str | None = None
    we_path: str | None = None
    ea_path: str | None = None
    f_color: int | None = None
    c_color: int | None = None
    grid: list[str] = field(default_factory=list)

    @property
    def max_rows(self) -> int:
        """Number of grid rows."""
        return len(self.grid)

    @property
    def max_cols(self) -> int:
        """Length of the longest grid row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def width(self) -> int:
        """Width of the map in pixels."""
        return self.max_cols * CELL_PX

    @property
    def height(self) -> int:
        """Height of the map in pixels."""
        return self.max_rows * CELL_PX

    def elements_done(self) -> bool:
        """True once all four textures and both colours are set."""
        return all(
            value is not None
            for value in (
                self.no_path,
                self.so_path,
                self.we_path,
                self.ea_path,
                self.f_color,
                self.c_color,
            )
        )

    def add_row(self, line: str) -> None:
        """Append one grid row."""
        self.grid.append(line)

    def is_wall(self, row: int, col: int) -> bool:
        """True if the cell at (row, col) exists and holds a wall."""
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col] == "1"
        return False


def padded_grid(cub_map: CubMap, offset: int) -> list[str]:
    """Return the grid as equal-width rows, surrounded by offset cells of space."""
    width = cub_map.max_cols + 2 * offset
    margin = " " * offset
    border = [" " * width] * offset
    body = [(margin + line).ljust(width) for line in cub_map.grid]
    return border + body + border


def _out_of_bounds(cells: list[list[str]], row: int, col: int) -> bool:
    return row < 0 or col < 0 or row >= len(cells) or col >= len(cells[row])


def _inside_escapes(cells: list[list[str]], row: int, col: int) -> bool:
    """Flood the walkable region from (row, col); True if it reaches the void."""
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if _out_of_bounds(cells, r, c) or cells[r][c] == " ":
            return True
        if cells[r][c] == "1":
            continue
        cells[r][c] = "1"
        stack.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)
    return False


def _outside_touches_floor(cells: list[list[str]]) -> bool:
    """Flood the void from the corner; True if it reaches a floor cell."""
    stack = [(0, 0)]
    while stack:
        r, c = stack.pop()
        if _out_of_bounds(cells, r, c) or cells[r][c] == "1":
            continue
        if cells[r][c] == "0":
            return True
        cells[r][c] = "1"
        stack.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)
    return False


def is_enclosed(cub_map: CubMap, start: DPoint) -> bool:
    """Check that walls close the map; on success pad the grid to equal widths."""
    cells = [list(row) for row in padded_grid(cub_map, 1)]
    row = int(start.y / CELL_PX) + 1
    col = int(start.x / CELL_PX) + 1
    if _inside_escapes(cells, row, col) or _outside_touches_floor(cells):
        return False
    cub_map.grid = padded_grid(cub_map, 0)
    return True


def validate_grid(cub_map: CubMap) -> Player:
    """Validate the grid, take the player out of it and return the player."""
    if not cub_map.elements_done() or not cub_map.grid:
        raise MapError("Invalid map.")
    offset = (CELL_PX - PLAYER_SIZE) // 2
    player: Player | None = None
    for row, line in enumerate(cub_map.grid):
        for col, char in enumerate(line):
            if char not in _ALLOWED:
                raise MapError("Map contains invalid characters")
            if char not in _SPAWN_ANGLES:
                continue
            if player is not None:
                raise MapError("More than 1 player.")
            player = Player(
                prev=DPoint(float(col * CELL_PX), float(row * CELL_PX)),
                current=DPoint(float(col * CELL_PX + offset), float(row * CELL_PX + offset)),
                angle=_SPAWN_ANGLES[char],
            )
            cub_map.grid[row] = line[:col] + "0" + line[col + 1:]
    if player is None:
        raise MapError("Player not found.")
    if not is_enclosed(cub_map, player.current):
        raise MapError("Map is unclosed by walls.")
    return player