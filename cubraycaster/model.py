"""Game state: the parsed scene, the player, doors and item sprites."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

ITEM_KIND = 0

_PLANE = 0.66

_ORIENTATIONS = {
    "N": ((0.0, -1.0), (_PLANE, 0.0)),
    "S": ((0.0, 1.0), (-_PLANE, 0.0)),
    "E": ((1.0, 0.0), (0.0, _PLANE)),
    "W": ((-1.0, 0.0), (0.0, -_PLANE)),
}


class CubError(Exception):
    """Raised when a scene file or the game state is invalid."""


@dataclass
class Vector:
    """A 2-D vector in map units."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)

    def face(self, direction: str) -> None:
        """Orient the player towards ``N``, ``S``, ``E`` or ``W``."""
        try:
            (dx, dy), (px, py) = _ORIENTATIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        self.dir = Vector(dx, dy)
        self.plane = Vector(px, py)


@dataclass
class Door:
    """A sliding door centred in its map cell."""

    x: float
    y: float
    is_open: bool = False
    offset: float = 0.0
    anim_timer: float = 0.0
    state: int = 0
    side_hit: int = 0


@dataclass
class Sprite:
    """A collectable item centred in its map cell."""

    x: float
    y: float
    kind: int = ITEM_KIND
    active: bool = True
    anim_index: int = 0
    anim_timer: float = 0.0
    distance: float = 0.0


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def is_door_enclosed(grid: Sequence[str], x: int, y: int) -> bool:
    """Return True if the door cell sits between two walls on one axis."""
    horizontal = _cell(grid, x - 1, y) == "1" and _cell(grid, x + 1, y) == "1"
    vertical = _cell(grid, x, y + 1) == "1" and _cell(grid, x, y - 1) == "1"
    return horizontal or vertical


@dataclass
class Config:
    """Everything read from a scene file, plus runtime object lists."""

    no: Optional[str] = None
    so: Optional[str] = None
    ea: Optional[str] = None
    we: Optional[str] = None
    floor_color: int = 0
    ceil_color: int = 0
    floor_found: bool = False
    ceil_found: bool = False
    path_seen: bool = False
    color_seen: bool = False
    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    player: Player = field(default_factory=Player)
    sprites: list[Sprite] = field(default_factory=list)
    doors: list[Door] = field(default_factory=list)

    def find_door(self, x: int, y: int) -> Optional[Door]:
        """Return the door occupying cell (x, y), if any."""
        return next(
            (d for d in self.doors if int(d.x) == x and int(d.y) == y), None
        )

    def find_item(self, x: int, y: int) -> Optional[Sprite]:
        """Return the item occupying cell (x, y), if any."""
        return next(
            (s for s in self.sprites if int(s.x) == x and int(s.y) == y), None
        )

    def is_item_active(self, x: int, y: int) -> bool:
        """Return True if the first item in cell (x, y) is still active."""
        item = self.find_item(x, y)
        return item is not None and item.active

    def add_sprite(self, x: int, y: int, kind: int = ITEM_KIND) -> Sprite:
        """Place a new item in the centre of cell (x, y)."""
        sprite = Sprite(x + 0.5, y + 0.5, kind)
        self.sprites.append(sprite)
        return sprite

    def add_door(self, x: int, y: int) -> Door:
        """Place a new closed door in cell (x, y); it must sit between walls."""
        if not is_door_enclosed(self.grid, x, y):
            raise CubError("Error: door is not surrounded by walls")
        door = Door(x + 0.5, y + 0.5)
        self.doors.append(door)
        return door