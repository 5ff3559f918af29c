"""Player movement, collision with walls and doors, and camera rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .model import Config, Player

MOVE_SPEED = 0.1
ROT_SPEED = 0.05


@dataclass
class Keys:
    """Which movement and rotation keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    enter: bool = False


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def rotate(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    d, p = player.dir, player.plane
    d.x, d.y = d.x * cos_a - d.y * sin_a, d.x * sin_a + d.y * cos_a
    p.x, p.y = p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a


def collect_item(config: Config, x: int, y: int) -> None:
    """Deactivate every item lying in cell (x, y)."""
    for sprite in config.sprites:
        if int(sprite.x) == x and int(sprite.y) == y:
            sprite.active = False


def _try_enter(config: Config, cell_x: int, cell_y: int) -> bool:
    """Return True if the player may step into the cell, collecting items on the way."""
    cell = _cell(config.grid, cell_x, cell_y)
    if cell == "1":
        return False
    if cell == "4":
        door = config.find_door(cell_x, cell_y)
        return door is not None and door.is_open
    if cell == "3":
        collect_item(config, cell_x, cell_y)
    return True


def move_x(config: Config, next_x: float) -> None:
    """Move the player horizontally to ``next_x`` unless blocked."""
    pos = config.player.pos
    if _try_enter(config, int(next_x), int(pos.y)):
        pos.x = next_x


def move_y(config: Config, next_y: float) -> None:
    """Move the player vertically to ``next_y`` unless blocked."""
    pos = config.player.pos
    if _try_enter(config, int(pos.x), int(next_y)):
        pos.y = next_y


def move_by(config: Config, dx: float, dy: float) -> None:
    """Move the player by (dx, dy), checking each axis separately."""
    pos = config.player.pos
    next_x = pos.x + dx
    next_y = pos.y + dy
    move_x(config, next_x)
    move_y(config, next_y)


def update_player(
    config: Config,
    keys: Keys,
    move_speed: float = MOVE_SPEED,
    rot_speed: float = ROT_SPEED,
) -> None:
    """Apply one frame of movement and rotation for the held keys."""
    player = config.player
    if keys.w:
        move_by(config, player.dir.x * move_speed, player.dir.y * move_speed)
    if keys.s:
        move_by(config, -player.dir.x * move_speed, -player.dir.y * move_speed)
    if keys.a:
        move_by(config, -player.plane.x * move_speed, -player.plane.y * move_speed)
    if keys.d:
        move_by(config, player.plane.x * move_speed, player.plane.y * move_speed)
    if keys.left:
        rotate(player, -rot_speed)
    if keys.right:
        rotate(player, rot_speed)