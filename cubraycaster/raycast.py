"""Casting one ray per screen column and drawing the textured walls and doors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, MutableSequence, Optional, Sequence

from .framebuffer import Screen, Texture, apply_shadow
from .model import Config, Door, Vector

_TINY_DIR = 1e-6
_MIN_DIST = 0.0001


class Face(Enum):
    """Which wall texture a ray shows, named by the face it looks at."""

    NORTH = "NO"
    SOUTH = "SO"
    WEST = "WE"
    EAST = "EA"


@dataclass
class Hit:
    """Where a ray stopped and how tall the column it produces is."""

    map_x: int
    map_y: int
    side: int
    ray_dir: Vector
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    door: Optional[Door] = None


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def _delta(component: float) -> float:
    return math.inf if abs(component) < _TINY_DIR else abs(1.0 / component)


def cast_ray(config: Config, x: int, width: int, height: int) -> Hit:
    """Cast the ray for screen column ``x`` and return what it hit."""
    player = config.player
    pos = player.pos
    camera_x = 2 * x / width - 1
    ray_x = player.dir.x + player.plane.x * camera_x
    ray_y = player.dir.y + player.plane.y * camera_x
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)
    map_x = int(pos.x)
    map_y = int(pos.y)
    if ray_x < 0:
        step_x, side_x = -1, (pos.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1 - pos.x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (pos.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1 - pos.y) * delta_y

    grid = config.grid
    grid_h = len(grid)
    grid_w = max((len(row) for row in grid), default=0)
    side = 0
    door: Optional[Door] = None
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_x < grid_w and 0 <= map_y < grid_h):
            break
        cell = _cell(grid, map_x, map_y)
        if cell == "1":
            break
        if cell == "4":
            found = config.find_door(map_x, map_y)
            if found is not None:
                found.side_hit = side
                if found.offset >= 1.0:
                    continue
            door = found
            break

    perp = side_x - delta_x if side == 0 else side_y - delta_y
    if perp < _MIN_DIST:
        perp = _MIN_DIST
    line_height = int(height / perp)
    return Hit(
        map_x=map_x,
        map_y=map_y,
        side=side,
        ray_dir=Vector(ray_x, ray_y),
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=-(line_height // 2) + height // 2,
        draw_end=line_height // 2 + height // 2,
        door=door,
    )


def texture_for_hit(
    hit: Hit,
    wall_textures: Mapping[Face, Texture],
    door_textures: Sequence[Texture],
) -> Texture:
    """Pick the wall texture for the face hit, or the door texture for its state."""
    if hit.door is not None:
        return door_textures[1 if hit.door.is_open else 0]
    if hit.side == 0:
        face = Face.EAST if hit.ray_dir.x > 0 else Face.WEST
    else:
        face = Face.NORTH if hit.ray_dir.y < 0 else Face.SOUTH
    return wall_textures[face]


def draw_column(
    screen: Screen, hit: Hit, texture: Texture, x: int, config: Config
) -> None:
    """Draw the textured, shaded column for ``hit`` at screen column ``x``."""
    start = max(hit.draw_start, 0)
    end = min(hit.draw_end, screen.height - 1)
    pos = config.player.pos
    if hit.side == 0:
        wall_x = pos.y + hit.perp_wall_dist * hit.ray_dir.y
    else:
        wall_x = pos.x + hit.perp_wall_dist * hit.ray_dir.x
    if hit.door is not None:
        wall_x -= hit.door.offset
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture.width)
    if (hit.side == 0 and hit.ray_dir.x > 0) or (hit.side == 1 and hit.ray_dir.y < 0):
        tex_x = texture.width - tex_x - 1
    step = texture.height / max(hit.line_height, 1)
    tex_pos = (start - screen.height // 2 + hit.line_height // 2) * step
    for y in range(start, end + 1):
        tex_y = min(max(int(tex_pos), 0), texture.height - 1)
        tex_pos += step
        color = apply_shadow(texture.pixel(tex_x, tex_y), hit.perp_wall_dist, hit.side)
        screen.put_pixel(x, y, color)


def raycast(
    screen: Screen,
    config: Config,
    wall_textures: Mapping[Face, Texture],
    door_textures: Sequence[Texture],
    z_buffer: Optional[MutableSequence[float]] = None,
) -> MutableSequence[float]:
    """Render every column and record each column's wall distance in ``z_buffer``."""
    if z_buffer is None:
        z_buffer = [0.0] * screen.width
    elif len(z_buffer) < screen.width:
        raise ValueError("z_buffer is shorter than the screen width")
    for x in range(screen.width):
        hit = cast_ray(config, x, screen.width, screen.height)
        z_buffer[x] = hit.perp_wall_dist
        texture = texture_for_hit(hit, wall_textures, door_textures)
        draw_column(screen, hit, texture, x, config)
    return z_buffer