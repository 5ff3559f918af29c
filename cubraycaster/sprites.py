"""Projection of item sprites onto the screen, hidden behind nearer walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .framebuffer import Screen, Texture
from .model import ITEM_KIND, Config, Player, Sprite

_SMALL_KIND = 2
_SMALL_SCALE = 4
_COLOR_BITS = 0x00FFFFFF


@dataclass(frozen=True)
class Projection:
    """Where a sprite lands on the screen and how large it is drawn.

    ``start_x``/``end_x`` and ``start_y``/``end_y`` are half-open ranges.
    """

    transform_x: float
    transform_y: float
    screen_x: int
    height: int
    width: int
    start_x: int
    end_x: int
    start_y: int
    end_y: int


def project_sprite(player: Player, sprite: Sprite, width: int, height: int) -> Projection:
    """Transform the sprite into camera space and compute its screen rectangle."""
    dx = sprite.x - player.pos.x
    dy = sprite.y - player.pos.y
    det = player.plane.x * player.dir.y - player.dir.x * player.plane.y
    if det == 0:
        raise ValueError("camera direction and plane are parallel")
    inv_det = 1.0 / det
    transform_x = inv_det * (player.dir.y * dx - player.dir.x * dy)
    transform_y = inv_det * (-player.plane.y * dx + player.plane.x * dy)
    half_w = width // 2
    half_h = height // 2
    if transform_y == 0:
        return Projection(transform_x, transform_y, half_w, 0, 0, 0, 0, 0, 0)
    ratio = transform_x / transform_y
    size_f = abs(height / transform_y)
    if sprite.kind == _SMALL_KIND:
        size_f = abs(height / transform_y / _SMALL_SCALE)
    screen_f = half_w * (1 + ratio)
    if not (math.isfinite(screen_f) and math.isfinite(size_f)):
        return Projection(transform_x, transform_y, half_w, 0, 0, 0, 0, 0, 0)
    screen_x = int(screen_f)
    size = int(size_f)
    return Projection(
        transform_x=transform_x,
        transform_y=transform_y,
        screen_x=screen_x,
        height=size,
        width=size,
        start_x=max(0, -(size // 2) + screen_x),
        end_x=min(width - 1, size // 2 + screen_x),
        start_y=max(0, -(size // 2) + half_h),
        end_y=min(height - 1, size // 2 + half_h),
    )


def render_sprite(
    screen: Screen,
    player: Player,
    sprite: Sprite,
    texture: Texture,
    z_buffer: Sequence[float],
) -> Projection:
    """Draw one sprite column by column, skipping columns hidden by walls.

    Texture pixels whose colour bits are all zero are treated as transparent.
    """
    proj = project_sprite(player, sprite, screen.width, screen.height)
    if proj.transform_y <= 0:
        return proj
    tex_w = texture.width
    tex_h = texture.height
    left = -(proj.width // 2) + proj.screen_x
    for stripe in range(proj.start_x, proj.end_x):
        if not (0 <= stripe < screen.width and proj.transform_y < z_buffer[stripe]):
            continue
        tex_x = min(max((stripe - left) * tex_w // proj.width, 0), tex_w - 1)
        for y in range(proj.start_y, proj.end_y):
            offset = y - proj.start_y
            tex_y = min(max(offset * tex_h // proj.height, 0), tex_h - 1)
            color = texture.pixel(tex_x, tex_y)
            if color & _COLOR_BITS:
                screen.put_pixel(stripe, y, color)
    return proj


def render_sprites(
    screen: Screen,
    config: Config,
    frames: Sequence[Texture],
    z_buffer: Sequence[float],
) -> list[Projection]:
    """Draw every active item using its current animation frame."""
    return [
        render_sprite(screen, config.player, sprite, frames[sprite.anim_index], z_buffer)
        for sprite in config.sprites
        if sprite.active and sprite.kind == ITEM_KIND
    ]