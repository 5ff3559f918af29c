"""Per-frame updates of door slides and item animations, and sprite ordering."""

from __future__ import annotations

from typing import MutableSequence

from .model import ITEM_KIND, Config, Door, Sprite

DOOR_SPEED = 1.0
ANIM_SPEED = 0.1


def update_door(door: Door, dt: float) -> None:
    """Slide the door towards its open or closed position."""
    if door.is_open and door.offset < 1.0:
        door.offset += dt * DOOR_SPEED
    elif not door.is_open and door.offset > 0.0:
        door.offset -= dt * DOOR_SPEED
    door.offset = min(max(door.offset, 0.0), 1.0)


def update_doors(config: Config, dt: float) -> None:
    """Advance every door by ``dt`` seconds."""
    for door in config.doors:
        update_door(door, dt)


def update_sprite_animations(config: Config, dt: float, frames_count: int) -> None:
    """Advance the animation frame of every active item."""
    for sprite in config.sprites:
        if sprite.kind != ITEM_KIND or not sprite.active:
            continue
        sprite.anim_timer += dt
        if sprite.anim_timer > ANIM_SPEED:
            sprite.anim_timer = 0.0
            sprite.anim_index += 1
            if sprite.anim_index >= frames_count:
                sprite.anim_index = 0


def compute_sprite_distances(config: Config) -> None:
    """Store each sprite's squared distance to the player."""
    pos = config.player.pos
    for sprite in config.sprites:
        dx = sprite.x - pos.x
        dy = sprite.y - pos.y
        sprite.distance = dx * dx + dy * dy


def sort_sprites_by_distance(sprites: MutableSequence[Sprite]) -> None:
    """Sort sprites in place from farthest to nearest."""
    sprites[:] = sorted(sprites, key=lambda s: s.distance, reverse=True)