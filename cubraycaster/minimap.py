"""The round mini-map drawn in the bottom-left corner of the screen."""

from __future__ import annotations

from .framebuffer import CIRCLE_COLOR, SQUARE_SIZE, Screen
from .model import Config

MINIMAP_RADIUS = 80
MINIMAP_SCALE = 10
_MARGIN = 20
_BORDER = 10
_DIR_LENGTH = 15

WALL_COLOR = 0x000000
ITEM_COLOR = 0xFFFF00
DOOR_COLOR = 0xAAAAAA
PLAYER_COLOR = 0x0000FF
DIRECTION_COLOR = 0xFF0000


def draw_minimap(screen: Screen, config: Config) -> None:
    """Draw walls, active items, closed doors and the player around the player.

    Raises ``CubError`` if the mini-map does not fit on the screen.
    """
    center_x = MINIMAP_RADIUS + _MARGIN
    center_y = screen.height - MINIMAP_RADIUS - _MARGIN
    screen.draw_filled_circle(center_x, center_y, MINIMAP_RADIUS + _BORDER, CIRCLE_COLOR)
    pos = config.player.pos
    limit = MINIMAP_RADIUS * MINIMAP_RADIUS
    for y, row in enumerate(config.grid):
        for x, cell in enumerate(row):
            dx = (x + 0.5 - pos.x) * MINIMAP_SCALE
            dy = (y + 0.5 - pos.y) * MINIMAP_SCALE
            if dx * dx + dy * dy > limit:
                continue
            sx = center_x + int(dx)
            sy = center_y + int(dy)
            if cell == "1":
                screen.draw_square(sx, sy, WALL_COLOR)
            elif cell == "3":
                item = config.find_item(x, y)
                if item is not None and item.active:
                    screen.draw_square(sx, sy, ITEM_COLOR)
            elif cell == "4":
                door = config.find_door(x, y)
                if door is not None and not door.is_open:
                    screen.draw_square(sx, sy, DOOR_COLOR)
    screen.draw_square(center_x, center_y, PLAYER_COLOR)
    offset = SQUARE_SIZE // 2
    direction = config.player.dir
    screen.draw_line(
        center_x + offset,
        center_y + offset,
        center_x + int(direction.x * _DIR_LENGTH) + offset,
        center_y + int(direction.y * _DIR_LENGTH) + offset,
        DIRECTION_COLOR,
    )