"""Keyboard and mouse handling, and opening doors next to the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from .model import Config, Door
from .player import Keys

_LEFT_BUTTON = 1
_MIN_CLICK_Y = 2


class Key(IntEnum):
    """Key codes understood by the game."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53
    ENTER = 76
    LEFT = 123
    RIGHT = 124


_HELD = {
    Key.W: "w",
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def _next_to_player(config: Config, door: Door) -> bool:
    px = int(config.player.pos.x)
    py = int(config.player.pos.y)
    dx, dy = int(door.x), int(door.y)
    candidates = (
        (px, py + 1, py + 1 <= config.height - 1),
        (px, py - 1, py - 1 >= 0),
        (px + 1, py, px + 1 <= config.width - 1),
        (px - 1, py, px - 1 >= 0),
    )
    return any(
        in_bounds and _cell(config.grid, cx, cy) == "4" and (cx, cy) == (dx, dy)
        for cx, cy, in_bounds in candidates
    )


def door_in_front(config: Config) -> Optional[Door]:
    """Return the first door in a cell next to the player, if any."""
    return next((d for d in config.doors if _next_to_player(config, d)), None)


def toggle_door(config: Config) -> Optional[Door]:
    """Open or close the adjacent door once it has finished moving."""
    door = door_in_front(config)
    if door is not None:
        if not door.is_open and door.offset == 0.0:
            door.is_open = True
        elif door.is_open and door.offset == 1.0:
            door.is_open = False
    return door


@dataclass
class InputState:
    """Held keys and whether the mouse is captured for looking around."""

    keys: Keys = field(default_factory=Keys)
    mouse_lock: bool = False

    def key_press(self, key: int) -> Optional[Key]:
        """Record a key press.

        Returns ``Key.ENTER`` or ``Key.ESCAPE`` when the game has to act on
        the press (toggle a door or quit), otherwise None.
        """
        if key in _HELD:
            setattr(self.keys, _HELD[Key(key)], True)
            return None
        if key == Key.ENTER:
            return Key.ENTER
        if key == Key.ESCAPE:
            return Key.ESCAPE
        return None

    def key_release(self, key: int) -> None:
        """Record a key release."""
        if key in _HELD:
            setattr(self.keys, _HELD[Key(key)], False)
        elif key == Key.ENTER:
            self.keys.enter = False

    def mouse_move(self, x: int, center_x: int) -> int:
        """Return the rotation step for a mouse move: -1 left, 1 right, 0 none."""
        if not self.mouse_lock or x == center_x:
            return 0
        return 1 if x > center_x else -1

    def mouse_click(self, button: int, y: int) -> bool:
        """Toggle the mouse lock on a left click; return the new lock state."""
        if button == _LEFT_BUTTON and y >= _MIN_CLICK_Y:
            self.mouse_lock = not self.mouse_lock
        return self.mouse_lock