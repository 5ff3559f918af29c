"""Validation of the map grid: enclosing walls, the player and leaks."""

from __future__ import annotations

from collections import deque
from typing import MutableSequence, Sequence

from .model import Config, CubError
from .textutil import is_space, trim

_PLAYER_CHARS = "NSEW"
_OPEN_CHARS = frozenset("0NSEW")
_ROW_TRIM = " \t\n\r"
_FILLED = "F"
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def check_walls(grid: Sequence[str]) -> None:
    """Check the outer rows hold only walls and inner rows start and end with one."""
    last = len(grid) - 1
    for index, row in enumerate(grid):
        if index in (0, last):
            if any(ch != "1" and not is_space(ch) for ch in row):
                raise CubError("Map error: walls required!")
        else:
            trimmed = trim(row, _ROW_TRIM)
            if not trimmed or trimmed[0] != "1" or trimmed[-1] != "1":
                raise CubError("Map error: Invalid row!")


def normalize(grid: Sequence[str], width: int) -> list[list[str]]:
    """Return the grid as mutable rows of characters, space-padded to ``width``."""
    return [list(row.ljust(width)) for row in grid]


def _has_player(row: Sequence[str]) -> bool:
    return any(ch in _PLAYER_CHARS for ch in row)


def find_player(config: Config, rows: Sequence[Sequence[str]]) -> None:
    """Locate the single player start and set its position and orientation."""
    found = False
    for y, row in enumerate(rows):
        if not _has_player(row):
            continue
        if found:
            raise CubError("Map error: single player required!")
        found = True
        marks = [(x, ch) for x, ch in enumerate(row) if ch in _PLAYER_CHARS]
        config.player.pos.x = marks[0][0] + 0.5
        config.player.pos.y = y + 0.5
        config.player.face(marks[-1][1])
    if not found:
        raise CubError("Error: Player not found")


def flood_fill_space(rows: Sequence[MutableSequence[str]], x: int, y: int) -> bool:
    """Fill the region reachable from (x, y) without crossing walls.

    Every reached cell is marked ``F``. Returns False as soon as the region
    touches a floor cell or the player start, which means the map leaks.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    queue = deque([(x, y)])
    while queue:
        px, py = queue.popleft()
        if not (0 <= px < width and 0 <= py < height):
            continue
        cell = rows[py][px]
        if cell in ("1", _FILLED):
            continue
        if cell in _OPEN_CHARS:
            return False
        rows[py][px] = _FILLED
        queue.extend((px + dx, py + dy) for dx, dy in _NEIGHBOURS)
    return True


def detect_leaks(rows: Sequence[MutableSequence[str]]) -> None:
    """Raise ``CubError`` if any blank area of the map touches an open cell."""
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == " " and not flood_fill_space(rows, x, y):
                raise CubError("Map error: leak detected!")


def validate_map(config: Config) -> None:
    """Check the walls, locate the player and look for leaks in ``config.grid``."""
    check_walls(config.grid)
    config.width = max((len(row) for row in config.grid), default=0)
    rows = normalize(config.grid, config.width)
    find_player(config, rows)
    detect_leaks(rows)