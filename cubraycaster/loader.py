"""Loading a ``.cub`` scene file into a validated ``Config``."""

from __future__ import annotations

import os
from typing import Union

from .elements import parse_elements, validate_textures
from .mapcheck import validate_map
from .model import Config, CubError

_EXTENSION = ".cub"

PathLike = Union[str, "os.PathLike[str]"]


def read_lines(path: PathLike) -> list[str]:
    """Return the lines of the file, each keeping its trailing newline."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            data = handle.read()
    except OSError:
        raise CubError("Error opening file") from None
    parts = data.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    if not lines:
        raise CubError("Error: the map is empty")
    return lines


def fill_sprites_and_doors(config: Config) -> None:
    """Create an item for every ``3`` and a door for every ``4`` in the grid."""
    for y, row in enumerate(config.grid):
        for x, cell in enumerate(row):
            if cell == "3":
                config.add_sprite(x, y)
            elif cell == "4":
                config.add_door(x, y)


def parse_cub_file(path: PathLike) -> Config:
    """Read, parse and validate a scene file."""
    name = os.fspath(path)
    if not name.endswith(_EXTENSION):
        raise CubError("File error: invalid file; need .cub extension file")
    config = Config()
    lines = read_lines(name)
    parse_elements(config, lines)
    validate_textures(config)
    validate_map(config)
    fill_sprites_and_doors(config)
    return config