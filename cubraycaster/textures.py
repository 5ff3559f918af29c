"""Loading wall, door and item images into textures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .framebuffer import Texture
from .model import Config, CubError
from .raycast import Face

ITEM_FRAMES = 12
DOOR_IMAGE = Path("sprites") / "door.xpm"

PathLike = Union[str, "os.PathLike[str]"]


def load_texture(path: Optional[PathLike]) -> Texture:
    """Read an image file into a texture of 0xRRGGBB pixels."""
    if path is None:
        raise CubError("Map error: element path missing")
    try:
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except (OSError, ValueError) as exc:
        raise CubError(f"Error: cannot load texture {os.fspath(path)}") from exc
    pixels = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return Texture(pixels)


def load_wall_textures(config: Config) -> dict[Face, Texture]:
    """Load the four wall textures named in the scene."""
    return {
        Face.NORTH: load_texture(config.no),
        Face.SOUTH: load_texture(config.so),
        Face.WEST: load_texture(config.we),
        Face.EAST: load_texture(config.ea),
    }


def load_door_textures(base: PathLike = ".") -> list[Texture]:
    """Load the closed and open door textures from ``base``."""
    path = Path(base) / DOOR_IMAGE
    return [load_texture(path), load_texture(path)]


def _check_readable(path: Path) -> None:
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise CubError("Error occured while opening the file") from None


def load_item_frames(base: PathLike = ".") -> list[Texture]:
    """Load the item animation frames ``sprites/1.xpm`` to ``sprites/12.xpm``."""
    frames = []
    for index in range(1, ITEM_FRAMES + 1):
        path = Path(base) / "sprites" / f"{index}.xpm"
        _check_readable(path)
        frames.append(load_texture(path))
    return frames